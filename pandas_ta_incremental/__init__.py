# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

try:
    version = version("pandas_ta_incremental")
except PackageNotFoundError:
    # running from a source checkout
    version = "0.0.0"

from pandas_ta_incremental.incremental import *
from pandas_ta_incremental.incremental import __all__ as incremental_all

__all__ = ["version"] + incremental_all

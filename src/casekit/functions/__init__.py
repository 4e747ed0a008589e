"""
General-purpose string helpers used throughout the package.

This module provides functions for chaining text operations and
standardizing whitespace.
"""

from .functions import __all__
from .functions import *

__all__ = __all__

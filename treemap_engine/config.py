"""
Package defaults, overridable through environment variables.
"""

import os

# Float type used when a call does not pass ``dtype``.
DEFAULT_DTYPE = os.getenv("TREEMAP_DTYPE", "float64")

# Squarified sortedness check, off unless explicitly enabled.
CHECK_SORTED = os.getenv("TREEMAP_CHECK_SORTED", "0").lower() in ("1", "true", "yes", "on")

DEFAULT_PIVOT = os.getenv("TREEMAP_PIVOT", "by_middle")

DEFAULT_ALGORITHM = os.getenv("TREEMAP_ALGORITHM", "squarified")

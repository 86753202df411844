"""
Utility modules for transdep.

This package contains shared utility classes used throughout the transdep
codebase, currently the exception hierarchy.
"""

from transdep.utils.exceptions import (
    AssetsFileError,
    DotNetRunError,
    InvalidComparisonError,
    TransdepError,
)

__all__ = [
    "TransdepError",
    "AssetsFileError",
    "DotNetRunError",
    "InvalidComparisonError",
]

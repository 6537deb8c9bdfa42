"""
jsonchanges exception classes.

This package provides the exception types raised by jsonchanges for
consistent error handling and reporting.
"""

from jsonchanges.exceptions.core import (
    ChangeFormatError,
    JsonChangesError,
    PathNotFoundError,
)

__all__ = [
    "JsonChangesError",
    "ChangeFormatError",
    "PathNotFoundError",
]

"""ngconfig Core Exceptions Package - Exception classes for error handling.

Locating a configuration file never raises: a missing file is reported as
``None``. The exceptions here cover files that exist but cannot be used and
operations that cannot proceed.
"""

from .core import (
    ConfigurationError,
    LoadError,
    NgConfigError,
    NoHomeDirectoryError,
    ValidationError,
)

__all__ = [
    # Base exception
    "NgConfigError",

    # Domain-specific exceptions
    "LoadError",
    "ValidationError",
    "NoHomeDirectoryError",
    "ConfigurationError",
]

"""Errors raised while locating, loading and validating workspace configuration.

This module contains the exception hierarchy for ngconfig. Absence of a
configuration file is never an exception; these classes cover files that were
found but cannot be used, and operations that cannot proceed at all.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class NgConfigError(Exception):
    """Root of the ngconfig error tree.

    ``context`` collects key/value details picked up while the error travels
    up the resolution chain (the scope being read, the file being parsed) and
    is appended to ``str(error)``. ``cause`` is the parser or OS error behind
    it, if any.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "NgConfigError":
        """Attach a context entry and return the error, so it can be re-raised inline."""
        self.context[key] = value
        return self


class LoadError(NgConfigError):
    """Raised when a located configuration file cannot be loaded.

    The file exists, but it is not valid relaxed JSON, its top-level value is
    not an object, or its content does not fit the workspace model.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        reason: Optional[str] = None,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None
    ):
        """Initialize load error.

        Args:
            file_path: Path of the file that failed to load
            reason: Description of what went wrong (usually the parser message)
            cause: Underlying parser or model exception
            context: Optional additional context
            message: Replaces the default "cannot be loaded" message
        """
        if message is None:
            message = f"Workspace config file cannot be loaded: {file_path}"
            if reason:
                message = f"{message}\n{reason}"

        super().__init__(message, context, cause)
        self.file_path = Path(file_path)
        self.reason = reason


class ValidationError(NgConfigError):
    """Raised when a workspace document fails schema validation.

    ``errors`` holds one ``{"path": ..., "message": ...}`` dict per violation,
    where ``path`` is a JSON pointer into the document.
    """

    def __init__(
        self,
        errors: List[Dict[str, str]],
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            errors: Structured list of schema violations
            context: Optional additional context
        """
        lines = [f"  {e['path'] or '/'}: {e['message']}" for e in errors]
        message = "Workspace config validation failed:\n" + "\n".join(lines)

        super().__init__(message, context)
        self.errors = errors


class NoHomeDirectoryError(NgConfigError):
    """Raised when a global-scope operation needs a home directory and none exists."""

    def __init__(
        self,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize no-home-directory error.

        Args:
            operation: Operation that required the home directory
            context: Optional additional context
        """
        message = "No home directory found."
        if operation:
            message = f"Cannot {operation}: {message}"

        super().__init__(message, context)
        self.operation = operation


class ConfigurationError(NgConfigError):
    """Raised when an ngconfig setting or argument is invalid."""

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason

"""
Path Resolver Exception Hierarchy

This module defines the exceptions raised by aliaspath. Every failure here is
a configuration or programmer error (a bad alias, a missing root, a broken
manifest). Resolution misses are never exceptions: ``get``, ``glob`` and
``url`` report them as ``None`` or an empty list.

The hierarchy is designed to:
1. Separate alias problems from root problems
2. Carry the offending alias/path for diagnostics
3. Provide user-facing messages and suggestions alongside technical ones
"""

import time
from typing import Any, Dict, Optional


class PathResolverError(Exception):
    """
    Base exception class for all aliaspath errors.

    Attributes:
        error_code: Unique error code for programmatic handling
        alias: Alias involved in the failure (if applicable)
        path: Path involved in the failure (if applicable)
        timestamp: When the error occurred
        context: Additional context information
        user_message: User-friendly error message
        developer_message: Detailed technical error message
        suggestion: Suggested fix or next steps (if applicable)
    """

    def __init__(
        self,
        message: str,
        error_code: str = "PATH_RESOLVER_ERROR",
        alias: Optional[str] = None,
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        suggestion: Optional[str] = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.alias = alias
        self.path = path
        self.timestamp = time.time()
        self.context = context or {}
        self.user_message = user_message or message
        self.developer_message = message
        self.suggestion = suggestion

    @property
    def message(self) -> str:
        return self.developer_message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.developer_message,
            "user_message": self.user_message,
            "alias": self.alias,
            "path": self.path,
            "timestamp": self.timestamp,
            "context": self.context,
            "suggestion": self.suggestion,
        }

    def __str__(self) -> str:
        parts = [f"[{self.error_code}]"]
        if self.alias:
            parts.append(f"Alias:{self.alias}")
        parts.append(self.developer_message)
        return " ".join(parts)


# =============================================================================
# ALIAS ERRORS
# =============================================================================

class AliasError(PathResolverError):
    """Base class for alias registration errors."""

    def __init__(self, message: str, **kwargs):
        error_code = kwargs.pop("error_code", "ALIAS_ERROR")
        super().__init__(message, error_code=error_code, **kwargs)


class InvalidAliasError(AliasError):
    """
    Raised when an alias cannot be registered.

    Examples:
    - Fewer than two characters remain after sanitization
    - The alias is the reserved name "root"
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault(
            "suggestion",
            "Use at least two characters from [a-zA-Z0-9_.-] and avoid the reserved name 'root'.",
        )
        super().__init__(message, error_code="INVALID_ALIAS", **kwargs)


class LoopedAliasError(AliasError):
    """Raised when a registered path references its own alias."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault(
            "suggestion",
            "Register a real directory or a reference to a different alias.",
        )
        super().__init__(message, error_code="LOOPED_ALIAS", **kwargs)


class InvalidModeError(AliasError):
    """Raised when ``set`` receives a mode other than prepend, append or reset."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("suggestion", "Use Mode.PREPEND, Mode.APPEND or Mode.RESET.")
        super().__init__(message, error_code="INVALID_MODE", **kwargs)


# =============================================================================
# ROOT ERRORS
# =============================================================================

class RootError(PathResolverError):
    """Base class for root directory errors."""

    def __init__(self, message: str, **kwargs):
        error_code = kwargs.pop("error_code", "ROOT_ERROR")
        super().__init__(message, error_code=error_code, **kwargs)


class RootInvalidError(RootError):
    """Raised when ``set_root`` receives an empty value."""

    def __init__(self, message: str = "Root directory must not be empty", **kwargs):
        super().__init__(message, error_code="ROOT_INVALID", **kwargs)


class RootNotFoundError(RootError):
    """Raised when the requested root is not an existing directory."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("suggestion", "Create the directory before using it as root.")
        super().__init__(message, error_code="ROOT_NOT_FOUND", **kwargs)


class RootNotSetError(RootError):
    """Raised when a root-dependent operation runs before a root is available."""

    def __init__(self, message: str = "Please, set the root directory", **kwargs):
        super().__init__(message, error_code="ROOT_NOT_SET", **kwargs)


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(PathResolverError):
    """
    Raised when a resolver configuration or alias manifest cannot be used.

    Examples:
    - Manifest file missing or unreadable
    - Manifest is not valid YAML or not a mapping
    - Manifest values fail validation
    """

    def __init__(self, message: str, config_source: Optional[str] = None, **kwargs):
        self.config_source = config_source
        context = kwargs.pop("context", {})
        if config_source:
            context["config_source"] = config_source
        super().__init__(
            message,
            error_code="CONFIGURATION_ERROR",
            context=context,
            **kwargs,
        )

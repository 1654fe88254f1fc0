"""
Exception types for toolbelt.

Every error raised by the package derives from ToolbeltError. Where a
built-in exception already describes the failure (ValueError for bad
input, AttributeError for a missing attribute) the toolbelt error also
derives from it, so callers can catch either.

Python 3.9+ compatible.
"""

from typing import Any, Optional


class ToolbeltError(Exception):
    """Base class for all toolbelt errors."""


class InvalidTimeRepresentation(ToolbeltError, ValueError):
    """A value could not be converted to a Unix timestamp."""

    def __init__(self, value: Any, reason: Optional[str] = None):
        self.value = value
        message = f"Unable to convert {value!r} to a valid timestamp"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ReservedNameCollision(ToolbeltError, ValueError):
    """A helper method tried to shadow a native facade method."""

    def __init__(self, method_name: str):
        self.method_name = method_name
        super().__init__(
            f"Helper methods cannot override pre-defined facade methods - '{method_name}' is reserved"
        )


class DuplicateHelperCollision(ToolbeltError, ValueError):
    """A helper method name is already registered by another provider."""

    def __init__(self, method_name: str, existing_provider: Any, provider: Any):
        self.method_name = method_name
        self.existing_provider = existing_provider
        self.provider = provider
        super().__init__(
            f"Helper method '{method_name}' already defined in '{_provider_name(existing_provider)}', "
            f"duplicate in '{_provider_name(provider)}'"
        )


class UnknownHelperMethod(ToolbeltError, AttributeError):
    """No native method or registered helper matches the requested name."""

    def __init__(self, method_name: str):
        self.method_name = method_name
        super().__init__(f"Unknown helper method '{method_name}'")


class PromotedError(ToolbeltError):
    """
    A warning raised during a guarded call, promoted to an exception.

    Attributes:
        severity: Warning category (e.g. DeprecationWarning)
        message: Warning text
        filename: File the warning was issued from
        lineno: Line the warning was issued from
    """

    def __init__(self, severity: type, message: str, filename: str, lineno: int):
        self.severity = severity
        self.message = message
        self.filename = filename
        self.lineno = lineno
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"PromotedError(severity={self.severity.__name__}, message={self.message!r}, "
            f"filename={self.filename!r}, lineno={self.lineno})"
        )


def _provider_name(provider: Any) -> str:
    module = getattr(provider, "__module__", None)
    name = getattr(provider, "__qualname__", None) or getattr(provider, "__name__", None)
    if name is None:
        return str(provider)
    return f"{module}.{name}" if module else name

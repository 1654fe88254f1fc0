"""
Core toolbelt components.

This package contains the facade, the helper registry, the execution
guard and configuration management.
"""

from .exceptions import (
    ToolbeltError,
    InvalidTimeRepresentation,
    ReservedNameCollision,
    DuplicateHelperCollision,
    UnknownHelperMethod,
    PromotedError
)
from .config_manager import ConfigManager
from .registry import HelperRegistry, HelperEntry
from .guard import ExecutionGuard, promote_warnings
from .handler import ExceptionHandler
from .facade import Facade

__all__ = [
    "ToolbeltError",
    "InvalidTimeRepresentation",
    "ReservedNameCollision",
    "DuplicateHelperCollision",
    "UnknownHelperMethod",
    "PromotedError",
    "ConfigManager",
    "HelperRegistry",
    "HelperEntry",
    "ExecutionGuard",
    "promote_warnings",
    "ExceptionHandler",
    "Facade"
]

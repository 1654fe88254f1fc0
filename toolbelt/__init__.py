"""
toolbelt - Time normalization, duration parsing and a helper dispatch facade

Converts time values to Unix timestamps, parses durations such as
"3 hours 4 minutes" into seconds, and gathers static helper methods from
provider classes behind a single facade with guarded execution.

Version: 1.0.0
Python: 3.9+ compatibility
"""

__version__ = "1.0.0"
__python_requires__ = ">=3.9"

from .core.exceptions import (
    ToolbeltError,
    InvalidTimeRepresentation,
    ReservedNameCollision,
    DuplicateHelperCollision,
    UnknownHelperMethod,
    PromotedError
)
from .core.facade import Facade
from .core.config_manager import ConfigManager
from .utils.time_parser import to_timestamp, to_seconds

# Process-wide facade; call facade.init() once at startup
facade = Facade()

__all__ = [
    "Facade",
    "ConfigManager",
    "facade",
    "to_timestamp",
    "to_seconds",
    "ToolbeltError",
    "InvalidTimeRepresentation",
    "ReservedNameCollision",
    "DuplicateHelperCollision",
    "UnknownHelperMethod",
    "PromotedError"
]

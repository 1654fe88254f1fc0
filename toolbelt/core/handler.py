"""
Default exception handler for guarded calls.

Used by ExecutionGuard when no handler has been set on the facade.

Python 3.9+ compatible.
"""

import logging
from typing import Any, Optional


class ExceptionHandler:
    """Logs the exception and returns None as the call's result."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, exc: BaseException) -> Any:
        """
        Log an exception that escaped a guarded call.

        Args:
            exc: Exception raised by the guarded callable

        Returns:
            None, which becomes the result of the guarded call
        """
        self.logger.error(f"Unhandled {type(exc).__name__}: {exc}", exc_info=exc)
        return None

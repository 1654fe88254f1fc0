"""
Execution Guard for toolbelt

Runs a callable with every warning promoted to an exception, and routes
any exception that escapes the callable to a single handler whose return
value becomes the result of the call.

Warnings are promoted only if the active warning filters let them
through; ignored warnings stay ignored. The promotion policy is
installed for the duration of one call and restored afterwards, on every
exit path, so nested guarded calls unwind correctly. Because the warning
machinery is process-wide, installs and restores are serialized with a
re-entrant lock.

Python 3.9+ compatible.
"""

import logging
import threading
import warnings
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from .exceptions import PromotedError
from .handler import ExceptionHandler


ExceptionHandlerFunc = Callable[[Exception], Any]

_policy_lock = threading.RLock()


def _raise_promoted(message, category, filename, lineno, file=None, line=None):
    raise PromotedError(category, str(message), filename, lineno)


@contextmanager
def promote_warnings() -> Iterator[None]:
    """
    Promote warnings that pass the active filters to PromotedError.

    The previous warning filters and display hook are restored on exit.
    """
    with _policy_lock:
        with warnings.catch_warnings():
            warnings.showwarning = _raise_promoted
            yield


class ExecutionGuard:
    """
    Wraps calls in warning promotion and exception handling.

    Guarded calls are serialized process-wide: the policy lock is held for
    the whole callable, not only while the policy is installed and
    restored. Nested calls on the same thread re-enter the lock, but a
    guarded callable that waits for a guarded call running on another
    thread deadlocks.

    Args:
        handler: Single-argument callable receiving escaped exceptions
        default_handler: Fallback used when handler is None
    """

    def __init__(self, handler: Optional[ExceptionHandlerFunc] = None,
                 default_handler: Optional[ExceptionHandlerFunc] = None):
        self.logger = logging.getLogger(__name__)
        self.handler = handler
        self.default_handler = default_handler

    def run(self, func: Callable, *args, **kwargs) -> Any:
        """
        Execute a callable under the guard.

        Args:
            func: Callable to execute
            *args: Positional arguments for func
            **kwargs: Keyword arguments for func

        Returns:
            The callable's result, or the handler's result if an exception escaped
        """
        try:
            with promote_warnings():
                return func(*args, **kwargs)
        except Exception as e:
            self.logger.debug(f"Guarded call to {getattr(func, '__name__', func)!r} failed: {e!r}")
            return self._get_handler()(e)

    def _get_handler(self) -> ExceptionHandlerFunc:
        if self.handler is not None:
            return self.handler
        if self.default_handler is not None:
            return self.default_handler
        return ExceptionHandler().handle

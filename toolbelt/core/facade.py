"""
Facade for toolbelt

Single entry point that owns the helper registry, the debug flag and the
exception handler used by run(). Any public name the facade does not
define itself is looked up in the helper registry, so helpers registered
from providers are called directly on the facade:

    facade.init()
    facade.seconds("4.5h")          # DateTimeHelper.seconds
    facade.run(main, argv)          # guarded execution

Resolution is two-step: native facade methods always win and can never be
shadowed by a helper; everything else goes to the registry.

Python 3.9+ compatible.
"""

import importlib
import logging
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Union

from .config_manager import ConfigManager
from .exceptions import UnknownHelperMethod
from .guard import ExceptionHandlerFunc, ExecutionGuard
from .handler import ExceptionHandler
from .registry import HelperEntry, HelperRegistry
from ..utils.dumper import VarDumper
from ..utils.helpers import is_cli, setup_logging


class Facade:
    """
    Process-wide entry point for helpers and guarded execution.

    Args:
        debug: Initial debug mode
        exception_handler: Handler for exceptions escaping run()
        default_handler: Fallback handler when none is set
        dumper: Pretty-printer used by dump()
    """

    def __init__(self, debug: bool = False,
                 exception_handler: Optional[ExceptionHandlerFunc] = None,
                 default_handler: Optional[ExceptionHandlerFunc] = None,
                 dumper: Optional[VarDumper] = None):
        self._logger = logging.getLogger(__name__)
        self._debug = bool(debug)
        self._exception_handler = exception_handler
        self._default_handler = default_handler or ExceptionHandler().handle
        self._dumper = dumper
        self._registry = HelperRegistry(reserved_names=self.native_names())

    @classmethod
    def native_names(cls) -> FrozenSet[str]:
        """Names of the facade's own public methods."""
        return frozenset(name for name in dir(cls) if not name.startswith("_"))

    @staticmethod
    def is_cli() -> bool:
        """Determine if this is a command-line environment."""
        return is_cli()

    def is_debug(self) -> bool:
        """Determine if debug mode is enabled."""
        return self._debug

    def set_debug(self, debug: bool = False) -> None:
        """Enable or disable debug mode."""
        self._debug = bool(debug)

    def dump(self, value: Any) -> None:
        """Pretty-print a value if running in debug mode."""
        if not self._debug:
            return

        if self._dumper is None:
            self._dumper = VarDumper()
        self._dumper.print(value)

    def set_exception_handler(self, handler: Optional[ExceptionHandlerFunc] = None) -> None:
        """
        Set the function to call when an exception escapes run().

        Passing None restores the default handler.
        """
        if handler is not None and not callable(handler):
            raise TypeError(f"Exception handler must be callable, got {type(handler).__name__}")
        self._exception_handler = handler

    def get_exception_handler(self) -> Optional[ExceptionHandlerFunc]:
        """Return the handler set with set_exception_handler(), if any."""
        return self._exception_handler

    def init(self, config_manager: Optional[ConfigManager] = None) -> None:
        """
        Apply configuration and register the configured helper providers.

        Args:
            config_manager: Configuration source (defaults to ./config)
        """
        if config_manager is None:
            config_manager = ConfigManager()

        config = config_manager.load_config("toolbelt")

        if config.get("log_level"):
            setup_logging(config["log_level"], config.get("log_file"))

        self.set_debug(bool(config.get("debug", False)))
        self.register_helpers(config.get("providers") or [])

        self._logger.info(f"Facade initialized with {len(self._registry)} helper methods")

    def run(self, func: Callable, *args, **kwargs) -> Any:
        """
        Execute a callable with warnings promoted to exceptions.

        Any exception escaping the callable is passed to the exception
        handler and the handler's return value is returned instead.
        """
        guard = ExecutionGuard(self._exception_handler, self._default_handler)
        return guard.run(func, *args, **kwargs)

    def register_helpers(self, providers: Iterable[Union[type, str]]) -> None:
        """
        Register one or more helper provider classes.

        Args:
            providers: Classes or dotted import paths to classes

        Raises:
            ReservedNameCollision: If a helper name is reserved by the facade
            DuplicateHelperCollision: If a helper name belongs to another provider
        """
        for provider in providers:
            if isinstance(provider, str):
                provider = _import_provider(provider)
            self._registry.register_provider(provider)

    def add_helper_method(self, provider: type, method_name: str,
                          function: Optional[Callable] = None) -> None:
        """Register a single static method as a helper."""
        self._registry.register_method(provider, method_name, function)

    def resolve(self, method_name: str) -> Optional[HelperEntry]:
        """Look up a registered helper, ignoring case."""
        return self._registry.resolve(method_name)

    def list_helpers(self) -> List[Dict[str, Any]]:
        """List registered helpers."""
        return self._registry.list_helpers()

    def call(self, method_name: str, *args, **kwargs) -> Any:
        """
        Call a facade method or registered helper by name.

        Both facade methods and helpers are matched ignoring case.

        Raises:
            UnknownHelperMethod: If no method or helper matches the name
        """
        native = {name.lower(): name for name in self.native_names()}
        if method_name.lower() in native:
            return getattr(self, native[method_name.lower()])(*args, **kwargs)

        return self._lookup(method_name)(*args, **kwargs)

    def _lookup(self, method_name: str) -> HelperEntry:
        entry = self._registry.resolve(method_name)
        if entry is None:
            raise UnknownHelperMethod(method_name)
        return entry

    def __getattr__(self, name: str) -> Any:
        # Only called for names the facade does not define
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return self._lookup(name)


def _import_provider(path: str) -> type:
    """Import a provider class from a dotted path such as 'pkg.module.Class'."""
    module_name, _, class_name = path.rpartition(".")
    if not module_name:
        raise ValueError(f"Helper provider path must be 'module.Class', got '{path}'")

    module = importlib.import_module(module_name)
    try:
        return getattr(module, class_name)
    except AttributeError:
        raise ValueError(f"Helper provider '{class_name}' not found in module '{module_name}'")

"""
Helper Registry for toolbelt

Maps helper method names to the provider classes that implement them.
Lookups are case-insensitive. Registration is permanent for the life of
the registry: there is no way to remove a helper once added.

Python 3.9+ compatible.
"""

import logging
import threading
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional

from .exceptions import DuplicateHelperCollision, ReservedNameCollision
from ..helpers.base_helper import describe_provider


class HelperEntry:
    """
    A registered helper method.

    Stores the provider and the method name in its original case so
    errors and introspection report what the provider actually defines.
    """

    def __init__(self, provider: type, method_name: str, function: Callable):
        self.provider = provider
        self.method_name = method_name
        self.function = function

    def __call__(self, *args, **kwargs) -> Any:
        return self.function(*args, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.method_name,
            "provider": f"{self.provider.__module__}.{self.provider.__qualname__}",
        }

    def __repr__(self) -> str:
        return f"HelperEntry(provider={self.provider.__name__}, method_name='{self.method_name}')"


class HelperRegistry:
    """
    Registry of helper methods keyed by lower-cased name.

    A name belongs to the first provider that registers it. Registering
    it again from the same provider replaces the entry; registering it
    from a different provider is an error. Names in ``reserved_names``
    belong to the facade and can never be registered.
    """

    def __init__(self, reserved_names: Iterable[str] = ()):
        self.logger = logging.getLogger(__name__)
        self._reserved: FrozenSet[str] = frozenset(name.lower() for name in reserved_names)
        self._helpers: Dict[str, HelperEntry] = {}
        self._lock = threading.RLock()

    def register_provider(self, provider: type) -> None:
        """
        Register every method a helper provider exposes.

        Args:
            provider: Helper provider class

        Raises:
            ReservedNameCollision: If a method name is reserved by the facade
            DuplicateHelperCollision: If a method name belongs to another provider
        """
        descriptor = describe_provider(provider)

        with self._lock:
            for method_name, function in descriptor:
                self.register_method(provider, method_name, function)

        self.logger.info(f"Registered helper provider: {provider.__name__} ({len(descriptor)} methods)")

    def register_method(self, provider: type, method_name: str,
                        function: Optional[Callable] = None) -> None:
        """
        Register a single helper method.

        Args:
            provider: Class that defines the method
            method_name: Method name as defined on the provider
            function: Callable to dispatch to (defaults to provider.method_name)

        Raises:
            ReservedNameCollision: If the name is reserved by the facade
            DuplicateHelperCollision: If the name belongs to another provider
        """
        key = method_name.lower()

        if key in self._reserved:
            raise ReservedNameCollision(method_name)

        if function is None:
            function = getattr(provider, method_name)

        with self._lock:
            existing = self._helpers.get(key)
            if existing is not None and existing.provider is not provider:
                raise DuplicateHelperCollision(method_name, existing.provider, provider)

            self._helpers[key] = HelperEntry(provider, method_name, function)

        self.logger.debug(f"Registered helper method '{method_name}' from {provider.__name__}")

    def resolve(self, method_name: str) -> Optional[HelperEntry]:
        """
        Look up a helper method by name, ignoring case.

        Returns:
            Registered entry or None if not found
        """
        return self._helpers.get(method_name.lower())

    def list_helpers(self) -> List[Dict[str, Any]]:
        """List all registered helpers sorted by name."""
        with self._lock:
            entries = list(self._helpers.values())
        return sorted((entry.to_dict() for entry in entries), key=lambda x: x["name"].lower())

    def __contains__(self, method_name: str) -> bool:
        return self.resolve(method_name) is not None

    def __len__(self) -> int:
        return len(self._helpers)

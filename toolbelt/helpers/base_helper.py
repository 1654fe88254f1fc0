"""
Base Helper Class for toolbelt

Helper providers are classes that group static utility methods. Every
public static method of a registered provider becomes callable through
the facade, e.g. DateTimeHelper.seconds() -> facade.seconds().

A provider can list the methods it exposes in an ``exports`` manifest.
Providers without one expose every public staticmethod and classmethod
they define or inherit.

Python 3.9+ compatible.
"""

from typing import Callable, List, Optional, Tuple


HelperDescriptor = List[Tuple[str, Callable]]


class BaseHelper:
    """
    Base class for helper providers.

    Helpers are namespaces for static methods and cannot be instantiated.
    """

    # Names of the static methods this provider exposes (None = all public ones)
    exports: Optional[Tuple[str, ...]] = None

    def __init__(self):
        raise TypeError(f"Helper {self.__class__.__name__} cannot be instantiated")


def describe_provider(provider: type) -> HelperDescriptor:
    """
    Build the capability descriptor of a helper provider.

    Args:
        provider: Helper provider class

    Returns:
        List of (method name, callable) pairs

    Raises:
        TypeError: If provider is not a class
        ValueError: If the exports manifest names a missing method
    """
    if not isinstance(provider, type):
        raise TypeError(f"Helper provider must be a class, got {type(provider).__name__}")

    exports = getattr(provider, "exports", None)
    if exports is not None:
        descriptor = []
        for name in exports:
            function = getattr(provider, name, None)
            if not callable(function):
                raise ValueError(f"Helper {provider.__name__} exports '{name}' but does not define it")
            descriptor.append((name, function))
        return descriptor

    members = {}
    # Walk base classes first so subclasses override inherited methods
    for klass in reversed(provider.__mro__):
        if klass in (object, BaseHelper):
            continue
        for name, member in vars(klass).items():
            if name.startswith("_"):
                continue
            if isinstance(member, (staticmethod, classmethod)):
                members[name] = getattr(provider, name)
            else:
                members.pop(name, None)

    return list(members.items())

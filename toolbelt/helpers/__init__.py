"""
Helper Providers

Classes whose static methods are registered with the facade.
New providers only need to expose public static methods.
"""

from .base_helper import BaseHelper, describe_provider
from .datetime_helper import DateTimeHelper

__all__ = [
    "BaseHelper",
    "describe_provider",
    "DateTimeHelper"
]

"""Domain model: immutable value objects."""

from callorder.domain.model.call_token import CallToken, TokenRegistry
from callorder.domain.model.configuration import PluginConfig
from callorder.domain.model.method_call import CallOrder, MethodCall, display_name

__all__ = [
    "CallOrder",
    "CallToken",
    "MethodCall",
    "PluginConfig",
    "TokenRegistry",
    "display_name",
]

"""Lifecycle notification plugins"""

from .base import (
    HookPoint,
    Plugin,
    PluginContext,
    PluginInfo,
    PluginManager,
    PluginPriority,
)
from .loader import PluginLoader

__all__ = [
    "HookPoint",
    "Plugin",
    "PluginContext",
    "PluginInfo",
    "PluginManager",
    "PluginPriority",
    "PluginLoader",
]

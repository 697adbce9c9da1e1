"""Plugin loader and discovery"""

import importlib
import inspect
import logging
from importlib.metadata import entry_points
from typing import Iterable

from .base import Plugin, PluginManager

ENTRY_POINT_GROUP = "git_deploy_tool.plugins"


class PluginLoader:
    """Load plugins from modules and installed distributions"""

    def __init__(self, plugin_manager: PluginManager):
        """
        Initialize plugin loader

        Args:
            plugin_manager: Plugin manager instance
        """
        self.plugin_manager = plugin_manager
        self.logger = logging.getLogger("PluginLoader")
        self._loaded_modules = set()

    def load_modules(self, module_names: Iterable[str]) -> int:
        """Load plugins from several modules"""
        return sum(self.load_from_module(name) for name in module_names)

    def load_from_module(self, module_name: str) -> int:
        """
        Load plugins from a Python module

        Args:
            module_name: Fully qualified module name

        Returns:
            Number of plugins loaded
        """
        if module_name in self._loaded_modules:
            self.logger.info(f"Module {module_name} already loaded")
            return 0

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            self.logger.error(f"Failed to import module {module_name}: {e}")
            return 0

        self._loaded_modules.add(module_name)
        return self._load_plugins_from_module(module)

    def load_entry_points(self, group: str = ENTRY_POINT_GROUP) -> int:
        """
        Load plugin classes advertised by installed distributions

        Returns:
            Number of plugins loaded
        """
        count = 0

        for entry_point in entry_points(group=group):
            try:
                plugin_class = entry_point.load()
            except Exception as e:
                self.logger.error(f"Failed to load plugin entry point {entry_point.name}: {e}")
                continue

            if self._register_class(entry_point.name, plugin_class):
                count += 1

        return count

    def _load_plugins_from_module(self, module) -> int:
        count = 0

        for name, obj in inspect.getmembers(module, inspect.isclass):
            if obj.__module__ != module.__name__:
                continue
            if self._register_class(name, obj):
                count += 1

        return count

    def _register_class(self, name: str, obj) -> bool:
        if not (inspect.isclass(obj) and
                issubclass(obj, Plugin) and
                obj is not Plugin and
                not inspect.isabstract(obj)):
            return False

        try:
            self.plugin_manager.register(obj())
        except Exception as e:
            self.logger.error(f"Failed to instantiate plugin {name}: {e}")
            return False

        return True

# git_deploy_tool/plugins/base.py
"""Plugin system base classes and manager"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, Optional

from ..models.config import RepositoryConfig
from ..models.site import Site


class PluginPriority(Enum):
    """Plugin execution priority"""
    HIGHEST = 0
    HIGH = 25
    NORMAL = 50
    LOW = 75
    LOWEST = 100


class HookPoint(Enum):
    """Lifecycle notifications raised for each deployed site"""
    BEFORE_COMMIT = "commit.before"
    AFTER_COMMIT = "commit.after"


@dataclass
class PluginContext:
    """Context passed to plugin hooks"""
    hook_point: HookPoint
    site: Site
    repository: Optional[RepositoryConfig] = None
    data: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    # Cleared by a listener to cancel a cancelable notification
    is_valid: bool = True

    @property
    def cancelable(self) -> bool:
        """Check if listeners may cancel this notification"""
        return self.hook_point == HookPoint.BEFORE_COMMIT

    def cancel(self) -> None:
        """Cancel the operation that raised this notification"""
        if not self.cancelable:
            raise ValueError(f"{self.hook_point.value} cannot be canceled")
        self.is_valid = False

    def add_error(self, message: str) -> None:
        """Add error message"""
        self.errors.append(message)

    def has_errors(self) -> bool:
        """Check if context has errors"""
        return len(self.errors) > 0


@dataclass
class PluginInfo:
    """Plugin metadata"""
    name: str
    version: str
    description: str
    author: Optional[str] = None
    enabled: bool = True
    priority: PluginPriority = PluginPriority.NORMAL
    hook_points: List[HookPoint] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=dict)


class Plugin(ABC):
    """Base class for all plugins"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize plugin

        Args:
            config: Plugin-specific configuration
        """
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def get_info(self) -> PluginInfo:
        """Get plugin information"""
        pass

    def handle_hook(self, context: PluginContext) -> PluginContext:
        """
        Handle hook point

        Dispatches to ``on_commit_before`` / ``on_commit_after`` when defined.

        Args:
            context: Plugin context

        Returns:
            Modified context
        """
        handler_name = f"on_{context.hook_point.value.replace('.', '_')}"

        handler = getattr(self, handler_name, None)
        if handler and callable(handler):
            return handler(context) or context

        return context


class PluginManager:
    """Registers plugins and raises lifecycle notifications"""

    def __init__(self):
        self._plugins: Dict[str, Plugin] = {}
        self._hooks: Dict[HookPoint, List[Plugin]] = {hp: [] for hp in HookPoint}
        self.logger = logging.getLogger("PluginManager")

    def register(self, plugin: Plugin) -> None:
        """
        Register a plugin

        Args:
            plugin: Plugin instance
        """
        info = plugin.get_info()

        if info.name in self._plugins:
            self.logger.warning(f"Plugin {info.name} already registered, replacing")
            self.unregister(info.name)

        self._plugins[info.name] = plugin

        for hook_point in info.hook_points:
            self._hooks[hook_point].append(plugin)
            self._hooks[hook_point].sort(
                key=lambda p: p.get_info().priority.value
            )

        self.logger.info(f"Registered plugin: {info.name} v{info.version}")

    def unregister(self, plugin_name: str) -> None:
        """
        Unregister a plugin

        Args:
            plugin_name: Plugin name
        """
        if plugin_name not in self._plugins:
            return

        plugin = self._plugins.pop(plugin_name)

        for hook_list in self._hooks.values():
            if plugin in hook_list:
                hook_list.remove(plugin)

        self.logger.info(f"Unregistered plugin: {plugin_name}")

    def has_handlers(self, hook_point: HookPoint) -> bool:
        """Check if any enabled plugin listens to a hook point"""
        return any(p.get_info().enabled for p in self._hooks[hook_point])

    def execute_hook(self, context: PluginContext) -> PluginContext:
        """
        Execute plugins for a hook point

        Execution stops at the first plugin that cancels the context.

        Args:
            context: Plugin context

        Returns:
            Modified context after all plugins
        """
        for plugin in self._hooks[context.hook_point]:
            info = plugin.get_info()

            if not info.enabled:
                continue

            try:
                self.logger.debug(f"Executing plugin {info.name} for {context.hook_point.value}")
                context = plugin.handle_hook(context)
            except Exception as e:
                self.logger.error(f"Plugin {info.name} failed: {e}")
                context.add_error(f"Plugin {info.name} error: {str(e)}")

            if not context.is_valid:
                self.logger.info(f"Plugin {info.name} canceled {context.hook_point.value}")
                break

        return context

    def before_commit(self, site: Site, repository: Optional[RepositoryConfig] = None) -> bool:
        """
        Raise the cancelable before-commit notification

        Returns:
            False if a plugin canceled the commit
        """
        context = PluginContext(HookPoint.BEFORE_COMMIT, site=site, repository=repository)
        return self.execute_hook(context).is_valid

    def after_commit(self, site: Site, repository: Optional[RepositoryConfig] = None) -> None:
        """Raise the informational after-commit notification"""
        if not self.has_handlers(HookPoint.AFTER_COMMIT):
            return
        self.execute_hook(PluginContext(HookPoint.AFTER_COMMIT, site=site, repository=repository))

    def get_plugin(self, name: str) -> Optional[Plugin]:
        """Get plugin by name"""
        return self._plugins.get(name)

    def list_plugins(self) -> List[PluginInfo]:
        """List all registered plugins"""
        return [p.get_info() for p in self._plugins.values()]

"""Plugin discovery and formatter installation.

Discovery: entry points in the ``formbind.plugins`` group via pluggy's
setuptools entry point loader. Plugins may also be registered directly.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from formbind.formatting.base import AnnotationFormatterFactory, Formatter
from formbind.plugins.hookspecs import FormbindHookSpec

if TYPE_CHECKING:
    from formbind.formatting.registry import FormatterRegistry

PROJECT_NAME = "formbind"
ENTRY_POINT_GROUP = "formbind.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and formatter installation."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(FormbindHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``formbind.plugins`` entry point group.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Registry installation
    # ------------------------------------------------------------------

    def install_into(self, registry: FormatterRegistry) -> list[str]:
        """Add every plugin's formatters and factories to *registry*.

        Plugins are applied one at a time so a broken plugin is skipped
        with a warning and never prevents the others from installing.

        Returns warnings for plugins that were skipped or partially applied.
        """
        warnings: list[str] = []
        for plugin in self._pm.get_plugins():
            name = self._pm.get_name(plugin) or plugin.__class__.__name__
            self._install_formatters(plugin, name, registry, warnings)
            self._install_factories(plugin, name, registry, warnings)
        return warnings

    @staticmethod
    def _install_formatters(
        plugin: object,
        name: str,
        registry: FormatterRegistry,
        warnings: list[str],
    ) -> None:
        hook = getattr(plugin, "register_formatters", None)
        if hook is None:
            return
        try:
            formatter_map = hook()
        except Exception:
            logger.warning("Failed to collect formatters from plugin %s", name, exc_info=True)
            warnings.append(f"Plugin {name} failed to provide formatters")
            return
        if formatter_map is None:
            return
        if not isinstance(formatter_map, dict):
            logger.warning("Plugin %s returned non-dict formatter registrations", name)
            warnings.append(f"Plugin {name} returned invalid formatter registrations")
            return

        for property_type, formatter in formatter_map.items():
            if not isinstance(property_type, type) or not isinstance(formatter, Formatter):
                logger.warning(
                    "Plugin %s: skipping invalid registration %r -> %r",
                    name,
                    property_type,
                    formatter,
                )
                warnings.append(f"Plugin {name}: skipped invalid formatter for {property_type!r}")
                continue
            registry.register_formatter(property_type, formatter)
            logger.debug("Plugin %s registered formatter for %s", name, property_type.__name__)

    @staticmethod
    def _install_factories(
        plugin: object,
        name: str,
        registry: FormatterRegistry,
        warnings: list[str],
    ) -> None:
        hook = getattr(plugin, "register_formatter_factories", None)
        if hook is None:
            return
        try:
            factories = hook()
        except Exception:
            logger.warning("Failed to collect factories from plugin %s", name, exc_info=True)
            warnings.append(f"Plugin {name} failed to provide formatter factories")
            return
        for factory in factories or ():
            if not isinstance(factory, AnnotationFormatterFactory):
                logger.warning("Plugin %s: skipping invalid factory %r", name, factory)
                warnings.append(f"Plugin {name}: skipped invalid factory {factory!r}")
                continue
            registry.register_formatter_factory(factory)

    # ------------------------------------------------------------------
    # Entry point normalization
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

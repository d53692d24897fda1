"""Built-in emitter plugins, registered by backend name."""

from ..errors import UnknownPluginError
from .base import BasePlugin, CodegenPlugin, PluginConfig
from .dart import DartPlugin, DartPluginConfig, dart_plugin
from .kotlin import KotlinPlugin, KotlinPluginConfig, kotlin_plugin
from .swift import SwiftPlugin, SwiftPluginConfig, swift_plugin

PLUGINS: dict[str, CodegenPlugin] = {
    "kotlin": kotlin_plugin,
    "swift": swift_plugin,
    "dart": dart_plugin,
}


def register_plugin(plugin: CodegenPlugin, name: str | None = None):
    """Register a plugin instance under its name (or an explicit one)."""
    PLUGINS[name or plugin.name] = plugin


def available_plugins() -> list[str]:
    return sorted(PLUGINS)


def get_plugin(name: str) -> CodegenPlugin:
    """Look up a plugin by backend name.

    Raises:
        UnknownPluginError: if no plugin is registered under that name.
    """
    try:
        return PLUGINS[name]
    except KeyError:
        raise UnknownPluginError(name, available_plugins()) from None


__all__ = [
    "BasePlugin",
    "CodegenPlugin",
    "PluginConfig",
    "DartPlugin",
    "DartPluginConfig",
    "KotlinPlugin",
    "KotlinPluginConfig",
    "SwiftPlugin",
    "SwiftPluginConfig",
    "PLUGINS",
    "available_plugins",
    "get_plugin",
    "register_plugin",
]

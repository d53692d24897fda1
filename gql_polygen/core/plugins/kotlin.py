"""Kotlin code generator plugin.

Generates Kotlin data classes, enums, sealed interfaces and resolver
interfaces from the schema IR. Targets Android by default.
"""

from ..ir import Platform
from .base import BasePlugin, PluginConfig

KOTLIN_KEYWORDS = frozenset({
    "as", "break", "class", "continue", "do", "else", "false", "for", "fun",
    "if", "in", "interface", "is", "null", "object", "package", "return",
    "super", "this", "throw", "true", "try", "typealias", "typeof", "val",
    "var", "when", "while",
})


class KotlinPluginConfig(PluginConfig):
    package_name: str


class KotlinPlugin(BasePlugin):
    """Kotlin backend.

    A data class always has its primary constructor, so turning off
    ``generate_constructors`` only drops the ``= null`` defaults.
    """

    name = "kotlin"
    language = "kotlin"
    template_name = "kotlin.kt.j2"
    default_filename = "Types.kt"
    default_platform = Platform.ANDROID
    default_exclude_patterns = ("-web",)
    config_class = KotlinPluginConfig

    keywords = KOTLIN_KEYWORDS
    list_format = "List<{item}>"


kotlin_plugin = KotlinPlugin()

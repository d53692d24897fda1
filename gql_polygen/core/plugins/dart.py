"""Dart code generator plugin.

Generates Dart classes, enums, sealed classes for unions and abstract
resolver classes from the schema IR. Dart is the cross-platform target:
with no platform restriction every type is emitted, but only common
operations get resolver declarations.
"""

from ..utils import constant_to_camel_case
from .base import BasePlugin, PluginConfig

DART_KEYWORDS = frozenset({
    "assert", "break", "case", "catch", "class", "const", "continue",
    "default", "do", "else", "enum", "extends", "false", "final", "finally",
    "for", "if", "in", "is", "new", "null", "rethrow", "return", "super",
    "switch", "this", "throw", "true", "try", "var", "void", "while", "with",
})


class DartPluginConfig(PluginConfig):
    # Emit json_annotation metadata and fromJson/toJson
    use_json_serializable: bool = True


class DartPlugin(BasePlugin):
    """Dart backend.

    With ``generate_constructors`` off, fields are declared ``late final``
    and the class keeps Dart's implicit default constructor.
    """

    name = "dart"
    language = "dart"
    template_name = "dart.dart.j2"
    default_filename = "types.dart"
    default_platform = None
    default_exclude_patterns = ("-web",)
    config_class = DartPluginConfig

    keywords = DART_KEYWORDS
    list_format = "List<{item}>"

    def escape_identifier(self, name: str) -> str:
        if name in self.keywords:
            return f"{name}_"
        return name

    def enum_case_name(self, value: str) -> str:
        return constant_to_camel_case(value)

    def format_param(self, name: str, type_name: str) -> str:
        return f"{type_name} {name}"


dart_plugin = DartPlugin()

"""Swift code generator plugin.

Generates Swift structs, enums, enums with associated values for unions,
and resolver protocols from the schema IR. Targets iOS by default.
"""

import re

from ..ir import Platform
from ..utils import constant_to_camel_case
from .base import BasePlugin, PluginConfig

SWIFT_KEYWORDS = frozenset({
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "protocol", "public", "rethrows", "static", "struct",
    "subscript", "typealias", "var", "break", "case", "continue", "default",
    "defer", "do", "else", "fallthrough", "for", "guard", "if", "in",
    "repeat", "return", "switch", "where", "while", "as", "Any", "catch",
    "false", "is", "nil", "super", "self", "Self", "throw", "throws", "true",
    "try",
})


class SwiftPluginConfig(PluginConfig):
    pass


class SwiftPlugin(BasePlugin):
    name = "swift"
    language = "swift"
    template_name = "swift.swift.j2"
    default_filename = "Types.swift"
    default_platform = Platform.IOS
    default_exclude_patterns = ("-android", "-web")
    config_class = SwiftPluginConfig

    keywords = SWIFT_KEYWORDS
    list_format = "[{item}]"

    def enum_case_name(self, value: str) -> str:
        return constant_to_camel_case(value)

    def simplify_union_member(self, type_name: str) -> str:
        # SummarizeResult -> summarize; events keep their suffix
        return re.sub(r"Result$", "", type_name)


swift_plugin = SwiftPlugin()

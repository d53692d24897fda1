"""Shared utilities for code generation.

Naming helpers used by the templates, GraphQL scalar mappings per target,
and the platform filter applied by every backend.
"""

import re
from typing import Iterable, TypeVar

from .ir import Platform

T = TypeVar("T")


# ============================================
# String utilities
# ============================================


def to_snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def to_pascal_case(name: str) -> str:
    """Convert snake_case, kebab-case or camelCase to PascalCase."""
    name = re.sub(r"[-_](\w)", lambda m: m.group(1).upper(), name)
    return name[:1].upper() + name[1:]


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def to_camel_case(name: str) -> str:
    """Convert snake_case, kebab-case or PascalCase to camelCase."""
    return lower_first(to_pascal_case(name))


def to_screaming_snake_case(name: str) -> str:
    """Convert to SCREAMING_SNAKE_CASE."""
    return to_snake_case(name).upper()


def constant_to_camel_case(value: str) -> str:
    """Convert an enum constant to camelCase, e.g. DISABLED_BY_USER -> disabledByUser."""
    return re.sub(r"_([a-z0-9])", lambda m: m.group(1).upper(), value.lower())


def indent(text: str, spaces: int = 4) -> str:
    """Indent every non-blank line of text."""
    prefix = " " * spaces
    return "\n".join(prefix + line if line.strip() else line for line in text.split("\n"))


def section_header(title: str, char: str = "=") -> str:
    """Create a section header comment."""
    line = char * 44
    return f"// {line}\n// {title}\n// {line}"


def doc_comment(text: str | None, style: str = "kdoc") -> str:
    """Wrap text in a documentation comment.

    Styles: 'kdoc' (/** ... */), 'swift' and 'dartdoc' (/// per line).
    """
    if not text:
        return ""
    lines = text.strip().split("\n")
    if style in ("swift", "dartdoc"):
        return "\n".join(f"/// {line}".rstrip() for line in lines)
    if len(lines) == 1:
        return f"/** {lines[0]} */"
    body = "\n".join(f" * {line}".rstrip() for line in lines)
    return f"/**\n{body}\n */"


# ============================================
# Type utilities
# ============================================

DEFAULT_TYPE_MAPPINGS: dict[str, dict[str, str]] = {
    "kotlin": {
        "String": "String",
        "Int": "Int",
        "Float": "Double",
        "Boolean": "Boolean",
        "ID": "String",
    },
    "swift": {
        "String": "String",
        "Int": "Int",
        "Float": "Double",
        "Boolean": "Bool",
        "ID": "String",
    },
    "dart": {
        "String": "String",
        "Int": "int",
        "Float": "double",
        "Boolean": "bool",
        "ID": "String",
    },
}


def map_type(
    graphql_type: str,
    mapping: dict[str, str],
    aliases: dict[str, str] | None = None,
) -> str:
    """Map a GraphQL type name to a target language type name.

    Aliases are applied first, then the scalar mapping. Names found in
    neither pass through unchanged.
    """
    if aliases and graphql_type in aliases:
        graphql_type = aliases[graphql_type]
    return mapping.get(graphql_type, graphql_type)


# ============================================
# Platform utilities
# ============================================


def should_include_for_platform(
    item_platform: Platform | None, target_platform: Platform | None
) -> bool:
    """Check if an item should be included for a target platform."""
    if target_platform is None:
        return True
    if item_platform is None:
        return True
    return item_platform == target_platform


def filter_by_platform(items: Iterable[T], target_platform: Platform | None) -> list[T]:
    """Filter definitions by their platform tag."""
    return [
        item for item in items
        if should_include_for_platform(item.platform, target_platform)
    ]


def _name_tokens(platform: Platform) -> tuple[str, ...]:
    token = platform.type_suffix
    return (token, token.capitalize()) if token.isupper() else (token,)


def is_platform_named(type_name: str, platform: Platform) -> bool:
    """Check whether a type name carries a platform naming convention.

    'AndroidConfig' and 'DeviceInfoAndroid' are Android-named; 'Webhook'
    is not Web-named and 'BIOS' is not iOS-named.
    """
    for token in _name_tokens(platform):
        if type_name.startswith(token):
            rest = type_name[len(token):]
            if not rest or rest[0].isupper():
                return True
        if type_name.endswith(token) and len(type_name) > len(token):
            before = type_name[-len(token) - 1]
            if not before.isupper():
                return True
    return False

"""GraphQL schema parser using graphql-core.

Collects schema documents from a file or directory, parses each one into a
graphql-core DocumentNode and tags it with the platform implied by its
filename (``schema-android.graphql`` is Android-only, ``schema.graphql`` is
common).
"""

import logging
import os
from dataclasses import dataclass

from graphql import DocumentNode, GraphQLError, parse

from .errors import NoSchemaFilesError, SchemaParseError
from .ir import Platform

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".graphql", ".graphqls")

# Stems ending with this token are explicitly common
COMMON_SUFFIX = "-common"


@dataclass(frozen=True)
class ParsedFile:
    """A parsed schema document and the platform derived from its name."""
    filename: str
    ast: DocumentNode
    platform: Platform | None = None


def _stem(filename: str, extensions=DEFAULT_EXTENSIONS) -> str:
    """Strip the first matching schema extension from a filename."""
    for ext in extensions:
        if filename.endswith(ext):
            return filename[: -len(ext)]
    return filename


def platform_from_filename(
    filename: str, extensions=DEFAULT_EXTENSIONS
) -> Platform | None:
    """Determine the platform scope from the filename stem suffix."""
    stem = _stem(os.path.basename(filename), extensions).lower()
    if stem.endswith(COMMON_SUFFIX):
        return None
    for platform in Platform:
        if stem.endswith(platform.filename_suffix):
            return platform
    return None


def should_exclude(filename: str, patterns, extensions=DEFAULT_EXTENSIONS) -> bool:
    """Check if a file should be excluded based on patterns.

    Matches against the filename stem so '-web' excludes 'schema-web.graphql'
    but not 'my-webview.graphql'.
    """
    stem = _stem(os.path.basename(filename), extensions)
    return any(stem.endswith(pattern) for pattern in patterns)


def filter_parsed_files(
    files: list[ParsedFile], exclude_patterns, extensions=DEFAULT_EXTENSIONS
) -> list[ParsedFile]:
    """Drop already parsed files whose stem matches an exclude pattern."""
    if not exclude_patterns:
        return list(files)
    return [
        f for f in files
        if not should_exclude(f.filename, exclude_patterns, extensions)
    ]


def parse_schema_string(content: str) -> DocumentNode:
    """Parse a single GraphQL document."""
    return parse(content)


class SchemaParser:
    """Parses GraphQL schema files into tagged syntax trees."""

    def __init__(
        self,
        schema_path: str,
        extensions=DEFAULT_EXTENSIONS,
        exclude_patterns=(),
        recursive: bool = False,
    ):
        """Initialize a parser with a path to a schema file or directory.

        With ``recursive`` the whole directory tree is scanned, which is
        what an extracted archive needs.
        """
        self.schema_path = str(schema_path)
        self.extensions = tuple(extensions)
        self.exclude_patterns = tuple(exclude_patterns)
        self.recursive = recursive

    def parse_all(self) -> list[ParsedFile]:
        """Parse every matching schema file.

        Raises:
            NoSchemaFilesError: if no file matches.
            SchemaParseError: on the first document that is not valid
                UTF-8 or has invalid syntax. No partial result is returned.
        """
        files = self._collect_schema_files()
        if not files:
            raise NoSchemaFilesError(self.schema_path, self.extensions)

        parsed = []
        for file_path in files:
            filename = os.path.basename(file_path)
            try:
                with open(file_path, encoding="utf-8") as f:
                    content = f.read()
                ast = parse(content)
            except (GraphQLError, UnicodeDecodeError) as e:
                logger.error("Error parsing %s: %s", filename, e)
                raise SchemaParseError(filename, e) from e
            parsed.append(
                ParsedFile(
                    filename=filename,
                    ast=ast,
                    platform=platform_from_filename(filename, self.extensions),
                )
            )
            logger.debug("Parsed %s (platform: %s)", filename, parsed[-1].platform)
        return parsed

    def _collect_schema_files(self) -> list[str]:
        """Collect matching, non-excluded schema files from the path."""
        if os.path.isfile(self.schema_path):
            candidates = [self.schema_path]
        elif self.recursive:
            candidates = [
                os.path.join(root, name)
                for root, _dirs, names in os.walk(self.schema_path)
                for name in names
            ]
        else:
            candidates = [
                os.path.join(self.schema_path, name)
                for name in os.listdir(self.schema_path)
                if os.path.isfile(os.path.join(self.schema_path, name))
            ]

        files = []
        for path in candidates:
            name = os.path.basename(path)
            if not name.endswith(self.extensions):
                continue
            if should_exclude(name, self.exclude_patterns, self.extensions):
                continue
            files.append(path)
        return sorted(files)


def parse_schema_files(
    schema_path: str,
    extensions=DEFAULT_EXTENSIONS,
    exclude_patterns=(),
    recursive: bool = False,
) -> list[ParsedFile]:
    """Parse all schema files in a directory (or a single file)."""
    return SchemaParser(schema_path, extensions, exclude_patterns, recursive).parse_all()

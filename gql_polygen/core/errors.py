"""Exceptions raised by the code generation pipeline."""


class CodegenError(Exception):
    """Base class for all code generation errors."""


class SchemaParseError(CodegenError):
    """Raised when a schema document cannot be parsed.

    Parsing is fail-fast: the first malformed file aborts the whole run.
    """

    def __init__(self, filename: str, error: Exception):
        self.filename = filename
        self.error = error
        super().__init__(f"Error parsing {filename}: {error}")


class UnknownPluginError(CodegenError):
    """Raised when a backend name is not present in the plugin registry."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown plugin: {name!r} (available: {', '.join(available) or 'none'})"
        )


class PluginConfigError(CodegenError):
    """Raised when a backend configuration fails validation."""

    def __init__(self, plugin: str, error: Exception):
        self.plugin = plugin
        self.error = error
        super().__init__(f"Invalid configuration for plugin {plugin!r}: {error}")


class NoSchemaFilesError(CodegenError):
    """Raised when a schema path holds no matching schema documents."""

    def __init__(self, path: str, extensions):
        self.path = path
        super().__init__(
            f"No schema files ({', '.join(extensions)}) found in {path}"
        )


class ConfigFileError(CodegenError):
    """Raised when a run configuration file is malformed or invalid."""

    def __init__(self, path: str, error: Exception):
        self.path = path
        self.error = error
        super().__init__(f"Invalid configuration file {path}: {error}")

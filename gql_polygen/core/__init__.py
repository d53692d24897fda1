"""Core modules for multi-target GraphQL code generation."""

from .errors import (
    CodegenError,
    ConfigFileError,
    NoSchemaFilesError,
    PluginConfigError,
    SchemaParseError,
    UnknownPluginError,
)
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    ArgumentDef,
    EnumDef,
    FieldDef,
    InputTypeDef,
    ObjectTypeDef,
    OperationDef,
    Platform,
    SchemaIR,
    TypeInfo,
    UnionDef,
)
from .parser import (
    ParsedFile,
    SchemaParser,
    filter_parsed_files,
    parse_schema_files,
    parse_schema_string,
    platform_from_filename,
)
from .pipeline import GenerateConfig, GenerateResult, PluginRun, generate, generate_from_ir, load_config
from .plugins import (
    PLUGINS,
    CodegenPlugin,
    DartPluginConfig,
    KotlinPluginConfig,
    PluginConfig,
    SwiftPluginConfig,
    available_plugins,
    get_plugin,
    register_plugin,
)
from .transformer import parse_type_node, transform_to_ir
from .utils import (
    DEFAULT_TYPE_MAPPINGS,
    filter_by_platform,
    map_type,
    should_include_for_platform,
)

__all__ = [
    # Errors
    "CodegenError",
    "ConfigFileError",
    "NoSchemaFilesError",
    "PluginConfigError",
    "SchemaParseError",
    "UnknownPluginError",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # IR types
    "ArgumentDef",
    "EnumDef",
    "FieldDef",
    "InputTypeDef",
    "ObjectTypeDef",
    "OperationDef",
    "Platform",
    "SchemaIR",
    "TypeInfo",
    "UnionDef",
    # Parser
    "ParsedFile",
    "SchemaParser",
    "filter_parsed_files",
    "parse_schema_files",
    "parse_schema_string",
    "platform_from_filename",
    # Transformer
    "parse_type_node",
    "transform_to_ir",
    # Type mapping
    "DEFAULT_TYPE_MAPPINGS",
    "filter_by_platform",
    "map_type",
    "should_include_for_platform",
    # Plugins
    "PLUGINS",
    "CodegenPlugin",
    "PluginConfig",
    "DartPluginConfig",
    "KotlinPluginConfig",
    "SwiftPluginConfig",
    "available_plugins",
    "get_plugin",
    "register_plugin",
    # Pipeline
    "GenerateConfig",
    "GenerateResult",
    "PluginRun",
    "generate",
    "generate_from_ir",
    "load_config",
]

"""Parse -> transform -> emit pipeline.

Example:
    config = GenerateConfig(
        schema_dir="./schema",
        plugins=[
            PluginRun(plugin="kotlin", config={
                "output_path": "Types.kt",
                "package_name": "com.example",
            }),
            PluginRun(plugin="swift", config={"output_path": "Types.swift"}),
        ],
    )
    for result in generate(config):
        print(result.plugin, len(result.code))
"""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigFileError
from .hooks import HookRunner
from .ir import SchemaIR
from .parser import DEFAULT_EXTENSIONS, parse_schema_files
from .plugins import CodegenPlugin, get_plugin
from .transformer import transform_to_ir

logger = logging.getLogger(__name__)


class PluginRun(BaseModel):
    """One backend invocation: a registered plugin name and its options."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    plugin: str
    config: dict[str, Any] = Field(default_factory=dict)


class GenerateConfig(BaseModel):
    """Full generation run configuration."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_dir: str
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude_patterns: tuple[str, ...] = ()
    plugins: list[PluginRun] = Field(default_factory=list)


@dataclass
class GenerateResult:
    """Output of one backend. ``error`` is set when the backend failed."""
    plugin: str
    output_path: str
    code: str = ""
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_config(path: str) -> GenerateConfig:
    """Load a JSON run configuration.

    A relative ``schema_dir`` is resolved against the config file's directory.

    Raises:
        ConfigFileError: if the file is not valid JSON or fails validation.
    """
    config_path = Path(path)
    try:
        config = GenerateConfig.model_validate_json(config_path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ConfigFileError(str(path), e) from e
    if not os.path.isabs(config.schema_dir):
        schema_dir = str((config_path.parent / config.schema_dir).resolve())
        config = config.model_copy(update={"schema_dir": schema_dir})
    return config


def _resolve_plugins(runs: list[PluginRun]) -> list[tuple[CodegenPlugin, PluginRun]]:
    # Unknown names fail here, before any parsing or output
    return [(get_plugin(run.plugin), run) for run in runs]


def _run_plugins(
    schema: SchemaIR,
    resolved: list[tuple[CodegenPlugin, PluginRun]],
    hooks: HookRunner | None,
) -> list[GenerateResult]:
    if hooks:
        schema = hooks.run_pre_hooks(schema)

    results = []
    for plugin, run in resolved:
        output_path = run.config.get("output_path", "")
        start = time.perf_counter()
        try:
            code = plugin.generate(schema, run.config)
        except Exception as e:
            # A failing backend must not take the others down with it
            logger.exception("Plugin %s failed", plugin.name)
            results.append(GenerateResult(plugin=plugin.name, output_path=output_path, error=e))
            continue
        if hooks:
            code = hooks.run_post_hooks(output_path, code)
        logger.debug(
            "Plugin %s generated %d lines in %.3fs",
            plugin.name, code.count("\n"), time.perf_counter() - start,
        )
        results.append(GenerateResult(plugin=plugin.name, output_path=output_path, code=code))
    return results


def generate_from_ir(
    schema: SchemaIR,
    runs: list[PluginRun],
    hooks: HookRunner | None = None,
) -> list[GenerateResult]:
    """Run backends over an already built IR."""
    return _run_plugins(schema, _resolve_plugins(runs), hooks)


def generate(config: GenerateConfig, hooks: HookRunner | None = None) -> list[GenerateResult]:
    """Parse the schema directory, build the IR and run every configured backend.

    Raises:
        UnknownPluginError: before any parsing if a backend name is unknown.
        NoSchemaFilesError: if the schema directory holds no schema files.
        SchemaParseError: if any schema document is malformed.
    """
    resolved = _resolve_plugins(config.plugins)
    parsed = parse_schema_files(config.schema_dir, config.extensions, config.exclude_patterns)
    logger.debug("Parsed %d schema files from %s", len(parsed), config.schema_dir)
    schema = transform_to_ir(parsed)
    return _run_plugins(schema, resolved, hooks)

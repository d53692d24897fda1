"""Emitter plugin contract.

Every backend implements ``generate(schema, config) -> str``. The shared
BasePlugin turns a read-only SchemaIR into template-ready views: it applies
the platform filter, maps type names, spells nullability and lists, and
groups resolver operations. Subclasses supply the target's spelling rules
and a Jinja2 template.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import PluginConfigError
from ..ir import (
    EnumDef,
    FieldDef,
    OperationDef,
    Platform,
    SchemaIR,
    TypeInfo,
    UnionDef,
)
from ..templates import render_template
from ..utils import (
    DEFAULT_TYPE_MAPPINGS,
    is_platform_named,
    lower_first,
    map_type,
    should_include_for_platform,
)

logger = logging.getLogger(__name__)


class PluginConfig(BaseModel):
    """Configuration shared by all backends."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    output_path: str
    package_name: str | None = None
    type_mapping: dict[str, str] = Field(default_factory=dict)
    type_aliases: dict[str, str] = Field(default_factory=dict)
    generate_resolvers: bool = True
    generate_constructors: bool = True
    # None means the backend's native platform
    platform: Platform | None = None
    template_dir: str | None = None


@runtime_checkable
class CodegenPlugin(Protocol):
    """Protocol for emitter backends.

    Example:
        class TypeScriptPlugin:
            name = "typescript"
            language = "typescript"

            def generate(self, schema: SchemaIR, config: PluginConfig) -> str:
                ...
    """

    name: str
    language: str

    def generate(self, schema: SchemaIR, config: Any) -> str:
        """Render the schema as source text. Must not write files."""
        ...


# =============================================================================
# Template views
# =============================================================================


@dataclass
class EnumView:
    name: str
    cases: list[tuple[str, str]]  # (case name, raw GraphQL value)
    doc: str | None = None


@dataclass
class FieldView:
    name: str
    type: str
    nullable: bool
    doc: str | None = None
    schema_name: str = ""  # name as declared in the schema


@dataclass
class RecordView:
    name: str
    fields: list[FieldView]
    implements: list[str] = field(default_factory=list)
    doc: str | None = None


@dataclass
class UnionView:
    name: str
    members: list[tuple[str, str]]  # (case name, member type)
    doc: str | None = None


@dataclass
class OperationView:
    name: str
    params: list[str]  # rendered parameter declarations
    return_type: str
    doc: str | None = None


@dataclass
class ResolverGroup:
    kind: str  # 'Query', 'Mutation' or 'Subscription'
    interface_name: str
    operations: list[OperationView]
    parent: str | None = None
    title: str = ""


class BasePlugin:
    """Shared emitter behaviour; subclasses set the class attributes below."""

    name = ""
    language = ""
    template_name = ""
    default_filename = ""
    default_platform: Platform | None = None
    # Schema file stems each backend skips when run from the CLI
    default_exclude_patterns: tuple[str, ...] = ()
    config_class = PluginConfig

    keywords: frozenset[str] = frozenset()
    list_format = "List<{item}>"
    nullable_suffix = "?"

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def generate(self, schema: SchemaIR, config: PluginConfig | Mapping[str, Any]) -> str:
        """Generate source text for the schema."""
        config = self.coerce_config(config)
        context = self.build_context(schema, config)
        return render_template(self.template_name, context, config.template_dir)

    def coerce_config(self, config) -> PluginConfig:
        """Validate a config (or plain mapping) into this backend's config class."""
        if isinstance(config, self.config_class):
            return config
        if isinstance(config, BaseModel):
            data = config.model_dump(exclude_unset=True)
        else:
            data = dict(config)
        try:
            return self.config_class.model_validate(data)
        except ValidationError as e:
            raise PluginConfigError(self.name, e) from e

    def target_platform(self, config: PluginConfig) -> Platform | None:
        return config.platform if config.platform is not None else self.default_platform

    def type_mapping(self, config: PluginConfig) -> dict[str, str]:
        return {**DEFAULT_TYPE_MAPPINGS.get(self.language, {}), **config.type_mapping}

    # ------------------------------------------------------------------
    # Platform filtering
    # ------------------------------------------------------------------

    @staticmethod
    def foreign_platforms(target: Platform | None) -> list[Platform]:
        """Platforms whose vocabulary must not leak into this target."""
        if target is None:
            return []
        return [p for p in Platform if p != target]

    def is_foreign_name(self, type_name: str, target: Platform | None) -> bool:
        return any(is_platform_named(type_name, p) for p in self.foreign_platforms(target))

    def includes(self, definition, target: Platform | None) -> bool:
        """Platform tag filter plus the naming-convention filter."""
        if not should_include_for_platform(definition.platform, target):
            return False
        return not self.is_foreign_name(definition.name, target)

    def includes_operation(self, op: OperationDef, target: Platform | None) -> bool:
        if not should_include_for_platform(op.platform, target):
            return False
        referenced = [op.return_type.name] + [arg.type.name for arg in op.args]
        return not any(self.is_foreign_name(name, target) for name in referenced)

    # ------------------------------------------------------------------
    # Type rendering
    # ------------------------------------------------------------------

    def escape_identifier(self, name: str) -> str:
        """Make an identifier safe in the target language."""
        if name in self.keywords:
            return f"`{name}`"
        return name

    def render_type(self, type_info: TypeInfo, config: PluginConfig) -> str:
        """Translate a TypeInfo into the target's nullable/list spelling."""
        result = map_type(type_info.name, self.type_mapping(config), config.type_aliases)
        if type_info.is_list:
            item = result + self.nullable_suffix if type_info.item_nullable else result
            result = self.list_format.format(item=item)
        if type_info.nullable:
            result += self.nullable_suffix
        return result

    def enum_case_name(self, value: str) -> str:
        return value

    def format_param(self, name: str, type_name: str) -> str:
        return f"{name}: {type_name}"

    def simplify_union_member(self, type_name: str) -> str:
        """Shorten a member name for use as a union case; identity by default."""
        return type_name

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def record_fields(self, definition, target: Platform | None) -> list[FieldDef]:
        return [
            f for f in definition.fields
            if not self.is_foreign_name(f.type.name, target)
        ]

    def enum_view(self, enum_def: EnumDef) -> EnumView:
        return EnumView(
            name=enum_def.name,
            cases=[(self.escape_identifier(self.enum_case_name(v)), v) for v in enum_def.values],
            doc=enum_def.description,
        )

    def record_view(
        self,
        definition,
        config: PluginConfig,
        target: Platform | None,
        emitted_unions: set[str],
    ) -> RecordView | None:
        """Build a record view, or None when no field survives filtering."""
        fields = self.record_fields(definition, target)
        if not fields:
            return None
        implements = [
            u for u in getattr(definition, "implements_unions", ())
            if u in emitted_unions
        ]
        return RecordView(
            name=definition.name,
            fields=[self.field_view(f, config) for f in fields],
            implements=implements,
            doc=definition.description,
        )

    def field_view(self, field_def: FieldDef, config: PluginConfig) -> FieldView:
        return FieldView(
            name=self.escape_identifier(field_def.name),
            type=self.render_type(field_def.type, config),
            nullable=field_def.type.nullable,
            doc=field_def.description,
            schema_name=field_def.name,
        )

    def union_view(
        self,
        union: UnionDef,
        config: PluginConfig,
        target: Platform | None,
        skipped_types: set[str] = frozenset(),
    ) -> UnionView | None:
        """Build a union view with case names that stay unique in the union.

        Members in ``skipped_types`` (object types that produce no record
        for this target) get no case.
        """
        members = [
            m for m in dict.fromkeys(union.members)
            if not self.is_foreign_name(m, target) and m not in skipped_types
        ]
        if not members:
            return None
        short = [lower_first(self.simplify_union_member(m)) for m in members]
        full = [lower_first(m) for m in members]
        cases = []
        for i, member in enumerate(members):
            case_name = short[i]
            clashes = short.count(case_name) > 1 or any(
                case_name == full[j] for j in range(len(members)) if j != i
            )
            if clashes or not case_name:
                case_name = full[i]
            mapped = map_type(member, self.type_mapping(config), config.type_aliases)
            cases.append((self.escape_identifier(case_name), mapped))
        return UnionView(name=union.name, members=cases, doc=union.description)

    def operation_view(self, op: OperationDef, config: PluginConfig) -> OperationView:
        return OperationView(
            name=self.escape_identifier(op.name),
            params=[
                self.format_param(
                    self.escape_identifier(arg.name), self.render_type(arg.type, config)
                )
                for arg in op.args
            ],
            return_type=self.render_type(op.return_type, config),
            doc=op.description,
        )

    def resolver_groups(
        self, schema: SchemaIR, config: PluginConfig, target: Platform | None
    ) -> list[ResolverGroup]:
        """Group operations into a common interface and a platform interface per kind.

        The common Query and Mutation interfaces are always emitted; the
        Subscription one only when there is at least one subscription.
        Platform interfaces extend their common parent and appear only
        when they have operations.
        """
        groups = []
        for kind in ("Query", "Mutation", "Subscription"):
            operations = [
                op for op in schema.operations_for(kind)
                if self.includes_operation(op, target)
            ]
            common = [op for op in operations if op.platform is None]
            specific = [op for op in operations if op.platform is not None]
            if target is None:
                specific = []

            base_name = f"{kind}Resolver"
            if kind != "Subscription" or common or specific:
                groups.append(
                    ResolverGroup(
                        kind=kind,
                        interface_name=base_name,
                        operations=[self.operation_view(op, config) for op in common],
                        title=f"{kind.upper()} RESOLVER (Common)",
                    )
                )
            if specific:
                groups.append(
                    ResolverGroup(
                        kind=kind,
                        interface_name=f"{base_name}{target.type_suffix}",
                        operations=[self.operation_view(op, config) for op in specific],
                        parent=base_name,
                        title=f"{kind.upper()} RESOLVER ({target.value})",
                    )
                )
        return groups

    def build_context(self, schema: SchemaIR, config: PluginConfig) -> dict[str, Any]:
        """Collect everything the backend template renders."""
        target = self.target_platform(config)

        emitted_types = {
            t.name for t in schema.types
            if self.includes(t, target) and self.record_fields(t, target)
        }
        skipped_types = {t.name for t in schema.types} - emitted_types

        unions = []
        for union in schema.unions:
            if self.includes(union, target):
                view = self.union_view(union, config, target, skipped_types)
                if view:
                    unions.append(view)
        emitted_unions = {u.name for u in unions}

        types = []
        for definition in schema.types:
            if self.includes(definition, target):
                view = self.record_view(definition, config, target, emitted_unions)
                if view:
                    types.append(view)

        inputs = []
        for definition in schema.inputs:
            if self.includes(definition, target):
                view = self.record_view(definition, config, target, emitted_unions)
                if view:
                    inputs.append(view)

        context = {
            "config": config,
            "package_name": config.package_name,
            "generate_constructors": config.generate_constructors,
            "target": target,
            "enums": [self.enum_view(e) for e in schema.enums if self.includes(e, target)],
            "types": types,
            "inputs": inputs,
            "unions": unions,
            "resolver_groups": (
                self.resolver_groups(schema, config, target)
                if config.generate_resolvers else []
            ),
            "output_stem": Path(config.output_path).stem,
        }
        logger.debug(
            "%s: %d enums, %d types, %d inputs, %d unions",
            self.name, len(context["enums"]), len(types), len(inputs), len(unions),
        )
        return context

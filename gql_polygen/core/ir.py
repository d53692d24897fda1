"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that represent GraphQL schema constructs
in a language-agnostic way, suitable for code generation. Every class is
frozen and holds tuples, so a finished SchemaIR can be handed to any number
of emitters without one of them changing what another sees.
"""

from dataclasses import dataclass
from enum import Enum


class Platform(Enum):
    """Platform scope of a definition. ``None`` is used for common."""
    ANDROID = "Android"
    IOS = "iOS"
    WEB = "Web"

    @property
    def filename_suffix(self) -> str:
        """Suffix of a schema file stem scoped to this platform, e.g. '-android'."""
        return f"-{self.name.lower()}"

    @property
    def type_suffix(self) -> str:
        """Token used in generated and schema type names, e.g. 'IOS'."""
        return {"ANDROID": "Android", "IOS": "IOS", "WEB": "Web"}[self.name]


@dataclass(frozen=True)
class TypeInfo:
    """A possibly-list, possibly-nullable reference to a named type.

    ``item_nullable`` only carries meaning when ``is_list`` is True.
    """
    name: str
    nullable: bool = True
    is_list: bool = False
    item_nullable: bool = True

    def to_sdl(self) -> str:
        """Rebuild the SDL type expression, e.g. '[String!]'."""
        result = self.name
        if self.is_list:
            item = result if self.item_nullable else f"{result}!"
            result = f"[{item}]"
        if not self.nullable:
            result += "!"
        return result


@dataclass(frozen=True)
class FieldDef:
    """Represents a field in an object or input type."""
    name: str
    type: TypeInfo
    description: str | None = None
    default_value: str | None = None  # printed SDL literal


@dataclass(frozen=True)
class ArgumentDef:
    """Represents an argument to an operation."""
    name: str
    type: TypeInfo
    description: str | None = None
    default_value: str | None = None


@dataclass(frozen=True)
class EnumDef:
    """Represents a GraphQL enum type."""
    name: str
    values: tuple[str, ...] = ()
    description: str | None = None
    platform: Platform | None = None


@dataclass(frozen=True)
class ObjectTypeDef:
    """Represents a GraphQL object type.

    ``implements_unions`` is derived by the transformer's second pass and
    is empty until that pass runs.
    """
    name: str
    fields: tuple[FieldDef, ...] = ()
    implements_unions: tuple[str, ...] = ()
    description: str | None = None
    platform: Platform | None = None


@dataclass(frozen=True)
class InputTypeDef:
    """Represents a GraphQL input type."""
    name: str
    fields: tuple[FieldDef, ...] = ()
    description: str | None = None
    platform: Platform | None = None


@dataclass(frozen=True)
class UnionDef:
    """Represents a GraphQL union type."""
    name: str
    members: tuple[str, ...] = ()
    description: str | None = None
    platform: Platform | None = None


@dataclass(frozen=True)
class OperationDef:
    """Represents a query, mutation or subscription field."""
    name: str
    return_type: TypeInfo
    args: tuple[ArgumentDef, ...] = ()
    description: str | None = None
    platform: Platform | None = None


# Root operation containers and the SchemaIR bucket each one feeds
OPERATION_KINDS = {
    "Query": "queries",
    "Mutation": "mutations",
    "Subscription": "subscriptions",
}


@dataclass(frozen=True)
class SchemaIR:
    """Complete intermediate representation of a GraphQL schema."""
    enums: tuple[EnumDef, ...] = ()
    types: tuple[ObjectTypeDef, ...] = ()
    inputs: tuple[InputTypeDef, ...] = ()
    unions: tuple[UnionDef, ...] = ()
    queries: tuple[OperationDef, ...] = ()
    mutations: tuple[OperationDef, ...] = ()
    subscriptions: tuple[OperationDef, ...] = ()

    def find_type(self, name: str) -> ObjectTypeDef | InputTypeDef | None:
        """Look up the first object or input type with the given name."""
        for definition in self.types + self.inputs:
            if definition.name == name:
                return definition
        return None

    def operations_for(self, kind: str) -> tuple[OperationDef, ...]:
        """Return the operations of a root container ('Query', 'Mutation', ...)."""
        return getattr(self, OPERATION_KINDS[kind])

    @property
    def all_operations(self) -> tuple[OperationDef, ...]:
        """Return all queries, mutations and subscriptions."""
        return self.queries + self.mutations + self.subscriptions

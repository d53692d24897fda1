"""AST to IR transformer.

Walks parsed GraphQL documents and builds a single SchemaIR in two passes:

1. Per file, in file order: collect enums, object types, inputs, unions and
   root operations, tagging each with the file's platform.
2. Over the merged result: resolve union membership onto object types.
   This must run after every file is merged, since a union and its
   members may live in different files.
"""

import logging
from dataclasses import replace

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    print_ast,
)

from .ir import (
    OPERATION_KINDS,
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
from .parser import ParsedFile

logger = logging.getLogger(__name__)


def parse_type_node(type_node: TypeNode) -> TypeInfo:
    """Extract a TypeInfo from a (possibly wrapped) type node.

    Handles nullability of both the list and its items:
        [String!]  -> nullable list of non-null strings
        [String!]! -> non-null list of non-null strings
        [String]!  -> non-null list of nullable strings
        [String]   -> nullable list of nullable strings
    """
    state = {"nullable": True, "item_nullable": True, "is_list": False, "name": ""}

    def traverse(node: TypeNode, inside_list: bool = False):
        if isinstance(node, NonNullTypeNode):
            if inside_list:
                state["item_nullable"] = False
            else:
                state["nullable"] = False
            traverse(node.type, inside_list)
        elif isinstance(node, ListTypeNode):
            state["is_list"] = True
            traverse(node.type, True)
        elif isinstance(node, NamedTypeNode):
            state["name"] = node.name.value

    traverse(type_node)
    return TypeInfo(**state)


def _description(node) -> str | None:
    return node.description.value if node.description else None


def _default_value(node) -> str | None:
    default = getattr(node, "default_value", None)
    return print_ast(default) if default is not None else None


class _SchemaBuilder:
    """Mutable accumulator used while the passes run."""

    def __init__(self):
        self.enums: list[EnumDef] = []
        self.types: list[ObjectTypeDef] = []
        self.inputs: list[InputTypeDef] = []
        self.unions: list[UnionDef] = []
        self.queries: list = []
        self.mutations: list = []
        self.subscriptions: list = []

    def process_document(self, ast: DocumentNode, platform: Platform | None):
        """Pass 1: append every supported definition in the document."""
        for definition in ast.definitions:
            if isinstance(definition, EnumTypeDefinitionNode):
                self._process_enum(definition, platform)
            elif isinstance(definition, ObjectTypeDefinitionNode):
                self._process_object_type(definition, platform)
            elif isinstance(definition, ObjectTypeExtensionNode):
                # 'extend type Query/Mutation/Subscription' adds operations
                if definition.name.value in OPERATION_KINDS:
                    self._process_operations(definition, platform)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                self._process_input_type(definition, platform)
            elif isinstance(definition, UnionTypeDefinitionNode):
                self._process_union(definition, platform)

    def _process_enum(self, node: EnumTypeDefinitionNode, platform):
        self.enums.append(
            EnumDef(
                name=node.name.value,
                values=tuple(v.name.value for v in node.values or ()),
                description=_description(node),
                platform=platform,
            )
        )

    def _process_object_type(self, node: ObjectTypeDefinitionNode, platform):
        if node.name.value in OPERATION_KINDS:
            self._process_operations(node, platform)
            return
        self.types.append(
            ObjectTypeDef(
                name=node.name.value,
                fields=self._process_fields(node.fields),
                description=_description(node),
                platform=platform,
            )
        )

    def _process_input_type(self, node: InputObjectTypeDefinitionNode, platform):
        self.inputs.append(
            InputTypeDef(
                name=node.name.value,
                fields=self._process_fields(node.fields),
                description=_description(node),
                platform=platform,
            )
        )

    def _process_union(self, node: UnionTypeDefinitionNode, platform):
        self.unions.append(
            UnionDef(
                name=node.name.value,
                members=tuple(t.name.value for t in node.types or ()),
                description=_description(node),
                platform=platform,
            )
        )

    @staticmethod
    def _process_fields(field_nodes) -> tuple[FieldDef, ...]:
        """Process field or input value definitions into FieldDefs."""
        return tuple(
            FieldDef(
                name=node.name.value,
                type=parse_type_node(node.type),
                description=_description(node),
                default_value=_default_value(node),
            )
            for node in field_nodes or ()
        )

    def _process_operations(self, node, platform):
        """Process fields of a root operation container into operations."""
        target = getattr(self, OPERATION_KINDS[node.name.value])
        for field in node.fields or ():
            args = tuple(
                ArgumentDef(
                    name=arg.name.value,
                    type=parse_type_node(arg.type),
                    description=_description(arg),
                    default_value=_default_value(arg),
                )
                for arg in field.arguments or ()
            )
            target.append(
                OperationDef(
                    name=field.name.value,
                    args=args,
                    return_type=parse_type_node(field.type),
                    description=_description(field),
                    platform=platform,
                )
            )

    def resolve_union_membership(self):
        """Pass 2: record on each object type the unions that list it."""
        type_to_unions: dict[str, list[str]] = {}
        for union in self.unions:
            for member in union.members:
                names = type_to_unions.setdefault(member, [])
                if union.name not in names:
                    names.append(union.name)

        self.types = [
            replace(t, implements_unions=tuple(type_to_unions.get(t.name, ())))
            for t in self.types
        ]

    def build(self) -> SchemaIR:
        return SchemaIR(
            enums=tuple(self.enums),
            types=tuple(self.types),
            inputs=tuple(self.inputs),
            unions=tuple(self.unions),
            queries=tuple(self.queries),
            mutations=tuple(self.mutations),
            subscriptions=tuple(self.subscriptions),
        )


def transform_to_ir(parsed_files: list[ParsedFile]) -> SchemaIR:
    """Transform parsed GraphQL files into a unified SchemaIR.

    Definitions are appended in file order. Duplicate names across files are
    neither merged nor reported; every occurrence is kept.
    """
    builder = _SchemaBuilder()

    for parsed in parsed_files:
        builder.process_document(parsed.ast, parsed.platform)

    builder.resolve_union_membership()
    schema = builder.build()

    logger.debug(
        "Built IR: %d enums, %d types, %d inputs, %d unions, "
        "%d queries, %d mutations, %d subscriptions",
        len(schema.enums), len(schema.types), len(schema.inputs),
        len(schema.unions), len(schema.queries), len(schema.mutations),
        len(schema.subscriptions),
    )
    return schema

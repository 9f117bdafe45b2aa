from typing import Any, cast

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLType,
    get_named_type,
    get_nullable_type,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
)

from resolvergen import log
from resolvergen.models import ArgumentDescription, FieldDescription, TypeDescription, TypeReference

GRAPHQL_BUILTIN_SCALARS = {"ID", "String", "Int", "Float", "Boolean"}


def is_introspection_type(type_name: str) -> bool:
    return type_name.startswith("__")


def get_root_type_names(schema: GraphQLSchema) -> set[str]:
    """Names of the query, mutation and subscription root types the schema declares."""
    root_types = (schema.query_type, schema.mutation_type, schema.subscription_type)
    return {root_type.name for root_type in root_types if root_type is not None}


def get_declared_named_types(schema: GraphQLSchema) -> list[GraphQLNamedType]:
    """
    Named types declared in the schema SDL, in declaration order.

    Introspection types and built-in scalars are left out. Types built without an AST node
    (programmatically) keep their type map order after the declared ones.
    """
    named_types = [
        named_type
        for type_name, named_type in schema.type_map.items()
        if not is_introspection_type(type_name) and type_name not in GRAPHQL_BUILTIN_SCALARS
    ]

    def declaration_position(named_type: GraphQLNamedType) -> float:
        ast_node = named_type.ast_node
        if ast_node is None or ast_node.loc is None:
            return float("inf")
        return ast_node.loc.start

    return sorted(named_types, key=declaration_position)


def read_type_reference(graphql_type: GraphQLType) -> TypeReference:
    """
    Describe a (possibly wrapped) GraphQL type.

    Only the outermost list level is kept, `[[Int]]` is described like `[Int]` and a warning
    is logged.
    """
    is_required = is_non_null_type(graphql_type)
    if is_required:
        graphql_type = cast(GraphQLNonNull[Any], graphql_type).of_type

    is_list = is_list_type(graphql_type)
    is_item_required = False
    if is_list:
        item_type = cast(GraphQLList[Any], graphql_type).of_type
        is_item_required = is_non_null_type(item_type)
        if is_list_type(get_nullable_type(item_type)):
            log.warning(f"Nested list type '{graphql_type}' is described by its outer list only")

    named_type = get_named_type(graphql_type)
    return TypeReference(
        name=named_type.name,
        is_scalar=is_scalar_type(named_type),
        is_enum=is_enum_type(named_type),
        is_input=is_input_object_type(named_type),
        is_object=not (is_scalar_type(named_type) or is_enum_type(named_type) or is_input_object_type(named_type)),
        is_list=is_list,
        is_required=is_required,
        is_item_required=is_item_required,
    )


def read_argument(name: str, argument: GraphQLArgument) -> ArgumentDescription:
    return ArgumentDescription(name=name, type=read_type_reference(argument.type))


def read_field(name: str, field: GraphQLField | GraphQLInputField) -> FieldDescription:
    arguments = getattr(field, "args", None) or {}
    return FieldDescription(
        name=name,
        type=read_type_reference(field.type),
        arguments=[read_argument(arg_name, argument) for arg_name, argument in arguments.items()],
    )


def read_type(named_type: GraphQLNamedType, subscription_type_name: str | None = None) -> TypeDescription | None:
    """Describe an object, input or enum type. Other kinds of types yield None."""
    if is_object_type(named_type):
        object_type = cast(GraphQLObjectType, named_type)
        return TypeDescription(
            name=object_type.name,
            is_object=True,
            is_subscription=object_type.name == subscription_type_name,
            fields=[read_field(name, field) for name, field in object_type.fields.items()],
        )
    if is_input_object_type(named_type):
        input_type = cast(GraphQLInputObjectType, named_type)
        return TypeDescription(
            name=input_type.name,
            is_input=True,
            fields=[read_field(name, field) for name, field in input_type.fields.items()],
        )
    if is_enum_type(named_type):
        enum_type = cast(GraphQLEnumType, named_type)
        return TypeDescription(name=enum_type.name, is_enum=True, enum_values=list(enum_type.values))
    return None


def read_types(schema: GraphQLSchema) -> list[TypeDescription]:
    """
    Read the object, input and enum types of a schema.

    Args:
        schema: The GraphQL schema to read

    Returns:
        list[TypeDescription]: Type descriptions in schema declaration order, the subscription
        root type is tagged with `is_subscription`
    """
    subscription_type_name = schema.subscription_type.name if schema.subscription_type else None

    type_descriptions = []
    for named_type in get_declared_named_types(schema):
        type_description = read_type(named_type, subscription_type_name)
        if type_description is None:
            log.debug(f"Skipping type '{named_type.name}' ({type(named_type).__name__})")
            continue
        type_descriptions.append(type_description)

    log.info(f"Read {len(type_descriptions)} types from the schema")
    return type_descriptions

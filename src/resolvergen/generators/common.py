from resolvergen.models import (
    ArgumentDescription,
    ContextDefinition,
    FieldDescription,
    GenerateArgs,
    ModelMap,
    ModelMapEntry,
    TypeDescription,
    TypeReference,
)

GRAPHQL_SCALAR_TO_TYPESCRIPT = {
    "ID": "string",
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}

ANY_TYPE = "any"
NULL_TYPE = "null"
EMPTY_ARGS_TYPE = "{}"
DEFAULT_CONTEXT_NAME = "Context"


def upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def get_scalar_type(scalar_name: str, scalars: dict[str, str] | None = None) -> str:
    """Get the TypeScript type for a GraphQL scalar, custom scalars default to `any`."""
    if scalar_name in GRAPHQL_SCALAR_TO_TYPESCRIPT:
        return GRAPHQL_SCALAR_TO_TYPESCRIPT[scalar_name]
    return (scalars or {}).get(scalar_name, ANY_TYPE)


def get_model_name(type_name: str, model_map: ModelMap, empty_type: str = ANY_TYPE) -> str:
    """Name of the host model a schema type is mapped to, or `empty_type` when it is unmapped."""
    model = model_map.get(type_name)
    if model is None:
        return empty_type
    return model.name


def get_context_name(context: ContextDefinition | None) -> str:
    if context is None:
        return DEFAULT_CONTEXT_NAME
    return context.name


def print_type_reference(
    type_ref: TypeReference,
    model_map: ModelMap,
    scalars: dict[str, str] | None = None,
) -> str:
    """
    Render a type reference as a TypeScript type expression.

    Items are resolved first and then wrapped into an array, the outer nullability is applied last:
    `[Post]!` renders as `(Post | null)[]` and `[Post!]` as `Post[] | null`.

    Args:
        type_ref: The reference to render
        model_map: Schema type name to host model mapping, used for object types
        scalars: Optional custom scalar overrides

    Returns:
        str: The TypeScript type expression
    """
    if type_ref.is_scalar:
        base = get_scalar_type(type_ref.name, scalars)
    elif type_ref.is_enum or type_ref.is_input:
        base = type_ref.name
    else:
        base = get_model_name(type_ref.name, model_map)

    if type_ref.is_list:
        item = base if type_ref.is_item_required else f"({base} | {NULL_TYPE})"
        base = f"{item}[]"

    if not type_ref.is_required:
        return f"{base} | {NULL_TYPE}"
    return base


def print_field_like_type(
    field: FieldDescription | ArgumentDescription,
    model_map: ModelMap,
    scalars: dict[str, str] | None = None,
) -> str:
    return print_type_reference(field.type, model_map, scalars)


def render_enums(args: GenerateArgs) -> list[str]:
    """Render each schema enum as a union of string literals."""
    return [
        f"type {enum_type.name} = " + " | ".join(f"'{value}'" for value in enum_type.enum_values)
        for enum_type in args.enum_types
    ]


def group_models_name_by_import_path(models: list[ModelMapEntry]) -> dict[str, list[str]]:
    """
    Group host model names by the module they are declared in.

    Paths keep the order they are first seen in and each name is listed once per path.
    """
    grouped: dict[str, list[str]] = {}
    for model in models:
        names = grouped.setdefault(model.path, [])
        if model.name not in names:
            names.append(model.name)
    return grouped


def render_default_resolvers(type_: TypeDescription, model_map: ModelMap) -> list[str]:
    """
    Render the default resolvers of an object type.

    A default resolver reads the field from `parent` and exists for each schema field that the
    mapped host model declares. Optional host fields resolve to `null` instead of `undefined`.

    Returns:
        list[str]: One `name: (parent: Model) => ...` member per field, empty when unmapped.
    """
    model = model_map.get(type_.name)
    if model is None:
        return []

    model_fields = {model_field.name: model_field for model_field in model.fields}
    members = []
    for field in type_.fields:
        model_field = model_fields.get(field.name)
        if model_field is None:
            continue
        getter = f"parent.{field.name}"
        if model_field.optional:
            getter = f"{getter} === undefined ? null : {getter}"
        members.append(f"{field.name}: (parent: {model.name}) => {getter}")
    return members

from functools import reduce

from resolvergen.models import InputTypesMap, TypeDescription, TypeToInputTypeAssociation


def build_input_types_map(types: list[TypeDescription]) -> InputTypesMap:
    """Index every input type by name. A later type with the same name replaces an earlier one."""

    def add_input_type(input_types: InputTypesMap, type_: TypeDescription) -> InputTypesMap:
        if type_.is_input:
            input_types[type_.name] = type_
        return input_types

    return reduce(add_input_type, types, {})


def get_referenced_input_type_names(type_: TypeDescription) -> list[str]:
    """Input type names referenced by the arguments of a type, in field then argument order."""
    return [argument.type.name for field in type_.fields for argument in field.arguments if argument.type.is_input]


def build_type_to_input_type_association(types: list[TypeDescription]) -> TypeToInputTypeAssociation:
    """
    Map each object type to the input types its field arguments reference.

    Only object types referencing at least one input type get an entry. Names are kept in
    declaration order and may repeat, `get_distinct_input_types` collapses the repeats.

    Args:
        types: All schema types in declaration order

    Returns:
        TypeToInputTypeAssociation: Object type name to referenced input type names
    """

    def add_association(association: TypeToInputTypeAssociation, type_: TypeDescription) -> TypeToInputTypeAssociation:
        if not type_.is_object:
            return association
        input_type_names = get_referenced_input_type_names(type_)
        if input_type_names:
            association[type_.name] = input_type_names
        return association

    return reduce(add_association, types, {})


def analyze_input_types(types: list[TypeDescription]) -> tuple[TypeToInputTypeAssociation, InputTypesMap]:
    return build_type_to_input_type_association(types), build_input_types_map(types)


def get_distinct_input_types(
    type_name: str,
    type_to_input_type_association: TypeToInputTypeAssociation,
    input_types_map: InputTypesMap,
) -> list[TypeDescription]:
    """
    Input types to declare inside the namespace of an object type.

    Args:
        type_name: Name of the object type
        type_to_input_type_association: Result of `build_type_to_input_type_association`
        input_types_map: Result of `build_input_types_map`

    Returns:
        list[TypeDescription]: Each referenced input type once, in order of first reference

    Raises:
        KeyError: If a referenced input type is missing from `input_types_map`
    """
    input_type_names = type_to_input_type_association.get(type_name)
    if not input_type_names:
        return []

    seen: set[str] = set()
    distinct_input_types = []
    for input_type_name in input_type_names:
        if input_type_name in seen:
            continue
        seen.add(input_type_name)
        distinct_input_types.append(input_types_map[input_type_name])
    return distinct_input_types

from pathlib import Path

import pytest
from graphql import build_schema

from resolvergen.models import (
    ArgumentDescription,
    FieldDescription,
    ModelField,
    ModelMap,
    ModelMapEntry,
    TypeDescription,
    TypeReference,
)
from resolvergen.schema.reader import read_types


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    SCHEMA: Path = TESTS_DATA_DIR / "schema.graphql"
    CONFIG: Path = TESTS_DATA_DIR / "resolvergen.yml"


def types_from_sdl(schema_str: str) -> list[TypeDescription]:
    """Build type descriptions straight from SDL."""
    return read_types(build_schema(schema_str))


def scalar(name: str, required: bool = False) -> TypeReference:
    return TypeReference(name=name, is_scalar=True, is_required=required)


def object_ref(name: str, required: bool = False, is_list: bool = False, item_required: bool = False) -> TypeReference:
    return TypeReference(
        name=name,
        is_object=True,
        is_required=required,
        is_list=is_list,
        is_item_required=item_required,
    )


def input_ref(name: str, required: bool = False) -> TypeReference:
    return TypeReference(name=name, is_input=True, is_required=required)


def field(name: str, type_ref: TypeReference, *arguments: tuple[str, TypeReference]) -> FieldDescription:
    return FieldDescription(
        name=name,
        type=type_ref,
        arguments=[ArgumentDescription(name=arg_name, type=arg_type) for arg_name, arg_type in arguments],
    )


@pytest.fixture
def model_map() -> ModelMap:
    return {
        "User": ModelMapEntry(
            name="UserModel",
            path="./models",
            fields=[ModelField(name="id"), ModelField(name="email", optional=True)],
        ),
        "Post": ModelMapEntry(name="PostModel", path="./models"),
        "Comment": ModelMapEntry(name="CommentModel", path="./comments"),
        "PostStatus": ModelMapEntry(name="PostStatus", path="./models", is_enum=True),
    }


@pytest.fixture(scope="module")
def schema_types() -> list[TypeDescription]:
    assert TestSchemaData.SCHEMA.exists(), f"Missing test file: {TestSchemaData.SCHEMA}"
    return types_from_sdl(TestSchemaData.SCHEMA.read_text())

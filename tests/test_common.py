import pytest

from resolvergen.generators.common import (
    get_context_name,
    get_model_name,
    get_scalar_type,
    group_models_name_by_import_path,
    print_type_reference,
    render_default_resolvers,
    render_enums,
    upper_first,
)
from resolvergen.models import (
    ContextDefinition,
    GenerateArgs,
    ModelMap,
    ModelMapEntry,
    TypeDescription,
    TypeReference,
)
from tests.conftest import field, object_ref, scalar


class TestFieldTypePrinter:
    @pytest.mark.parametrize(
        "scalar_name,expected",
        [
            ("ID", "string"),
            ("String", "string"),
            ("Int", "number"),
            ("Float", "number"),
            ("Boolean", "boolean"),
            ("DateTime", "any"),
        ],
    )
    def test_builtin_and_custom_scalars(self, scalar_name: str, expected: str) -> None:
        assert print_type_reference(scalar(scalar_name, required=True), {}) == expected

    def test_custom_scalar_override(self) -> None:
        assert get_scalar_type("DateTime", {"DateTime": "Date"}) == "Date"
        assert get_scalar_type("Int", {"Int": "bigint"}) == "number"

    def test_nullable_reference_is_unioned_with_null(self) -> None:
        assert print_type_reference(scalar("String"), {}) == "string | null"

    def test_enum_and_input_print_their_own_name(self) -> None:
        enum_ref = TypeReference(name="PostStatus", is_enum=True, is_required=True)
        input_ref = TypeReference(name="PostFilter", is_input=True)

        assert print_type_reference(enum_ref, {}) == "PostStatus"
        assert print_type_reference(input_ref, {}) == "PostFilter | null"

    def test_object_prints_mapped_model(self, model_map: ModelMap) -> None:
        assert print_type_reference(object_ref("Post", required=True), model_map) == "PostModel"

    def test_unmapped_object_prints_any(self) -> None:
        assert print_type_reference(object_ref("Post", required=True), {}) == "any"

    @pytest.mark.parametrize(
        "required,item_required,expected",
        [
            (True, True, "PostModel[]"),
            (True, False, "(PostModel | null)[]"),
            (False, True, "PostModel[] | null"),
            (False, False, "(PostModel | null)[] | null"),
        ],
    )
    def test_list_and_nullability_compose(
        self, model_map: ModelMap, required: bool, item_required: bool, expected: str
    ) -> None:
        type_ref = object_ref("Post", required=required, is_list=True, item_required=item_required)
        assert print_type_reference(type_ref, model_map) == expected


class TestNaming:
    def test_upper_first(self) -> None:
        assert upper_first("postsByAuthor") == "PostsByAuthor"
        assert upper_first("user_id") == "User_id"
        assert upper_first("") == ""

    def test_get_model_name(self, model_map: ModelMap) -> None:
        assert get_model_name("User", model_map) == "UserModel"
        assert get_model_name("Unknown", model_map) == "any"
        assert get_model_name("Unknown", model_map, "undefined") == "undefined"

    def test_get_context_name(self) -> None:
        assert get_context_name(None) == "Context"
        assert get_context_name(ContextDefinition(name="AppContext", path="./context")) == "AppContext"


def test_render_enums() -> None:
    args = GenerateArgs(
        types=[
            TypeDescription(name="User", is_object=True),
            TypeDescription(name="PostStatus", is_enum=True, enum_values=["DRAFT", "PUBLISHED"]),
        ]
    )
    assert render_enums(args) == ["type PostStatus = 'DRAFT' | 'PUBLISHED'"]


def test_group_models_name_by_import_path() -> None:
    models = [
        ModelMapEntry(name="UserModel", path="./models"),
        ModelMapEntry(name="CommentModel", path="./comments"),
        ModelMapEntry(name="PostModel", path="./models"),
        ModelMapEntry(name="UserModel", path="./models"),
    ]

    grouped = group_models_name_by_import_path(models)

    assert list(grouped) == ["./models", "./comments"]
    assert grouped["./models"] == ["UserModel", "PostModel"]
    assert grouped["./comments"] == ["CommentModel"]


class TestDefaultResolvers:
    def test_fields_shared_with_model(self, model_map: ModelMap) -> None:
        user = TypeDescription(
            name="User",
            is_object=True,
            fields=[
                field("id", scalar("ID", required=True)),
                field("name", scalar("String", required=True)),
                field("email", scalar("String")),
            ],
        )

        assert render_default_resolvers(user, model_map) == [
            "id: (parent: UserModel) => parent.id",
            "email: (parent: UserModel) => parent.email === undefined ? null : parent.email",
        ]

    def test_unmapped_type_has_no_default_resolvers(self) -> None:
        user = TypeDescription(name="User", is_object=True, fields=[field("id", scalar("ID", required=True))])
        assert render_default_resolvers(user, {}) == []

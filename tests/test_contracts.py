from pydantic import TypeAdapter

from resolvergen.generators.contracts import (
    ResolverContract,
    StandardContract,
    SubscriptionContract,
    build_args_interface,
    build_input_type_interface,
    build_resolver_contract,
)
from resolvergen.models import ContextDefinition, ModelMap, TypeDescription, TypeReference
from tests.conftest import field, input_ref, object_ref, scalar

USER = TypeDescription(name="User", is_object=True)
SUBSCRIPTION = TypeDescription(name="Subscription", is_object=True, is_subscription=True)


class TestArgsInterface:
    def test_field_without_arguments_has_no_bundle(self, model_map: ModelMap) -> None:
        assert build_args_interface(field("name", scalar("String")), model_map) is None

    def test_bundle_members_match_arguments(self, model_map: ModelMap) -> None:
        posts = field(
            "postsByAuthor",
            object_ref("Post", is_list=True),
            ("authorId", scalar("ID", required=True)),
            ("filter", input_ref("PostFilter")),
        )

        args_interface = build_args_interface(posts, model_map)

        assert args_interface is not None
        assert args_interface.name == "ArgsPostsByAuthor"
        assert [(member.name, member.type) for member in args_interface.members] == [
            ("authorId", "string"),
            ("filter", "PostFilter | null"),
        ]

    def test_input_type_interface(self, model_map: ModelMap) -> None:
        post_input = TypeDescription(
            name="PostInput",
            is_input=True,
            fields=[
                field("title", scalar("String", required=True)),
                field("status", TypeReference(name="PostStatus", is_enum=True)),
            ],
        )

        interface = build_input_type_interface(post_input, model_map)

        assert interface.name == "PostInput"
        assert [(member.name, member.type) for member in interface.members] == [
            ("title", "string"),
            ("status", "PostStatus | null"),
        ]


class TestStandardContract:
    def test_field_without_arguments_takes_empty_args(self, model_map: ModelMap) -> None:
        contract = build_resolver_contract(field("name", scalar("String", required=True)), USER, model_map)

        assert isinstance(contract, StandardContract)
        assert contract.resolver_name == "NameResolver"
        assert contract.render() == (
            "(parent: UserModel, args: {}, ctx: Context, info: GraphQLResolveInfo) => string | Promise<string>"
        )

    def test_field_with_arguments_uses_bundle(self, model_map: ModelMap) -> None:
        posts = field("posts", object_ref("Post", required=True, is_list=True, item_required=True), ("first", scalar("Int")))
        context = ContextDefinition(name="AppContext", path="./context")

        contract = build_resolver_contract(posts, USER, model_map, context)

        assert contract.signature.args == "ArgsPosts"
        assert contract.signature.ctx == "AppContext"
        assert contract.return_type == "PostModel[]"

    def test_unmapped_parent_is_any(self) -> None:
        contract = build_resolver_contract(field("name", scalar("String")), USER, {})

        assert contract.signature.parent == "any"


class TestSubscriptionContract:
    def test_subscription_root_fields_get_subscribe_and_resolve(self, model_map: ModelMap) -> None:
        post_created = field("postCreated", object_ref("Post", required=True))

        contract = build_resolver_contract(post_created, SUBSCRIPTION, model_map)

        assert isinstance(contract, SubscriptionContract)
        assert contract.subscribe_type.endswith(
            "=> AsyncIterator<PostModel> | Promise<AsyncIterator<PostModel>>"
        )
        assert contract.resolve_type.endswith("=> PostModel | Promise<PostModel>")
        assert "subscribe: " in contract.render()
        assert "resolve?: " in contract.render()

    def test_kind_is_driven_by_tag_not_by_name(self, model_map: ModelMap) -> None:
        untagged = TypeDescription(name="Subscription", is_object=True)
        tagged = TypeDescription(name="Events", is_object=True, is_subscription=True)
        post_created = field("postCreated", object_ref("Post"))

        assert build_resolver_contract(post_created, untagged, model_map).kind == "standard"
        assert build_resolver_contract(post_created, tagged, model_map).kind == "subscription"

    def test_contract_variant_is_discriminated_by_kind(self) -> None:
        adapter: TypeAdapter[StandardContract | SubscriptionContract] = TypeAdapter(ResolverContract)
        signature = {"parent": "any", "args": "{}", "ctx": "Context"}

        contract = adapter.validate_python(
            {
                "kind": "subscription",
                "field_name": "postCreated",
                "resolver_name": "PostCreatedResolver",
                "signature": signature,
                "return_type": "any",
            }
        )

        assert isinstance(contract, SubscriptionContract)

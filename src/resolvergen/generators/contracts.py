"""Resolver contracts synthesized for every field of an object type."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from resolvergen.generators.common import (
    EMPTY_ARGS_TYPE,
    get_context_name,
    get_model_name,
    print_field_like_type,
    upper_first,
)
from resolvergen.models import ContextDefinition, FieldDescription, ModelMap, TypeDescription

RESOLVE_INFO_TYPE = "GraphQLResolveInfo"


class TSMember(BaseModel):
    """A member of a TypeScript interface."""

    name: str
    type: str


class TSInterface(BaseModel):
    """A TypeScript interface declaration."""

    name: str
    members: list[TSMember] = Field(default_factory=list)


class ResolverSignature(BaseModel):
    """The four parameters every resolver receives."""

    parent: str
    args: str
    ctx: str
    info: str = RESOLVE_INFO_TYPE

    def render(self) -> str:
        return f"(parent: {self.parent}, args: {self.args}, ctx: {self.ctx}, info: {self.info})"


class StandardContract(BaseModel):
    """A single callable returning the field value or a promise of it."""

    kind: Literal["standard"] = "standard"
    field_name: str
    resolver_name: str
    signature: ResolverSignature
    return_type: str

    def render(self) -> str:
        return f"{self.signature.render()} => {self.return_type} | Promise<{self.return_type}>"


class SubscriptionContract(BaseModel):
    """
    A subscription field contract.

    `subscribe` produces the event stream and the optional `resolve` shapes each emitted value.
    """

    kind: Literal["subscription"] = "subscription"
    field_name: str
    resolver_name: str
    signature: ResolverSignature
    return_type: str

    @property
    def subscribe_type(self) -> str:
        iterator = f"AsyncIterator<{self.return_type}>"
        return f"{self.signature.render()} => {iterator} | Promise<{iterator}>"

    @property
    def resolve_type(self) -> str:
        return f"{self.signature.render()} => {self.return_type} | Promise<{self.return_type}>"

    def render(self) -> str:
        return f"{{ subscribe: {self.subscribe_type}; resolve?: {self.resolve_type} }}"


ResolverContract = Annotated[StandardContract | SubscriptionContract, Field(discriminator="kind")]


def get_args_type_name(field: FieldDescription) -> str:
    return f"Args{upper_first(field.name)}"


def get_resolver_name(field: FieldDescription) -> str:
    return f"{upper_first(field.name)}Resolver"


def build_args_interface(
    field: FieldDescription,
    model_map: ModelMap,
    scalars: dict[str, str] | None = None,
) -> TSInterface | None:
    """The argument bundle of a field, or None when the field takes no arguments."""
    if not field.arguments:
        return None

    return TSInterface(
        name=get_args_type_name(field),
        members=[
            TSMember(name=argument.name, type=print_field_like_type(argument, model_map, scalars))
            for argument in field.arguments
        ],
    )


def build_input_type_interface(
    input_type: TypeDescription,
    model_map: ModelMap,
    scalars: dict[str, str] | None = None,
) -> TSInterface:
    return TSInterface(
        name=input_type.name,
        members=[
            TSMember(name=field.name, type=print_field_like_type(field, model_map, scalars))
            for field in input_type.fields
        ],
    )


def build_resolver_signature(
    field: FieldDescription,
    type_: TypeDescription,
    model_map: ModelMap,
    context: ContextDefinition | None,
) -> ResolverSignature:
    return ResolverSignature(
        parent=get_model_name(type_.name, model_map),
        args=get_args_type_name(field) if field.arguments else EMPTY_ARGS_TYPE,
        ctx=get_context_name(context),
    )


def build_resolver_contract(
    field: FieldDescription,
    type_: TypeDescription,
    model_map: ModelMap,
    context: ContextDefinition | None = None,
    scalars: dict[str, str] | None = None,
) -> StandardContract | SubscriptionContract:
    """
    Synthesize the contract a resolver of `field` must satisfy.

    Fields of the subscription root get a `subscribe`/`resolve` pair, every other field a
    single callable.

    Args:
        field: The field to build the contract for
        type_: The object type owning the field
        model_map: Schema type name to host model mapping
        context: Optional context definition
        scalars: Optional custom scalar overrides

    Returns:
        StandardContract | SubscriptionContract: The contract for the field
    """
    contract_class: type[StandardContract] | type[SubscriptionContract] = (
        SubscriptionContract if type_.is_subscription else StandardContract
    )
    return contract_class(
        field_name=field.name,
        resolver_name=get_resolver_name(field),
        signature=build_resolver_signature(field, type_, model_map, context),
        return_type=print_field_like_type(field, model_map, scalars),
    )

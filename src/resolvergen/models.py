"""Pydantic models describing the schema types and host models fed into generation."""

from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TypeReference(FrozenModel):
    """
    The declared type of a field or argument.

    `is_required` is the nullability of the reference itself and `is_item_required` is the
    nullability of the list items, so `[Post]!` and `[Post!]` are distinct references.
    """

    name: str
    is_scalar: bool = False
    is_enum: bool = False
    is_input: bool = False
    is_object: bool = False
    is_list: bool = False
    is_required: bool = False
    is_item_required: bool = False


class ArgumentDescription(FrozenModel):
    """Represents a single argument of a field."""

    name: str
    type: TypeReference


class FieldDescription(FrozenModel):
    """Represents a field of an object or input type."""

    name: str
    type: TypeReference
    arguments: list[ArgumentDescription] = Field(default_factory=list)


class TypeDescription(FrozenModel):
    """Represents an object, input or enum type of the schema."""

    name: str
    is_object: bool = False
    is_input: bool = False
    is_enum: bool = False
    is_subscription: bool = False
    fields: list[FieldDescription] = Field(default_factory=list)
    enum_values: list[str] = Field(default_factory=list)


class ModelField(FrozenModel):
    """A field known to exist on a host model type."""

    name: str
    optional: bool = False


class ModelMapEntry(FrozenModel):
    """Host model type that a schema type is mapped to."""

    name: str
    path: str
    is_enum: bool = False
    fields: list[ModelField] = Field(default_factory=list)


class ContextDefinition(FrozenModel):
    """The context type passed as third parameter to every resolver."""

    name: str
    path: str


ModelMap = dict[str, ModelMapEntry]
InputTypesMap = dict[str, TypeDescription]
TypeToInputTypeAssociation = dict[str, list[str]]


class GenerateArgs(FrozenModel):
    """Everything a generation run needs."""

    types: list[TypeDescription]
    model_map: ModelMap = Field(default_factory=dict)
    context: ContextDefinition | None = None
    scalars: dict[str, str] = Field(default_factory=dict)

    @property
    def object_types(self) -> list[TypeDescription]:
        return [type_ for type_ in self.types if type_.is_object]

    @property
    def enum_types(self) -> list[TypeDescription]:
        return [type_ for type_ in self.types if type_.is_enum]

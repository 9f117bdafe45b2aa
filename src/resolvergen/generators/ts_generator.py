from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import BaseModel, Field

from resolvergen import log
from resolvergen.generators.common import (
    get_context_name,
    group_models_name_by_import_path,
    render_default_resolvers,
    render_enums,
)
from resolvergen.generators.contracts import (
    ResolverContract,
    TSInterface,
    build_args_interface,
    build_input_type_interface,
    build_resolver_contract,
)
from resolvergen.generators.formatter import FormatResult, format_code
from resolvergen.generators.inputs import analyze_input_types, get_distinct_input_types
from resolvergen.models import GenerateArgs, TypeDescription


class ResolverNamespace(BaseModel):
    """Declarations emitted inside the `<Type>Resolvers` namespace of one object type."""

    type_name: str
    default_resolvers: list[str] = Field(default_factory=list)
    input_types: list[TSInterface] = Field(default_factory=list)
    args_interfaces: list[TSInterface] = Field(default_factory=list)
    contracts: list[ResolverContract] = Field(default_factory=list)

    @property
    def interfaces(self) -> list[TSInterface]:
        return self.input_types + self.args_interfaces


class TypeScriptResolverGenerator:
    """
    Generator producing TypeScript resolver typings from schema type descriptions.

    Each object type becomes a `<Type>Resolvers` namespace holding its default resolvers, the
    input types its arguments use, one interface per argument bundle, one resolver type per
    field and an aggregate `Type` interface. A trailing `Resolvers` interface ties them together.
    """

    def __init__(self, args: GenerateArgs):
        self.args = args
        self.type_to_input_type_association, self.input_types_map = analyze_input_types(args.types)

        self.env = Environment(
            loader=PackageLoader("resolvergen.generators", "templates"),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def generate(self) -> str:
        """
        Generate the TypeScript declarations.

        Returns:
            str: Unformatted TypeScript source
        """
        object_types = self.args.object_types
        log.info(f"Generating resolver types for {len(object_types)} object types")

        namespaces = self.render_namespaces()
        template = self.env.get_template("resolvers.ts.j2")
        result = template.render(self._build_template_vars(namespaces))

        log.debug(f"Generated {len(result)} characters of TypeScript")
        return result + "\n"

    def render_namespaces(self) -> list[str]:
        """Render one namespace per object type, in schema order."""
        template = self.env.get_template("namespace.ts.j2")
        return [template.render(ns=self.build_namespace(type_)) for type_ in self.args.object_types]

    def build_namespace(self, type_: TypeDescription) -> ResolverNamespace:
        model_map = self.args.model_map
        scalars = self.args.scalars

        input_types = get_distinct_input_types(type_.name, self.type_to_input_type_association, self.input_types_map)
        args_interfaces = [build_args_interface(field, model_map, scalars) for field in type_.fields]

        return ResolverNamespace(
            type_name=type_.name,
            default_resolvers=render_default_resolvers(type_, model_map),
            input_types=[build_input_type_interface(input_type, model_map, scalars) for input_type in input_types],
            args_interfaces=[args_interface for args_interface in args_interfaces if args_interface is not None],
            contracts=[
                build_resolver_contract(field, type_, model_map, self.args.context, scalars) for field in type_.fields
            ],
        )

    def get_model_imports(self) -> dict[str, list[str]]:
        """Host models to import, grouped by module path. Enum models are not imported."""
        models = [model for model in self.args.model_map.values() if not model.is_enum]
        return group_models_name_by_import_path(models)

    def _build_template_vars(self, namespaces: list[str]) -> dict[str, Any]:
        return {
            "model_imports": self.get_model_imports(),
            "context": self.args.context,
            "context_name": get_context_name(self.args.context),
            "enums": render_enums(self.args),
            "namespaces": namespaces,
            "object_type_names": [type_.name for type_ in self.args.object_types],
        }


def generate(args: GenerateArgs) -> str:
    """
    Generate TypeScript resolver typings for the given schema description.

    Args:
        args: Schema types, model map, optional context and scalar overrides

    Returns:
        str: Unformatted TypeScript source

    Raises:
        KeyError: If an argument references an input type missing from `args.types`
    """
    return TypeScriptResolverGenerator(args).generate()


def generate_code(args: GenerateArgs, format_output: bool = True) -> FormatResult:
    """
    Generate TypeScript resolver typings and format them.

    Args:
        args: Schema types, model map, optional context and scalar overrides
        format_output: Run the generated code through prettier

    Returns:
        FormatResult: The generated code and whether it was formatted
    """
    code = generate(args)
    if not format_output:
        return FormatResult(code=code, formatted=False)

    return format_code(code)


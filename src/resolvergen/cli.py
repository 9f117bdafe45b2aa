import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLError
from rich.traceback import install

from resolvergen import __version__, log
from resolvergen.config import DEFAULT_CONFIG_FILENAME, ResolvergenConfig, load_config
from resolvergen.generators import generate_code
from resolvergen.models import GenerateArgs, TypeDescription
from resolvergen.schema.loader import load_schema, resolve_graphql_files
from resolvergen.schema.reader import get_root_type_names, read_types
from resolvergen.writer import write_generated_code

DEFAULT_MODELS_PATH = "./models"


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        return resolve_graphql_files(list(value))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    multiple=True,
    help="The GraphQL schema file or directory containing schema files. Can be specified multiple times.",
)


optional_output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=False,
    help="Output file",
)


def read_schema_types(schemas: list[Path]) -> list[TypeDescription]:
    graphql_schema = load_schema(schemas)
    return read_types(graphql_schema)


def resolve_config(config_path: Path | None) -> ResolvergenConfig:
    """Load the given config, the default config file if present, or an empty config."""
    if config_path is None:
        default_path = Path(DEFAULT_CONFIG_FILENAME)
        if not default_path.is_file():
            log.debug(f"No {DEFAULT_CONFIG_FILENAME} found, using an empty configuration")
            return ResolvergenConfig()
        config_path = default_path
    return load_config(config_path)


@click.group(context_settings={"auto_envvar_prefix": "resolvergen"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


# Generate -> typescript resolver typings
# ----------
@cli.command
@schema_option
@optional_output_option
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"Configuration file (defaults to ./{DEFAULT_CONFIG_FILENAME} when present)",
)
@click.option(
    "--format/--no-format",
    "format_output",
    default=True,
    show_default=True,
    help="Format the generated code with prettier",
)
def generate(schemas: list[Path] | None, output: Path | None, config_path: Path | None, format_output: bool) -> None:
    """Generate TypeScript resolver typings from a GraphQL schema."""
    try:
        config = resolve_config(config_path)
        schema_paths = schemas or resolve_graphql_files(config.schema_paths)
        output = output or config.output
        if not schema_paths:
            raise click.UsageError("No schema given, use --schema or set 'schema' in the configuration")
        if output is None:
            raise click.UsageError("No output given, use --output or set 'output' in the configuration")

        args = GenerateArgs(
            types=read_schema_types(schema_paths),
            model_map=config.build_model_map(),
            context=config.build_context(),
            scalars=config.scalars,
        )
        result = generate_code(args, format_output=format_output)
        write_generated_code(result.code, output)

        log.key_value("Object types", len(args.object_types))
        if format_output and not result.formatted:
            log.hint("Install prettier or pass --no-format to skip formatting")
        log.success(f"Successfully generated resolver typings to {output}")

    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)
    except (ValueError, TypeError, GraphQLError, GraphQLFileSyntaxError) as e:
        log.error(f"Invalid input: {e}")
        sys.exit(1)


# Scaffold -> configuration
# ----------
@cli.command
@schema_option
@optional_output_option
def scaffold(schemas: list[Path] | None, output: Path | None) -> None:
    """Write a starter configuration mapping every object type to a host model."""
    if not schemas:
        raise click.UsageError("Missing option '--schema' / '-s'.")

    try:
        graphql_schema = load_schema(schemas)
        types = read_types(graphql_schema)
    except (OSError, TypeError, GraphQLError, GraphQLFileSyntaxError) as e:
        log.error(f"Could not read schema: {e}")
        sys.exit(1)

    root_type_names = get_root_type_names(graphql_schema)
    config: dict[str, Any] = {
        "schema": [str(schema) for schema in schemas],
        "output": "./generated/resolvers.ts",
        "models": {
            type_.name: {"name": type_.name, "path": DEFAULT_MODELS_PATH, "fields": [field.name for field in type_.fields]}
            for type_ in types
            if type_.is_object and type_.name not in root_type_names
        },
    }
    config_str = yaml.safe_dump(config, sort_keys=False)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        _ = output.write_text(config_str, encoding="utf-8")
        log.success(f"Wrote starter configuration to {output}")
    else:
        click.echo(config_str)


if __name__ == "__main__":
    cli()

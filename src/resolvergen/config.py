from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resolvergen import log
from resolvergen.models import ContextDefinition, ModelField, ModelMap, ModelMapEntry

DEFAULT_CONFIG_FILENAME = "resolvergen.yml"
CONTEXT_SEPARATOR = ":"


class ModelEntryConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str
    path: str
    is_enum: bool = Field(False, alias="enum")
    fields: list[ModelField] = Field(default_factory=list)

    @field_validator("fields", mode="before")
    @classmethod
    def expand_field_names(cls, fields: Any) -> Any:
        """Allow plain field names as a shorthand for required fields."""
        if not isinstance(fields, list):
            return fields
        return [{"name": field} if isinstance(field, str) else field for field in fields]


class ResolvergenConfig(BaseModel):
    """Contents of a resolvergen YAML configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_paths: list[Path] = Field(default_factory=list, alias="schema")
    output: Path | None = None
    context: str | None = None
    models: dict[str, ModelEntryConfig] = Field(default_factory=dict)
    scalars: dict[str, str] = Field(default_factory=dict)

    @field_validator("schema_paths", mode="before")
    @classmethod
    def ensure_list(cls, value: Any) -> Any:
        if isinstance(value, str | Path):
            return [value]
        return value

    @field_validator("context")
    @classmethod
    def validate_context(cls, value: str | None) -> str | None:
        if value is not None and CONTEXT_SEPARATOR not in value:
            raise ValueError(f"context must be of the form '<path>{CONTEXT_SEPARATOR}<TypeName>', got '{value}'")
        return value

    def resolve_paths(self, base_dir: Path) -> "ResolvergenConfig":
        """Make relative schema and output paths relative to `base_dir`."""
        return self.model_copy(
            update={
                "schema_paths": [path if path.is_absolute() else base_dir / path for path in self.schema_paths],
                "output": self.output if self.output is None or self.output.is_absolute() else base_dir / self.output,
            }
        )

    def build_model_map(self) -> ModelMap:
        return {
            type_name: ModelMapEntry(
                name=model.name,
                path=model.path,
                is_enum=model.is_enum,
                fields=model.fields,
            )
            for type_name, model in self.models.items()
        }

    def build_context(self) -> ContextDefinition | None:
        if self.context is None:
            return None
        path, _, name = self.context.rpartition(CONTEXT_SEPARATOR)
        return ContextDefinition(name=name, path=path)


def load_config(config_path: Path) -> ResolvergenConfig:
    """
    Load a resolvergen configuration file.

    Relative paths in the file are resolved against the directory holding it.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        ResolvergenConfig: The validated configuration

    Raises:
        ValueError: If the file is not valid YAML or does not match the configuration format
    """
    log.debug(f"Loading configuration from {config_path}")
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {config_path} must be a mapping")

    try:
        config = ResolvergenConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    return config.resolve_paths(config_path.parent)

# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads field bindings from a YAML or TOML schema file."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from paramparse.binding import FieldBinding, FieldKind
from paramparse.coercion import ValueType
from paramparse.exceptions import BindingConfigurationError
from paramparse.logger import logger
from paramparse.parameter_parser import ParameterParser


class RawBinding(BaseModel):
    """Raw binding entry of a schema file."""

    field: str
    name: str | None = None
    kind: FieldKind = FieldKind.PARAMETER
    type: ValueType = ValueType.STRING
    position: int | None = None
    required: bool = False

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> FieldKind:
        if isinstance(value, FieldKind):
            return value
        return FieldKind(str(value).strip().lower())

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ValueType:
        return ValueType.from_type(value)

    def to_binding(self) -> FieldBinding:
        if self.kind is FieldKind.OPTION:
            if not self.name:
                raise BindingConfigurationError(
                    f"option field '{self.field}' needs the option token as name"
                )
            return FieldBinding(
                field=self.field, name=self.name, kind=self.kind, value_type=ValueType.BOOL
            )
        return FieldBinding(
            field=self.field,
            name=self.name or self.field,
            kind=self.kind,
            value_type=self.type,
            position=self.position,
            required=self.required,
        )


class BindingSchema(BaseModel):
    """Parser settings and field bindings loaded from a schema file."""

    option_parsing: bool = True
    bindings: list[RawBinding] = Field(default_factory=list)

    def to_bindings(self) -> list[FieldBinding]:
        return [raw_binding.to_binding() for raw_binding in self.bindings]

    def parser(self) -> ParameterParser:
        """Return a fresh parser configured with this schema's option mode."""
        return ParameterParser(option_parsing=self.option_parsing)


def load_schema(file_path: Path | str) -> BindingSchema:
    """
    Load a binding schema from a YAML or TOML file.

    The file should contain a dictionary with an optional `option_parsing` flag and
    a list of `bindings`, each with at least a `field`.

    Args:
        file_path (Path | str): Path to the schema file.

    Returns:
        BindingSchema: The validated schema.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is not a dictionary,
            or the YAML cannot be parsed.
        BindingConfigurationError: If a binding entry is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such schema file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as schema_file:
        if suffix in (".yaml", ".yml"):
            try:
                raw_schema = yaml.safe_load(schema_file)
            except yaml.YAMLError as error:
                raise ValueError(f"Invalid schema {path}: {error}") from error
        elif suffix == ".toml":
            raw_schema = toml.load(schema_file)
        else:
            raise ValueError(f"Unsupported schema format: {suffix}")

    if not isinstance(raw_schema, dict):
        raise ValueError(
            "Schema file must contain a dictionary with a list of bindings.\n"
            "Example:\n"
            "option_parsing: true\n"
            "bindings:\n"
            "  - field: path\n"
            "    required: true"
        )

    try:
        schema = BindingSchema.model_validate(raw_schema)
    except ValidationError as error:
        raise BindingConfigurationError(f"Invalid schema {path}: {error}") from error
    logger.debug("Loaded %d bindings from %s", len(schema.bindings), path)
    return schema

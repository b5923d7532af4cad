# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative binding of parsed values onto an object.

A `FieldBinding` describes one attribute of a target object and where its value
comes from: a named or positional parameter (`FieldKind.PARAMETER`) or the presence
of a boolean option (`FieldKind.OPTION`). `bind()` validates every binding, resolves
every value through the parser's typed accessors, and only then assigns the values
with `setattr`, so a failed lookup leaves the target untouched.

Example:
    @dataclass
    class Settings:
        path: str = ""
        timeout: int = 0
        forced: bool = False

    bindings = [
        parameter("path", required=True),
        parameter("timeout", position=0, required=True, value_type=int),
        option("forced", "-g"),
    ]
    settings = parser.bind(Settings(), bindings)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

from paramparse.coercion import ValueType
from paramparse.exceptions import BindingConfigurationError
from paramparse.logger import logger

if TYPE_CHECKING:
    from paramparse.parameter_parser import ParameterParser


class FieldKind(Enum):
    """Where a bound field takes its value from."""

    PARAMETER = "parameter"
    OPTION = "option"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldBinding:
    """
    Binding of one target attribute.

    Attributes:
        field (str): Attribute name on the target object.
        name (str): Parameter name, or the option token with its prefix (`-g`).
        kind (FieldKind): Parameter or option.
        value_type (Any): A `ValueType`, alias string or Python type. Options are bool.
        position (int | None): Positional fallback slot for a parameter.
        required (bool): Whether a parameter must be present.
    """

    field: str
    name: str
    kind: FieldKind = FieldKind.PARAMETER
    value_type: Any = ValueType.STRING
    position: int | None = None
    required: bool = False

    def resolved_type(self) -> ValueType:
        try:
            return ValueType.from_type(self.value_type)
        except ValueError as error:
            raise BindingConfigurationError(
                f"field '{self.field}' has no accessor for type {self.value_type!r}"
            ) from error

    def validate(self, target: Any) -> ValueType:
        """
        Check this binding against the target object.

        Returns:
            ValueType: The resolved value type.

        Raises:
            BindingConfigurationError: If the declaration is inconsistent.
        """
        if not hasattr(target, self.field):
            raise BindingConfigurationError(
                f"target {type(target).__name__} has no field '{self.field}'"
            )
        value_type = self.resolved_type()
        if self.kind is FieldKind.OPTION:
            if value_type is not ValueType.BOOL:
                raise BindingConfigurationError(
                    f"option field '{self.field}' must be bool, not {value_type}"
                )
            return value_type
        if self.position is not None and self.position < 0:
            raise BindingConfigurationError(
                f"field '{self.field}' has a negative position {self.position}"
            )
        if not self.required and self.position is not None:
            raise BindingConfigurationError(
                f"field '{self.field}' binds parameter '{self.name}' which is not "
                "required but has a position attached. An optional parameter can "
                "not be resolved by position."
            )
        return value_type


def parameter(
    field: str,
    name: str | None = None,
    *,
    value_type: Any = ValueType.STRING,
    position: int | None = None,
    required: bool = False,
) -> FieldBinding:
    """Declare a parameter binding. `name` defaults to the field name."""
    return FieldBinding(
        field=field,
        name=name or field,
        kind=FieldKind.PARAMETER,
        value_type=value_type,
        position=position,
        required=required,
    )


def option(field: str, name: str) -> FieldBinding:
    """Declare an option binding. `name` is the option token, prefix included."""
    return FieldBinding(field=field, name=name, kind=FieldKind.OPTION, value_type=bool)


def resolve(parser: ParameterParser, binding: FieldBinding, value_type: ValueType) -> Any:
    if binding.kind is FieldKind.OPTION:
        return parser.has_option(binding.name)
    if binding.position is not None:
        return parser.get(binding.name, binding.position, binding.required, value_type)
    if binding.required:
        return parser.get_named(binding.name, value_type)
    return parser.get(binding.name, None, False, value_type)


def bind(parser: ParameterParser, target: Any, bindings: Iterable[FieldBinding]) -> Any:
    """
    Assign parsed values onto `target`.

    Args:
        parser (ParameterParser): A parser that has already consumed its tokens.
        target (Any): The object receiving the values.
        bindings (Iterable[FieldBinding]): One binding per target attribute.

    Returns:
        Any: The target object.

    Raises:
        BindingConfigurationError: If a binding is invalid for the target.
        MissingParameterError: If a required parameter is absent.
        TypeCoercionError: If a value cannot be converted.
    """
    bindings = list(bindings)
    seen: set[str] = set()
    for binding in bindings:
        if binding.field in seen:
            raise BindingConfigurationError(
                f"field '{binding.field}' is bound more than once"
            )
        seen.add(binding.field)
    value_types = [binding.validate(target) for binding in bindings]
    values = {
        binding.field: resolve(parser, binding, value_type)
        for binding, value_type in zip(bindings, value_types)
    }
    for field, value in values.items():
        setattr(target, field, value)
    logger.debug("Bound %d fields onto %s", len(values), type(target).__name__)
    return target

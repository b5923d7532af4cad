# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by paramparse.

Parse-time errors are raised while a token sequence is consumed, lookup errors
by the typed accessors, and configuration errors while bindings are validated.

All exceptions inherit from `ParamParseError`, the base exception for the package.

Exception Hierarchy:
- ParamParseError
    ├── DuplicateParameterError
    ├── ReservedParameterNameError
    ├── MissingParameterError
    │   └── MissingNamedParameterError
    ├── TypeCoercionError (also a ValueError)
    └── BindingConfigurationError
"""
from __future__ import annotations

from typing import Any


class ParamParseError(Exception):
    """Base exception for paramparse."""


class DuplicateParameterError(ParamParseError):
    """Raised when the same named parameter is supplied twice."""

    def __init__(self, name: str):
        super().__init__(f"parameter {name} already set")
        self.name = name


class ReservedParameterNameError(ParamParseError):
    """Raised when a named parameter uses the reserved positional key prefix."""

    def __init__(self, name: str):
        super().__init__(
            f"parameter name '{name}' uses the reserved '$' prefix for positional keys"
        )
        self.name = name


class MissingParameterError(ParamParseError):
    """Raised when a required parameter exists neither by name nor by position."""

    def __init__(self, name: str | None, position: int | None, message: str | None = None):
        if message is None:
            if position is None or position < 0:
                message = f"required argument {name} does not exist"
            else:
                message = (
                    f"required argument {name} does neither exist as named "
                    f"argument nor in position {position}"
                )
        super().__init__(message)
        self.name = name
        self.position = position


class MissingNamedParameterError(MissingParameterError):
    """Raised by the strict named and positional getters when a key is absent."""

    def __init__(self, key: str, position: int | None = None):
        super().__init__(key, position, f"argument with name {key} not passed")
        self.key = key


class TypeCoercionError(ParamParseError, ValueError):
    """Raised when a stored value cannot be converted to the requested type."""

    def __init__(self, key: str | None, value: Any, value_type: Any, reason: str = ""):
        message = f"value {value!r} of argument {key} is not a valid {value_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.key = key
        self.value = value
        self.value_type = value_type


class BindingConfigurationError(ParamParseError):
    """Raised when a field binding declaration is invalid."""

# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types and string coercion for paramparse accessors.

Parsed values are stored as raw strings. This module converts them on read into
one of the supported scalar types described by `ValueType`, and defines the zero
value returned for an optional lookup that found nothing.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_int: Convert a string to a bounded signed integer.
- coerce_float32: Convert a string to a float rounded to single precision.
- coerce_value: Convert a string to any `ValueType`.
- zero_value: Return the default for a `ValueType`.
"""
from __future__ import annotations

import re
import struct
from datetime import datetime
from enum import Enum
from typing import Any

from dateutil import parser as date_parser

from paramparse.exceptions import TypeCoercionError

INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf|infinity)",
    re.IGNORECASE,
)
_TRUE_VALUES = {"true", "t", "1", "yes", "on"}
_FALSE_VALUES = {"false", "f", "0", "no", "off"}


class ValueType(Enum):
    """
    Scalar types a stored value can be read as.

    Members:
        STRING: The raw string.
        INT: Signed 32-bit integer.
        LONG: Signed 64-bit integer.
        FLOAT: Single precision float.
        DOUBLE: Double precision float.
        BOOL: Boolean from a true/false style word.
        DATETIME: Date and time parsed by dateutil.

    Aliases:
        - "str" → "string"
        - "integer", "int32" → "int"
        - "int64" → "long"
        - "float32" → "float"
        - "float64" → "double"
        - "boolean" → "bool"
        - "date" → "datetime"
    """

    STRING = "string"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    DATETIME = "datetime"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "integer": "int",
            "int32": "int",
            "int64": "long",
            "float32": "float",
            "float64": "double",
            "boolean": "bool",
            "date": "datetime",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def from_type(cls, value_type: Any) -> ValueType:
        """
        Resolve a `ValueType` from a member, an alias string or a Python type.

        Python types map as `str → STRING`, `int → INT`, `float → DOUBLE`,
        `bool → BOOL` and `datetime → DATETIME`.

        Raises:
            ValueError: If no value type matches.
        """
        if isinstance(value_type, cls):
            return value_type
        if isinstance(value_type, str):
            return cls(value_type)
        builtin_types = {
            str: cls.STRING,
            int: cls.INT,
            float: cls.DOUBLE,
            bool: cls.BOOL,
            datetime: cls.DATETIME,
        }
        if value_type in builtin_types:
            return builtin_types[value_type]
        raise ValueError(f"Unsupported value type: {value_type!r}")

    def __str__(self) -> str:
        return self.value


def coerce_bool(value: str, key: str | None = None) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true', 't', '1', 'yes', 'on' and their false counterparts, ignoring case.

    Raises:
        TypeCoercionError: If the string is not a recognized boolean word.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    elif normalized in _FALSE_VALUES:
        return False
    raise TypeCoercionError(key, value, ValueType.BOOL)


def coerce_int(
    value: str,
    bounds: tuple[int, int] = INT32_RANGE,
    key: str | None = None,
    value_type: ValueType = ValueType.INT,
) -> int:
    """
    Convert a string of decimal digits with an optional sign to an int.

    Raises:
        TypeCoercionError: If the string is not an integer or falls outside `bounds`.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise TypeCoercionError(key, value, value_type)
    number = int(value)
    low, high = bounds
    if not low <= number <= high:
        raise TypeCoercionError(key, value, value_type, f"out of range [{low}, {high}]")
    return number


def parse_decimal(value: str, key: str | None, value_type: ValueType) -> float:
    """Parse plain decimal or exponent notation. Digit grouping with `_` is rejected."""
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise TypeCoercionError(key, value, value_type)
    return float(value)


def coerce_double(value: str, key: str | None = None) -> float:
    return parse_decimal(value, key, ValueType.DOUBLE)


def coerce_float32(value: str, key: str | None = None) -> float:
    """Convert a string to a float and round it to IEEE single precision."""
    number = parse_decimal(value, key, ValueType.FLOAT)
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError as error:
        raise TypeCoercionError(key, value, ValueType.FLOAT, str(error)) from error


def coerce_datetime(value: str, key: str | None = None) -> datetime:
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise TypeCoercionError(key, value, ValueType.DATETIME, str(error)) from error


def coerce_value(value: str, value_type: ValueType, key: str | None = None) -> Any:
    """
    Convert a raw stored string to the requested value type.

    Args:
        value (str): The raw string.
        value_type (ValueType): The requested type.
        key (str | None): The parameter key, used in error messages.

    Returns:
        Any: The converted value.

    Raises:
        TypeCoercionError: If conversion fails.
    """
    if value_type is ValueType.STRING:
        return value
    elif value_type is ValueType.INT:
        return coerce_int(value, INT32_RANGE, key, ValueType.INT)
    elif value_type is ValueType.LONG:
        return coerce_int(value, INT64_RANGE, key, ValueType.LONG)
    elif value_type is ValueType.FLOAT:
        return coerce_float32(value, key)
    elif value_type is ValueType.DOUBLE:
        return coerce_double(value, key)
    elif value_type is ValueType.BOOL:
        return coerce_bool(value, key)
    elif value_type is ValueType.DATETIME:
        return coerce_datetime(value, key)
    raise TypeCoercionError(key, value, value_type, "unsupported value type")


def zero_value(value_type: ValueType) -> Any:
    """Return the value an optional lookup yields when nothing was found."""
    zeros: dict[ValueType, Any] = {
        ValueType.STRING: "",
        ValueType.INT: 0,
        ValueType.LONG: 0,
        ValueType.FLOAT: 0.0,
        ValueType.DOUBLE: 0.0,
        ValueType.BOOL: False,
        ValueType.DATETIME: None,
    }
    return zeros[value_type]

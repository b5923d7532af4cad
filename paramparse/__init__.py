"""
Paramparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .binding import FieldBinding, FieldKind, bind, option, parameter
from .coercion import ValueType
from .config import BindingSchema, load_schema
from .exceptions import (
    BindingConfigurationError,
    DuplicateParameterError,
    MissingNamedParameterError,
    MissingParameterError,
    ParamParseError,
    ReservedParameterNameError,
    TypeCoercionError,
)
from .parameter_parser import ParameterParser
from .version import __version__

logger = logging.getLogger("paramparse")


__all__ = [
    "ParameterParser",
    "FieldBinding",
    "FieldKind",
    "ValueType",
    "bind",
    "parameter",
    "option",
    "BindingSchema",
    "load_schema",
    "ParamParseError",
    "DuplicateParameterError",
    "ReservedParameterNameError",
    "MissingParameterError",
    "MissingNamedParameterError",
    "TypeCoercionError",
    "BindingConfigurationError",
    "__version__",
]

# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParameterParser`, which turns a sequence of command-line
tokens into positional parameters, named parameters and boolean options, and reads
them back with type coercion.

It understands:
- positional values, numbered `$0`, `$1`, ... in encounter order regardless of how
  many named tokens sit between them
- named values as `--name=value`, `-name=value`, or `--name value` / `-name value`
  when option parsing is disabled
- boolean options as `--flag` / `-f` when option parsing is enabled (the default),
  kept with their prefix
- quoted values, `"..."` or `'...'`, which lose their first and last character

Public Interface:
- `parse(tokens)`: Consume a token sequence once.
- `set_option_parsing_enabled(flag)`: Choose between `--flag` options and
  `--name value` pairs.
- `contains(name_or_position)`, `has_option(token)`: Existence checks.
- `get_named_<type>(name)`, `get_positional_<type>(pos)`: Strict typed getters.
- `get_<type>(name, pos, required)`: Name first, position second, optional fallback
  to the type's zero value.
- `bind(target, bindings)`: Assign parsed values onto an object.

Example Usage:
    parser = ParameterParser()
    parser.parse(["--name=Dieter", "test", "-f"])
    parser.get_named_string("name")      # "Dieter"
    parser.get_positional_string(0)      # "test"
    parser.has_option("-f")              # True

A parser consumes a single token sequence. Construct a new one for every parse.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Mapping, Sequence

from paramparse.binding import FieldBinding, bind
from paramparse.coercion import ValueType, coerce_value, zero_value
from paramparse.exceptions import MissingNamedParameterError, MissingParameterError
from paramparse.logger import logger
from paramparse.states import StateMachine, Transition
from paramparse.store import ParameterStore
from paramparse.tokens import positional_key


class ParameterParser:
    """
    Token parser with typed accessors for named, positional and option values.

    Args:
        option_parsing (bool): When True (default) a dash token without `=` is stored
            as a boolean option. When False it names the value in the next token.
    """

    def __init__(self, option_parsing: bool = True) -> None:
        self._store = ParameterStore()
        self._option_parsing = option_parsing

    @property
    def option_parsing_enabled(self) -> bool:
        return self._option_parsing

    def set_option_parsing_enabled(self, enabled: bool) -> None:
        """Set option parsing mode. Only meaningful before `parse()` is called."""
        self._option_parsing = enabled

    def parse(self, tokens: Sequence[str] | None) -> None:
        """
        Consume a sequence of tokens.

        Each token is trimmed before it is classified. `None` or an empty sequence
        leaves the parser empty.

        Raises:
            DuplicateParameterError: If a named parameter appears twice. Parsing stops
                at the offending token.
            ReservedParameterNameError: If a named parameter starts with `$`.
        """
        if not tokens:
            return None
        machine = StateMachine(self._store, option_parsing=self._option_parsing)
        index = 0
        while index < len(tokens):
            transition = machine.step(tokens[index].strip())
            if transition is Transition.ADVANCE:
                index += 1
            elif transition is Transition.STOP:
                logger.debug("Parsing stopped at token %d of %d", index, len(tokens))
                break
        pending = machine.pending
        if pending:
            logger.warning(
                "Discarding '%s%s': no value followed it",
                pending.prefix,
                pending.pending_name,
            )
            pending.reset()
        logger.debug("Parsed %d tokens into %s", len(tokens), self._store)
        return None

    @property
    def positional_count(self) -> int:
        """Number of positional values seen."""
        return self._store.positional_count

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of every raw value, positional keys included."""
        return self._store.parameters

    @property
    def options(self) -> frozenset[str]:
        return self._store.options

    def contains(self, key: str | int | None) -> bool:
        """
        Check whether a named parameter or a positional slot holds a value.

        Args:
            key (str | int | None): A parameter name, or a position. Negative
                positions and None never match.
        """
        if key is None:
            return False
        if isinstance(key, int):
            if key < 0:
                return False
            key = positional_key(key)
        return key in self._store

    def has_option(self, token: str) -> bool:
        """Check for an option by its tokenized form, prefix included (`-f`)."""
        return self._store.has_option(token)

    def get_named(self, name: str, value_type: Any = ValueType.STRING) -> Any:
        """
        Read a named parameter.

        Raises:
            MissingNamedParameterError: If no value is stored under `name`.
            TypeCoercionError: If the value cannot be converted.
        """
        value_type = ValueType.from_type(value_type)
        raw = self._store.get_raw(name)
        if raw is None:
            raise MissingNamedParameterError(name)
        return coerce_value(raw, value_type, key=name)

    def get_positional(self, position: int, value_type: Any = ValueType.STRING) -> Any:
        """
        Read the positional parameter at `position`.

        Raises:
            MissingNamedParameterError: If the position holds no value.
            TypeCoercionError: If the value cannot be converted.
        """
        value_type = ValueType.from_type(value_type)
        key = positional_key(position)
        raw = self._store.get_raw(key) if position >= 0 else None
        if raw is None:
            raise MissingNamedParameterError(key, position)
        return coerce_value(raw, value_type, key=key)

    def get(
        self,
        name: str,
        position: int | None = None,
        required: bool = False,
        value_type: Any = ValueType.STRING,
    ) -> Any:
        """
        Read a parameter by name, falling back to its position.

        Args:
            name (str): The parameter name, tried first.
            position (int | None): The positional slot, tried second. Negative or None
                disables the fallback.
            required (bool): Raise when neither lookup resolves.
            value_type (Any): A `ValueType`, alias string or Python type.

        Returns:
            Any: The converted value, or the type's zero value when optional and absent.

        Raises:
            MissingParameterError: If required and neither name nor position resolves.
            TypeCoercionError: If the value found cannot be converted.
        """
        value_type = ValueType.from_type(value_type)
        if self.contains(name):
            return self.get_named(name, value_type)
        elif position is not None and self.contains(position):
            logger.debug("Read argument %s from slot %d", name, position)
            return self.get_positional(position, value_type)
        if required:
            raise MissingParameterError(name, position)
        return zero_value(value_type)

    def get_named_string(self, name: str) -> str:
        return self.get_named(name, ValueType.STRING)

    def get_named_int(self, name: str) -> int:
        return self.get_named(name, ValueType.INT)

    def get_named_long(self, name: str) -> int:
        return self.get_named(name, ValueType.LONG)

    def get_named_float(self, name: str) -> float:
        return self.get_named(name, ValueType.FLOAT)

    def get_named_double(self, name: str) -> float:
        return self.get_named(name, ValueType.DOUBLE)

    def get_named_bool(self, name: str) -> bool:
        return self.get_named(name, ValueType.BOOL)

    def get_named_datetime(self, name: str) -> datetime:
        return self.get_named(name, ValueType.DATETIME)

    def get_positional_string(self, position: int) -> str:
        return self.get_positional(position, ValueType.STRING)

    def get_positional_int(self, position: int) -> int:
        return self.get_positional(position, ValueType.INT)

    def get_positional_long(self, position: int) -> int:
        return self.get_positional(position, ValueType.LONG)

    def get_positional_float(self, position: int) -> float:
        return self.get_positional(position, ValueType.FLOAT)

    def get_positional_double(self, position: int) -> float:
        return self.get_positional(position, ValueType.DOUBLE)

    def get_positional_bool(self, position: int) -> bool:
        return self.get_positional(position, ValueType.BOOL)

    def get_positional_datetime(self, position: int) -> datetime:
        return self.get_positional(position, ValueType.DATETIME)

    def get_string(
        self, name: str, position: int | None = None, required: bool = False
    ) -> str:
        return self.get(name, position, required, ValueType.STRING)

    def get_int(
        self, name: str, position: int | None = None, required: bool = False
    ) -> int:
        return self.get(name, position, required, ValueType.INT)

    def get_long(
        self, name: str, position: int | None = None, required: bool = False
    ) -> int:
        return self.get(name, position, required, ValueType.LONG)

    def get_float(
        self, name: str, position: int | None = None, required: bool = False
    ) -> float:
        return self.get(name, position, required, ValueType.FLOAT)

    def get_double(
        self, name: str, position: int | None = None, required: bool = False
    ) -> float:
        return self.get(name, position, required, ValueType.DOUBLE)

    def get_bool(
        self, name: str, position: int | None = None, required: bool = False
    ) -> bool:
        return self.get(name, position, required, ValueType.BOOL)

    def get_datetime(
        self, name: str, position: int | None = None, required: bool = False
    ) -> datetime | None:
        return self.get(name, position, required, ValueType.DATETIME)

    def bind(self, target: Any, bindings: Iterable[FieldBinding]) -> Any:
        """Assign parsed values onto `target`. See `paramparse.binding.bind`."""
        return bind(self, target, bindings)

    def __str__(self) -> str:
        return (
            f"ParameterParser(option_parsing={self._option_parsing}, "
            f"positional={self.positional_count}, "
            f"named={len(self._store) - self.positional_count}, "
            f"options={len(self._store.options)})"
        )

    def __repr__(self) -> str:
        return str(self)

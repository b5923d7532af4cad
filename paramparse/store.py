# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Storage for parsed parameters and boolean options.

`ParameterStore` keeps raw string values in insertion order. Positional values are
stored under `$0`, `$1`, ... in encounter order; named values are stored under their
name without dash prefix and may only be inserted once. Options are kept in a set
exactly as they were tokenized, prefix included.

Values are never converted here. Coercion happens when a value is read through
`ParameterParser`.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from paramparse.exceptions import DuplicateParameterError, ReservedParameterNameError
from paramparse.logger import logger
from paramparse.tokens import POSITIONAL_KEY_PREFIX, positional_key


class ParameterStore:
    """Ordered map of raw parameter values plus the set of seen options."""

    def __init__(self) -> None:
        self._parameters: dict[str, str] = {}
        self._options: set[str] = set()
        self._positional_count = 0

    def add_positional(self, value: str) -> str:
        """Store a positional value under the next `$<n>` key and return that key."""
        key = positional_key(self._positional_count)
        self._positional_count += 1
        self._parameters[key] = value
        logger.debug("Stored positional %s = %r", key, value)
        return key

    def add_named(self, name: str, value: str) -> None:
        """
        Store a named value.

        Raises:
            DuplicateParameterError: If `name` was already stored.
            ReservedParameterNameError: If `name` starts with the positional prefix.
        """
        if name.startswith(POSITIONAL_KEY_PREFIX):
            raise ReservedParameterNameError(name)
        if name in self._parameters:
            raise DuplicateParameterError(name)
        self._parameters[name] = value
        logger.debug("Stored named %s = %r", name, value)

    def add_option(self, name: str) -> None:
        self._options.add(name)
        logger.debug("Stored option %s", name)

    def has_option(self, name: str) -> bool:
        return name in self._options

    def get_raw(self, key: str) -> str | None:
        return self._parameters.get(key)

    @property
    def positional_count(self) -> int:
        return self._positional_count

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of all stored values, positional and named."""
        return MappingProxyType(self._parameters)

    @property
    def options(self) -> frozenset[str]:
        return frozenset(self._options)

    def __contains__(self, key: object) -> bool:
        return key in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __str__(self) -> str:
        return (
            f"ParameterStore(positional={self._positional_count}, "
            f"named={len(self._parameters) - self._positional_count}, "
            f"options={len(self._options)})"
        )

    def __repr__(self) -> str:
        return str(self)

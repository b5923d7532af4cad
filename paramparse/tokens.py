# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Stateless helpers that classify raw command-line tokens.

A token starting with `--` is a long named token, one starting with `-` is a short
named token, anything else is positional. Quote handling is a literal substring
operation: when a token contains a double or single quote anywhere, its first and
last characters are dropped. There is no balance checking and no escape handling.

Functions:
- strip_quotes: Drop the surrounding quote characters of a token.
- classify: Return the `TokenKind` of a token.
- prefix_of: Return the dash prefix of a `TokenKind`.
- split_key_value: Split a `--name=value` token into its name and value.
"""
from __future__ import annotations

from enum import Enum

POSITIONAL_KEY_PREFIX = "$"
LONG_PREFIX = "--"
SHORT_PREFIX = "-"
KEY_VALUE_SEPARATOR = "="
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"


class TokenKind(Enum):
    """Classification of a single token by its prefix."""

    POSITIONAL = "positional"
    LONG = "long"
    SHORT = "short"

    def __str__(self) -> str:
        return self.value


def strip_quotes(token: str) -> str:
    """
    Remove the first and last character of a token that contains a quote.

    The double quote check wins when both quote characters are present. A token
    that merely contains a quote somewhere inside is truncated all the same.

    Args:
        token (str): The token or value to unquote.

    Returns:
        str: The token without its first and last character, or the token unchanged.
    """
    if DOUBLE_QUOTE in token:
        return token[1:-1]
    elif SINGLE_QUOTE in token:
        return token[1:-1]
    return token


def classify(token: str) -> TokenKind:
    """Classify a trimmed token. Long form is checked before short form."""
    if token.startswith(LONG_PREFIX):
        return TokenKind.LONG
    elif token.startswith(SHORT_PREFIX):
        return TokenKind.SHORT
    return TokenKind.POSITIONAL


def prefix_of(kind: TokenKind) -> str:
    """Return the dash prefix belonging to a token kind."""
    if kind is TokenKind.LONG:
        return LONG_PREFIX
    elif kind is TokenKind.SHORT:
        return SHORT_PREFIX
    return ""


def has_key_value(token: str) -> bool:
    return KEY_VALUE_SEPARATOR in token


def split_key_value(token: str, prefix: str) -> tuple[str, str]:
    """
    Split a named token on its first `=`.

    Args:
        token (str): A token such as `--path="C:\\tmp"`.
        prefix (str): The dash prefix to drop from the name.

    Returns:
        tuple[str, str]: The name without prefix and the quote-stripped value.
    """
    head, _, value = token.partition(KEY_VALUE_SEPARATOR)
    return strip_prefix(head, prefix), strip_quotes(value)


def strip_prefix(token: str, prefix: str) -> str:
    if prefix and token.startswith(prefix):
        return token[len(prefix) :]
    return token


def positional_key(position: int) -> str:
    """Return the store key of the positional argument at `position`."""
    return f"{POSITIONAL_KEY_PREFIX}{position}"

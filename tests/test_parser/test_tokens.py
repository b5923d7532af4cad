import pytest

from paramparse.tokens import (
    TokenKind,
    classify,
    positional_key,
    prefix_of,
    split_key_value,
    strip_quotes,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ('"abc"', "abc"),
        ("'abc'", "abc"),
        ("abc", "abc"),
        ('"C:\\DevTools"', "C:\\DevTools"),
        ('"it\'s"', "it's"),
        ("", ""),
    ],
)
def test_strip_quotes(token, expected):
    assert strip_quotes(token) == expected


def test_strip_quotes_trims_on_inner_quote():
    """A quote anywhere in the token drops the first and last character."""
    assert strip_quotes('ab"cd') == 'b"c'
    assert strip_quotes("don't") == "on'"


@pytest.mark.parametrize(
    "token, kind",
    [
        ("--verbose", TokenKind.LONG),
        ("--x", TokenKind.LONG),
        ("---x", TokenKind.LONG),
        ("--", TokenKind.LONG),
        ("-f", TokenKind.SHORT),
        ("-", TokenKind.SHORT),
        ("-5", TokenKind.SHORT),
        ("value", TokenKind.POSITIONAL),
        ("a-b", TokenKind.POSITIONAL),
        ("'-quoted'", TokenKind.POSITIONAL),
    ],
)
def test_classify(token, kind):
    assert classify(token) is kind


def test_prefix_of():
    assert prefix_of(TokenKind.LONG) == "--"
    assert prefix_of(TokenKind.SHORT) == "-"
    assert prefix_of(TokenKind.POSITIONAL) == ""


@pytest.mark.parametrize(
    "token, prefix, expected",
    [
        ("--name=Dieter", "--", ("name", "Dieter")),
        ("-length=2", "-", ("length", "2")),
        ('--path="C:\\DevTools"', "--", ("path", "C:\\DevTools")),
        ("--a=b=c", "--", ("a", "b=c")),
        ("-x=", "-", ("x", "")),
        ("--=value", "--", ("", "value")),
    ],
)
def test_split_key_value(token, prefix, expected):
    assert split_key_value(token, prefix) == expected


def test_positional_key():
    assert positional_key(0) == "$0"
    assert positional_key(12) == "$12"

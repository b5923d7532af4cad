import logging

import pytest

from paramparse import ParameterParser
from paramparse.exceptions import DuplicateParameterError, ReservedParameterNameError

SCENARIO_OPTIONS_ON = [
    "--name=Dieter",
    "-length=2",
    "test",
    "45.98",
    "--exchange=0.25",
    "-age=38",
    "--parser",
    '--path="C:\\DevTools"',
    "-f",
    "'test2'",
]

SCENARIO_OPTIONS_OFF = [
    "--name ",
    "Dieter",
    "-length",
    "2",
    "test",
    "45.98",
    "--exchange",
    "0.25",
    "-age=38",
    "--path",
    '"C:\\DevTools"',
]


def test_parse_with_options():
    parser = ParameterParser()
    parser.set_option_parsing_enabled(True)
    parser.parse(SCENARIO_OPTIONS_ON)

    assert parser.get_named_string("name") == "Dieter"
    assert parser.get_named_int("length") == 2
    assert parser.get_named_float("exchange") == 0.25
    assert parser.get_positional_string(0) == "test"
    assert parser.get_positional_double(1) == 45.98
    assert parser.get_positional_string(2) == "test2"
    assert parser.get_named_int("age") == 38
    assert parser.get_named_string("path") == "C:\\DevTools"
    assert parser.has_option("-f") is True
    assert parser.has_option("--parser") is True
    assert parser.has_option("f") is False
    assert parser.positional_count == 3


def test_parse_without_options():
    parser = ParameterParser()
    parser.set_option_parsing_enabled(False)
    parser.parse(SCENARIO_OPTIONS_OFF)

    assert parser.get_named_string("name") == "Dieter"
    assert parser.get_named_int("length") == 2
    assert parser.get_named_float("exchange") == 0.25
    assert parser.get_positional_string(0) == "test"
    assert parser.get_positional_double(1) == 45.98
    assert parser.get_named_int("age") == 38
    assert parser.get_named_string("path") == "C:\\DevTools"
    assert parser.options == frozenset()


def test_option_parsing_flag():
    parser = ParameterParser()
    assert parser.option_parsing_enabled is True
    parser.set_option_parsing_enabled(False)
    assert parser.option_parsing_enabled is False
    assert ParameterParser(option_parsing=False).option_parsing_enabled is False


@pytest.mark.parametrize("tokens", [None, [], ()])
def test_parse_nothing(tokens):
    parser = ParameterParser()
    parser.parse(tokens)
    assert parser.parameters == {}
    assert parser.options == frozenset()
    assert parser.positional_count == 0


def test_positional_indices_are_dense():
    parser = ParameterParser()
    parser.parse(["--a=1", "zero", "-b", "one", "--c=3", "-d=4", "two", "--e"])
    assert parser.positional_count == 3
    assert [parser.get_positional_string(i) for i in range(3)] == ["zero", "one", "two"]
    assert not parser.contains(3)


def test_tokens_read_back_by_key():
    tokens = ["a", "--k=v", "'b'", "-x=\"y\"", "  c  "]
    parser = ParameterParser()
    parser.parse(tokens)
    assert dict(parser.parameters) == {
        "$0": "a",
        "k": "v",
        "$1": "b",
        "x": "y",
        "$2": "c",
    }


def test_duplicate_named_parameter_halts_parsing():
    parser = ParameterParser()
    with pytest.raises(DuplicateParameterError):
        parser.parse(["--a=1", "-a=2", "after"])
    assert parser.get_named_string("a") == "1"
    assert not parser.contains(0)


def test_duplicate_named_parameter_two_token_form():
    parser = ParameterParser(option_parsing=False)
    with pytest.raises(DuplicateParameterError):
        parser.parse(["--a", "1", "--a", "2"])


def test_duplicate_options_are_harmless():
    parser = ParameterParser()
    parser.parse(["-f", "-f", "--f"])
    assert parser.options == frozenset({"-f", "--f"})


def test_reserved_name_is_rejected():
    parser = ParameterParser()
    with pytest.raises(ReservedParameterNameError):
        parser.parse(["--$0=x"])


def test_dangling_name_is_discarded(caplog):
    parser = ParameterParser(option_parsing=False)
    with caplog.at_level(logging.WARNING, logger="paramparse"):
        parser.parse(["value", "--path"])
    assert parser.contains(0)
    assert not parser.contains("path")
    assert "Discarding '--path'" in caplog.text


def test_inner_quote_truncates_value():
    parser = ParameterParser()
    parser.parse(['ab"cd', "--k=x'y"])
    assert parser.get_positional_string(0) == 'b"c'
    assert parser.get_named_string("k") == "'"


def test_bare_dashes_are_options():
    parser = ParameterParser()
    parser.parse(["--", "-"])
    assert parser.has_option("--")
    assert parser.has_option("-")


def test_negative_number_is_an_option():
    parser = ParameterParser()
    parser.parse(["-5"])
    assert parser.has_option("-5")
    assert parser.positional_count == 0


def test_tokens_are_trimmed():
    parser = ParameterParser()
    parser.parse(["  --name=Dieter  ", "\t-f\n"])
    assert parser.get_named_string("name") == "Dieter"
    assert parser.has_option("-f")


def test_separate_parsers_are_independent():
    first = ParameterParser(option_parsing=False)
    second = ParameterParser(option_parsing=False)
    first.parse(["--path"])
    second.parse(["value"])
    assert second.get_positional_string(0) == "value"
    assert not second.contains("path")


def test_str():
    parser = ParameterParser()
    parser.parse(["a", "--k=v", "-f"])
    assert (
        str(parser)
        == "ParameterParser(option_parsing=True, positional=1, named=1, options=1)"
    )
    assert repr(parser) == str(parser)

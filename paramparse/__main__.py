"""
Paramparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line entry point: parse the tokens that follow `--` and print what was
found, optionally binding them through a schema file.

    python -m paramparse --schema bindings.yaml -- --path=X -g 45
"""
from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from types import SimpleNamespace
from typing import Sequence

from rich.markup import escape

from paramparse.config import load_schema
from paramparse.console import console, error_console
from paramparse.exceptions import ParamParseError
from paramparse.parameter_parser import ParameterParser
from paramparse.table import build_binding_table, build_parameter_table
from paramparse.utils import setup_logging
from paramparse.version import __version__

TOKEN_SEPARATOR = "--"


def get_root_parser(prog: str | None = "paramparse") -> ArgumentParser:
    """Parser for the entry point's own flags, everything before `--`."""
    parser = ArgumentParser(
        prog=prog,
        usage=f"{prog} [OPTIONS] -- TOKEN ...",
        description="Parse command-line tokens into named, positional and option values.",
        epilog="Tokens after '--' are handed to the parameter parser unchanged.",
    )
    parser.add_argument(
        "--no-options",
        action="store_true",
        help="Read '--name value' pairs instead of '--flag' options",
    )
    parser.add_argument("--schema", help="YAML or TOML file with field bindings")
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], help="Console logging format"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--version", action="store_true", help=f"Show {prog} version")
    return parser


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split the argument vector at the first `--` into own flags and tokens."""
    argv = list(argv)
    if TOKEN_SEPARATOR not in argv:
        return argv, []
    index = argv.index(TOKEN_SEPARATOR)
    return argv[:index], argv[index + 1 :]


def run(
    tokens: Sequence[str], schema_path: str | None = None, option_parsing: bool = True
) -> None:
    schema = load_schema(schema_path) if schema_path else None
    parser = schema.parser() if schema else ParameterParser()
    if not option_parsing:
        parser.set_option_parsing_enabled(False)
    parser.parse(tokens)
    console.print(build_parameter_table(parser))

    if schema:
        bindings = schema.to_bindings()
        target = SimpleNamespace(**{binding.field: None for binding in bindings})
        parser.bind(target, bindings)
        console.print(build_binding_table(target, bindings))


def main(argv: Sequence[str] | None = None) -> int:
    own_args, tokens = split_argv(sys.argv[1:] if argv is None else argv)
    args = get_root_parser().parse_args(own_args)

    if args.version:
        console.print(f"paramparse version {__version__}")
        return 0

    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        run(tokens, schema_path=args.schema, option_parsing=not args.no_options)
    except (ParamParseError, FileNotFoundError, ValueError) as error:
        error_console.print(f"[error]{escape(str(error))}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

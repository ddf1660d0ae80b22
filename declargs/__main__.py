"""
Declargs Command Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from argparse import REMAINDER, ArgumentParser
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape

from declargs.config import loader
from declargs.console import console
from declargs.exceptions import CommandError, DeclargsError
from declargs.logger import logger
from declargs.parser import CommandParser
from declargs.protocols import CommandProtocol
from declargs.usage import UsageInfoPrinter
from declargs.utils import get_program_invocation, setup_logging

EXIT_CONFIG_ERROR = 1
EXIT_PARSE_ERROR = 2


def find_declargs_config() -> Path | None:
    candidates = [
        Path.cwd() / "declargs.yaml",
        Path.cwd() / "declargs.toml",
        Path(os.environ.get("DECLARGS_CONFIG", "declargs.yaml")),
        Path.home() / ".config" / "declargs" / "declargs.yaml",
        Path.home() / ".config" / "declargs" / "declargs.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=get_program_invocation(),
        description="Parse tokens against a declargs command configuration.",
        epilog="Tokens after the options are passed to the configured commands as-is.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML or TOML command configuration file.",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging to the console."
    )
    parser.add_argument(
        "--usage",
        action="store_true",
        help="Print the configured commands and exit.",
    )
    parser.add_argument(
        "--run",
        action="store_true",
        help="Run the parsed command's action instead of printing the result.",
    )
    parser.add_argument("tokens", nargs=REMAINDER, help="Tokens to parse.")
    return parser


def report_parse_error(
    error: DeclargsError, parser: CommandParser, printer: UsageInfoPrinter
) -> None:
    console.print(f"[declargs.error]error:[/] {escape(str(error))}")
    if isinstance(error, CommandError):
        command = _find_by_path(parser, error.command_path)
        if command is not None:
            printer.print_usage(command)
            return
    printer.print_commands(parser.commands)


def _find_by_path(
    parser: CommandParser, path: Sequence[str]
) -> CommandProtocol | None:
    """Follow `path` from a top-level command down through its subcommands."""
    if not path:
        return None
    command = parser.get_command(path[0])
    for name in path[1:]:
        if command is None:
            return None
        command = next((sub for sub in command.sub_commands if sub.name == name), None)
    return command


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    if args.debug:
        setup_logging(console_log_level=logging.DEBUG)

    config_path = args.config or find_declargs_config()
    if config_path is None:
        console.print("[declargs.error]error:[/] no command configuration found.")
        return EXIT_CONFIG_ERROR

    try:
        parser = loader(config_path)
    except (FileNotFoundError, ValidationError, DeclargsError) as error:
        logger.debug("Failed to load '%s': %s", config_path, error)
        console.print(f"[declargs.error]error:[/] {escape(str(error))}")
        return EXIT_CONFIG_ERROR

    printer = UsageInfoPrinter(console)
    if args.usage:
        printer.print_commands(parser.commands)
        return 0

    try:
        command = parser.parse(args.tokens)
    except DeclargsError as error:
        report_parse_error(error, parser, printer)
        return EXIT_PARSE_ERROR

    if args.run:
        try:
            result = command.run()
        except DeclargsError as error:
            console.print(f"[declargs.error]error:[/] {escape(str(error))}")
            return EXIT_PARSE_ERROR
        if result is not None:
            console.print(result, markup=False)
        return 0

    printer.print_tree(command)
    return 0


if __name__ == "__main__":
    sys.exit(main())

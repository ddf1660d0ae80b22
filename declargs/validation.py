# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Structural validation for command descriptions.

`validate_command()` checks one command and the options and arguments it
declares. Subcommands are checked on their own when the parser first enters
them, so a subcommand that is never reached is never validated.

Rules:
- The command name is non-empty and contains no whitespace.
- Option and argument names are non-empty and contain no whitespace or `-`.
- Option names are unique, argument names are unique and subcommand names are
  unique within the command.
"""
from __future__ import annotations

from typing import Iterable

from declargs.exceptions import InvalidCommandError
from declargs.protocols import CommandProtocol

HYPHEN = "-"


def has_whitespace(name: str) -> bool:
    """Return True if the name contains any Unicode whitespace character."""
    return any(character.isspace() for character in name)


def _find_duplicate(names: Iterable[str]) -> str | None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            return name
        seen.add(name)
    return None


def _check_member_name(command_name: str, kind: str, name: str) -> None:
    if not name:
        raise InvalidCommandError(command_name, f"{kind} name must not be empty")
    if has_whitespace(name):
        raise InvalidCommandError(
            command_name, f"{kind} name '{name}' must not contain whitespace"
        )
    if HYPHEN in name:
        raise InvalidCommandError(
            command_name, f"{kind} name '{name}' must not contain '{HYPHEN}'"
        )


def validate_command(command: CommandProtocol) -> None:
    """
    Validate a command description.

    Raises:
        InvalidCommandError: On the first rule the command breaks.
    """
    name = command.name
    if not name:
        raise InvalidCommandError(name, "command name must not be empty")
    if has_whitespace(name):
        raise InvalidCommandError(name, "command name must not contain whitespace")

    for option in command.options:
        _check_member_name(name, "option", option.name)
    for argument in command.arguments:
        _check_member_name(name, "argument", argument.name)

    duplicate = _find_duplicate(option.name for option in command.options)
    if duplicate is not None:
        raise InvalidCommandError(name, f"duplicate option name '{duplicate}'")
    duplicate = _find_duplicate(argument.name for argument in command.arguments)
    if duplicate is not None:
        raise InvalidCommandError(name, f"duplicate argument name '{duplicate}'")
    duplicate = _find_duplicate(sub.name for sub in command.sub_commands)
    if duplicate is not None:
        raise InvalidCommandError(name, f"duplicate subcommand name '{duplicate}'")

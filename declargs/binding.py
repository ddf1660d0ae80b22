# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lookup and binding helpers shared by the parser and the concrete models.

These functions work on anything satisfying the `declargs.protocols`
capabilities and mutate the given command in place.
"""
from __future__ import annotations

from typing import Sequence

from declargs.exceptions import (
    NoSuchOptionError,
    NoSuchSubCommandError,
    OptionRequiresArgumentError,
)
from declargs.protocols import (
    CommandProtocol,
    OptionProtocol,
    long_form_name,
    takes_argument,
)


def find_option(command: CommandProtocol, long_form: str) -> OptionProtocol | None:
    """Return the option whose `--name` equals `long_form`, or None."""
    for option in command.options:
        if long_form_name(option) == long_form:
            return option
    return None


def set_option(
    command: CommandProtocol, long_form: str, value: str | None = None
) -> OptionProtocol:
    """
    Mark an option as set on the command.

    Options that take an argument also bind `value`, which must not be None.
    A value given to a plain option is ignored.

    Raises:
        NoSuchOptionError: If the command declares no option named `long_form`.
        OptionRequiresArgumentError: If the option takes an argument and
            `value` is None.
    """
    option = find_option(command, long_form)
    if option is None:
        raise NoSuchOptionError(command.name, long_form)
    if takes_argument(option):
        if value is None:
            raise OptionRequiresArgumentError(command.name, option.name)
        option.value = value  # type: ignore[attr-defined]
    option.set = True
    return option


def find_sub_command(command: CommandProtocol, name: str) -> CommandProtocol:
    """
    Return the subcommand called `name`.

    Raises:
        NoSuchSubCommandError: If the command has no such subcommand.
    """
    for sub_command in command.sub_commands:
        if sub_command.name == name:
            return sub_command
    raise NoSuchSubCommandError(command.name, name)


def bind_arguments(command: CommandProtocol, values: Sequence[str]) -> None:
    """Bind `values` to the command's arguments in declaration order."""
    for argument, value in zip(command.arguments, values):
        argument.value = value


def clear_bindings(command: CommandProtocol) -> None:
    """Unset the command's options and argument values and its used subcommand."""
    for option in command.options:
        option.set = False
        if takes_argument(option):
            option.value = None  # type: ignore[attr-defined]
    for argument in command.arguments:
        argument.value = None
    command.used_sub_command = None

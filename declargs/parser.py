# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandParser`, the registry and matching engine for
declaratively described commands.

Commands, options, arguments and subcommands are described as data (see
`declargs.model`, or any object satisfying `declargs.protocols`). The parser
validates each description when it is registered, then matches a flat list of
tokens against the registered commands, binding values onto the models in
place.

Public Interface:
- `add_command(command)`: Validate and register a top-level command.
- `add_commands(commands)`: Register several commands in order.
- `get_command(name)`: Look up a registered command by name.
- `parse(tokens)`: Match tokens and return the populated top-level command.

Example Usage:
    parser = CommandParser()
    parser.add_command(
        Command(
            name="generate",
            options=[Option("force"), OptionWithArgument("output")],
            arguments=[Argument("template")],
        )
    )
    command = parser.parse(["generate", "--force", "--output=./build", "basic"])
    # command.options[0].set is True
    # command.options[1].value == "./build"
    # command.arguments[0].value == "basic"

Token Grammar (per command, applied recursively to subcommands):
    <command> [--option | --option=<value>]... <argument>... [<subcommand> ...]

Matching is strict. The first mismatch raises a `DeclargsError` subclass and
aborts the parse. Bindings made before the failure are not rolled back, so a
command tree that failed to parse should not be trusted.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from declargs.binding import (
    bind_arguments,
    clear_bindings,
    find_sub_command,
    set_option,
)
from declargs.exceptions import (
    CommandError,
    CommandNotSuppliedError,
    DuplicateCommandError,
    InvalidArgumentsError,
    NoArgumentsOrSubCommandsError,
    NoCommandsError,
    NoOptionsError,
    NoSuchCommandError,
    RequiresArgumentsError,
)
from declargs.logger import logger
from declargs.protocols import CommandProtocol
from declargs.tokens import is_longform_option, option_argument, option_name
from declargs.validation import validate_command


class CommandParser:
    """
    Registry of top-level commands and the engine that parses tokens against them.

    A parser is meant to be driven by one caller. Parsing mutates the
    registered command models, so do not parse concurrently against the same
    command set.
    """

    def __init__(self, commands: Iterable[CommandProtocol] | None = None) -> None:
        self._commands: list[CommandProtocol] = []
        if commands:
            self.add_commands(commands)

    @property
    def commands(self) -> list[CommandProtocol]:
        """The registered top-level commands, in registration order."""
        return list(self._commands)

    def add_command(self, command: CommandProtocol) -> None:
        """
        Validate and register a top-level command.

        Raises:
            InvalidCommandError: If the command description is malformed.
            DuplicateCommandError: If a command with the same name is
                already registered.
        """
        validate_command(command)
        if self.get_command(command.name) is not None:
            logger.debug("Rejected duplicate command '%s'", command.name)
            raise DuplicateCommandError(command.name)
        self._commands.append(command)
        logger.debug("Registered command '%s'", command.name)

    def add_commands(self, commands: Iterable[CommandProtocol]) -> None:
        """Register several commands in order, stopping at the first error."""
        for command in commands:
            self.add_command(command)

    def get_command(self, name: str) -> CommandProtocol | None:
        """Return the registered command called `name`, or None."""
        for command in self._commands:
            if command.name == name:
                return command
        return None

    def parse(self, tokens: Sequence[str]) -> CommandProtocol:
        """
        Parse tokens against the registered commands.

        Args:
            tokens (Sequence[str]): The argument vector without the program
                name, e.g. `sys.argv[1:]`.

        Returns:
            The matched top-level command with options, arguments and
            `used_sub_command` populated.

        Raises:
            NoCommandsError: If no commands are registered.
            CommandNotSuppliedError: If `tokens` is empty.
            NoSuchCommandError: If the first token names no registered command.
            CommandError: If the remaining tokens do not fit the command.
        """
        if not self._commands:
            raise NoCommandsError()
        tokens = list(tokens)
        if not tokens:
            raise CommandNotSuppliedError()

        name = tokens[0]
        command = self.get_command(name)
        if command is None:
            logger.debug("No registered command matches '%s'", name)
            raise NoSuchCommandError(name)
        logger.debug("Parsing %r against command '%s'", tokens[1:], name)
        return self._parse_command(command, tokens[1:])

    def _parse_command(
        self, command: CommandProtocol, tokens: list[str]
    ) -> CommandProtocol:
        """Match the tokens that follow a command's name against that command."""
        clear_bindings(command)
        try:
            return self._match_command(command, tokens)
        except CommandError as error:
            error.command_path = (command.name, *error.command_path)
            raise

    def _match_command(
        self, command: CommandProtocol, tokens: list[str]
    ) -> CommandProtocol:
        position = self._consume_options(command, tokens)
        remaining = tokens[position:]
        argument_count = len(command.arguments)

        if remaining and not command.arguments and not command.sub_commands:
            raise NoArgumentsOrSubCommandsError(command.name)

        if len(remaining) < argument_count:
            raise RequiresArgumentsError(command.name)
        bind_arguments(command, remaining[:argument_count])
        remaining = remaining[argument_count:]

        if not remaining:
            return command
        if not command.sub_commands:
            raise InvalidArgumentsError(command.name)

        sub_command = find_sub_command(command, remaining[0])
        validate_command(sub_command)
        logger.debug(
            "[%s] Entering subcommand '%s' with %r",
            command.name,
            sub_command.name,
            remaining[1:],
        )
        command.used_sub_command = self._parse_command(sub_command, remaining[1:])
        return command

    def _consume_options(self, command: CommandProtocol, tokens: list[str]) -> int:
        """Bind the leading option tokens and return the index of the first non-option."""
        position = 0
        while position < len(tokens) and is_longform_option(tokens[position]):
            token = tokens[position]
            if not command.options:
                raise NoOptionsError(command.name)
            option = set_option(command, option_name(token), option_argument(token))
            logger.debug("[%s] Set option '%s'", command.name, option.name)
            position += 1
        return position

    def __str__(self) -> str:
        names = ", ".join(command.name for command in self._commands)
        return f"CommandParser(commands=[{names}])"

    def __repr__(self) -> str:
        return str(self)

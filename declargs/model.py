# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the concrete dataclasses used to describe commands for `CommandParser`.

Each model satisfies the matching protocol in `declargs.protocols`, so they can
be mixed freely with user-defined types that expose the same attributes.

Models:
- `Option`: A long-form switch (`--name`) that is either set or not.
- `OptionWithArgument`: A long-form option that requires an inline value
  (`--name=value`).
- `Argument`: A required positional value, bound in declaration order.
- `Command`: A named command with options, arguments and subcommands. After a
  successful parse, `used_sub_command` holds the subcommand that was selected.

Example:
    generate = Command(
        name="generate",
        help_text="Generate a project from a template.",
        options=[Option("force"), OptionWithArgument("output", argument_name="dir")],
        arguments=[Argument("template")],
    )

Models are mutated in place by the parser. Each parse clears the state of the
commands it enters first. `Command.reset()` clears a whole tree.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from declargs.binding import clear_bindings, find_option, find_sub_command
from declargs.binding import set_option as bind_option
from declargs.exceptions import CommandNotRunnableError
from declargs.logger import logger
from declargs.protocols import OptionProtocol, long_form_name


@dataclass
class Option:
    """
    A long-form switch.

    Attributes:
        name (str): Used as `--name` on the command line. Must not contain
            whitespace or hyphens.
        help_text (str): Optional description shown in usage output.
        set (bool): True once the option was given on the command line.
    """

    name: str
    help_text: str = ""
    set: bool = False

    @property
    def long_form_name(self) -> str:
        return long_form_name(self)

    def reset(self) -> None:
        self.set = False


@dataclass
class OptionWithArgument:
    """
    A long-form option that requires an inline value, e.g. `--output=./build`.

    Attributes:
        name (str): Used as `--name` on the command line.
        argument_name (str): Placeholder shown in usage output (`--name=<value>`).
        help_text (str): Optional description shown in usage output.
        set (bool): True once the option was given on the command line.
        value (str | None): The bound value. An empty string is a valid value,
            distinct from None.
    """

    name: str
    argument_name: str = "value"
    help_text: str = ""
    set: bool = False
    value: str | None = None

    @property
    def long_form_name(self) -> str:
        return long_form_name(self)

    def reset(self) -> None:
        self.set = False
        self.value = None


@dataclass
class Argument:
    """A required positional value."""

    name: str
    help_text: str = ""
    value: str | None = None

    def reset(self) -> None:
        self.value = None


@dataclass
class Command:
    """
    A named unit of execution.

    Attributes:
        name (str): Used to invoke the command. Must not contain whitespace.
        help_text (str): Usage information for end users.
        options (list): Options accepted before any arguments.
        arguments (list): Required arguments, bound in the declared order.
        sub_commands (list[Command]): Commands that may follow the arguments.
        used_sub_command (Command | None): The subcommand selected by the last
            successful parse, if any.
        action (Callable | None): Called with the command by `run()`.
    """

    name: str
    help_text: str = ""
    options: list[Any] = field(default_factory=list)
    arguments: list[Any] = field(default_factory=list)
    sub_commands: list[Command] = field(default_factory=list)
    used_sub_command: Command | None = None
    action: Callable[[Command], Any] | None = field(
        default=None, compare=False, repr=False
    )

    @property
    def has_options(self) -> bool:
        return bool(self.options)

    @property
    def option_names(self) -> list[str]:
        return [option.name for option in self.options]

    @property
    def option_long_forms(self) -> list[str]:
        return [long_form_name(option) for option in self.options]

    def get_option(self, name: str) -> OptionProtocol | None:
        """Return the option with the given name (without dashes), or None."""
        return find_option(self, f"--{name}")

    def set_option(self, long_form: str, value: str | None = None) -> OptionProtocol:
        """
        Set an option by its long form, e.g. `set_option("--output", "./build")`.

        Raises:
            NoSuchOptionError: If no option has that long form.
            OptionRequiresArgumentError: If the option takes a value and none
                is given.
        """
        return bind_option(self, long_form, value)

    @property
    def has_required_arguments(self) -> bool:
        return bool(self.arguments)

    @property
    def argument_names(self) -> list[str]:
        return [argument.name for argument in self.arguments]

    @property
    def all_arguments_set(self) -> bool:
        return all(argument.value is not None for argument in self.arguments)

    @property
    def has_sub_commands(self) -> bool:
        return bool(self.sub_commands)

    @property
    def sub_command_names(self) -> list[str]:
        return [sub_command.name for sub_command in self.sub_commands]

    def has_sub_command(self, name: str) -> bool:
        return name in self.sub_command_names

    def get_sub_command(self, name: str) -> Command:
        """
        Return the subcommand called `name`.

        Raises:
            NoSuchSubCommandError: If there is no such subcommand.
        """
        return find_sub_command(self, name)  # type: ignore[return-value]

    def reset(self) -> None:
        """Clear all state bound by a previous parse, recursively."""
        clear_bindings(self)
        for sub_command in self.sub_commands:
            sub_command.reset()

    def run(self) -> Any:
        """
        Run the command.

        Calls `action(self)` when an action is attached. Otherwise the used
        subcommand is run.

        Raises:
            CommandNotRunnableError: If there is neither an action nor a used
                subcommand.
        """
        if self.action is not None:
            logger.debug("[%s] Running action %r", self.name, self.action)
            return self.action(self)
        if self.used_sub_command is not None:
            return self.used_sub_command.run()
        raise CommandNotRunnableError(self.name)

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', options={self.option_names}, "
            f"arguments={self.argument_names}, sub_commands={self.sub_command_names})"
        )

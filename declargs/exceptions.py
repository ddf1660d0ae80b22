# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by the declargs command parser.

Errors fall into two phases. Registration-time errors are raised by
`CommandParser.add_command()` when a command description is structurally
invalid or collides with an already registered command. Parse-time errors are
raised by `CommandParser.parse()` at the first token that does not match the
registered command tree.

Every error carries plain string snapshots (command, option and subcommand
names) rather than live references to the mutable command models, so the
message stays accurate even if the model is mutated afterwards.

Exception Hierarchy:
- DeclargsError
    ├── CommandModelError
    │   └── InvalidCommandError
    ├── ParserError
    │   ├── NoCommandsError
    │   ├── CommandNotSuppliedError
    │   ├── NoSuchCommandError
    │   └── DuplicateCommandError
    ├── CommandError
    │   ├── NoOptionsError
    │   ├── NoSuchOptionError
    │   ├── OptionRequiresArgumentError
    │   ├── RequiresArgumentsError
    │   ├── InvalidArgumentsError
    │   │   └── NoArgumentsOrSubCommandsError
    │   ├── NoSuchSubCommandError
    │   └── CommandNotRunnableError
    └── ConfigError
"""


class DeclargsError(Exception):
    """Base exception for the declargs command parser."""


class CommandModelError(DeclargsError):
    """Base class for errors in a command description."""


class InvalidCommandError(CommandModelError):
    """Raised when a command description breaks a structural rule."""

    def __init__(self, command_name: str, reason: str):
        self.command_name = command_name
        self.reason = reason
        super().__init__(f"Invalid command '{command_name}': {reason}")


class ParserError(DeclargsError):
    """Base class for errors raised by the parser itself."""


class NoCommandsError(ParserError):
    """Raised when parsing with no registered commands."""

    def __init__(self, message: str = "No commands have been registered."):
        super().__init__(message)


class CommandNotSuppliedError(ParserError):
    """Raised when the token list is empty."""

    def __init__(self, message: str = "No command was supplied."):
        super().__init__(message)


class NoSuchCommandError(ParserError):
    """Raised when the first token names no registered command."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No such command: '{name}'")


class DuplicateCommandError(ParserError):
    """Raised when a command with the same name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Command '{name}' is already registered.")


class CommandError(DeclargsError):
    """
    Base class for errors matching tokens against a specific command.

    `command_path` holds the names from the top-level command down to
    `command_name` when the error was raised during `CommandParser.parse`.
    """

    def __init__(self, command_name: str, message: str):
        self.command_name = command_name
        self.command_path: tuple[str, ...] = ()
        super().__init__(message)


class NoOptionsError(CommandError):
    """Raised when an option is supplied to a command that declares none."""

    def __init__(self, command_name: str):
        super().__init__(command_name, f"Command '{command_name}' takes no options.")


class NoSuchOptionError(CommandError):
    """Raised when an option is not declared by the command."""

    def __init__(self, command_name: str, option_name: str):
        self.option_name = option_name
        super().__init__(
            command_name, f"Command '{command_name}' has no option '{option_name}'."
        )


class OptionRequiresArgumentError(CommandError):
    """Raised when an option that takes a value is given without `=value`."""

    def __init__(self, command_name: str, option_name: str):
        self.option_name = option_name
        super().__init__(
            command_name,
            f"Option '--{option_name}' of command '{command_name}' requires a value "
            f"(--{option_name}=<value>).",
        )


class RequiresArgumentsError(CommandError):
    """Raised when fewer tokens remain than the command's required arguments."""

    def __init__(self, command_name: str):
        super().__init__(
            command_name, f"Command '{command_name}' is missing required arguments."
        )


class InvalidArgumentsError(CommandError):
    """Raised when tokens remain that the command cannot consume."""

    def __init__(self, command_name: str, message: str | None = None):
        super().__init__(
            command_name,
            message or f"Too many arguments for command '{command_name}'.",
        )


class NoArgumentsOrSubCommandsError(InvalidArgumentsError):
    """Raised when tokens remain for a command with no arguments or subcommands."""

    def __init__(self, command_name: str):
        super().__init__(
            command_name,
            f"Command '{command_name}' takes no arguments or subcommands.",
        )


class NoSuchSubCommandError(CommandError):
    """Raised when a token does not name one of the command's subcommands."""

    def __init__(self, command_name: str, sub_command_name: str):
        self.sub_command_name = sub_command_name
        super().__init__(
            command_name,
            f"Command '{command_name}' has no subcommand '{sub_command_name}'.",
        )


class CommandNotRunnableError(CommandError):
    """Raised when running a command with no action and no used subcommand."""

    def __init__(self, command_name: str):
        super().__init__(
            command_name, f"Command '{command_name}' has no action to run."
        )


class ConfigError(DeclargsError):
    """Raised when a configuration file cannot be turned into commands."""

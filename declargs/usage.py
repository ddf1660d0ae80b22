# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders help and usage text for registered commands with Rich.

`UsageInfoPrinter` is a read-only view over the command models. It reads the
name, help text, option long forms, argument names and subcommand names, and
never changes parse state.

Output Layout:

    COMMANDS:
        generate    Generate a project from a template.

    COMMAND:
        generate    Generate a project from a template.

    USAGE:
        generate [--force] [--output=<dir>] <template>

    SUBCOMMANDS:
        plugin    Generate a plugin skeleton.
"""
from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from declargs.console import console as default_console
from declargs.protocols import CommandProtocol, long_form_name, takes_argument

INDENT = "    "


class UsageInfoPrinter:
    """Prints command listings, help and usage to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or default_console

    def print_commands(self, commands: Iterable[CommandProtocol]) -> None:
        """Print the name and help text of each command, or nothing if there are none."""
        commands = list(commands)
        if not commands:
            return
        self.console.print("\n[declargs.heading]COMMANDS:[/]")
        for command in commands:
            self.console.print(self.get_name_and_help_text(command))
        self.console.print()

    def print_help_and_usage(self, command: CommandProtocol) -> None:
        self.console.print("\n[declargs.heading]COMMAND:[/]")
        self.console.print(self.get_name_and_help_text(command))
        self.print_usage(command)

    def print_usage(self, command: CommandProtocol) -> None:
        self.console.print("\n[declargs.heading]USAGE:[/]")
        self.console.print(f"{INDENT}{self.get_usage(command)}")
        if command.sub_commands:
            self.console.print("\n[declargs.heading]SUBCOMMANDS:[/]")
            for sub_command in command.sub_commands:
                self.console.print(self.get_name_and_help_text(sub_command))
        self.console.print()

    def get_name_and_help_text(
        self, command: CommandProtocol, plain_text: bool = False
    ) -> str:
        name = command.name if plain_text else escape(command.name)
        help_text = command.help_text if plain_text else escape(command.help_text)
        if not plain_text:
            name = f"[declargs.command]{name}[/]"
        if help_text:
            return f"{INDENT}{name}{INDENT}{help_text}"
        return f"{INDENT}{name}"

    def get_options_text(self, command: CommandProtocol, plain_text: bool = False) -> str:
        """Return `[--flag] [--name=<value>]` for each option, in declared order."""
        parts = []
        for option in command.options:
            text = long_form_name(option)
            if takes_argument(option):
                text = f"{text}=<{getattr(option, 'argument_name', 'value')}>"
            text = f"[{text}]"
            if plain_text:
                parts.append(text)
            else:
                parts.append(f"[declargs.option]{escape(text)}[/]")
        return " ".join(parts)

    def get_arguments_text(
        self, command: CommandProtocol, plain_text: bool = False
    ) -> str:
        """Return `<name>` for each argument, in binding order."""
        parts = []
        for argument in command.arguments:
            text = f"<{argument.name}>"
            if plain_text:
                parts.append(text)
            else:
                parts.append(f"[declargs.argument]{escape(text)}[/]")
        return " ".join(parts)

    def get_usage(self, command: CommandProtocol, plain_text: bool = False) -> str:
        """
        Return the usage line for a command.

        Returns:
            str: e.g. `generate [--force] [--output=<dir>] <template> [<subcommand>]`.
        """
        name = command.name
        if not plain_text:
            name = f"[declargs.command]{escape(name)}[/]"
        parts = [
            name,
            self.get_options_text(command, plain_text),
            self.get_arguments_text(command, plain_text),
        ]
        if command.sub_commands:
            tail = "[<subcommand>]"
            parts.append(tail if plain_text else escape(tail))
        return " ".join(part for part in parts if part)

    def get_tree(self, command: CommandProtocol, tree: Tree | None = None) -> Tree:
        """Return a Rich tree of the values bound to a parsed command."""
        label = f"[declargs.command]{escape(command.name)}[/]"
        node = tree.add(label) if tree is not None else Tree(label)
        for option in command.options:
            text = long_form_name(option)
            value = getattr(option, "value", None) if takes_argument(option) else None
            if value is not None:
                text = f"{text}={value}"
            state = "set" if option.set else "not set"
            node.add(f"[declargs.option]{escape(text)}[/] ({state})")
        for argument in command.arguments:
            node.add(
                f"[declargs.argument]<{escape(argument.name)}>[/] = "
                f"{escape(repr(argument.value))}"
            )
        if command.used_sub_command is not None:
            self.get_tree(command.used_sub_command, node)
        return node

    def print_tree(self, command: CommandProtocol) -> None:
        self.console.print(self.get_tree(command))

# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the structural protocols every command description must satisfy.

These runtime-checkable `Protocol` classes describe capabilities rather than
concrete types. Any object exposing the right attributes can be registered
with `CommandParser` and matched against tokens; the dataclasses in
`declargs.model` are one such implementation.

Protocols:
- OptionProtocol: A named switch with a mutable `set` flag.
- OptionWithArgumentProtocol: An option that also binds an inline `value`.
- ArgumentProtocol: A named required positional value.
- CommandProtocol: A named command with options, arguments, subcommands and
  a `used_sub_command` slot.

The parser tells a plain option from one that takes a value with
`isinstance(option, OptionWithArgumentProtocol)`, which only checks for the
presence of the `value` attribute.
"""
from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class OptionProtocol(Protocol):
    name: str
    set: bool


@runtime_checkable
class OptionWithArgumentProtocol(Protocol):
    name: str
    set: bool
    value: str | None


@runtime_checkable
class ArgumentProtocol(Protocol):
    name: str
    value: str | None


@runtime_checkable
class CommandProtocol(Protocol):
    name: str
    help_text: str
    options: Sequence[OptionProtocol]
    arguments: Sequence[ArgumentProtocol]
    sub_commands: Sequence[CommandProtocol]
    used_sub_command: CommandProtocol | None


def long_form_name(option: OptionProtocol) -> str:
    """Return the `--name` form used to match and display an option."""
    return f"--{option.name}"


def takes_argument(option: OptionProtocol) -> bool:
    """Return True if the option binds an inline `=value`."""
    return isinstance(option, OptionWithArgumentProtocol)

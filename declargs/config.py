# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for declargs command trees.

Builds a `CommandParser` from a YAML or TOML file. The file is validated with
pydantic, converted into `declargs.model` dataclasses, then registered through
`CommandParser.add_command()` so the usual structural rules still apply.

Example (YAML):
    commands:
      - name: generate
        help_text: Generate a project from a template.
        action: my_project.cli.generate
        options:
          - name: force
          - name: output
            takes_argument: true
            argument_name: dir
        arguments:
          - name: template
        sub_commands:
          - name: plugin
            arguments:
              - name: plugin_name
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from declargs.exceptions import ConfigError
from declargs.logger import logger
from declargs.model import Argument, Command, Option, OptionWithArgument
from declargs.parser import CommandParser


def import_action(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid action path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(action):
        raise ConfigError(f"Action '{dotted_path}' is not callable")
    return action


class RawOption(BaseModel):
    """Raw option model for declargs configuration."""

    name: str
    help_text: str = ""
    takes_argument: bool = False
    argument_name: str = "value"

    def to_option(self) -> Option | OptionWithArgument:
        if self.takes_argument:
            return OptionWithArgument(
                name=self.name,
                argument_name=self.argument_name,
                help_text=self.help_text,
            )
        return Option(name=self.name, help_text=self.help_text)


class RawArgument(BaseModel):
    """Raw argument model for declargs configuration."""

    name: str
    help_text: str = ""

    def to_argument(self) -> Argument:
        return Argument(name=self.name, help_text=self.help_text)


class RawCommand(BaseModel):
    """Raw command model for declargs configuration."""

    name: str
    help_text: str = ""
    action: str | None = None
    options: list[RawOption] = Field(default_factory=list)
    arguments: list[RawArgument] = Field(default_factory=list)
    sub_commands: list[RawCommand] = Field(default_factory=list)

    @field_validator("action")
    @classmethod
    def validate_action_path(cls, value: str | None) -> str | None:
        if value is not None and "." not in value:
            raise ValueError("action must be a dotted import path like 'module.func'")
        return value

    def to_command(self) -> Command:
        return Command(
            name=self.name,
            help_text=self.help_text,
            options=[option.to_option() for option in self.options],
            arguments=[argument.to_argument() for argument in self.arguments],
            sub_commands=[sub_command.to_command() for sub_command in self.sub_commands],
            action=import_action(self.action) if self.action else None,
        )


RawCommand.model_rebuild()


class ParserConfig(BaseModel):
    """Top-level configuration model: the list of commands to register."""

    commands: list[RawCommand] = Field(default_factory=list)

    def to_parser(self) -> CommandParser:
        parser = CommandParser()
        for raw_command in self.commands:
            parser.add_command(raw_command.to_command())
        return parser


def read_config(file_path: Path | str) -> dict[str, Any]:
    """
    Read a YAML or TOML file into a dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the suffix is unsupported or the content is not a mapping.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ConfigError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'generate'\n"
            "    help_text: 'Example command'"
        )
    return raw_config


def loader(file_path: Path | str) -> CommandParser:
    """
    Load a `CommandParser` from a YAML or TOML configuration file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        CommandParser: A parser with every configured command registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be read or an action cannot be imported.
        pydantic.ValidationError: If the file does not match the schema.
        InvalidCommandError: If a command breaks a structural rule.
        DuplicateCommandError: If two top-level commands share a name.
    """
    raw_config = read_config(file_path)
    config = ParserConfig.model_validate(raw_config)
    logger.debug(
        "Loaded %d command(s) from '%s'", len(config.commands), file_path
    )
    return config.to_parser()

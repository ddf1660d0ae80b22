"""
Declargs Command Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .config import loader
from .exceptions import (
    CommandError,
    CommandModelError,
    CommandNotRunnableError,
    CommandNotSuppliedError,
    ConfigError,
    DeclargsError,
    DuplicateCommandError,
    InvalidArgumentsError,
    InvalidCommandError,
    NoArgumentsOrSubCommandsError,
    NoCommandsError,
    NoOptionsError,
    NoSuchCommandError,
    NoSuchOptionError,
    NoSuchSubCommandError,
    OptionRequiresArgumentError,
    ParserError,
    RequiresArgumentsError,
)
from .logger import logger
from .model import Argument, Command, Option, OptionWithArgument
from .parser import CommandParser
from .protocols import (
    ArgumentProtocol,
    CommandProtocol,
    OptionProtocol,
    OptionWithArgumentProtocol,
)
from .tokens import is_longform_option, option_argument, option_name
from .usage import UsageInfoPrinter
from .validation import validate_command

__all__ = [
    "Argument",
    "ArgumentProtocol",
    "Command",
    "CommandError",
    "CommandModelError",
    "CommandNotRunnableError",
    "CommandNotSuppliedError",
    "CommandParser",
    "CommandProtocol",
    "ConfigError",
    "DeclargsError",
    "DuplicateCommandError",
    "InvalidArgumentsError",
    "InvalidCommandError",
    "NoArgumentsOrSubCommandsError",
    "NoCommandsError",
    "NoOptionsError",
    "NoSuchCommandError",
    "NoSuchOptionError",
    "NoSuchSubCommandError",
    "Option",
    "OptionProtocol",
    "OptionRequiresArgumentError",
    "OptionWithArgument",
    "OptionWithArgumentProtocol",
    "ParserError",
    "RequiresArgumentsError",
    "UsageInfoPrinter",
    "is_longform_option",
    "loader",
    "logger",
    "option_argument",
    "option_name",
    "validate_command",
]

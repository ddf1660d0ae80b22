# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance and output styles for declargs."""
from rich.console import Console
from rich.theme import Theme

COMMAND_STYLE = "bold cyan"
OPTION_STYLE = "green"
ARGUMENT_STYLE = "yellow"
ERROR_STYLE = "bold red"
HEADING_STYLE = "bold"

theme = Theme(
    {
        "declargs.command": COMMAND_STYLE,
        "declargs.option": OPTION_STYLE,
        "declargs.argument": ARGUMENT_STYLE,
        "declargs.error": ERROR_STYLE,
        "declargs.heading": HEADING_STYLE,
    }
)

console = Console(theme=theme)

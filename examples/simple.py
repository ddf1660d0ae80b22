import sys

from declargs import (
    Argument,
    Command,
    CommandParser,
    DeclargsError,
    Option,
    OptionWithArgument,
    UsageInfoPrinter,
)
from declargs.utils import setup_logging

setup_logging()


def generate(command: Command) -> None:
    force, output = command.options
    template = command.arguments[0].value
    print(f"Generating '{template}' into {output.value or '.'} (force={force.set})")
    if command.used_sub_command is not None:
        print(f"  with plugin '{command.used_sub_command.arguments[0].value}'")


parser = CommandParser()
parser.add_command(
    Command(
        name="generate",
        help_text="Generate a project from a template.",
        options=[Option("force"), OptionWithArgument("output", argument_name="dir")],
        arguments=[Argument("template")],
        sub_commands=[
            Command(
                name="plugin",
                help_text="Add a plugin to the generated project.",
                arguments=[Argument("plugin_name")],
            )
        ],
        action=generate,
    )
)

printer = UsageInfoPrinter()
try:
    command = parser.parse(sys.argv[1:])
except DeclargsError as error:
    print(f"error: {error}")
    printer.print_commands(parser.commands)
    sys.exit(2)

command.run()

import pytest

from declargs import (
    Argument,
    Command,
    CommandParser,
    DuplicateCommandError,
    InvalidCommandError,
    Option,
    OptionWithArgument,
)
from declargs.exceptions import CommandModelError, ParserError
from declargs.validation import validate_command


def test_add_valid_command():
    cmd = Command(
        name="mockcommandFOO",
        help_text="Blah blah!",
        options=[Option("option"), OptionWithArgument("optionwitharg")],
        arguments=[Argument("argument")],
    )
    parser = CommandParser()
    parser.add_command(cmd)
    assert cmd in parser.commands
    assert parser.get_command("mockcommandFOO") is cmd


def test_add_valid_command_with_two_options():
    cmd = Command(name="mockcommand", options=[Option("op1"), Option("op2")])
    parser = CommandParser()
    parser.add_command(cmd)
    assert parser.get_command("mockcommand") is cmd


def test_add_valid_command_with_two_args():
    cmd = Command(
        name="mockcommand", arguments=[Argument("mockarg1"), Argument("mockarg2")]
    )
    parser = CommandParser()
    parser.add_command(cmd)
    assert parser.get_command("mockcommand") is cmd


def test_add_valid_command_with_unicode_name():
    cmd = Command(name="生成", options=[Option("オプション")])
    parser = CommandParser()
    parser.add_command(cmd)
    assert parser.get_command("生成") is cmd


def test_registration_order_is_preserved():
    parser = CommandParser()
    parser.add_commands([Command("b"), Command("a"), Command("c")])
    assert [command.name for command in parser.commands] == ["b", "a", "c"]


def test_commands_list_is_a_copy():
    parser = CommandParser([Command("generate")])
    parser.commands.clear()
    assert len(parser.commands) == 1


@pytest.mark.parametrize(
    "name",
    [
        "gener ate",
        "",
        " generate",
        "generate\t",
        "gen\nerate",
        "gen\u3000erate",
        "gen\u00a0erate",
    ],
)
def test_invalid_command_name_raises(name):
    parser = CommandParser()
    with pytest.raises(InvalidCommandError) as excinfo:
        parser.add_command(Command(name=name))
    assert excinfo.value.command_name == name
    assert parser.commands == []


def test_duplicate_command_name_raises():
    parser = CommandParser()
    parser.add_command(Command(name="generate"))
    with pytest.raises(DuplicateCommandError) as excinfo:
        parser.add_command(Command(name="generate"))
    assert excinfo.value.name == "generate"
    assert isinstance(excinfo.value, ParserError)
    assert len(parser.commands) == 1


def test_structural_error_wins_over_duplicate():
    parser = CommandParser()
    parser.add_command(Command(name="generate"))
    with pytest.raises(InvalidCommandError):
        parser.add_command(Command(name="generate", options=[Option("")]))


@pytest.mark.parametrize(
    "options",
    [
        [Option("")],
        [Option("op tion")],
        [Option("op-tion")],
        [Option("-option")],
        [OptionWithArgument("with arg")],
        [Option("option"), Option("option")],
        [Option("option"), OptionWithArgument("option")],
    ],
)
def test_invalid_options_raise(options):
    parser = CommandParser()
    with pytest.raises(InvalidCommandError):
        parser.add_command(Command(name="generate", options=options))


@pytest.mark.parametrize(
    "arguments",
    [
        [Argument("")],
        [Argument("arg ument")],
        [Argument("arg-ument")],
        [Argument("arg"), Argument("arg")],
    ],
)
def test_invalid_arguments_raise(arguments):
    parser = CommandParser()
    with pytest.raises(InvalidCommandError):
        parser.add_command(Command(name="generate", arguments=arguments))


def test_option_and_argument_may_share_a_name():
    cmd = Command(name="generate", options=[Option("name")], arguments=[Argument("name")])
    validate_command(cmd)


def test_duplicate_subcommand_names_raise():
    cmd = Command(name="command", sub_commands=[Command("sub"), Command("sub")])
    with pytest.raises(InvalidCommandError):
        CommandParser().add_command(cmd)


def test_subcommands_are_not_validated_at_registration():
    cmd = Command(name="command", sub_commands=[Command("bad sub")])
    parser = CommandParser()
    parser.add_command(cmd)
    assert parser.get_command("command") is cmd


def test_invalid_command_error_is_a_model_error():
    with pytest.raises(CommandModelError):
        validate_command(Command(name=""))


def test_add_commands_stops_at_first_error():
    parser = CommandParser()
    with pytest.raises(InvalidCommandError):
        parser.add_commands([Command("a"), Command("b c"), Command("d")])
    assert [command.name for command in parser.commands] == ["a"]


def test_str():
    parser = CommandParser([Command("a"), Command("b")])
    assert str(parser) == "CommandParser(commands=[a, b])"
    assert repr(parser) == str(parser)

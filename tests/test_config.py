from pathlib import Path

import pytest
from pydantic import ValidationError

from declargs import (
    Command,
    ConfigError,
    DuplicateCommandError,
    InvalidCommandError,
    Option,
    OptionWithArgument,
    loader,
)
from declargs.config import RawCommand, import_action

YAML_CONFIG = """
commands:
  - name: generate
    help_text: Generate a project from a template.
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
  - name: clean
"""

TOML_CONFIG = """
[[commands]]
name = "generate"
help_text = "Generate a project from a template."
arguments = [{ name = "template" }]
sub_commands = [{ name = "plugin", arguments = [{ name = "plugin_name" }] }]

[[commands.options]]
name = "force"

[[commands.options]]
name = "output"
takes_argument = true
argument_name = "dir"

[[commands]]
name = "clean"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml(tmp_path):
    parser = loader(write(tmp_path, "declargs.yaml", YAML_CONFIG))
    assert [command.name for command in parser.commands] == ["generate", "clean"]
    generate = parser.get_command("generate")
    assert isinstance(generate.options[0], Option)
    assert isinstance(generate.options[1], OptionWithArgument)
    assert generate.options[1].argument_name == "dir"
    assert generate.sub_commands[0].argument_names == ["plugin_name"]


def test_yaml_and_toml_are_equivalent(tmp_path):
    from_yaml = loader(write(tmp_path, "declargs.yml", YAML_CONFIG))
    from_toml = loader(write(tmp_path, "declargs.toml", TOML_CONFIG))
    assert from_yaml.commands == from_toml.commands


def test_loaded_parser_parses(tmp_path):
    parser = loader(write(tmp_path, "declargs.yaml", YAML_CONFIG))
    command = parser.parse(
        ["generate", "--force", "--output=./build", "basic", "plugin", "auth"]
    )
    assert command.options[1].value == "./build"
    assert command.used_sub_command.arguments[0].value == "auth"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_suffix_raises(tmp_path):
    with pytest.raises(ConfigError):
        loader(write(tmp_path, "declargs.json", "{}"))


def test_non_mapping_raises(tmp_path):
    with pytest.raises(ConfigError):
        loader(write(tmp_path, "declargs.yaml", "- just\n- a list\n"))


def test_schema_violation_raises(tmp_path):
    with pytest.raises(ValidationError):
        loader(write(tmp_path, "declargs.yaml", "commands:\n  - help_text: no name\n"))


def test_invalid_command_in_config_raises(tmp_path):
    config = "commands:\n  - name: generate\n    options:\n      - name: op-tion\n"
    with pytest.raises(InvalidCommandError):
        loader(write(tmp_path, "declargs.yaml", config))


def test_duplicate_command_in_config_raises(tmp_path):
    config = "commands:\n  - name: generate\n  - name: generate\n"
    with pytest.raises(DuplicateCommandError):
        loader(write(tmp_path, "declargs.yaml", config))


def test_action_is_imported(tmp_path):
    config = "commands:\n  - name: where\n    action: os.getcwd\n"
    parser = loader(write(tmp_path, "declargs.yaml", config))
    command = parser.get_command("where")
    assert isinstance(command, Command)
    assert command.action is not None


def test_import_action():
    from os.path import basename

    assert import_action("os.path.basename") is basename


@pytest.mark.parametrize(
    "path", ["nodots", "declargs_missing_module.func", "os.path.no_such_function"]
)
def test_import_action_errors(path):
    with pytest.raises(ConfigError):
        import_action(path)


def test_import_action_not_callable():
    with pytest.raises(ConfigError):
        import_action("os.sep")


def test_action_path_must_be_dotted():
    with pytest.raises(ValidationError):
        RawCommand(name="generate", action="generate")

import pytest

from declargs.tokens import is_longform_option, option_argument, option_name


@pytest.mark.parametrize(
    "token",
    ["--option", "--オプション", "--o", "--option=value", "--option=", "---x"],
)
def test_is_longform_option(token):
    assert is_longform_option(token) is True


@pytest.mark.parametrize("token", ["option", "-", "-o", "", "--", "-option"])
def test_is_not_longform_option(token):
    assert is_longform_option(token) is False


def test_option_name():
    assert option_name("--option") == "--option"
    assert option_name("--option=") == "--option"
    assert option_name("--option=value") == "--option"
    assert option_name("--option=a=b") == "--option"


def test_option_argument():
    assert option_argument("--option=arg") == "arg"
    assert option_argument("--option=") == ""
    assert option_argument("--option=a=b") == "a=b"


def test_option_argument_absent_is_none():
    assert option_argument("--option") is None

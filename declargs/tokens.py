# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classifies single command-line tokens.

A long-form option is any token starting with `--` followed by at least one
character. It may carry an inline value after the first `=`:

    is_longform_option("--output=./build")  -> True
    option_name("--output=./build")         -> "--output"
    option_argument("--output=./build")     -> "./build"
    option_argument("--output=")            -> ""
    option_argument("--output")             -> None

A bare `-` or `--` is never an option. These functions are pure; tokens are
never split on whitespace or unquoted.
"""

LONG_PREFIX = "--"


def is_longform_option(token: str) -> bool:
    """Return True if the token is a long-form option such as `--name`."""
    return token.startswith(LONG_PREFIX) and len(token) > len(LONG_PREFIX)


def option_name(token: str) -> str:
    """Return the `--name` part of an option token, without any inline value."""
    name, _, _ = token.partition("=")
    return name


def option_argument(token: str) -> str | None:
    """Return the inline value after the first `=`, or None if there is none."""
    _, separator, value = token.partition("=")
    if not separator:
        return None
    return value

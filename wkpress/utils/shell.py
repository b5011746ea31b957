"""Shell quoting helpers for building renderer command lines."""

from typing import Any


def to_arg(value: Any) -> str:
    """
    Convert a scalar option value to its command-line text.

    Booleans follow the usual shell convention of "1" for true and an empty
    string for false, so a flag value like True inside a list still renders.
    """
    if value is True:
        return "1"
    if value is False or value is None:
        return ""
    return str(value)


def escape_shell_arg(value: Any) -> str:
    """
    Quote a value so the shell sees exactly one literal token.

    The value is always wrapped in single quotes, even when it contains nothing
    the shell would interpret. Embedded single quotes are closed, escaped and
    reopened ('\\'').

    Examples:
        >>> escape_shell_arg("foovalue")
        "'foovalue'"
        >>> escape_shell_arg(12)
        "'12'"
        >>> escape_shell_arg("it's")
        "'it'\\\\''s'"
    """
    return "'" + to_arg(value).replace("'", "'\\''") + "'"

"""
Numlens Tools

Small formatting helpers for exception messages and console titles.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import reprlib
import sys
from typing import Any, TextIO

_repr = reprlib.Repr()
_repr.maxstring = 120
_repr.maxother = 120


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """
    Format the type of an object, or a type itself, as '<type: name>'.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)
    return f"<type: {type_name}>"


def fmt_value(x: Any) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long representations are truncated, broken __repr__ implementations fall back
    to the type name only.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("0xfz")
        "<str: '0xfz'>"
    """
    type_name = type(x).__name__
    try:
        value_repr = _repr.repr(x)
    except Exception:
        return f"<{type_name}: ...>"
    # ">" would terminate the wrapper early
    value_repr = value_repr.replace(">", "\\>")
    return f"<{type_name}: {value_repr}>"


def print_title(title: str,
                prefix: str = "",
                suffix: str = "",
                start: str = "",
                end: str = "\n",
                file: TextIO | None = None):
    """
    Prints a formatted title to a stream.

    Args:
        title (str): The main title string to be printed.
        prefix (str, optional): A string to prepend to the title.
        suffix (str, optional): A string to append to the title.
        start (str, optional): A string to print before the entire formatted title.
        end (str, optional): A string to print after the entire formatted title. Defaults to "\\n".
        file (TextIO, optional): Target stream, sys.stdout if None.
    """
    file = sys.stdout if file is None else file
    print(f"{start}{prefix}{title}{suffix}{end}", end="", file=file)

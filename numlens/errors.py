"""
Numlens Errors

Typed failures raised by the input decoder. All of them are ValueError subclasses so callers
that only care about "bad input" can catch a single builtin type.
"""

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class ParseError(ValueError):
    """Base class for every recoverable input decoding failure."""


class InvalidFormatError(ParseError):
    """The normalized token does not match the input grammar at all."""

    def __init__(self, text: str, reason: str | None = None):
        self.text = text
        self.reason = reason
        message = f"input does not match [-][0b|0o|0x]digits[unit], but found {fmt_value(text)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidUnitError(ParseError):
    """The unit suffix is not part of the recognized byte-unit vocabulary."""

    def __init__(self, suffix: str):
        self.suffix = suffix
        super().__init__(f"unknown unit suffix {fmt_value(suffix)}")


class RadixDigitError(ParseError):
    """
    The digit string holds characters that are invalid for the resolved numeral system.

    The grammar accepts [0-9a-f] for every radix, so '0b12' or '12a' pass the grammar and
    fail here.
    """

    def __init__(self, digits: str, numeral_system):
        self.digits = digits
        self.numeral_system = numeral_system
        super().__init__(
            f"digits {fmt_value(digits)} are not valid in base {numeral_system.radix} "
            f"({numeral_system.value})"
        )


class MagnitudeOverflowError(ParseError, OverflowError):
    """The decoded magnitude, or the magnitude after unit scaling, does not fit into 64 bits."""

    def __init__(self, value: int, what: str = "magnitude"):
        self.value = value
        super().__init__(f"{what} {value} exceeds the unsigned 64-bit range")

"""
Numlens Alignment Engine

Pads the values of an OutputGroup so that, printed one per line after their keys, value columns
line up. Groups of fractional numbers additionally get their signs and decimal points aligned
and insignificant trailing zeros trimmed.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass, replace

# Local ----------------------------------------------------------------------------------------------------------------
from .interpret import Alignment, OutputGroup, OutputLine
from .tools import fmt_type

FRACTION_REGEX = re.compile(
    r"^(?P<sign>-)?(?P<whole>[0-9]+|inf|nan)(?:\.(?P<fraction>[0-9]*))?(?P<exponent>e[+-]?[0-9]+)?$"
)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FractionParts:
    """
    A formatted fractional number split at sign and decimal point.

    Example:
        '-13.370e-5' has has_sign=True, whole='13', fraction='370', exponent='e-5'
    """

    has_sign: bool
    whole: str
    fraction: str | None = None
    exponent: str = ""

    @property
    def tail(self) -> str:
        """Everything right of the whole part, i.e. '.fraction' plus exponent."""
        dot_fraction = f".{self.fraction}" if self.fraction else ""
        return f"{dot_fraction}{self.exponent}"


# Methods --------------------------------------------------------------------------------------------------------------

def align(group: OutputGroup) -> list[tuple[str, str]]:
    """
    Pad group values so that value columns line up.

    LEFT groups pad by `longest_key - len(key)` so all values start in the same column.
    RIGHT groups additionally pad by `longest_value - len(value)` so values end in the same column.
    Fractional groups are run through align_fraction_strings() first.

    Returns:
        list[tuple[str, str]]: (key, padded_value) pairs, padding is prepended to the value.

    Example:
        A RIGHT group with lines (i8, -1) and (i16, 255) aligns to [("i8", "  -1"), ("i16", "255")].
    """
    if not isinstance(group, OutputGroup):
        raise TypeError(f"group must be an OutputGroup, but found {fmt_type(group)}")
    if not group.lines:
        return []

    if group.fractional:
        values = align_fraction_strings(*group.line_values)
        group = replace(group, lines=tuple(OutputLine(k, v) for k, v in zip(group.line_keys, values)))

    longest_key = group.longest_key()
    longest_value = group.longest_value()

    aligned = []
    for key, value in group:
        padding = longest_key - len(key)
        if group.alignment == Alignment.RIGHT:
            padding += longest_value - len(value)
        aligned.append((key, " " * padding + value))
    return aligned


def align_fraction_strings(*values: str) -> list[str]:
    """
    Align independently formatted fractional numbers on their signs and decimal points.

    Steps:
        1. Trailing zeros of each fractional part are stripped, an all-zero fractional part is dropped.
        2. If some values have a sign and others do not, unsigned values get a leading space.
        3. If some values have a fractional part and others do not, those without get a trailing
           space in place of the decimal point.
        4. Shorter fractional parts are right-padded with spaces to the longest one.

    The results, right-aligned against each other, have matching sign and decimal point columns.
    Whole parts of different length are left to the caller's right alignment.

    Examples:
        >>> align_fraction_strings("2.123", "2.12")
        ['2.123', '2.12 ']
        >>> align_fraction_strings("2", "2.5")
        ['2  ', '2.5']
        >>> align_fraction_strings("-1.50", "3")
        ['-1.5', ' 3  ']
    """
    for v in values:
        if not isinstance(v, str):
            raise TypeError(f"values must be str, but found {fmt_type(v)}")

    parts = [get_fraction_parts(v) for v in values]
    any_sign = any(p.has_sign for p in parts)
    all_sign = all(p.has_sign for p in parts)
    longest_tail = max((len(p.tail) for p in parts), default=0)

    aligned = []
    for p in parts:
        sign_pad = " " if any_sign and not all_sign and not p.has_sign else ""
        sign = "-" if p.has_sign else ""
        tail = p.tail
        aligned.append(f"{sign_pad}{sign}{p.whole}{tail}{' ' * (longest_tail - len(tail))}")
    return aligned


def get_fraction_parts(value: str) -> FractionParts:
    """
    Split a formatted number into sign, whole part, normalized fractional part and exponent.

    Strings outside the number grammar are kept whole, so alignment never fails.

    Examples:
        >>> get_fraction_parts("-13.3700")
        FractionParts(has_sign=True, whole='13', fraction='37', exponent='')
        >>> get_fraction_parts("1411010.000")
        FractionParts(has_sign=False, whole='1411010', fraction=None, exponent='')
    """
    match = FRACTION_REGEX.fullmatch(value.strip())
    if match is None:
        return FractionParts(has_sign=False, whole=value)
    return FractionParts(
        has_sign=match.group("sign") is not None,
        whole=match.group("whole"),
        fraction=strip_fraction_zeros(match.group("fraction")),
        exponent=match.group("exponent") or "",
    )


def strip_fraction_zeros(fraction: str | None) -> str | None:
    """
    Remove trailing zeros from a fractional part, None if nothing remains.

    Examples:
        >>> strip_fraction_zeros("123000")
        '123'
        >>> strip_fraction_zeros("000") is None
        True
    """
    if fraction is None:
        return None
    fraction = fraction.rstrip("0")
    return fraction or None

"""
Numlens Input Decoder

Turns a compact integer token such as '-0x_dead_beef', '0b1010', '0o17' or '5mib' into a
ParsedInput record: sign, numeral system, digit string, unit and the unsigned 64-bit magnitude.
"""

# Grammar, applied after trimming whitespace, dropping '_' and lowercasing:
#
#   ^(-)?(0b|0o|0x)?([0-9a-f]+)([a-z]{1,4})?$
#
# The digit class is the union of all four radices; radix validity is checked on decode.

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import NamedTuple, Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import BiDirectionalMap
from .errors import InvalidFormatError, MagnitudeOverflowError, RadixDigitError
from .tools import fmt_type
from .units import U64_MAX, Unit

logger = logging.getLogger(__name__)

INPUT_REGEX = re.compile(
    r"^(?P<sign>-)?(?P<marker>0[box])?(?P<digits>[0-9a-f]+)(?P<suffix>[a-z]{1,4})?$"
)

_HEX_DIGITS = frozenset("0123456789abcdef")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Sign(StrEnum):
    """Sign of the input token. The magnitude is always stored unsigned."""
    POSITIVE = "positive"
    NEGATIVE = "negative"

    @classmethod
    def from_input(cls, part: str | None) -> Self:
        return cls.NEGATIVE if part == "-" else cls.POSITIVE

    @property
    def glyph(self) -> str:
        return "-" if self is Sign.NEGATIVE else ""


@unique
class NumeralSystem(StrEnum):
    """Radix of the digit string, selected by the '0b', '0o', '0x' marker or its absence."""
    BIN = "bin"
    OCTAL = "octal"
    DECIMAL = "decimal"
    HEX = "hex"

    @classmethod
    def from_marker(cls, marker: str | None) -> Self:
        """
        Examples:
            >>> NumeralSystem.from_marker("0x")
            <NumeralSystem.HEX: 'hex'>
            >>> NumeralSystem.from_marker(None)
            <NumeralSystem.DECIMAL: 'decimal'>
        """
        return _MARKERS.get_key(marker or "")

    @property
    def marker(self) -> str:
        return _MARKERS[self]

    @property
    def radix(self) -> int:
        return _RADIX[self]


class InputSplit(NamedTuple):
    """Raw fields of a normalized token, as captured by the grammar."""
    sign: str | None
    marker: str | None
    digits: str
    suffix: str | None


@dataclass(frozen=True)
class ParsedInput:
    """
    Canonical, immutable value record produced by parse().

    The unit is kept as metadata: `value` is the decoded magnitude before unit scaling,
    `base_value` is the magnitude in bytes. Both fit into 64 bits.
    """

    normalized_input: str
    numeral_system: NumeralSystem
    unit: Unit
    sign: Sign
    value: int
    raw_digit_string: str
    unit_suffix: str = ""

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"value must be an int, but found {fmt_type(self.value)}")
        if not 0 <= self.value <= U64_MAX:
            raise MagnitudeOverflowError(self.value)
        # Fails early on overflow after unit scaling
        self.unit.value_to_base_u64(self.value)

    def __str__(self):
        return self.as_str

    @property
    def as_str(self) -> str:
        """Normalized token rebuilt from the parsed fields."""
        return f"{self.sign.glyph}{self.numeral_system.marker}{self.raw_digit_string}{self.unit_suffix}"

    @property
    def base_value(self) -> int:
        """Magnitude scaled by the unit, in bytes."""
        return self.unit.value_to_base_u64(self.value)


# @formatter:off
_MARKERS = BiDirectionalMap({
    NumeralSystem.BIN: "0b", NumeralSystem.OCTAL: "0o",
    NumeralSystem.DECIMAL: "", NumeralSystem.HEX: "0x",
})

_RADIX = frozendict({
    NumeralSystem.BIN: 2, NumeralSystem.OCTAL: 8,
    NumeralSystem.DECIMAL: 10, NumeralSystem.HEX: 16,
})
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def parse(raw: str) -> ParsedInput:
    """
    Decode a raw input token into a ParsedInput.

    Args:
        raw: Token like '42', '-0xFMiB', '0b1000_1111', '0o17' or '1_000kb'. Case-insensitive;
             surrounding whitespace and '_' separators are ignored.

    Returns:
        ParsedInput: The decoded value record.

    Raises:
        InvalidFormatError: The token does not match the grammar.
        InvalidUnitError: The unit suffix is unknown.
        RadixDigitError: The digits are invalid for the numeral system, e.g. '12a' or '0b12'.
        MagnitudeOverflowError: The magnitude, or magnitude times unit, exceeds 64 bits.
        TypeError: raw is not a str.

    Examples:
        >>> p = parse("-0xFmib")
        >>> p.sign, p.numeral_system, p.unit, p.value
        (<Sign.NEGATIVE: 'negative'>, <NumeralSystem.HEX: 'hex'>, <Unit.MIBI: 'mibi'>, 15)
    """
    normalized = normalize_input(raw)
    split = split_input(normalized)
    logger.debug("Split %r into %s", normalized, split)

    numeral_system = NumeralSystem.from_marker(split.marker)
    unit = Unit.from_suffix(split.suffix or "")
    sign = Sign.from_input(split.sign)
    value = decode_digits(split.digits, numeral_system)

    return ParsedInput(
        normalized_input=normalized,
        numeral_system=numeral_system,
        unit=unit,
        sign=sign,
        value=value,
        raw_digit_string=split.digits,
        unit_suffix=split.suffix or "",
    )


def normalize_input(raw: str) -> str:
    """
    Trim surrounding whitespace, remove all '_' and lowercase.

    Examples:
        >>> normalize_input(" 0x_dead_beefMB ")
        '0xdeadbeefmb'
    """
    if not isinstance(raw, str):
        raise TypeError(f"input must be a str, but found {fmt_type(raw)}")
    return raw.strip().replace("_", "").lower()


def split_input(normalized: str) -> InputSplit:
    """
    Validate a normalized token against the grammar and return its four fields.

    Raises:
        InvalidFormatError: The full token does not match start-to-end.
    """
    if not normalized:
        raise InvalidFormatError(normalized, "empty input")
    match = INPUT_REGEX.fullmatch(normalized)
    if match is None:
        raise InvalidFormatError(normalized)
    return InputSplit(
        sign=match.group("sign"),
        marker=match.group("marker"),
        digits=match.group("digits"),
        suffix=match.group("suffix"),
    )


def decode_digits(digits: str, numeral_system: NumeralSystem) -> int:
    """
    Decode a digit string in the given numeral system into an unsigned 64-bit magnitude.

    Raises:
        RadixDigitError: A digit is not valid for the radix.
        MagnitudeOverflowError: The value exceeds 64 bits.
    """
    radix = numeral_system.radix
    invalid = [ch for ch in digits if ch not in _HEX_DIGITS or int(ch, 16) >= radix]
    if not digits or invalid:
        raise RadixDigitError(digits, numeral_system)
    value = int(digits, radix)
    if value > U64_MAX:
        raise MagnitudeOverflowError(value)
    return value

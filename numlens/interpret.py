"""
Numlens Representation Generator

Renders one ParsedInput under several interpretations: numeral systems, the 64-bit
big-endian bit pattern, truncated signed and unsigned integers, IEEE-754 bit reinterpretation
and byte-size ladders. Every interpretation becomes an OutputGroup of labeled strings.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
import struct
from dataclasses import dataclass, field
from enum import StrEnum, unique
from typing import Iterable, Iterator

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .config import DisplayConf
from .parse import ParsedInput
from .tools import fmt_type
from .units import Unit, UnitsConf

logger = logging.getLogger(__name__)

INT_WIDTHS = (8, 16, 32, 64)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Interpretation(StrEnum):
    """Semantic lens of an output group, in display order."""
    NUMERAL_SYSTEMS = "numeral_systems"
    BIT64_BIG_ENDIAN = "bit64_big_endian"
    SIGNED_INTEGERS = "signed_integers"
    UNSIGNED_INTEGERS = "unsigned_integers"
    IEEE754 = "ieee754"
    BYTES = "bytes"
    IBIBYTES = "ibibytes"


@unique
class Alignment(StrEnum):
    """
    Alignment of values against the other values of the same group.

    Attributes:
        LEFT (str)  : Values start in the same column
        RIGHT (str) : Values end in the same column
    """
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OutputLine:
    key: str
    value: str


@dataclass(frozen=True)
class OutputGroup:
    """
    Labeled renderings of one value under one Interpretation.

    Iterating yields (key, value) pairs. The `fractional` flag marks groups of independently
    formatted fractional numbers which need decimal-point alignment before column padding.
    """

    interpretation: Interpretation
    alignment: Alignment
    lines: tuple[OutputLine, ...] = field(default_factory=tuple)
    fractional: bool = False

    def __post_init__(self):
        object.__setattr__(self, "lines", tuple(self.lines))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return ((line.key, line.value) for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def title(self) -> str:
        return interpretation_title(self.interpretation)

    @property
    def line_keys(self) -> tuple[str, ...]:
        return tuple(line.key for line in self.lines)

    @property
    def line_values(self) -> tuple[str, ...]:
        return tuple(line.value for line in self.lines)

    def longest_key(self) -> int:
        return max((len(line.key) for line in self.lines), default=0)

    def longest_value(self) -> int:
        return max((len(line.value) for line in self.lines), default=0)


# @formatter:off
_TITLES = frozendict({
    Interpretation.NUMERAL_SYSTEMS:   "Different numeral systems",
    Interpretation.BIT64_BIG_ENDIAN:  "64bit in memory (big endian byte representation)",
    Interpretation.SIGNED_INTEGERS:   "Signed integers (decimal)",
    Interpretation.UNSIGNED_INTEGERS: "Unsigned integers (decimal)",
    Interpretation.IEEE754:           "Integer bits as IEEE754 (floating point numbers/fractions)",
    Interpretation.BYTES:             "File size in bytes (factor 1000) (using f64)",
    Interpretation.IBIBYTES:          "File size in *ibibytes (factor 1024) (using f64)",
})
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def generate(parsed: ParsedInput,
             conf: DisplayConf | None = None,
             interpretations: Iterable[Interpretation | str] | None = None) -> list[OutputGroup]:
    """
    Build the output groups for a parsed input.

    Args:
        parsed: Decoded input.
        conf: Display settings, DisplayConf() defaults if None.
        interpretations: Optional subset of interpretations to build. Groups are always returned
            in the canonical Interpretation order, duplicates are ignored.

    Returns:
        list[OutputGroup]: One group per interpretation, seven by default.
    """
    if not isinstance(parsed, ParsedInput):
        raise TypeError(f"parsed must be a ParsedInput, but found {fmt_type(parsed)}")
    conf = DisplayConf() if conf is None else conf
    wanted = set(Interpretation) if interpretations is None else {Interpretation(i) for i in interpretations}

    groups = [get_output_group(parsed, i, conf) for i in Interpretation if i in wanted]
    logger.debug("Built %d output groups for %r", len(groups), parsed.normalized_input)
    return groups


def get_output_group(parsed: ParsedInput,
                     interpretation: Interpretation | str,
                     conf: DisplayConf | None = None) -> OutputGroup:
    """Build the OutputGroup of a single interpretation."""
    conf = DisplayConf() if conf is None else conf
    builder = _BUILDERS[Interpretation(interpretation)]
    return builder(parsed, conf)


def interpretation_title(interpretation: Interpretation) -> str:
    """
    Human-readable group title.

    Examples:
        >>> interpretation_title(Interpretation.IEEE754)
        'Integer bits as IEEE754 (floating point numbers/fractions)'
    """
    return _TITLES[Interpretation(interpretation)]


def to_signed(bits: int, width: int) -> int:
    """
    Two's-complement truncating cast: keep the low `width` bits and reinterpret the top bit as sign.

    Examples:
        >>> to_signed(0xFF, 8)
        -1
        >>> to_signed(0x1_7F, 8)
        127
    """
    value = to_unsigned(bits, width)
    if value >> (width - 1):
        value -= 1 << width
    return value


def to_unsigned(bits: int, width: int) -> int:
    """
    Examples:
        >>> to_unsigned(-1, 16)
        65535
    """
    return bits & ((1 << width) - 1)


def reinterpret_f32(bits: int) -> float:
    """Reinterpret the low 32 bits as an IEEE-754 single-precision pattern."""
    return struct.unpack(">f", struct.pack(">I", to_unsigned(bits, 32)))[0]


def reinterpret_f64(bits: int) -> float:
    """Reinterpret the 64 bits as an IEEE-754 double-precision pattern."""
    return struct.unpack(">d", struct.pack(">Q", to_unsigned(bits, 64)))[0]


def fmt_float(value: float, width: int = 64) -> str:
    """
    Shortest string with at least 2 significant digits that reads back as the same float of
    the given bit width.

    Examples:
        >>> fmt_float(reinterpret_f32(1), width=32)
        '1.4e-45'
        >>> fmt_float(0.1)
        '0.1'
    """
    if not math.isfinite(value):
        return str(value)
    max_digits = 9 if width == 32 else 17
    for digits in range(2, max_digits):
        text = f"{value:.{digits}g}"
        if _round_trips(text, value, width):
            return text
    return f"{value:.{max_digits}g}"


def fmt_fixed(value: float, precision: int) -> str:
    """Fixed-point notation without exponent, trailing zeros are kept."""
    return f"{value:.{precision}f}"


def fmt_bin_grouped(bits: int, group_size: int = 8, separator: str = "_") -> str:
    """
    64-bit binary string split into groups, most significant group first.

    Examples:
        >>> fmt_bin_grouped(0xF0AA, group_size=8)[-17:]
        '11110000_10101010'
    """
    digits = f"{to_unsigned(bits, 64):064b}"
    return separator.join(digits[i:i + group_size] for i in range(0, 64, group_size))


# Private Methods ------------------------------------------------------------------------------------------------------

def _round_trips(text: str, value: float, width: int) -> bool:
    candidate = float(text)
    if width == 32:
        try:
            candidate = struct.unpack(">f", struct.pack(">f", candidate))[0]
        except OverflowError:
            # Rounded above the largest finite single
            return False
    return candidate == value


def _build_numeral_systems(parsed: ParsedInput, conf: DisplayConf) -> OutputGroup:
    sign, value = parsed.sign.glyph, parsed.value
    return OutputGroup(
        interpretation=Interpretation.NUMERAL_SYSTEMS,
        alignment=Alignment.LEFT,
        lines=(
            OutputLine("Decimal", f"{sign}{value:d}"),
            OutputLine("Binary", f"{sign}{value:b}"),
            OutputLine("Octal", f"{sign}{value:o}"),
            OutputLine("Hexadecimal", f"{sign}{value:x}"),
        ),
    )


def _build_bit64(parsed: ParsedInput, conf: DisplayConf) -> OutputGroup:
    bits = parsed.value
    return OutputGroup(
        interpretation=Interpretation.BIT64_BIG_ENDIAN,
        alignment=Alignment.LEFT,
        lines=(
            OutputLine("Bin (grouped)", f"0b{fmt_bin_grouped(bits, conf.bin_group_size)}"),
            OutputLine("Bin (plain)", f"0b{bits:064b}"),
            OutputLine("Hex", f"0x{bits:016x}"),
        ),
    )


def _build_signed(parsed: ParsedInput, conf: DisplayConf) -> OutputGroup:
    return OutputGroup(
        interpretation=Interpretation.SIGNED_INTEGERS,
        alignment=Alignment.RIGHT,
        lines=tuple(OutputLine(f"i{w}", str(to_signed(parsed.value, w))) for w in INT_WIDTHS),
    )


def _build_unsigned(parsed: ParsedInput, conf: DisplayConf) -> OutputGroup:
    return OutputGroup(
        interpretation=Interpretation.UNSIGNED_INTEGERS,
        alignment=Alignment.RIGHT,
        lines=tuple(OutputLine(f"u{w}", str(to_unsigned(parsed.value, w))) for w in INT_WIDTHS),
    )


def _build_ieee754(parsed: ParsedInput, conf: DisplayConf) -> OutputGroup:
    return OutputGroup(
        interpretation=Interpretation.IEEE754,
        alignment=Alignment.RIGHT,
        lines=(
            OutputLine("f32", fmt_float(reinterpret_f32(parsed.value), width=32)),
            OutputLine("f64", fmt_float(reinterpret_f64(parsed.value), width=64)),
        ),
        fractional=True,
    )


def _build_byte_ladder(parsed: ParsedInput,
                       conf: DisplayConf,
                       interpretation: Interpretation,
                       ladder: tuple[Unit, ...]) -> OutputGroup:
    sign = parsed.sign.glyph
    base_value = parsed.base_value
    base_value_f64 = float(base_value)
    lines = []
    for unit in ladder:
        if unit is Unit.BASE:
            # Exact, doubles cannot hold every 64-bit integer
            lines.append(OutputLine(unit.symbol, f"{sign}{base_value}"))
        else:
            target = unit.base_to_target_f64(base_value_f64)
            lines.append(OutputLine(unit.symbol, f"{sign}{fmt_fixed(target, conf.precision)}"))
    return OutputGroup(
        interpretation=interpretation,
        alignment=Alignment.RIGHT,
        lines=tuple(lines),
        fractional=True,
    )


def _build_bytes(parsed: ParsedInput, conf: DisplayConf) -> OutputGroup:
    return _build_byte_ladder(parsed, conf, Interpretation.BYTES, UnitsConf.DECIMAL_LADDER)


def _build_ibibytes(parsed: ParsedInput, conf: DisplayConf) -> OutputGroup:
    return _build_byte_ladder(parsed, conf, Interpretation.IBIBYTES, UnitsConf.BINARY_LADDER)


_BUILDERS = frozendict({
    Interpretation.NUMERAL_SYSTEMS: _build_numeral_systems,
    Interpretation.BIT64_BIG_ENDIAN: _build_bit64,
    Interpretation.SIGNED_INTEGERS: _build_signed,
    Interpretation.UNSIGNED_INTEGERS: _build_unsigned,
    Interpretation.IEEE754: _build_ieee754,
    Interpretation.BYTES: _build_bytes,
    Interpretation.IBIBYTES: _build_ibibytes,
})

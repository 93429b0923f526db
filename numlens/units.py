#
# Numlens Byte-Size Units
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum
from typing import Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidUnitError, MagnitudeOverflowError
from .tools import fmt_type

U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


# Classes --------------------------------------------------------------------------------------------------------------

class Unit(StrEnum):
    """
    Byte-size scale factors.

    Decimal units scale by powers of 1000, binary (IEC) units by powers of 1024.

    Attributes:
        BASE (str) : Plain bytes, scale 1
        KILO (str) : 1000¹
        MEGA (str) : 1000²
        GIGA (str) : 1000³
        TERA (str) : 1000⁴
        KIBI (str) : 1024¹
        MIBI (str) : 1024², also reachable as MEBI
        GIBI (str) : 1024³
        TEBI (str) : 1024⁴
    """
    BASE = "base"
    KILO = "kilo"
    MEGA = "mega"
    GIGA = "giga"
    TERA = "tera"
    KIBI = "kibi"
    MIBI = "mibi"
    MEBI = "mibi"
    GIBI = "gibi"
    TEBI = "tebi"

    @classmethod
    def from_suffix(cls, suffix: str) -> Self:
        """
        Map a case-insensitive unit suffix to a Unit.

        Empty suffix maps to Unit.BASE.

        Raises:
            InvalidUnitError: The suffix is not in the unit vocabulary.
            TypeError: The suffix is not a str.

        Examples:
            >>> Unit.from_suffix("KiB")
            <Unit.KIBI: 'kibi'>
            >>> Unit.from_suffix("")
            <Unit.BASE: 'base'>
        """
        if not isinstance(suffix, str):
            raise TypeError(f"unit suffix must be a str, but found {fmt_type(suffix)}")
        try:
            return UnitsConf.SUFFIXES[suffix.lower()]
        except KeyError:
            raise InvalidUnitError(suffix) from None

    @property
    def scale(self) -> int:
        """Integer scale of the unit in bytes, e.g. 1_048_576 for MIBI."""
        factor, exponent = _UNIT_SCALES[self]
        return factor ** exponent

    @property
    def symbol(self) -> str:
        """Short symbol as used in output keys, e.g. 'KB' or 'MiB'."""
        return _UNIT_SYMBOLS[self]

    def value_to_base_u64(self, value: int) -> int:
        """
        Scale an integer in this unit to bytes, checked against the unsigned 64-bit range.

        Raises:
            MagnitudeOverflowError: The scaled value does not fit into 64 bits.
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"value must be an int, but found {fmt_type(value)}")
        if value < 0:
            raise ValueError(f"value must be non-negative, but found {value}")
        base_value = value * self.scale
        if base_value > U64_MAX:
            raise MagnitudeOverflowError(base_value, what=f"{value} {unit_label(self)} =")
        return base_value

    def base_to_target_f64(self, value: float) -> float:
        """Convert bytes to this unit in double precision, for display only."""
        return float(value) / float(self.scale)


class UnitsConf:
    """
    Unit vocabulary configuration.

    Attributes:
        SUFFIXES: Lowercase input suffix -> Unit. Both SI ('kb') and IEC ('kib') spellings
            are accepted, plus the long IEC forms ('mebi', 'tebi').
        DECIMAL_LADDER: Units of the decimal byte-size ladder, smallest first.
        BINARY_LADDER: Units of the binary byte-size ladder, smallest first.
    """
    # @formatter:off
    SUFFIXES = frozendict({
        "": Unit.BASE,
        "k": Unit.KILO, "kb": Unit.KILO,
        "m": Unit.MEGA, "mb": Unit.MEGA,
        "g": Unit.GIGA, "gb": Unit.GIGA,
        "t": Unit.TERA, "tb": Unit.TERA,
        "ki": Unit.KIBI, "kib": Unit.KIBI, "kibi": Unit.KIBI,
        "mi": Unit.MIBI, "mib": Unit.MIBI, "mibi": Unit.MIBI, "meb": Unit.MIBI, "mebi": Unit.MIBI,
        "gi": Unit.GIBI, "gib": Unit.GIBI, "gibi": Unit.GIBI,
        "ti": Unit.TEBI, "tib": Unit.TEBI, "tibi": Unit.TEBI, "teb": Unit.TEBI, "tebi": Unit.TEBI,
    })
    # @formatter:on

    DECIMAL_LADDER = (Unit.BASE, Unit.KILO, Unit.MEGA, Unit.GIGA, Unit.TERA)
    BINARY_LADDER = (Unit.BASE, Unit.KIBI, Unit.MIBI, Unit.GIBI, Unit.TEBI)


# @formatter:off
_UNIT_SCALES = frozendict({
    Unit.BASE: (1, 0),
    Unit.KILO: (1000, 1), Unit.MEGA: (1000, 2), Unit.GIGA: (1000, 3), Unit.TERA: (1000, 4),
    Unit.KIBI: (1024, 1), Unit.MIBI: (1024, 2), Unit.GIBI: (1024, 3), Unit.TEBI: (1024, 4),
})

_UNIT_SYMBOLS = frozendict({
    Unit.BASE: "B",
    Unit.KILO: "KB", Unit.MEGA: "MB", Unit.GIGA: "GB", Unit.TERA: "TB",
    Unit.KIBI: "KiB", Unit.MIBI: "MiB", Unit.GIBI: "GiB", Unit.TEBI: "TiB",
})

_UNIT_LABELS = frozendict({
    Unit.BASE: "(Base)",
    Unit.KILO: "Kilobyte", Unit.MEGA: "Megabyte", Unit.GIGA: "Gigabyte", Unit.TERA: "Terabyte",
    Unit.KIBI: "Kibibyte", Unit.MIBI: "Mebibyte", Unit.GIBI: "Gibibyte", Unit.TEBI: "Tebibyte",
})
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def unit_label(unit: Unit) -> str:
    """
    Human-readable unit name.

    Examples:
        >>> unit_label(Unit.KIBI)
        'Kibibyte'
    """
    return _UNIT_LABELS[Unit(unit)]


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if set(_UNIT_SCALES) != set(Unit) or set(_UNIT_SYMBOLS) != set(Unit) or set(_UNIT_LABELS) != set(Unit):
    raise AssertionError("Configuration Error: every Unit must have a scale, a symbol and a label.")

if not set(UnitsConf.SUFFIXES.values()) == set(Unit):
    raise AssertionError("Configuration Error: every Unit must be reachable from at least one suffix.")

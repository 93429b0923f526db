#
# Numlens - Input Decoder Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import FrozenInstanceError

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numlens.errors import (
    InvalidFormatError,
    InvalidUnitError,
    MagnitudeOverflowError,
    ParseError,
    RadixDigitError,
)
from numlens.parse import (
    NumeralSystem,
    ParsedInput,
    Sign,
    decode_digits,
    normalize_input,
    parse,
    split_input,
)
from numlens.units import U64_MAX, Unit


# Tests ----------------------------------------------------------------------------------------------------------------

class TestNormalizeInput:

    @pytest.mark.parametrize("raw, expected", [
        pytest.param("0x_dead_beefMB", "0xdeadbeefmb", id="underscores_and_case"),
        pytest.param("123456789", "123456789", id="plain"),
        pytest.param("  1_000_000 \n", "1000000", id="whitespace"),
        pytest.param("-0XFMiB", "-0xfmib", id="upper_marker"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_input(raw) == expected

    def test_non_str(self):
        with pytest.raises(TypeError, match="must be a str"):
            normalize_input(42)


class TestSplitInput:

    def test_all_fields(self):
        split = split_input("-0x123ki")
        assert split.sign == "-"
        assert split.marker == "0x"
        assert split.digits == "123"
        assert split.suffix == "ki"

    def test_digits_only(self):
        split = split_input("123")
        assert split.sign is None
        assert split.marker is None
        assert split.digits == "123"
        assert split.suffix is None

    def test_hex_digits_before_unit(self):
        split = split_input("0xbeefkb")
        assert split.digits == "beef"
        assert split.suffix == "kb"

    @pytest.mark.parametrize("normalized", [
        pytest.param("12234", id="decimal"),
        pytest.param("12234mb", id="decimal_mb"),
        pytest.param("12234gib", id="decimal_gib"),
        pytest.param("0x2000", id="hex"),
        pytest.param("0b1000000011110000", id="bin"),
        pytest.param("0o777", id="octal"),
        pytest.param("0x6020kb", id="hex_kb"),
    ])
    def test_valid(self, normalized):
        split_input(normalized)

    @pytest.mark.parametrize("normalized", [
        pytest.param("", id="empty"),
        pytest.param("12234gib124", id="trailing_digits"),
        pytest.param("-", id="sign_only"),
        pytest.param("kb", id="unit_only"),
        pytest.param("-kb", id="sign_and_unit"),
        pytest.param("1.5", id="fraction"),
        pytest.param("+5", id="plus_sign"),
        pytest.param("--1", id="double_sign"),
        pytest.param("1 2", id="inner_space"),
        pytest.param("12kbyte", id="suffix_too_long"),
    ])
    def test_invalid(self, normalized):
        with pytest.raises(InvalidFormatError):
            split_input(normalized)


class TestNumeralSystem:

    @pytest.mark.parametrize("marker, expected, radix", [
        pytest.param("0b", NumeralSystem.BIN, 2, id="bin"),
        pytest.param("0o", NumeralSystem.OCTAL, 8, id="octal"),
        pytest.param(None, NumeralSystem.DECIMAL, 10, id="decimal_none"),
        pytest.param("", NumeralSystem.DECIMAL, 10, id="decimal_empty"),
        pytest.param("0x", NumeralSystem.HEX, 16, id="hex"),
    ])
    def test_from_marker(self, marker, expected, radix):
        ns = NumeralSystem.from_marker(marker)
        assert ns is expected
        assert ns.radix == radix
        assert ns.marker == (marker or "")


class TestSign:

    def test_from_input(self):
        assert Sign.from_input("-") is Sign.NEGATIVE
        assert Sign.from_input("") is Sign.POSITIVE
        assert Sign.from_input(None) is Sign.POSITIVE

    def test_glyph(self):
        assert Sign.NEGATIVE.glyph == "-"
        assert Sign.POSITIVE.glyph == ""


class TestDecodeDigits:

    @pytest.mark.parametrize("digits, ns, expected", [
        pytest.param("1010", NumeralSystem.BIN, 10, id="bin"),
        pytest.param("17", NumeralSystem.OCTAL, 15, id="octal"),
        pytest.param("42", NumeralSystem.DECIMAL, 42, id="decimal"),
        pytest.param("ff", NumeralSystem.HEX, 255, id="hex"),
        pytest.param("ffffffffffffffff", NumeralSystem.HEX, U64_MAX, id="u64_max"),
    ])
    def test_decode(self, digits, ns, expected):
        assert decode_digits(digits, ns) == expected

    @pytest.mark.parametrize("digits, ns", [
        pytest.param("12", NumeralSystem.BIN, id="bin_2"),
        pytest.param("8", NumeralSystem.OCTAL, id="octal_8"),
        pytest.param("12a", NumeralSystem.DECIMAL, id="decimal_a"),
        pytest.param("", NumeralSystem.DECIMAL, id="empty"),
    ])
    def test_invalid_digit(self, digits, ns):
        with pytest.raises(RadixDigitError) as excinfo:
            decode_digits(digits, ns)
        assert excinfo.value.digits == digits
        assert excinfo.value.numeral_system is ns

    def test_overflow(self):
        with pytest.raises(MagnitudeOverflowError):
            decode_digits("10000000000000000", NumeralSystem.HEX)


class TestParse:

    def test_negative_hex_mebibyte(self):
        parsed = parse("-0xFmib")
        assert parsed.unit is Unit.MIBI
        assert parsed.sign is Sign.NEGATIVE
        assert parsed.numeral_system is NumeralSystem.HEX
        assert parsed.value == 15
        assert parsed.base_value == 15 * 1024 ** 2
        assert parsed.raw_digit_string == "f"
        assert parsed.unit_suffix == "mib"

    def test_normalizes_before_matching(self):
        parsed = parse("0x_dead_beefMB")
        assert parsed.normalized_input == "0xdeadbeefmb"
        assert parsed.value == 0xDEADBEEF
        assert parsed.unit is Unit.MEGA
        assert parsed.base_value == 0xDEADBEEF * 1_000_000

    @pytest.mark.parametrize("value", [0, 1, 42, 1_000_000, 2 ** 63, U64_MAX])
    def test_decimal_round_trip(self, value):
        parsed = parse(str(value))
        assert parsed.value == value
        assert parsed.numeral_system is NumeralSystem.DECIMAL
        assert parsed.unit is Unit.BASE
        assert parsed.sign is Sign.POSITIVE

    @pytest.mark.parametrize("raw", [
        "42", "-0xFmib", "0b1010", "0o17kb", "1_000k", "-0", "0x_dead_beefMB", "5TiB", "0b1g",
    ])
    def test_fields_rebuild_normalized_input(self, raw):
        parsed = parse(raw)
        assert parsed.as_str == parsed.normalized_input
        assert str(parsed) == parsed.normalized_input

    @pytest.mark.parametrize("raw, expected", [
        pytest.param("0b1010", 10, id="bin"),
        pytest.param("0o17", 15, id="octal"),
        pytest.param("0x2000_4000", 0x20004000, id="hex"),
        pytest.param("0b1g", 1, id="bin_giga"),
    ])
    def test_numeral_systems(self, raw, expected):
        assert parse(raw).value == expected

    def test_unit_is_metadata(self):
        parsed = parse("5mb")
        assert parsed.value == 5
        assert parsed.base_value == 5_000_000

    def test_negative_keeps_magnitude(self):
        parsed = parse("-5")
        assert parsed.sign is Sign.NEGATIVE
        assert parsed.value == 5
        assert parsed.as_str == "-5"

    def test_negative_zero(self):
        parsed = parse("-0")
        assert parsed.sign is Sign.NEGATIVE
        assert parsed.value == 0

    @pytest.mark.parametrize("raw, error", [
        pytest.param("12234gib124", InvalidFormatError, id="trailing_content"),
        pytest.param("", InvalidFormatError, id="empty"),
        pytest.param("-", InvalidFormatError, id="sign_only"),
        pytest.param("mb", InvalidFormatError, id="unit_only"),
        pytest.param("12xyz", InvalidUnitError, id="unknown_unit"),
        pytest.param("12a", RadixDigitError, id="hex_digit_in_decimal"),
        pytest.param("0b12", RadixDigitError, id="decimal_digit_in_bin"),
        pytest.param("0o8", RadixDigitError, id="octal_8"),
        pytest.param("18446744073709551616", MagnitudeOverflowError, id="u64_max_plus_one"),
        pytest.param("0x1_0000_0000_0000_0000", MagnitudeOverflowError, id="hex_65_bits"),
        pytest.param("16777216tib", MagnitudeOverflowError, id="overflow_after_unit"),
    ])
    def test_errors(self, raw, error):
        with pytest.raises(error):
            parse(raw)

    def test_errors_are_parse_errors(self):
        for raw in ("12234gib124", "12xyz", "12a", "18446744073709551616"):
            with pytest.raises(ParseError):
                parse(raw)

    def test_same_input_fails_same_way(self):
        messages = set()
        for _ in range(3):
            with pytest.raises(InvalidUnitError) as excinfo:
                parse("1zz")
            messages.add(str(excinfo.value))
        assert len(messages) == 1

    def test_non_str(self):
        with pytest.raises(TypeError):
            parse(None)


class TestParsedInput:

    def test_frozen(self):
        parsed = parse("1")
        with pytest.raises(FrozenInstanceError):
            parsed.value = 2

    def test_rejects_out_of_range_value(self):
        with pytest.raises(MagnitudeOverflowError):
            ParsedInput(
                normalized_input="x",
                numeral_system=NumeralSystem.DECIMAL,
                unit=Unit.BASE,
                sign=Sign.POSITIVE,
                value=U64_MAX + 1,
                raw_digit_string="x",
            )

    def test_rejects_overflow_after_unit(self):
        with pytest.raises(MagnitudeOverflowError):
            ParsedInput(
                normalized_input="16777216tib",
                numeral_system=NumeralSystem.DECIMAL,
                unit=Unit.TEBI,
                sign=Sign.POSITIVE,
                value=2 ** 24,
                raw_digit_string="16777216",
                unit_suffix="tib",
            )

"""Tests for numeric-string parsing and DecimalNumber."""

import pytest

from bcmath.errors import MalformedNumber
from bcmath.number import DecimalNumber, is_well_formed, parse_number


class TestParseValid:
    """Inputs accepted by the number grammar."""

    @pytest.mark.parametrize(
        "text,negative,integer,fraction",
        [
            ("0", False, "0", ""),
            ("42", False, "42", ""),
            ("-42", True, "42", ""),
            ("+42", False, "42", ""),
            ("3.14", False, "3", "14"),
            ("-3.14", True, "3", "14"),
            (".5", False, "0", "5"),
            ("-.5", True, "0", "5"),
            ("5.", False, "5", ""),
            ("007.100", False, "007", "100"),
        ],
    )
    def test_parts(self, text, negative, integer, fraction):
        """Sign, integer and fraction digits are split as written."""
        number = parse_number(text)
        assert number.negative is negative
        assert number.integer == integer
        assert number.fraction == fraction

    def test_empty_string_is_zero(self):
        """The empty string denotes zero."""
        number = parse_number("")
        assert number.is_zero
        assert str(number) == "0"

    @pytest.mark.parametrize("text", [".", "-.", "+."])
    def test_bare_point_is_zero(self, text):
        """A lone decimal point (optionally signed) is zero."""
        assert parse_number(text).is_zero

    @pytest.mark.parametrize("text", ["-0", "-0.000", "-.0", "+0.0"])
    def test_negative_zero_is_canonical(self, text):
        """Every spelling of zero is positive."""
        number = parse_number(text)
        assert number.is_zero
        assert number.negative is False

    def test_many_leading_zeros(self):
        """Leading zeros do not change the value."""
        number = parse_number("0" * 200 + "12.5")
        assert number.unscaled(1) == 125


class TestParseInvalid:
    """Inputs rejected by the number grammar."""

    @pytest.mark.parametrize(
        "text",
        [
            " 1",
            "1 ",
            "1 000",
            "\t5",
            "1e5",
            "1E5",
            "1.5e-3",
            "1.2.3",
            "..",
            "--1",
            "+-1",
            "-+1",
            "1-",
            "-",
            "+",
            "INF",
            "-inf",
            "NaN",
            "nan",
            "1,000",
            "0x1A",
            "abc",
            "١٢",
        ],
    )
    def test_rejected(self, text):
        """Malformed strings raise MalformedNumber."""
        with pytest.raises(MalformedNumber):
            parse_number(text)

    def test_error_carries_position_and_name(self):
        """The error names the argument and the operation."""
        with pytest.raises(MalformedNumber) as exc_info:
            parse_number("1e5", 2, "num2", "add")
        error = exc_info.value
        assert error.position == 2
        assert error.name == "num2"
        assert error.value == "1e5"
        assert str(error) == "bcadd(): Argument #2 ($num2) is not well-formed"

    def test_error_without_position(self):
        """Without a position the message is generic."""
        with pytest.raises(MalformedNumber, match="not well-formed"):
            parse_number("x")

    def test_malformed_is_value_error(self):
        """MalformedNumber can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_number("abc")


class TestIsWellFormed:
    """Tests for the non-raising predicate."""

    def test_valid(self):
        assert is_well_formed("-12.5")
        assert is_well_formed("")

    def test_invalid(self):
        assert not is_well_formed("1e3")
        assert not is_well_formed("-")


class TestDecimalNumber:
    """Tests for DecimalNumber helpers."""

    def test_unscaled_pads_fraction(self):
        """unscaled() right-pads the fraction to the requested length."""
        assert DecimalNumber(False, "1", "5").unscaled(3) == 1500

    def test_unscaled_truncates_fraction(self):
        """unscaled() drops fraction digits beyond the requested length."""
        assert DecimalNumber(True, "9", "999").unscaled(1) == -99

    def test_unscaled_long(self):
        number = DecimalNumber(False, "1" + "0" * 5000, "5")
        assert number.unscaled(3000) == (10**5000 * 10 + 5) * 10**2999

    def test_empty_integer_becomes_zero(self):
        assert DecimalNumber(False, "", "25").integer == "0"

    def test_has_fraction(self):
        assert parse_number("1.000").has_fraction is False
        assert parse_number("1.001").has_fraction is True

    def test_negate_and_abs(self):
        number = parse_number("-2.5")
        assert str(number.negate()) == "2.5"
        assert str(number.abs()) == "2.5"
        assert str(parse_number("0").negate()) == "0"

    def test_integer_part(self):
        assert str(parse_number("-7.9").integer_part()) == "-7"
        assert str(parse_number("-0.9").integer_part()) == "0"

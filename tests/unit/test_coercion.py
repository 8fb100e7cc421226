"""Tests for argument coercion at the public boundary."""

from decimal import Decimal

import pytest

from bcmath.coercion import (
    to_number,
    to_number_string,
    to_rounding_mode,
    to_scale,
    type_name,
)
from bcmath.errors import ArgumentTypeError, MalformedNumber, UnsupportedRoundingMode
from bcmath.rounding import RoundingMode


class TestToNumberString:
    """Tests for to_number_string()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1.5", "1.5"),
            (" 1", " 1"),
            (42, "42"),
            (-7, "-7"),
            (10**40, "1" + "0" * 40),
            (True, "1"),
            (False, "0"),
            (Decimal("1.50"), "1.50"),
            (Decimal("-0.001"), "-0.001"),
            (Decimal("1E+3"), "1000"),
            (Decimal("1E-3"), "0.001"),
        ],
    )
    def test_accepted(self, value, expected):
        assert to_number_string(value, 1, "num1", "add") == expected

    def test_none_is_zero_with_warning(self, log_output):
        assert to_number_string(None, 2, "num2", "add") == "0"
        entry = log_output.entries[0]
        assert entry["event"] == "deprecated_null_argument"
        assert entry["log_level"] == "warning"
        assert "bcadd(): Passing null to parameter #2 ($num2)" in entry["message"]

    @pytest.mark.parametrize("value", [1.5, 0.1, float("nan")])
    def test_float_rejected(self, value):
        with pytest.raises(ArgumentTypeError, match="must be of type string, float given"):
            to_number_string(value, 1, "num1", "add")

    @pytest.mark.parametrize("value", [[1], {"a": 1}, b"1", object()])
    def test_other_types_rejected(self, value):
        with pytest.raises(ArgumentTypeError, match=r"bcmul\(\): Argument #2 \(\$num2\)"):
            to_number_string(value, 2, "num2", "mul")

    @pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")])
    def test_non_finite_decimal(self, value):
        with pytest.raises(MalformedNumber):
            to_number_string(value, 1, "num", "sqrt")

    def test_argument_type_error_is_type_error(self):
        with pytest.raises(TypeError):
            to_number_string(1.0, 1, "num1", "add")


class TestToNumber:
    def test_validates(self):
        assert str(to_number(-12, 1, "num1", "add")) == "-12"
        with pytest.raises(MalformedNumber, match=r"bcsub\(\): Argument #1 \(\$num1\)"):
            to_number(" 1", 1, "num1", "sub")


class TestToScale:
    """Tests for to_scale()."""

    @pytest.mark.parametrize(
        "value,expected",
        [(None, None), (0, 0), (5, 5), (-1, -1), (True, 1), (False, 0), ("3", 3), (" 4 ", 4)],
    )
    def test_accepted(self, value, expected):
        assert to_scale(value, 3, "add") == expected

    @pytest.mark.parametrize("value", ["abc", "1.5", 2.0, [2]])
    def test_rejected(self, value):
        with pytest.raises(ArgumentTypeError, match=r"Argument #3 \(\$scale\) must be of type \?int"):
            to_scale(value, 3, "add")

    def test_custom_name(self):
        with pytest.raises(ArgumentTypeError, match=r"\(\$precision\)"):
            to_scale("x", 2, "round", name="precision")


class TestToRoundingMode:
    """Tests for to_rounding_mode()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (RoundingMode.HALF_EVEN, RoundingMode.HALF_EVEN),
            (1, RoundingMode.HALF_UP),
            (2, RoundingMode.HALF_DOWN),
            (3, RoundingMode.HALF_EVEN),
            (4, RoundingMode.HALF_ODD),
            ("half_even", RoundingMode.HALF_EVEN),
            ("half_away_from_zero", RoundingMode.HALF_UP),
            ("HALF_ODD", RoundingMode.HALF_ODD),
            ("HalfEven", RoundingMode.HALF_EVEN),
            ("HalfAwayFromZero", RoundingMode.HALF_UP),
            ("PHP_ROUND_HALF_DOWN", RoundingMode.HALF_DOWN),
            ("TowardsZero", RoundingMode.TOWARDS_ZERO),
        ],
    )
    def test_accepted(self, value, expected):
        assert to_rounding_mode(value) is expected

    def test_unknown_integer_constant(self):
        with pytest.raises(UnsupportedRoundingMode, match="must be a valid rounding mode"):
            to_rounding_mode(99)

    @pytest.mark.parametrize("value", ["sideways", True, 1.0, None])
    def test_rejected(self, value):
        with pytest.raises(ArgumentTypeError, match=r"bcround\(\): Argument #3 \(\$mode\)"):
            to_rounding_mode(value)


class TestTypeName:
    def test_names(self):
        assert type_name(None) == "null"
        assert type_name(True) == "bool"
        assert type_name(1.5) == "float"
        assert type_name([]) == "list"

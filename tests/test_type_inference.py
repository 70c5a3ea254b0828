"""Tests for scalar type inference."""

import math

import pytest
from config_transcoder.type_inference import ScalarTypeDetector, infer_scalar
from config_transcoder.types import ValueKind


class TestScalarTypeDetector:
    """Tests for ScalarTypeDetector class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = ScalarTypeDetector()

    def test_empty_is_null(self):
        """Test that an empty value is Null."""
        assert self.detector.infer("").kind == ValueKind.NULL

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("TRUE", True),
        ("tRuE", True),
        ("False", False),
        ("false", False),
    ])
    def test_booleans_any_case(self, raw, expected):
        """Test case-insensitive boolean detection."""
        value = self.detector.infer(raw)
        assert value.kind == ValueKind.BOOL
        assert value.data is expected

    def test_integer(self):
        """Test integer detection."""
        value = self.detector.infer("42")
        assert value.kind == ValueKind.NUMBER
        assert value.data == 42
        assert isinstance(value.data, int)

    def test_signed_integers(self):
        """Test explicit signs on integers."""
        assert self.detector.infer("+5").data == 5
        assert self.detector.infer("-17").data == -17

    def test_int64_bounds(self):
        """Test that integers outside 64 bits fall back to float."""
        assert self.detector.infer("9223372036854775807").data == 2 ** 63 - 1
        assert self.detector.infer("-9223372036854775808").data == -(2 ** 63)

        overflow = self.detector.infer("9223372036854775808")
        assert overflow.kind == ValueKind.NUMBER
        assert isinstance(overflow.data, float)

    def test_float(self):
        """Test float detection."""
        value = self.detector.infer("3.14")
        assert value.kind == ValueKind.NUMBER
        assert value.data == pytest.approx(3.14)
        assert isinstance(value.data, float)

    def test_float_forms(self):
        """Test exponent and special float spellings."""
        assert self.detector.infer("1e5").data == 100000.0
        assert self.detector.infer(".5").data == 0.5
        assert math.isinf(self.detector.infer("inf").data)
        assert math.isnan(self.detector.infer("NaN").data)

    @pytest.mark.parametrize("raw", ["42abc", "0x10", "1_000", "1.2.3", "yes", "1e", "\u0663", "\u0661.\u0665"])
    def test_non_numeric_text_is_string(self, raw):
        """Test that number-like text that is not a number stays a string."""
        value = self.detector.infer(raw)
        assert value.kind == ValueKind.STRING
        assert value.data == raw

    def test_leading_zeros_widen_to_number(self):
        """Test that text such as 007 comes back as the integer 7."""
        value = self.detector.infer("007")
        assert value.kind == ValueKind.NUMBER
        assert value.data == 7

    def test_strings_are_unescaped(self):
        """Test that string values are unescaped."""
        assert infer_scalar("line1\\nline2").data == "line1\nline2"
        assert infer_scalar("tab\\there").data == "tab\there"
        assert infer_scalar("C\\:\\\\dir").data == "C:\\dir"
        assert infer_scalar("\\q").data == "q"

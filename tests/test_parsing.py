"""Unit tests for the low-level parsers."""

import logging

import pytest

from nicecolors.exceptions import InvalidFormatError, UnknownColorNameError
from nicecolors.parsing import name_for, parse_color, parse_hex, parse_name, parse_rgba


class TestParseHex:
    """Test parse_hex."""

    @pytest.mark.unit
    def test_returns_channels(self):
        """Test output is a plain tuple."""
        assert parse_hex("#112233") == (17, 34, 51)
        assert parse_hex("123") == (0x11, 0x22, 0x33)

    @pytest.mark.unit
    def test_failure_is_logged(self, caplog):
        """Test the technical reason is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="nicecolors.parsing"):
            with pytest.raises(InvalidFormatError):
                parse_hex("12345")
        assert "expected 3 or 6 digits, got 5" in caplog.text


class TestParseRgba:
    """Test parse_rgba."""

    @pytest.mark.unit
    def test_mixed_separators(self):
        """Test commas and whitespace may be combined."""
        assert parse_rgba("  rgba(1 ,2,  3 , 0.25)  ") == ((1, 2, 3), 0.25)

    @pytest.mark.unit
    def test_alpha_not_clamped(self):
        """Test alpha is reported as written."""
        assert parse_rgba("rgba(0,0,0,2)") == ((0, 0, 0), 2.0)


class TestParseName:
    """Test CSS3 name lookups."""

    @pytest.mark.unit
    def test_lookup(self):
        """Test known names, with surrounding whitespace."""
        assert parse_name(" white ") == (255, 255, 255)

    @pytest.mark.unit
    def test_unknown(self):
        """Test unknown names raise."""
        with pytest.raises(UnknownColorNameError):
            parse_name("blurple")

    @pytest.mark.unit
    def test_name_for(self):
        """Test reverse lookup."""
        assert name_for((0, 0, 0)) == "black"
        assert name_for((0, 0, 1)) is None


class TestParseColor:
    """Test parse_color dispatch."""

    @pytest.mark.unit
    def test_dispatch(self):
        """Test each format is routed to the right parser."""
        assert parse_color("#FFF") == (255, 255, 255)
        assert parse_color("rgb(1,2,3)") == (1, 2, 3)
        assert parse_color("black") == (0, 0, 0)

    @pytest.mark.unit
    def test_hex_errors_keep_hex_kind(self):
        """Test a bad '#' string reports a hex problem."""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_color("#12")
        assert exc_info.value.kind == "hex"


class TestNonFiniteNumbers:
    """Test 'nan' and 'inf' are rejected in rgb() strings."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        ["rgb(nan%,0,0)", "rgb(0,inf%,0)", "rgba(0,0,0,nan)", "rgba(0,0,0,-inf)", "rgba(0,0,0,nan%)"],
    )
    def test_rejected(self, value):
        """Test non-finite channels and alphas raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_rgba(value)
        assert exc_info.value.kind == "rgb"
        assert "not a finite number" in exc_info.value.reason

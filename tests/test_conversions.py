"""Unit tests for the metric and sheet-count readouts."""
import pytest

from imperialcalc.model.conversions import millimeter_conversion, parse_area, sheets_count_display


class TestMillimeterConversion:
    @pytest.mark.parametrize(
        "primary, expected",
        [
            ("1′", "304.8 mm"),
            ("10″", "254 mm"),
            ("1/2″", "12.7 mm"),
            ("3′ 5 1/2″", "1054.1 mm"),
            ("0″", "0 mm"),
        ],
    )
    def test_lengths(self, primary, expected):
        assert millimeter_conversion(primary) == expected

    @pytest.mark.parametrize("primary", ["", "5′ + 3", "5′ x ", "′", "."])
    def test_suppressed(self, primary):
        assert millimeter_conversion(primary) == ""

    def test_area_to_square_meters(self):
        assert millimeter_conversion("32 ft²") == "2.97 m²"
        assert millimeter_conversion("0 ft²") == "0 m²"

    def test_unreadable_area(self):
        assert millimeter_conversion("abc ft²") == ""


class TestSheetsCount:
    @pytest.mark.parametrize(
        "primary, expected",
        [("64 ft²", "8' x 4': 2"), ("65 ft²", "8' x 4': 3"), ("32.50 ft²", "8' x 4': 2"), ("1 ft²", "8' x 4': 1")],
    )
    def test_area_results(self, primary, expected):
        assert sheets_count_display(primary) == expected

    @pytest.mark.parametrize("primary", ["", "0 ft²", "-3.00 ft²", "5′", "4′ x 8′"])
    def test_suppressed(self, primary):
        assert sheets_count_display(primary) == ""


def test_parse_area():
    assert parse_area("32 ft²") == 32
    assert parse_area("32′") is None

"""Parsing tests - ported from time_units_test.go."""

import logging
import sys

import pytest

from pytimeunits import Duration, DurationFormatError, parse_duration


class TestParseValid:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2d3h45m30s", Duration(2, 3, 45, 30)),
            ("1d", Duration(days=1)),
            ("5h", Duration(hours=5)),
            ("10m", Duration(minutes=10)),
            ("20s", Duration(seconds=20)),
            ("1d30s", Duration(days=1, seconds=30)),
            ("4h15m", Duration(hours=4, minutes=15)),
            ("0d0h0m0s", Duration()),
            ("007m", Duration(minutes=7)),
        ],
    )
    def test_fields(self, text, expected):
        assert parse_duration(text) == expected

    def test_empty_string_is_zero(self, zero_duration):
        result = parse_duration("")
        assert result == zero_duration
        assert result.is_zero()

    def test_values_are_not_normalized(self):
        result = parse_duration("100h90m")
        assert result.days == 0
        assert result.hours == 100
        assert result.minutes == 90

    def test_large_component(self):
        assert parse_duration("123456789012345678901234567890s").seconds == (
            123456789012345678901234567890
        )

    def test_classmethod_matches_function(self):
        assert Duration.parse("1h2s") == parse_duration("1h2s")


class TestParseInvalid:
    @pytest.mark.parametrize(
        "text",
        [
            "invalid",
            "3h2d",
            "5",
            "-5s",
            "5.5s",
            "1d2d",
            "1s1s",
            "5s5m",
            "1d 2h",
            " 1d",
            "1d\n",
            "1w",
            "1D",
            "d",
            "h5",
            "+5s",
            "1ms",
            "٣s",
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(DurationFormatError):
            parse_duration(text)

    def test_message_names_pattern(self):
        with pytest.raises(DurationFormatError, match="NdNhNmNs"):
            parse_duration("3h2d")

    def test_internal_details_name_input(self):
        with pytest.raises(DurationFormatError) as exc_info:
            parse_duration("bogus")
        err = exc_info.value
        assert "bogus" not in str(err)
        assert "bogus" in err.internal()
        assert err.wrapped is not None

    def test_rejection_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pytimeunits._duration")
        with pytest.raises(DurationFormatError):
            parse_duration("12x34")
        assert "12x34" in caplog.text

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            parse_duration(5)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="interpreter has no int string conversion limit",
    )
    def test_component_overflow(self):
        limit = sys.get_int_max_str_digits()
        if limit == 0:
            pytest.skip("int string conversion limit disabled")
        with pytest.raises(DurationFormatError, match="out of range"):
            parse_duration("1" * (limit + 1) + "s")

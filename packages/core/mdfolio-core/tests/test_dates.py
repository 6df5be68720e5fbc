"""Tests for mdfolio_core.dates."""

import datetime as dt
import logging
from unittest.mock import MagicMock

import pytest

from mdfolio_core import (
    Console,
    InvalidDateError,
    convert_date_strings,
    format_date_yyyy_mm_dd,
    parse_yyyy_mm_dd,
)


class TestConvertDateStrings:
    def test_date_only(self):
        result = convert_date_strings({"date": "2025-11-15"})
        assert result["date"] == dt.date(2025, 11, 15)
        assert type(result["date"]) is dt.date

    def test_date_time(self):
        result = convert_date_strings({"when": "2025-11-15 14:05"})
        assert result["when"] == dt.datetime(2025, 11, 15, 14, 5)

    @pytest.mark.parametrize("value", ["2025-01-01", "2024-02-29", "1999-12-31"])
    def test_round_trip_format(self, value):
        result = convert_date_strings({"date": value})
        assert format_date_yyyy_mm_dd(result["date"]) == value

    def test_date_time_formats_to_same_day(self):
        result = convert_date_strings({"when": "2025-11-15 23:59"})
        assert format_date_yyyy_mm_dd(result["when"]) == "2025-11-15"

    @pytest.mark.parametrize("value", ["2025-99-99", "2025-02-30", "2025-13-01 10:00", "2025-01-01 25:00"])
    def test_impossible_dates_kept_as_strings(self, value):
        result = convert_date_strings({"date": value})
        assert result["date"] == value

    def test_impossible_date_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mdfolio_core.dates"):
            convert_date_strings({"date": "2025-99-99"})
        assert 'key "date"' in caplog.text
        assert "2025-99-99" in caplog.text

    def test_warning_goes_to_injected_console(self):
        console = MagicMock(spec=Console)
        convert_date_strings({"bad": "2025-02-30", "good": "2025-02-28"}, console=console)
        console.warn.assert_called_once()
        assert "bad" in console.warn.call_args.args[0]

    def test_bad_date_does_not_stop_other_keys(self):
        result = convert_date_strings({"bad": "2025-02-30", "good": "2025-02-28"})
        assert result == {"bad": "2025-02-30", "good": dt.date(2025, 2, 28)}

    @pytest.mark.parametrize(
        "value",
        ["15-11-2025", "2025/11/15", "2025-11-15T10:00", "2025-11-15 10:00:00", " 2025-11-15", "hello"],
    )
    def test_non_matching_strings_untouched(self, value):
        assert convert_date_strings({"v": value}) == {"v": value}

    def test_non_string_values_untouched(self):
        data = {"n": 3, "flag": True, "none": None, "d": dt.date(2020, 1, 1)}
        assert convert_date_strings(data) == data

    def test_shallow_only(self):
        data = {"meta": {"created": "2025-11-15"}, "dates": ["2025-11-15"]}
        result = convert_date_strings(data)
        assert result["meta"] == {"created": "2025-11-15"}
        assert result["dates"] == ["2025-11-15"]

    def test_input_not_mutated(self):
        data = {"date": "2025-11-15"}
        result = convert_date_strings(data)
        assert data == {"date": "2025-11-15"}
        assert result is not data

    def test_key_order_preserved(self):
        result = convert_date_strings({"z": "2025-01-01", "a": "x", "m": "2025-01-02"})
        assert list(result) == ["z", "a", "m"]


class TestFormatDateYYYYMMDD:
    def test_date(self):
        assert format_date_yyyy_mm_dd(dt.date(2025, 1, 5)) == "2025-01-05"

    def test_naive_datetime(self):
        assert format_date_yyyy_mm_dd(dt.datetime(2025, 11, 15, 12, 30)) == "2025-11-15"

    def test_aware_datetime_uses_utc_day(self):
        tz = dt.timezone(dt.timedelta(hours=10))
        value = dt.datetime(2025, 11, 15, 5, 0, tzinfo=tz)
        assert format_date_yyyy_mm_dd(value) == "2025-11-14"


class TestParseYYYYMMDD:
    def test_valid(self):
        assert parse_yyyy_mm_dd("2025-11-15") == dt.date(2025, 11, 15)

    def test_surrounding_whitespace_ignored(self):
        assert parse_yyyy_mm_dd("  2025-11-15\n") == dt.date(2025, 11, 15)

    def test_leap_day(self):
        assert parse_yyyy_mm_dd("2024-02-29") == dt.date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["11-15-2025", "2025/11/15", "2025-1-5", ""])
    def test_bad_format(self, value):
        with pytest.raises(InvalidDateError, match="Invalid date format"):
            parse_yyyy_mm_dd(value)

    def test_bad_month(self):
        with pytest.raises(InvalidDateError, match="Invalid month: 13"):
            parse_yyyy_mm_dd("2025-13-01")

    def test_bad_day(self):
        with pytest.raises(InvalidDateError, match="Invalid day: 32"):
            parse_yyyy_mm_dd("2025-01-32")

    def test_day_missing_from_calendar(self):
        with pytest.raises(InvalidDateError, match="does not exist in the calendar"):
            parse_yyyy_mm_dd("2025-02-30")

    def test_non_string(self):
        with pytest.raises(InvalidDateError, match="must be a string"):
            parse_yyyy_mm_dd(20251115)  # type: ignore[arg-type]

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_yyyy_mm_dd("nope")

"""Module for testing snapshot timestamp helpers."""

import unittest
from datetime import datetime

import pytest
import pytz

from szdelays.errors import FormatError
from szdelays.utils.time import parse_int_prefix, parse_timestamp


class TestParseTimestamp(unittest.TestCase):
    """Class for testing parse_timestamp function."""

    def test_parse_example(self):
        """Tests the upstream format is read as UTC wall clock."""
        # Act
        result = parse_timestamp("11.08.2022 23:20:12")

        # Assert
        self.assertEqual(result, datetime(2022, 8, 11, 23, 20, 12, tzinfo=pytz.UTC))
        self.assertEqual(result.month - 1, 7)
        self.assertEqual(result.utcoffset().total_seconds(), 0)

    def test_missing_time_token_raises(self):
        """Tests a value without the time part raises FormatError."""
        with pytest.raises(FormatError):
            parse_timestamp("11.08.2022")

    def test_bad_date_structure_raises(self):
        """Tests a date token without three parts raises FormatError."""
        with pytest.raises(FormatError):
            parse_timestamp("2022-08-11 23:20:12")

    def test_non_numeric_component_returns_none(self):
        """Tests a component without digits gives an invalid date, not an error."""
        self.assertIsNone(parse_timestamp("xx.08.2022 23:20:12"))
        self.assertIsNone(parse_timestamp("11.08.2022 23::12"))

    def test_trailing_garbage_in_component_is_ignored(self):
        """Tests only the leading digits of a component are used."""
        result = parse_timestamp("11.08x.2022 23:20:12")
        self.assertEqual(result, datetime(2022, 8, 11, 23, 20, 12, tzinfo=pytz.UTC))

    def test_out_of_range_components_roll_over(self):
        """Tests month 13 and hour 24 roll into the following period."""
        self.assertEqual(
            parse_timestamp("31.13.2022 24:00:00"),
            datetime(2023, 2, 1, 0, 0, 0, tzinfo=pytz.UTC),
        )
        self.assertEqual(
            parse_timestamp("00.03.2024 00:00:00"),
            datetime(2024, 2, 29, tzinfo=pytz.UTC),
        )


class TestParseIntPrefix(unittest.TestCase):
    """Class for testing parse_int_prefix function."""

    def test_values(self):
        self.assertEqual(parse_int_prefix("08"), 8)
        self.assertEqual(parse_int_prefix(" -3x"), -3)
        self.assertIsNone(parse_int_prefix(""))
        self.assertIsNone(parse_int_prefix("abc"))

    def test_only_ascii_digits(self):
        """Tests non-ASCII digits are not read as numbers."""
        self.assertIsNone(parse_int_prefix("\u0661\u0661"))
        self.assertIsNone(parse_timestamp("\u0661\u0661.08.2022 23:20:12"))

import unittest
from datetime import datetime, timedelta

from dateutil import tz

from string_extensions import format_codes
from string_extensions.format_codes import (
    ALL_FORMAT_CODES,
    NUMERIC_FORMAT_CODES,
    DATETIME_FORMAT_CODES,
    CUSTOM_DATETIME_FORMAT_CODES,
    TIMESPAN_FORMAT_CODES,
    REFERENCE_MOMENT,
    format_number,
    format_datetime,
    format_timespan,
    lookup,
    render_example,
    to_markdown,
)
from string_extensions.errors import FormatCodeError, UnknownFormatCodeError


class TestReferenceTables(unittest.TestCase):
    def test_examples_reproduce(self):
        """Every example in the tables comes out of the renderers"""
        for name, table in ALL_FORMAT_CODES.items():
            for entry in table:
                with self.subTest(table=name, code=entry.code):
                    self.assertEqual(render_example(entry), entry.example)

    def test_lookup_by_alias(self):
        test_cases = [
            ("C", NUMERIC_FORMAT_CODES, "C"),
            ("c", NUMERIC_FORMAT_CODES, "C"),
            ("x", NUMERIC_FORMAT_CODES, "X"),
            ("m", DATETIME_FORMAT_CODES, "M"),
            ("tt", CUSTOM_DATETIME_FORMAT_CODES, "tt"),
        ]

        for code, table, expected in test_cases:
            with self.subTest(code=code):
                self.assertEqual(lookup(code, table).code, expected)

    def test_lookup_is_case_sensitive_for_distinct_codes(self):
        """d and D are different date formats"""
        self.assertEqual(lookup("d", DATETIME_FORMAT_CODES).example, "10/13/2024")
        self.assertEqual(lookup("D", DATETIME_FORMAT_CODES).example, "Sunday, October 13, 2024")
        self.assertEqual(lookup("g", TIMESPAN_FORMAT_CODES).example, "2:03:00")
        self.assertEqual(lookup("G", TIMESPAN_FORMAT_CODES).example, "0:02:03:00.0000000")

    def test_lookup_unknown(self):
        with self.assertRaises(UnknownFormatCodeError):
            lookup("Z")
        with self.assertRaises(KeyError):
            lookup("yy", CUSTOM_DATETIME_FORMAT_CODES)

    def test_unknown_code_message(self):
        with self.assertRaises(UnknownFormatCodeError) as context:
            lookup("Z")
        self.assertEqual(str(context.exception), "Unknown format code 'Z'")

    def test_to_markdown(self):
        table = to_markdown(NUMERIC_FORMAT_CODES)
        lines = table.splitlines()
        self.assertEqual(len(lines), len(NUMERIC_FORMAT_CODES) + 2)
        self.assertIn('| "C" or "c" |', lines[2])
        self.assertTrue(lines[2].endswith('C2 => "$12,345.68" |'))


class TestFormatNumber(unittest.TestCase):
    def test_numeric_formats(self):
        test_cases = [
            (1234.5, "C", "$1,234.50"),
            (-1234.5, "c0", "-$1,235"),
            (0.125, "C2", "$0.13"),
            (-123, "D5", "-00123"),
            (123, "D", "123"),
            (123, "d2", "123"),
            (12345, "e2", "1.23e+004"),
            (0.00012345, "E2", "1.23E-004"),
            (12345, "E", "1.234500E+004"),
            (2.5, "F0", "3"),
            (-2.5, "F0", "-3"),
            (1e20, "F10", "100000000000000000000.0000000000"),
            (3.14159, "f3", "3.142"),
            (12345.67, "G3", "1.23E+04"),
            (12345, "G", "12345"),
            (1e16, "g", "1e+16"),
            (100.0, "G", "100"),
            (2.0, "g", "2"),
            (-0.5, "G", "-0.5"),
            (-1234567.891, "N1", "-1,234,567.9"),
            (0.5, "P0", "50%"),
            (0.125, "P0", "13%"),
            (12.5, "p1", "1,250.0%"),
            (255, "x", "ff"),
            (255, "X4", "00FF"),
        ]

        for value, code, expected in test_cases:
            with self.subTest(value=value, code=code):
                self.assertEqual(format_number(value, code), expected)

    def test_integer_only_formats(self):
        for code in ["D", "D5", "X", "x2"]:
            with self.subTest(code=code):
                with self.assertRaises(FormatCodeError):
                    format_number(1.5, code)

    def test_non_finite_values(self):
        for value in [float("inf"), float("-inf"), float("nan")]:
            for code in ["C", "E", "e2", "F", "G", "N", "P"]:
                with self.subTest(value=value, code=code):
                    with self.assertRaises(FormatCodeError):
                        format_number(value, code)

    def test_negative_hex(self):
        with self.assertRaises(FormatCodeError):
            format_number(-255, "X")

    def test_unsupported_formats(self):
        for code in ["", "Z", "C123", "CC", "2C"]:
            with self.subTest(code=code):
                with self.assertRaises(FormatCodeError):
                    format_number(1, code)


class TestFormatDateTime(unittest.TestCase):
    def test_custom_patterns(self):
        test_cases = [
            ("yyyy-MM-dd HH:mm:ss", "2024-10-13 17:43:10"),
            ("hh:mm tt", "05:43 PM"),
            ("dd/MM/yyyy", "13/10/2024"),
            ("HHmm", "1743"),
        ]

        for code, expected in test_cases:
            with self.subTest(code=code):
                self.assertEqual(format_datetime(REFERENCE_MOMENT, code), expected)

    def test_midnight_and_noon(self):
        midnight = datetime(2024, 1, 5, 0, 7, 0)
        noon = datetime(2024, 1, 5, 12, 7, 0)

        self.assertEqual(format_datetime(midnight, "t"), "12:07 AM")
        self.assertEqual(format_datetime(midnight, "HH:mm"), "00:07")
        self.assertEqual(format_datetime(noon, "t"), "12:07 PM")
        self.assertEqual(format_datetime(noon, "hh tt"), "12 PM")

    def test_single_digit_fields(self):
        moment = datetime(2024, 3, 5, 9, 4, 2)

        self.assertEqual(format_datetime(moment, "d"), "3/5/2024")
        self.assertEqual(format_datetime(moment, "D"), "Tuesday, March 5, 2024")
        self.assertEqual(format_datetime(moment, "T"), "9:04:02 AM")
        self.assertEqual(format_datetime(moment, "R"), "Tue, 05 Mar 2024 09:04:02 GMT")

    def test_universal_formats_convert_to_utc(self):
        moment = datetime(2024, 10, 13, 19, 43, 10, tzinfo=tz.tzoffset(None, 2 * 3600))

        self.assertEqual(format_datetime(moment, "u"), "2024-10-13 17:43:10Z")
        self.assertEqual(format_datetime(moment, "R"), "Sun, 13 Oct 2024 17:43:10 GMT")
        self.assertEqual(format_datetime(moment, "U"), "Sunday, October 13, 2024 5:43:10 PM UTC")

    def test_round_trip(self):
        self.assertEqual(format_datetime(datetime(2024, 10, 13, 17, 43, 10, 123456), "O"),
                         "2024-10-13T17:43:10.1234560")

        aware = datetime(2024, 10, 13, 17, 43, 10, tzinfo=tz.tzoffset(None, -(5 * 3600 + 30 * 60)))
        self.assertEqual(format_datetime(aware, "o"), "2024-10-13T17:43:10.0000000-05:30")

        utc = datetime(2024, 10, 13, 17, 43, 10, tzinfo=tz.tzutc())
        self.assertEqual(format_datetime(utc, "O"), "2024-10-13T17:43:10.0000000+00:00")

    def test_repeated_tokens_are_not_names(self):
        """Only the listed tokens are custom; MMMM is the month number twice"""
        self.assertEqual(format_datetime(REFERENCE_MOMENT, "MMMM"), "1010")
        self.assertEqual(format_datetime(datetime(2024, 1, 5), "MMMM yyyy"), "0101 2024")

    def test_unsupported_formats(self):
        for code in ["", "Q", "K"]:
            with self.subTest(code=code):
                with self.assertRaises(FormatCodeError):
                    format_datetime(REFERENCE_MOMENT, code)

    def test_does_not_use_locale_names(self):
        """Day and month names come from the module tables"""
        self.assertEqual(format_codes.DAY_NAMES[REFERENCE_MOMENT.weekday()], "Sunday")
        self.assertEqual(format_codes.MONTH_NAMES[REFERENCE_MOMENT.month - 1], "October")


class TestFormatTimeSpan(unittest.TestCase):
    def test_timespan_formats(self):
        span = timedelta(days=1, hours=2, minutes=3, seconds=4, milliseconds=500)
        test_cases = [
            (span, "c", "1.02:03:04.5000000"),
            (span, "g", "1:2:03:04.5"),
            (span, "G", "1:02:03:04.5000000"),
            (timedelta(minutes=-90), "c", "-01:30:00"),
            (timedelta(minutes=-90), "g", "-1:30:00"),
            (timedelta(minutes=-90), "G", "-0:01:30:00.0000000"),
            (timedelta(0), "c", "00:00:00"),
            (timedelta(microseconds=1), "g", "0:00:00.000001"),
        ]

        for value, code, expected in test_cases:
            with self.subTest(value=value, code=code):
                self.assertEqual(format_timespan(value, code), expected)

    def test_unsupported_formats(self):
        for code in ["", "C", "T", "hh:mm"]:
            with self.subTest(code=code):
                with self.assertRaises(FormatCodeError):
                    format_timespan(timedelta(minutes=1), code)


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
format_codes.py - Reference table of common format strings

Four tables, one per kind of value:

1. Numeric format strings (C, D, E, F, G, N, P, X)
2. Standard date and time format strings (d, D, f, F, g, G, M, O, R, s, T, t, u, U, Y)
3. Custom date and time format strings (yyyy, MM, dd, HH, mm, ss, tt)
4. TimeSpan format strings (c, g, G)

Each row keeps a worked example, and the renderers below reproduce every
one of them. Output is always en-US: names, separators and the currency
symbol are fixed and never read from the process locale.
"""

import re
import math
import numbers
from decimal import Decimal, Context, ROUND_HALF_UP
from datetime import datetime, timedelta
from typing import NamedTuple, Any, Tuple, Union

from dateutil import tz

from string_extensions.errors import FormatCodeError, UnknownFormatCodeError


class FormatCode(NamedTuple):
    code: str
    description: str
    sample: Any
    sample_format: str
    example: str
    aliases: Tuple[str, ...] = ()


# Sunday, October 13, 2024 5:43:10 PM
REFERENCE_MOMENT = datetime(2024, 10, 13, 17, 43, 10)
REFERENCE_SPAN = timedelta(minutes=123)

DAY_NAMES = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')
MONTH_NAMES = ('January', 'February', 'March', 'April', 'May', 'June', 'July',
               'August', 'September', 'October', 'November', 'December')

NUMERIC_FORMAT_CODES = (
    FormatCode('C', 'Currency - Displays number with currency symbol and thousand separators.',
               12345.678, 'C2', '$12,345.68', ('c',)),
    FormatCode('D', 'Decimal - Displays an integer in decimal format.',
               123, 'D5', '00123', ('d',)),
    FormatCode('E', 'Exponential - Displays number in exponential notation.',
               12345, 'E2', '1.23E+004', ('e',)),
    FormatCode('F', 'Fixed-point - Displays a floating-point number with a fixed number of decimal places.',
               123.4567, 'F2', '123.46', ('f',)),
    FormatCode('G', 'General - Displays number in the most compact form (either fixed-point or scientific).',
               12345.67, 'G', '12345.67', ('g',)),
    FormatCode('N', 'Number - Displays number with thousand separators.',
               1234567.89, 'N', '1,234,567.89', ('n',)),
    FormatCode('P', 'Percent - Multiplies the number by 100 and appends a percent symbol.',
               0.123, 'P2', '12.30%', ('p',)),
    FormatCode('X', 'Hexadecimal - Displays an integer in hexadecimal format.',
               255, 'X', 'FF', ('x',)),
)

DATETIME_FORMAT_CODES = (
    FormatCode('d', 'Short date - Displays short date format.',
               REFERENCE_MOMENT, 'd', '10/13/2024'),
    FormatCode('D', 'Long date - Displays long date format.',
               REFERENCE_MOMENT, 'D', 'Sunday, October 13, 2024'),
    FormatCode('f', 'Full date short time - Displays long date and short time.',
               REFERENCE_MOMENT, 'f', 'Sunday, October 13, 2024 5:43 PM'),
    FormatCode('F', 'Full date long time - Displays long date and long time.',
               REFERENCE_MOMENT, 'F', 'Sunday, October 13, 2024 5:43:10 PM'),
    FormatCode('g', 'General date short time - Displays short date and short time.',
               REFERENCE_MOMENT, 'g', '10/13/2024 5:43 PM'),
    FormatCode('G', 'General date long time - Displays short date and long time.',
               REFERENCE_MOMENT, 'G', '10/13/2024 5:43:10 PM'),
    FormatCode('M', 'Month day - Displays only month and day.',
               REFERENCE_MOMENT, 'M', 'October 13', ('m',)),
    FormatCode('O', 'Round-trip date/time - Displays date and time in round-trip format.',
               REFERENCE_MOMENT, 'O', '2024-10-13T17:43:10.0000000', ('o',)),
    FormatCode('R', 'RFC1123 date/time - Displays date and time in RFC1123 format.',
               REFERENCE_MOMENT, 'R', 'Sun, 13 Oct 2024 17:43:10 GMT', ('r',)),
    FormatCode('s', 'Sortable date/time - Displays date and time in ISO8601 format.',
               REFERENCE_MOMENT, 's', '2024-10-13T17:43:10'),
    FormatCode('T', 'Long time - Displays long time format.',
               REFERENCE_MOMENT, 'T', '5:43:10 PM'),
    FormatCode('t', 'Short time - Displays short time format.',
               REFERENCE_MOMENT, 't', '5:43 PM'),
    FormatCode('u', 'Universal sortable date/time - Displays date and time in UTC sortable format.',
               REFERENCE_MOMENT, 'u', '2024-10-13 17:43:10Z'),
    FormatCode('U', 'Universal full date/time - Displays full date and time in UTC.',
               REFERENCE_MOMENT, 'U', 'Sunday, October 13, 2024 5:43:10 PM UTC'),
    FormatCode('Y', 'Year month - Displays only year and month.',
               REFERENCE_MOMENT, 'Y', 'October 2024', ('y',)),
)

CUSTOM_DATETIME_FORMAT_CODES = (
    FormatCode('yyyy', 'Full year (4 digits).', REFERENCE_MOMENT, 'yyyy', '2024'),
    FormatCode('MM', 'Month (2 digits).', REFERENCE_MOMENT, 'MM', '10'),
    FormatCode('dd', 'Day in month (2 digits).', REFERENCE_MOMENT, 'dd', '13'),
    FormatCode('HH', 'Hour (24-hour format).', REFERENCE_MOMENT, 'HH', '17'),
    FormatCode('hh', 'Hour (12-hour format).', REFERENCE_MOMENT, 'hh', '05'),
    FormatCode('mm', 'Minutes.', REFERENCE_MOMENT, 'mm', '43'),
    FormatCode('ss', 'Seconds.', REFERENCE_MOMENT, 'ss', '10'),
    FormatCode('tt', 'AM or PM.', REFERENCE_MOMENT, 'tt', 'PM'),
)

TIMESPAN_FORMAT_CODES = (
    FormatCode('c', 'Standard TimeSpan format.', REFERENCE_SPAN, 'c', '02:03:00'),
    FormatCode('g', 'General short TimeSpan format.', REFERENCE_SPAN, 'g', '2:03:00'),
    FormatCode('G', 'General long TimeSpan format.', REFERENCE_SPAN, 'G', '0:02:03:00.0000000'),
)

ALL_FORMAT_CODES = {
    'numeric': NUMERIC_FORMAT_CODES,
    'datetime': DATETIME_FORMAT_CODES,
    'custom': CUSTOM_DATETIME_FORMAT_CODES,
    'timespan': TIMESPAN_FORMAT_CODES,
}

NUMERIC_CODE_PATTERN = re.compile(r'([CcDdEeFfGgNnPpXx])(\d{1,2})?')
CUSTOM_TOKEN_PATTERN = re.compile(r'yyyy|MM|dd|HH|hh|mm|ss|tt')

DEFAULT_PRECISION = {'C': 2, 'E': 6, 'F': 2, 'N': 2, 'P': 2}

TICKS_PER_MICROSECOND = 10

# Wide enough to hold any float exactly, plus 99 decimal places
EXACT_CONTEXT = Context(prec=1000)


def lookup(code: str, table: Tuple[FormatCode, ...] = NUMERIC_FORMAT_CODES) -> FormatCode:
    """Find a table entry by its code or one of its aliases"""
    for entry in table:
        if code == entry.code or code in entry.aliases:
            return entry
    raise UnknownFormatCodeError(f"Unknown format code {code!r}")


def _round_half_up(value, precision: int) -> Decimal:
    """Round midpoints away from zero, working on the exact binary value"""
    return Decimal(value).quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP, context=EXACT_CONTEXT)


def format_number(value: Union[int, float], code: str) -> str:
    """Render a number with a numeric format string such as "C2" or "X"."""
    match = NUMERIC_CODE_PATTERN.fullmatch(code)
    if not match:
        raise FormatCodeError(f"Unsupported numeric format {code!r}")

    letter, digits = match.groups()
    kind = letter.upper()
    precision = int(digits) if digits else DEFAULT_PRECISION.get(kind)
    sign = '-' if value < 0 else ''

    if kind in ('D', 'X'):
        if not isinstance(value, numbers.Integral):
            raise FormatCodeError(f"Format {code!r} only accepts integers, got {value!r}")
        width = precision or 0
        if kind == 'D':
            return sign + str(abs(value)).zfill(width)
        if value < 0:
            raise FormatCodeError(f"Format {code!r} does not accept negative values, got {value!r}")
        return format(value, letter).zfill(width)

    if not math.isfinite(value):
        raise FormatCodeError(f"Format {code!r} needs a finite number, got {value!r}")

    if kind == 'C':
        return f"{sign}${_round_half_up(abs(value), precision):,f}"
    if kind == 'F':
        return f"{_round_half_up(value, precision):f}"
    if kind == 'N':
        return f"{_round_half_up(value, precision):,f}"
    if kind == 'P':
        return f"{_round_half_up(Decimal(value).scaleb(2, EXACT_CONTEXT), precision):,f}%"
    if kind == 'E':
        mantissa, exponent = f"{value:.{precision}E}".split('E')
        exponent = int(exponent)
        result = f"{mantissa}E{'-' if exponent < 0 else '+'}{abs(exponent):03d}"
        return result if letter == 'E' else result.lower()

    # General: shortest round-trip form unless a precision is given
    if digits:
        result = f"{value:.{precision}G}"
    elif isinstance(value, numbers.Integral):
        result = str(value)
    else:
        result = repr(float(value)).upper()
        if result.endswith('.0'):
            result = result[:-2]
    return result if letter == 'G' else result.lower()


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _designator(moment: datetime) -> str:
    return 'AM' if moment.hour < 12 else 'PM'


def _as_utc(moment: datetime) -> datetime:
    """Naive values are taken as UTC already"""
    if moment.utcoffset() is None:
        return moment
    return moment.astimezone(tz.tzutc())


def _offset_suffix(moment: datetime) -> str:
    offset = moment.utcoffset()
    if offset is None:
        return ''
    sign = '-' if offset < timedelta(0) else '+'
    minutes = abs(offset) // timedelta(minutes=1)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _short_date(moment: datetime) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


def _long_date(moment: datetime) -> str:
    return f"{DAY_NAMES[moment.weekday()]}, {MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}"


def _short_time(moment: datetime) -> str:
    return f"{_hour12(moment)}:{moment.minute:02d} {_designator(moment)}"


def _long_time(moment: datetime) -> str:
    return f"{_hour12(moment)}:{moment.minute:02d}:{moment.second:02d} {_designator(moment)}"


def _round_trip(moment: datetime) -> str:
    ticks = moment.microsecond * TICKS_PER_MICROSECOND
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{ticks:07d}{_offset_suffix(moment)}"


def _rfc1123(moment: datetime) -> str:
    moment = _as_utc(moment)
    return (f"{DAY_NAMES[moment.weekday()][:3]}, {moment.day:02d} "
            f"{MONTH_NAMES[moment.month - 1][:3]} {moment:%Y %H:%M:%S} GMT")


STANDARD_DATETIME_RENDERERS = {
    'd': _short_date,
    'D': _long_date,
    'f': lambda m: f"{_long_date(m)} {_short_time(m)}",
    'F': lambda m: f"{_long_date(m)} {_long_time(m)}",
    'g': lambda m: f"{_short_date(m)} {_short_time(m)}",
    'G': lambda m: f"{_short_date(m)} {_long_time(m)}",
    'M': lambda m: f"{MONTH_NAMES[m.month - 1]} {m.day}",
    'm': lambda m: f"{MONTH_NAMES[m.month - 1]} {m.day}",
    'O': _round_trip,
    'o': _round_trip,
    'R': _rfc1123,
    'r': _rfc1123,
    's': lambda m: f"{m:%Y-%m-%dT%H:%M:%S}",
    'T': _long_time,
    't': _short_time,
    'u': lambda m: f"{_as_utc(m):%Y-%m-%d %H:%M:%S}Z",
    'U': lambda m: f"{_long_date(_as_utc(m))} {_long_time(_as_utc(m))} UTC",
    'Y': lambda m: f"{MONTH_NAMES[m.month - 1]} {m.year}",
    'y': lambda m: f"{MONTH_NAMES[m.month - 1]} {m.year}",
}

CUSTOM_TOKEN_RENDERERS = {
    'yyyy': lambda m: f"{m.year:04d}",
    'MM': lambda m: f"{m.month:02d}",
    'dd': lambda m: f"{m.day:02d}",
    'HH': lambda m: f"{m.hour:02d}",
    'hh': lambda m: f"{_hour12(m):02d}",
    'mm': lambda m: f"{m.minute:02d}",
    'ss': lambda m: f"{m.second:02d}",
    'tt': _designator,
}


def format_datetime(moment: datetime, code: str) -> str:
    """Render a datetime with a standard code ("D") or a custom pattern ("yyyy-MM-dd").

    Any pattern longer than one character is custom. Only the tokens in
    CUSTOM_TOKEN_RENDERERS are replaced, scanning left to right, and the
    rest is copied as-is, so "MMMM" is two "MM" tokens ("1010" in October)
    rather than a month name.
    """
    if len(code) == 1:
        renderer = STANDARD_DATETIME_RENDERERS.get(code)
        if renderer is None:
            raise FormatCodeError(f"Unsupported date/time format {code!r}")
        return renderer(moment)
    if not code:
        raise FormatCodeError("Empty date/time format")

    return CUSTOM_TOKEN_PATTERN.sub(lambda match: CUSTOM_TOKEN_RENDERERS[match.group(0)](moment), code)


def format_timespan(span: timedelta, code: str) -> str:
    """Render a timedelta with "c", "g" or "G"."""
    if code not in ('c', 'g', 'G'):
        raise FormatCodeError(f"Unsupported TimeSpan format {code!r}")

    sign = '-' if span < timedelta(0) else ''
    ticks = (abs(span) // timedelta(microseconds=1)) * TICKS_PER_MICROSECOND
    seconds, fraction = divmod(ticks, 10_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    if code == 'c':
        result = f"{sign}{f'{days}.' if days else ''}{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{result}.{fraction:07d}" if fraction else result
    if code == 'g':
        result = f"{sign}{f'{days}:' if days else ''}{hours}:{minutes:02d}:{seconds:02d}"
        return f"{result}.{f'{fraction:07d}'.rstrip('0')}" if fraction else result
    return f"{sign}{days}:{hours:02d}:{minutes:02d}:{seconds:02d}.{fraction:07d}"


def render_example(entry: FormatCode) -> str:
    """Render a table entry's sample with its sample format"""
    if isinstance(entry.sample, timedelta):
        return format_timespan(entry.sample, entry.sample_format)
    if isinstance(entry.sample, datetime):
        return format_datetime(entry.sample, entry.sample_format)
    return format_number(entry.sample, entry.sample_format)


def to_markdown(table: Tuple[FormatCode, ...]) -> str:
    """Render a table the way it reads in documentation"""
    lines = [
        '| Format String | Description | Example |',
        '|---------------|-------------|---------|',
    ]
    for entry in table:
        codes = ' or '.join(f'"{code}"' for code in (entry.code,) + entry.aliases)
        lines.append(f'| {codes} | {entry.description} | {entry.sample_format} => "{entry.example}" |')
    return '\n'.join(lines)

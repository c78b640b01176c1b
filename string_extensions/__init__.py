# Layout of a 12-hour time string, e.g. "07:45:00pm"
HOUR_SLICE = slice(0, 2)        # "07"
PAYLOAD_SLICE = slice(2, 8)     # ":45:00", copied through verbatim
MERIDIEM_SLICE = slice(8, 10)   # "am" / "pm"

INPUT_LENGTH = 10
OUTPUT_LENGTH = 8

AM = 'am'
PM = 'pm'

from string_extensions.errors import (  # noqa: E402
    TimeFormatError,
    MeridiemError,
    FormatCodeError,
    UnknownFormatCodeError,
)
from string_extensions.time_conversion import convert_to_24_hour  # noqa: E402
from string_extensions.format_codes import (  # noqa: E402
    FormatCode,
    format_number,
    format_datetime,
    format_timespan,
    lookup,
)

__all__ = [
    'convert_to_24_hour',
    'format_number',
    'format_datetime',
    'format_timespan',
    'lookup',
    'FormatCode',
    'TimeFormatError',
    'MeridiemError',
    'FormatCodeError',
    'UnknownFormatCodeError',
]

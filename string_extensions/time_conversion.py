#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import re
from typing import Optional

from string_extensions import (
    HOUR_SLICE, PAYLOAD_SLICE, MERIDIEM_SLICE, INPUT_LENGTH, AM, PM,
)
from string_extensions.errors import TimeFormatError, MeridiemError
from string_extensions.logger import setup_logger
from string_extensions.config import get_testing_mode, get_strict_meridiem

logger = setup_logger('time_conversion', testing=get_testing_mode())

HOUR_PATTERN = re.compile(r'[0-9]{2}')


def convert_to_24_hour(value: str, strict: Optional[bool] = None) -> str:
    """Convert "HH:MM:SSam" / "HH:MM:SSpm" to 24-hour "HH:MM:SS".

    Only the layout is checked: the first two characters must be digits
    and the string must hold at least ten characters. The six characters
    after the hour are returned untouched and the meridiem is dropped.

    12:01:00am -> 00:01:00
    07:45:00pm -> 19:45:00

    The meridiem is compared case-sensitively. Anything other than "am"
    or "pm" leaves the hour as it is, unless ``strict`` is true (or
    ``strict`` is None and the ``strict_meridiem`` config key is set),
    in which case MeridiemError is raised.
    """
    if len(value) < INPUT_LENGTH:
        raise TimeFormatError(
            f"Expected at least {INPUT_LENGTH} characters (HH:MM:SSam), got {len(value)}: {value!r}")

    hour_text = value[HOUR_SLICE]
    if not HOUR_PATTERN.fullmatch(hour_text):
        raise TimeFormatError(f"Hour must be two digits, got {hour_text!r} in {value!r}")

    hour = int(hour_text)
    meridiem = value[MERIDIEM_SLICE]
    minute_and_second = value[PAYLOAD_SLICE]

    if meridiem == PM and hour != 12:
        hour += 12
    elif meridiem == AM and hour == 12:
        hour = 0
    elif meridiem not in (AM, PM):
        if strict is None:
            strict = get_strict_meridiem()
        if strict:
            raise MeridiemError(f"Meridiem must be 'am' or 'pm', got {meridiem!r} in {value!r}")
        logger.warning(f"Unrecognized meridiem {meridiem!r} in {value!r}, hour left unchanged")

    result = f"{hour:02d}{minute_and_second}"
    logger.debug(f"Converted {value!r} -> {result!r}")
    return result

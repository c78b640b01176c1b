#!/usr/bin/env python3
# -*- coding: utf-8 -*-


class TimeFormatError(ValueError):
    """Input does not follow the fixed HH:MM:SSam layout"""


class MeridiemError(TimeFormatError):
    """Meridiem marker is neither 'am' nor 'pm' (strict mode only)"""


class FormatCodeError(ValueError):
    """Format code not supported for the value being rendered"""


class UnknownFormatCodeError(FormatCodeError, KeyError):
    """Format code missing from a reference table"""

    def __str__(self):
        # KeyError would repr() the message
        return ValueError.__str__(self)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
import json
from typing import List

from string_extensions.time_conversion import convert_to_24_hour
from string_extensions.errors import TimeFormatError
from string_extensions.logger import setup_logger
from string_extensions.config import get_testing_mode

logger = setup_logger('convert', testing=get_testing_mode())

PLACEHOLDER_ITEM = {
    "title": "Type a 12-hour time...",
    "subtitle": "e.g. 07:45:00pm",
    "valid": False,
    "icon": {"path": "icon.png"}
}


def generate_items(query: str) -> List[dict]:
    """Generate script filter items for a query"""
    logger.debug(f"Converting query: {query}")
    try:
        converted = convert_to_24_hour(query.strip())
    except TimeFormatError as e:
        logger.error(f"Invalid time {query!r}: {e}")
        return [{
            "title": "Invalid time",
            "subtitle": str(e),
            "arg": query,
            "valid": False,
            "icon": {"path": "icon.png"}
        }]

    return [{
        "title": converted,
        "subtitle": f"{query.strip()} in 24-hour format",
        "arg": converted,
        "valid": True,
        "icon": {"path": "icon.png"}
    }]


def main():
    if len(sys.argv) < 2:
        print(json.dumps({"items": [PLACEHOLDER_ITEM]}))
        return

    query = " ".join(sys.argv[1:])
    print(json.dumps({"items": generate_items(query)}))


if __name__ == "__main__":
    main()

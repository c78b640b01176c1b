#!/usr/bin/env python3
import os
import logging
from datetime import datetime

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_file():
    """string_extensions.log inside the package, written only in testing mode"""
    package_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(package_dir, 'string_extensions.log')


def setup_logger(name, testing=False):
    """Logger for a module of this package.

    The converter warns about unrecognized meridiem markers and the script
    filter logs rejected queries. Records go wherever the root logger
    sends them; with ``testing`` on (the ``testing_mode`` config key) they
    are also written, down to DEBUG, to get_log_file().
    """
    logger = logging.getLogger(name)

    if testing:
        log_file = get_log_file()

        # time_conversion and convert both call this at import
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
                   for h in logging.root.handlers):
            handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))

            logging.root.addHandler(handler)
            logging.root.setLevel(logging.DEBUG)

            logging.info('=' * 50)
            logging.info(f'string_extensions logging started at {datetime.now()}')
            logging.info('=' * 50)

    return logger

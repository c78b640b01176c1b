import os
import json
import logging
from typing import Dict

CONFIG_ENV_VAR = 'STRING_EXTENSIONS_CONFIG'

# Every key is a flag
DEFAULT_CONFIG = {
    'testing_mode': False,
    'strict_meridiem': False,
}


def get_config_file() -> str:
    """Path of config.json, overridable through the environment"""
    config_file = os.getenv(CONFIG_ENV_VAR)
    if not config_file:
        config_file = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json')
    return config_file


def load_config() -> Dict:
    """Load configuration, falling back to defaults for anything missing or not a boolean"""
    logger = logging.getLogger(__name__)
    config = dict(DEFAULT_CONFIG)
    config_file = get_config_file()
    try:
        with open(config_file, 'r') as f:
            loaded = json.load(f)
    except FileNotFoundError:
        return config
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Error loading config {config_file}: {e}")
        return config

    if not isinstance(loaded, dict):
        return config

    for key in DEFAULT_CONFIG:
        if key not in loaded:
            continue
        if isinstance(loaded[key], bool):
            config[key] = loaded[key]
        else:
            logger.warning(f"Ignoring {key}={loaded[key]!r} in {config_file}: expected true or false")
    return config


def get_testing_mode() -> bool:
    """Check if testing mode is enabled"""
    return load_config()['testing_mode']


def get_strict_meridiem() -> bool:
    """Check if unrecognized meridiem markers should be rejected"""
    return load_config()['strict_meridiem']

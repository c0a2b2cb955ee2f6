"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants: the
logging format, the output policy names, the per-file result statuses and the
exit codes. It also provides the loader for the optional user YAML file, which
lets users change the default policy, output directory or separators without
passing flags on every run.
"""
from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

# --- User Configuration ---
# The user config file is looked up in the current working directory unless a path is
# given with `--config`. Only the `conversion` section is read.

USER_CONFIG_FILE_NAME = "m3u_converter.yaml"
USER_CONFIG_SECTION = "conversion"
USER_CONFIG_KEYS = ("policy", "output_dir", "separators", "keep_empty_lines", "report")

# Expected YAML type of each key. Values of any other type are dropped with a warning,
# so `keep_empty_lines: "false"` cannot silently turn into True.
USER_CONFIG_TYPES = {
    "policy": str,
    "output_dir": str,
    "separators": str,
    "keep_empty_lines": bool,
    "report": str,
}


def load_user_config(config_path: Path) -> Dict[str, Any]:
    """
    Loads the `conversion` section of a user YAML configuration file.

    A missing file is not an error: the application simply falls back to its
    built-in defaults. A file that cannot be read or parsed is reported with a
    warning and ignored, so a broken config never prevents a conversion run.

    Args:
        config_path: Path to the YAML file.

    Returns:
        A dictionary holding only the recognised keys found in the file, each with
        the type listed in `USER_CONFIG_TYPES`. Empty if the file is absent,
        unreadable, malformed or has no `conversion` section.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Using built-in defaults.")
        return {}

    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}

    if not isinstance(user_config, dict):
        logger.warning(f"User config '{config_path}' is not a mapping. Ignoring it.")
        return {}

    section = user_config.get(USER_CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        logger.warning(f"Section '{USER_CONFIG_SECTION}' in '{config_path}' is not a mapping. Ignoring it.")
        return {}

    unknown_keys = set(section) - set(USER_CONFIG_KEYS)
    if unknown_keys:
        logger.warning(f"Ignoring unknown keys in '{config_path}': {', '.join(sorted(unknown_keys))}")

    loaded: Dict[str, Any] = {}
    for key in USER_CONFIG_KEYS:
        value = section.get(key)
        if value is None:
            continue
        expected_type = USER_CONFIG_TYPES[key]
        if not isinstance(value, expected_type):
            logger.warning(
                f"Ignoring '{key}' in '{config_path}': expected {expected_type.__name__}, "
                f"got {type(value).__name__} ({value!r})."
            )
            continue
        loaded[key] = value
    logger.debug(f"Loaded user config from '{config_path}': {loaded}")
    return loaded


# --- Logging Configuration ---

# The format string for the Loguru logger. The per-file diagnostics ("Converted x.m3u.",
# "Skipping y.txt.") are the message part; the prefix gives the time and level.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


# --- Output Policies ---
# How the converted content reaches the disk.

POLICY_SIDE_DIRECTORY = "side_directory"  # Write into a separate output directory; original untouched.
POLICY_IN_PLACE = "in_place"  # Write a temporary file, then move it over the original.
OUTPUT_POLICIES = (POLICY_SIDE_DIRECTORY, POLICY_IN_PLACE)
DEFAULT_POLICY = POLICY_SIDE_DIRECTORY


# --- Conversion Status Constants ---
# Terminal state of each command-line argument after a run.

CONVERSION_STATUS_CONVERTED = "converted"  # The playlist was converted and published.
CONVERSION_STATUS_SKIPPED = "skipped"  # Wrong extension. Not a failure.
CONVERSION_STATUS_OPEN_FAILED = "open_failed"  # Input, output or output directory could not be opened.
CONVERSION_STATUS_WRITE_FAILED = "write_failed"  # Writing or publishing the output failed.
FAILURE_STATUSES = (CONVERSION_STATUS_OPEN_FAILED, CONVERSION_STATUS_WRITE_FAILED)


# --- Exit Codes ---

EXIT_OK = 0
EXIT_CONVERSION_FAILED = 1
EXIT_USAGE_ERROR = 2

"""
Command-Line Interface (CLI) for the M3U Converter.

This module uses Python's `argparse` to parse the command line, merges it with
the optional user YAML configuration, configures the logger and runs the
conversion pipeline. Flags given on the command line always win over values
from the configuration file.
"""
import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from . import __version__
from .config.common import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_POLICY,
    EXIT_USAGE_ERROR,
    LOG_LEVELS,
    LOGGER_FORMAT,
    OUTPUT_POLICIES,
    USER_CONFIG_FILE_NAME,
    load_user_config,
)
from .config.playlist import (
    DEFAULT_KEEP_EMPTY_LINES,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PATH_SEPARATORS,
    PLAYLIST_EXTENSION,
)
from .domain.playlist import ConversionOptions
from .pipeline.playlist_pipeline import PlaylistConversionPipeline


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the M3U Converter.

    Options that can also come from the user config default to None here, so
    that `build_options` can tell "not given" apart from an explicit value.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="m3u-converter",
        description=(
            f"Convert {PLAYLIST_EXTENSION} playlists for portable players: strip directory "
            "paths from track entries and write CRLF line endings."
        ),
    )
    parser.add_argument(
        "files", nargs="+", metavar="FILE",
        help=f"Playlist files to convert. Names not ending with {PLAYLIST_EXTENSION} are skipped.",
    )
    parser.add_argument(
        "--policy", choices=OUTPUT_POLICIES, default=None,
        help=f"Write into a separate directory, or replace the originals (default: {DEFAULT_POLICY}).",
    )
    parser.add_argument(
        "--output-dir", type=str, default=None,
        help=f"Output directory for the side_directory policy (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--separators", type=str, default=None,
        help=f"Characters treated as path separators (default: {DEFAULT_PATH_SEPARATORS!r}). "
             "Use '/\\' for playlists with Windows paths.",
    )
    parser.add_argument(
        "--keep-empty-lines", action=argparse.BooleanOptionalAction, default=None,
        help=f"Keep empty lines (as bare CRLF) instead of dropping them (default: {DEFAULT_KEEP_EMPTY_LINES}). "
             "--no-keep-empty-lines overrides keep_empty_lines from the config file.",
    )
    parser.add_argument(
        "--report", type=str, default=None,
        help="Append a YAML report of every file's result to this file.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help=f"User YAML config file (default: ./{USER_CONFIG_FILE_NAME} if it exists).",
    )
    parser.add_argument(
        "--log-level", type=str, default=DEFAULT_LOG_LEVEL, choices=LOG_LEVELS,
        help="Set the logging level.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def build_options(args: argparse.Namespace, user_config: Dict[str, Any]) -> ConversionOptions:
    """
    Builds the conversion options from the command line and the user config.

    Raises:
        ValueError: If the resulting options are invalid (e.g. an unknown policy
                    in the config file).
    """

    def pick(name: str, default: Any) -> Any:
        value = getattr(args, name, None)
        if value is not None:
            return value
        return user_config.get(name, default)

    return ConversionOptions(
        policy=pick("policy", DEFAULT_POLICY),
        output_dir=Path(pick("output_dir", DEFAULT_OUTPUT_DIR)),
        separators=str(pick("separators", DEFAULT_PATH_SEPARATORS)),
        keep_empty_lines=bool(pick("keep_empty_lines", DEFAULT_KEEP_EMPTY_LINES)),
    )


def configure_logger(level: str = DEFAULT_LOG_LEVEL):
    """Sends log output to standard error at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOGGER_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the converter and returns the process exit status.

    Steps:
    1. Parses the command line and configures the logger.
    2. Loads the user config and builds the conversion options.
    3. Converts every argument in order.
    4. Writes the YAML report if one was requested.

    Returns:
        0 if no file failed, 1 if any file failed to open or write, 2 if the
        configuration is invalid.
    """
    args = get_args(argv)
    configure_logger(args.log_level)
    logger.debug(f"Parsed arguments: {args}")

    if args.config:
        config_path = Path(args.config)
        if not config_path.is_file():
            logger.warning(f"Config file '{config_path}' not found. Using built-in defaults.")
    else:
        config_path = Path.cwd() / USER_CONFIG_FILE_NAME
    user_config = load_user_config(config_path)

    try:
        options = build_options(args, user_config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_USAGE_ERROR

    pipeline = PlaylistConversionPipeline(options)
    results = pipeline.process_multi_file(args.files)

    report_path = args.report or user_config.get("report")
    if report_path:
        pipeline.write_report(Path(report_path))

    exit_code = pipeline.exit_code(results)
    logger.debug(f"M3U Converter finished with exit code {exit_code}.")
    return exit_code

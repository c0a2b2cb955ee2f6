"""
This module contains helper functions for formatting data into human-readable
strings and for simple file name checks. They are used mostly in log messages.
"""

from pathlib import Path
from typing import Dict, Iterable


def has_extension(file_path: Path, extension: str) -> bool:
    """
    Checks whether a file name ends with `extension`, case-sensitively.

    Unlike `Path.suffix`, this is a plain suffix match on the name, so
    `has_extension(Path("a.M3U"), ".m3u")` is False and
    `has_extension(Path("mix.2024.m3u"), ".m3u")` is True.
    """
    return file_path.name.endswith(extension)


def plural(count: int, noun: str) -> str:
    """Returns e.g. "1 file" or "3 files"."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def summarize_counts(statuses: Iterable[str]) -> str:
    """
    Summarizes result statuses as "2 converted, 1 skipped".

    Statuses are listed in order of first appearance. An empty input gives
    "nothing to do".
    """
    counts: Dict[str, int] = {}
    for status in statuses:
        counts[status] = counts.get(status, 0) + 1
    return ", ".join(f"{count} {status}" for status, count in counts.items()) or "nothing to do"

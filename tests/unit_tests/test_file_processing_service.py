"""Unit tests for argument filtering and formatting helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from m3u_converter.services.file_processing_service import ProcessPlaylistFiles
from m3u_converter.utils.format_utils import has_extension, plural, summarize_counts


def test_process_playlist_files_preserves_order() -> None:
    """Playlists and skipped arguments keep their command-line order."""
    handler = ProcessPlaylistFiles(["b.m3u", "list.txt", "a.m3u", "notes.m3u8", "LOUD.M3U"])

    assert handler.classified == (
        (Path("b.m3u"), True),
        (Path("list.txt"), False),
        (Path("a.m3u"), True),
        (Path("notes.m3u8"), False),
        (Path("LOUD.M3U"), False),
    )
    assert handler.files == (Path("b.m3u"), Path("a.m3u"))
    assert handler.skipped == (Path("list.txt"), Path("notes.m3u8"), Path("LOUD.M3U"))


def test_process_playlist_files_custom_extension() -> None:
    handler = ProcessPlaylistFiles([Path("a.m3u8"), Path("b.m3u")], extension=".m3u8")
    assert handler.files == (Path("a.m3u8"),)


def test_process_playlist_files_accepts_a_single_pass_iterator() -> None:
    """Each argument is classified once, so a generator is consumed exactly once."""
    handler = ProcessPlaylistFiles(p for p in ["a.m3u", "list.txt"])

    assert handler.files == (Path("a.m3u"),)
    assert handler.skipped == (Path("list.txt"),)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("list.m3u", True),
        ("mix.2024.m3u", True),
        ("dir.m3u/list.txt", False),
        ("list.M3U", False),
        ("list.m3u.bak", False),
        ("list.txt", False),
    ],
)
def test_has_extension_is_case_sensitive_suffix_match(name: str, expected: bool) -> None:
    assert has_extension(Path(name), ".m3u") is expected


def test_plural() -> None:
    assert plural(1, "line") == "1 line"
    assert plural(0, "line") == "0 lines"
    assert plural(3, "file") == "3 files"


def test_summarize_counts() -> None:
    assert summarize_counts(["converted", "skipped", "converted"]) == "2 converted, 1 skipped"
    assert summarize_counts([]) == "nothing to do"

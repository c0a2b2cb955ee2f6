"""
Provides the service that decides which command-line arguments are playlists.

Arguments are taken exactly as given: there is no directory scanning and no
recursion. An argument is a playlist when its name ends with the playlist
extension; everything else is skipped.
"""

from pathlib import Path
from typing import Iterable, Tuple

from loguru import logger

from ..config.playlist import PLAYLIST_EXTENSION
from ..utils.format_utils import has_extension, plural


class ProcessPlaylistFiles:
    """
    Sorts the command-line arguments into playlists and skipped files.

    Each argument is checked once. The original argument order is preserved in
    every attribute, since the batch driver processes and reports arguments in
    the order they were given.

    Attributes:
        classified (Tuple[Tuple[Path, bool], ...]): Every argument with its verdict
                                                   (True for a playlist), in order.
        files (Tuple[Path, ...]): The arguments carrying the playlist extension.
        skipped (Tuple[Path, ...]): The arguments that do not.
        extension (str): The required suffix.
    """

    def __init__(self, arguments: Iterable[Path | str], extension: str = PLAYLIST_EXTENSION):
        self.extension = extension
        self.classified: Tuple[Tuple[Path, bool], ...] = tuple(
            (path, has_extension(path, extension)) for path in map(Path, arguments)
        )
        self.files: Tuple[Path, ...] = tuple(p for p, is_playlist in self.classified if is_playlist)
        self.skipped: Tuple[Path, ...] = tuple(p for p, is_playlist in self.classified if not is_playlist)
        logger.debug(
            f"ProcessPlaylistFiles: {plural(len(self.files), 'playlist')}, "
            f"{len(self.skipped)} skipped out of {plural(len(self.classified), 'argument')}."
        )

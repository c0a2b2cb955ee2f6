"""
Configuration settings related to the playlist format.

This module defines the constants that describe an `.m3u` playlist as the
converter sees it, and the defaults that control where and how converted
playlists are written.
"""
from pathlib import Path

# ======================================================================================
# Playlist File Identification
# ======================================================================================

# Only arguments whose name ends with this suffix are converted. The match is exact
# and case-sensitive, so "list.M3U" is skipped just like "list.txt".
PLAYLIST_EXTENSION = ".m3u"


# ======================================================================================
# Line Format
# ======================================================================================

# Lines starting with these four bytes are extended-M3U directives (#EXTM3U, #EXTINF,
# ...) and are never rewritten.
METADATA_MARKER = b"#EXT"

# Line kinds as reported by the transcoder.
LINE_KIND_METADATA = "metadata"
LINE_KIND_PATH_ENTRY = "path_entry"

# Every emitted line ends with this terminator, whatever the input used. Portable
# players such as the SanDisk Clip family only read CRLF playlists.
LINE_TERMINATOR = b"\r\n"

# Characters treated as directory separators when stripping a path entry down to its
# filename. Playlists exported on Windows carry backslashes; pass "/\\" to handle both.
DEFAULT_PATH_SEPARATORS = "/"

# Empty lines are dropped unless explicitly kept.
DEFAULT_KEEP_EMPTY_LINES = False


# ======================================================================================
# Output Settings
# ======================================================================================

# Side-directory policy: converted playlists are written here, relative to the
# current working directory unless an absolute path is configured.
DEFAULT_OUTPUT_DIR = Path("converted")

# rwxrwxr-x, as expected by players mounted as USB mass storage.
OUTPUT_DIR_MODE = 0o775

# In-place policy: the converted content is written to "<original><suffix>" first,
# then moved over the original once the conversion succeeded.
CONVERTED_TEMP_SUFFIX = ".converted"

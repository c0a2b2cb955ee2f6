"""
The line transcoder: the text transform at the heart of the converter.

A playlist is read as raw bytes, one byte at a time, so that the three line
ending conventions (LF, CRLF and a lone CR as written by classic Mac OS) are
all recognised, even when mixed in one file. Each logical line is then
classified: `#EXT` directives pass through untouched, anything else is a path
entry and loses everything up to and including its last path separator. Every
emitted line is terminated with CRLF.

No decoding takes place. Lines stay `bytes` from input to output, so
playlists in any ASCII-compatible encoding are converted without loss.
"""
from typing import BinaryIO, Iterator, Optional

from loguru import logger

from ..config.playlist import (
    DEFAULT_KEEP_EMPTY_LINES,
    DEFAULT_PATH_SEPARATORS,
    LINE_KIND_METADATA,
    LINE_KIND_PATH_ENTRY,
    LINE_TERMINATOR,
    METADATA_MARKER,
)
from ..domain.exceptions import OutputWriteException

_LF = b"\n"
_CR = b"\r"


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """
    Lazily splits a binary stream into logical lines, without their terminators.

    A line ends at LF, at CRLF, or at a CR that is not followed by LF. In the
    last case the byte read after the CR belongs to the next line and is held
    back until then, so the stream does not need to be seekable.

    End of stream acts as an implicit terminator: a final line without a line
    ending is still yielded, provided it is not empty. Empty lines between two
    terminators are yielded as `b""`; dropping them is up to the caller.

    Args:
        stream: A binary stream opened for reading.

    Yields:
        Each line as `bytes`.
    """
    line = bytearray()
    pending = b""
    while True:
        if pending:
            byte, pending = pending, b""
        else:
            byte = stream.read(1)
        if not byte:
            break

        if byte == _LF:
            yield bytes(line)
            line.clear()
        elif byte == _CR:
            next_byte = stream.read(1)
            if next_byte and next_byte != _LF:
                pending = next_byte
            yield bytes(line)
            line.clear()
        else:
            line += byte

    if line:
        yield bytes(line)


def classify_line(line: bytes) -> str:
    """Returns `metadata` for `#EXT` directive lines, `path_entry` for everything else."""
    if line[:len(METADATA_MARKER)] == METADATA_MARKER:
        return LINE_KIND_METADATA
    return LINE_KIND_PATH_ENTRY


def strip_path_prefix(line: bytes, separators: bytes) -> bytes:
    """
    Removes everything up to and including the last path separator.

    Args:
        line: A path entry.
        separators: Every byte in it counts as a separator.

    Returns:
        The filename component, or `line` unchanged when it holds no separator.
        For example `b"/Users/me/Music/Song.mp3"` becomes `b"Song.mp3"`.
    """
    last_separator = max(line.rfind(bytes([separator])) for separator in separators)
    if last_separator < 0:
        return line
    return line[last_separator + 1:]


def rewrite_line(line: bytes, separators: bytes) -> bytes:
    """Rewrites one logical line: metadata is kept verbatim, path entries are stripped."""
    if classify_line(line) == LINE_KIND_METADATA:
        return line
    return strip_path_prefix(line, separators)


def describe_line(line: bytes) -> str:
    """Renders a line for a diagnostic message, without its terminator."""
    return line.rstrip(b"\r\n").decode("utf-8", errors="replace")


class LineTranscoder:
    """
    Converts a whole playlist stream into its CRLF, filename-only form.

    Attributes:
        separators (bytes): Path separator characters used on path entries.
        keep_empty_lines (bool): If True, empty lines are emitted as a bare CRLF.
                                 By default they are dropped.
    """

    def __init__(self, separators: bytes = DEFAULT_PATH_SEPARATORS.encode("ascii"),
                 keep_empty_lines: bool = DEFAULT_KEEP_EMPTY_LINES):
        if not separators:
            raise ValueError("At least one path separator is required.")
        self.separators = separators
        self.keep_empty_lines = keep_empty_lines

    def convert_line(self, line: bytes) -> Optional[bytes]:
        """
        Converts one logical line into its output form.

        Returns:
            The rewritten line followed by CRLF, or None if the line is dropped.
            A line is dropped when it is empty, or when it only held a directory
            path and nothing is left after stripping it, unless empty lines are kept.
        """
        rewritten = rewrite_line(line, self.separators)
        if not rewritten and not self.keep_empty_lines:
            return None
        return rewritten + LINE_TERMINATOR

    def transcode(self, in_stream: BinaryIO, out_stream: BinaryIO) -> int:
        """
        Reads every line of `in_stream` and writes its converted form to `out_stream`.

        Args:
            in_stream: Binary stream holding the original playlist.
            out_stream: Binary stream receiving the converted playlist.

        Returns:
            The number of lines written.

        Raises:
            OutputWriteException: On the first line that cannot be written. Nothing
                                  more is read or written after that.
        """
        lines_written = 0
        for line in iter_lines(in_stream):
            output_line = self.convert_line(line)
            if output_line is None:
                logger.trace(f"Dropping empty line after line {lines_written}.")
                continue

            try:
                written = out_stream.write(output_line)
            except OSError as e:
                raise OutputWriteException(
                    f"Can't write output line {describe_line(output_line)}: {e}", line=output_line
                ) from e
            # Raw (unbuffered) streams may report a short write instead of raising.
            if written is not None and written != len(output_line):
                raise OutputWriteException(
                    f"Can't write output line {describe_line(output_line)}: "
                    f"short write ({written} of {len(output_line)} bytes)",
                    line=output_line,
                )
            lines_written += 1

        return lines_written

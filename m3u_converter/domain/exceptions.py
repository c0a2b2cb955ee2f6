"""
Defines custom exception types for the M3U Converter.

Every failure that can happen while converting one playlist has its own
exception type, so the batch driver can map it to the right per-file result
and diagnostic instead of catching a generic `OSError`. All of them are
file-scoped: the driver catches them, reports the file, and moves on to the
next argument.

All custom exceptions inherit from the base `M3UConverterException`.
"""
from pathlib import Path
from typing import Optional


class M3UConverterException(Exception):
    """Base class for all custom exceptions in the M3U Converter."""

    pass


class ConversionException(M3UConverterException):
    """
    Base class for exceptions raised while converting a single playlist.

    Attributes:
        path: The file the failure relates to (input, output or temporary file),
              when known.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


# --- Opening ---
class InputOpenException(ConversionException):
    """Raised when the input playlist cannot be opened for reading."""

    pass


class OutputOpenException(ConversionException):
    """Raised when the output (or temporary) file cannot be opened for writing."""

    pass


class DirectoryCreateException(OutputOpenException):
    """
    Raised when the side output directory cannot be created.

    Only the side-directory policy creates a directory. The failure is treated
    like any other output open failure.
    """

    pass


# --- Writing and Publishing ---
class OutputWriteException(ConversionException):
    """
    Raised when a converted line cannot be written to the output stream.

    The conversion of the current file stops at the first failed write.

    Attributes:
        line: The full line (terminator included) that could not be written.
    """

    def __init__(self, message: str, line: bytes = b"", path: Optional[Path] = None):
        super().__init__(message, path)
        self.line = line


class RenameOrDeleteException(ConversionException):
    """
    Raised when the in-place policy cannot move the converted file over the original.

    The original playlist is left as it was before the run.
    """

    pass

"""
Domain models describing a playlist conversion run.

`ConversionOptions` is the explicit configuration handed to the batch driver:
which output policy to use, where the side directory lives, which characters
separate path segments and whether empty lines survive. Nothing here is a
process-wide constant, so tests can point a run at an isolated directory.

`ConversionResult` is the outcome recorded for each command-line argument.
"""
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.common import (
    CONVERSION_STATUS_CONVERTED,
    CONVERSION_STATUS_OPEN_FAILED,
    CONVERSION_STATUS_SKIPPED,
    CONVERSION_STATUS_WRITE_FAILED,
    DEFAULT_POLICY,
    FAILURE_STATUSES,
    OUTPUT_POLICIES,
)
from ..config.playlist import (
    DEFAULT_KEEP_EMPTY_LINES,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PATH_SEPARATORS,
    PLAYLIST_EXTENSION,
)


class ConversionOptions:
    """
    Configuration for one conversion run.

    Attributes:
        policy (str): Either `side_directory` or `in_place`.
        output_dir (Path): Destination directory for the side-directory policy.
                           Relative paths are resolved against the current working
                           directory when the output is opened.
        separators (bytes): Characters treated as path separators.
        keep_empty_lines (bool): Emit empty lines as a bare CRLF instead of dropping them.
        extension (str): Required suffix of playlist arguments.
    """

    def __init__(
        self,
        policy: str = DEFAULT_POLICY,
        output_dir: Path | str = DEFAULT_OUTPUT_DIR,
        separators: str = DEFAULT_PATH_SEPARATORS,
        keep_empty_lines: bool = DEFAULT_KEEP_EMPTY_LINES,
        extension: str = PLAYLIST_EXTENSION,
    ):
        """
        Initializes and validates the options.

        Raises:
            ValueError: If the policy is unknown, the separator set is empty or
                        contains anything other than single-byte characters.
        """
        if policy not in OUTPUT_POLICIES:
            raise ValueError(
                f"Unknown output policy '{policy}'. Expected one of: {', '.join(OUTPUT_POLICIES)}"
            )
        if not separators:
            raise ValueError("At least one path separator character is required.")
        try:
            separator_bytes = separators.encode("ascii")
        except UnicodeEncodeError:
            raise ValueError(f"Path separators must be ASCII characters, got {separators!r}.")

        self.policy = policy
        self.output_dir = Path(output_dir)
        self.separators = separator_bytes
        self.keep_empty_lines = bool(keep_empty_lines)
        self.extension = extension

    def __repr__(self) -> str:
        return (
            f"ConversionOptions(policy={self.policy!r}, output_dir={str(self.output_dir)!r}, "
            f"separators={self.separators!r}, keep_empty_lines={self.keep_empty_lines})"
        )


class ConversionResult:
    """
    The terminal outcome of one command-line argument.

    Attributes:
        input_path (Path): The argument as given on the command line.
        status (str): One of `converted`, `skipped`, `open_failed`, `write_failed`.
        policy (str | None): The output policy used, None for skipped arguments.
        output_path (Path | None): Where the converted playlist was (or would have been) written.
        lines_written (int): Number of lines emitted.
        message (str | None): Human-readable detail for failures.
        ended_datetime (str): ISO 8601 timestamp of when the result was recorded.
    """

    def __init__(
        self,
        input_path: Path,
        status: str,
        policy: Optional[str] = None,
        output_path: Optional[Path] = None,
        lines_written: int = 0,
        message: Optional[str] = None,
    ):
        self.input_path = input_path
        self.status = status
        self.policy = policy
        self.output_path = output_path
        self.lines_written = lines_written
        self.message = message
        self.ended_datetime = datetime.now().isoformat()

    @classmethod
    def converted(cls, input_path: Path, policy: str, output_path: Path, lines_written: int) -> "ConversionResult":
        return cls(input_path, CONVERSION_STATUS_CONVERTED, policy, output_path, lines_written)

    @classmethod
    def skipped(cls, input_path: Path) -> "ConversionResult":
        return cls(input_path, CONVERSION_STATUS_SKIPPED)

    @classmethod
    def open_failed(cls, input_path: Path, message: str, policy: Optional[str] = None,
                    output_path: Optional[Path] = None) -> "ConversionResult":
        return cls(input_path, CONVERSION_STATUS_OPEN_FAILED, policy, output_path, message=message)

    @classmethod
    def write_failed(cls, input_path: Path, message: str, policy: str,
                     output_path: Optional[Path] = None, lines_written: int = 0) -> "ConversionResult":
        return cls(input_path, CONVERSION_STATUS_WRITE_FAILED, policy, output_path, lines_written, message)

    @property
    def is_failure(self) -> bool:
        """True for open and write failures. Extension skips are not failures."""
        return self.status in FAILURE_STATUSES

    def to_dict(self) -> Dict[str, Any]:
        """Returns a plain dictionary suitable for the YAML report."""
        return {
            "input_file": str(self.input_path),
            "status": self.status,
            "policy": self.policy,
            "output_file": str(self.output_path) if self.output_path else None,
            "lines": self.lines_written,
            "message": self.message,
            "ended_datetime": self.ended_datetime,
        }

    def __repr__(self) -> str:
        return f"ConversionResult({str(self.input_path)!r}, status={self.status!r})"

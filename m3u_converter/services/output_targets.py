"""
Output policies: where a converted playlist is written and how it is published.

Two policies are supported:

- `SideDirectoryTarget` writes the converted playlist, under the same file name,
  into a separate output directory. The original playlist is never touched.
- `InPlaceTarget` replaces the original playlist with its converted content.

Both write to a temporary `<final name>.converted` file first and only move it
to its final name once the whole playlist was converted. A failed conversion
therefore never leaves a truncated playlist behind, and converting a file that
already lives in the output directory does not truncate it before it is read.
"""
import os
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from ..config.common import POLICY_IN_PLACE, POLICY_SIDE_DIRECTORY
from ..config.playlist import CONVERTED_TEMP_SUFFIX, OUTPUT_DIR_MODE
from ..domain.exceptions import (
    DirectoryCreateException,
    OutputOpenException,
    RenameOrDeleteException,
)
from ..domain.playlist import ConversionOptions


class OutputTarget:
    """
    Base class for an output policy applied to one input playlist.

    Lifecycle, driven by the batch pipeline:
    1. `prepare()` creates whatever the policy needs on disk.
    2. `open()` returns a binary stream on the temporary file.
    3. After the stream is closed, either `commit()` publishes the temporary
       file under `final_path`, or `discard()` removes it.

    Attributes:
        policy (str): Name of the policy, reported in diagnostics.
        input_path (Path): The playlist being converted.
        final_path (Path): Where the converted playlist ends up.
        temp_path (Path): The file actually opened for writing.
    """

    policy: str = ""

    def __init__(self, input_path: Path):
        self.input_path = input_path
        self.final_path = self._get_final_path()
        self.temp_path = self.final_path.with_name(self.final_path.name + CONVERTED_TEMP_SUFFIX)

    def _get_final_path(self) -> Path:
        raise NotImplementedError("Subclasses must implement _get_final_path().")

    def prepare(self):
        """Creates anything the policy needs before the output can be opened."""
        pass

    def open(self) -> BinaryIO:
        """
        Opens the temporary output file for writing, truncating any leftover.

        Raises:
            OutputOpenException: If the file cannot be created.
        """
        try:
            out_stream = self.temp_path.open("wb")
        except OSError as e:
            raise OutputOpenException(f"Can't open {self.temp_path}: {e}", path=self.temp_path) from e
        logger.trace(f"Opened {self.temp_path} for writing.")
        return out_stream

    def commit(self):
        """
        Publishes the converted playlist under `final_path`.

        `Path.replace` swaps the file in a single rename, so readers see either
        the old content or the new one.

        Raises:
            RenameOrDeleteException: If the temporary file cannot be moved.
        """
        try:
            self.temp_path.replace(self.final_path)
        except OSError as e:
            raise RenameOrDeleteException(
                f"Can't move {self.temp_path} to {self.final_path}: {e}", path=self.final_path
            ) from e
        logger.debug(f"Moved {self.temp_path.name} to {self.final_path}")

    def discard(self):
        """Removes the temporary output after a failed conversion."""
        try:
            self.temp_path.unlink(missing_ok=True)
            logger.debug(f"Removed partial output {self.temp_path}")
        except OSError as e:
            logger.warning(f"Could not remove partial output {self.temp_path}: {e}")


class SideDirectoryTarget(OutputTarget):
    """
    Writes the converted playlist into a separate output directory.

    The output file keeps the input's base name: `~/Music/Road Trip.m3u` is
    written to `<output_dir>/Road Trip.m3u`.
    """

    policy = POLICY_SIDE_DIRECTORY

    def __init__(self, input_path: Path, output_dir: Path):
        self.output_dir = output_dir
        super().__init__(input_path)

    def _get_final_path(self) -> Path:
        return self.output_dir / self.input_path.name

    def prepare(self):
        """
        Creates the output directory if it does not exist yet.

        Repeated calls are harmless. The directory is created as rwxrwxr-x,
        subject to the process umask.

        Raises:
            DirectoryCreateException: If the directory cannot be created, or a
                                      non-directory already exists at its path.
        """
        if self.output_dir.is_dir():
            return
        try:
            self.output_dir.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateException(
                f"Can't create output directory {self.output_dir}: {e}", path=self.output_dir
            ) from e
        logger.debug(f"Created output directory {self.output_dir} (mode {oct(OUTPUT_DIR_MODE)})")


class InPlaceTarget(OutputTarget):
    """
    Replaces the original playlist with its converted content.

    The converted content is written to `<original>.converted` next to the
    original; on success it takes the original's name. On failure the original
    is left as it was and the temporary file is removed.
    """

    policy = POLICY_IN_PLACE

    def _get_final_path(self) -> Path:
        return self.input_path

    def commit(self):
        # Keep the original's permission bits on the converted file.
        try:
            mode = self.input_path.stat().st_mode
            os.chmod(self.temp_path, mode & 0o7777)
        except OSError as e:
            logger.debug(f"Could not copy permissions of {self.input_path}: {e}")
        super().commit()


def create_output_target(input_path: Path, options: ConversionOptions) -> OutputTarget:
    """Returns the output target matching the configured policy."""
    if options.policy == POLICY_IN_PLACE:
        return InPlaceTarget(input_path)
    return SideDirectoryTarget(input_path, options.output_dir)

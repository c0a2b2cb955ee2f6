"""
The batch driver: converts every playlist given on the command line.

Arguments are processed one after the other, in the order they were given.
Each argument ends in exactly one `ConversionResult`; whatever goes wrong with
one file is reported and the run continues with the next argument.
"""
from pathlib import Path
from typing import Iterable, List

from loguru import logger

from ..config.common import EXIT_CONVERSION_FAILED, EXIT_OK
from ..domain.exceptions import (
    InputOpenException,
    OutputOpenException,
    OutputWriteException,
    RenameOrDeleteException,
)
from ..domain.playlist import ConversionOptions, ConversionResult
from ..services.file_processing_service import ProcessPlaylistFiles
from ..services.logging_service import ConversionReport
from ..services.output_targets import OutputTarget, create_output_target
from ..services.transcoder import LineTranscoder, describe_line
from ..utils.format_utils import plural, summarize_counts


class PlaylistConversionPipeline:
    """
    Converts a batch of playlists according to a `ConversionOptions`.

    Per-file state machine: an argument is either skipped (wrong extension),
    fails to open (input, output directory or output file), or is opened and
    then either converted or fails while writing. No step is retried.

    Attributes:
        options (ConversionOptions): The configuration of this run.
        transcoder (LineTranscoder): The line transform applied to every playlist.
        results (List[ConversionResult]): Every result recorded so far, in order.
    """

    def __init__(self, options: ConversionOptions):
        self.options = options
        self.transcoder = LineTranscoder(options.separators, options.keep_empty_lines)
        self.results: List[ConversionResult] = []

    def process_multi_file(self, arguments: Iterable[Path | str]) -> List[ConversionResult]:
        """
        Converts every argument in order and returns their results.

        Args:
            arguments: File paths as given on the command line.

        Returns:
            One result per argument, in the same order.
        """
        process_files_handler = ProcessPlaylistFiles(arguments, self.options.extension)
        logger.debug(f"[{self.__class__.__name__}] Options: {self.options}")
        logger.debug(
            f"[{self.__class__.__name__}] {plural(len(process_files_handler.files), 'playlist')} to convert."
        )

        batch_results = []
        for path, is_playlist in process_files_handler.classified:
            if is_playlist:
                batch_results.append(self._convert_playlist(path))
            else:
                batch_results.append(self._skip(path))
        self.results.extend(batch_results)

        logger.debug(
            f"[{self.__class__.__name__}] Finished: {summarize_counts(r.status for r in batch_results)}."
        )
        return batch_results

    def process_single_file(self, path: Path | str) -> ConversionResult:
        """Converts or skips one argument; see `process_multi_file`."""
        return self.process_multi_file([path])[0]

    @staticmethod
    def _skip(path: Path) -> ConversionResult:
        logger.warning(f"Skipping {path}.")
        return ConversionResult.skipped(path)

    def _convert_playlist(self, path: Path) -> ConversionResult:
        """
        Converts one playlist and reports its outcome.

        Only filesystem errors are handled here. They never escape this method,
        so the batch always proceeds to the next argument.

        Args:
            path: A playlist that passed the extension filter.

        Returns:
            The result for this playlist.
        """
        target = create_output_target(path, self.options)
        logger.debug(f"Converting {path} with policy '{target.policy}' into {target.final_path}")

        try:
            lines_written = self._convert(path, target)
        except InputOpenException as e:
            logger.error(f"Can't open {path}")
            logger.debug(str(e))
            return ConversionResult.open_failed(path, str(e), target.policy, target.final_path)
        except OutputOpenException as e:
            # Name the output the user asked for, not the temporary file behind it.
            logger.error(f"Can't open {target.final_path}")
            logger.debug(str(e))
            return ConversionResult.open_failed(path, str(e), target.policy, target.final_path)
        except OutputWriteException as e:
            target.discard()
            logger.error(f"Can't write output line {describe_line(e.line)}")
            logger.error(f"Failed to convert {path}.")
            logger.debug(str(e))
            return ConversionResult.write_failed(path, str(e), target.policy, target.final_path)
        except (RenameOrDeleteException, OSError) as e:
            # OSError here comes from reading the input or closing the output.
            target.discard()
            logger.error(f"Failed to convert {path}.")
            logger.debug(str(e))
            return ConversionResult.write_failed(path, str(e), target.policy, target.final_path)

        logger.info(f"Converted {path}. [{target.policy}: {target.final_path}, {plural(lines_written, 'line')}]")
        return ConversionResult.converted(path, target.policy, target.final_path, lines_written)

    def _convert(self, path: Path, target: OutputTarget) -> int:
        """
        Runs the transcoder from `path` into `target`, then publishes the output.

        Both streams are closed before the output is published, on every path.

        Returns:
            The number of lines written.
        """
        try:
            in_stream = path.open("rb")
        except OSError as e:
            raise InputOpenException(f"Can't open {path}: {e}", path=path) from e

        with in_stream:
            target.prepare()
            with target.open() as out_stream:
                lines_written = self.transcoder.transcode(in_stream, out_stream)

        target.commit()
        return lines_written

    def write_report(self, report_path: Path) -> bool:
        """Appends every result recorded so far to the YAML report at `report_path`."""
        try:
            report = ConversionReport(report_path)
        except OSError as e:
            logger.error(f"Can't create report directory for {report_path}: {e}")
            return False
        return report.write(self.results)

    @staticmethod
    def exit_code(results: Iterable[ConversionResult]) -> int:
        """
        Returns the process exit status for a batch.

        Any open or write failure makes the run fail; skipped arguments do not.
        """
        if any(result.is_failure for result in results):
            return EXIT_CONVERSION_FAILED
        return EXIT_OK

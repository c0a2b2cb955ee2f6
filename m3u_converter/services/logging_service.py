"""
This module provides the structured conversion report.

Console diagnostics go through loguru. On request, the outcome of every
argument is also written to a YAML report, which is machine-readable and
accumulates across runs: each run appends its entries to the existing list.
"""

from pathlib import Path
from typing import Dict, Iterable, List

import yaml
from loguru import logger

from ..domain.playlist import ConversionResult


class Log:
    """
    A base class for file-backed logs.

    It resolves the log file path and makes sure its directory exists.
    """

    def __init__(self, log_file_path: Path):
        """
        Args:
            log_file_path: The file the log is written to. Missing parent
                           directories are created.
        """
        self.log_file_path = log_file_path.resolve()
        self.log_dir = self.log_file_path.parent
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def write(self, *args, **kwargs):
        raise NotImplementedError("Subclasses must implement the write() method.")


class ConversionReport(Log):
    """
    YAML report listing the result of every converted, skipped or failed argument.

    Each entry holds `index`, `input_file`, `status`, `policy`, `output_file`,
    `lines`, `message` and `ended_datetime`. Indices keep increasing across runs.
    """

    def _load_existing_entries(self) -> List[Dict]:
        if not self.log_file_path.is_file():
            return []
        try:
            with self.log_file_path.open("r", encoding="utf-8") as f:
                loaded_entries = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error reading/parsing report {self.log_file_path}: {e}. Starting a new report.")
            return []
        if loaded_entries is None:
            return []
        if not isinstance(loaded_entries, list):
            logger.warning(f"Report {self.log_file_path} contained unexpected data. Starting a new report.")
            return []
        return loaded_entries

    def write(self, results: Iterable[ConversionResult]) -> bool:
        """
        Appends the given results to the report file.

        A report that cannot be written is logged as an error; it never turns a
        successful conversion into a failed one.

        Args:
            results: Results of the current run, in processing order.

        Returns:
            True if the report was written.
        """
        log_entries = self._load_existing_entries()
        current_max_index = max(
            (entry.get("index", 0) for entry in log_entries if isinstance(entry, dict)),
            default=0,
        )
        for offset, result in enumerate(results, start=1):
            entry = {"index": current_max_index + offset}
            entry.update(result.to_dict())
            log_entries.append(entry)

        try:
            with self.log_file_path.open("w", encoding="utf-8") as f:
                yaml.dump(
                    log_entries,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                    indent=4,
                    width=220,
                )
        except OSError as e:
            logger.error(f"Failed to write report {self.log_file_path}: {e}")
            return False

        logger.debug(f"Wrote {len(log_entries)} entries to report {self.log_file_path}")
        return True

"""Unit tests for the YAML conversion report."""

from __future__ import annotations

from pathlib import Path

import yaml

from m3u_converter.config.common import POLICY_SIDE_DIRECTORY
from m3u_converter.domain.playlist import ConversionResult
from m3u_converter.services.logging_service import ConversionReport


def _results(tmp_path: Path) -> list[ConversionResult]:
    return [
        ConversionResult.converted(tmp_path / "a.m3u", POLICY_SIDE_DIRECTORY, tmp_path / "converted" / "a.m3u", 5),
        ConversionResult.skipped(tmp_path / "list.txt"),
        ConversionResult.open_failed(tmp_path / "missing.m3u", "Can't open missing.m3u", POLICY_SIDE_DIRECTORY),
    ]


def test_report_lists_every_result(tmp_path: Path) -> None:
    report_path = tmp_path / "reports" / "run.yaml"
    assert ConversionReport(report_path).write(_results(tmp_path)) is True

    entries = yaml.safe_load(report_path.read_text(encoding="utf-8"))
    assert [entry["index"] for entry in entries] == [1, 2, 3]
    assert [entry["status"] for entry in entries] == ["converted", "skipped", "open_failed"]
    assert entries[0]["lines"] == 5
    assert entries[2]["message"] == "Can't open missing.m3u"


def test_report_appends_across_runs(tmp_path: Path) -> None:
    """A second run continues the index of the first."""
    report_path = tmp_path / "run.yaml"
    ConversionReport(report_path).write(_results(tmp_path))
    ConversionReport(report_path).write(_results(tmp_path)[:1])

    entries = yaml.safe_load(report_path.read_text(encoding="utf-8"))
    assert [entry["index"] for entry in entries] == [1, 2, 3, 4]


def test_report_replaces_unexpected_content(tmp_path: Path) -> None:
    report_path = tmp_path / "run.yaml"
    report_path.write_text("not: a list\n", encoding="utf-8")

    ConversionReport(report_path).write(_results(tmp_path)[:1])

    entries = yaml.safe_load(report_path.read_text(encoding="utf-8"))
    assert len(entries) == 1
    assert entries[0]["index"] == 1


def test_report_write_failure_is_not_fatal(tmp_path: Path) -> None:
    """A report path that is a directory is logged, not raised."""
    report_path = tmp_path / "run.yaml"
    report_path.mkdir()
    assert ConversionReport(report_path).write(_results(tmp_path)) is False

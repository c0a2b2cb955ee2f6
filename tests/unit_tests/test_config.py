"""Unit tests for the user config loader and the conversion options."""

from __future__ import annotations

from pathlib import Path

import pytest

from m3u_converter.config.common import (
    CONVERSION_STATUS_CONVERTED,
    CONVERSION_STATUS_OPEN_FAILED,
    CONVERSION_STATUS_SKIPPED,
    CONVERSION_STATUS_WRITE_FAILED,
    POLICY_IN_PLACE,
    POLICY_SIDE_DIRECTORY,
    load_user_config,
)
from m3u_converter.domain.playlist import ConversionOptions, ConversionResult


def test_load_user_config_missing_file(tmp_path: Path) -> None:
    assert load_user_config(tmp_path / "absent.yaml") == {}


def test_load_user_config_reads_conversion_section(tmp_path: Path) -> None:
    config_path = tmp_path / "m3u_converter.yaml"
    config_path.write_text(
        "conversion:\n"
        "  policy: in_place\n"
        "  separators: '/\\'\n"
        "  keep_empty_lines: true\n"
        "other_tool:\n"
        "  policy: ignored\n",
        encoding="utf-8",
    )
    assert load_user_config(config_path) == {
        "policy": "in_place",
        "separators": "/\\",
        "keep_empty_lines": True,
    }


def test_load_user_config_ignores_unknown_keys(tmp_path: Path, log_messages: list[str]) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("conversion:\n  output_dir: out\n  colour: blue\n", encoding="utf-8")

    assert load_user_config(config_path) == {"output_dir": "out"}
    assert any("colour" in message for message in log_messages)


@pytest.mark.parametrize(
    ("line", "key"),
    [
        ("output_dir: 2024", "output_dir"),
        ("report: 7", "report"),
        ("keep_empty_lines: 'false'", "keep_empty_lines"),
        ("keep_empty_lines: 1", "keep_empty_lines"),
        ("separators: [a, b]", "separators"),
        ("policy: true", "policy"),
    ],
)
def test_load_user_config_drops_wrongly_typed_values(
    tmp_path: Path, log_messages: list[str], line: str, key: str
) -> None:
    """A value of the wrong YAML type is ignored with a warning; the other keys still load."""
    config_path = tmp_path / "config.yaml"
    other = "separators: '/'" if key != "separators" else "output_dir: out"
    config_path.write_text(f"conversion:\n  {line}\n  {other}\n", encoding="utf-8")

    loaded = load_user_config(config_path)

    assert key not in loaded
    assert len(loaded) == 1
    assert any(message.startswith(f"Ignoring '{key}'") for message in log_messages)


@pytest.mark.parametrize(
    "content",
    [
        "conversion: [unclosed\n",
        "- just\n- a list\n",
        "conversion: not-a-mapping\n",
        "",
    ],
)
def test_load_user_config_tolerates_bad_files(tmp_path: Path, content: str) -> None:
    """Malformed or unexpected content falls back to defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")
    assert load_user_config(config_path) == {}


def test_conversion_options_defaults() -> None:
    options = ConversionOptions()
    assert options.policy == POLICY_SIDE_DIRECTORY
    assert options.output_dir == Path("converted")
    assert options.separators == b"/"
    assert options.keep_empty_lines is False
    assert options.extension == ".m3u"


def test_conversion_options_normalizes_values() -> None:
    options = ConversionOptions(policy=POLICY_IN_PLACE, output_dir="out", separators="/\\", keep_empty_lines=1)  # type: ignore[arg-type]
    assert options.output_dir == Path("out")
    assert options.separators == b"/\\"
    assert options.keep_empty_lines is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"policy": "overwrite"},
        {"separators": ""},
        {"separators": "∕"},
    ],
)
def test_conversion_options_rejects_invalid_values(kwargs: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        ConversionOptions(**kwargs)  # type: ignore[arg-type]


def test_conversion_result_failure_classification(tmp_path: Path) -> None:
    """Only open and write failures count as failures."""
    path = tmp_path / "a.m3u"
    converted = ConversionResult.converted(path, POLICY_SIDE_DIRECTORY, tmp_path / "converted" / "a.m3u", 3)
    skipped = ConversionResult.skipped(tmp_path / "a.txt")
    open_failed = ConversionResult.open_failed(path, "Can't open")
    write_failed = ConversionResult.write_failed(path, "disk full", POLICY_IN_PLACE, path)

    assert (converted.status, converted.is_failure) == (CONVERSION_STATUS_CONVERTED, False)
    assert (skipped.status, skipped.is_failure) == (CONVERSION_STATUS_SKIPPED, False)
    assert (open_failed.status, open_failed.is_failure) == (CONVERSION_STATUS_OPEN_FAILED, True)
    assert (write_failed.status, write_failed.is_failure) == (CONVERSION_STATUS_WRITE_FAILED, True)


def test_conversion_result_to_dict(tmp_path: Path) -> None:
    result = ConversionResult.converted(tmp_path / "a.m3u", POLICY_SIDE_DIRECTORY, tmp_path / "out" / "a.m3u", 4)
    entry = result.to_dict()
    assert entry["input_file"] == str(tmp_path / "a.m3u")
    assert entry["status"] == CONVERSION_STATUS_CONVERTED
    assert entry["policy"] == POLICY_SIDE_DIRECTORY
    assert entry["output_file"] == str(tmp_path / "out" / "a.m3u")
    assert entry["lines"] == 4
    assert entry["message"] is None
    assert entry["ended_datetime"]

    assert ConversionResult.skipped(tmp_path / "a.txt").to_dict()["output_file"] is None

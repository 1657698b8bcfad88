"""Tests for npmblame.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from npmblame.config import BlameConfig, ConfigError, ReportConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, BlameConfig)
    assert config.root == tmp_path.resolve()
    assert config.extended is False
    assert config.exclude_paths == []
    assert config.report == ReportConfig(format="table", max_col_width=50)


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".npmblame.yml").write_text(
        """
extended: true
exclude_paths:
  - "some-pkg/fixtures/"
  - "*.map"
report:
  format: Markdown
  max_col_width: 30
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.extended is True
    assert config.exclude_paths == ["some-pkg/fixtures/", "*.map"]
    assert config.report.format == "markdown"
    assert config.report.max_col_width == 30


def test_load_config_accepts_explicit_file(tmp_path: Path) -> None:
    config_file = tmp_path / "blame.yml"
    config_file.write_text("exclude_paths: docs/\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.exclude_paths == ["docs/"]
    assert config.root == tmp_path.resolve()


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".npmblame.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).report.format == "table"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".npmblame.yml").write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_unknown_format(tmp_path: Path) -> None:
    (tmp_path / ".npmblame.yml").write_text("report:\n  format: html\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="html"):
        load_config(tmp_path)


@pytest.mark.parametrize("width", ["0", "-3", "wide"])
def test_load_config_rejects_bad_column_width(tmp_path: Path, width: str) -> None:
    (tmp_path / ".npmblame.yml").write_text(
        f"report:\n  max_col_width: {width}\n", encoding="utf-8"
    )
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_wraps_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".npmblame.yml").write_text("report: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)

"""CLI behaviour tests."""

from __future__ import annotations

import json
import os

import pytest

from npmblame.cli import _build_parser, main
from tests._fixtures.tree_builder import TreeBuilder


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    assert parser.parse_args(["--verbose", "scan"]).verbose is True
    assert parser.parse_args(["scan", "--verbose"]).verbose is True
    assert parser.parse_args(["scan"]).verbose is False


def test_cli_scan_defaults() -> None:
    args = _build_parser().parse_args(["scan"])
    assert args.command == "scan"
    assert args.path == "node_modules"
    assert args.fmt is None
    assert args.extended is None
    assert args.fail_on_errors is False


def test_cli_rejects_non_positive_column_width() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["scan", "--max-col-width", "0"])


def test_cli_issue_arguments() -> None:
    args = _build_parser().parse_args(["issue", "left-pad", "vendor/node_modules", "--extended"])
    assert args.package == "left-pad"
    assert args.path == "vendor/node_modules"
    assert args.extended is True


def test_main_scan_prints_table(tree_builder: TreeBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    tree_builder.write(["left-pad/test/index.js", "tidy/index.js"])

    main(["scan", str(tree_builder.path())])

    out = capsys.readouterr().out
    assert "Your node_modules contains 1 packages with errors out of 2 packages" in out
    assert "left-pad" in out


def test_main_scan_json(tree_builder: TreeBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    tree_builder.write(["left-pad/.travis.yml"])

    main(["scan", str(tree_builder.path()), "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["packages"][0]["counts"]["continuous_integration"] == 1


def test_main_scan_fail_on_errors(tree_builder: TreeBuilder) -> None:
    tree_builder.write(["left-pad/test.js"])

    with pytest.raises(SystemExit) as excinfo:
        main(["scan", str(tree_builder.path()), "--fail-on-errors"])
    assert excinfo.value.code == 2


def test_main_scan_missing_tree_exits(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["scan", str(tmp_path / "missing")])
    assert excinfo.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_main_issue_prints_draft(tree_builder: TreeBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    tree_builder.write(["left-pad/logo.png"])

    main(["issue", "left-pad", str(tree_builder.path())])

    out = capsys.readouterr().out
    assert out.startswith("npm-blame: left-pad ships 1 unnecessary files\n\n")
    assert "**Image files**: 1." in out


def test_main_issue_unknown_package_exits(
    tree_builder: TreeBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    tree_builder.write(["left-pad/index.js"])

    with pytest.raises(SystemExit) as excinfo:
        main(["issue", "ghost", str(tree_builder.path())])
    assert excinfo.value.code == 1
    assert "ghost" in capsys.readouterr().err


def test_main_scan_reports_entries_vanishing_mid_walk(
    tree_builder: TreeBuilder,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    tree_builder.write(["pkg/lib/index.js"])
    real_scandir = os.scandir

    def _scandir(path="."):
        if str(path).endswith("pkg/lib"):
            raise FileNotFoundError(2, "No such file or directory", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _scandir)

    with pytest.raises(SystemExit) as excinfo:
        main(["scan", str(tree_builder.path())])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "File system traversing error." in err
    assert "pkg/lib" in err


def test_main_scan_file_instead_of_tree_exits(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "package.json"
    target.write_text("{}", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["scan", str(target)])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "not a directory" in err
    assert "File system traversing error." not in err

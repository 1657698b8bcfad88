"""Tests for npmblame.resolver."""

from __future__ import annotations

import pytest

from npmblame.resolver import containing_directory, resolve_owner


@pytest.mark.parametrize(
    ("directory", "expected"),
    [
        ("test/regular/path", "test"),
        ("/test/root/path", "test"),
        ("/test/node_modules/nested/path", "nested"),
        ("node_modules/lodash", "lodash"),
        ("node_modules/lodash/fp", "lodash"),
        ("a/node_modules/b/node_modules/c", "c"),
        ("a/node_modules/b/node_modules/c/lib/deep", "c"),
        ("pkg", "pkg"),
    ],
)
def test_resolve_owner(directory: str, expected: str) -> None:
    assert resolve_owner(directory) == expected


def test_resolve_owner_root_is_empty() -> None:
    assert resolve_owner("/") == ""
    assert resolve_owner("") == ""


def test_resolve_owner_marker_without_package_falls_back_to_first_segment() -> None:
    # The node_modules directory of a package belongs to that package.
    assert resolve_owner("a/node_modules") == "a"


def test_resolve_owner_matches_whole_segments_only() -> None:
    assert resolve_owner("my_node_modules/x/y") == "my_node_modules"


def test_containing_directory() -> None:
    assert containing_directory("a/node_modules/b/node_modules/c/file.js") == (
        "a/node_modules/b/node_modules/c"
    )
    assert containing_directory("/pkg") == "/"
    assert containing_directory("pkg") == ""
    assert containing_directory("/pkg/exec") == "/pkg"


def test_nested_file_resolves_to_innermost_package() -> None:
    path = "a/node_modules/b/node_modules/c/file.js"
    assert resolve_owner(containing_directory(path)) == "c"

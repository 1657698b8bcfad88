"""Heuristic checks that classify dependency tree entries into issue categories."""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from .models import Category

Predicate = Callable[[str, bool, int], bool]
Check = Tuple[Category, Predicate]

_EXECUTE_BITS = 0o111

_TEST_MARKERS: tuple[str, ...] = (
    "test",
    "tests",
    ".zuul.yml",
    "coverage",
    ".coveralls.yml",
)
_BENCH_MARKER = "bench"
_CI_MARKER = ".travis.yml"
_LINT_MARKERS: tuple[str, ...] = (
    ".editorconfig",
    ".eslintrc",
    ".sass-lint.yml",
    ".jshintrc",
)
_IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".ico"})


def extension(path: str) -> str:
    """Return the suffix of the last path element, leading dot included.

    Dotfiles count as pure extensions (``.eslintrc`` -> ``.eslintrc``).
    """
    name = path[path.rfind("/") + 1 :]
    index = name.rfind(".")
    if index == -1:
        return ""
    return name[index:]


def _contains_any(path: str, markers: Sequence[str]) -> bool:
    return any(marker in path for marker in markers)


def is_executable(path: str, is_dir: bool, mode: int) -> bool:
    return not is_dir and bool(mode & _EXECUTE_BITS)


def is_test(path: str, is_dir: bool, mode: int) -> bool:
    return _contains_any(path, _TEST_MARKERS)


def is_benchmark(path: str, is_dir: bool, mode: int) -> bool:
    return _BENCH_MARKER in path


def is_image(path: str, is_dir: bool, mode: int) -> bool:
    return extension(path) in _IMAGE_EXTENSIONS


def is_ci_config(path: str, is_dir: bool, mode: int) -> bool:
    return _CI_MARKER in path


def is_lint_config(path: str, is_dir: bool, mode: int) -> bool:
    return _contains_any(path, _LINT_MARKERS)


def is_jsx(path: str, is_dir: bool, mode: int) -> bool:
    return extension(path) == ".jsx"


def is_typescript(path: str, is_dir: bool, mode: int) -> bool:
    return extension(path) == ".ts"


DEFAULT_CHECKS: Tuple[Check, ...] = (
    (Category.EXECUTABLE, is_executable),
    (Category.TEST, is_test),
    (Category.BENCHMARK, is_benchmark),
    (Category.IMAGE, is_image),
    (Category.CONTINUOUS_INTEGRATION, is_ci_config),
    (Category.LINT_OR_EDITOR_CONFIG, is_lint_config),
)

EXTENDED_CHECKS: Tuple[Check, ...] = DEFAULT_CHECKS + (
    (Category.JSX, is_jsx),
    (Category.TYPESCRIPT, is_typescript),
)


def checks_for(extended: bool) -> Tuple[Check, ...]:
    """Return the check list, including JSX/TypeScript detection when ``extended``."""
    return EXTENDED_CHECKS if extended else DEFAULT_CHECKS


def classify(
    path: str,
    is_dir: bool,
    mode: int,
    checks: Sequence[Check] = DEFAULT_CHECKS,
) -> List[Category]:
    """Return every category whose check matches, in check order."""
    return [category for category, predicate in checks if predicate(path, is_dir, mode)]


__all__ = [
    "Check",
    "DEFAULT_CHECKS",
    "EXTENDED_CHECKS",
    "Predicate",
    "checks_for",
    "classify",
    "extension",
]

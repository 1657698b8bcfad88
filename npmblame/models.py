"""Core data models shared across npm-blame components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Category(Enum):
    """Kind of hygiene issue a package can ship."""

    EXECUTABLE = "executable"
    TEST = "test"
    BENCHMARK = "benchmark"
    IMAGE = "image"
    CONTINUOUS_INTEGRATION = "continuous_integration"
    LINT_OR_EDITOR_CONFIG = "lint_or_editor_config"
    JSX = "jsx"
    TYPESCRIPT = "typescript"

    @property
    def column(self) -> str:
        """Header used for this category in tabular reports."""
        return _COLUMNS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_COLUMNS: Dict[Category, str] = {
    Category.EXECUTABLE: "EXECUTABLE FILE",
    Category.TEST: "TESTS",
    Category.BENCHMARK: "BENCH",
    Category.IMAGE: "IMAGES",
    Category.CONTINUOUS_INTEGRATION: "TRAVIS_FILES",
    Category.LINT_OR_EDITOR_CONFIG: "EDITOR_LINT_FILES",
    Category.JSX: "HAS_JSX",
    Category.TYPESCRIPT: "HAS_TS",
}

_DESCRIPTIONS: Dict[Category, str] = {
    Category.EXECUTABLE: "Executable files",
    Category.TEST: "Test and coverage files",
    Category.BENCHMARK: "Benchmark files",
    Category.IMAGE: "Image files",
    Category.CONTINUOUS_INTEGRATION: "Continuous integration config",
    Category.LINT_OR_EDITOR_CONFIG: "Linter and editor config",
    Category.JSX: "JSX sources",
    Category.TYPESCRIPT: "TypeScript sources",
}

BASE_CATEGORIES: Tuple[Category, ...] = (
    Category.EXECUTABLE,
    Category.TEST,
    Category.BENCHMARK,
    Category.IMAGE,
    Category.CONTINUOUS_INTEGRATION,
    Category.LINT_OR_EDITOR_CONFIG,
)

EXTENDED_CATEGORIES: Tuple[Category, ...] = BASE_CATEGORIES + (
    Category.JSX,
    Category.TYPESCRIPT,
)


@dataclass
class PackageSummary:
    """Per-category issue counts for a single package."""

    name: str
    counts: Dict[Category, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def nonzero(self) -> Dict[Category, int]:
        """Return only the categories that were actually hit."""
        return {category: count for category, count in self.counts.items() if count}


@dataclass
class ScanTotals:
    """Grand totals for a finished scan."""

    packages_with_errors: int
    packages_seen: int
    total_errors: int

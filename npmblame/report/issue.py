"""Issue drafts summarising the hygiene problems of a single package.

Drafts are plain text meant to be pasted into the package's issue tracker;
nothing here talks to the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from jinja2 import Environment

from ..models import Category
from ..store import PackageStore
from .templating import create_environment

_HINTS: Dict[Category, str] = {
    Category.EXECUTABLE: "Files with the executable bit set are rarely needed outside `bin` entries.",
    Category.TEST: "Test suites and coverage output are not used by consumers.",
    Category.BENCHMARK: "Benchmarks can stay in the repository without being published.",
    Category.IMAGE: "Images such as logos and screenshots can be linked from the README instead.",
    Category.CONTINUOUS_INTEGRATION: "CI configuration only matters in the source repository.",
    Category.LINT_OR_EDITOR_CONFIG: "Linter and editor settings only matter in the source repository.",
    Category.JSX: "Consider publishing compiled JavaScript only.",
    Category.TYPESCRIPT: "Consider publishing compiled JavaScript and `.d.ts` declarations only.",
}


@dataclass
class IssueDraft:
    """Title and body of an issue for one package."""

    package: str
    title: str
    body: str
    counts: Dict[Category, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def default_title(package: str, total: int) -> str:
    return f"npm-blame: {package} ships {total} unnecessary files"


def build_issue(
    store: PackageStore,
    package: str,
    *,
    env: Environment | None = None,
) -> IssueDraft:
    """Build an issue draft for ``package``.

    Raises ``LookupError`` when the package was never seen or has no issues.
    """
    if package not in store:
        raise LookupError(f"Package '{package}' was not found in the scanned tree")
    summary = store.summary(package)
    counts = summary.nonzero()
    if not counts:
        raise LookupError(f"Package '{package}' has no hygiene issues to report")

    items: List[Dict[str, object]] = [
        {
            "description": category.description,
            "count": count,
            "hint": _HINTS.get(category, ""),
        }
        for category, count in counts.items()
    ]
    environment = env or create_environment()
    body = environment.get_template("issue.md.j2").render(
        package=package,
        total=summary.total,
        items=items,
    )
    return IssueDraft(
        package=package,
        title=default_title(package, summary.total),
        body=body.rstrip() + "\n",
        counts=counts,
    )


__all__ = ["IssueDraft", "build_issue", "default_title"]

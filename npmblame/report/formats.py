"""Machine and human readable renderings of a finished scan."""

from __future__ import annotations

import json
from typing import Dict, List

from jinja2 import Environment

from ..config import DEFAULT_MAX_COL_WIDTH, REPORT_FORMATS
from ..models import PackageSummary
from ..store import PackageStore
from .table import headline, render_table
from .templating import create_environment


def _summaries(store: PackageStore) -> List[PackageSummary]:
    return [store.summary(name) for name in store.packages_with_errors()]


def render_json(store: PackageStore) -> str:
    """Return the scan as JSON: packages with issues plus grand totals."""
    packages: List[Dict[str, object]] = []
    for summary in _summaries(store):
        packages.append(
            {
                "name": summary.name,
                "total": summary.total,
                "counts": {category.value: count for category, count in summary.counts.items()},
            }
        )
    totals = store.totals()
    payload = {
        "categories": [category.value for category in store.categories],
        "packages": packages,
        "totals": {
            "packages_with_errors": totals.packages_with_errors,
            "packages_seen": totals.packages_seen,
            "total_errors": totals.total_errors,
        },
    }
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def render_markdown(store: PackageStore, *, env: Environment | None = None) -> str:
    environment = env or create_environment()
    template = environment.get_template("report.md.j2")
    rendered = template.render(
        headline=headline(store),
        categories=store.categories,
        rows=_summaries(store),
    )
    return rendered.rstrip() + "\n"


def render(
    store: PackageStore,
    fmt: str = "table",
    *,
    max_col_width: int = DEFAULT_MAX_COL_WIDTH,
) -> str:
    """Render ``store`` in one of the supported report formats."""
    if fmt == "table":
        return render_table(store, max_col_width=max_col_width)
    if fmt == "json":
        return render_json(store)
    if fmt == "markdown":
        return render_markdown(store)
    choices = ", ".join(REPORT_FORMATS)
    raise ValueError(f"Unknown report format '{fmt}' (expected one of: {choices})")


__all__ = ["render", "render_json", "render_markdown"]

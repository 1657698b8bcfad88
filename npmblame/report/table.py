"""Plain-text table rendering of scan results."""

from __future__ import annotations

from typing import List, Sequence

from tabulate import tabulate

from ..config import DEFAULT_MAX_COL_WIDTH
from ..store import PackageStore


def headline(store: PackageStore) -> str:
    totals = store.totals()
    return (
        f"Your node_modules contains {totals.packages_with_errors} packages "
        f"with errors out of {totals.packages_seen} packages"
    )


def table_rows(store: PackageStore) -> List[List[str]]:
    """Header plus one row per package with at least one issue, sorted by name."""
    categories = store.categories
    rows = [["PACKAGE", "ERRORS", *(category.column for category in categories)]]
    for name in store.packages_with_errors():
        summary = store.summary(name)
        rows.append(
            [
                name,
                str(summary.total),
                *(str(summary.counts.get(category, 0)) for category in categories),
            ]
        )
    return rows


def format_table(rows: Sequence[Sequence[str]], *, max_col_width: int = DEFAULT_MAX_COL_WIDTH) -> str:
    """Lay out ``rows`` (header first) with cells wrapped at ``max_col_width``."""
    if not rows:
        return ""
    headers, body = list(rows[0]), [list(row) for row in rows[1:]]
    colalign = ["left"] + ["right"] * (len(headers) - 1)
    return tabulate(
        body,
        headers=headers,
        tablefmt="plain",
        colalign=colalign,
        maxcolwidths=max_col_width,
    )


def render_table(store: PackageStore, *, max_col_width: int = DEFAULT_MAX_COL_WIDTH) -> str:
    table = format_table(table_rows(store), max_col_width=max_col_width)
    return f"{headline(store)}\n\n{table}\n"


__all__ = ["format_table", "headline", "render_table", "table_rows"]

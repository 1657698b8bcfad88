"""Report rendering for finished scans."""

from .formats import render, render_json, render_markdown
from .issue import IssueDraft, build_issue
from .table import render_table

__all__ = [
    "IssueDraft",
    "build_issue",
    "render",
    "render_json",
    "render_markdown",
    "render_table",
]

"""Jinja2 environment for report and issue templates."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATES_DIR = Path(__file__).with_name("templates")


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Return an environment searching ``templates_dir`` before the bundled templates."""
    directories = []
    if templates_dir is not None:
        directories.append(str(templates_dir))
    if str(TEMPLATES_DIR) not in directories:
        directories.append(str(TEMPLATES_DIR))
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["TEMPLATES_DIR", "create_environment"]

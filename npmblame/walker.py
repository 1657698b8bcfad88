"""Dependency tree traversal feeding filesystem entries to a visit callback."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .logging import get_logger

Visit = Callable[[str, bool, int, Optional[BaseException]], None]


class MissingTreeError(FileNotFoundError):
    """Raised when the tree to scan does not exist."""


class NotATreeError(NotADirectoryError):
    """Raised when the path to scan is not a directory."""


@dataclass
class IgnoreRule:
    """A gitignore-style exclusion pattern from .npmblame.yml."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            return fnmatchcase(rel_path, self.pattern)

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rules(patterns: Sequence[str]) -> List[IgnoreRule]:
    rules: List[IgnoreRule] = []
    for raw in patterns:
        pattern = raw.strip()
        if not pattern or pattern.startswith("#"):
            continue
        directory_only = pattern.endswith("/")
        pattern = pattern.rstrip("/")
        anchored = pattern.startswith("/")
        pattern = pattern.lstrip("/")
        rules.append(
            IgnoreRule(
                pattern=pattern,
                directory_only=directory_only,
                anchored=anchored,
                has_slash="/" in pattern,
            )
        )
    return rules


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


class DependencyWalker:
    """Walks a dependency tree and reports every entry to a visit callback.

    Paths handed to the callback are POSIX paths relative to the walked root,
    so a root living under e.g. ``/home/test`` does not leak into the path
    heuristics. The root itself is never reported.
    """

    def __init__(self, exclude_paths: Sequence[str] | None = None) -> None:
        self.rules = build_ignore_rules(exclude_paths or [])
        self.logger = get_logger("walker")

    def walk(self, root: str | Path, visit: Visit) -> int:
        """Visit every entry below ``root`` and return how many were visited.

        Errors listing a directory or reading an entry's metadata are handed
        to ``visit`` as its traversal error; the callback is expected to
        raise, which stops the walk.
        """
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise MissingTreeError(f"Dependency tree not found: {root}")
        if not root_path.is_dir():
            raise NotATreeError(f"Dependency tree is not a directory: {root}")

        def _relative(location: str | None) -> str:
            if not location:
                return ""
            try:
                return Path(location).relative_to(root_path).as_posix()
            except ValueError:
                return Path(location).as_posix()

        def _on_error(exc: OSError) -> None:
            visit(_relative(exc.filename), True, 0, exc)

        visited = 0
        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
            current = Path(dirpath)
            rel_dir = current.relative_to(root_path).as_posix() if current != root_path else ""

            kept_dirs = []
            for name in sorted(dirnames):
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if _should_ignore(rel_path, True, self.rules):
                    self.logger.debug("Skipping excluded directory %s", rel_path)
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for name in sorted(kept_dirs + filenames):
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if name not in kept_dirs and _should_ignore(rel_path, False, self.rules):
                    continue
                try:
                    info = os.lstat(current / name)
                except OSError as exc:
                    visit(rel_path, False, 0, exc)
                    continue
                visit(rel_path, stat.S_ISDIR(info.st_mode), stat.S_IMODE(info.st_mode), None)
                visited += 1

        self.logger.debug("Visited %d entries under %s", visited, root_path)
        return visited


__all__ = [
    "DependencyWalker",
    "IgnoreRule",
    "MissingTreeError",
    "NotATreeError",
    "Visit",
    "build_ignore_rules",
]

"""Per-package accumulation of classified hygiene issues."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .classifier import DEFAULT_CHECKS, Check
from .logging import get_logger
from .models import Category, PackageSummary, ScanTotals
from .resolver import BIN_DIRECTORY, containing_directory, resolve_owner

_LOGGER = get_logger("store")


class PackageStore:
    """Accumulates issue counts for every package visited during one scan.

    The store is fed one filesystem entry at a time through :meth:`visit`.
    It mutates plain dictionaries without locking, so a store must only be
    used by a single scan at a time.
    """

    def __init__(self, checks: Sequence[Check] | None = None) -> None:
        self._checks: Tuple[Check, ...] = tuple(checks) if checks is not None else DEFAULT_CHECKS
        self._packages: Dict[str, Dict[Category, int]] = {}

    @property
    def categories(self) -> Tuple[Category, ...]:
        """Categories this store classifies, in check order."""
        return tuple(category for category, _ in self._checks)

    def visit(
        self,
        path: str,
        is_dir: bool,
        mode: int,
        error: Optional[BaseException] = None,
    ) -> None:
        """Classify one entry of the dependency tree.

        A traversal ``error`` is re-raised as is and nothing is recorded.
        Entries owned by the tree root or by the ``.bin`` shim directory are
        ignored.
        """
        if error is not None:
            raise error

        owner = resolve_owner(containing_directory(path))
        if not owner or owner == BIN_DIRECTORY:
            _LOGGER.debug("Skipping %s (owner %r)", path, owner)
            return

        record = self._packages.get(owner)
        if record is None:
            _LOGGER.debug("Discovered package %s", owner)
            record = self._packages[owner] = {}

        for category, predicate in self._checks:
            if predicate(path, is_dir, mode):
                record[category] = record.get(category, 0) + 1

    def append_error(self, package: str, category: Category) -> None:
        """Record a single occurrence of ``category`` for ``package``."""
        record = self._packages.setdefault(package, {})
        record[category] = record.get(category, 0) + 1

    def total_errors(self, package: str) -> int:
        return sum(self._packages.get(package, {}).values())

    def counts(self, package: str) -> Dict[Category, int]:
        """Return a copy of the raw counts recorded for ``package``."""
        return dict(self._packages.get(package, {}))

    def packages(self) -> List[str]:
        """Every package seen so far, sorted by name."""
        return sorted(self._packages)

    def packages_with_errors(self) -> List[str]:
        return [name for name in self.packages() if self.total_errors(name) > 0]

    def summary(self, package: str) -> PackageSummary:
        """Return zero-filled counts for ``package`` over the enabled categories."""
        record = self._packages.get(package, {})
        counts = {category: record.get(category, 0) for category in self.categories}
        for category, count in record.items():
            counts.setdefault(category, count)
        return PackageSummary(name=package, counts=counts)

    def totals(self) -> ScanTotals:
        with_errors = self.packages_with_errors()
        return ScanTotals(
            packages_with_errors=len(with_errors),
            packages_seen=len(self._packages),
            total_errors=sum(self.total_errors(name) for name in with_errors),
        )

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, package: object) -> bool:
        return package in self._packages


__all__ = ["PackageStore"]

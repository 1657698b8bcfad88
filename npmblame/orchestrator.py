"""Pipeline orchestration for scan and issue flows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .classifier import checks_for
from .config import CONFIG_FILENAME, BlameConfig, load_config
from .logging import get_logger
from .report import IssueDraft, build_issue, render
from .store import PackageStore
from .walker import DependencyWalker


@dataclass
class ScanResult:
    """Outcome of walking one dependency tree."""

    root: Path
    store: PackageStore
    config: BlameConfig
    visited: int


class Orchestrator:
    """Coordinates config loading, traversal, classification and rendering."""

    def __init__(self) -> None:
        self.logger = get_logger("orchestrator")

    def run_scan(
        self,
        path: str,
        *,
        config_path: Optional[str] = None,
        extended: Optional[bool] = None,
    ) -> ScanResult:
        """Walk ``path`` and classify every entry into a fresh store.

        Traversal errors propagate unchanged; the store stays as it was when
        the failing entry was reached.
        """
        root = Path(path).expanduser().resolve()
        config = self._load_config(root, config_path)
        use_extended = config.extended if extended is None else extended

        self.logger.info("Scanning %s", root)
        store = PackageStore(checks_for(use_extended))
        walker = DependencyWalker(config.exclude_paths)
        visited = walker.walk(root, store.visit)

        totals = store.totals()
        self.logger.info(
            "Scanned %d entries: %d of %d packages have issues",
            visited,
            totals.packages_with_errors,
            totals.packages_seen,
        )
        return ScanResult(root=root, store=store, config=config, visited=visited)

    def run_report(
        self,
        path: str,
        *,
        config_path: Optional[str] = None,
        extended: Optional[bool] = None,
        fmt: Optional[str] = None,
        max_col_width: Optional[int] = None,
    ) -> tuple[ScanResult, str]:
        """Scan ``path`` and render the result; explicit arguments beat config values."""
        result = self.run_scan(path, config_path=config_path, extended=extended)
        report_config = result.config.report
        output = render(
            result.store,
            fmt or report_config.format,
            max_col_width=max_col_width or report_config.max_col_width,
        )
        return result, output

    def run_issue(
        self,
        path: str,
        package: str,
        *,
        config_path: Optional[str] = None,
        extended: Optional[bool] = None,
    ) -> IssueDraft:
        result = self.run_scan(path, config_path=config_path, extended=extended)
        draft = build_issue(result.store, package)
        self.logger.debug("Drafted issue for %s (%d files)", package, draft.total)
        return draft

    def _load_config(self, root: Path, config_path: Optional[str]) -> BlameConfig:
        if config_path is not None:
            return load_config(Path(config_path))
        # The tree itself first, then the project directory holding node_modules.
        for candidate in (root, root.parent):
            if (candidate / CONFIG_FILENAME).is_file():
                self.logger.debug("Loading configuration from %s", candidate / CONFIG_FILENAME)
                return load_config(candidate)
        return load_config(root)


__all__ = ["Orchestrator", "ScanResult"]

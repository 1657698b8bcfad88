"""CLI entrypoints for npm-blame commands."""

from __future__ import annotations

import argparse
import sys

from .config import REPORT_FORMATS, ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .walker import MissingTreeError, NotATreeError

DEFAULT_TREE = "node_modules"
EXIT_ISSUES_FOUND = 2


def _add_common_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default: object = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Increase log verbosity for troubleshooting.",
    )


def _add_scan_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--extended",
        action="store_true",
        default=None,
        help="Also flag JSX and TypeScript sources.",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to a .npmblame.yml file (defaults to the tree or its parent directory).",
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="npm-blame",
        description="Blame installed npm packages for shipping tests, images and other clutter.",
    )
    _add_common_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a node_modules tree and print a per-package report.",
    )
    _add_common_options(scan_parser, suppress_default=True)
    _add_scan_options(scan_parser)
    scan_parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_TREE,
        help="Dependency tree to scan (defaults to ./node_modules).",
    )
    scan_parser.add_argument(
        "--format",
        dest="fmt",
        choices=REPORT_FORMATS,
        default=None,
        help="Report format (defaults to the configured format, then 'table').",
    )
    scan_parser.add_argument(
        "--max-col-width",
        type=_positive_int,
        default=None,
        help="Truncate table cells wider than this many characters.",
    )
    scan_parser.add_argument(
        "--fail-on-errors",
        action="store_true",
        help=f"Exit with status {EXIT_ISSUES_FOUND} when any package has issues.",
    )

    issue_parser = subparsers.add_parser(
        "issue",
        help="Print an issue draft for a single package.",
    )
    _add_common_options(issue_parser, suppress_default=True)
    _add_scan_options(issue_parser)
    issue_parser.add_argument("package", help="Name of the package to draft an issue for.")
    issue_parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_TREE,
        help="Dependency tree to scan (defaults to ./node_modules).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for npm-blame commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    machine_output = getattr(args, "fmt", None) == "json"
    configure_logging(verbose=bool(args.verbose), quiet=machine_output)

    orchestrator = Orchestrator()

    try:
        if args.command == "scan":
            result, output = orchestrator.run_report(
                args.path,
                config_path=args.config_path,
                extended=args.extended,
                fmt=args.fmt,
                max_col_width=args.max_col_width,
            )
            sys.stdout.write(output)
            if args.fail_on_errors and result.store.packages_with_errors():
                parser.exit(EXIT_ISSUES_FOUND)
        elif args.command == "issue":
            draft = orchestrator.run_issue(
                args.path,
                args.package,
                config_path=args.config_path,
                extended=args.extended,
            )
            print(draft.title)
            print()
            sys.stdout.write(draft.body)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (MissingTreeError, NotATreeError) as exc:
        parser.exit(1, f"{exc}\n")
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")
    except LookupError as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"File system traversing error. {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])

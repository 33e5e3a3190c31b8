"""Command-line entry point.

Runs with defaults when given no flags. Exit status: 0 when valid, 1 when
the result has at least one error, 2 when validation could not run.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from barrelcheck import __version__
from barrelcheck.application.reporters import (
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from barrelcheck.application.services import ExportValidator
from barrelcheck.domain.exceptions import BarrelCheckError
from barrelcheck.infrastructure.config import load_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from barrelcheck.application.reporters import BaseReporter
    from barrelcheck.domain.model.configuration import ValidatorConfig

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_FAILURE = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="barrelcheck",
        description=(
            "Check that a barrel module's re-exports and the module files next to it agree."
        ),
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root (default: current directory)",
    )
    parser.add_argument(
        "--module-dir",
        type=Path,
        default=None,
        help="Module directory relative to the root (default: src/ai-studio)",
    )
    parser.add_argument(
        "--aggregator",
        default=None,
        help="Barrel file name inside the module directory (default: index.ts)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "rich", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log scan details to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_reporter(fmt: str, config: ValidatorConfig) -> BaseReporter:
    """Reporter for an output format name."""
    match fmt:
        case "json":
            return JSONReporter()
        case "rich":
            return ConsoleReporter()
        case _:
            return PlainTextReporter(title=f"{config.module_dir.name} exports")


def main(argv: Sequence[str] | None = None) -> int:
    """Run validation and map the result to an exit status."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    root = args.root if args.root is not None else Path.cwd()

    try:
        config = load_config(root).with_overrides(
            module_dir=args.module_dir,
            aggregator=args.aggregator,
        )
        validator = ExportValidator(config, reporter=build_reporter(args.format, config))
        result = validator.validate(root)
    except BarrelCheckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK if result.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())

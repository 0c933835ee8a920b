"""Command-line entry point: minify every stylesheet under a directory."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigurationError
from .processor import process_directory


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging() -> None:
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[stdout_handler, stderr_handler],
    )


def parse_args(argv: Optional[Sequence[str]], default_root: Path) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Minify CSS files recursively and write a .min.css and .css.map next to each."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=default_root,
        help="Directory to process (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, default_root: Optional[Path] = None) -> int:
    configure_logging()
    if default_root is None:
        default_root = Path(sys.argv[0]).resolve().parent
    args = parse_args(argv, default_root)

    logging.info("Starting CSS minification in: %s", args.directory)
    try:
        summary = process_directory(args.directory)
    except ConfigurationError as exc:
        logging.error("%s", exc)
        return 1

    if not summary.all_ok:
        failed = summary.failed
        logging.error("%d file(s) failed under %s", len(failed), summary.root)
        for result in failed:
            logging.error("  %s: %s", result.source, result.detail)
        return 1

    logging.info("Minified %d file(s) under %s", len(summary.processed), summary.root)
    logging.info("CSS minification completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Recursive discovery of stylesheets that still need minifying."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Set, Tuple

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".css"
MINIFIED_SUFFIX = ".min.css"


def is_stylesheet(
    name: str,
    source_suffix: str = SOURCE_SUFFIX,
    minified_suffix: str = MINIFIED_SUFFIX,
) -> bool:
    return name.endswith(source_suffix) and not name.endswith(minified_suffix)


def iter_stylesheets(
    root: Path,
    source_suffix: str = SOURCE_SUFFIX,
    minified_suffix: str = MINIFIED_SUFFIX,
    onerror: Optional[Callable[[OSError], None]] = None,
) -> Iterator[Path]:
    """Yield source stylesheets under ``root`` in sorted, depth-first order.

    Symbolic links are never followed, and a directory reached twice through
    the same device/inode pair is only visited once. A directory that cannot
    be stat'ed or listed is skipped; its OSError goes to ``onerror`` when
    given (as with os.walk) and is logged otherwise.

    Raises ConfigurationError immediately (not on first iteration) when
    ``root`` is missing or is not a directory.
    """
    root = Path(root)
    if not root.exists():
        raise ConfigurationError(f"Target directory does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"Target is not a directory: {root}")
    return _walk(root, source_suffix, minified_suffix, set(), onerror)


def _walk(
    directory: Path,
    source_suffix: str,
    minified_suffix: str,
    visited: Set[Tuple[int, int]],
    onerror: Optional[Callable[[OSError], None]],
) -> Iterator[Path]:
    try:
        stat = directory.stat()
        key = (stat.st_dev, stat.st_ino)
        if key in visited:
            logger.debug("Skipping already visited directory %s", directory)
            return
        visited.add(key)

        with os.scandir(directory) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)
    except OSError as exc:
        if onerror is None:
            logger.warning("Skipping unreadable directory %s: %s", directory, exc)
        else:
            onerror(exc)
        return

    for entry in entries:
        path = Path(entry.path)
        if entry.is_symlink():
            logger.debug("Skipping symbolic link %s", path)
            continue
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(path, source_suffix, minified_suffix, visited, onerror)
        elif entry.is_file(follow_symlinks=False) and is_stylesheet(
            entry.name, source_suffix, minified_suffix
        ):
            yield path

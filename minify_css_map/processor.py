"""Minify stylesheets on disk and write their positional maps."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import List, Tuple

from .minifier import minify
from .source_map import build_map, dumps_map
from .walker import MINIFIED_SUFFIX, SOURCE_SUFFIX, iter_stylesheets

logger = logging.getLogger(__name__)

MAP_SUFFIX = ".css.map"


@dataclasses.dataclass(frozen=True)
class StylesheetSource:
    path: Path
    text: str

    @property
    def logical_name(self) -> str:
        return self.path.name


@dataclasses.dataclass
class FileResult:
    source: Path
    ok: bool
    detail: str = ""


@dataclasses.dataclass
class RunSummary:
    root: Path
    results: List[FileResult] = dataclasses.field(default_factory=list)

    @property
    def processed(self) -> List[FileResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> List[FileResult]:
        return [result for result in self.results if not result.ok]

    @property
    def all_ok(self) -> bool:
        return all(result.ok for result in self.results)


class StopOnFailure(Exception):
    """Raised internally when fail_fast is active."""


def output_paths(css_path: Path) -> Tuple[Path, Path]:
    """Return ``(<dir>/<base>.min.css, <dir>/<base>.css.map)`` for ``<dir>/<base>.css``."""
    css_path = Path(css_path)
    name = css_path.name
    base = name[: -len(SOURCE_SUFFIX)] if name.endswith(SOURCE_SUFFIX) else name
    return (
        css_path.with_name(f"{base}{MINIFIED_SUFFIX}"),
        css_path.with_name(f"{base}{MAP_SUFFIX}"),
    )


def read_source(css_path: Path) -> StylesheetSource:
    # newline="" keeps "\r\n" intact so the map records lines verbatim.
    # Undecodable bytes become U+FFFD and a leading BOM is dropped.
    with open(css_path, "r", encoding="utf-8-sig", errors="replace", newline="") as handle:
        return StylesheetSource(path=Path(css_path), text=handle.read())


def _write_text(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def minify_file(css_path: Path) -> None:
    """Write ``<base>.min.css`` and ``<base>.css.map`` next to ``css_path``.

    Existing outputs are overwritten. Read and write errors propagate.
    """
    source = read_source(Path(css_path))
    minified_path, map_path = output_paths(source.path)

    _write_text(minified_path, minify(source.text))
    _write_text(map_path, dumps_map(build_map(source.text, source.logical_name)))

    logger.info("Minified %s -> %s", source.path, minified_path)


def process_directory(root: Path, fail_fast: bool = False) -> RunSummary:
    """Minify every stylesheet under ``root``, one file at a time.

    A file that cannot be read or written, or a directory that cannot be
    listed, is recorded as failed and the walk carries on, unless
    ``fail_fast`` is set.
    """
    root = Path(root)
    summary = RunSummary(root=root)

    def record_failure(path: Path, exc: OSError) -> None:
        summary.results.append(FileResult(source=path, ok=False, detail=str(exc)))
        if fail_fast:
            raise StopOnFailure

    def on_walk_error(exc: OSError) -> None:
        path = Path(exc.filename) if exc.filename else root
        logger.error("Failed to scan %s: %s", path, exc)
        record_failure(path, exc)

    try:
        for css_path in iter_stylesheets(root, onerror=on_walk_error):
            try:
                minify_file(css_path)
            except OSError as exc:
                logger.error("Failed to minify %s: %s", css_path, exc)
                record_failure(css_path, exc)
                continue
            summary.results.append(FileResult(source=css_path, ok=True))
    except StopOnFailure:
        pass
    return summary

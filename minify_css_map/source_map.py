"""Per-line correspondence table written next to each minified stylesheet.

This is not an encoded (VLQ) source map: every original line is listed
verbatim with a ``"<line>:0"`` position, and column shifts introduced by
minification are not tracked.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Dict, List

MAP_VERSION = 3


@dataclasses.dataclass(frozen=True)
class LineEntry:
    original: str
    generated: str


@dataclasses.dataclass(frozen=True)
class PositionalMap:
    file: str
    sources: List[str]
    mappings: List[LineEntry]
    version: int = MAP_VERSION

    def to_dict(self) -> Dict:
        return {
            "version": self.version,
            "file": self.file,
            "sources": list(self.sources),
            "mappings": [dataclasses.asdict(entry) for entry in self.mappings],
        }


def build_map(original_text: str, logical_name: str) -> PositionalMap:
    """Map each ``\\n``-separated line of ``original_text`` to its line number.

    A trailing newline produces a final empty entry, and an empty input
    still yields one entry.
    """
    mappings = [
        LineEntry(original=line, generated=f"{index}:0")
        for index, line in enumerate(original_text.split("\n"), start=1)
    ]
    return PositionalMap(file=logical_name, sources=[logical_name], mappings=mappings)


def dumps_map(positional_map: PositionalMap) -> str:
    return json.dumps(positional_map.to_dict(), ensure_ascii=False, indent=2)

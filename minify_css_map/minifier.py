"""Regex-based stylesheet minification."""

from __future__ import annotations

import re


# An unterminated comment runs to the end of the input.
COMMENT_RE = re.compile(r"/\*[\s\S]*?(?:\*/|\Z)")
WHITESPACE_RE = re.compile(r"\s+")
PUNCTUATION_RE = re.compile(r"\s*([{}:;])\s*")
TRAILING_SEMICOLON_RE = re.compile(r";+}")


def strip_comments(source: str) -> str:
    # Removing one comment can splice a new opener together, e.g. "//**/*x*/".
    stripped, count = COMMENT_RE.subn("", source)
    while count:
        stripped, count = COMMENT_RE.subn("", stripped)
    return stripped


def minify(source: str) -> str:
    """Compact stylesheet text by dropping comments and redundant whitespace.

    The text is never parsed: comment markers inside quoted values are
    stripped like any other comment.
    """
    stripped = strip_comments(source)
    condensed = WHITESPACE_RE.sub(" ", stripped)
    tightened = PUNCTUATION_RE.sub(r"\1", condensed)
    return TRAILING_SEMICOLON_RE.sub("}", tightened).strip()

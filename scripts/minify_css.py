#!/usr/bin/env python3
"""
Minify every stylesheet under a directory, writing <base>.min.css and
<base>.css.map next to each source file.

Usage:
    python3 scripts/minify_css.py [directory]

Defaults to the directory containing this script when no directory is given.
"""

from __future__ import annotations

import sys
from pathlib import Path

from minify_css_map.cli import main

SCRIPT_DIR = Path(__file__).resolve().parent


if __name__ == "__main__":
    sys.exit(main(default_root=SCRIPT_DIR))

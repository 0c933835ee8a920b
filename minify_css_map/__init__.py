"""Minify stylesheets in place and write a per-line positional map for each."""

from .errors import ConfigurationError, MinifyError
from .minifier import minify
from .processor import FileResult, RunSummary, minify_file, output_paths, process_directory
from .source_map import LineEntry, PositionalMap, build_map, dumps_map
from .walker import iter_stylesheets

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "FileResult",
    "LineEntry",
    "MinifyError",
    "PositionalMap",
    "RunSummary",
    "build_map",
    "dumps_map",
    "iter_stylesheets",
    "minify",
    "minify_file",
    "output_paths",
    "process_directory",
]

from __future__ import annotations


class MinifyError(Exception):
    """Base class for errors raised by minify_css_map."""


class ConfigurationError(MinifyError):
    """Raised when the target directory is missing or is not a directory."""

"""Backtrack: Typst version identity across semantic, dated and post releases."""

from .models import DatedVersion, PostVersion, SemanticVersion, Version, dated, post, semantic

__version__ = "0.1.0"

__all__ = [
    "DatedVersion",
    "PostVersion",
    "SemanticVersion",
    "Version",
    "__version__",
    "dated",
    "post",
    "semantic",
]

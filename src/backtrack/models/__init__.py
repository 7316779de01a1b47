"""Pydantic version models for backtrack.

This package defines the one value type backtrack is built around: a Typst
version, in one of three variants:
- Semantic releases (SemanticVersion)
- Dated beta builds (DatedVersion)
- Development snapshots after a release (PostVersion)

All variants are frozen Pydantic models that compare against each other in
release order.

Example:
    >>> from backtrack.models import semantic, dated
    >>> dated(2023, 2, 25) < semantic(0, 3, 0)
    True
    >>> semantic(0, 3, 0).observable[1]
    3
"""

from .version import (
    SEMANTIC_ERA_START,
    DatedVersion,
    OrderKey,
    PostVersion,
    SemanticVersion,
    Target,
    Version,
    dated,
    flatten_target,
    post,
    semantic,
    version_from_dict,
)

__all__ = [
    "SEMANTIC_ERA_START",
    "DatedVersion",
    "OrderKey",
    "PostVersion",
    "SemanticVersion",
    "Target",
    "Version",
    "dated",
    "flatten_target",
    "post",
    "semantic",
    "version_from_dict",
]

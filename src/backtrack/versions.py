"""Catalog of Typst milestone versions.

Each milestone is a module-level constant created once at import. Names follow
the release tags: ``v2023_01_30`` is the ``v2023-01-30`` beta build and
``v0_8_0`` is the ``v0.8.0`` release. Anything built after the last catalogued
release is described with ``post_v0_8_0``.

Example:
    >>> from backtrack import versions
    >>> current = versions.post_v0_8_0((9, 0))
    >>> current >= versions.v0_5_0
    True
"""

import logging
from types import MappingProxyType

from .errors import UnknownMilestoneError
from .models import PostVersion, Target, Version, dated, post, semantic

logger = logging.getLogger(__name__)

# Public beta, versioned by release date
v2023_01_30 = dated(2023, 1, 30)
v2023_02_02 = dated(2023, 2, 2)
v2023_02_12 = dated(2023, 2, 12)
v2023_02_15 = dated(2023, 2, 15)
v2023_02_25 = dated(2023, 2, 25)
v2023_03_21 = dated(2023, 3, 21)
v2023_03_28 = dated(2023, 3, 28)

# Semantic releases
v0_1_0 = semantic(0, 1, 0)
v0_2_0 = semantic(0, 2, 0)
v0_3_0 = semantic(0, 3, 0)
v0_4_0 = semantic(0, 4, 0)
v0_5_0 = semantic(0, 5, 0)
v0_6_0 = semantic(0, 6, 0)
v0_7_0 = semantic(0, 7, 0)
v0_8_0 = semantic(0, 8, 0)


def post_v0_8_0(target: Target, revision: int = 0) -> PostVersion:
    """Development snapshot taken after v0.8.0.

    Args:
        target: Release being worked toward, e.g. ``(9, 0)`` or ``(0, 9, 0)``.
        revision: Snapshot counter for the same target.
    """
    return post(v0_8_0, target, revision)


MILESTONES: MappingProxyType[str, Version] = MappingProxyType(
    {
        f"v{version.displayable}": version
        for version in (
            v2023_01_30,
            v2023_02_02,
            v2023_02_12,
            v2023_02_15,
            v2023_02_25,
            v2023_03_21,
            v2023_03_28,
            v0_1_0,
            v0_2_0,
            v0_3_0,
            v0_4_0,
            v0_5_0,
            v0_6_0,
            v0_7_0,
            v0_8_0,
        )
    }
)


def get_milestone(name: str) -> Version:
    """Look up a milestone by its tag name (e.g. ``"v0.8.0"``).

    Raises:
        UnknownMilestoneError: If the name is not catalogued.
    """
    try:
        return MILESTONES[name]
    except KeyError:
        logger.debug(f"Milestone lookup missed: {name}")
        raise UnknownMilestoneError(name, list(MILESTONES)) from None


def milestones_before(version: Version) -> list[tuple[str, Version]]:
    """Milestones strictly older than ``version``, oldest first."""
    return [(name, milestone) for name, milestone in MILESTONES.items() if milestone < version]


def milestones_since(version: Version) -> list[tuple[str, Version]]:
    """Milestones at or after ``version``, oldest first."""
    return [(name, milestone) for name, milestone in MILESTONES.items() if milestone >= version]


def latest_milestone_at_or_below(version: Version) -> tuple[str, Version] | None:
    """Newest milestone that ``version`` has reached, or None if it predates them all."""
    reached = [(name, milestone) for name, milestone in MILESTONES.items() if milestone <= version]
    return reached[-1] if reached else None

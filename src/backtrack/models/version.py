"""Version models for the Typst release timeline.

Typst has been versioned three different ways over its history:

- dated builds during the public beta (``2023-01-30`` to ``2023-03-28``)
- semantic releases from ``0.1.0`` onwards
- development snapshots taken after a release ("post" versions)

Every variant derives the same kind of order key, so versions from different
eras compare against each other by where they sit on the timeline.

Example:
    >>> from backtrack.models import dated, post, semantic
    >>> dated(2023, 3, 28) < semantic(0, 1, 0)
    True
    >>> semantic(0, 8, 0) < post(semantic(0, 8, 0), (9, 0), 2) < semantic(0, 9, 0)
    True
"""

import datetime
from collections.abc import Mapping
from functools import cached_property, total_ordering
from typing import Annotated, Any, Literal, Self, TypeAlias, assert_never

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

OrderKey: TypeAlias = tuple[int, int, int, int, int, int, int, int, int]
Triple: TypeAlias = tuple[int, int, int]
Target: TypeAlias = tuple[int, int] | tuple[int, int, int] | tuple[tuple[int, ...], int]

# First semantic release after the dated beta builds.
SEMANTIC_ERA_START: Triple = (0, 1, 0)

ERA_PRE_DATED = 0
ERA_DATED = 1
ERA_SEMANTIC = 2


@total_ordering
class _VersionBase(BaseModel):
    """Shared behavior of every version variant.

    Comparison, equality and hashing all go through ``cmpable``; two versions
    of different variants are never equal.
    """

    model_config = ConfigDict(frozen=True)

    @cached_property
    def cmpable(self) -> OrderKey:
        """Key whose natural tuple order is the release order."""
        return order_key(self)  # type: ignore[arg-type]

    @cached_property
    def displayable(self) -> str:
        """Human-readable form, for presentation only."""
        return display(self)  # type: ignore[arg-type]

    @cached_property
    def observable(self) -> tuple[int, ...]:
        """Numeric components for structural checks (index 1 is the minor number)."""
        return observe(self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.displayable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _VersionBase):
            return NotImplemented
        return self.cmpable == other.cmpable

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _VersionBase):
            return NotImplemented
        return self.cmpable < other.cmpable

    def __hash__(self) -> int:
        return hash(self.cmpable)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy through validation so derived values follow the updated fields."""
        return self.model_validate({**self.model_dump(), **(update or {})})


class SemanticVersion(_VersionBase):
    """Classic ``major.minor.patch`` release.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
    """

    kind: Literal["semantic"] = "semantic"
    major: int = Field(ge=0, strict=True, description="Major version number")
    minor: int = Field(ge=0, strict=True, description="Minor version number")
    patch: int = Field(ge=0, strict=True, description="Patch version number")

    @property
    def triple(self) -> Triple:
        return (self.major, self.minor, self.patch)


class DatedVersion(_VersionBase):
    """Beta build identified by the date it shipped.

    Attributes:
        year: Release year.
        month: Release month (1-12).
        day: Release day of month.
    """

    kind: Literal["dated"] = "dated"
    year: int = Field(strict=True, description="Release year")
    month: int = Field(strict=True, description="Release month")
    day: int = Field(strict=True, description="Release day of month")

    @model_validator(mode="after")
    def check_calendar(self) -> "DatedVersion":
        datetime.date(self.year, self.month, self.day)
        return self

    @property
    def date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)


class PostVersion(_VersionBase):
    """Development snapshot built after ``base`` and working toward ``target``.

    The target may be given as a full triple, as a ``(minor, patch)`` pair
    that inherits the base's major number, or nested as
    ``((major, minor), patch)``. It is flattened depth first and stored as a
    full triple, so every spelling of the same release is the same target.

    Attributes:
        base: Release the snapshot was taken after.
        target: Canonical ``(major, minor, patch)`` the snapshot is heading to.
        revision: Counter distinguishing snapshots toward the same target.
    """

    kind: Literal["post"] = "post"
    base: SemanticVersion = Field(description="Release the snapshot follows")
    target: Triple = Field(description="Release the snapshot is working toward")
    revision: int = Field(default=0, ge=0, strict=True, description="Snapshot counter")

    @model_validator(mode="before")
    @classmethod
    def canonical_target(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "target" not in data:
            return data
        data = dict(data)
        flat = flatten_target(data["target"])
        if len(flat) == 2:
            base = data.get("base")
            if isinstance(base, SemanticVersion):
                major = base.major
            elif isinstance(base, dict) and "major" in base:
                major = base["major"]
            else:
                # Let field validation report the bad base.
                return data
            flat = (major, *flat)
        data["target"] = flat
        return data

    @field_validator("target")
    @classmethod
    def non_negative_target(cls, value: Triple) -> Triple:
        if any(part < 0 for part in value):
            raise ValueError(f"target components must be non-negative, got {value}")
        return value

    @model_validator(mode="after")
    def target_after_base(self) -> "PostVersion":
        if self.target <= self.base.triple:
            raise ValueError(
                f"target {_dotted(self.target)} must be later than base {self.base.displayable}"
            )
        return self


Version = Annotated[SemanticVersion | DatedVersion | PostVersion, Field(discriminator="kind")]

_version_adapter: TypeAdapter[Version] = TypeAdapter(Version)


def flatten_target(target: Any) -> tuple[int, ...]:
    """Flatten a nested target depth first.

    Raises:
        ValueError: If the target is not built from ints, or flattens to
            anything other than two or three components.
    """
    flat = _flatten(target)
    if len(flat) not in (2, 3):
        raise ValueError(f"target must flatten to 2 or 3 components, got {target!r}")
    return flat


def _flatten(target: Any) -> tuple[int, ...]:
    if isinstance(target, bool) or not isinstance(target, (int, tuple, list)):
        raise ValueError(f"target must be built from integers, got {target!r}")
    if isinstance(target, int):
        return (target,)
    flat: tuple[int, ...] = ()
    for part in target:
        flat += _flatten(part)
    return flat


def order_key(version: SemanticVersion | DatedVersion | PostVersion) -> OrderKey:
    """Derive the order key of a version.

    Layout: ``(era, a, b, c, post, t_major, t_minor, t_patch, revision)``.
    A post version shares its base's leading components and ranks directly
    after it, ahead of any later release.
    """
    match version:
        case SemanticVersion(major=major, minor=minor, patch=patch):
            era = ERA_SEMANTIC if version.triple >= SEMANTIC_ERA_START else ERA_PRE_DATED
            return (era, major, minor, patch, 0, 0, 0, 0, 0)
        case DatedVersion(year=year, month=month, day=day):
            return (ERA_DATED, year, month, day, 0, 0, 0, 0, 0)
        case PostVersion(base=base, target=target, revision=revision):
            era, major, minor, patch = base.cmpable[:4]
            return (era, major, minor, patch, 1, *target, revision)
        case _:
            assert_never(version)


def display(version: SemanticVersion | DatedVersion | PostVersion) -> str:
    match version:
        case SemanticVersion():
            return _dotted(version.triple)
        case DatedVersion():
            return f"{version.year:04d}-{version.month:02d}-{version.day:02d}"
        case PostVersion():
            return (
                f"post-v{version.base.displayable} nightly {version.revision}"
                f" toward {_dotted(version.target)}"
            )
        case _:
            assert_never(version)


def observe(version: SemanticVersion | DatedVersion | PostVersion) -> tuple[int, ...]:
    match version:
        case SemanticVersion():
            return version.triple
        case DatedVersion():
            return (version.year, version.month, version.day)
        case PostVersion():
            return (*version.target, version.revision)
        case _:
            assert_never(version)


def _dotted(triple: tuple[int, ...]) -> str:
    return ".".join(str(part) for part in triple)


def semantic(major: int, minor: int, patch: int) -> SemanticVersion:
    """Create a semantic release version."""
    return SemanticVersion(major=major, minor=minor, patch=patch)


def dated(year: int, month: int, day: int) -> DatedVersion:
    """Create a dated beta version. The date must exist on the calendar."""
    return DatedVersion(year=year, month=month, day=day)


def post(base: SemanticVersion, target: Target, revision: int = 0) -> PostVersion:
    """Create a development snapshot taken after ``base``.

    Args:
        base: Semantic release the snapshot was built after.
        target: Release being worked toward, as ``(minor, patch)``,
            ``(major, minor, patch)`` or ``((major, minor), patch)``.
        revision: Snapshot counter for the same target.

    Raises:
        pydantic.ValidationError: If ``base`` is not a semantic version or the
            target does not come after it.
    """
    return PostVersion(base=base, target=target, revision=revision)  # type: ignore[arg-type]


def version_from_dict(data: dict[str, Any]) -> SemanticVersion | DatedVersion | PostVersion:
    """Build a version from its ``kind``-tagged mapping (e.g. a config table)."""
    return _version_adapter.validate_python(data)

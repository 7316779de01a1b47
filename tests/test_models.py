"""Tests for backtrack version models."""

import pytest
from pydantic import ValidationError

from backtrack.models import (
    DatedVersion,
    PostVersion,
    SemanticVersion,
    dated,
    flatten_target,
    post,
    semantic,
    version_from_dict,
)


class TestSemanticVersion:
    """Tests for semantic releases."""

    def test_creation(self) -> None:
        version = semantic(0, 8, 0)
        assert isinstance(version, SemanticVersion)
        assert version.kind == "semantic"
        assert version.triple == (0, 8, 0)

    def test_displayable(self) -> None:
        assert semantic(0, 8, 0).displayable == "0.8.0"
        assert str(semantic(1, 12, 3)) == "1.12.3"

    def test_observable_exposes_minor_at_index_one(self) -> None:
        assert semantic(0, 7, 2).observable == (0, 7, 2)
        assert semantic(0, 7, 2).observable[1] == 7

    def test_negative_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            semantic(0, -1, 0)

    @pytest.mark.parametrize(
        ("major", "minor", "patch"), [(True, False, 0), (0, 1.0, 0), (0, "1", 0)]
    )
    def test_non_int_component_rejected(
        self, major: object, minor: object, patch: object
    ) -> None:
        with pytest.raises(ValidationError):
            semantic(major, minor, patch)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        version = semantic(0, 1, 0)
        with pytest.raises(ValidationError):
            version.minor = 2  # type: ignore[misc]


class TestDatedVersion:
    """Tests for dated beta builds."""

    def test_creation(self) -> None:
        version = dated(2023, 1, 30)
        assert isinstance(version, DatedVersion)
        assert version.date.isoformat() == "2023-01-30"

    def test_displayable_is_zero_padded(self) -> None:
        assert dated(2023, 2, 2).displayable == "2023-02-02"

    def test_observable(self) -> None:
        assert dated(2023, 3, 21).observable == (2023, 3, 21)

    @pytest.mark.parametrize(("year", "month", "day"), [(2023, 2, 30), (2023, 13, 1), (2023, 0, 5)])
    def test_invalid_date_rejected(self, year: int, month: int, day: int) -> None:
        with pytest.raises(ValidationError):
            dated(year, month, day)

    def test_bool_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            dated(2023, True, 1)


class TestPostVersion:
    """Tests for development snapshots."""

    def test_full_triple_target(self) -> None:
        version = post(semantic(0, 8, 0), (0, 9, 0), 3)
        assert isinstance(version, PostVersion)
        assert version.target == (0, 9, 0)
        assert version.revision == 3

    def test_pair_target_inherits_base_major(self) -> None:
        version = post(semantic(1, 2, 0), (3, 1))
        assert version.target == (1, 3, 1)

    def test_nested_target_matches_flat_target(self) -> None:
        nested = post(semantic(1, 1, 0), ((1, 2), 3), 5)
        flat = post(semantic(1, 1, 0), (1, 2, 3), 5)
        assert nested.target == (1, 2, 3)
        assert nested == flat
        assert nested.cmpable == flat.cmpable

    def test_revision_defaults_to_zero(self) -> None:
        assert post(semantic(0, 8, 0), (9, 0)).revision == 0

    def test_displayable(self) -> None:
        version = post(semantic(0, 8, 0), (9, 0), 3)
        assert version.displayable == "post-v0.8.0 nightly 3 toward 0.9.0"

    def test_observable_is_target_and_revision(self) -> None:
        version = post(semantic(0, 8, 0), (9, 1), 2)
        assert version.observable == (0, 9, 1, 2)
        assert version.observable[1] == 9

    def test_dated_base_rejected(self) -> None:
        with pytest.raises(ValidationError):
            post(dated(2023, 3, 28), (0, 1, 0))  # type: ignore[arg-type]

    def test_target_not_after_base_rejected(self) -> None:
        with pytest.raises(ValidationError):
            post(semantic(0, 8, 0), (8, 0))
        with pytest.raises(ValidationError):
            post(semantic(0, 8, 0), (0, 7, 5))

    @pytest.mark.parametrize("target", [(1,), (0, 1, 2, 3), ((0, 1), (2, 3)), ("0", 9)])
    def test_malformed_target_rejected(self, target: object) -> None:
        with pytest.raises(ValidationError):
            post(semantic(0, 0, 1), target)  # type: ignore[arg-type]

    def test_bool_revision_rejected(self) -> None:
        with pytest.raises(ValidationError):
            post(semantic(0, 8, 0), (9, 0), True)

    def test_negative_revision_rejected(self) -> None:
        with pytest.raises(ValidationError):
            post(semantic(0, 8, 0), (9, 0), -1)


class TestFlattenTarget:
    """Tests for target flattening."""

    def test_flat_pair(self) -> None:
        assert flatten_target((9, 0)) == (9, 0)

    def test_nested_pair(self) -> None:
        assert flatten_target(((0, 9), 1)) == (0, 9, 1)

    def test_accepts_lists(self) -> None:
        assert flatten_target([[0, 9], 1]) == (0, 9, 1)

    def test_rejects_bool(self) -> None:
        with pytest.raises(ValueError):
            flatten_target((True, 1))


class TestDerivedValues:
    """Derived values are stable for an instance."""

    def test_repeated_calls_return_same_values(self) -> None:
        version = post(semantic(0, 8, 0), (9, 0), 1)
        assert version.displayable == version.displayable
        assert version.observable == version.observable
        assert version.cmpable is version.cmpable

    def test_equal_versions_hash_equal(self) -> None:
        assert hash(semantic(0, 3, 0)) == hash(semantic(0, 3, 0))
        assert len({semantic(0, 3, 0), semantic(0, 3, 0), dated(2023, 1, 30)}) == 2

    def test_copy_with_update_recomputes_order_key(self) -> None:
        version = semantic(0, 1, 0)
        assert version.cmpable[1:4] == (0, 1, 0)
        copied = version.model_copy(update={"minor": 9})
        assert copied == semantic(0, 9, 0)
        assert copied.cmpable == semantic(0, 9, 0).cmpable
        assert copied > version

    def test_copy_of_post_recanonicalizes_target(self) -> None:
        version = post(semantic(0, 8, 0), (9, 0), 1)
        assert version.displayable == "post-v0.8.0 nightly 1 toward 0.9.0"
        copied = version.model_copy(update={"target": (10, 0)})
        assert copied.target == (0, 10, 0)
        assert copied.displayable == "post-v0.8.0 nightly 1 toward 0.10.0"

    def test_copy_with_invalid_update_rejected(self) -> None:
        with pytest.raises(ValidationError):
            dated(2023, 2, 25).model_copy(update={"day": 30})

    def test_not_equal_to_other_types(self) -> None:
        assert semantic(0, 1, 0) != "0.1.0"
        assert semantic(0, 1, 0) != (0, 1, 0)

    def test_ordering_against_other_types_raises(self) -> None:
        with pytest.raises(TypeError):
            semantic(0, 1, 0) < (0, 2, 0)  # noqa: B015


class TestVersionFromDict:
    """Tests for building versions from tagged mappings."""

    def test_semantic(self) -> None:
        version = version_from_dict({"kind": "semantic", "major": 0, "minor": 4, "patch": 0})
        assert version == semantic(0, 4, 0)

    def test_dated(self) -> None:
        version = version_from_dict({"kind": "dated", "year": 2023, "month": 2, "day": 25})
        assert version == dated(2023, 2, 25)

    def test_post_with_nested_base(self) -> None:
        version = version_from_dict(
            {
                "kind": "post",
                "base": {"major": 0, "minor": 8, "patch": 0},
                "target": [9, 0],
                "revision": 2,
            }
        )
        assert version == post(semantic(0, 8, 0), (9, 0), 2)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            version_from_dict({"kind": "calver", "major": 1})

"""Unit tests for attribute conditions."""

from __future__ import annotations

import pytest

from coldmon_auth.kernel.security import Eq, In, Ne, NotIn, validate_subject
from coldmon_auth.kernel.security.conditions import conditions_hold, normalize_conditions


class TestPredicates:
    def test_eq(self) -> None:
        assert Eq("T1").test("T1") is True
        assert Eq("T1").test("T2") is False

    def test_ne(self) -> None:
        assert Ne("u1").test("u2") is True
        assert Ne("u1").test("u1") is False

    def test_in(self) -> None:
        cond = In(["T1", "T2"])
        assert cond.test("T2") is True
        assert cond.test("T3") is False
        assert cond.values == frozenset({"T1", "T2"})

    def test_not_in(self) -> None:
        cond = NotIn(("T1",))
        assert cond.test("T2") is True
        assert cond.test("T1") is False

    def test_predicates_are_hashable_values(self) -> None:
        assert len({Eq("a"), Eq("a"), In(["x", "y"]), In(["y", "x"])}) == 2


class TestNormalize:
    def test_plain_value_means_eq(self) -> None:
        assert normalize_conditions({"tenant_id": "T1"}) == (("tenant_id", Eq("T1")),)

    def test_predicates_kept(self) -> None:
        assert normalize_conditions({"owner_id": Ne("u1")}) == (("owner_id", Ne("u1")),)

    def test_sorted_by_attribute(self) -> None:
        first = normalize_conditions({"tenant_id": "T1", "owner_id": "u1"})
        second = normalize_conditions({"owner_id": "u1", "tenant_id": "T1"})
        assert first == second
        assert [attr for attr, _ in first] == ["owner_id", "tenant_id"]

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            normalize_conditions({})

    def test_empty_attribute_rejected(self) -> None:
        with pytest.raises(ValueError):
            normalize_conditions({"": "T1"})

    def test_unhashable_plain_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="In"):
            normalize_conditions({"email": ["a@x", "b@x"]})


class TestConditionsHold:
    def test_conjunction(self) -> None:
        subject = validate_subject("Invite", {"tenant_id": "T1", "owner_id": "u1"})
        conditions = normalize_conditions({"tenant_id": "T1", "owner_id": Ne("u2")})
        assert conditions_hold(conditions, subject) is True

    def test_one_failing_condition_fails_all(self) -> None:
        subject = validate_subject("Invite", {"tenant_id": "T1", "owner_id": "u1"})
        conditions = normalize_conditions({"tenant_id": "T1", "owner_id": "u2"})
        assert conditions_hold(conditions, subject) is False

    def test_attribute_not_carried_fails(self) -> None:
        subject = validate_subject("Instrument", {"tenant_id": "T1"})
        conditions = normalize_conditions({"shift": "night"})
        assert conditions_hold(conditions, subject) is False

    def test_unset_optional_attribute_compares_as_none(self) -> None:
        subject = validate_subject("Instrument", {"tenant_id": "T1"})
        assert conditions_hold(normalize_conditions({"owner_id": "u1"}), subject) is False
        assert conditions_hold(normalize_conditions({"owner_id": Ne("u1")}), subject) is True

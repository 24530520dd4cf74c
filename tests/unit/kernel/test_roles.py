"""Unit tests for the role table and Principal."""

from __future__ import annotations

import uuid

import pytest

from coldmon_auth.kernel.errors import UnknownRoleError, ValidationError
from coldmon_auth.kernel.security import Principal, Role, build_ability, parse_role, validate_subject


class TestRole:
    def test_table(self) -> None:
        assert Role.values() == ("SUPER_ADMIN", "ADMIN", "OPERATOR", "OBSERVER", "EDITOR")

    def test_str_enum_compares_to_value(self) -> None:
        assert Role.ADMIN == "ADMIN"

    @pytest.mark.parametrize("value", ["ADMIN", Role.ADMIN])
    def test_parse_known(self, value: object) -> None:
        assert parse_role(value) is Role.ADMIN

    @pytest.mark.parametrize("value", ["GUEST", "admin", "", None, 3])
    def test_parse_unknown_raises(self, value: object) -> None:
        with pytest.raises(UnknownRoleError):
            parse_role(value)


class TestPrincipal:
    def test_role_string_is_normalised(self) -> None:
        p = Principal(id="u1", tenant_id="T1", role="EDITOR")  # type: ignore[arg-type]
        assert p.role is Role.EDITOR

    def test_unknown_role_rejected(self) -> None:
        with pytest.raises(UnknownRoleError):
            Principal(id="u1", tenant_id="T1", role="GUEST")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        p = Principal(id="u1", tenant_id="T1", role=Role.ADMIN)
        with pytest.raises((AttributeError, TypeError)):
            p.tenant_id = "T2"  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["id", "tenant_id"])
    def test_empty_identifiers_rejected(self, field: str) -> None:
        kwargs = {"id": "u1", "tenant_id": "T1", "role": Role.ADMIN, field: ""}
        with pytest.raises(ValidationError):
            Principal(**kwargs)  # type: ignore[arg-type]

    def test_padded_identifiers_are_stripped(self) -> None:
        p = Principal(id=" u1 ", tenant_id="T1 ", role=Role.ADMIN)
        assert (p.id, p.tenant_id) == ("u1", "T1")

    def test_uuid_identifiers_become_text(self) -> None:
        user_id, tenant_id = uuid.uuid4(), uuid.uuid4()
        p = Principal(id=user_id, tenant_id=tenant_id, role=Role.ADMIN)  # type: ignore[arg-type]
        assert p.id == str(user_id)
        assert p.tenant_id == str(tenant_id)

    @pytest.mark.parametrize("field", ["id", "tenant_id"])
    def test_blank_identifiers_rejected(self, field: str) -> None:
        kwargs = {"id": "u1", "tenant_id": "T1", "role": Role.ADMIN, field: "   "}
        with pytest.raises(ValidationError):
            Principal(**kwargs)  # type: ignore[arg-type]

    def test_non_string_identifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Principal(id="u1", tenant_id=42, role=Role.ADMIN)  # type: ignore[arg-type]

    def test_padded_tenant_matches_subject(self) -> None:
        ability = build_ability(Principal(id="u1", tenant_id="T1 ", role=Role.OPERATOR))
        assert ability.can("update", validate_subject("InstrumentData", {"tenant_id": " T1"}))

    def test_has_role(self) -> None:
        p = Principal(id="u1", tenant_id="T1", role=Role.OPERATOR)
        assert p.has_role("OPERATOR") is True
        assert p.has_role(Role.ADMIN) is False

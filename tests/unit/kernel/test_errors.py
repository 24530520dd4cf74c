"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from coldmon_auth.config.validation import ConfigError
from coldmon_auth.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigurationError,
    DomainError,
    ForbiddenError,
    ShapeError,
    UnauthorizedError,
    UnknownRoleError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (DomainError, BaseError),
            (ValidationError, DomainError),
            (ShapeError, ValidationError),
            (ApplicationError, BaseError),
            (UnauthorizedError, ApplicationError),
            (ForbiddenError, UnauthorizedError),
            (ConfigurationError, BaseError),
            (UnknownRoleError, ConfigurationError),
            (ConfigError, ConfigurationError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)

    def test_unknown_role_is_not_an_authorization_failure(self) -> None:
        assert not issubclass(UnknownRoleError, UnauthorizedError)


class TestShapeError:
    def test_kind_and_errors_in_dict(self) -> None:
        err = ShapeError("Instrument", errors=[{"field": "tenant_id", "message": "Field required"}])
        d = err.to_dict()
        assert d["code"] == "subject_shape_invalid"
        assert d["kind"] == "Instrument"
        assert d["errors"][0]["field"] == "tenant_id"

    def test_default_message(self) -> None:
        assert ShapeError("Invite").message == "Invalid Invite subject"


class TestForbiddenError:
    def test_action_and_subject_in_detail(self) -> None:
        err = ForbiddenError(action="delete", subject="Instrument:1")
        assert err.code == "forbidden"
        assert err.detail == {"action": "delete", "subject": "Instrument:1"}

    def test_caught_as_unauthorized(self) -> None:
        with pytest.raises(UnauthorizedError):
            raise ForbiddenError()


class TestUnknownRoleError:
    def test_message_names_role(self) -> None:
        err = UnknownRoleError("GUEST")
        assert err.role == "GUEST"
        assert "GUEST" in err.message
        assert err.detail["role"] == "GUEST"
        assert err.code == "unknown_role"

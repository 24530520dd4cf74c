"""Kernel security – Subject schema registry.

Every resource checked against an :class:`~coldmon_auth.kernel.security.ability.Ability`
is reduced to a small, frozen *subject instance*: its kind tag, the tenant it
belongs to and the few attributes rule conditions may look at.  Callers that
hold a storage-layer object (ORM row, dataclass, dict) coerce it through
:meth:`SubjectRegistry.validate` first::

    row = await instruments.get(instrument_id)
    subject = validate_subject("Instrument", row)
    ability.throw_unless_can("delete", subject)

A missing or empty ``tenant_id`` raises :class:`ShapeError` right there,
before any rule is evaluated.
"""
from __future__ import annotations

import uuid
from typing import Annotated, Any, Final, Iterable, Literal

import pydantic
from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints

from coldmon_auth.kernel.errors import ShapeError
from coldmon_auth.kernel.security.roles import Role

ALL: Final = "all"


def _stringify_uuid(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


ScopeId = Annotated[
    str,
    BeforeValidator(_stringify_uuid),
    StringConstraints(strip_whitespace=True, min_length=1),
]

_TENANT_ALIASES = ("tenant_id", "tenantId", "organization_id", "organizationId")
_OWNER_ALIASES = ("owner_id", "ownerId")


# ---------------------------------------------------------------------------
# Subject instance models
# ---------------------------------------------------------------------------


class SubjectInstance(BaseModel):
    """Minimal shape shared by every subject instance."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        from_attributes=True,
    )

    kind: str
    tenant_id: ScopeId = Field(validation_alias=AliasChoices(*_TENANT_ALIASES))
    id: ScopeId | None = None
    owner_id: ScopeId | None = Field(
        default=None, validation_alias=AliasChoices(*_OWNER_ALIASES)
    )

    def describe(self) -> str:
        """Short label used in error details and audit entries."""
        return f"{self.kind}:{self.id}" if self.id is not None else self.kind


class Instrument(SubjectInstance):
    kind: Literal["Instrument"] = "Instrument"


class InstrumentData(SubjectInstance):
    kind: Literal["InstrumentData"] = "InstrumentData"
    instrument_id: ScopeId | None = Field(
        default=None, validation_alias=AliasChoices("instrument_id", "instrumentId")
    )


class Organization(SubjectInstance):
    """An organization is its own tenant, so its ``id`` scopes it too."""

    kind: Literal["Organization"] = "Organization"
    tenant_id: ScopeId = Field(validation_alias=AliasChoices(*_TENANT_ALIASES, "id"))


class User(SubjectInstance):
    kind: Literal["User"] = "User"
    role: Role | None = None


class Invite(SubjectInstance):
    kind: Literal["Invite"] = "Invite"
    owner_id: ScopeId | None = Field(
        default=None,
        validation_alias=AliasChoices(*_OWNER_ALIASES, "author_id", "authorId"),
    )
    email: str | None = None
    role: Role | None = None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def _kind_of(model: type[SubjectInstance]) -> str:
    default = model.model_fields["kind"].default
    if not isinstance(default, str):
        raise ValueError(f"{model.__name__} must declare a default kind tag")
    return default


def _field_errors(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors(include_url=False)
    ]


class SubjectRegistry:
    """Maps subject kinds to the model their instances must conform to."""

    def __init__(self, models: Iterable[type[SubjectInstance]] = ()) -> None:
        self._models: dict[str, type[SubjectInstance]] = {}
        for model in models:
            self.register(model)

    def register(self, model: type[SubjectInstance]) -> None:
        """Add *model* under its kind tag.  Kinds cannot be redefined."""
        kind = _kind_of(model)
        if kind == ALL:
            raise ValueError(f"{ALL!r} is reserved and cannot be registered as a kind")
        if kind in self._models:
            raise ValueError(f"Subject kind {kind!r} is already registered")
        self._models[kind] = model

    def kinds(self) -> frozenset[str]:
        return frozenset(self._models)

    def __contains__(self, kind: object) -> bool:
        return kind in self._models

    def model_for(self, kind: str) -> type[SubjectInstance]:
        try:
            return self._models[kind]
        except KeyError:
            raise ShapeError(kind, f"Unknown subject kind {kind!r}") from None

    def validate(self, kind: str, candidate: Any) -> SubjectInstance:
        """Coerce *candidate* into the subject instance for *kind*.

        *candidate* may be a mapping or any attribute-bearing object.  Raises
        :class:`ShapeError` when the kind is unknown, when the candidate is
        tagged with another kind, or when a required attribute is missing or
        mistyped.
        """
        model = self.model_for(kind)
        if isinstance(candidate, SubjectInstance):
            if isinstance(candidate, model):
                return candidate
            raise ShapeError(kind, f"Expected a {kind} subject, got {candidate.kind}")
        try:
            return model.model_validate(candidate)
        except pydantic.ValidationError as exc:
            errors = _field_errors(exc)
            summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
            raise ShapeError(
                kind,
                f"Invalid {kind} subject: {summary}",
                errors=errors,
                cause=exc,
            ) from exc


subject_registry = SubjectRegistry([Instrument, InstrumentData, Organization, User, Invite])

SUBJECT_KINDS: Final[frozenset[str]] = subject_registry.kinds()


def validate_subject(kind: str, candidate: Any) -> SubjectInstance:
    """Validate *candidate* against the default :data:`subject_registry`."""
    return subject_registry.validate(kind, candidate)


__all__ = [
    "ALL",
    "Instrument",
    "InstrumentData",
    "Invite",
    "Organization",
    "SUBJECT_KINDS",
    "ScopeId",
    "SubjectInstance",
    "SubjectRegistry",
    "User",
    "subject_registry",
    "validate_subject",
]

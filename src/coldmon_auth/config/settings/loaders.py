"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from dotenv import dotenv_values

from coldmon_auth.config.settings.base import AuthzSettings, Settings
from coldmon_auth.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(raw: str) -> bool:
    token = raw.strip().lower()
    if token in _TRUE:
        return True
    if token in _FALSE:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE | _FALSE - {''})}")


_PARSERS: dict[Any, Callable[[str], Any]] = {
    bool: _parse_bool,
    int: int,
    str: str,
}


def _env_key(settings_class: type[Settings], field_name: str) -> str:
    """``AUTHZ`` + ``log_level`` -> ``AUTHZ_LOG_LEVEL``; no prefix, no underscore."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from environment variables.

    Reads ``os.environ`` unless another mapping is given.  Each dataclass
    field maps to ``<PREFIX>_<FIELD>``; unset fields keep their defaults.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            if not field.init:
                continue
            key = _env_key(settings_class, field.name)
            if key not in environ:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            parse = _PARSERS.get(hints.get(field.name), str)
            try:
                values[field.name] = parse(environ[key])
            except ValueError as exc:
                raise ConfigError(f"Cannot parse {key}={environ[key]!r}: {exc}") from exc

        try:
            return settings_class(**values)
        except TypeError as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Layer a ``.env`` file under the process environment.

    Variables already set in the environment win unless *override* is true.
    ``os.environ`` itself is never modified.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        file_values = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            merged = {**os.environ, **file_values}
        else:
            merged = {**file_values, **os.environ}
        return EnvSettingsLoader(merged).load(settings_class)


def load_settings(loader: SettingsLoader | None = None) -> AuthzSettings:
    """Load :class:`AuthzSettings`, from the environment by default."""
    return (loader or EnvSettingsLoader()).load(AuthzSettings)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "load_settings"]

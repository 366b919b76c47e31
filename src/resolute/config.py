"""Settings schema and resolution for resolute.

Resolve-once, freeze-then-flow: settings are validated by a pydantic schema
into an immutable ``Settings`` value. Precedence is defaults < environment
(```RESOLUTE_*```) < programmatic overrides. A context-local scope lets callers
and tests adjust settings without touching process-wide state.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resolute.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

__all__ = [
    "DEFAULT_FALLBACK_MESSAGE",
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "load_env",
    "reset_settings_cache",
    "resolve_settings",
    "settings_scope",
]

logger = logging.getLogger(__name__)

ENV_PREFIX = "RESOLUTE_"
DEFAULT_FALLBACK_MESSAGE = "An error occurred"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

# --- Schema (pydantic wall) ---


class Settings(BaseModel):
    """Validated, immutable library settings.

    Attributes:
        fallback_message: Error text used when a captured failure is neither
            a string nor an exception and no handler was supplied.
        allow_none_payloads: Accept ``None`` as an ``Ok``/``Err`` payload
            instead of raising ``InvalidPayloadError``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    fallback_message: str = Field(default=DEFAULT_FALLBACK_MESSAGE, min_length=1)
    allow_none_payloads: bool = Field(default=False)

    @field_validator("fallback_message", mode="before")
    @classmethod
    def normalize_fallback_message(cls, v: Any) -> Any:
        """Trim surrounding whitespace so blank messages fail the length check."""
        if isinstance(v, str):
            return v.strip()
        return v


# --- Loaders ---


def _coerce_bool(key: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {key}: {value!r}",
        hint="Use one of 1/0, true/false, yes/no, on/off.",
    )


def _read_dotenv() -> dict[str, str]:
    """Return the ``RESOLUTE_*`` entries of the nearest ``.env`` file.

    Values are read, never exported: ``os.environ`` is left untouched.
    """
    path = find_dotenv(usecwd=True)
    if not path:
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }


def load_env() -> Mapping[str, Any]:
    """Read ``RESOLUTE_*`` variables into a mapping of settings fields.

    Process environment wins over a ``.env`` file. Names that are not settings
    fields are skipped. Boolean fields are coerced here; everything else is
    left for pydantic.
    """
    config: dict[str, Any] = {}
    for key, value in {**_read_dotenv(), **os.environ}.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        info = Settings.model_fields.get(field_name)
        if info is None:
            logger.debug("Ignoring unknown setting %s", key)
            continue
        if info.annotation is bool:
            config[field_name] = _coerce_bool(key, value)
        else:
            config[field_name] = value
    return config


# --- Resolution ---


def _validate(merged: Mapping[str, Any]) -> Settings:
    try:
        return Settings.model_validate(dict(merged))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        msg = first.get("msg", "invalid value")
        raise ConfigurationError(
            f"Settings validation failed for {field}: {msg}",
            hint=f"Check {ENV_PREFIX}{field.upper()} or the override passed in code.",
        ) from e


def resolve_settings(overrides: Mapping[str, Any] | None = None) -> Settings:
    """Resolve settings from defaults, environment and ``overrides``.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    merged = {**load_env(), **(overrides or {})}
    settings = _validate(merged)
    logger.debug("Resolved settings: %r", settings)
    return settings


@cache
def _env_settings() -> Settings:
    try:
        return resolve_settings()
    except ConfigurationError as e:
        # Read by ok(), err() and the adapters, which must not raise here.
        logger.warning("Ignoring invalid %s* environment: %s", ENV_PREFIX, e)
        return Settings()


def reset_settings_cache() -> None:
    """Forget the environment-resolved settings so the next read re-resolves."""
    _env_settings.cache_clear()


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "resolute_settings", default=None
)


def get_settings() -> Settings:
    """Return the settings of the innermost active scope, else the environment's.

    Invalid environment values are logged and replaced by the defaults, so
    this never raises. Call ``resolve_settings()`` to surface them instead.
    """
    scoped = _AMBIENT.get()
    if scoped is not None:
        return scoped
    return _env_settings()


@contextmanager
def settings_scope(
    settings_or_overrides: Settings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Generator[Settings]:
    """Run a block with adjusted settings.

    Overrides are layered on top of the currently active settings, so scopes
    nest. The scope is held in a context variable and is therefore local to
    the current thread or asyncio task.

    Example:
        with settings_scope(fallback_message="Something failed"):
            result = resolve(flaky)
    """
    if isinstance(settings_or_overrides, Settings):
        if overrides:
            settings = _validate({**settings_or_overrides.model_dump(), **overrides})
        else:
            settings = settings_or_overrides
    else:
        combined = {**(settings_or_overrides or {}), **overrides}
        settings = _validate({**get_settings().model_dump(), **combined})

    token = _AMBIENT.set(settings)
    try:
        yield settings
    finally:
        _AMBIENT.reset(token)

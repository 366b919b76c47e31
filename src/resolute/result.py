"""Result type for operations that can fail.

A ``Result`` is either ``Ok`` carrying a value or ``Err`` carrying an error.
The class-level ``ok`` tag discriminates the two; the inactive payload
attribute does not exist on an instance.

Example:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return err("Division by zero")
        return ok(a / b)

    match divide(10, 2):
        case Ok(value):
            print(value)
        case Err(error):
            print(error)
"""

from __future__ import annotations

from collections.abc import Awaitable
import dataclasses
from typing import Any, ClassVar, Literal

from resolute.config import get_settings
from resolute.errors import InvalidPayloadError

__all__ = ["Err", "Ok", "Result", "ResultAsync", "err", "ok"]


def _require_payload(payload: object, variant: str) -> None:
    if payload is None and not get_settings().allow_none_payloads:
        raise InvalidPayloadError(
            f"{variant} payload must not be None",
            hint="Wrap a sentinel or use a dedicated error value instead.",
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result."""

    value: T
    ok: ClassVar[Literal[True]] = True

    def __post_init__(self) -> None:
        _require_payload(self.value, "Ok")

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result, containing the error."""

    error: E
    ok: ClassVar[Literal[False]] = False

    def __post_init__(self) -> None:
        _require_payload(self.error, "Err")

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]

#: The awaitable form of a Result, as returned by ``resolve_async``.
type ResultAsync[T, E] = Awaitable[Result[T, E]]


def rebuild(tag: bool, payload: object) -> Result[Any, Any]:
    """Build the variant selected by ``tag`` around an existing payload.

    Used for values already shaped like a Result, so the ``None`` guard is
    skipped: ``{"ok": False, "error": None}`` becomes ``Err(None)``.
    """
    variant = object.__new__(Ok if tag else Err)
    object.__setattr__(variant, "value" if tag else "error", payload)
    return variant


def ok[T](value: T) -> Ok[T]:
    """Create a successful result.

    Raises:
        InvalidPayloadError: If ``value`` is None and the active settings do
            not allow None payloads.
    """
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Create a failed result.

    Raises:
        InvalidPayloadError: If ``error`` is None and the active settings do
            not allow None payloads.
    """
    return Err(error)

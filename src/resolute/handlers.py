"""Closed set of error-handler forms accepted by the resolve adapters.

Callers may pass a raw handler (``None``, a default error value, or a
callable); ``as_handler`` classifies it into exactly one of ``NoHandler``,
``DefaultError`` or ``HandlerFn`` so the normalization policy can dispatch
exhaustively.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from resolute.errors import InvalidPayloadError

if TYPE_CHECKING:
    from collections.abc import Callable

    from resolute.result import Result

__all__ = ["DefaultError", "Handler", "HandlerFn", "NoHandler", "as_handler"]


@dataclasses.dataclass(frozen=True, slots=True)
class NoHandler:
    """No handler: raised failures become their message string."""


@dataclasses.dataclass(frozen=True, slots=True)
class DefaultError[E]:
    """A static error substituted for any raised failure."""

    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            raise InvalidPayloadError(
                "DefaultError requires a value",
                hint="Pass no handler at all to fall back to the failure message.",
            )


@dataclasses.dataclass(frozen=True, slots=True)
class HandlerFn[T, E]:
    """A callable mapping a raised failure to an error or a full Result."""

    fn: Callable[[Any], E | Result[T, E]]


type Handler[T, E] = NoHandler | DefaultError[E] | HandlerFn[T, E]


def as_handler(raw: Any) -> Handler[Any, Any]:
    """Classify a raw handler argument.

    Precedence is callable, then present, then absent. Already-classified
    handlers are returned unchanged.
    """
    if isinstance(raw, (NoHandler, DefaultError, HandlerFn)):
        return raw
    if callable(raw):
        return HandlerFn(raw)
    if raw is not None:
        return DefaultError(raw)
    return NoHandler()

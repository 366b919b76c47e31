"""Adapters that turn raising operations into Result values.

``resolve`` and ``resolve_async`` run a zero-argument operation once. A
Result returned by the operation comes back untouched, ``Err`` included.
An exception raised by the operation is normalized by ``handle_error``
according to the handler form:

- no handler: ``Err`` of the failure's message
- default error: ``Err`` of that value, the failure itself is discarded
- handler callable: its return value, wrapped in ``Err`` unless it already
  is a Result (a handler may recover into ``Ok``)

Exceptions raised by a handler callable are not caught.

Example:
    result = resolve(lambda: ok(int(raw)), lambda e: {"code": "parse", "cause": e})
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import TYPE_CHECKING, Any, Protocol, overload, runtime_checkable

from resolute.assertions import is_result
from resolute.config import get_settings
from resolute.handlers import DefaultError, HandlerFn, NoHandler, as_handler
from resolute.result import Err, Ok, rebuild

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from resolute.handlers import Handler
    from resolute.result import Result

__all__ = ["Describable", "describe_failure", "handle_error", "resolve", "resolve_async"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Describable(Protocol):
    """A failure that carries a human-readable ``message``."""

    message: str


def describe_failure(error: object) -> str:
    """Return the text used for a raised failure when no handler is given.

    Strings are used verbatim. Otherwise a string ``message`` attribute wins,
    then ``str()`` of an exception, even when empty. Only values that are
    neither get the configured fallback.
    """
    if isinstance(error, str):
        return error
    message = error.message if isinstance(error, Describable) else None
    if isinstance(message, str):
        return message
    if isinstance(error, BaseException):
        return str(error)
    return get_settings().fallback_message


def _as_variant(candidate: Any) -> Result[Any, Any]:
    """Normalize a Result look-alike into ``Ok``/``Err``, keeping the payload."""
    if isinstance(candidate, (Ok, Err)):
        return candidate
    if isinstance(candidate, Mapping):
        tag = candidate["ok"]
        return rebuild(tag, candidate["value"] if tag else candidate["error"])
    tag = candidate.ok
    return rebuild(tag, candidate.value if tag else candidate.error)


def handle_error[T, E](error: object, handler: Any = None) -> Result[T, E]:
    """Convert a raised failure into a Result.

    Args:
        error: The caught failure.
        handler: ``None``, a default error value, a callable taking the
            failure, or an already-classified ``Handler``.

    Returns:
        An ``Err`` in every case except a handler callable returning ``Ok``.
    """
    classified: Handler[T, E] = as_handler(handler)
    match classified:
        case HandlerFn(fn=fn):
            logger.debug("Delegating %s to handler %r", type(error).__name__, fn)
            handled = fn(error)
            if is_result(handled):
                return _as_variant(handled)
            return Err(handled)
        case DefaultError(error=default):
            logger.debug("Substituting default error for %s", type(error).__name__)
            return Err(default)
        case NoHandler():
            return Err(describe_failure(error))  # type: ignore[arg-type]


@overload
def resolve[T](fn: Callable[[], Result[T, str]]) -> Result[T, str]: ...


@overload
def resolve[T, E](
    fn: Callable[[], Result[T, E]],
    handler: Callable[[Exception], E | Result[T, E]] | HandlerFn[T, E],
) -> Result[T, E]: ...


@overload
def resolve[T, E](
    fn: Callable[[], Result[T, E]],
    handler: E | DefaultError[E],
) -> Result[T, E]: ...


def resolve[T, E](fn: Callable[[], Result[T, E]], handler: Any = None) -> Result[T, E]:
    """Call ``fn`` once, converting a raised exception into a Result.

    Args:
        fn: Zero-argument operation returning a Result.
        handler: Optional default error value or handler callable.

    Returns:
        ``fn``'s own Result, or the normalized failure.

    Example:
        result = resolve(lambda: ok(parse(text)), ParseFailed("bad input"))
    """
    try:
        return fn()
    except Exception as exc:
        logger.debug("Captured %s from %r; normalizing", type(exc).__name__, fn)
        return handle_error(exc, handler)


@overload
async def resolve_async[T](
    fn: Callable[[], Awaitable[Result[T, str]]],
) -> Result[T, str]: ...


@overload
async def resolve_async[T, E](
    fn: Callable[[], Awaitable[Result[T, E]]],
    handler: Callable[[Exception], E | Result[T, E]] | HandlerFn[T, E],
) -> Result[T, E]: ...


@overload
async def resolve_async[T, E](
    fn: Callable[[], Awaitable[Result[T, E]]],
    handler: E | DefaultError[E],
) -> Result[T, E]: ...


async def resolve_async[T, E](
    fn: Callable[[], Awaitable[Result[T, E]]], handler: Any = None
) -> Result[T, E]:
    """Await ``fn()`` once, converting a raised exception into a Result.

    Behaves like ``resolve``; the await is the only suspension point.
    Cancellation is not intercepted.

    Example:
        result = await resolve_async(fetch_profile, lambda e: {"code": "fetch"})
    """
    try:
        return await fn()
    except Exception as exc:
        logger.debug("Captured %s from %r; normalizing", type(exc).__name__, fn)
        return handle_error(exc, handler)

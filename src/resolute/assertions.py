"""Runtime checks for Result values.

``is_result`` recognizes anything shaped like a Result: ``Ok``/``Err``
instances, mappings such as ``{"ok": True, "value": 42}``, and objects that
expose the same attributes. The ``assert_result_*`` helpers raise
``ResultAssertionError`` (an ``AssertionError``) on mismatch, which makes
them usable both as preconditions and inside tests.

Example:
    result = resolve(load_user)
    assert_result_ok(result)
    print(result.value)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from resolute.errors import ResultAssertionError

if TYPE_CHECKING:
    from resolute.result import Result

__all__ = [
    "assert_result_err",
    "assert_result_err_equal",
    "assert_result_ok",
    "assert_result_ok_equal",
    "is_result",
]

_MISSING = object()


def _lookup(value: object, name: str) -> object:
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    return getattr(value, name, _MISSING)


def is_result(value: object) -> bool:
    """Return True if ``value`` is shaped like a Result.

    The tag ``ok`` must be a real ``bool``. A true tag requires a ``value``
    payload; a false tag requires an ``error`` payload. The other payload is
    not inspected, so ``{"ok": True, "value": 1, "error": "x"}`` still counts.
    """
    if value is None:
        return False
    tag = _lookup(value, "ok")
    if not isinstance(tag, bool):
        return False
    payload = "value" if tag else "error"
    return _lookup(value, payload) is not _MISSING


def assert_result_ok[T, E](result: Result[T, E]) -> None:
    """Raise ``ResultAssertionError`` unless ``result`` is a success."""
    if not result.ok:
        raise ResultAssertionError("Expected a successful result")


def assert_result_err[T, E](result: Result[T, E]) -> None:
    """Raise ``ResultAssertionError`` unless ``result`` is a failure."""
    if result.ok:
        raise ResultAssertionError("Expected a failed result")


def assert_result_ok_equal[T, E](result: Result[T, E], value: T) -> None:
    """Assert ``result`` is a success whose value *is* ``value``.

    The comparison is identity, not ``==``: two distinct lists with the same
    items do not match.
    """
    assert_result_ok(result)
    actual = result.value  # type: ignore[union-attr]
    if actual is not value:
        raise ResultAssertionError(
            f"Expected the value to be {value!r}, got {actual!r}"
        )


def assert_result_err_equal[T, E](result: Result[T, E], error: E) -> None:
    """Assert ``result`` is a failure whose error *is* ``error``.

    The comparison is identity, not ``==``.
    """
    assert_result_err(result)
    actual = result.error  # type: ignore[union-attr]
    if actual is not error:
        raise ResultAssertionError(
            f"Expected the error to be {error!r}, got {actual!r}"
        )

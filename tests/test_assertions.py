"""Unit tests for is_result and the assert_result_* helpers."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

from hypothesis import given
from hypothesis import strategies as st
import pytest

from resolute import (
    ResoluteError,
    ResultAssertionError,
    assert_result_err,
    assert_result_err_equal,
    assert_result_ok,
    assert_result_ok_equal,
    err,
    is_result,
    ok,
)

pytestmark = pytest.mark.unit


# =============================================================================
# is_result
# =============================================================================


class TestIsResult:
    def test_constructed_results_are_results(self) -> None:
        assert is_result(ok(42))
        assert is_result(err("An error occurred"))

    @pytest.mark.parametrize("value", [None, 42, "ok", b"ok", 1.5, [], ()])
    def test_non_structured_values_are_not_results(self, value) -> None:
        assert not is_result(value)

    def test_tag_must_be_a_bool(self) -> None:
        assert not is_result({"ok": "potato"})
        assert not is_result({"ok": 1, "value": 42})
        assert not is_result({"value": 42})

    def test_true_tag_requires_value(self) -> None:
        assert is_result({"ok": True, "value": 42})
        assert not is_result({"ok": True, "error": "An error occurred"})

    def test_false_tag_requires_error(self) -> None:
        assert is_result({"ok": False, "error": "An error occurred"})
        assert not is_result({"ok": False, "value": 42})

    def test_both_payloads_present_still_counts(self) -> None:
        assert is_result({"ok": True, "value": 1, "error": "x"})
        assert is_result({"ok": False, "value": 1, "error": "x"})

    def test_payload_may_be_none_when_present(self) -> None:
        assert is_result({"ok": True, "value": None})

    def test_attribute_shaped_objects(self) -> None:
        @dataclass
        class Outcome:
            ok: bool
            value: int

        assert is_result(Outcome(ok=True, value=3))
        assert not is_result(Outcome(ok=False, value=3))
        assert is_result(SimpleNamespace(ok=False, error="nope"))

    @given(
        tag=st.booleans(),
        keys=st.sets(st.sampled_from(["value", "error"])),
    )
    def test_mapping_shape_rule(self, tag: bool, keys: set[str]) -> None:
        candidate = {"ok": tag, **{k: object() for k in keys}}
        expected = ("value" in keys) if tag else ("error" in keys)
        assert is_result(candidate) is expected


# =============================================================================
# assert_result_ok / assert_result_err
# =============================================================================


def test_assert_result_ok_passes_on_success() -> None:
    assert assert_result_ok(ok(42)) is None


def test_assert_result_ok_raises_on_failure() -> None:
    with pytest.raises(ResultAssertionError, match="Expected a successful result"):
        assert_result_ok(err("An error occurred"))


def test_assert_result_err_passes_on_failure() -> None:
    assert assert_result_err(err("An error occurred")) is None


def test_assert_result_err_raises_on_success() -> None:
    with pytest.raises(ResultAssertionError, match="Expected a failed result"):
        assert_result_err(ok(42))


def test_assertion_error_hierarchy() -> None:
    """Failures are catchable as AssertionError and as ResoluteError."""
    with pytest.raises(AssertionError):
        assert_result_ok(err("x"))
    with pytest.raises(ResoluteError):
        assert_result_err(ok(1))


# =============================================================================
# *_equal variants
# =============================================================================


def test_assert_result_ok_equal_passes_on_same_value() -> None:
    assert_result_ok_equal(ok(42), 42)


def test_assert_result_ok_equal_raises_on_different_value() -> None:
    with pytest.raises(ResultAssertionError, match="Expected the value to be 43"):
        assert_result_ok_equal(ok(42), 43)


def test_assert_result_ok_equal_raises_on_failure() -> None:
    with pytest.raises(ResultAssertionError, match="Expected a successful result"):
        assert_result_ok_equal(err("An error occurred"), 42)


def test_assert_result_err_equal_passes_on_same_error() -> None:
    message = "An error occurred"
    assert_result_err_equal(err(message), message)


def test_assert_result_err_equal_raises_on_different_error() -> None:
    with pytest.raises(ResultAssertionError, match="Expected the error to be"):
        assert_result_err_equal(err("An error occurred"), "Another error occurred")


def test_assert_result_err_equal_raises_on_success() -> None:
    with pytest.raises(ResultAssertionError, match="Expected a failed result"):
        assert_result_err_equal(ok(42), "An error occurred")


def test_equal_assertions_use_identity_not_structure() -> None:
    payload = {"code": "E"}
    lookalike = {"code": "E"}

    assert_result_ok_equal(ok(payload), payload)
    assert_result_err_equal(err(payload), payload)
    with pytest.raises(ResultAssertionError):
        assert_result_ok_equal(ok(payload), lookalike)
    with pytest.raises(ResultAssertionError):
        assert_result_err_equal(err(payload), lookalike)

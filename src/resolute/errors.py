"""Exception hierarchy for resolute."""

from __future__ import annotations


class ResoluteError(Exception):
    """Base exception for all resolute errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ResultAssertionError(ResoluteError, AssertionError):
    """A Result was not in the expected variant or held an unexpected payload.

    Raised only by the ``assert_result_*`` helpers. These signal programmer
    errors and always propagate to the caller.
    """


class InvalidPayloadError(ResoluteError, TypeError):
    """A Result (or default error) was constructed around ``None``."""


class ConfigurationError(ResoluteError):
    """Settings validation or resolution failed."""

"""resolute: a Result type and adapters from raising code to Result values.

Public API:
    - ok() / err(): Construct ``Ok`` / ``Err`` results
    - resolve() / resolve_async(): Run an operation, capturing raised failures
    - is_result() and assert_result_*(): Runtime checks for Result values
    - settings_scope(): Scoped configuration
"""

from __future__ import annotations

import logging

from resolute.adapters import (
    Describable,
    describe_failure,
    handle_error,
    resolve,
    resolve_async,
)
from resolute.assertions import (
    assert_result_err,
    assert_result_err_equal,
    assert_result_ok,
    assert_result_ok_equal,
    is_result,
)
from resolute.config import Settings, get_settings, settings_scope
from resolute.errors import (
    ConfigurationError,
    InvalidPayloadError,
    ResoluteError,
    ResultAssertionError,
)
from resolute.handlers import DefaultError, Handler, HandlerFn, NoHandler, as_handler
from resolute.result import Err, Ok, Result, ResultAsync, err, ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resolute-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resolute").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "DefaultError",
    "Describable",
    "Err",
    "Handler",
    "HandlerFn",
    "InvalidPayloadError",
    "NoHandler",
    "Ok",
    "ResoluteError",
    "Result",
    "ResultAssertionError",
    "ResultAsync",
    "Settings",
    "__version__",
    "as_handler",
    "assert_result_err",
    "assert_result_err_equal",
    "assert_result_ok",
    "assert_result_ok_equal",
    "describe_failure",
    "err",
    "get_settings",
    "handle_error",
    "is_result",
    "ok",
    "resolve",
    "resolve_async",
    "settings_scope",
]

"""Library exception types."""

from __future__ import annotations

from typing import Any


class ApiErrError(Exception):
    """Base error type."""


class InvalidStatusCode(ApiErrError, ValueError):
    """Raised when a value cannot be coerced into an HTTP status code.

    This signals a bug at the call site (a hard-coded status that is out of
    range or malformed), not a runtime condition. Nothing in :mod:`apierr`
    catches it.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid status code: {value!r}")
        self.value = value


class UnwrapError(ApiErrError):
    """Raised when unwrapping an :class:`~apierr.result.Err`."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"called unwrap() on an Err value: {error!r}")
        self.error = error

"""HTTP status codes and the coercion into :class:`StatusCode`."""

from __future__ import annotations

from enum import IntEnum
from http import HTTPStatus as _HTTPStatus
from typing import Union

from .exceptions import InvalidStatusCode

_MIN_STATUS = 100
_MAX_STATUS = 599


class Status(IntEnum):
    """Symbolic names for the status codes handlers reach for most often."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    CONFLICT = 409
    GONE = 410
    PAYLOAD_TOO_LARGE = 413
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    SERVICE_UNAVAILABLE = 503


class StatusCode(int):
    """A validated HTTP status code carrying its canonical reason phrase.

    Instances only come out of :func:`resolve_status`; constructing one
    directly goes through the same checks.
    """

    __slots__ = ()

    def __new__(cls, value: "StatusLike") -> "StatusCode":
        return super().__new__(cls, _coerce(value))

    @property
    def reason(self) -> str:
        return reason_phrase(int(self))

    def __str__(self) -> str:
        return f"{int(self)} {self.reason}"

    def __repr__(self) -> str:
        return f"StatusCode({int(self)})"


StatusLike = Union[StatusCode, IntEnum, int, str, bytes]


def _coerce(value: object) -> int:
    if isinstance(value, bool):
        raise InvalidStatusCode(value)
    if isinstance(value, int):
        code = int(value)
    elif isinstance(value, (str, bytes)):
        text = value.decode("ascii", "replace") if isinstance(value, bytes) else value
        if len(text) != 3 or not text.isascii() or not text.isdigit():
            raise InvalidStatusCode(value)
        code = int(text)
    else:
        raise InvalidStatusCode(value)
    if code < _MIN_STATUS or code > _MAX_STATUS:
        raise InvalidStatusCode(value)
    return code


def resolve_status(code: StatusLike) -> StatusCode:
    """Coerce a code-like value into a :class:`StatusCode`.

    Raises :class:`~apierr.exceptions.InvalidStatusCode` for anything that is
    not a status in the 100-599 range.
    """

    if type(code) is StatusCode:
        return code
    return StatusCode(code)


def reason_phrase(status: StatusLike) -> str:
    """Return the HTTP reason phrase for ``status`` if known."""

    try:
        code = _coerce(status)
    except InvalidStatusCode:
        return "Unknown Status"
    try:
        return _HTTPStatus(code).phrase
    except ValueError:
        return "Unknown Status"


def is_server_error(status: StatusLike) -> bool:
    """Return ``True`` if ``status`` is a 5xx code."""

    return 500 <= _coerce(status) < 600


__all__ = [
    "Status",
    "StatusCode",
    "StatusLike",
    "is_server_error",
    "reason_phrase",
    "resolve_status",
]

"""Response primitives and the two default renderers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Union

import msgspec

from .http import Status, StatusCode, StatusLike, resolve_status
from .serialization import json_encode

Headers = tuple[tuple[str, str], ...]
HeaderInput = Union[Mapping[str, str], Iterable[tuple[str, str]]]

PLAIN_TEXT = ("content-type", "text/plain; charset=utf-8")
JSON = ("content-type", "application/json")
OCTET_STREAM = ("content-type", "application/octet-stream")


class Response(msgspec.Struct, frozen=True):
    """Immutable response payload."""

    status: int = int(Status.OK)
    headers: Headers = ()
    body: bytes = b""

    def with_headers(self, headers: HeaderInput) -> "Response":
        """Return a new response with ``headers`` appended."""

        return Response(status=self.status, headers=self.headers + _header_pairs(headers), body=self.body)

    def with_status(self, status: StatusLike) -> "Response":
        """Return a new response with ``status`` replacing the current one."""

        return Response(status=resolve_status(status), headers=self.headers, body=self.body)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for header ``name`` (case-insensitive)."""

        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default

    def text(self) -> str:
        return self.body.decode("utf-8")


def PlainTextResponse(
    text: str,
    *,
    status: StatusLike = Status.OK,
    headers: HeaderInput | None = None,
) -> Response:
    """Create a plain text response.

    Text that cannot be encoded as UTF-8 (lone surrogates) is escaped rather
    than rejected.
    """

    combined = (PLAIN_TEXT,) + _header_pairs(headers or ())
    return Response(status=resolve_status(status), headers=combined, body=text.encode("utf-8", "backslashreplace"))


def JSONResponse(
    data: Any,
    *,
    status: StatusLike = Status.OK,
    headers: HeaderInput | None = None,
) -> Response:
    """Create a JSON response encoded via :mod:`msgspec`."""

    combined = (JSON,) + _header_pairs(headers or ())
    return Response(status=resolve_status(status), headers=combined, body=json_encode(data))


def render_default(code: StatusLike) -> Response:
    """Render the generic error response for ``code``.

    The body is the numeric code followed by its reason phrase, for example
    ``b"404 Not Found"``. The failure itself is never shown.
    """

    status = resolve_status(code)
    return PlainTextResponse(str(status), status=status)


def render_transparent(code: StatusLike, failure: Any) -> Response | None:
    """Render ``failure`` as plain text under ``code``.

    Fits the ``handle`` slot of :func:`~apierr.catch.catch` and never
    declines. Do not use it for failures whose text leaks internals.
    """

    return PlainTextResponse(str(failure), status=code)


def into_response(value: Any) -> Response:
    """Convert a handler result into a :class:`Response`.

    ``Response`` instances are returned unchanged. Tuples of ``(status,
    body)``, ``(status, headers, body)`` or ``(headers, body)`` override the
    status and append headers to the converted body.
    """

    if isinstance(value, Response):
        return value
    if isinstance(value, tuple):
        return _tuple_to_response(value)
    if isinstance(value, str):
        return PlainTextResponse(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Response(headers=(OCTET_STREAM,), body=bytes(value))
    return JSONResponse(value)


def _tuple_to_response(parts: tuple[Any, ...]) -> Response:
    if len(parts) == 2:
        first, body = parts
        if _is_status_like(first):
            return into_response(body).with_status(first)
        if isinstance(first, (str, bytes)) or not isinstance(first, (Mapping, Iterable)):
            raise TypeError(f"Expected a status code or headers as the first item, got {first!r}")
        return into_response(body).with_headers(first)
    if len(parts) == 3:
        status, headers, body = parts
        return into_response(body).with_headers(headers).with_status(status)
    raise TypeError(f"Cannot convert a {len(parts)}-tuple into a response")


def _is_status_like(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, (str, bytes)):
        return len(value) == 3 and value.isdigit() and value.isascii()
    return False


def _header_pairs(headers: HeaderInput) -> Headers:
    if isinstance(headers, Mapping):
        return tuple((str(name), str(value)) for name, value in headers.items())
    return tuple((str(name), str(value)) for name, value in headers)


__all__ = [
    "Headers",
    "JSONResponse",
    "PlainTextResponse",
    "Response",
    "into_response",
    "render_default",
    "render_transparent",
]

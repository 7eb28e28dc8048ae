"""Map handler failures onto HTTP responses with a guaranteed status code."""

from .catch import Catch, catch, decline, stop, transparent_stop
from .exceptions import ApiErrError, InvalidStatusCode, UnwrapError
from .http import Status, StatusCode, reason_phrase, resolve_status
from .responses import (
    JSONResponse,
    PlainTextResponse,
    Response,
    into_response,
    render_default,
    render_transparent,
)
from .result import ApiResult, Err, Ok, Result, is_err, is_ok, respond

__all__ = [
    "ApiErrError",
    "ApiResult",
    "Catch",
    "Err",
    "InvalidStatusCode",
    "JSONResponse",
    "Ok",
    "PlainTextResponse",
    "Response",
    "Result",
    "Status",
    "StatusCode",
    "UnwrapError",
    "catch",
    "decline",
    "into_response",
    "is_err",
    "is_ok",
    "reason_phrase",
    "render_default",
    "render_transparent",
    "resolve_status",
    "respond",
    "stop",
    "transparent_stop",
]

"""Handler outcomes: a success value or a failure value.

Usage::

    def parse_age(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f"{raw!r} is not a number")
        return Ok(int(raw))

    async def endpoint(raw: str) -> ApiResult[int]:
        return parse_age(raw).map_err(transparent_stop(400))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from .exceptions import UnwrapError
from .responses import Response, into_response

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome."""

    value: T

    def map_err(self, fn: Callable[[Any], F]) -> "Ok[T]":
        return self

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome."""

    error: E

    def map_err(self, fn: Callable[[E], F]) -> "Err[F]":
        """Replace the failure with ``fn(error)``, typically a transformer."""

        return Err(fn(self.error))

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self.error)


Result = Union[Ok[T], Err[E]]
ApiResult = Union[Ok[T], Err[Response]]


def is_ok(result: Result[Any, Any]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Result[Any, Any]) -> bool:
    return isinstance(result, Err)


def respond(result: Result[Any, Any]) -> Response:
    """Collapse a handler outcome into the response the HTTP layer sends."""

    if isinstance(result, Ok):
        return into_response(result.value)
    if isinstance(result, Err):
        return into_response(result.error)
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


__all__ = ["ApiResult", "Err", "Ok", "Result", "is_err", "is_ok", "respond"]

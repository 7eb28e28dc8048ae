"""Example handlers showing the three ways of turning failures into responses.

``apierr-demo / /500 /custom/42 /custom/69`` prints what an HTTP server
would send back for each path.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

import msgspec
import rure
from rure.regex import RegexObject

from .catch import catch, stop, transparent_stop
from .http import Status, StatusCode, is_server_error
from .responses import Response, render_default, render_transparent
from .result import ApiResult, Err, Ok, Result, respond

logger = logging.getLogger(__name__)

RIGHT_NUMBER = 69
MAX_DIGITS = 5

Endpoint = Callable[..., Awaitable[ApiResult[str]]]


def bad() -> Result[str, str]:
    return Err("bad")


def good() -> Result[str, str]:
    return Ok("good")


async def always_500() -> ApiResult[str]:
    # The caller sees "500 Internal Server Error", never "bad".
    return bad().map_err(stop(500))


async def always_200() -> ApiResult[str]:
    return good().map_err(stop(500))


class NotANumber(msgspec.Struct, frozen=True):
    err: str


def _validate_length(number: str) -> Result[str, str]:
    if not number:
        return Err("You must provide a number.")
    if len(number) > MAX_DIGITS:
        return Err("The number is too long. Try again with fewer digits.")
    return Ok(number)


def _parse_number(number: str) -> Result[int, ValueError]:
    try:
        return Ok(int(number))
    except ValueError as exc:
        return Err(exc)


def _validate_range(number: int) -> Result[str, str]:
    if number < RIGHT_NUMBER:
        return Err(f"The number {number} is too low. Try higher :)")
    if number > RIGHT_NUMBER:
        return Err(f"The number {number} is too high. Try lower :)")
    return Ok(f"Nice! You guessed the right number, which is {number}!!!")


def _not_a_number(code: StatusCode, err: ValueError) -> tuple[StatusCode, list[tuple[str, str]], NotANumber]:
    return (
        code,
        [("Set-Cookie", "foo=bar; Max-Age=10; SameSite=Lax")],
        NotANumber(err=str(err)),
    )


async def guess_number(number: str | None = None) -> ApiResult[str]:
    """Validate a guess, using a different failure rendering at each step."""

    checked = _validate_length(number or "").map_err(catch(400, render_transparent, render_default))
    if isinstance(checked, Err):
        return checked
    parsed = _parse_number(checked.value).map_err(catch(400, _not_a_number, render_default))
    if isinstance(parsed, Err):
        return parsed
    return _validate_range(parsed.value).map_err(transparent_stop(Status.BAD_REQUEST))


@dataclass(slots=True, frozen=True)
class DemoRoute:
    path: str
    endpoint: Endpoint
    pattern: RegexObject
    param_names: tuple[str, ...]

    def params(self, path: str) -> dict[str, str] | None:
        """Return the path parameters when ``path`` matches, else ``None``."""

        captures = self.pattern.match(path)
        if captures is None:
            return None
        params: dict[str, str] = {}
        for name in self.param_names:
            group = captures.group(name)
            if group is None:
                continue
            params[name] = group
        return params


_PATH_PARAM_PATTERN = re.compile(r"{([a-zA-Z_][a-zA-Z0-9_]*)}")


def _compile_path(path: str) -> tuple[RegexObject, tuple[str, ...]]:
    param_names: list[str] = []

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        param_names.append(name)
        return f"(?P<{name}>[^/]+)"

    pattern = "^" + _PATH_PARAM_PATTERN.sub(replace, path) + "$"
    return rure.compile(pattern), tuple(param_names)


def _route(path: str, endpoint: Endpoint) -> DemoRoute:
    pattern, param_names = _compile_path(path)
    return DemoRoute(path=path, endpoint=endpoint, pattern=pattern, param_names=param_names)


ROUTES: tuple[DemoRoute, ...] = (
    _route("/", always_200),
    _route("/500", always_500),
    _route("/custom", guess_number),
    _route("/custom/{number}", guess_number),
)


async def dispatch(path: str) -> Response:
    """Run the endpoint matching ``path`` and collapse its outcome."""

    for route in ROUTES:
        params = route.params(path)
        if params is None:
            continue
        logger.debug("dispatching %s to %s", path, route.path)
        return respond(await route.endpoint(**params))
    logger.debug("no route matches %s", path)
    return stop(Status.NOT_FOUND)(path)


def format_response(response: Response) -> str:
    lines = [str(StatusCode(response.status))]
    lines.extend(f"{name}: {value}" for name, value in response.headers)
    lines.append("")
    lines.append(response.body.decode("utf-8", "replace"))
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    responses = asyncio.run(_dispatch_all(args.paths))
    for path, response in zip(args.paths, responses):
        print(f"$ GET {path}")
        print(format_response(response))
        print()
    return 1 if any(is_server_error(response.status) for response in responses) else 0


async def _dispatch_all(paths: Sequence[str]) -> list[Response]:
    return [await dispatch(path) for path in paths]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="apierr-demo", description="Render demo handler responses")
    parser.add_argument("paths", nargs="+", help="Request paths such as / or /custom/42")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())

"""Walk through the apierr combinators.

Run ``uv sync`` once, then ``uv run example.py`` to print the responses the
demo handlers produce. Pass paths to render other requests, for example
``uv run example.py /custom/abc``.
"""

from __future__ import annotations

import sys

from apierr import Err, Ok, catch, render_default, respond, stop, transparent_stop
from apierr.demo import format_response, main


def _show(title: str, result: object) -> None:
    print(f"# {title}")
    print(format_response(respond(result)))
    print()


def walkthrough() -> None:
    """Print one response per combinator for the same failure value."""

    failure = Err("database connection refused")
    _show("stop(500) hides the failure", failure.map_err(stop(500)))
    _show("transparent_stop(400) shows it", failure.map_err(transparent_stop(400)))
    _show(
        "catch(400, ...) with a custom JSON body",
        failure.map_err(catch(400, lambda code, err: (422, {"error": err}), render_default)),
    )
    _show("success values pass through", Ok("hello").map_err(stop(500)))


if __name__ == "__main__":
    if len(sys.argv) > 1:
        raise SystemExit(main(sys.argv[1:]))
    walkthrough()

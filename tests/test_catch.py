from __future__ import annotations

import logging

import pytest

from apierr.catch import Catch, catch, decline, stop, transparent_stop
from apierr.exceptions import InvalidStatusCode
from apierr.http import Status, StatusCode, resolve_status
from apierr.responses import PlainTextResponse, Response, render_default, render_transparent


@pytest.mark.parametrize("failure", ["bad", ValueError("secret"), {"token": "abc"}, None, 42])
def test_stop_hides_failure(failure) -> None:
    response = stop(500)(failure)
    assert response.status == 500
    assert response.body == b"500 Internal Server Error"
    assert response == render_default(resolve_status(500))


def test_stop_accepts_symbolic_codes() -> None:
    response = stop(Status.NOT_FOUND)("missing")
    assert response.status == resolve_status(404)
    assert response.body == b"404 Not Found"


def test_transparent_stop_shows_failure() -> None:
    response = transparent_stop(400)("bad")
    assert response.status == 400
    assert response.body == b"bad"


def test_transparent_stop_uses_str_of_exceptions() -> None:
    response = transparent_stop(Status.CONFLICT)(KeyError("dup"))
    assert response.status == 409
    assert response.body == str(KeyError("dup")).encode()


def test_catch_falls_back_when_handler_declines() -> None:
    calls: list[tuple[StatusCode, object]] = []

    def handle(code: StatusCode, failure: object) -> None:
        calls.append((code, failure))
        return None

    response = catch(400, handle, render_default)("bad")
    assert response == render_default(resolve_status(400))
    assert calls == [(400, "bad")]
    assert isinstance(calls[0][0], StatusCode)


def test_catch_keeps_custom_status() -> None:
    custom = Response(status=422, body=b"custom")
    response = catch(400, lambda code, failure: custom, render_default)("bad")
    assert response is custom
    assert (response.status, response.body) == (422, b"custom")


def test_catch_converts_response_like_results() -> None:
    response = catch(400, lambda code, failure: (code, f"oops: {failure}"), render_default)("bad")
    assert response.status == 400
    assert response.body == b"oops: bad"


def test_catch_default_render_only_called_on_decline() -> None:
    rendered: list[StatusCode] = []

    def default_render(code: StatusCode) -> Response:
        rendered.append(code)
        return PlainTextResponse("fallback", status=code)

    transformer = catch(503, render_transparent, default_render)
    assert transformer("down").body == b"down"
    assert rendered == []

    declining = catch(503, decline, default_render)
    assert declining("down").body == b"fallback"
    assert rendered == [503]


def test_catch_default_render_defaults_to_generic_renderer() -> None:
    assert catch(401, decline)("nope").body == b"401 Unauthorized"


def test_catch_resolves_code_eagerly() -> None:
    with pytest.raises(InvalidStatusCode):
        catch(1000, decline, render_default)
    with pytest.raises(InvalidStatusCode):
        stop("teapot")
    with pytest.raises(InvalidStatusCode):
        transparent_stop(42)


def test_transformer_is_stateless_and_reusable() -> None:
    transformer = transparent_stop(400)
    assert isinstance(transformer, Catch)
    assert transformer.default_code == 400
    assert transformer("first").body == b"first"
    assert transformer.apply("second").body == b"second"
    assert stop(400) == stop(400)


def test_handler_exceptions_propagate() -> None:
    def handle(code: StatusCode, failure: object) -> Response:
        raise RuntimeError("handler bug")

    with pytest.raises(RuntimeError, match="handler bug"):
        catch(400, handle, render_default)("bad")


def test_decline_logs_status_without_failure(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="apierr.catch"):
        stop(500)("database password is hunter2")
    assert "500" in caplog.text
    assert "hunter2" not in caplog.text


def test_transparent_stop_always_yields_a_response_for_surrogates() -> None:
    response = transparent_stop(400)(ValueError("path /tmp/\udcff"))
    assert response.status == 400
    assert response.body == b"path /tmp/\\udcff"


def test_catch_rejects_ambiguous_tuple_from_handler() -> None:
    transformer = catch(400, lambda code, failure: ("note", failure), render_default)
    with pytest.raises(TypeError):
        transformer("bad")

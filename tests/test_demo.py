from __future__ import annotations

import pytest

from apierr.demo import ROUTES, always_200, always_500, dispatch, format_response, guess_number, main
from apierr.result import Err, Ok
from apierr.serialization import json_decode


@pytest.mark.asyncio
async def test_always_500_hides_failure() -> None:
    result = await always_500()
    assert isinstance(result, Err)
    assert result.error.status == 500
    assert result.error.body == b"500 Internal Server Error"


@pytest.mark.asyncio
async def test_always_200_passes_success_through() -> None:
    assert await always_200() == Ok("good")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("number", "body"),
    [
        (None, b"You must provide a number."),
        ("123456", b"The number is too long. Try again with fewer digits."),
        ("42", b"The number 42 is too low. Try higher :)"),
        ("70", b"The number 70 is too high. Try lower :)"),
    ],
)
async def test_guess_number_shows_validation_failures(number: str | None, body: bytes) -> None:
    result = await guess_number(number)
    assert isinstance(result, Err)
    assert result.error.status == 400
    assert result.error.body == body


@pytest.mark.asyncio
async def test_guess_number_custom_json_failure() -> None:
    result = await guess_number("abc")
    assert isinstance(result, Err)
    response = result.error
    assert response.status == 400
    assert response.header("content-type") == "application/json"
    assert response.header("set-cookie") == "foo=bar; Max-Age=10; SameSite=Lax"
    assert "invalid literal" in json_decode(response.body)["err"]


@pytest.mark.asyncio
async def test_guess_number_success() -> None:
    assert await guess_number("69") == Ok("Nice! You guessed the right number, which is 69!!!")


@pytest.mark.asyncio
async def test_dispatch_routes_paths() -> None:
    assert (await dispatch("/")).body == b"good"
    assert (await dispatch("/500")).status == 500
    assert (await dispatch("/custom")).body == b"You must provide a number."
    assert (await dispatch("/custom/69")).status == 200
    missing = await dispatch("/nowhere")
    assert (missing.status, missing.body) == (404, b"404 Not Found")


def test_demo_routes_record_path_params() -> None:
    custom = ROUTES[-1]
    assert custom.param_names == ("number",)
    assert custom.params("/custom/42") == {"number": "42"}
    assert custom.params("/custom/") is None
    assert ROUTES[0].params("/") == {}
    assert ROUTES[0].params("/500") is None


@pytest.mark.asyncio
async def test_format_response_lists_status_headers_and_body() -> None:
    text = format_response(await dispatch("/500"))
    assert text.splitlines() == [
        "500 Internal Server Error",
        "content-type: text/plain; charset=utf-8",
        "",
        "500 Internal Server Error",
    ]


def test_main_exit_code_reflects_server_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["/", "/custom/70"]) == 0
    assert main(["/500"]) == 1
    output = capsys.readouterr().out
    assert "$ GET /custom/70" in output
    assert "The number 70 is too high. Try lower :)" in output

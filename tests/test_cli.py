import httpx
import pytest
from click.testing import CliRunner

from httpcat import __version__
from httpcat.config import ClientConfig
from httpcat.http import render
from httpcat.http.cli import NO_METHOD_NOTICE, http


def _invoke(args: list[str], handler) -> tuple:
    captured: list[httpx.Request] = []

    def _capture(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return handler(request)

    obj = {"config": ClientConfig(), "transport": httpx.MockTransport(_capture)}
    result = CliRunner().invoke(http, args, obj=obj)
    return result, captured


def _json_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        headers={"content-type": "application/json", "x-trace": "abc"},
        content=b'{"url": "https://httpbin.org/get"}',
    )


def test_get_prints_status_headers_then_body() -> None:
    result, captured = _invoke(["get", "https://httpbin.org/get"], _json_handler)

    assert result.exit_code == 0, result.output
    assert len(captured) == 1
    assert captured[0].method == "GET"
    assert captured[0].headers["x-powered-by"] == "Python"
    assert captured[0].headers["user-agent"] == "Python Httpie"

    output = result.output
    status = output.index("HTTP/1.1 200 OK")
    header = output.index("x-trace: abc")
    body = output.index('"url"')
    assert status < header < body


def test_no_subcommand_prints_notice_without_request() -> None:
    result, captured = _invoke([], _json_handler)

    assert result.exit_code == 0
    assert NO_METHOD_NOTICE in result.output
    assert captured == []


def test_post_collapses_duplicate_keys() -> None:
    result, captured = _invoke(
        ["post", "https://httpbin.org/post", "a=1", "a=2"],
        lambda request: httpx.Response(200, text="ok"),
    )

    assert result.exit_code == 0, result.output
    assert captured[0].method == "POST"
    assert captured[0].content == b"a=2"


def test_put_and_delete_use_their_methods() -> None:
    ok = lambda request: httpx.Response(204)

    put_result, put_captured = _invoke(["put", "http://test/item", "name=x"], ok)
    delete_result, delete_captured = _invoke(["delete", "http://test/item"], ok)

    assert put_result.exit_code == 0
    assert delete_result.exit_code == 0
    assert put_captured[0].method == "PUT"
    assert put_captured[0].content == b"name=x"
    assert delete_captured[0].method == "DELETE"
    assert delete_captured[0].content == b""


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["get", "abc"], "Invalid URL: abc"),
        (["delete", "example.com"], "Invalid URL: example.com"),
        (["post", "https://httpbin.org/post", "novalue"], "Invalid key-value pair: novalue"),
    ],
)
def test_validation_errors_exit_before_network(args: list[str], message: str) -> None:
    result, captured = _invoke(args, _json_handler)

    assert result.exit_code == 1
    assert f"Error: {message}" in result.output
    assert captured == []


def test_transport_error_exits_non_zero() -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result, captured = _invoke(["get", "http://test/"], _refuse)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "connection refused" in result.output
    assert len(captured) == 1


def test_version_option() -> None:
    result = CliRunner().invoke(http, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_render_error_exits_after_status_line(monkeypatch) -> None:
    monkeypatch.setitem(render.BODY_LEXERS, "application/json", "no-such-language")

    result, captured = _invoke(["get", "http://test/"], _json_handler)

    assert result.exit_code == 1
    assert len(captured) == 1
    output = result.output
    assert output.index("HTTP/1.1 200 OK") < output.index("Error:")
    assert "no-such-language" in output


class _BrokenStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        raise httpx.ReadError("connection reset")
        yield b""


def test_body_read_failure_exits_after_status_line() -> None:
    result, _ = _invoke(
        ["get", "http://test/"],
        lambda request: httpx.Response(200, headers={"content-type": "text/html"}, stream=_BrokenStream()),
    )

    assert result.exit_code == 1
    output = result.output
    assert output.index("HTTP/1.1 200 OK") < output.index("Error:")
    assert "connection reset" in output

"""
httpcat CLI commands.
"""

import asyncio
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape

from httpcat import __version__
from httpcat.config import get_config
from httpcat.exceptions import HttpcatError
from httpcat.http.client import HTTPClient
from httpcat.http.models import (
    DeleteRequest,
    GetRequest,
    PostRequest,
    PutRequest,
    Request,
)
from httpcat.http.render import ResponseRenderer, SyntaxHighlighter
from httpcat.logging_config import configure_logging, get_logger


logger = get_logger(__name__)

NO_METHOD_NOTICE = "No HTTP method specified."


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="httpcat")
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
@click.pass_context
def http(ctx, debug: bool, log_file: str | None):
    """A small HTTP client for the terminal.

    Prints the response status line, headers and body. JSON bodies are
    syntax highlighted.

    \b
    Examples:
        httpcat get https://httpbin.org/get
        httpcat post https://httpbin.org/post name=test value=123
        httpcat put https://httpbin.org/put token=a=b
        httpcat delete https://httpbin.org/delete
    """
    configure_logging(debug=debug, log_file=log_file)

    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        ctx.obj["config"] = get_config()
    # Tests inject an httpx.MockTransport here
    ctx.obj.setdefault("transport", None)

    if ctx.invoked_subcommand is None:
        Console().print(NO_METHOD_NOTICE)


async def _send_and_render(ctx, request: Request, console: Console) -> None:
    config = ctx.obj["config"]
    renderer = ResponseRenderer(console, SyntaxHighlighter(theme=config.theme))

    async with HTTPClient(config, transport=ctx.obj["transport"]) as client:
        response = await client.send(request)
        try:
            await renderer.render(response)
        finally:
            await response.aclose()


def _execute(ctx, build: Callable[..., Request], *args) -> None:
    """Build a request from raw arguments, send it and print the response."""
    console = Console()

    try:
        request = build(*args)
        asyncio.run(_send_and_render(ctx, request, console))
    except HttpcatError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)


@http.command("get")
@click.argument("url")
@click.pass_context
def get_cmd(ctx, url: str):
    """Make a GET request.

    Examples:
        httpcat get https://httpbin.org/get
    """
    _execute(ctx, GetRequest.from_args, url)


@http.command("post")
@click.argument("url")
@click.argument("body", nargs=-1)
@click.pass_context
def post_cmd(ctx, url: str, body: tuple):
    """Make a POST request with key=value form fields.

    Examples:
        httpcat post https://httpbin.org/post name=test value=123
    """
    _execute(ctx, PostRequest.from_args, url, body)


@http.command("put")
@click.argument("url")
@click.argument("body", nargs=-1)
@click.pass_context
def put_cmd(ctx, url: str, body: tuple):
    """Make a PUT request with key=value form fields.

    Examples:
        httpcat put https://httpbin.org/put name=test
    """
    _execute(ctx, PutRequest.from_args, url, body)


@http.command("delete")
@click.argument("url")
@click.pass_context
def delete_cmd(ctx, url: str):
    """Make a DELETE request.

    Examples:
        httpcat delete https://httpbin.org/delete
    """
    _execute(ctx, DeleteRequest.from_args, url)


def main() -> None:
    http(prog_name="httpcat")

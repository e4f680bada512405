"""
Terminal rendering of HTTP responses.

A response is printed in three steps: the status line, the header block and
the body. The body is read last because reading it consumes the response.
"""

import re

import httpx
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound
from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from httpcat.exceptions import RenderError, TransportError
from httpcat.logging_config import get_logger


logger = get_logger(__name__)


# MIME essence -> pygments lexer name. text/plain is highlighted as html
# to match the output of earlier httpcat releases.
BODY_LEXERS = {
    "application/json": "json",
    "text/plain": "html",
}

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MIME_RE = re.compile(rf"^\s*({_TOKEN})/({_TOKEN})\s*(?:;.*)?$", re.DOTALL)


def parse_mime_type(value: str) -> str | None:
    """Return the lowercased "type/subtype" of a Content-Type value.

    Parameters such as charset are dropped. Returns None when value is not
    a MIME type.
    """
    match = _MIME_RE.match(value)
    if not match:
        return None
    return f"{match.group(1)}/{match.group(2)}".lower()


def get_content_type(response: httpx.Response) -> str | None:
    """Get the declared MIME type of a response, if it has a usable one."""
    value = response.headers.get("content-type")
    if value is None:
        return None

    mime_type = parse_mime_type(value)
    if mime_type is None:
        logger.warning("Ignoring unparseable Content-Type header: %r", value)
    return mime_type


class SyntaxHighlighter:
    """Highlights text with rich using a pygments lexer."""

    def __init__(self, theme: str = "monokai"):
        self.theme = theme

    def highlight(self, text: str, language: str) -> Text:
        """Return text highlighted as language, one styled line per input line.

        Raises:
            RenderError: no lexer is registered under language
        """
        try:
            get_lexer_by_name(language)
        except ClassNotFound as e:
            raise RenderError(f"No syntax definition found for '{language}'") from e

        syntax = Syntax(text, language, theme=self.theme, line_numbers=False)
        return syntax.highlight(text)


class ResponseRenderer:
    """Prints responses to a rich console."""

    def __init__(self, console: Console, highlighter: SyntaxHighlighter | None = None):
        self.console = console
        self.highlighter = highlighter or SyntaxHighlighter()

    async def render(self, response: httpx.Response) -> None:
        """Print status, headers and body of response, in that order."""
        self.render_status(response)
        self.render_headers(response)

        content_type = get_content_type(response)
        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to read response body: {e}") from e

        self.render_body(content_type, response.text)

    def render_status(self, response: httpx.Response) -> None:
        status = f"{response.http_version} {response.status_code} {response.reason_phrase}"
        self.console.print(Text(status.rstrip(), style="blue"))
        self.console.print()

    def render_headers(self, response: httpx.Response) -> None:
        # multi_items keeps repeated headers and the order they arrived in
        for name, value in response.headers.multi_items():
            self.console.print(Text.assemble((name, "green"), f": {value}"), soft_wrap=True)
        self.console.print()

    def render_body(self, content_type: str | None, body: str) -> None:
        """Highlight body when its MIME type has a lexer, else print it as is."""
        lexer = BODY_LEXERS.get(content_type) if content_type else None
        if lexer is None:
            self.console.out(body, highlight=False)
            return

        # long lines stay whole, never cropped to the console width
        self.console.print(self.highlighter.highlight(body, lexer), soft_wrap=True)

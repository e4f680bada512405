"""
HTTP request and response handling.

Provides:
- Validation of URL and key=value arguments
- Typed request models for GET, POST, PUT and DELETE
- An httpx-based client that sends them
- Content-type aware response rendering
"""

from httpcat.http.client import HTTPClient
from httpcat.http.models import (
    DeleteRequest,
    GetRequest,
    PostRequest,
    PutRequest,
    Request,
)
from httpcat.http.parsers import KeyValue, parse_key_value, parse_url
from httpcat.http.render import ResponseRenderer, SyntaxHighlighter

__all__ = [
    "HTTPClient",
    "DeleteRequest",
    "GetRequest",
    "PostRequest",
    "PutRequest",
    "Request",
    "KeyValue",
    "parse_key_value",
    "parse_url",
    "ResponseRenderer",
    "SyntaxHighlighter",
]

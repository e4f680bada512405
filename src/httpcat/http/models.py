"""
Typed request descriptions, one class per supported HTTP method.

Instances are built through from_args(), which validates the raw
command-line strings, so a constructed request always holds an absolute URL.
"""

from dataclasses import dataclass, field
from typing import Iterable, Union

from httpcat.http.parsers import KeyValue, parse_key_value, parse_url


@dataclass(frozen=True)
class GetRequest:
    """GET <url>"""
    url: str
    method = "GET"

    @classmethod
    def from_args(cls, url: str) -> "GetRequest":
        return cls(url=parse_url(url))


@dataclass(frozen=True)
class DeleteRequest:
    """DELETE <url>"""
    url: str
    method = "DELETE"

    @classmethod
    def from_args(cls, url: str) -> "DeleteRequest":
        return cls(url=parse_url(url))


@dataclass(frozen=True)
class _FormRequest:
    """Request carrying key=value fields sent as a form body."""
    url: str
    body: tuple[KeyValue, ...] = field(default_factory=tuple)

    @classmethod
    def from_args(cls, url: str, body: Iterable[str] = ()) -> "_FormRequest":
        """Validate url and every body argument, stopping at the first error."""
        url = parse_url(url)
        pairs = tuple(parse_key_value(arg) for arg in body)
        return cls(url=url, body=pairs)

    def form(self) -> dict[str, str]:
        """Collapse the body into form data.

        Repeated keys keep the value given last on the command line.
        """
        data: dict[str, str] = {}
        for pair in self.body:
            data[pair.key] = pair.value
        return data


@dataclass(frozen=True)
class PostRequest(_FormRequest):
    """POST <url> [key=value ...]"""
    method = "POST"


@dataclass(frozen=True)
class PutRequest(_FormRequest):
    """PUT <url> [key=value ...]"""
    method = "PUT"


Request = Union[GetRequest, PostRequest, PutRequest, DeleteRequest]

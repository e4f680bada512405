"""
Validation of raw command-line values.

Both parsers are pure: they return the validated value or raise a
ValidationError subclass carrying the offending input.
"""

from dataclasses import dataclass

import httpx

from httpcat.exceptions import MalformedKeyValueError, MalformedUrlError


@dataclass(frozen=True)
class KeyValue:
    """A single key=value body field."""
    key: str
    value: str


def parse_url(value: str) -> str:
    """Check that value is an absolute URL and return it unchanged.

    A scheme and a host are both required, so bare hostnames and paths
    such as "example.com/path" are rejected.
    """
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise MalformedUrlError(value) from e

    if not url.scheme or not url.host:
        raise MalformedUrlError(value)
    if url.port is not None and not 0 <= url.port <= 65535:
        raise MalformedUrlError(value)
    return value


def parse_key_value(value: str) -> KeyValue:
    """Split value on its first "=" into a KeyValue.

    Anything after the first "=" belongs to the value, which may be empty.
    Whitespace is kept as given.
    """
    key, sep, rest = value.partition("=")
    if not sep:
        raise MalformedKeyValueError(value)
    return KeyValue(key=key, value=rest)

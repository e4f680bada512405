"""
Exceptions raised by httpcat.

Every error that should end an invocation with a message derives from
HttpcatError. The CLI catches that base class and nothing narrower.
"""


class HttpcatError(Exception):
    """Base exception for httpcat errors."""


class ValidationError(HttpcatError):
    """Raised when a command-line argument fails validation."""

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class MalformedUrlError(ValidationError):
    """Raised when a URL is not absolute (scheme and host required)."""

    def __init__(self, value: str):
        super().__init__(f"Invalid URL: {value}", value)


class MalformedKeyValueError(ValidationError):
    """Raised when a body argument is not in key=value form."""

    def __init__(self, value: str):
        super().__init__(f"Invalid key-value pair: {value}", value)


class TransportError(HttpcatError):
    """Raised when the HTTP exchange fails at the network or protocol level."""


class RenderError(HttpcatError):
    """Raised when a response body cannot be rendered."""

"""Error types raised by the YouAreEll client."""
from typing import Optional


class YouAreEllError(Exception):
    """Base class for every error the client reports to the user."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class CommandError(YouAreEllError):
    """A command line was rejected before contacting the server."""


class UsageError(CommandError):
    pass


class ArgumentCountError(CommandError):
    def __init__(self, expected: str, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} args; got {actual}")


class MalformedArgumentsError(CommandError):
    pass


class UnknownCommandError(CommandError):
    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"unknown command: {verb}")


class APIError(YouAreEllError):
    """A request to the server could not be completed."""


class TransportError(APIError):
    """Network-level failure: DNS, refused connection, timeout."""


class HTTPStatusError(APIError):
    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"http status: {status_code}")


class EncodeError(APIError):
    pass


class DecodeError(APIError):
    pass

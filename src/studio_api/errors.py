"""Error taxonomy shared by the core, the services and the routers."""

from typing import Optional


class StudioError(Exception):
    """Base class for errors raised by the studio API."""


class InvalidArgument(StudioError, ValueError):
    """The caller passed a value the operation cannot work with."""


class UpstreamFailure(StudioError):
    """A call to the language model failed (transport, auth or malformed output)."""


class ParseError(StudioError):
    """Structured model output could not be decoded or validated."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw

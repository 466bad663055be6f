class RelayError(Exception):
    """Base class for failures while serving a relay request."""


class UpstreamError(RelayError):
    """The Invidious instance could not be reached or answered badly."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ExtractionError(RelayError):
    """The upstream payload did not have the expected shape."""

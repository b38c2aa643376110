"""Errors raised by the puzzle site client."""

from .base import AocRunnerError


class ServiceError(AocRunnerError):
    """Raised when the puzzle site answers with an unexpected status."""

    def __init__(self, url: str, status: int):
        super().__init__(f"HTTP {status} at {url}", details={"url": url, "status": str(status)})
        self.url = url
        self.status = status

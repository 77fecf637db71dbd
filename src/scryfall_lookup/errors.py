"""Exception hierarchy for the Scryfall lookup client.

Every failure the client reports itself is a ServiceError carrying a
human-readable message, a numeric status and a machine-readable code.
Transport failures from requests are not wrapped.
"""

from typing import Any, Dict, Optional

DEFAULT_ERROR_MESSAGE = "Request failed"
NO_IMAGE_MESSAGE = "No image data available for this card"


class ServiceError(Exception):
    """Base error for a failed card lookup."""

    def __init__(self, details: str = DEFAULT_ERROR_MESSAGE, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(details)
        self.details = details
        self.status = status
        self.code = code

    def to_dict(self) -> Dict[str, Any]:
        return {"details": self.details, "status": self.status, "code": self.code}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(details={self.details!r}, status={self.status!r}, code={self.code!r})"


class UpstreamRequestFailed(ServiceError):
    """The service answered with a non-2xx status."""

    pass


class MalformedResponse(ServiceError):
    """A 2xx response whose body is not JSON or not shaped as expected."""

    def __init__(self, details: str, status: Optional[int] = None, code: Optional[str] = "malformed_response"):
        super().__init__(details, status, code)


class NoDisplayableImage(ServiceError):
    """A single-card result carried neither top-level nor card-face images."""

    def __init__(self, details: str = NO_IMAGE_MESSAGE, status: Optional[int] = None, code: Optional[str] = "no_image"):
        super().__init__(details, status, code)

"""Exceptions raised by the Pterodactyl Application API client.

Every failure of a request ends up as one of the classes below. Transport
problems, undecodable bodies and non-success statuses are never surfaced as
raw ``httpx`` or ``pydantic`` exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import PanelErrorDetail

HTTP_NOT_FOUND = 404


class PterodactylError(Exception):
    """Base class for all client errors."""


class NetworkError(PterodactylError):
    """Raised when no response was obtained (DNS, connect, timeout)."""


class DecodeError(PterodactylError):
    """Raised when a response body does not match the expected shape."""


class PanelError(PterodactylError):
    """Raised for a non-success status carrying the panel's error envelope.

    Attributes:
        status_code: HTTP status of the response.
        errors: Error entries exactly as returned by the panel.
    """

    def __init__(self, status_code: int, errors: list[PanelErrorDetail]):
        self.status_code = status_code
        self.errors = errors
        details = "; ".join(f"{error.code}: {error.detail}" for error in errors)
        super().__init__(f"Panel returned {status_code}: {details}")

    @property
    def not_found(self) -> bool:
        """Whether the panel reported the resource as missing."""
        return self.status_code == HTTP_NOT_FOUND

    @property
    def codes(self) -> list[str]:
        """Error codes reported by the panel, in order."""
        return [error.code for error in self.errors]


class HttpError(PterodactylError):
    """Raised for a non-success status whose body is not a panel error.

    Attributes:
        status_code: HTTP status of the response.
        body: Raw response text, possibly empty.
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}")

    @property
    def not_found(self) -> bool:
        """Whether the status was 404."""
        return self.status_code == HTTP_NOT_FOUND

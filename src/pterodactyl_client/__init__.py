"""Pterodactyl Application API client.

Typed async client for the panel's Application API (users, locations,
nodes and node allocations), built on httpx and pydantic.

Exports:
    Client: HTTP client with authentication, error mapping and rate-limit
        bookkeeping.
    ClientBuilder: Builder normalizing the panel URL and creating a Client.
    errors: Exception hierarchy raised by every operation.
    types: Envelope models for API responses.
"""

from . import errors, types
from .application import (
    Allocation,
    Application,
    ExternalId,
    Location,
    Node,
    User,
    UserKey,
)
from .client import API_PATH, Client, ClientBuilder
from .errors import (
    DecodeError,
    HttpError,
    NetworkError,
    PanelError,
    PterodactylError,
)
from .ratelimit import RateLimit

__version__ = "0.1.0"

__all__ = [
    "API_PATH",
    "Allocation",
    "Application",
    "Client",
    "ClientBuilder",
    "DecodeError",
    "ExternalId",
    "HttpError",
    "Location",
    "NetworkError",
    "Node",
    "PanelError",
    "PterodactylError",
    "RateLimit",
    "User",
    "UserKey",
    "errors",
    "types",
]

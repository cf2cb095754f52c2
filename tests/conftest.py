"""Shared fixtures: a client wired to an in-process mock transport."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from pterodactyl_client import Client, ClientBuilder

PANEL_URL = "https://panel.example.com"
API_KEY = "ptla_testkey"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests received by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(
    sent_requests: list[httpx.Request],
) -> Callable[[Handler], Client]:
    """Factory building a Client whose requests are answered by a handler."""

    def factory(handler: Handler) -> Client:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(recording_handler),
        )
        return (
            ClientBuilder(PANEL_URL, API_KEY)
            .http_client(http_client, owned=True)
            .build()
        )

    return factory


def object_envelope(kind: str, attributes: dict[str, Any]) -> dict[str, Any]:
    return {"object": kind, "attributes": attributes}


def list_envelope(kind: str, items: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "object": "list",
        "data": [object_envelope(kind, item) for item in items],
        "meta": {
            "pagination": {
                "total": len(items),
                "count": len(items),
                "per_page": 50,
                "current_page": 1,
                "total_pages": 1,
                "links": {},
            },
        },
    }


@pytest.fixture
def wrap_object() -> Callable[[str, dict[str, Any]], dict[str, Any]]:
    """Wrap attributes in a single-object envelope."""
    return object_envelope


@pytest.fixture
def wrap_list() -> Callable[[str, list[dict[str, Any]]], dict[str, Any]]:
    """Wrap a list of attributes in a list envelope."""
    return list_envelope


@pytest.fixture
def location_attributes() -> dict[str, Any]:
    """Attributes of location 5 as returned by the panel."""
    return {
        "id": 5,
        "short": "us",
        "long": "United States",
        "created_at": "2023-01-01T00:00:00+00:00",
        "updated_at": "2023-01-01T00:00:00+00:00",
    }


@pytest.fixture
def user_attributes() -> dict[str, Any]:
    """Attributes of user 9 as returned by the panel."""
    return {
        "id": 9,
        "external_id": "billing-42",
        "uuid": "c4022c6c-9bf1-4a23-bff9-519cceb38335",
        "username": "codeco",
        "email": "codeco@example.com",
        "first_name": "Code",
        "last_name": "Co",
        "language": "en",
        "root_admin": False,
        "2fa": True,
        "created_at": "2023-01-02T10:20:30+00:00",
        "updated_at": "2023-02-03T11:22:33+00:00",
    }


@pytest.fixture
def node_attributes() -> dict[str, Any]:
    """Attributes of node 3 as returned by the panel."""
    return {
        "id": 3,
        "uuid": "1046d1d1-b8ef-4771-82b1-2b5946d33397",
        "public": True,
        "name": "node-us-1",
        "description": None,
        "location_id": 5,
        "fqdn": "node1.example.com",
        "scheme": "https",
        "behind_proxy": False,
        "maintenance_mode": False,
        "memory": 16384,
        "memory_overallocate": 0,
        "disk": 102400,
        "disk_overallocate": -1,
        "upload_size": 100,
        "daemon_listen": 8080,
        "daemon_sftp": 2022,
        "daemon_base": "/var/lib/pterodactyl/volumes",
        "created_at": "2023-01-01T00:00:00+00:00",
        "updated_at": "2023-03-01T12:00:00+00:00",
    }


@pytest.fixture
def allocation_attributes() -> list[dict[str, Any]]:
    """Two allocations of node 3, one assigned."""
    return [
        {
            "id": 11,
            "ip": "10.0.0.5",
            "alias": None,
            "port": 25565,
            "notes": None,
            "assigned": True,
        },
        {
            "id": 12,
            "ip": "10.0.0.5",
            "alias": "mc.example.com",
            "port": 25566,
            "notes": "spare",
            "assigned": False,
        },
    ]

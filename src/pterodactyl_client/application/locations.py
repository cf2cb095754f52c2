"""Operations for endpoints under ``api/application/locations``."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ..types import ListEnvelope, ObjectEnvelope, Resource

if TYPE_CHECKING:
    from ..client import Client


class Location(Resource):
    """A location grouping nodes, identified by a short code."""

    id: int
    short: str
    long: str
    created_at: datetime
    updated_at: datetime


async def list_locations(client: Client) -> list[Location]:
    """Retrieve the first page of locations."""
    envelope = await client.request("GET", "locations", ListEnvelope[Location])
    return envelope.items


async def get_location(client: Client, location_id: int) -> Location:
    """Retrieve a location by id."""
    envelope = await client.request(
        "GET", f"locations/{location_id}", ObjectEnvelope[Location]
    )
    return envelope.attributes


async def create_location(client: Client, short: str, long: str) -> Location:
    """Create a location with the given short code and description."""
    envelope = await client.request_with_body(
        "POST",
        "locations",
        {"short": short, "long": long},
        ObjectEnvelope[Location],
    )
    return envelope.attributes


async def update_location(
    client: Client, location_id: int, short: str, long: str
) -> Location:
    """Replace a location's short code and description."""
    envelope = await client.request_with_body(
        "PATCH",
        f"locations/{location_id}",
        {"short": short, "long": long},
        ObjectEnvelope[Location],
    )
    return envelope.attributes


async def delete_location(client: Client, location_id: int) -> None:
    """Remove a location from the panel."""
    await client.request("DELETE", f"locations/{location_id}")

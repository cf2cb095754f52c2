"""Operations for endpoints under ``api/application/nodes/{node}/allocations``."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..types import ListEnvelope, Resource

if TYPE_CHECKING:
    from ..client import Client


class Allocation(Resource):
    """An ip:port pair on a node that can be assigned to a server."""

    id: int
    ip: str
    alias: str | None = None
    port: int
    notes: str | None = None
    assigned: bool


def _allocations_path(node_id: int) -> str:
    return f"nodes/{node_id}/allocations"


async def list_allocations(client: Client, node_id: int) -> list[Allocation]:
    """Retrieve the first page of allocations of a node."""
    envelope = await client.request(
        "GET", _allocations_path(node_id), ListEnvelope[Allocation]
    )
    return envelope.items


async def create_allocations(
    client: Client, node_id: int, ip: str, ports: Sequence[str]
) -> None:
    """Create allocations on a node.

    Args:
        client: Client to send the request with.
        node_id: Id of the node owning the allocations.
        ip: IP address the ports are bound to.
        ports: Ports or port ranges (e.g., "25565" or "25565-25570"),
            sent as given.
    """
    await client.request_with_body(
        "POST",
        _allocations_path(node_id),
        {"ip": ip, "ports": list(ports)},
    )


async def delete_allocation(client: Client, node_id: int, allocation_id: int) -> None:
    """Remove an allocation from a node."""
    await client.request("DELETE", f"{_allocations_path(node_id)}/{allocation_id}")

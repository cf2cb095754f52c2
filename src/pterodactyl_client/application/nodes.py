"""Operations for endpoints under ``api/application/nodes``.

Memory and disk values are in MiB as reported by the panel. Overallocation
values are percentages, where -1 disables the limit check.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from ..types import ListEnvelope, ObjectEnvelope, Resource

if TYPE_CHECKING:
    from ..client import Client


class Node(Resource):
    """A machine running the panel's daemon, hosting servers."""

    # Identity
    id: int
    uuid: UUID
    public: bool
    name: str
    description: str | None = None

    # Placement
    location_id: int
    fqdn: str
    scheme: str
    behind_proxy: bool
    maintenance_mode: bool

    # Capacity
    memory: int
    memory_overallocate: int
    disk: int
    disk_overallocate: int
    upload_size: int

    # Daemon connectivity
    daemon_listen: int
    daemon_sftp: int
    daemon_base: str

    created_at: datetime
    updated_at: datetime


async def list_nodes(client: Client) -> list[Node]:
    """Retrieve the first page of nodes."""
    envelope = await client.request("GET", "nodes", ListEnvelope[Node])
    return envelope.items


async def get_node(client: Client, node_id: int) -> Node:
    """Retrieve a node by id."""
    envelope = await client.request("GET", f"nodes/{node_id}", ObjectEnvelope[Node])
    return envelope.attributes


async def create_node(
    client: Client,
    name: str,
    location_id: int,
    fqdn: str,
    scheme: str,
    memory: int,
    memory_overallocate: int,
    disk: int,
    disk_overallocate: int,
    upload_size: int,
    daemon_sftp: int,
    daemon_listen: int,
) -> Node:
    """Create a node in the given location."""
    envelope = await client.request_with_body(
        "POST",
        "nodes",
        {
            "name": name,
            "location_id": location_id,
            "fqdn": fqdn,
            "scheme": scheme,
            "memory": memory,
            "memory_overallocate": memory_overallocate,
            "disk": disk,
            "disk_overallocate": disk_overallocate,
            "upload_size": upload_size,
            "daemon_sftp": daemon_sftp,
            "daemon_listen": daemon_listen,
        },
        ObjectEnvelope[Node],
    )
    return envelope.attributes


async def update_node(
    client: Client,
    node_id: int,
    name: str,
    description: str,
    location_id: int,
    fqdn: str,
    scheme: str,
    behind_proxy: bool,
    maintenance_mode: bool,
    memory: int,
    memory_overallocate: int,
    disk: int,
    disk_overallocate: int,
    upload_size: int,
    daemon_sftp: int,
    daemon_listen: int,
) -> Node:
    """Replace a node's settings. All fields are sent, the update is not partial."""
    envelope = await client.request_with_body(
        "PATCH",
        f"nodes/{node_id}",
        {
            "name": name,
            "description": description,
            "location_id": location_id,
            "fqdn": fqdn,
            "scheme": scheme,
            "behind_proxy": behind_proxy,
            "maintenance_mode": maintenance_mode,
            "memory": memory,
            "memory_overallocate": memory_overallocate,
            "disk": disk,
            "disk_overallocate": disk_overallocate,
            "upload_size": upload_size,
            "daemon_sftp": daemon_sftp,
            "daemon_listen": daemon_listen,
        },
        ObjectEnvelope[Node],
    )
    return envelope.attributes


async def delete_node(client: Client, node_id: int) -> None:
    """Remove a node from the panel."""
    await client.request("DELETE", f"nodes/{node_id}")

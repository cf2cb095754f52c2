"""Tests for node operations against a mocked panel."""

import asyncio
import json

import httpx
import pytest

from pterodactyl_client import DecodeError
from pterodactyl_client.application import nodes

NODE_SETTINGS = {
    "name": "node-us-1",
    "location_id": 5,
    "fqdn": "node1.example.com",
    "scheme": "https",
    "memory": 16384,
    "memory_overallocate": 0,
    "disk": 102400,
    "disk_overallocate": -1,
    "upload_size": 100,
    "daemon_sftp": 2022,
    "daemon_listen": 8080,
}


def test_node_decodes_all_fields(node_attributes):
    """Every node field is decoded; a null description is allowed."""
    node = nodes.Node.model_validate_json(json.dumps(node_attributes))

    assert node.id == 3
    assert node.location_id == 5
    assert node.description is None
    assert node.disk == 102400
    assert node.disk_overallocate == -1
    assert node.daemon_base == "/var/lib/pterodactyl/volumes"


def test_list_nodes(make_client, sent_requests, wrap_list, node_attributes):
    """list_nodes returns the page's nodes in order."""
    second = {**node_attributes, "id": 4, "name": "node-us-2"}

    async def scenario():
        async with make_client(
            lambda request: httpx.Response(
                200, json=wrap_list("node", [node_attributes, second])
            ),
        ) as client:
            return await nodes.list_nodes(client)

    result = asyncio.run(scenario())

    assert [node.name for node in result] == ["node-us-1", "node-us-2"]
    assert sent_requests[0].url.path == "/api/application/nodes"


def test_get_node(make_client, sent_requests, wrap_object, node_attributes):
    """get_node requests nodes/{id}."""

    async def scenario():
        async with make_client(
            lambda request: httpx.Response(200, json=wrap_object("node", node_attributes)),
        ) as client:
            return await client.application.get_node(3)

    node = asyncio.run(scenario())

    assert node.fqdn == "node1.example.com"
    assert sent_requests[0].url.path == "/api/application/nodes/3"


def test_get_node_with_mistyped_field_raises_decode_error(
    make_client, wrap_object, node_attributes
):
    """A non-boolean flag is a decode failure, not a silent default."""
    node_attributes["behind_proxy"] = "sometimes"

    async def scenario():
        async with make_client(
            lambda request: httpx.Response(200, json=wrap_object("node", node_attributes)),
        ) as client:
            await nodes.get_node(client, 3)

    with pytest.raises(DecodeError):
        asyncio.run(scenario())


def test_create_node_sends_settings(
    make_client, sent_requests, wrap_object, node_attributes
):
    """create_node posts the settings exactly as given."""

    async def scenario():
        async with make_client(
            lambda request: httpx.Response(201, json=wrap_object("node", node_attributes)),
        ) as client:
            return await nodes.create_node(client, **NODE_SETTINGS)

    node = asyncio.run(scenario())

    request = sent_requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/application/nodes"
    assert json.loads(request.content) == NODE_SETTINGS
    assert node.id == 3


def test_update_node_sends_full_body(
    make_client, sent_requests, wrap_object, node_attributes
):
    """update_node patches every setting including flags and description."""
    settings = {
        **NODE_SETTINGS,
        "description": "Primary US node",
        "behind_proxy": True,
        "maintenance_mode": True,
    }
    updated = {**node_attributes, **settings}

    async def scenario():
        async with make_client(
            lambda request: httpx.Response(200, json=wrap_object("node", updated)),
        ) as client:
            return await client.application.update_node(3, **settings)

    node = asyncio.run(scenario())

    request = sent_requests[0]
    assert request.method == "PATCH"
    assert request.url.path == "/api/application/nodes/3"
    assert json.loads(request.content) == settings
    assert node.maintenance_mode is True
    assert node.description == "Primary US node"


def test_delete_node(make_client, sent_requests):
    """delete_node sends DELETE to nodes/{id}."""

    async def scenario():
        async with make_client(lambda request: httpx.Response(204)) as client:
            return await nodes.delete_node(client, 3)

    assert asyncio.run(scenario()) is None
    assert sent_requests[0].method == "DELETE"
    assert sent_requests[0].url.path == "/api/application/nodes/3"

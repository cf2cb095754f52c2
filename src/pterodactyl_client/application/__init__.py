"""Application API resources.

Each module defines the record type of one resource and async functions
taking a :class:`~pterodactyl_client.client.Client` as first argument.
:class:`Application` exposes the same functions with the client already
bound, so ``client.application.get_location(5)`` is equivalent to
``locations.get_location(client, 5)``.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from . import allocations, locations, nodes, users
from .allocations import Allocation
from .locations import Location
from .nodes import Node
from .users import ExternalId, User, UserKey

if TYPE_CHECKING:
    from ..client import Client


class _BoundOperation:
    """Descriptor binding a resource function to the owning client."""

    def __init__(self, func: Callable[..., Any]):
        self._func = func
        functools.update_wrapper(self, func)

    def __get__(self, instance: Application | None, owner: type | None = None):
        if instance is None:
            return self
        return functools.partial(self._func, instance.client)


class Application:
    """All Application API operations bound to one client."""

    def __init__(self, client: Client):
        self.client = client

    list_users = _BoundOperation(users.list_users)
    get_user = _BoundOperation(users.get_user)
    get_user_external = _BoundOperation(users.get_user_external)
    create_user = _BoundOperation(users.create_user)
    update_user = _BoundOperation(users.update_user)
    delete_user = _BoundOperation(users.delete_user)

    list_locations = _BoundOperation(locations.list_locations)
    get_location = _BoundOperation(locations.get_location)
    create_location = _BoundOperation(locations.create_location)
    update_location = _BoundOperation(locations.update_location)
    delete_location = _BoundOperation(locations.delete_location)

    list_nodes = _BoundOperation(nodes.list_nodes)
    get_node = _BoundOperation(nodes.get_node)
    create_node = _BoundOperation(nodes.create_node)
    update_node = _BoundOperation(nodes.update_node)
    delete_node = _BoundOperation(nodes.delete_node)

    list_allocations = _BoundOperation(allocations.list_allocations)
    create_allocations = _BoundOperation(allocations.create_allocations)
    delete_allocation = _BoundOperation(allocations.delete_allocation)


__all__ = [
    "Allocation",
    "Application",
    "ExternalId",
    "Location",
    "Node",
    "User",
    "UserKey",
    "allocations",
    "locations",
    "nodes",
    "users",
]

"""Operations for endpoints under ``api/application/users``."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from urllib.parse import quote
from uuid import UUID

from pydantic import Field

from ..types import ListEnvelope, ObjectEnvelope, Resource

if TYPE_CHECKING:
    from ..client import Client


class User(Resource):
    """A panel user account."""

    id: int
    external_id: str | None = None
    uuid: UUID
    username: str
    email: str
    first_name: str
    last_name: str
    language: str
    root_admin: bool
    two_factor_enabled: bool = Field(alias="2fa")
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ExternalId:
    """External identifier assigned to a user by a third-party system."""

    value: str


UserKey = int | ExternalId


def user_path(key: UserKey) -> str:
    """Resolve a user key to its path under the API root.

    Args:
        key: Numeric panel id or an :class:`ExternalId`.

    Returns:
        Path such as ``users/9``.

    Raises:
        TypeError: If key is neither an int nor an ExternalId.
    """
    if isinstance(key, ExternalId):
        return f"users/{quote(key.value, safe='')}"
    if isinstance(key, int) and not isinstance(key, bool):
        return f"users/{key}"
    msg = f"Unsupported user key: {key!r}"
    raise TypeError(msg)


async def list_users(client: Client) -> list[User]:
    """Retrieve the first page of users."""
    envelope = await client.request("GET", "users", ListEnvelope[User])
    return envelope.items


async def get_user(client: Client, key: UserKey) -> User:
    """Retrieve a user by numeric id or external id."""
    envelope = await client.request("GET", user_path(key), ObjectEnvelope[User])
    return envelope.attributes


async def get_user_external(client: Client, external_id: str) -> User:
    """Retrieve a user by its external id."""
    return await get_user(client, ExternalId(external_id))


async def create_user(
    client: Client,
    email: str,
    username: str,
    first_name: str,
    last_name: str,
) -> User:
    """Create a user; the panel assigns id, uuid and timestamps."""
    envelope = await client.request_with_body(
        "POST",
        "users",
        {
            "email": email,
            "username": username,
            "first_name": first_name,
            "last_name": last_name,
        },
        ObjectEnvelope[User],
    )
    return envelope.attributes


async def update_user(
    client: Client,
    key: UserKey,
    email: str,
    username: str,
    first_name: str,
    last_name: str,
    language: str,
    password: str,
) -> User:
    """Replace a user's profile. All fields are sent, the update is not partial."""
    envelope = await client.request_with_body(
        "PATCH",
        user_path(key),
        {
            "email": email,
            "username": username,
            "first_name": first_name,
            "last_name": last_name,
            "language": language,
            "password": password,
        },
        ObjectEnvelope[User],
    )
    return envelope.attributes


async def delete_user(client: Client, key: UserKey) -> None:
    """Remove a user from the panel."""
    await client.request("DELETE", user_path(key))

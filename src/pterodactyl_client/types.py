"""Envelope types for Pterodactyl Application API responses.

The panel wraps every resource in a small JSON envelope. Single objects
arrive as ``{"object": ..., "attributes": {...}}`` and collections as
``{"object": "list", "data": [<object envelope>, ...], "meta": {...}}``.
Errors use ``{"errors": [{"code": ..., "status": ..., "detail": ...}]}``.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound=BaseModel)


class Resource(BaseModel):
    """Base for records decoded from the panel.

    Records are immutable once decoded. Wire aliases (for example ``2fa``)
    are accepted alongside the Python field names. Validation is strict:
    ``"5"`` is not an id and ``0`` is not a timestamp. In JSON, timestamps
    and UUIDs are read from their ISO and canonical string forms.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)


class ObjectEnvelope(BaseModel, Generic[T]):
    """Single-object envelope carrying the payload under ``attributes``."""

    model_config = ConfigDict(strict=True)

    object: str | None = None
    attributes: T


class ListEnvelope(BaseModel, Generic[T]):
    """List envelope carrying one page of object envelopes under ``data``.

    ``meta`` holds the panel's pagination block and is not interpreted.
    """

    model_config = ConfigDict(strict=True)

    object: str | None = None
    data: list[ObjectEnvelope[T]]
    meta: dict[str, Any] = Field(default_factory=dict)

    @property
    def items(self) -> list[T]:
        """Unwrapped payloads, in response order."""
        return [entry.attributes for entry in self.data]


class PanelErrorDetail(BaseModel):
    """One entry of the panel's ``errors`` array."""

    code: str
    status: str | None = None
    detail: str
    meta: dict[str, Any] | None = None


class ErrorEnvelope(BaseModel):
    """Structured error body returned with non-success statuses."""

    errors: list[PanelErrorDetail] = Field(min_length=1)

"""JSON:API envelope models using Pydantic v2.

Every successful response is a ``{meta?, data, included, links}`` envelope;
every failure carries an ``errors`` array instead.

Reference: https://jsonapi.org/format/
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from butterfly_client.schemas.resources import Resource

DataT = TypeVar("DataT")


class ResponseMeta(BaseModel):
    """Pagination/info metadata attached to list responses."""

    total: int | None = None
    size: int | None = None


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard API response envelope.

    ``data`` is a single resource, a list of resources or a scalar depending
    on the endpoint. ``included`` holds side-loaded resources referenced by
    relationships. ``links`` carries navigation URLs (``next``, ``prev``,
    ``self``).
    """

    meta: ResponseMeta | None = None
    data: DataT
    included: list[Resource] = Field(default_factory=list)
    links: dict[str, str | None] = Field(default_factory=dict)


class RawApiResponse(ApiResponse[DataT], Generic[DataT]):
    """Envelope whose ``included`` resources are kept as plain mappings."""

    included: list[dict[str, Any]] = Field(default_factory=list)


class ApiErrorObject(BaseModel):
    """A single JSON:API error object.

    Only ``status`` is required; numeric-string statuses are coerced. A
    missing or null ``title``/``detail`` stays ``None`` and other scalars are
    turned into strings.
    """

    status: int
    title: str | None = None
    detail: str | None = None

    @field_validator("title", "detail", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)

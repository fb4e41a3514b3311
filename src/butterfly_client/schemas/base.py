"""Shared Pydantic base and identity pointers.

The API speaks camelCase (``publishedAt``, ``parentCategory``); models use
snake_case attribute names and accept either spelling on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ButterflyModel(BaseModel):
    """Immutable base model mapping snake_case fields to camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Related(ButterflyModel):
    """A lightweight pointer to another resource, identified by ``(id, type)``."""

    id: int | str
    type: str


class ToOne(ButterflyModel):
    """A to-one relationship; ``data`` is ``None`` when nothing is linked."""

    data: Related | None = None


class ToMany(ButterflyModel):
    """A to-many relationship."""

    data: list[Related] = Field(default_factory=list)

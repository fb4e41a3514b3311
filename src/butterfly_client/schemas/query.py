"""Query descriptor models for list endpoints.

Filters accept dynamically named taxonomy keys of the shape
``terms<taxonomyId>`` on top of the declared fields; they are stored as
model extras. ``QueryFilter.as_mapping`` returns the filters in the order the
caller gave them, declared fields and taxonomy keys interleaved.
"""

from __future__ import annotations

import re

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator

_TERMS_KEY_PATTERN = re.compile(r"^terms<[^>]+>$")

FilterValue = int | str | list[int | str]


class QueryPage(BaseModel):
    """Pagination options."""

    model_config = ConfigDict(extra="forbid")

    size: int | None = None
    number: int | None = None


class QueryFilter(BaseModel):
    """Filter options; extra keys must read ``terms<taxonomyId>``."""

    model_config = ConfigDict(extra="allow")

    id: FilterValue | None = None
    types: FilterValue | None = None
    query: str | None = None
    categories: FilterValue | None = None
    taxonomies: FilterValue | None = None
    authors: FilterValue | None = None
    before: int | str | None = None
    after: int | str | None = None
    flags: FilterValue | None = None

    _key_order: tuple[str, ...] = PrivateAttr(default=())

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler: Any) -> QueryFilter:
        instance = handler(data)
        if isinstance(data, Mapping):
            instance._key_order = tuple(str(key) for key in data)
        return instance

    @model_validator(mode="after")
    def _check_terms_keys(self) -> QueryFilter:
        for key, value in (self.model_extra or {}).items():
            if not _TERMS_KEY_PATTERN.match(key):
                raise ValueError(
                    f"Unknown filter '{key}': extra filters must read 'terms<taxonomyId>'"
                )
            if not isinstance(value, (int, str, list)):
                raise ValueError(f"Invalid value for filter '{key}': {value!r}")
        return self

    def as_mapping(self) -> dict[str, Any]:
        """Return the set filters, in the order they were given."""
        values = self.model_dump(exclude_none=True)
        ordered = {key: values.pop(key) for key in self._key_order if key in values}
        ordered.update(values)
        return ordered


class Query(BaseModel):
    """Query parameters for API requests.

    Attributes:
        include: Comma-separated relationships to side-load. When omitted the
            server includes every relationship.
        sort: Field to sort by; prefix with ``-`` for descending order.
        page: Pagination options.
        filter: Filter options.
    """

    model_config = ConfigDict(extra="forbid")

    include: str | None = None
    sort: str | None = None
    page: QueryPage | None = None
    filter: QueryFilter | None = None

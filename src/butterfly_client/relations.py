"""Helpers for walking relationships inside a response.

Responses are denormalized: relationships hold ``{id, type}`` pointers and the
pointed-to resources travel in the envelope's ``included`` list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from butterfly_client.schemas.base import Related
from butterfly_client.schemas.resources import Category

logger = logging.getLogger(__name__)

ResourceT = TypeVar("ResourceT")


def get_related(
    related: Related | None,
    included: Iterable[ResourceT],
) -> ResourceT | None:
    """Return the first resource of ``included`` matching ``related``.

    Args:
        related: Pointer taken from a relationship's ``data``. ``None`` is
            accepted and yields ``None``.
        included: Pool of resources, typically ``response.included``.

    Returns:
        The matching resource, or ``None`` if the pointer is empty or nothing
        in the pool has the same ``(id, type)``.
    """
    if related is None:
        return None

    return next(
        (
            resource
            for resource in included
            if resource.id == related.id and resource.type == related.type
        ),
        None,
    )


def get_category_children_ids(
    category: Category,
    categories: Sequence[Category],
) -> list[int]:
    """Collect a category id followed by the ids of all of its descendants.

    The walk is depth-first, pre-order: each child is listed right before its
    own descendants, and siblings keep their order in ``categories``. The
    starting category does not need to be part of ``categories``.

    Args:
        category: Root of the subtree.
        categories: Flat list of every category, linked by ``parent_category``.

    Returns:
        ``[category.id, *descendant_ids]``.
    """
    children_ids: list[int] = [category.id]
    seen: set[int] = {category.id}

    def find_children(parent_id: int) -> None:
        for child in categories:
            parent = child.relationships.parent_category.data
            if parent is None or parent.id != parent_id:
                continue
            if child.id in seen:
                logger.warning(
                    "Category %s already collected under %s, skipping cycle",
                    child.id,
                    category.id,
                )
                continue
            seen.add(child.id)
            children_ids.append(child.id)
            find_children(child.id)

    find_children(category.id)
    return children_ids


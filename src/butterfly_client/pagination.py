"""Pagination link handling.

List responses expose ``links.next``; it may be a server-relative path or an
absolute URL on the API domain.
"""

from __future__ import annotations

import httpx


def link_to_path(link: str) -> str:
    """Reduce a pagination link to a server-relative path with its query.

    Args:
        link: Value of ``links.next`` (or ``prev``/``self``).

    Returns:
        The path and query of an absolute URL, or ``link`` unchanged when it
        is already relative.
    """
    url = httpx.URL(link)
    if not url.is_absolute_url:
        return link
    return url.raw_path.decode("ascii")

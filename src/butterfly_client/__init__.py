"""Typed async client for the Butterfly content API."""

from butterfly_client.client import Client, raise_for_api_error
from butterfly_client.config import ClientSettings, get_settings
from butterfly_client.errors import (
    ApiError,
    ButterflyError,
    NetworkError,
    RedirectError,
    UsageError,
)
from butterfly_client.media import get_media_url
from butterfly_client.pagination import link_to_path
from butterfly_client.query import encode_query
from butterfly_client.relations import get_category_children_ids, get_related

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ButterflyError",
    "Client",
    "ClientSettings",
    "NetworkError",
    "RedirectError",
    "UsageError",
    "__version__",
    "encode_query",
    "get_category_children_ids",
    "get_media_url",
    "get_related",
    "get_settings",
    "link_to_path",
    "raise_for_api_error",
]

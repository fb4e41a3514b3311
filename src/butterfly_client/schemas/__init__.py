"""Pydantic schemas for API resources, envelopes and queries."""

from butterfly_client.schemas.base import ButterflyModel, Related, ToMany, ToOne
from butterfly_client.schemas.jsonapi import (
    ApiErrorObject,
    ApiResponse,
    RawApiResponse,
    ResponseMeta,
)
from butterfly_client.schemas.query import Query, QueryFilter, QueryPage
from butterfly_client.schemas.resources import (
    Audio,
    Author,
    Category,
    Fingerprints,
    Image,
    Media,
    Post,
    Property,
    Resource,
    Syndicate,
    SyndicateAuthor,
    SyndicatePost,
    SyndicateTerm,
    Taxonomy,
    Term,
    Video,
)

__all__ = [
    "ApiErrorObject",
    "ApiResponse",
    "Audio",
    "Author",
    "ButterflyModel",
    "Category",
    "Fingerprints",
    "Image",
    "Media",
    "Post",
    "Property",
    "Query",
    "QueryFilter",
    "QueryPage",
    "RawApiResponse",
    "Related",
    "Resource",
    "ResponseMeta",
    "Syndicate",
    "SyndicateAuthor",
    "SyndicatePost",
    "SyndicateTerm",
    "Taxonomy",
    "Term",
    "ToMany",
    "ToOne",
    "Video",
]

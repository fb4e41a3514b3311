"""Pydantic v2 models for every resource the Butterfly API serves.

Each resource follows the ``{id, type, attributes, relationships}`` envelope.
``Resource`` is a tagged union keyed on ``type``; term resources carry a
taxonomy-scoped type (``term<taxonomyId>``) and are routed by prefix.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag

from butterfly_client.schemas.base import ButterflyModel, Related, ToMany, ToOne
from butterfly_client.schemas.post import BodyBlock

CustomAttr = Union[bool, int, float, str, list[str], list[int], Related, list[Related]]


# ---------------------------------------------------------------------------
# Property / Author / Category
# ---------------------------------------------------------------------------


class PropertyAttributes(ButterflyModel):
    title: str
    description: str
    custom: dict[str, CustomAttr] = Field(default_factory=dict)


class Property(ButterflyModel):
    """The site property, served at the API root."""

    id: str
    type: Literal["property"]
    attributes: PropertyAttributes
    relationships: dict[str, Any] = Field(default_factory=dict)


class AuthorAttributes(ButterflyModel):
    name: str
    resume: str | None = None
    url: str | None = None
    email: str | None = None
    telephone: str | None = None
    type: Literal["person", "organization"] = "person"
    job_title: str | None = None
    custom: dict[str, CustomAttr] = Field(default_factory=dict)


class AuthorRelationships(ButterflyModel):
    thumbnail: ToOne = Field(default_factory=ToOne)


class Author(ButterflyModel):
    id: str
    type: Literal["author"]
    attributes: AuthorAttributes
    relationships: AuthorRelationships = Field(default_factory=AuthorRelationships)


class CategoryAttributes(ButterflyModel):
    name: str
    description: str | None = None
    path: str = Field(pattern=r"^/")
    slug: str
    custom: dict[str, CustomAttr] = Field(default_factory=dict)


class CategoryRelationships(ButterflyModel):
    thumbnail: ToOne = Field(default_factory=ToOne)
    parent_category: ToOne = Field(default_factory=ToOne)


class Category(ButterflyModel):
    """A category; ``parent_category`` points at the parent, or is empty at a root."""

    id: int
    type: Literal["category"]
    attributes: CategoryAttributes
    relationships: CategoryRelationships = Field(default_factory=CategoryRelationships)


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------


class Fingerprints(ButterflyModel):
    """Opaque per-format tokens embedded in asset URLs."""

    source: str
    default: str
    thumb: str
    square: str
    cover: str
    stories: str


class MediaAttributes(ButterflyModel):
    name: str
    description: str = ""
    credits: str = ""
    keywords: list[str] = Field(default_factory=list)
    mimetype: str
    created_at: datetime
    fingerprints: Fingerprints


class ImageAttributes(MediaAttributes):
    width: int
    height: int


class VideoAttributes(MediaAttributes):
    width: int
    height: int
    duration: float


class AudioAttributes(MediaAttributes):
    duration: float


class Image(ButterflyModel):
    id: int
    type: Literal["image"]
    attributes: ImageAttributes
    relationships: dict[str, Any] = Field(default_factory=dict)


class Video(ButterflyModel):
    id: int
    type: Literal["video"]
    attributes: VideoAttributes
    relationships: dict[str, Any] = Field(default_factory=dict)


class Audio(ButterflyModel):
    id: int
    type: Literal["audio"]
    attributes: AudioAttributes
    relationships: dict[str, Any] = Field(default_factory=dict)


Media = Annotated[Union[Image, Video, Audio], Field(discriminator="type")]


# ---------------------------------------------------------------------------
# Post
# ---------------------------------------------------------------------------


class PostAttributes(ButterflyModel):
    title: str
    resume: str = ""
    canonical: str | None = None
    hreflangs: dict[str, str] = Field(default_factory=dict)
    slug: str
    published_at: datetime
    updated_at: datetime
    custom: dict[str, CustomAttr] = Field(default_factory=dict)
    flags: list[str] = Field(default_factory=list)
    # Editorial post type (article, page, ...), unrelated to the resource type
    type: str = "article"
    body: list[BodyBlock] | None = None


class PostRelationships(ButterflyModel):
    category: ToOne = Field(default_factory=ToOne)
    thumbnail: ToOne = Field(default_factory=ToOne)
    authors: ToMany = Field(default_factory=ToMany)
    terms: ToMany = Field(default_factory=ToMany)


class Post(ButterflyModel):
    id: int
    type: Literal["post"]
    attributes: PostAttributes
    relationships: PostRelationships = Field(default_factory=PostRelationships)


# ---------------------------------------------------------------------------
# Taxonomy / Term
# ---------------------------------------------------------------------------


class Taxonomy(ButterflyModel):
    """Taxonomies are only ever exchanged as bare identities."""

    id: str
    type: Literal["taxonomy"]


class TermAttributes(ButterflyModel):
    name: str
    description: str | None = None
    slug: str
    custom: dict[str, CustomAttr] = Field(default_factory=dict)


class TermRelationships(ButterflyModel):
    thumbnail: ToOne = Field(default_factory=ToOne)
    category: ToOne = Field(default_factory=ToOne)
    taxonomy: ToOne = Field(default_factory=ToOne)


class Term(ButterflyModel):
    """A taxonomy term; ``type`` reads ``term<taxonomyId>``."""

    id: str
    type: str = Field(pattern=r"^term<[^>]+>$")
    attributes: TermAttributes
    relationships: TermRelationships = Field(default_factory=TermRelationships)


def _resource_tag(value: Any) -> str | None:
    """Map a raw or validated resource to its union tag."""
    if isinstance(value, dict):
        type_ = value.get("type")
    else:
        type_ = getattr(value, "type", None)
    if isinstance(type_, str) and type_.startswith("term<"):
        return "term"
    return type_


Resource = Annotated[
    Union[
        Annotated[Property, Tag("property")],
        Annotated[Author, Tag("author")],
        Annotated[Category, Tag("category")],
        Annotated[Image, Tag("image")],
        Annotated[Video, Tag("video")],
        Annotated[Audio, Tag("audio")],
        Annotated[Post, Tag("post")],
        Annotated[Taxonomy, Tag("taxonomy")],
        Annotated[Term, Tag("term")],
    ],
    Discriminator(_resource_tag),
]


# ---------------------------------------------------------------------------
# Syndication
# ---------------------------------------------------------------------------


class NameAttributes(ButterflyModel):
    name: str


class SyndicateAuthor(ButterflyModel):
    id: int
    type: Literal["author"]
    attributes: NameAttributes
    relationships: dict[str, Any] = Field(default_factory=dict)


class SyndicateTerm(ButterflyModel):
    id: int
    type: Literal["term"]
    attributes: NameAttributes
    relationships: dict[str, Any] = Field(default_factory=dict)


class SyndicatePostAttributes(ButterflyModel):
    title: str
    slug: str
    updated_at: datetime
    canonical: str
    type: str
    category: str | None = None


class SyndicatePost(ButterflyModel):
    id: int
    type: Literal["post"]
    attributes: SyndicatePostAttributes
    relationships: dict[str, Any] = Field(default_factory=dict)


Syndicate = Annotated[
    Union[SyndicateAuthor, SyndicatePost, SyndicateTerm],
    Field(discriminator="type"),
]

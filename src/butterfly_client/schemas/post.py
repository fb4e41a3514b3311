"""Post body AST.

A post body is a list of block nodes (titles, paragraphs, lists, media,
embeds, ...). Rich text inside blocks is either a plain string or a list of
inline nodes, which nest through their own ``value``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from butterfly_client.schemas.base import ButterflyModel

# ---------------------------------------------------------------------------
# Inline nodes
# ---------------------------------------------------------------------------


class TextNode(ButterflyModel):
    type: Literal["text"]
    value: RichText


class StrongNode(ButterflyModel):
    type: Literal["strong"]
    value: RichText


class EmphasisNode(ButterflyModel):
    type: Literal["emphasis"]
    value: RichText


class UnderlineNode(ButterflyModel):
    type: Literal["underline"]
    value: RichText


class StrikethroughNode(ButterflyModel):
    type: Literal["strikethrough"]
    value: RichText


class SubscriptNode(ButterflyModel):
    type: Literal["subscript"]
    value: RichText


class SuperscriptNode(ButterflyModel):
    type: Literal["superscript"]
    value: RichText


class CodeNode(ButterflyModel):
    type: Literal["code"]
    value: RichText


class LinkNode(ButterflyModel):
    type: Literal["link"]
    href: str
    title: str | None = None
    sponsored: str | None = None
    value: RichText


class QuoteNode(ButterflyModel):
    type: Literal["quote"]
    cite: str | None = None
    value: RichText


class AbbreviationNode(ButterflyModel):
    type: Literal["abbreviation"]
    title: str
    value: RichText


class BreakNode(ButterflyModel):
    type: Literal["break"]


StyledNode = Annotated[
    Union[
        TextNode,
        StrongNode,
        EmphasisNode,
        UnderlineNode,
        StrikethroughNode,
        SubscriptNode,
        SuperscriptNode,
        CodeNode,
        LinkNode,
        QuoteNode,
        AbbreviationNode,
        BreakNode,
    ],
    Field(discriminator="type"),
]

RichText = Union[str, list[StyledNode]]


# ---------------------------------------------------------------------------
# Block payloads
# ---------------------------------------------------------------------------


class MediaData(ButterflyModel):
    media_id: int
    credits: str = ""
    description: str = ""
    caption: str = ""


class OEmbed(BaseModel):
    """oEmbed payload as returned by the provider (snake_case, open-ended)."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    version: str
    provider_name: str
    provider_url: str
    width: int | None = None
    height: int | None = None
    html: str
    title: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    thumbnail_url: str | None = None
    thumbnail_width: int | None = None
    thumbnail_height: int | None = None
    url: str | None = None
    description: str | None = None


class EmbedData(ButterflyModel):
    url: str
    oembed: OEmbed


class IframeData(ButterflyModel):
    width: int
    height: int
    src: str
    title: str = ""


class QuoteSource(ButterflyModel):
    url: str | None = None
    title: str | None = None
    author: str | None = None


class QuoteBlockData(ButterflyModel):
    value: RichText
    source: QuoteSource = Field(default_factory=QuoteSource)


class FAQData(ButterflyModel):
    question: str
    value: RichText


class CodeData(ButterflyModel):
    language: str
    value: str


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


class TitleBlock(ButterflyModel):
    type: Literal["title2", "title3", "title4", "title5", "title6"]
    data: str


class ParagraphBlock(ButterflyModel):
    type: Literal["paragraph"]
    data: RichText


class QuoteBlock(ButterflyModel):
    type: Literal["quote"]
    data: QuoteBlockData


class ListBlock(ButterflyModel):
    """Bullet, ordered or reversed list; each item is a list of rich-text runs."""

    type: Literal["bulletList", "orderedList", "reversedList"]
    data: list[list[RichText]]


class MediaBlock(ButterflyModel):
    type: Literal["image", "video", "audio"]
    data: MediaData


class GalleryBlock(ButterflyModel):
    type: Literal["gallery"]
    data: list[MediaData]


class IframeBlock(ButterflyModel):
    type: Literal["iframe"]
    data: IframeData


class OEmbedBlock(ButterflyModel):
    type: Literal["youtube", "dailymotion", "vimeo", "x", "tiktok", "facebook", "instagram"]
    data: EmbedData


class FAQBlock(ButterflyModel):
    type: Literal["faq"]
    data: FAQData


class PagebreakBlock(ButterflyModel):
    type: Literal["pagebreak"]


class MarkdownBlock(ButterflyModel):
    type: Literal["markdown"]
    data: str


class CodeBlock(ButterflyModel):
    type: Literal["code"]
    data: CodeData


class EmbedBlock(ButterflyModel):
    type: Literal["embed"]
    data: str


BodyBlock = Annotated[
    Union[
        TitleBlock,
        ParagraphBlock,
        QuoteBlock,
        ListBlock,
        MediaBlock,
        GalleryBlock,
        IframeBlock,
        OEmbedBlock,
        FAQBlock,
        PagebreakBlock,
        MarkdownBlock,
        CodeBlock,
        EmbedBlock,
    ],
    Field(discriminator="type"),
]

for _node in (
    TextNode,
    StrongNode,
    EmphasisNode,
    UnderlineNode,
    StrikethroughNode,
    SubscriptNode,
    SuperscriptNode,
    CodeNode,
    LinkNode,
    QuoteNode,
    AbbreviationNode,
    ParagraphBlock,
    QuoteBlockData,
    ListBlock,
    FAQData,
):
    _node.model_rebuild()

"""Asset URL derivation for image, video and audio resources.

Asset URLs read ``{domain}/v1/{id}-{format}[-{size}]/{fingerprint}/{slug}[.{ext}]``
where ``size`` is the playable definition (``hd``/``sd``) when given, else the
requested width.
"""

from __future__ import annotations

from typing import Literal, get_args

from butterfly_client.errors import UsageError
from butterfly_client.schemas.resources import Audio, Image, Video

MediaFormat = Literal["default", "source", "thumb", "square", "cover", "stories"]
MediaExtension = Literal["jpg", "webp", "avif", "png", "mp4", "mp3", "gif"]
VideoDefinition = Literal["hd", "sd"]

MEDIA_FORMATS: tuple[str, ...] = get_args(MediaFormat)
MEDIA_EXTENSIONS: tuple[str, ...] = get_args(MediaExtension)
VIDEO_DEFINITIONS: tuple[str, ...] = get_args(VideoDefinition)

# Extensions that serve the playable stream rather than a still rendition
PLAYABLE_EXTENSIONS = ("mp4", "mp3")
PLAYABLE_FORMATS = ("default", "source")

DEFAULT_FORMAT: MediaFormat = "default"
DEFAULT_SLUG = "media"


def _check_choice(name: str, value: str | None, allowed: tuple[str, ...]) -> None:
    if value is not None and value not in allowed:
        raise UsageError(f"Unknown {name} '{value}'. Expected one of: {', '.join(allowed)}")


def get_media_url(
    domain: str,
    media: Image | Video | Audio,
    *,
    format: MediaFormat = DEFAULT_FORMAT,
    width: int | None = None,
    slug: str = DEFAULT_SLUG,
    ext: MediaExtension | None = None,
    definition: VideoDefinition | None = None,
) -> str:
    """Build the asset URL of a media rendition.

    Args:
        domain: Asset domain, without trailing slash.
        media: The image, video or audio resource.
        format: Rendition to serve; its fingerprint is embedded in the URL.
        width: Requested width in pixels. Ignored when ``definition`` is set.
        slug: Cosmetic file name segment.
        ext: File extension to append.
        definition: Quality tier, required for playable extensions.

    Returns:
        The asset URL.

    Raises:
        UsageError: If the format/extension/definition combination is not
            served for this media.
    """
    _check_choice("format", format, MEDIA_FORMATS)
    _check_choice("extension", ext, MEDIA_EXTENSIONS)
    _check_choice("definition", definition, VIDEO_DEFINITIONS)

    if ext in PLAYABLE_EXTENSIONS:
        if media.type not in ("video", "audio"):
            raise UsageError(f"Invalid media type ({media.type}) for extension .{ext}")
        if format not in PLAYABLE_FORMATS:
            raise UsageError(
                f"Format '{format}' is not allowed for {media.type} with ext .{ext}. "
                "Use 'default' or 'source'."
            )
        if not definition:
            raise UsageError(
                f"{media.type} requires 'definition' parameter for extension .{ext}"
            )

    if media.attributes.mimetype == "image/gif" and ext == "gif" and format != "source":
        raise UsageError("GIF images must use 'source' format")

    fingerprint = getattr(media.attributes.fingerprints, format)
    size = definition if definition is not None else width
    variant = f"{media.id}-{format}" if size is None else f"{media.id}-{format}-{size}"
    extension = f".{ext}" if ext else ""

    return f"{domain}/v1/{variant}/{fingerprint}/{slug}{extension}"

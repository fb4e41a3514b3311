import pytest

from butterfly_client import UsageError, get_media_url
from butterfly_client.schemas import Audio, Image, Video

DOMAIN = "https://xxx.staticbtf.eno.do"


def _fingerprints(prefix: str) -> dict:
    return {
        fmt: f"{prefix}{fmt}"
        for fmt in ("source", "default", "thumb", "square", "cover", "stories")
    }


@pytest.fixture
def image() -> Image:
    return Image.model_validate(
        {
            "id": 123,
            "type": "image",
            "attributes": {
                "name": "Test Image",
                "description": "A test image",
                "credits": "Test",
                "keywords": [],
                "mimetype": "image/jpeg",
                "createdAt": "2024-01-01T00:00:00Z",
                "width": 1920,
                "height": 1080,
                "fingerprints": _fingerprints("abc123"),
            },
            "relationships": {},
        }
    )


@pytest.fixture
def gif(image: Image) -> Image:
    attributes = image.attributes.model_copy(update={"mimetype": "image/gif"})
    return image.model_copy(update={"attributes": attributes})


@pytest.fixture
def video() -> Video:
    return Video.model_validate(
        {
            "id": 456,
            "type": "video",
            "attributes": {
                "name": "Test Video",
                "mimetype": "video/mp4",
                "createdAt": "2024-01-01T00:00:00Z",
                "width": 1920,
                "height": 1080,
                "duration": 120,
                "fingerprints": _fingerprints("def456"),
            },
        }
    )


@pytest.fixture
def audio() -> Audio:
    return Audio.model_validate(
        {
            "id": 789,
            "type": "audio",
            "attributes": {
                "name": "Test Audio",
                "mimetype": "audio/mpeg",
                "createdAt": "2024-01-01T00:00:00Z",
                "duration": 180,
                "fingerprints": _fingerprints("ghi789"),
            },
        }
    )


class TestImageUrls:
    def test_basic_image_url(self, image):
        url = get_media_url(DOMAIN, image, format="cover", width=1200)

        assert url == f"{DOMAIN}/v1/123-cover-1200/abc123cover/media"

    def test_custom_slug(self, image):
        url = get_media_url(DOMAIN, image, format="thumb", width=300, slug="mon-image-test")

        assert url == f"{DOMAIN}/v1/123-thumb-300/abc123thumb/mon-image-test"

    def test_extension(self, image):
        url = get_media_url(DOMAIN, image, format="default", width=800, slug="test", ext="webp")

        assert url == f"{DOMAIN}/v1/123-default-800/abc123default/test.webp"

    def test_without_width(self, image):
        url = get_media_url(DOMAIN, image, format="default", slug="my-image")

        assert url == f"{DOMAIN}/v1/123-default/abc123default/my-image"

    def test_defaults(self, image):
        assert get_media_url(DOMAIN, image) == f"{DOMAIN}/v1/123-default/abc123default/media"

    def test_default_format_with_width(self, image):
        url = get_media_url(DOMAIN, image, width=800, slug="my-image")

        assert url == f"{DOMAIN}/v1/123-default-800/abc123default/my-image"

    def test_zero_width_is_kept(self, image):
        assert get_media_url(DOMAIN, image, width=0) == f"{DOMAIN}/v1/123-default-0/abc123default/media"

    @pytest.mark.parametrize("fmt", ["source", "default", "thumb", "square", "cover", "stories"])
    def test_each_format_embeds_its_own_fingerprint(self, image, fmt):
        url = get_media_url(DOMAIN, image, format=fmt)

        assert url.split("/")[-2] == f"abc123{fmt}"

    def test_playable_extension_rejected_for_image(self, image):
        with pytest.raises(UsageError, match=r"Invalid media type \(image\) for extension .mp4"):
            get_media_url(DOMAIN, image, ext="mp4", definition="hd")

    def test_unknown_format(self, image):
        with pytest.raises(UsageError, match="Unknown format 'banner'"):
            get_media_url(DOMAIN, image, format="banner")


class TestGifUrls:
    def test_gif_without_source_format(self, gif):
        with pytest.raises(UsageError, match="GIF images must use 'source' format"):
            get_media_url(DOMAIN, gif, format="cover", width=800, ext="gif")

    def test_gif_with_source_format(self, gif):
        url = get_media_url(DOMAIN, gif, format="source", width=800, ext="gif")

        assert url == f"{DOMAIN}/v1/123-source-800/abc123source/media.gif"

    def test_gif_still_rendition_needs_no_source(self, gif):
        url = get_media_url(DOMAIN, gif, format="cover", ext="webp")

        assert url == f"{DOMAIN}/v1/123-cover/abc123cover/media.webp"


class TestPlayableUrls:
    def test_video_source_mp4(self, video):
        url = get_media_url(
            DOMAIN, video, format="source", width=1920, slug="my-video", ext="mp4", definition="hd"
        )

        assert url == f"{DOMAIN}/v1/456-source-hd/def456source/my-video.mp4"

    def test_video_default_hd(self, video):
        url = get_media_url(
            DOMAIN, video, format="default", width=1920, slug="my-video", ext="mp4", definition="hd"
        )

        assert url == f"{DOMAIN}/v1/456-default-hd/def456default/my-video.mp4"

    def test_video_source_sd(self, video):
        url = get_media_url(
            DOMAIN, video, format="source", width=1920, slug="video-sd", ext="mp4", definition="sd"
        )

        assert url == f"{DOMAIN}/v1/456-source-sd/def456source/video-sd.mp4"

    def test_audio_mp3(self, audio):
        url = get_media_url(
            DOMAIN, audio, format="default", width=0, slug="my-audio", ext="mp3", definition="sd"
        )

        assert url == f"{DOMAIN}/v1/789-default-sd/ghi789default/my-audio.mp3"

    def test_video_invalid_format(self, video):
        with pytest.raises(UsageError, match="Format 'thumb' is not allowed for video with ext .mp4"):
            get_media_url(DOMAIN, video, format="thumb", width=300, ext="mp4")

    def test_audio_invalid_format(self, audio):
        with pytest.raises(UsageError, match="Format 'cover' is not allowed for audio with ext .mp3"):
            get_media_url(DOMAIN, audio, format="cover", width=800, ext="mp3")

    def test_video_requires_definition(self, video):
        with pytest.raises(UsageError, match="video requires 'definition' parameter for extension .mp4"):
            get_media_url(DOMAIN, video, format="default", ext="mp4")

    def test_video_preview_image_needs_no_definition(self, video):
        url = get_media_url(DOMAIN, video, format="cover", width=1200, ext="jpg")

        assert url == f"{DOMAIN}/v1/456-cover-1200/def456cover/media.jpg"

    def test_audio_preview_without_extension(self, audio):
        assert get_media_url(DOMAIN, audio, format="square") == (
            f"{DOMAIN}/v1/789-square/ghi789square/media"
        )

from domain.models import PhotoMedia, VideoMedia
from use_cases.mappers.vxtwitter_to_domain import (
    extract_resolution,
    vxtwitter_media_list_to_domain,
    vxtwitter_media_to_domain,
)


def test_extract_resolution():
    assert extract_resolution("https://video.twimg.com/vid/avc1/1280x720/a.mp4") == "1280x720"
    assert extract_resolution("https://video.twimg.com/vid/a.mp4") is None
    # Токен должен быть отдельным сегментом пути
    assert extract_resolution("https://video.twimg.com/vid/1280x720.mp4") is None
    assert extract_resolution(None) is None


def test_video_variants_sorted_by_bitrate_descending():
    media = vxtwitter_media_to_domain(
        {
            "type": "video",
            "thumbnail_url": "https://pbs.twimg.com/thumb.jpg",
            "variants": [
                {"bitrate": 500, "content_type": "video/mp4", "url": "https://v.twimg.com/vid/320x180/a.mp4"},
                {"bitrate": 1200, "content_type": "video/mp4", "url": "https://v.twimg.com/vid/1280x720/b.mp4"},
            ],
        }
    )

    assert isinstance(media, VideoMedia)
    assert [v.bitrate for v in media.versions] == [1200, 500]
    assert [v.resolution for v in media.versions] == ["1280x720", "320x180"]
    assert media.thumbnail == "https://pbs.twimg.com/thumb.jpg"


def test_missing_bitrate_sorts_last():
    media = vxtwitter_media_to_domain(
        {
            "type": "animated_gif",
            "variants": [
                {"content_type": "application/x-mpegURL", "url": "https://v.twimg.com/pl/a.m3u8"},
                {"bitrate": 0, "content_type": "video/mp4", "url": "https://v.twimg.com/gif/b.mp4"},
                {"bitrate": 256000, "content_type": "video/mp4", "url": "https://v.twimg.com/gif/c.mp4"},
            ],
        }
    )

    assert media.type == "animated_gif"
    assert media.versions[0].bitrate == 256000
    assert {v.url for v in media.versions[1:]} == {
        "https://v.twimg.com/pl/a.m3u8",
        "https://v.twimg.com/gif/b.mp4",
    }


def test_video_without_variants_uses_media_url():
    media = vxtwitter_media_to_domain(
        {"type": "video", "url": "https://video.twimg.com/vid/avc1/1280x720/a.mp4", "thumbnail_url": "t.jpg"}
    )

    assert len(media.versions) == 1
    rendition = media.versions[0]
    assert rendition.url == "https://video.twimg.com/vid/avc1/1280x720/a.mp4"
    assert rendition.content_type == "video/mp4"
    assert rendition.resolution == "1280x720"
    assert rendition.bitrate is None


def test_video_without_variants_and_without_url_is_dropped():
    assert vxtwitter_media_to_domain({"type": "video"}) is None


def test_photo_falls_back_to_media_url_https():
    media = vxtwitter_media_to_domain(
        {"type": "photo", "media_url_https": "https://pbs.twimg.com/media/p.jpg", "width": 800, "height": 600}
    )

    assert isinstance(media, PhotoMedia)
    assert media.url == "https://pbs.twimg.com/media/p.jpg"
    assert media.thumbnail == "https://pbs.twimg.com/media/p.jpg"
    assert (media.width, media.height) == (800, 600)


def test_photo_prefers_url():
    media = vxtwitter_media_to_domain(
        {"type": "photo", "url": "https://pbs.twimg.com/media/a.jpg", "media_url_https": "https://other/b.jpg"}
    )
    assert media.url == media.thumbnail == "https://pbs.twimg.com/media/a.jpg"


def test_unknown_types_are_dropped_and_order_is_kept():
    medias = vxtwitter_media_list_to_domain(
        [
            {"type": "photo", "url": "https://pbs.twimg.com/media/1.jpg"},
            {"type": "audio", "url": "https://example.com/a.mp3"},
            "garbage",
            {"type": "video", "url": "https://video.twimg.com/vid/2.mp4"},
            {"type": "photo", "url": "https://pbs.twimg.com/media/3.jpg"},
        ]
    )

    assert [m.type for m in medias] == ["photo", "video", "photo"]
    assert medias[0].url.endswith("1.jpg")
    assert medias[2].url.endswith("3.jpg")


def test_only_unknown_types_yield_empty_list():
    assert vxtwitter_media_list_to_domain([{"type": "audio"}, {"type": "poll"}]) == []


def test_fields_missing_upstream_stay_unset():
    video = vxtwitter_media_to_domain(
        {"type": "video", "variants": [{"url": "https://v.twimg.com/pl/a.m3u8"}]}
    )
    photo = vxtwitter_media_to_domain({"type": "photo", "url": "https://pbs.twimg.com/media/p.jpg"})

    assert video.model_dump(exclude_unset=True) == {
        "type": "video",
        "versions": [{"url": "https://v.twimg.com/pl/a.m3u8", "resolution": None}],
    }
    assert photo.model_dump(exclude_unset=True) == {
        "type": "photo",
        "url": "https://pbs.twimg.com/media/p.jpg",
        "thumbnail": "https://pbs.twimg.com/media/p.jpg",
    }


def test_explicit_null_from_upstream_is_kept():
    video = vxtwitter_media_to_domain(
        {"type": "video", "thumbnail_url": None, "variants": [{"bitrate": None, "url": "https://v.twimg.com/a.mp4"}]}
    )

    dumped = video.model_dump(exclude_unset=True)
    assert dumped["thumbnail"] is None
    assert dumped["versions"][0]["bitrate"] is None


def test_entries_with_invalid_fields_are_dropped():
    medias = vxtwitter_media_list_to_domain(
        [
            {"type": "video", "variants": [{"bitrate": "fast", "url": "https://v.twimg.com/a.mp4"}]},
            {"type": "video", "thumbnail_url": 123, "url": "https://video.twimg.com/vid/b.mp4"},
            {"type": "photo", "url": "https://pbs.twimg.com/media/c.jpg"},
        ]
    )

    assert [m.type for m in medias] == ["photo"]

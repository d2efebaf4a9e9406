import logging
from typing import Any, Callable, Optional

import httpx
import pytest

from core.config import Settings
from core.error_logger import ErrorReporter
from infrastructure.cache.ttl_media_cache import TTLMediaCache
from infrastructure.http_clients.media_origin_client import MediaOriginClient
from infrastructure.http_clients.vxtwitter_client import VxTwitterClient
from main import create_app
from presentation.container import Container


class FakeClock:
    """Управляемые часы для TTL кэша."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def origin_response(status_code: int, content: bytes = b"", headers: Optional[dict[str, str]] = None) -> httpx.Response:
    """Ответ хоста медиа с ещё не прочитанным телом, как у настоящего стрима."""
    return httpx.Response(status_code, headers=headers, stream=httpx.ByteStream(content))


def video_payload() -> dict[str, Any]:
    return {
        "tweetID": "1790000000000000000",
        "media_extended": [
            {
                "type": "video",
                "url": "https://video.twimg.com/ext_tw_video/1/pu/vid/avc1/1280x720/hi.mp4",
                "thumbnail_url": "https://pbs.twimg.com/ext_tw_video_thumb/1/pu/img/thumb.jpg",
                "variants": [
                    {
                        "bitrate": 832000,
                        "content_type": "video/mp4",
                        "url": "https://video.twimg.com/ext_tw_video/1/pu/vid/avc1/640x360/mid.mp4",
                    },
                    {
                        "content_type": "application/x-mpegURL",
                        "url": "https://video.twimg.com/ext_tw_video/1/pu/pl/playlist.m3u8",
                    },
                    {
                        "bitrate": 2176000,
                        "content_type": "video/mp4",
                        "url": "https://video.twimg.com/ext_tw_video/1/pu/vid/avc1/1280x720/hi.mp4",
                    },
                ],
            },
            {
                "type": "image",
                "url": "https://pbs.twimg.com/media/unknown.jpg",
            },
            {
                "type": "photo",
                "media_url_https": "https://pbs.twimg.com/media/photo.jpg",
                "width": 1200,
                "height": 675,
            },
        ],
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def error_reporter() -> ErrorReporter:
    return ErrorReporter(logging.getLogger("error_reports"))


@pytest.fixture
def make_app(clock, error_reporter):
    """Собирает приложение с подменёнными транспортами upstream и хоста медиа."""

    def _make(
        vx_handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
        origin_handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
        log_requests: bool = True,
    ):
        test_settings = Settings()
        test_settings.app.log_requests = log_requests
        vx_handler = vx_handler or (lambda request: httpx.Response(200, json=video_payload()))
        origin_handler = origin_handler or (lambda request: origin_response(200, b"media-bytes"))
        container = Container(
            test_settings,
            error_reporter=error_reporter,
            media_cache=TTLMediaCache(test_settings.cache, timer=clock),
            vxtwitter_client=VxTwitterClient(
                test_settings.upstream, error_reporter, transport=httpx.MockTransport(vx_handler)
            ),
            media_origin_client=MediaOriginClient(
                test_settings.upstream, error_reporter, transport=httpx.MockTransport(origin_handler)
            ),
        )
        return create_app(test_settings, container)

    return _make

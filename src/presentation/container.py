import logging
from typing import Optional

from fastapi import Request

from core.config import Settings
from core.error_logger import ErrorReporter
from core.logging_config import ERROR_REPORTS_LOGGER
from infrastructure.cache.ttl_media_cache import TTLMediaCache
from infrastructure.http_clients.media_origin_client import MediaOriginClient
from infrastructure.http_clients.vxtwitter_client import VxTwitterClient
from use_cases import ResolveMediaInfoUseCase, StreamMediaUseCase


# --- DI Container ---
class Container:
	def __init__(
		self,
		settings: Settings,
		error_reporter: Optional[ErrorReporter] = None,
		media_cache: Optional[TTLMediaCache] = None,
		vxtwitter_client: Optional[VxTwitterClient] = None,
		media_origin_client: Optional[MediaOriginClient] = None,
	):
		logger = logging.getLogger("use_cases")

		self.error_reporter = error_reporter or ErrorReporter(logging.getLogger(ERROR_REPORTS_LOGGER))
		# Один кэш на весь процесс (пустой TTLMediaCache ложен в bool)
		self.media_cache = media_cache if media_cache is not None else TTLMediaCache(settings.cache)
		self.vxtwitter_client = vxtwitter_client if vxtwitter_client is not None else VxTwitterClient(
			settings=settings.upstream, error_reporter=self.error_reporter
		)
		self.media_origin_client = media_origin_client if media_origin_client is not None else MediaOriginClient(
			settings=settings.upstream, error_reporter=self.error_reporter
		)

		self.resolve_media_uc = ResolveMediaInfoUseCase(
			metadata_provider=self.vxtwitter_client,
			cache=self.media_cache,
			logger=logger,
		)
		self.stream_media_uc = StreamMediaUseCase(
			media_origin=self.media_origin_client,
			error_reporter=self.error_reporter,
		)

	async def aclose(self) -> None:
		await self.vxtwitter_client.aclose()
		await self.media_origin_client.aclose()


def get_container(request: Request) -> Container:
	return request.app.state.container


def get_resolve_media_uc(request: Request) -> ResolveMediaInfoUseCase:
	return get_container(request).resolve_media_uc


def get_stream_media_uc(request: Request) -> StreamMediaUseCase:
	return get_container(request).stream_media_uc

import logging
from typing import Optional

from domain.errors import InvalidInput, NoMediaFound, NoUsableMedia
from domain.models import MediaInfo
from domain.ports import MediaCache, MetadataProvider
from use_cases.identifiers import extract_post_id
from use_cases.mappers.vxtwitter_to_domain import vxtwitter_media_list_to_domain


class ResolveMediaInfoUseCase:
	"""
	Use case для получения списка медиа поста по его ссылке.

	Логика:
	1. Извлечь ID поста из ссылки
	2. Вернуть результат из кэша, если он ещё не истёк
	3. Иначе запросить метаданные у upstream и нормализовать media_extended
	4. Сохранить результат в кэш (ошибки не кэшируются)
	"""

	def __init__(
		self,
		metadata_provider: MetadataProvider,
		cache: MediaCache,
		logger: Optional[logging.Logger] = None,
	) -> None:
		self._metadata_provider = metadata_provider
		self._cache = cache
		self._logger = logger or logging.getLogger(__name__)

	async def execute(self, post_url: Optional[str]) -> MediaInfo:
		if not post_url:
			raise InvalidInput("Tweet URL is required")

		post_id = extract_post_id(post_url)
		if not post_id:
			raise InvalidInput("Invalid tweet URL")

		cached = self._cache.get(post_id)
		if cached is not None:
			self._logger.debug("Медиа для post_id=%s отданы из кэша", post_id)
			return cached

		self._logger.info("Запрашиваем метаданные поста post_id=%s", post_id)
		payload = await self._metadata_provider.get_post(post_id)

		media_extended = payload.get("media_extended") if isinstance(payload, dict) else None
		if not isinstance(media_extended, list) or not media_extended:
			raise NoMediaFound("No media found in this tweet")

		medias = vxtwitter_media_list_to_domain(media_extended)
		if not medias:
			self._logger.warning(
				"Ни одно медиа post_id=%s не удалось нормализовать, типы: %s",
				post_id,
				[m.get("type") if isinstance(m, dict) else type(m).__name__ for m in media_extended],
			)
			raise NoUsableMedia("No usable media found in this tweet")

		result = MediaInfo(medias=medias)
		self._cache.set(post_id, result)
		self._logger.info("Найдено %d медиа для post_id=%s", len(medias), post_id)
		return result

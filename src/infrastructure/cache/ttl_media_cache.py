import logging
import time
from typing import Callable, Optional

from cachetools import TTLCache

from domain.models import MediaInfo
from core.config import CacheSettings


class TTLMediaCache:
	"""Кэш результатов разрешения медиа с фиксированным TTL от момента вставки.

	Истёкшие записи не возвращаются (проверка при чтении), чтение TTL не продлевает.
	Все операции синхронные, поэтому на одном event loop гонок внутри
	get/set нет; при одновременных промахах побеждает последняя запись.
	"""

	def __init__(self, settings: CacheSettings, timer: Callable[[], float] = time.monotonic):
		self._logger = logging.getLogger("media_cache")
		self._ttl = settings.ttl_seconds
		self._cache: TTLCache[str, MediaInfo] = TTLCache(
			maxsize=settings.maxsize,
			ttl=settings.ttl_seconds,
			timer=timer,
		)

	def get(self, key: str) -> Optional[MediaInfo]:
		value = self._cache.get(key)
		self._logger.debug("Cache %s для post_id=%s", "hit" if value is not None else "miss", key)
		return value

	def set(self, key: str, value: MediaInfo) -> None:
		self._cache[key] = value
		self._logger.debug("Cache set post_id=%s ttl=%ss size=%d", key, self._ttl, len(self._cache))

	def __len__(self) -> int:
		return len(self._cache)

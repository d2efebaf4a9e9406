from __future__ import annotations
from typing import Any, Protocol


class MetadataProvider(Protocol):
	"""Интерфейс источника метаданных поста"""

	async def get_post(self, post_id: str) -> Any:
		"""Вернуть декодированный JSON поста или None, если тело не JSON"""
		...

from __future__ import annotations
from typing import Optional, Protocol

import httpx


class MediaOrigin(Protocol):
	"""Интерфейс хоста, с которого проксируются байты медиа"""

	async def open(self, url: str, range_header: Optional[str] = None) -> httpx.Response:
		"""Открыть потоковый ответ; закрывать его обязан вызывающий"""
		...

from __future__ import annotations
from typing import Optional, Protocol
from domain.models import MediaInfo


class MediaCache(Protocol):
	def get(self, key: str) -> Optional[MediaInfo]: ...
	def set(self, key: str, value: MediaInfo) -> None: ...

from __future__ import annotations
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field


class MediaKind(str, Enum):
	photo = "photo"
	video = "video"

	@classmethod
	def from_query(cls, value: Optional[str]) -> "MediaKind":
		"""Всё, что не photo, отдаётся как видео"""
		return cls.photo if value == cls.photo.value else cls.video


class Rendition(BaseModel):
	url: str
	bitrate: Optional[int] = None
	content_type: Optional[str] = None
	resolution: Optional[str] = None


class VideoMedia(BaseModel):
	type: Literal["video", "animated_gif"]
	thumbnail: Optional[str] = None
	versions: list[Rendition]


class PhotoMedia(BaseModel):
	type: Literal["photo"] = "photo"
	url: str
	# размеры передаются как есть, без проверки
	width: Optional[Any] = None
	height: Optional[Any] = None
	thumbnail: str


MediaDescriptor = Annotated[Union[VideoMedia, PhotoMedia], Field(discriminator="type")]


class MediaInfo(BaseModel):
	medias: list[MediaDescriptor]

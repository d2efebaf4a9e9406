import logging
import re
from typing import Any, Optional

from pydantic import ValidationError

from domain.models import MediaDescriptor, PhotoMedia, Rendition, VideoMedia

logger = logging.getLogger("use_cases.mappers")

RESOLUTION_RE = re.compile(r"/(\d+x\d+)/")

VIDEO_TYPES = ("video", "animated_gif")
DEFAULT_VIDEO_CONTENT_TYPE = "video/mp4"


def extract_resolution(url: Optional[str]) -> Optional[str]:
	if not url:
		return None
	match = RESOLUTION_RE.search(url)
	return match.group(1) if match else None


def _given(source: dict[str, Any], **fields: str) -> dict[str, Any]:
	"""Только поля, которые upstream действительно прислал (отсутствующие не попадают в JSON)"""
	return {name: source[key] for name, key in fields.items() if key in source}


def _bitrate_key(rendition: Rendition) -> int:
	return rendition.bitrate or 0


def vxtwitter_video_to_domain(media: dict[str, Any]) -> Optional[VideoMedia]:
	versions = [
		Rendition(
			url=variant["url"],
			resolution=extract_resolution(variant["url"]),
			**_given(variant, bitrate="bitrate", content_type="content_type"),
		)
		for variant in media.get("variants") or []
		if isinstance(variant, dict) and isinstance(variant.get("url"), str)
	]

	if versions:
		versions.sort(key=_bitrate_key, reverse=True)
	else:
		# Без вариантов берём единственное видео из url самого медиа
		url = media.get("url")
		if not isinstance(url, str) or not url:
			return None
		versions = [
			Rendition(
				url=url,
				content_type=DEFAULT_VIDEO_CONTENT_TYPE,
				resolution=extract_resolution(url),
			)
		]

	return VideoMedia(
		type=media["type"],
		versions=versions,
		**_given(media, thumbnail="thumbnail_url"),
	)


def vxtwitter_photo_to_domain(media: dict[str, Any]) -> Optional[PhotoMedia]:
	url = media.get("url") or media.get("media_url_https")
	if not isinstance(url, str):
		return None
	return PhotoMedia(
		type="photo",
		url=url,
		thumbnail=url,
		**_given(media, width="width", height="height"),
	)


def vxtwitter_media_to_domain(media: Any) -> Optional[MediaDescriptor]:
	"""Нормализует один элемент media_extended; None для неподдерживаемых или битых элементов"""
	if not isinstance(media, dict):
		return None
	media_type = media.get("type")
	try:
		if media_type in VIDEO_TYPES:
			return vxtwitter_video_to_domain(media)
		if media_type == "photo":
			return vxtwitter_photo_to_domain(media)
	except ValidationError as e:
		logger.warning("Пропускаем медиа type=%s с некорректными полями: %s", media_type, e.errors())
	return None


def vxtwitter_media_list_to_domain(media_extended: list[Any]) -> list[MediaDescriptor]:
	medias = []
	for media in media_extended:
		descriptor = vxtwitter_media_to_domain(media)
		if descriptor is not None:
			medias.append(descriptor)
	return medias

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import AsyncIterator, Awaitable, Callable, Optional

import anyio
import httpx
from domain.errors import InvalidInput, StreamingError
from domain.models import MediaKind
from domain.ports import MediaOrigin
from core.error_logger import ErrorReporter

CONTENT_TYPES = {
	MediaKind.photo: "image/jpeg",
	MediaKind.video: "video/mp4",
}
EXTENSIONS = {
	MediaKind.photo: ".jpg",
	MediaKind.video: ".mp4",
}
CACHE_CONTROL = "public, max-age=31536000"


@dataclass
class StreamedMedia:
	status_code: int
	headers: dict[str, str]
	body: AsyncIterator[bytes]
	# Закрывает соединение с хостом, если тело так и не было прочитано
	close: Callable[[], Awaitable[None]]


def build_filename(kind: MediaKind, now: datetime) -> str:
	return f"x-media-{int(now.timestamp() * 1000)}{EXTENSIONS[kind]}"


class StreamMediaUseCase:
	"""
	Use case для проксирования байтов медиа клиенту.

	Заголовок Range клиента пробрасывается на хост медиа как есть. Если хост
	ответил Content-Range, ответ отдаётся со статусом 206, иначе 200 с
	Content-Length. Тип контента определяется только по заявленному типу медиа.
	"""

	def __init__(
		self,
		media_origin: MediaOrigin,
		error_reporter: ErrorReporter,
		clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
		logger: Optional[logging.Logger] = None,
	) -> None:
		self._media_origin = media_origin
		self._error_reporter = error_reporter
		self._clock = clock
		self._logger = logger or logging.getLogger("media.stream")

	async def execute(
		self,
		media_url: Optional[str],
		kind: MediaKind,
		range_header: Optional[str] = None,
	) -> StreamedMedia:
		if not media_url:
			raise InvalidInput("Media URL is required")

		upstream = await self._media_origin.open(media_url, range_header)

		now = self._clock()
		headers = {
			"Content-Type": CONTENT_TYPES[kind],
			"Content-Disposition": f'attachment; filename="{build_filename(kind, now)}"',
			"Accept-Ranges": "bytes",
			"Access-Control-Allow-Origin": "*",
			"Access-Control-Allow-Methods": "GET, HEAD, OPTIONS",
			"Cache-Control": CACHE_CONTROL,
			"Last-Modified": format_datetime(now, usegmt=True),
		}

		content_range = upstream.headers.get("content-range")
		if content_range:
			headers["Content-Range"] = content_range
			status_code = 206
		else:
			content_length = upstream.headers.get("content-length")
			if content_length:
				headers["Content-Length"] = content_length
			status_code = 200

		self._logger.info(
			"Стрим %s kind=%s range=%s -> status=%s",
			media_url, kind.value, range_header, status_code,
		)
		return StreamedMedia(
			status_code=status_code,
			headers=headers,
			body=self._iter_body(upstream, media_url, range_header),
			close=upstream.aclose,
		)

	async def _iter_body(
		self,
		upstream: httpx.Response,
		media_url: str,
		range_header: Optional[str],
	) -> AsyncIterator[bytes]:
		bytes_sent = 0
		try:
			async for chunk in upstream.aiter_raw():
				bytes_sent += len(chunk)
				yield chunk
		except httpx.HTTPError as e:
			# Заголовки уже отправлены, JSON с ошибкой отдать нельзя
			self._logger.error(
				"Обрыв стрима %s после %d байт: %r", media_url, bytes_sent, e
			)
			self._error_reporter.log_streaming_error(
				error=StreamingError(str(e) or type(e).__name__),
				media_url=media_url,
				bytes_sent=bytes_sent,
				range_header=range_header,
			)
			# Пробрасываем, чтобы сервер оборвал соединение, а не завершил ответ
			raise
		finally:
			# При отключении клиента генератор отменяется, соединение с хостом
			# всё равно нужно закрыть
			with anyio.CancelScope(shield=True):
				await upstream.aclose()
			self._logger.debug("Соединение с %s закрыто, отправлено %d байт", media_url, bytes_sent)

import logging
from typing import Optional

import httpx
from domain.errors import UpstreamError
from domain.ports.media_origin import MediaOrigin
from core.config import UpstreamSettings
from core.error_logger import ErrorReporter


class MediaOriginClient(MediaOrigin):
	"""Открывает потоковые GET-запросы к хостам медиа (video.twimg.com, pbs.twimg.com, ...)"""

	def __init__(
		self,
		settings: UpstreamSettings,
		error_reporter: ErrorReporter,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	):
		self._logger = logging.getLogger("media.origin")
		self._error_reporter = error_reporter
		self._client = httpx.AsyncClient(
			headers={
				"User-Agent": settings.user_agent,
				# байты пробрасываются как есть, Content-Length должен совпадать
				"Accept-Encoding": "identity",
			},
			timeout=settings.media_timeout,
			follow_redirects=True,
			max_redirects=settings.media_max_redirects,
			transport=transport,
		)

	async def open(self, url: str, range_header: Optional[str] = None) -> httpx.Response:
		headers = {}
		if range_header:
			headers["Range"] = range_header

		try:
			request = self._client.build_request("GET", url, headers=headers)
		except httpx.InvalidURL as e:
			raise UpstreamError(f"Invalid media URL: {e}") from e

		try:
			resp = await self._client.send(request, stream=True)
		except httpx.HTTPError as e:
			self._logger.error("Не удалось открыть медиа %s: %r", url, e)
			self._error_reporter.log_api_error(
				error=e,
				service_name="MediaOrigin",
				endpoint=url,
				request_data={"range": range_header},
			)
			raise UpstreamError(str(e) or type(e).__name__) from e

		self._logger.debug(
			"GET %s range=%s status=%s content_range=%s content_length=%s",
			url,
			range_header,
			resp.status_code,
			resp.headers.get("content-range"),
			resp.headers.get("content-length"),
		)

		if resp.is_error:
			await resp.aclose()
			self._logger.error("Хост медиа вернул %s для %s", resp.status_code, url)
			error = UpstreamError(
				f"Media origin responded with status {resp.status_code}",
				status_code=resp.status_code,
			)
			self._error_reporter.log_api_error(
				error=error,
				service_name="MediaOrigin",
				endpoint=url,
				request_data={"range": range_header},
				status_code=resp.status_code,
			)
			raise error

		return resp

	async def aclose(self) -> None:
		await self._client.aclose()

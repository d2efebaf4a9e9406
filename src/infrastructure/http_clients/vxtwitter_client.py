import logging
from typing import Any, Optional

import httpx
from domain.errors import UpstreamError
from domain.ports.metadata_provider import MetadataProvider
from core.config import UpstreamSettings
from core.error_logger import ErrorReporter


class VxTwitterClient(MetadataProvider):
	"""Клиент неофициального API api.vxtwitter.com"""

	def __init__(
		self,
		settings: UpstreamSettings,
		error_reporter: ErrorReporter,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	):
		self._logger = logging.getLogger("vxtwitter")
		self._base_url = settings.metadata_base_url.rstrip("/")
		self._status_path = settings.status_path
		self._error_reporter = error_reporter
		self._client = httpx.AsyncClient(
			base_url=self._base_url,
			headers={"User-Agent": settings.user_agent},
			timeout=settings.metadata_timeout,
			transport=transport,
		)
		self._logger.info(
			"VxTwitter client initialized base_url=%s timeout=%ss",
			self._base_url,
			settings.metadata_timeout,
		)

	async def get_post(self, post_id: str) -> Any:
		path = self._status_path.format(post_id=post_id)
		try:
			resp = await self._client.get(path)
			self._logger.debug("GET %s status=%s", path, resp.status_code)
			resp.raise_for_status()
		except httpx.HTTPStatusError as e:
			status_code = e.response.status_code
			self._logger.error("VxTwitter вернул %s для post_id=%s", status_code, post_id)
			self._error_reporter.log_api_error(
				error=e,
				service_name="VxTwitter",
				endpoint=path,
				request_data={"post_id": post_id},
				status_code=status_code,
			)
			raise UpstreamError(str(e), status_code=status_code) from e
		except httpx.HTTPError as e:
			self._logger.error("Ошибка запроса к VxTwitter для post_id=%s: %r", post_id, e)
			self._error_reporter.log_api_error(
				error=e,
				service_name="VxTwitter",
				endpoint=path,
				request_data={"post_id": post_id},
			)
			raise UpstreamError(str(e) or type(e).__name__) from e

		try:
			return resp.json()
		except ValueError:
			self._logger.warning("VxTwitter вернул не-JSON тело для post_id=%s", post_id)
			return None

	async def aclose(self) -> None:
		await self._client.aclose()

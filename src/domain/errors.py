from typing import Optional


class MediaRelayError(Exception):
	"""Базовая ошибка сервиса"""

	default_status = 500

	def __init__(self, message: str, status_code: Optional[int] = None) -> None:
		super().__init__(message)
		self.message = message
		self._status_code = status_code

	@property
	def status_code(self) -> int:
		return self._status_code or self.default_status


class InvalidInput(MediaRelayError):
	"""Отсутствующий или нераспознанный URL"""

	default_status = 400


class NoMediaFound(MediaRelayError):
	"""Upstream не вернул список медиа"""


class NoUsableMedia(MediaRelayError):
	"""Upstream вернул медиа, но ни одно не удалось нормализовать"""


class UpstreamError(MediaRelayError):
	"""Сетевая ошибка, таймаут или не-2xx ответ внешнего сервиса"""

	def __init__(self, message: str, status_code: Optional[int] = None) -> None:
		super().__init__(message, status_code)
		self.upstream_status = status_code


class StreamingError(MediaRelayError):
	"""Обрыв стрима после того, как заголовки уже ушли клиенту"""

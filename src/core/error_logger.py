"""
Модуль для логирования ошибок в отдельные файлы.
Предоставляет структурированное логирование ошибок обращения к upstream
и ошибок стриминга медиа.
"""

import logging
import json
import traceback
from typing import Any, Dict, Optional
from datetime import datetime


class ErrorReporter:
    """Класс для структурированного логирования ошибок"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        message: str = "",
        include_traceback: bool = True
    ) -> None:
        """
        Логирует ошибку с детальной информацией

        Args:
            error: Исключение для логирования
            context: Дополнительный контекст ошибки (post_id, media_url, etc.)
            message: Дополнительное сообщение об ошибке
            include_traceback: Включать ли traceback в лог
        """
        error_info = {
            "error_type": type(error).__name__,
            "error_message": str(error),
            "timestamp": datetime.now().isoformat(),
            "context": context or {},
            "custom_message": message
        }

        if include_traceback:
            error_info["traceback"] = traceback.format_exc()

        log_message = f"Error: {error_info['error_type']} - {error_info['error_message']}"
        if message:
            log_message = f"{message} | {log_message}"
        if context:
            log_message += f" | Context: {json.dumps(context, ensure_ascii=False, default=str)}"

        self.logger.error(log_message, exc_info=include_traceback, extra={
            "error_info": error_info
        })

    def log_api_error(
        self,
        error: Exception,
        service_name: str,
        endpoint: str,
        request_data: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ) -> None:
        """Логирует ошибки запросов к внешним API"""
        context = {
            "service": service_name,
            "endpoint": endpoint,
            "status_code": status_code,
            "request": request_data,
        }

        message = f"API Error in {service_name}"
        self.log_error(error, context, message)

    def log_streaming_error(
        self,
        error: Exception,
        media_url: str,
        bytes_sent: int,
        range_header: Optional[str] = None
    ) -> None:
        """Логирует обрыв стрима после отправки заголовков клиенту"""
        context = {
            "media_url": media_url,
            "bytes_sent": bytes_sent,
            "range": range_header,
        }

        message = "Streaming aborted after headers were sent"
        self.log_error(error, context, message)


# Глобальный экземпляр ErrorReporter (инициализируется в main.py)
error_reporter: Optional[ErrorReporter] = None


def get_error_reporter() -> ErrorReporter:
    """Получить глобальный экземпляр ErrorReporter"""
    if error_reporter is None:
        raise RuntimeError("Error reporter not initialized. Call setup_error_reporting() first.")
    return error_reporter


def setup_error_reporting(error_logger: logging.Logger) -> None:
    """Инициализировать глобальный ErrorReporter"""
    global error_reporter
    error_reporter = ErrorReporter(error_logger)

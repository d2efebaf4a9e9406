import json
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path

from core.config import AppSettings

ERROR_REPORTS_LOGGER = "error_reports"

# Детальный формат для отчётов об ошибках
error_formatter = logging.Formatter(
	fmt="""%(asctime)s - ERROR REPORT
=====================================
Logger: %(name)s
Level: %(levelname)s
Message: %(message)s
Module: %(module)s
Function: %(funcName)s
Line: %(lineno)d
Process: %(process)d
Exception Type: %(exc_info)s

--- END ERROR REPORT ---
""",
	datefmt="%Y-%m-%d %H:%M:%S"
)

class JsonLineFormatter(logging.Formatter):
	"""Одна JSON-запись на строку, читается scripts/view_error_reports.py"""

	def format(self, record: logging.LogRecord) -> str:
		payload = {
			"timestamp": datetime.fromtimestamp(record.created).isoformat(timespec="seconds"),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
			"module": record.module,
			"function": record.funcName,
			"line": record.lineno,
			"exception": self.formatException(record.exc_info) if record.exc_info else None,
		}
		error_info = getattr(record, "error_info", None)
		if error_info:
			payload["context"] = error_info.get("context")
		return json.dumps(payload, ensure_ascii=False, default=str)


json_error_formatter = JsonLineFormatter()


def configure_logging(app_settings: AppSettings) -> logging.Logger:
	"""Настраивает корневое логирование и возвращает логгер для отчётов об ошибках"""
	level = logging.getLevelName(app_settings.log_level.upper())

	console_handler = logging.StreamHandler()
	console_handler.setLevel(level)
	handlers: list[logging.Handler] = [console_handler]

	error_logger = logging.getLogger(ERROR_REPORTS_LOGGER)
	error_logger.setLevel(logging.ERROR)
	# Отключаем propagation чтобы избежать дублирования в консоли
	error_logger.propagate = False

	if app_settings.log_to_files:
		logs_dir = Path(app_settings.logs_dir)
		logs_dir.mkdir(parents=True, exist_ok=True)

		file_handler = logging.handlers.RotatingFileHandler(
			logs_dir / "app.log",
			maxBytes=10*1024*1024,  # 10MB
			backupCount=5,
			encoding='utf-8'
		)
		file_handler.setLevel(logging.WARNING)
		handlers.append(file_handler)

		error_file_handler = logging.handlers.TimedRotatingFileHandler(
			logs_dir / "errors.log",
			when="midnight",
			interval=1,
			backupCount=30,
			encoding='utf-8'
		)
		error_file_handler.setFormatter(error_formatter)
		error_file_handler.setLevel(logging.ERROR)

		json_error_handler = logging.handlers.RotatingFileHandler(
			logs_dir / "errors.json",
			maxBytes=50*1024*1024,  # 50MB
			backupCount=10,
			encoding='utf-8'
		)
		json_error_handler.setFormatter(json_error_formatter)
		json_error_handler.setLevel(logging.ERROR)

		error_logger.addHandler(error_file_handler)
		error_logger.addHandler(json_error_handler)
	else:
		error_logger.addHandler(console_handler)

	logging.basicConfig(
		level=level,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
		handlers=handlers,
	)

	logging.getLogger("vxtwitter").setLevel(logging.DEBUG)
	logging.getLogger("media.origin").setLevel(logging.DEBUG)
	logging.getLogger("media.stream").setLevel(logging.INFO)
	logging.getLogger("use_cases").setLevel(logging.DEBUG)
	logging.getLogger("request_logger").setLevel(logging.INFO)
	# httpx пишет каждую исходящую попытку на INFO
	logging.getLogger("httpx").setLevel(logging.WARNING)

	return error_logger

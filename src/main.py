import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, settings
from core.error_logger import get_error_reporter, setup_error_reporting
from core.logging_config import configure_logging
from presentation.container import Container
from presentation.errors import register_exception_handlers
from presentation.middleware.logging import log_request_middleware
from presentation.routers.health import router as health_router
from presentation.routers.media_proxy import router as media_proxy_router
from presentation.routers.video_info import router as video_info_router
import uvicorn


def create_app(app_settings: Settings, container: Optional[Container] = None) -> FastAPI:
	container = container or Container(app_settings)

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		logger = logging.getLogger("startup")
		logger.info(
			"Сервис запущен: cache_ttl=%ss upstream=%s",
			app_settings.cache.ttl_seconds,
			app_settings.upstream.metadata_base_url,
		)
		yield
		await container.aclose()
		logger.info("HTTP клиенты закрыты")

	app = FastAPI(title=app_settings.app.title, lifespan=lifespan)
	app.state.container = container

	app.add_middleware(
		CORSMiddleware,
		allow_origins=app_settings.app.cors_origins,
		allow_methods=["GET", "POST", "OPTIONS"],
		allow_headers=["Content-Type", "Range", "Accept", "Origin"],
		expose_headers=["Content-Range", "Content-Length", "Accept-Ranges", "Content-Type", "Content-Disposition"],
		allow_credentials=True,
	)
	if app_settings.app.log_requests:
		app.middleware("http")(log_request_middleware)

	register_exception_handlers(app)

	app.include_router(health_router)
	app.include_router(video_info_router)
	app.include_router(media_proxy_router)
	return app


def build_app() -> FastAPI:
	error_logger = configure_logging(settings.app)
	setup_error_reporting(error_logger)
	logging.getLogger("startup").info(
		"Логирование настроено. Логи сохраняются в директорию: %s", settings.app.logs_dir
	)
	return create_app(settings, Container(settings, error_reporter=get_error_reporter()))


if __name__ == "__main__":
	uvicorn.run(
		"main:build_app",
		factory=True,
		host=settings.app.host,
		port=settings.app.port,
		# Исключаем директорию logs из отслеживания изменений
		reload_excludes=["logs/*", "logs/**/*", "*.log"],
		log_level=settings.app.log_level.lower(),
	)

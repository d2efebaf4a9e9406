import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.errors import InvalidInput, MediaRelayError

logger = logging.getLogger("api_errors")

RESOLVE_ERROR = "Failed to fetch media"
DOWNLOAD_ERROR = "Failed to download media"
INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
	content = {"error": error}
	if details is not None:
		content["details"] = details
	return JSONResponse(status_code=status_code, content=content)


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
	logger.info("Некорректный запрос %s %s: %s", request.method, request.url.path, exc.message)
	return error_response(exc.status_code, exc.message)


async def media_relay_error_handler(request: Request, exc: MediaRelayError) -> JSONResponse:
	logger.error("Ошибка обработки %s %s: %s", request.method, request.url.path, exc.message)
	return error_response(exc.status_code, RESOLVE_ERROR, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
	return error_response(400, "Invalid request", str(exc.errors()))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
	logger.exception("Необработанная ошибка %s %s: %s", request.method, request.url.path, exc)
	return error_response(500, INTERNAL_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
	app.add_exception_handler(InvalidInput, invalid_input_handler)
	app.add_exception_handler(MediaRelayError, media_relay_error_handler)
	app.add_exception_handler(RequestValidationError, validation_error_handler)
	app.add_exception_handler(Exception, unhandled_error_handler)

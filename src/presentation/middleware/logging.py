import logging
from fastapi import Request

logger = logging.getLogger("request_logger")

BODY_METHODS = ("POST", "PUT", "PATCH")


async def log_request_middleware(request: Request, call_next):
    if request.method in BODY_METHODS:
        body = await request.body()
        if body:
            logger.info(f"Request Body: {body.decode('utf-8', errors='ignore')}")

    response = await call_next(request)
    logger.info(
        "%s %s range=%s -> %s",
        request.method,
        request.url.path,
        request.headers.get("range"),
        response.status_code,
    )
    return response

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query
from starlette.background import BackgroundTask
from starlette.responses import StreamingResponse

from domain.errors import UpstreamError
from domain.models import MediaKind
from presentation.container import get_stream_media_uc
from presentation.errors import DOWNLOAD_ERROR, error_response
from presentation.schemas.api import ErrorResponse
from use_cases import StreamMediaUseCase

router = APIRouter(prefix="/api")
logger = logging.getLogger("api.download")


@router.get(
	"/download",
	responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def download_media(
	url: Optional[str] = Query(None, description="Direct media URL to proxy"),
	type: Optional[str] = Query(None, description="photo or video"),
	range_header: Optional[str] = Header(None, alias="range"),
	stream_uc: StreamMediaUseCase = Depends(get_stream_media_uc),
):
	"""Streams media bytes from the origin, forwarding the client's Range header."""
	try:
		media = await stream_uc.execute(url, MediaKind.from_query(type), range_header)
	except UpstreamError as e:
		# Ответ ещё не начат, поэтому можно отдать JSON
		logger.error("Не удалось загрузить медиа %s: %s", url, e.message)
		return error_response(500, DOWNLOAD_ERROR, e.message)

	return StreamingResponse(
		media.body,
		status_code=media.status_code,
		headers=media.headers,
		background=BackgroundTask(media.close),
	)

import logging

from fastapi import APIRouter, Depends

from domain.models import MediaInfo
from presentation.container import get_resolve_media_uc
from presentation.schemas.api import ErrorResponse, VideoInfoRequest
from use_cases import ResolveMediaInfoUseCase

router = APIRouter(prefix="/api")
logger = logging.getLogger("api.video_info")


@router.post(
	"/video-info",
	response_model=MediaInfo,
	response_model_exclude_unset=True,
	responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def video_info(
	payload: VideoInfoRequest,
	resolve_uc: ResolveMediaInfoUseCase = Depends(get_resolve_media_uc),
):
	"""Returns normalized media descriptors of a tweet."""
	logger.info("Запрос медиа для %s", payload.tweetUrl)
	return await resolve_uc.execute(payload.tweetUrl)

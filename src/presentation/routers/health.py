from fastapi import APIRouter

from presentation.schemas.api import ApiStatus

router = APIRouter()


@router.get("/", response_model=ApiStatus)
async def root():
	"""Liveness check."""
	return ApiStatus()

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel


class VideoInfoRequest(BaseModel):
    # Необязательное поле: пустой запрос должен давать 400, а не 422
    tweetUrl: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class ApiStatus(BaseModel):
    message: str = "API is running"

from .resolve_media import ResolveMediaInfoUseCase
from .stream_media import StreamMediaUseCase, StreamedMedia
from .identifiers import extract_post_id

__all__ = [
	"ResolveMediaInfoUseCase",
	"StreamMediaUseCase",
	"StreamedMedia",
	"extract_post_id",
]

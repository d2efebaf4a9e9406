from .metadata_provider import MetadataProvider
from .media_cache import MediaCache
from .media_origin import MediaOrigin

__all__ = [
	"MetadataProvider",
	"MediaCache",
	"MediaOrigin",
]

from .media import (
	MediaKind,
	Rendition,
	VideoMedia,
	PhotoMedia,
	MediaDescriptor,
	MediaInfo,
)

__all__ = [
	"MediaKind",
	"Rendition",
	"VideoMedia",
	"PhotoMedia",
	"MediaDescriptor",
	"MediaInfo",
]

from .fetcher import ImageFetcher
from .media_types import ImageFormat, is_gif

__all__ = ["ImageFetcher", "ImageFormat", "is_gif"]

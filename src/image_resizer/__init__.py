"""image_resizer - Resize-on-demand image delivery."""

from .common.config import ResizerConfig
from .common.errors import ErrorKind, ResizerError
from .common.schemas import FetchedImage, ResizedImage, Size
from .resize.algo.resize_to_fit import resize_to_fit
from .resize.schema import FitSpec
from .resize.task import ImageResizer
from .server import create_app
from .utils.fetcher import ImageFetcher

__version__ = "0.1.0"

__all__ = [
    "ResizerConfig",
    "ErrorKind",
    "ResizerError",
    "FetchedImage",
    "ResizedImage",
    "Size",
    "FitSpec",
    "ImageFetcher",
    "ImageResizer",
    "resize_to_fit",
    "create_app",
    "__version__",
]

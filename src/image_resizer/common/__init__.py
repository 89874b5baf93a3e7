"""Common module - configuration, errors and value types."""

from .config import ResizerConfig, parse_size
from .errors import (
    BadRequestShapeError,
    DecodeError,
    EncodeError,
    ErrorKind,
    FetchError,
    ResizerError,
    SizeMismatchError,
)
from .schemas import FetchedImage, ResizedImage, Size

__all__ = [
    "ResizerConfig",
    "parse_size",
    "ErrorKind",
    "ResizerError",
    "FetchError",
    "DecodeError",
    "SizeMismatchError",
    "EncodeError",
    "BadRequestShapeError",
    "FetchedImage",
    "ResizedImage",
    "Size",
]

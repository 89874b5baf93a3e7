"""Resize pipeline - path parsing, fetch-then-transform and routes."""

from .request import parse_resize_request
from .routes import create_router
from .schema import FitSpec, ResizeRequest
from .task import ImageResizer

__all__ = [
    "FitSpec",
    "ResizeRequest",
    "ImageResizer",
    "create_router",
    "parse_resize_request",
]

"""Resize request schemas."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..common.schemas import Size


class FitSpec(BaseModel):
    """How a fetched image should be transformed.

    Attributes:
        size: Requested bounding box; either axis may be 0
        exact: Set by the ``exact/`` path prefix
        freeze_animation: Set by ``?freeze=true``; turns GIFs into a static PNG
    """

    size: Size
    exact: bool = False
    freeze_animation: bool = False

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ResizeRequest(BaseModel):
    """A parsed request path."""

    key: str = Field(description="Origin key appended to the base URL")
    fit: FitSpec | None = Field(default=None, description="None serves the original unsized")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

"""Value types shared by the fetcher, the transform engine and the routes."""

from typing import ClassVar, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Size(NamedTuple):
    """A pixel bounding box. A zero axis means "unconstrained"."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class FetchedImage(BaseModel):
    """Raw bytes from the origin plus the Content-Type it declared."""

    mimetype: str = Field(default="", description="Content-Type reported by the origin")
    content: bytes

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ResizedImage(BaseModel):
    """Bytes ready to be written out, with their true mimetype."""

    mimetype: str
    content: bytes

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

"""Test configuration and fixtures for image_resizer.

This module provides:
- In-memory image factories (JPEG, PNG, BMP, static and animated GIF)
- The fake origin (see fake_origin.py)
- A FastAPI TestClient wired to the fake origin
- A loguru capture fixture
"""

from collections.abc import Callable, Iterator
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from loguru import logger
from PIL import Image, ImageDraw

from image_resizer.common.config import ResizerConfig
from image_resizer.server import create_app

from .fake_origin import ORIGIN_BASE_URL, FakeOrigin

ImageFactory = Callable[..., bytes]


# ============================================================================
# Image Factories
# ============================================================================


def _pattern(size: tuple[int, int], color: tuple[int, int, int]) -> Image.Image:
    """Solid background with a grid and a disc so resampling has something to do."""
    width, height = size
    img = Image.new("RGB", size, color=color)
    draw = ImageDraw.Draw(img)
    for x in range(0, width, 10):
        draw.line([(x, 0), (x, height)], fill=(255, 255, 255), width=1)
    for y in range(0, height, 10):
        draw.line([(0, y), (width, y)], fill=(255, 255, 255), width=1)
    draw.ellipse([width // 4, height // 4, 3 * width // 4, 3 * height // 4], fill=(200, 100, 100))
    return img


@pytest.fixture
def make_image() -> ImageFactory:
    """Encode a generated image in the given Pillow format."""

    def _make(
        pil_format: str,
        size: tuple[int, int],
        color: tuple[int, int, int] = (73, 109, 137),
        mode: str | None = None,
    ) -> bytes:
        img = _pattern(size, color)
        if mode is not None:
            img = img.convert(mode)
        buf = BytesIO()
        img.save(buf, format=pil_format)
        return buf.getvalue()

    return _make


@pytest.fixture
def animated_gif() -> bytes:
    """A 64x64 three-frame animated GIF."""
    frames = [
        _pattern((64, 64), color)
        for color in ((255, 0, 0), (0, 255, 0), (0, 0, 255))
    ]
    buf = BytesIO()
    frames[0].save(
        buf,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=100,
        loop=0,
    )
    return buf.getvalue()


# ============================================================================
# Origin and App
# ============================================================================


@pytest.fixture
def origin() -> FakeOrigin:
    return FakeOrigin()


@pytest.fixture
def config() -> ResizerConfig:
    return ResizerConfig(base_url=ORIGIN_BASE_URL, max_size="1000x1000")


@pytest.fixture
def api_client(config: ResizerConfig, origin: FakeOrigin) -> Iterator[TestClient]:
    """Provide FastAPI TestClient backed by the fake origin."""
    app = create_app(config, transport=origin.transport)
    with TestClient(app) as client:
        yield client


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def loguru_messages() -> Iterator[list[str]]:
    """Collect loguru messages at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)

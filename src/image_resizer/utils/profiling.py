"""Phase timing for fetch, decode, resize and encode."""

import time
from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger


@contextmanager
def span(name: str, **fields: object) -> Iterator[dict[str, object]]:
    """Time a block and log it with the given fields at DEBUG level.

    The yielded dict can be extended inside the block to attach fields that
    are only known later, e.g. the detected image format.

    Usage:
        with span("image_decode", url=url) as fields:
            img = decode(...)
            fields["image_format"] = "jpeg"
    """
    start_time = time.perf_counter()
    try:
        yield fields
    finally:
        elapsed_time = time.perf_counter() - start_time
        logger.bind(span=name, **fields).debug(f"[SPAN] {name} took {elapsed_time:.3f}s {fields}")


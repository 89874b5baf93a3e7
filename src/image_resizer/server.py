"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger

from .common.config import ResizerConfig
from .common.errors import ErrorKind, ResizerError
from .resize.routes import create_router
from .resize.task import ImageResizer
from .utils.fetcher import ImageFetcher

SERVICE_NAME = "image-resizer"

# Error kind -> HTTP status; encode failures are server-side
ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST_SHAPE: 404,
    ErrorKind.FETCH_FAILED: 400,
    ErrorKind.DECODE_FAILED: 400,
    ErrorKind.SIZE_MISMATCH: 400,
    ErrorKind.ENCODE_FAILED: 500,
}


def status_for(error: ResizerError) -> int:
    return ERROR_STATUS.get(error.kind, 400)


def create_app(
    config: ResizerConfig,
    transport: httpx.BaseTransport | None = None,
) -> FastAPI:
    """Build the resizer app.

    Args:
        config: Validated service configuration
        transport: Optional httpx transport for the origin client (tests)

    Returns:
        FastAPI app serving ``/healthz`` and the resize endpoint

    Example:
        app = create_app(ResizerConfig(base_url="https://assets.example.com/"))
        uvicorn.run(app, host="0.0.0.0", port=8080)
    """
    fetcher = ImageFetcher(timeout=config.fetch_timeout, transport=transport)
    resizer = ImageResizer(base_url=config.base_url, fetcher=fetcher)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            fetcher.close()

    app = FastAPI(title="Image Resizer", lifespan=lifespan)

    @app.exception_handler(ResizerError)
    async def handle_resizer_error(request: Request, exc: ResizerError) -> PlainTextResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(f"{request.url.path}: {exc.kind}: {exc}")
        else:
            logger.warning(f"{request.url.path}: {exc.kind}: {exc}")
        if exc.kind is ErrorKind.BAD_REQUEST_SHAPE:
            return PlainTextResponse("404 page not found", status_code=status_code)
        return PlainTextResponse(str(exc), status_code=status_code)

    @app.get("/healthz", response_class=PlainTextResponse)
    def healthz() -> str:
        return SERVICE_NAME

    app.include_router(create_router(resizer, config.max_size))

    _ = (handle_resizer_error, healthz)
    return app

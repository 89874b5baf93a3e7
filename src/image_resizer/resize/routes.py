"""Resize route factory."""

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from ..common.errors import FetchError
from ..common.schemas import Size
from .request import parse_resize_request
from .task import ImageResizer

CACHE_CONTROL = "public, max-age=2592000"


def image_response(mimetype: str, content: bytes) -> Response:
    """Write image bytes verbatim with long-lived caching headers.

    The mimetype is written as given: no charset is appended to ``text/*``
    types and an empty value is still sent. Content-Length is filled in by the
    response from ``content``.
    """
    return Response(
        content=content,
        headers={"Content-Type": mimetype, "Cache-Control": CACHE_CONTROL},
    )


def freeze_requested(request: Request) -> bool:
    """True when the first ``freeze`` query value is exactly ``true``."""
    values = request.query_params.getlist("freeze")
    return bool(values) and values[0] == "true"


def create_router(resizer: ImageResizer, max_size: Size) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        resizer: ImageResizer bound to the origin
        max_size: Largest width and height a client may request

    Returns:
        APIRouter with the catch-all image endpoint. Mount it after any
        fixed routes such as ``/healthz``.
    """
    router = APIRouter()

    # Sync handler: FastAPI runs it in its threadpool, one call per request.
    @router.get("/{path:path}")
    def get_image(path: str, request: Request) -> Response:
        resize_request = parse_resize_request(path, freeze_requested(request), max_size)

        if resize_request.fit is None:
            try:
                fetched = resizer.fetch_original(resize_request.key)
            except FetchError:
                return PlainTextResponse("404 page not found", status_code=404)
            return image_response(fetched.mimetype, fetched.content)

        resized = resizer.resize_to_fit(resize_request.key, resize_request.fit)
        return image_response(resized.mimetype, resized.content)

    _ = get_image
    return router

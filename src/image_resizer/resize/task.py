"""Fetch-then-transform orchestration."""

from ..common.errors import FetchError
from ..common.schemas import FetchedImage, ResizedImage
from ..utils.fetcher import ImageFetcher
from ..utils.profiling import span
from .algo.resize_to_fit import resize_to_fit
from .schema import FitSpec


class ImageResizer:
    """Resolve keys against the origin and resize what comes back.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(self, base_url: str, fetcher: ImageFetcher):
        self.base_url: str = base_url
        self.fetcher: ImageFetcher = fetcher

    def url_for(self, key: str) -> str:
        return self.base_url + key

    def fetch_original(self, key: str) -> FetchedImage:
        """Fetch ``key`` as-is. Raises FetchError."""
        return self.fetcher.fetch(self.url_for(key))

    def resize_to_fit(self, key: str, fit: FitSpec) -> ResizedImage:
        """Fetch ``key`` and transform it according to ``fit``.

        Raises:
            FetchError: Wrapped as "failed to fetch image: ..."
            DecodeError, SizeMismatchError, EncodeError: From the transform
        """
        with span("resize_to_fit", key=key, size=str(fit.size)):
            try:
                fetched = self.fetch_original(key)
            except FetchError as e:
                raise FetchError(f"failed to fetch image: {e}") from e

            return resize_to_fit(
                content=fetched.content,
                declared_mimetype=fetched.mimetype,
                size=fit.size,
                exact=fit.exact,
                freeze_animation=fit.freeze_animation,
            )

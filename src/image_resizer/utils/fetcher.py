"""Origin fetcher.

Retrieves the raw bytes and declared Content-Type for a URL. Key escaping is
the caller's job; the URL is requested as given.
"""

import logging

import httpx

from ..common.errors import FetchError
from ..common.schemas import FetchedImage
from .profiling import span

logger = logging.getLogger(__name__)


class ImageFetcher:
    """Fetch images from the origin over a shared httpx client.

    One GET per call, no retries. Only HTTP 200 counts as success.
    """

    def __init__(
        self,
        timeout: float | None = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the fetcher.

        Args:
            timeout: Request deadline in seconds. None waits forever.
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.client: httpx.Client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def fetch(self, url: str) -> FetchedImage:
        """Fetch ``url`` into memory.

        Returns:
            FetchedImage with the origin's Content-Type (verbatim, may be empty)

        Raises:
            FetchError: On an invalid URL, network failure, non-200 status or body
                read failure
        """
        with span("fetch_image_bytes", url=url):
            logger.debug(f"Fetching {url}")
            try:
                response = self.client.get(url)
            # InvalidURL is not an HTTPError; keys may decode to control characters
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning(f"Failed to fetch {url}: {e}")
                raise FetchError(str(e)) from e

            if response.status_code != httpx.codes.OK:
                logger.warning(f"Origin returned {response.status_code} for {url}")
                raise FetchError(
                    f"couldn't fetch asset: {response.status_code} {response.reason_phrase} "
                    + f"({response.status_code})"
                )

            return FetchedImage(
                mimetype=response.headers.get("content-type", ""),
                content=response.content,
            )

    def close(self) -> None:
        self.client.close()

"""Production HTTP client using httpx."""

import logging

import httpx

from pluginwatch.core.http.abc import HttpClient
from pluginwatch.core.types import FetchResult, Found, NotFound, TransportError
from pluginwatch.version import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"pluginwatch/{__version__}"


class RealHttpClient(HttpClient):
    """HttpClient backed by httpx with a finite timeout and no retries."""

    def __init__(
        self,
        *,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create the client.

        Args:
            timeout_seconds: Connect and read timeout for each request
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    def fetch(self, url: str) -> FetchResult:
        logger.debug("GET %s", url)
        # Acceptable exception use: httpx reports transport failures only by raising
        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("GET %s failed: %s", url, e)
            return TransportError(detail=f"{type(e).__name__}: {e}")

        if response.status_code == 404:
            return NotFound()
        if response.is_success:
            return Found(body=response.content)
        return TransportError(detail=f"HTTP {response.status_code}")

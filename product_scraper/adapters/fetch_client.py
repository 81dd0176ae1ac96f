"""
Fetch Client adapter for the Product Scraper.
Retrieves product page HTML with browser-like headers.
"""
from typing import Optional

import httpx

from product_scraper.config import config
from product_scraper.errors import FetchError
from product_scraper.utils.logger import LayerLogger


class FetchClient:
    """
    Thin HTTP GET wrapper.

    No retries and no caching; redirects follow the client default.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.transport = transport
        self.logger = LayerLogger("fetch_client")

    async def fetch(self, url: str) -> str:
        """
        Fetch raw HTML for a product page.

        Args:
            url: The product page URL

        Returns:
            Response body as text

        Raises:
            FetchError: non-2xx status or transport failure
        """
        self.logger.log_action("fetch_html", "started", url=url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url, headers=self._get_headers())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.log_error(
                f"Failed to fetch URL: {str(e)}",
                error_type="transport_error",
                url=url
            )
            raise FetchError(f"Failed to fetch product page: {str(e)}", url=url) from e

        if not response.is_success:
            self.logger.log_error(
                f"Unexpected status {response.status_code}",
                error_type="http_status",
                url=url,
                status_code=response.status_code
            )
            raise FetchError(
                f"Failed to fetch product page: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )

        html = response.text
        self.logger.log_action(
            "fetch_html",
            "completed",
            url=url,
            status_code=response.status_code,
            content_length=len(html)
        )
        return html

    def _get_headers(self) -> dict:
        """Get request headers mimicking a browser."""
        return config.request_headers()

"""
Typed failures raised by the extraction pipeline.
Locator misses are never errors; only these reach the caller.
"""
from typing import Optional


class ProductScraperError(Exception):
    """Base class for every failure the pipeline reports to its caller."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url


class UnsupportedPlatformError(ProductScraperError):
    """URL matches neither supported platform. Raised before any network call."""

    def __init__(self, url: str):
        super().__init__(
            "Unsupported platform. Only Amazon and Flipkart URLs are supported.",
            url=url,
        )


class FetchError(ProductScraperError):
    """Non-2xx response or transport failure while retrieving the page."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class ScrapeError(ProductScraperError):
    """Any failure while parsing or extracting; wraps the underlying cause."""

"""
Platform detection for the Product Scraper.
Decides which retailer a URL belongs to before anything touches the network.
"""
from typing import Optional, Tuple

from product_scraper.errors import UnsupportedPlatformError
from product_scraper.models.product import Platform


# Substring patterns, checked in order
PLATFORM_PATTERNS: Tuple[Tuple[Platform, Tuple[str, ...]], ...] = (
    (Platform.AMAZON, ("amazon.in", "amazon.com")),
    (Platform.FLIPKART, ("flipkart.com",)),
)


def match_platform(url: str) -> Optional[Platform]:
    """Return the platform whose host pattern appears in ``url``, or None."""
    for platform, patterns in PLATFORM_PATTERNS:
        if any(pattern in url for pattern in patterns):
            return platform
    return None


def detect_platform(url: str) -> Platform:
    """Like match_platform, but unsupported URLs raise UnsupportedPlatformError."""
    platform = match_platform(url)
    if platform is None:
        raise UnsupportedPlatformError(url)
    return platform


def is_supported_url(url: str) -> bool:
    return match_platform(url) is not None

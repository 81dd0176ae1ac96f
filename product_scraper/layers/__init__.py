"""Layers package initialization."""
from product_scraper.layers.platform_detection import detect_platform, is_supported_url, match_platform
from product_scraper.layers.extraction import ExtractionLayer, extract

__all__ = [
    "detect_platform",
    "is_supported_url",
    "match_platform",
    "ExtractionLayer",
    "extract",
]

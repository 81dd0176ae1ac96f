"""Models package initialization."""
from product_scraper.models.product import (
    DESCRIPTION_NOT_AVAILABLE,
    GENERAL_CATEGORY,
    TITLE_NOT_FOUND,
    Platform,
    RawFields,
    ScrapedProduct,
    StoredProduct,
)
from product_scraper.models.rules import CategoryRule, LocatorRule, PlatformRules

__all__ = [
    "DESCRIPTION_NOT_AVAILABLE",
    "GENERAL_CATEGORY",
    "TITLE_NOT_FOUND",
    "Platform",
    "RawFields",
    "ScrapedProduct",
    "StoredProduct",
    "CategoryRule",
    "LocatorRule",
    "PlatformRules",
]

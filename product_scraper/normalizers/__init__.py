"""Normalizers package initialization."""
from product_scraper.normalizers.price import PriceNormalizer, compute_discount, parse_discount_text
from product_scraper.normalizers.category import CategoryClassifier, DEFAULT_CATEGORY_RULES

__all__ = [
    "PriceNormalizer",
    "compute_discount",
    "parse_discount_text",
    "CategoryClassifier",
    "DEFAULT_CATEGORY_RULES",
]

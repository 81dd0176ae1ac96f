"""Extractors package initialization."""
from typing import Dict

from product_scraper.extractors.base import PlatformExtractor, first_match, resolve_rule
from product_scraper.extractors.amazon import AMAZON_RULES, AmazonExtractor
from product_scraper.extractors.flipkart import FLIPKART_RULES, FlipkartExtractor
from product_scraper.models.product import Platform


def default_extractors() -> Dict[Platform, PlatformExtractor]:
    """One extractor per supported platform, keyed for orchestrator dispatch."""
    extractors = (AmazonExtractor(), FlipkartExtractor())
    return {extractor.platform: extractor for extractor in extractors}


__all__ = [
    "PlatformExtractor",
    "first_match",
    "resolve_rule",
    "AMAZON_RULES",
    "AmazonExtractor",
    "FLIPKART_RULES",
    "FlipkartExtractor",
    "default_extractors",
]

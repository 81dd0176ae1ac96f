"""Adapters package initialization."""
from product_scraper.adapters.fetch_client import FetchClient

__all__ = ["FetchClient"]

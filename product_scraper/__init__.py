"""Product Scraper: builds catalog entries from Amazon and Flipkart product pages."""

__version__ = "1.0.0"

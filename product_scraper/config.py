"""
Configuration management for the Product Scraper.
Handles environment variables and extraction thresholds.
"""
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Config:
    """Application configuration loaded from environment variables."""

    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")  # json or console

    # Request settings
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
    ACCEPT_LANGUAGE: str = os.getenv("ACCEPT_LANGUAGE", "en-US,en;q=0.9")
    MAX_CONCURRENT_SCRAPES: int = int(os.getenv("MAX_CONCURRENT_SCRAPES", "4"))

    # Extraction thresholds (empirically tuned, not domain truths)
    PRICE_MIN: Decimal = Decimal(os.getenv("PRICE_MIN", "1"))
    PRICE_MAX: Decimal = Decimal(os.getenv("PRICE_MAX", "5000000"))
    TITLE_MIN_LENGTH: int = int(os.getenv("TITLE_MIN_LENGTH", "10"))

    @classmethod
    def request_headers(cls) -> dict:
        """Browser-like headers sent with every page fetch."""
        return {
            "User-Agent": cls.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
            "Accept-Language": cls.ACCEPT_LANGUAGE,
            "Cache-Control": "no-cache",
            "Upgrade-Insecure-Requests": "1",
        }


config = Config()

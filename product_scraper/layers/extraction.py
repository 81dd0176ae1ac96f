"""
Extraction Layer for the Product Scraper.
Turns a product URL into a normalized ScrapedProduct.
"""
from typing import Mapping, Optional

from bs4 import BeautifulSoup

from product_scraper.adapters.fetch_client import FetchClient
from product_scraper.errors import ProductScraperError, ScrapeError
from product_scraper.extractors import PlatformExtractor, default_extractors
from product_scraper.layers.platform_detection import detect_platform
from product_scraper.models.product import Platform, RawFields, ScrapedProduct
from product_scraper.normalizers.category import CategoryClassifier
from product_scraper.normalizers.price import PriceNormalizer, compute_discount, parse_discount_text
from product_scraper.utils.logger import LayerLogger
from product_scraper.utils.text import normalize_whitespace


class ExtractionLayer:
    """
    Extraction Layer - orchestrates one scrape.

    This layer:
    - Rejects unsupported URLs before any network call
    - Fetches and parses the page, then dispatches by platform
    - Normalizes prices, resolves discount and category

    Holds only immutable collaborators; concurrent calls share nothing.
    """

    def __init__(
        self,
        fetch_client: Optional[FetchClient] = None,
        extractors: Optional[Mapping[Platform, PlatformExtractor]] = None,
        price_normalizer: Optional[PriceNormalizer] = None,
        category_classifier: Optional[CategoryClassifier] = None,
    ):
        self.logger = LayerLogger("extraction_layer")
        self.fetch_client = fetch_client or FetchClient()
        self.extractors = dict(extractors) if extractors is not None else default_extractors()
        self.price_normalizer = price_normalizer or PriceNormalizer()
        self.category_classifier = category_classifier or CategoryClassifier()

    async def extract(self, url: str) -> ScrapedProduct:
        """
        Scrape a product page into a ScrapedProduct.

        Raises:
            UnsupportedPlatformError: URL matches no supported platform
            FetchError: the page could not be retrieved
            ScrapeError: parsing or extraction failed
        """
        platform = detect_platform(url)
        self.logger.log_decision(
            decision=f"use_{platform.value}_extractor",
            reason="URL host pattern matched",
            url=url
        )

        try:
            html = await self.fetch_client.fetch(url)
            product = self.extract_from_html(url, platform, html)
        except ProductScraperError:
            raise
        except Exception as e:
            self.logger.log_error(
                f"Failed to scrape product: {str(e)}",
                error_type=type(e).__name__,
                url=url
            )
            raise ScrapeError(f"Failed to scrape product: {str(e)}", url=url) from e

        self.logger.log_extraction(
            platform=platform.value,
            fields_present=product.get_present_fields(),
            fields_missing=product.get_missing_fields(),
            url=url
        )
        return product

    def extract_from_html(self, url: str, platform: Platform, html: str) -> ScrapedProduct:
        """Parse already-fetched HTML and assemble the product record."""
        extractor = self.extractors.get(platform)
        if extractor is None:
            raise ScrapeError(f"No extractor registered for platform '{platform.value}'", url=url)

        soup = BeautifulSoup(html, "lxml")
        raw = extractor.extract_fields(soup)
        return self._assemble(url, platform, raw)

    def _assemble(self, url: str, platform: Platform, raw: RawFields) -> ScrapedProduct:
        sale_price = self.price_normalizer.normalize(raw.sale_price_text)
        original_price = self.price_normalizer.normalize(raw.original_price_text)

        # An on-page badge wins over the price difference
        discount = parse_discount_text(raw.discount_text)
        if discount is None:
            discount = compute_discount(original_price, sale_price)

        title = normalize_whitespace(raw.title)
        category = self.category_classifier.classify(
            title, normalize_whitespace(raw.category_text)
        )

        return ScrapedProduct(
            title=title,
            description=normalize_whitespace(raw.description),
            image_url=normalize_whitespace(raw.image_url),
            original_price=original_price,
            sale_price=sale_price,
            discount=discount,
            category=category,
            platform=platform,
            product_url=url,
        )


_default_layer: Optional[ExtractionLayer] = None


async def extract(url: str) -> ScrapedProduct:
    """Scrape ``url`` with a process-wide default ExtractionLayer."""
    global _default_layer
    if _default_layer is None:
        _default_layer = ExtractionLayer()
    return await _default_layer.extract(url)

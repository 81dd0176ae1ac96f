"""
Amazon (amazon.in / amazon.com) locator rules.

Earlier rules target the current product page layout; later rules are
fallbacks for older or alternate layouts.
"""
from product_scraper.extractors.base import PlatformExtractor
from product_scraper.models.product import Platform
from product_scraper.models.rules import LocatorRule, PlatformRules

# Struck-through MRP blocks must never be read as the price to pay
STRIKE_PRICE = (".a-text-strike", "[data-a-strike='true']")


AMAZON_RULES = PlatformRules(
    title=(
        LocatorRule("#productTitle"),
        LocatorRule('h1[id="title"]'),
        LocatorRule('span[id="productTitle"]'),
        LocatorRule(".product-title"),
        LocatorRule('[data-automation-id="product-title"]'),
        LocatorRule("h1.a-size-large"),
        LocatorRule("h1"),
    ),
    description=(
        LocatorRule("#feature-bullets ul li span", scan=True),
        LocatorRule("#feature-bullets ul li", scan=True),
        LocatorRule(".a-unordered-list .a-list-item"),
        LocatorRule(".product-bullets ul li"),
        LocatorRule('[data-automation-id="productDescription"]'),
        LocatorRule("#productDescription"),
        LocatorRule(".a-section .a-spacing-medium"),
    ),
    image=(
        LocatorRule("#landingImage", attribute="src", fallback_attributes=("data-old-hires", "data-src")),
        LocatorRule("#imgBlkFront", attribute="src", fallback_attributes=("data-src",)),
        LocatorRule(".a-dynamic-image", attribute="src", fallback_attributes=("data-src",)),
        LocatorRule("img[data-old-hires]", attribute="data-old-hires"),
        LocatorRule('img[id*="image"]', attribute="src", fallback_attributes=("data-src",)),
    ),
    sale_price=(
        LocatorRule(".a-price.a-text-price.a-size-medium.apexPriceToPay .a-offscreen"),
        LocatorRule(".a-price-current .a-offscreen", exclude=STRIKE_PRICE),
        LocatorRule(".a-price .a-offscreen", exclude=STRIKE_PRICE),
        LocatorRule(".a-price-whole", exclude=STRIKE_PRICE),
        LocatorRule(".a-offscreen", exclude=STRIKE_PRICE),
        LocatorRule('[data-automation-id="price"]'),
        LocatorRule(".a-text-price .a-offscreen", exclude=STRIKE_PRICE),
        LocatorRule(".a-price-range .a-offscreen"),
        LocatorRule("#priceblock_dealprice"),
        LocatorRule("#priceblock_ourprice"),
        LocatorRule("#price_inside_buybox"),
        LocatorRule(".a-size-medium.a-color-price"),
        LocatorRule(".a-price.a-text-normal .a-offscreen"),
        # Last resort: any price block showing a currency symbol
        LocatorRule(".a-price", scan=True, exclude=STRIKE_PRICE),
    ),
    original_price=(
        LocatorRule(".a-price.a-text-strike .a-offscreen"),
        LocatorRule(".a-price[data-a-strike='true'] .a-offscreen"),
        LocatorRule(".a-price-was .a-offscreen"),
        LocatorRule(".a-text-strike .a-offscreen"),
        LocatorRule('[data-automation-id="was-price"]'),
        LocatorRule("#price .a-text-strike .a-offscreen"),
        LocatorRule(".a-price-old .a-offscreen"),
        LocatorRule(".a-text-strike"),
    ),
    discount=(
        LocatorRule(".savingsPercentage"),
        LocatorRule('[data-automation-id="discount"]'),
    ),
    category=(
        LocatorRule("#wayfinding-breadcrumbs_feature_div li:nth-child(2) a"),
        LocatorRule("#wayfinding-breadcrumbs_feature_div li:nth-child(3) a"),
        LocatorRule(".a-breadcrumb li:nth-child(2) a"),
        LocatorRule("#wayfinding-breadcrumbs_feature_div li a"),
        LocatorRule(".nav-subnav a"),
    ),
    brand_names=("amazon", "amazon.in", "amazon.com"),
)


class AmazonExtractor(PlatformExtractor):
    """Amazon product page extractor."""

    platform = Platform.AMAZON
    default_rules = AMAZON_RULES

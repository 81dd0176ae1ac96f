"""
Flipkart locator rules.

Flipkart ships obfuscated, frequently rotated class names. The newest layout
comes first, then classic layouts, then generic fallbacks.
"""
from product_scraper.extractors.base import PlatformExtractor
from product_scraper.models.product import Platform
from product_scraper.models.rules import LocatorRule, PlatformRules

LAZY_IMAGE_ATTRIBUTES = ("data-src", "data-lazy-src", "data-original")


def _image(selector: str) -> LocatorRule:
    return LocatorRule(selector, attribute="src", fallback_attributes=LAZY_IMAGE_ATTRIBUTES)


FLIPKART_RULES = PlatformRules(
    title=(
        LocatorRule('span[class*="VU-ZEz"]'),
        LocatorRule('h1[class*="VU-ZEz"]'),
        LocatorRule("span.VU-ZEz"),
        LocatorRule(".VU-ZEz"),
        LocatorRule(".B_NuCI"),
        LocatorRule("._35KyD6"),
        LocatorRule('h1[class*="title"]'),
        LocatorRule("._6EBuvT"),
        LocatorRule("span.B_NuCI"),
        LocatorRule(".x-product-title-label"),
        LocatorRule('._1AtVbE div[class*="col-"]'),
        LocatorRule("h1._1AtVbE"),
        LocatorRule('span[class*="_1AtVbE"]'),
        LocatorRule('div[class*="B_NuCI"]'),
        LocatorRule('h1[data-automation-id="product-title"]'),
        LocatorRule(".product-title"),
        LocatorRule('h1[class*="_35KyD6"]'),
        LocatorRule('span[class*="_35KyD6"]'),
        LocatorRule("h1"),
        LocatorRule("h2"),
    ),
    description=(
        LocatorRule("._1mXcCf"),
        LocatorRule("._3WHvuP"),
        LocatorRule("._4gvKMe"),
        LocatorRule(".product-description"),
        LocatorRule("._2418kt"),
        LocatorRule("._1AN87F"),
        LocatorRule("._1mXcCf._13RGX6"),
        LocatorRule('div[class*="_1mXcCf"]'),
        LocatorRule('p[class*="_1mXcCf"]'),
        LocatorRule("._3WHvuP div"),
        LocatorRule('[data-automation-id="product-description"]'),
    ),
    image=(
        _image('img[class*="_0DkuPH"]'),
        _image('img[class*="_53J4C-"]'),
        _image("img._53J4C-._2FaSu6"),
        _image("img._396cs4"),
        _image("img._2r_T1I"),
        _image('img[class*="_396cs4"]'),
        _image('img[class*="_2r_T1I"]'),
        _image('img[class*="_4WELSP"]'),
        _image('img[class*="_2FaSu6"]'),
        _image("._1BweW8 img"),
        _image("._2upR2l img"),
        _image("._3587i4 img"),
        _image(".CXW8mj img"),
        _image("._2nnSb9 img"),
        _image("._1Nyybr img"),
        _image("._3BTv9X img"),
        _image("._2eqpOb img"),
        _image('div[class*="_1AtVbE"] img'),
        _image('img[alt*="product"]'),
        _image('img[data-automation-id="product-image"]'),
        _image("._3BTv9X ._2FaSu6"),
        _image('div[class*="image"] img'),
        _image("figure img"),
        _image(".q6DClP img"),
        # Flipkart image CDN
        _image('img[src*="rukminim"]'),
    ),
    sale_price=(
        LocatorRule('div[class*="Nx9bqj"] span'),
        LocatorRule('span[class*="Nx9bqj"]'),
        LocatorRule('div[class*="_30jeq3"] span'),
        LocatorRule("._30jeq3._16Jk6d"),
        LocatorRule("._3I9_wc._2p6lqe"),
        LocatorRule("._1_WHN1"),
        LocatorRule("._25b18c"),
        LocatorRule("._16Jk6d"),
        LocatorRule("._2Y87o_ ._3I9_wc"),
        LocatorRule("._1vC4OE ._3I9_wc"),
        LocatorRule("._5H1SUz ._3I9_wc"),
        LocatorRule("._3I9_wc"),
        LocatorRule("._4b5DiR"),
        LocatorRule("._1Y8a60"),
        LocatorRule(".Nx9bqj.CxhGGd"),
        LocatorRule(".Nx9bqj"),
        LocatorRule(".CxhGGd"),
        LocatorRule('div[class*="CxhGGd"]'),
        LocatorRule('[data-automation-id="current-price"]'),
        LocatorRule(".current-price"),
    ),
    original_price=(
        LocatorRule('div[class*="yRaY8j"] span'),
        LocatorRule('span[class*="yRaY8j"]'),
        LocatorRule('div[class*="_3I9_wc"][class*="_27UcVY"]'),
        LocatorRule("._3I9_wc._27UcVY"),
        LocatorRule("._2p6lqe"),
        LocatorRule("._3auQ3N"),
        LocatorRule("._3YN9BK ._2p6lqe"),
        LocatorRule("._5Gpcqm ._2p6lqe"),
        LocatorRule("._27UcVY"),
        LocatorRule("._1YaYEu"),
        LocatorRule("._5Gpcqm"),
        LocatorRule(".yRaY8j.ZYYwLA"),
        LocatorRule(".yRaY8j"),
        LocatorRule('div[class*="ZYYwLA"]'),
        LocatorRule('[data-automation-id="original-price"]'),
        LocatorRule(".original-price"),
        LocatorRule('span[style*="text-decoration: line-through"]'),
        LocatorRule('span[style*="line-through"]'),
        LocatorRule(".line-through"),
    ),
    discount=(
        LocatorRule("._3Ay6Sb._31Dcoz"),
        LocatorRule("._3I9_wc._1_WHN1"),
        LocatorRule("._3Ay6Sb"),
        LocatorRule("._1UhVsV"),
        LocatorRule('[data-automation-id="discount"]'),
        LocatorRule(".discount-percent"),
        LocatorRule('div[class*="UkUFwK"] span'),
    ),
    category=(
        LocatorRule("._1HEvpc"),
        LocatorRule("._2whP9R"),
        LocatorRule(".breadcrumb li:nth-child(2)"),
    ),
    brand_names=("flipkart",),
    brand_match_anywhere=True,
    description_min_length=20,
)


class FlipkartExtractor(PlatformExtractor):
    """Flipkart product page extractor."""

    platform = Platform.FLIPKART
    default_rules = FLIPKART_RULES

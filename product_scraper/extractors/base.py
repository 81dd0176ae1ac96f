"""
Locator rule runner and the PlatformExtractor base class.

Every field on every platform is resolved the same way: walk the field's
ordered rule tuple and keep the first value that passes the field's
plausibility filter. Absence is never an error.
"""
import re
from abc import ABC
from typing import Callable, Iterator, Optional, Sequence, Set, Tuple

from bs4 import BeautifulSoup, Tag

from product_scraper.config import config
from product_scraper.models.product import (
    DESCRIPTION_NOT_AVAILABLE,
    TITLE_NOT_FOUND,
    Platform,
    RawFields,
)
from product_scraper.models.rules import LocatorRule, PlatformRules
from product_scraper.utils.logger import LayerLogger
from product_scraper.utils.text import normalize_whitespace

Accept = Callable[[str], bool]

IMAGE_PLACEHOLDER_MARKERS = ("placeholder", "default")
_PRICE_TEXT_RE = re.compile(r"\d|₹|Rs|\$")


def _excluded_ids(soup: BeautifulSoup, rule: LocatorRule) -> Set[int]:
    if not rule.exclude:
        return set()
    selector = ", ".join(f"{s}, {s} *" for s in rule.exclude)
    return {id(node) for node in soup.select(selector)}


def _candidates(soup: BeautifulSoup, rule: LocatorRule) -> Iterator[Tag]:
    excluded = _excluded_ids(soup, rule)
    for node in soup.select(rule.selector):
        if id(node) in excluded:
            continue
        yield node
        if not rule.scan:
            return


def _read(node: Tag, attribute: Optional[str]) -> str:
    if attribute is None:
        return normalize_whitespace(node.get_text(" ", strip=True))
    value = node.get(attribute)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


def resolve_rule(soup: BeautifulSoup, rule: LocatorRule, accept: Accept) -> Optional[str]:
    """Apply one rule; return its first acceptable value or None."""
    attributes = (rule.attribute, *rule.fallback_attributes)
    for node in _candidates(soup, rule):
        for attribute in attributes:
            value = _read(node, attribute)
            if value and accept(value):
                return value
    return None


def first_match(
    soup: BeautifulSoup,
    rules: Sequence[LocatorRule],
    accept: Accept = bool,
) -> Optional[str]:
    """First acceptable value across ``rules`` in declared order."""
    found = first_match_indexed(soup, rules, accept)
    return found[1] if found else None


def first_match_indexed(
    soup: BeautifulSoup,
    rules: Sequence[LocatorRule],
    accept: Accept = bool,
) -> Optional[Tuple[int, str]]:
    for index, rule in enumerate(rules):
        value = resolve_rule(soup, rule, accept)
        if value is not None:
            return index, value
    return None


# Plausibility filters

def is_plausible_image_url(url: str) -> bool:
    lowered = url.lower()
    if not lowered.startswith(("http://", "https://")):
        return False
    return not any(marker in lowered for marker in IMAGE_PLACEHOLDER_MARKERS)


def is_plausible_price_text(text: str) -> bool:
    return bool(_PRICE_TEXT_RE.search(text))


def is_discount_text(text: str) -> bool:
    return "%" in text


class PlatformExtractor(ABC):
    """
    Field extractor for one retail platform.

    Subclasses only declare ``platform`` and ``default_rules``; the resolution
    logic lives here so that a new retailer is a new rule table.
    """

    platform: Platform
    default_rules: PlatformRules

    def __init__(self, rules: Optional[PlatformRules] = None, title_min_length: Optional[int] = None):
        self.rules = rules or self.default_rules
        self.title_min_length = config.TITLE_MIN_LENGTH if title_min_length is None else title_min_length
        self.logger = LayerLogger(f"{self.platform.value}_extractor")

    def extract_fields(self, soup: BeautifulSoup) -> RawFields:
        rules = self.rules

        title = self._resolve("title", soup, rules.title, self.is_plausible_title)
        description = self._resolve(
            "description", soup, rules.description, self.is_plausible_description
        )
        image_url = self._resolve("image", soup, rules.image, is_plausible_image_url)

        sale_price_text = self._resolve(
            "sale_price", soup, rules.sale_price, is_plausible_price_text
        )
        original_price_text = self._resolve(
            "original_price",
            soup,
            rules.original_price,
            lambda text: is_plausible_price_text(text) and text != sale_price_text,
        )
        discount_text = self._resolve("discount", soup, rules.discount, is_discount_text)
        category_text = self._resolve("category", soup, rules.category)

        return RawFields(
            title=title or TITLE_NOT_FOUND,
            description=description or DESCRIPTION_NOT_AVAILABLE,
            image_url=image_url or "",
            sale_price_text=sale_price_text,
            original_price_text=original_price_text,
            discount_text=discount_text,
            category_text=category_text,
        )

    def is_plausible_title(self, text: str) -> bool:
        if len(text) <= self.title_min_length:
            return False
        lowered = text.lower()
        brands = [b.lower() for b in self.rules.brand_names]
        if self.rules.brand_match_anywhere:
            return not any(b in lowered for b in brands)
        return lowered not in brands

    def is_plausible_description(self, text: str) -> bool:
        return len(text) > self.rules.description_min_length

    def _resolve(
        self,
        field: str,
        soup: BeautifulSoup,
        rules: Sequence[LocatorRule],
        accept: Accept = bool,
    ) -> Optional[str]:
        found = first_match_indexed(soup, rules, accept)
        if found is None:
            return None
        index, value = found
        if index > 0:
            self.logger.log_fallback(field=field, rule_index=index, selector=rules[index].selector)
        return value

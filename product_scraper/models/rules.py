"""
Declarative rule-table models.

Locator rules and category rules are plain immutable data: adding or
reordering a fallback is an edit to a table, never to extractor code.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class LocatorRule:
    """
    One attempt at reading a field from a parsed page.

    selector: CSS selector evaluated against the whole document.
    attribute: attribute to read; None reads the element text.
    fallback_attributes: tried in order when ``attribute`` gives nothing usable.
    scan: try every matched element instead of only the first one.
    exclude: selectors whose elements (and descendants) are skipped.
    """
    selector: str
    attribute: Optional[str] = None
    fallback_attributes: Tuple[str, ...] = ()
    scan: bool = False
    exclude: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PlatformRules:
    """Ordered locator rules for every field of one platform."""
    title: Tuple[LocatorRule, ...]
    description: Tuple[LocatorRule, ...]
    image: Tuple[LocatorRule, ...]
    sale_price: Tuple[LocatorRule, ...]
    original_price: Tuple[LocatorRule, ...]
    discount: Tuple[LocatorRule, ...]
    category: Tuple[LocatorRule, ...]
    # Title guard against grabbing nav-bar text
    brand_names: Tuple[str, ...] = ()
    brand_match_anywhere: bool = False
    description_min_length: int = 0


@dataclass(frozen=True)
class CategoryRule:
    """Keywords that map a title or breadcrumb to one category label."""
    label: str
    keywords: Tuple[str, ...]

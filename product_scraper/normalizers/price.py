"""
Price normalization for localized currency strings.

Turns "₹1,34,567.00", "$12.5" or "Rs. 1,299" into canonical two-decimal
strings, and rejects anything outside the plausibility bounds so that stray
page numbers are never mistaken for prices.
"""
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from product_scraper.config import config

_NON_PRICE_CHARS_RE = re.compile(r"[^\d.,]")
_DISCOUNT_RE = re.compile(r"(\d{1,3})\s*%")
_CENTS = Decimal("0.01")


class PriceNormalizer:
    """Converts raw price text into a decimal string, or None when implausible."""

    def __init__(self, min_value: Optional[Decimal] = None, max_value: Optional[Decimal] = None):
        self.min_value = config.PRICE_MIN if min_value is None else Decimal(min_value)
        self.max_value = config.PRICE_MAX if max_value is None else Decimal(max_value)

    def normalize(self, raw_text: Optional[str]) -> Optional[str]:
        value = self.to_decimal(raw_text)
        if value is None:
            return None
        return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))

    def to_decimal(self, raw_text: Optional[str]) -> Optional[Decimal]:
        """
        Parse raw price text into a Decimal within bounds.

        Commas are always thousands separators (Indian and Western grouping
        alike) and are dropped. Dots left over from "Rs." are trimmed.
        """
        if not raw_text:
            return None

        cleaned = _NON_PRICE_CHARS_RE.sub("", raw_text).replace(",", "").strip(".")
        if not cleaned:
            return None

        try:
            value = Decimal(cleaned)
        except InvalidOperation:
            return None

        if not value.is_finite():
            return None
        if value < self.min_value or value > self.max_value:
            return None
        return value


def parse_discount_text(text: Optional[str]) -> Optional[int]:
    """Read an explicit badge such as "40% off" or "-25%"; None if there is none."""
    if not text:
        return None
    match = _DISCOUNT_RE.search(text)
    if not match:
        return None
    percent = int(match.group(1))
    if percent > 100:
        return None
    return percent


def compute_discount(original_price: Optional[str], sale_price: Optional[str]) -> Optional[int]:
    """Percentage saved, rounded half-up; only when original exceeds sale."""
    if original_price is None or sale_price is None:
        return None

    original = Decimal(original_price)
    sale = Decimal(sale_price)
    if original <= 0 or original <= sale:
        return None

    percent = (original - sale) * 100 / original
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

# tests/test_price_normalizer.py
from decimal import Decimal

import pytest

from product_scraper.normalizers.price import PriceNormalizer, compute_discount, parse_discount_text


@pytest.fixture
def normalizer() -> PriceNormalizer:
    return PriceNormalizer(min_value=Decimal("1"), max_value=Decimal("5000000"))


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("₹1,34,567.00", "134567.00"),
        ("$12.5", "12.50"),
        ("₹2,000", "2000.00"),
        ("Rs. 1,299", "1299.00"),
        ("1,200.", "1200.00"),
        ("  ₹ 999  ", "999.00"),
        ("$1,234,567.891", "1234567.89"),
    ],
)
def test_normalize_accepts_localized_prices(normalizer, raw, expected):
    assert normalizer.normalize(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "free",
        "",
        None,
        "₹10,00,00,000",  # above the upper bound
        "₹0.50",  # below the lower bound
        "1.2.3",
        "...",
    ],
)
def test_normalize_rejects_implausible_values(normalizer, raw):
    assert normalizer.normalize(raw) is None


def test_bounds_are_inclusive(normalizer):
    assert normalizer.normalize("1") == "1.00"
    assert normalizer.normalize("5,000,000") == "5000000.00"
    assert normalizer.normalize("5,000,000.01") is None


def test_custom_bounds():
    strict = PriceNormalizer(min_value=Decimal("10"), max_value=Decimal("100"))
    assert strict.normalize("₹9") is None
    assert strict.normalize("₹50") == "50.00"
    assert strict.normalize("₹101") is None


def test_compute_discount_from_prices():
    assert compute_discount("1000.00", "600.00") == 40
    assert compute_discount("3990.00", "1499.00") == 62


def test_compute_discount_rounds_half_up():
    assert compute_discount("200.00", "199.00") == 1  # 0.5% rounds up


@pytest.mark.parametrize(
    "original, sale",
    [
        (None, "600.00"),
        ("1000.00", None),
        ("600.00", "600.00"),
        ("500.00", "600.00"),
    ],
)
def test_compute_discount_absent(original, sale):
    assert compute_discount(original, sale) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("40% OFF", 40),
        ("62% off", 62),
        ("-25%", 25),
        ("Save 15 % today", 15),
        ("100%", 100),
    ],
)
def test_parse_discount_text(text, expected):
    assert parse_discount_text(text) == expected


@pytest.mark.parametrize("text", [None, "", "Deal of the day", "250%"])
def test_parse_discount_text_without_percentage(text):
    assert parse_discount_text(text) is None

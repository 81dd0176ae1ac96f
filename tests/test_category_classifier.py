# tests/test_category_classifier.py
import pytest

from product_scraper.models.rules import CategoryRule
from product_scraper.normalizers.category import CategoryClassifier, DEFAULT_CATEGORY_RULES


@pytest.fixture
def classifier() -> CategoryClassifier:
    return CategoryClassifier()


def test_default_table_covers_fifteen_categories():
    assert len(DEFAULT_CATEGORY_RULES) == 15
    assert DEFAULT_CATEGORY_RULES[0].label == "Mobile & Electronics"
    assert DEFAULT_CATEGORY_RULES[-1].label == "Sports & Fitness"


@pytest.mark.parametrize(
    "title",
    [
        "wireless bluetooth headphones",
        "Wireless Bluetooth Headphones",
        "WIRELESS BLUETOOTH HEADPHONES",
    ],
)
def test_headphones_map_to_audio_regardless_of_case(classifier, title):
    assert classifier.classify(title, "") == "Audio & Headphones"


def test_mobile_title_is_stable(classifier):
    title = "Redmi Note 13 5G mobile, 8GB RAM"
    first = classifier.classify(title, None)
    assert first == "Mobile & Electronics"
    assert all(classifier.classify(title, None) == first for _ in range(5))


def test_breadcrumb_wins_over_title(classifier):
    assert classifier.classify("Leather wallet for men", "Computers & Accessories") == "Computers & Laptops"


def test_title_used_when_breadcrumb_has_no_keyword(classifier):
    assert classifier.classify("Running shoe with foam sole", "Deals") == "Footwear"


def test_table_order_is_priority(classifier):
    # "fitness" appears in both Watches & Fitness and Health & Wellness
    assert classifier.classify("Fitness band with heart rate", None) == "Watches & Fitness"


def test_keywords_match_at_word_start_only(classifier):
    assert classifier.classify("Premium cotton t-shirt", None) == "Fashion & Clothing"


def test_fallback_label(classifier):
    assert classifier.classify("Assorted stationery set", "Office Products") == "General"
    assert classifier.classify("", None) == "General"


def test_custom_rules_and_fallback():
    classifier = CategoryClassifier(
        rules=(CategoryRule(label="Groceries", keywords=("rice", "atta")),),
        fallback_label="Other",
    )
    assert classifier.classify("Basmati Rice 5kg", None) == "Groceries"
    assert classifier.classify("Wireless Mouse", None) == "Other"

"""
Keyword-based category classification.

The table order is a priority order: the first entry whose keywords hit wins.
Breadcrumb text is checked against the whole table before the title is.
"""
import re
from typing import Optional, Sequence, Tuple

from product_scraper.models.product import GENERAL_CATEGORY
from product_scraper.models.rules import CategoryRule


DEFAULT_CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(
        label="Mobile & Electronics",
        keywords=("mobile", "phone", "smartphone", "iphone", "samsung", "oneplus",
                  "oppo", "vivo", "mi", "redmi", "electronics"),
    ),
    CategoryRule(
        label="Computers & Laptops",
        keywords=("laptop", "computer", "desktop", "macbook", "dell", "hp", "asus",
                  "lenovo", "mouse", "keyboard"),
    ),
    CategoryRule(
        label="Audio & Headphones",
        keywords=("headphone", "earphone", "speaker", "audio", "music", "sound", "bluetooth"),
    ),
    CategoryRule(
        label="Camera & Photography",
        keywords=("camera", "photo", "video", "lens", "canon", "nikon", "sony"),
    ),
    CategoryRule(
        label="Watches & Fitness",
        keywords=("watch", "smartwatch", "fitness", "tracker", "band", "apple watch"),
    ),
    CategoryRule(
        label="Fashion & Clothing",
        keywords=("clothing", "shirt", "tshirt", "t-shirt", "dress", "jeans", "trouser",
                  "jacket", "hoodie", "sweater"),
    ),
    CategoryRule(
        label="Footwear",
        keywords=("shoe", "sneaker", "boots", "sandal", "footwear", "nike", "adidas", "puma"),
    ),
    CategoryRule(
        label="Bags & Luggage",
        keywords=("bag", "backpack", "handbag", "wallet", "purse", "luggage", "suitcase"),
    ),
    CategoryRule(
        label="Books & Media",
        keywords=("book", "novel", "textbook", "magazine", "kindle", "ebook"),
    ),
    CategoryRule(
        label="Toys & Games",
        keywords=("toy", "game", "puzzle", "doll", "action figure", "lego"),
    ),
    CategoryRule(
        label="Home & Kitchen",
        keywords=("home", "kitchen", "furniture", "chair", "table", "bed", "sofa"),
    ),
    CategoryRule(
        label="Beauty & Personal Care",
        keywords=("beauty", "cosmetic", "skincare", "makeup", "perfume", "shampoo", "soap"),
    ),
    CategoryRule(
        label="Health & Wellness",
        keywords=("health", "vitamin", "supplement", "medicine", "protein", "fitness"),
    ),
    CategoryRule(
        label="Automotive",
        keywords=("car", "bike", "automotive", "motorcycle", "vehicle", "accessories"),
    ),
    CategoryRule(
        label="Sports & Fitness",
        keywords=("sport", "gym", "exercise", "cricket", "football", "basketball", "tennis"),
    ),
)


class CategoryClassifier:
    """
    Maps free text to one label of a fixed taxonomy.

    A keyword matches where it starts a word, case-insensitively, so
    "headphones" hits "headphone" but "phone" does not hit "headphones".
    """

    def __init__(
        self,
        rules: Sequence[CategoryRule] = DEFAULT_CATEGORY_RULES,
        fallback_label: str = GENERAL_CATEGORY,
    ):
        self.rules = tuple(rules)
        self.fallback_label = fallback_label
        self._patterns = tuple(
            (
                rule.label,
                re.compile(
                    "|".join(r"(?<![a-z0-9])" + re.escape(k.lower()) for k in rule.keywords)
                ),
            )
            for rule in self.rules
            if rule.keywords
        )

    def classify(self, title: Optional[str], breadcrumb_text: Optional[str] = None) -> str:
        for source in (breadcrumb_text, title):
            label = self._match(source)
            if label:
                return label
        return self.fallback_label

    def _match(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return None
        lowered = text.lower()
        for label, pattern in self._patterns:
            if pattern.search(lowered):
                return label
        return None

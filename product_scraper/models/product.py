"""
Product models for the Product Scraper.
ScrapedProduct is the contract between the extraction pipeline and whatever
persists or renders the result.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


TITLE_NOT_FOUND = "Title Not Found"
DESCRIPTION_NOT_AVAILABLE = "Description not available"
GENERAL_CATEGORY = "General"


class Platform(str, Enum):
    """Supported retail platform, detected from the product URL."""
    AMAZON = "amazon"
    FLIPKART = "flipkart"


@dataclass(frozen=True)
class RawFields:
    """Unnormalized field values located by a platform extractor."""
    title: str
    description: str
    image_url: str = ""
    sale_price_text: Optional[str] = None
    original_price_text: Optional[str] = None
    discount_text: Optional[str] = None
    category_text: Optional[str] = None


class ScrapedProduct(BaseModel):
    """
    Normalized product record produced by one extraction call.

    Immutable once built. Serializes with camelCase keys
    (imageUrl, salePrice, productUrl, ...).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    title: str
    description: str
    image_url: str = ""
    original_price: Optional[str] = None
    sale_price: Optional[str] = None
    discount: Optional[int] = Field(default=None, ge=0, le=100)
    category: Optional[str] = None
    platform: Platform
    product_url: str

    def get_present_fields(self) -> List[str]:
        """Return list of fields that hold real (non-sentinel) values."""
        present = ["platform", "product_url"]
        if self.title != TITLE_NOT_FOUND:
            present.append("title")
        if self.description != DESCRIPTION_NOT_AVAILABLE:
            present.append("description")
        if self.image_url:
            present.append("image_url")
        if self.original_price is not None:
            present.append("original_price")
        if self.sale_price is not None:
            present.append("sale_price")
        if self.discount is not None:
            present.append("discount")
        if self.category and self.category != GENERAL_CATEGORY:
            present.append("category")
        return present

    def get_missing_fields(self) -> List[str]:
        """Return list of fields that fell back to a default."""
        all_fields = [
            "title", "description", "image_url", "original_price",
            "sale_price", "discount", "category",
        ]
        present = self.get_present_fields()
        return [f for f in all_fields if f not in present]


class StoredProduct(ScrapedProduct):
    """A scraped product after it has been saved by the record store."""
    id: str
    created_at: str

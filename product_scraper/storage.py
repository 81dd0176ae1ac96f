"""
In-memory product record store.
Create / list / get / delete by identifier; the API's persistence collaborator.
"""
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from product_scraper.models.product import ScrapedProduct, StoredProduct


class ProductStorage:
    """Process-local product store keyed by UUID."""

    def __init__(self):
        self._products: Dict[str, StoredProduct] = {}

    async def create_product(self, product: ScrapedProduct) -> StoredProduct:
        stored = StoredProduct(
            **product.model_dump(),
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._products[stored.id] = stored
        return stored

    async def get_products(self) -> List[StoredProduct]:
        """All products, newest first."""
        # dict keeps insertion order, so reversing it orders by creation
        return list(reversed(self._products.values()))

    async def get_product(self, product_id: str) -> Optional[StoredProduct]:
        return self._products.get(product_id)

    async def delete_product(self, product_id: str) -> bool:
        return self._products.pop(product_id, None) is not None

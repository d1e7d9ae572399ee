# storefront/stores/catalog_store.py
import threading

from storefront.data.seed import seed_products
from storefront.domain.errors import ResourceNotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogStore:
    """
    Read-only product catalog, seeded once when the store is created.
    """

    def __init__(self, products: list[dict] | None = None):
        self._lock = threading.Lock()
        self._products = [dict(p) for p in products] if products is not None else seed_products()
        logger.info(f"Catalog seeded with {len(self._products)} products")

    def list_all(self) -> list[dict]:
        with self._lock:
            return [dict(p) for p in self._products]

    def get_by_id(self, product_id: int | None) -> dict:
        with self._lock:
            for product in self._products:
                if product["id"] == product_id:
                    return dict(product)

        raise ResourceNotFound("Product not found")

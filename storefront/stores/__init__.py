# storefront/stores/__init__.py
from storefront.stores.catalog_store import CatalogStore
from storefront.stores.cart_store import CartStore
from storefront.stores.order_store import OrderStore

__all__ = ["CatalogStore", "CartStore", "OrderStore"]

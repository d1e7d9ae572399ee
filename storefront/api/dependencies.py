# storefront/api/dependencies.py
from fastapi import Request

from storefront.stores import CartStore, CatalogStore, OrderStore


#stores live on app.state, created together with the app
def get_catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store


def get_cart_store(request: Request) -> CartStore:
    return request.app.state.cart_store


def get_order_store(request: Request) -> OrderStore:
    return request.app.state.order_store

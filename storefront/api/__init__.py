# storefront/api/__init__.py
from fastapi import FastAPI

from storefront import __version__
from storefront.api.routers import carts, orders, products
from storefront.api.routers.health import router as health_router
from storefront.stores import CartStore, CatalogStore, OrderStore

# service name -> (display name, router, app.state attribute, store factory)
SERVICES = {
    "products": ("Product", products.router, "catalog_store", CatalogStore),
    "cart": ("Cart", carts.router, "cart_store", CartStore),
    "orders": ("Order", orders.router, "order_store", OrderStore),
}


def create_app(services=("products", "cart", "orders"), service_name: str = "all") -> FastAPI:
    """
    Builds an app serving the given services.
    Each service gets its own freshly constructed store on app.state.
    """
    unknown = set(services) - set(SERVICES)
    if unknown:
        raise ValueError(f"Unknown services: {sorted(unknown)}")

    app = FastAPI(title=f"Storefront ({service_name})", version=__version__)
    app.state.service_name = service_name

    app.include_router(health_router)
    for name in services:
        _, router, attr, store_cls = SERVICES[name]
        setattr(app.state, attr, store_cls())
        app.include_router(router)

    return app


def create_service_app(name: str) -> FastAPI:
    """App for a single service, as deployed on its own."""
    return create_app(services=(name,), service_name=name)

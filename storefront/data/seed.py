# storefront/data/seed.py

PRODUCTS = (
    {"id": 1, "name": "Product A", "price": 10},
    {"id": 2, "name": "Product B", "price": 20},
)


def seed_products() -> list[dict]:
    """Fresh copy of the catalog seed, one per store instance."""
    return [dict(p) for p in PRODUCTS]

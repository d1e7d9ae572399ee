# storefront/gateway/routing.py
from storefront.utils import settings


class RouteTable:
    """
    Maps path prefixes to upstream base URLs.

    A prefix matches the path itself or anything below it ("/cart" matches
    "/cart" and "/cart/7", not "/cartoons"). When several prefixes match,
    the longest one wins.
    """

    def __init__(self, routes: dict[str, str]):
        self._routes = {
            "/" + prefix.strip("/"): url.rstrip("/") for prefix, url in routes.items()
        }

    @classmethod
    def from_settings(cls) -> "RouteTable":
        return cls(
            {
                "/products": settings.PRODUCT_SERVICE_URL,
                "/cart": settings.CART_SERVICE_URL,
                "/orders": settings.ORDER_SERVICE_URL,
            }
        )

    @property
    def prefixes(self) -> list[str]:
        return sorted(self._routes)

    def resolve(self, path: str) -> str | None:
        """Upstream base URL for the path, or None if no prefix matches."""
        best = None
        for prefix in self._routes:
            if path == prefix or path.startswith(prefix + "/"):
                if best is None or len(prefix) > len(best):
                    best = prefix

        return self._routes[best] if best is not None else None

# storefront/stores/cart_store.py
import threading
from typing import Any

from storefront.domain.errors import ResourceNotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _same_product(stored: Any, product_id: int | None) -> bool:
    #strict match: only numbers compare, so True or "1" never equal 1
    if product_id is None or isinstance(stored, bool):
        return False
    return isinstance(stored, (int, float)) and stored == product_id


class CartStore:
    """
    Carts kept in memory, keyed by user id.

    commands (add_item, remove_item) mutate state under the store lock,
    query (get_cart) only reads.
    A cart is created on the first add and never deleted.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._carts: dict[str, list[dict]] = {}

    #query
    def get_cart(self, user_id: str) -> list[dict]:
        #unknown user -> empty cart, never NotFound
        with self._lock:
            return self._copy(self._carts.get(user_id, []))

    #commands
    def add_item(self, user_id: str, product_id: Any, quantity: Any) -> list[dict]:
        # no catalog lookup and no merging: every add is a new line
        with self._lock:
            cart = self._carts.setdefault(user_id, [])
            cart.append({"product_id": product_id, "quantity": quantity})

            logger.info(
                f"Added product {product_id} x{quantity} to cart of user {user_id}, "
                f"{len(cart)} line(s)"
            )
            return self._copy(cart)

    def remove_item(self, user_id: str, product_id: int | None) -> list[dict]:
        with self._lock:
            cart = self._carts.get(user_id)

            if cart is None:
                raise ResourceNotFound("Cart not found")

            kept = [line for line in cart if not _same_product(line["product_id"], product_id)]
            self._carts[user_id] = kept

            logger.info(
                f"Removed {len(cart) - len(kept)} line(s) of product {product_id} "
                f"from cart of user {user_id}"
            )
            return self._copy(kept)

    @staticmethod
    def _copy(cart: list[dict]) -> list[dict]:
        return [dict(line) for line in cart]

# storefront/stores/order_store.py
import copy
import threading
from typing import Any

from storefront.domain.errors import ResourceNotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

PENDING = "pending"


class OrderStore:
    """
    Append-only list of submitted orders.

    Order ids come from a counter that is read and bumped under the store
    lock, so concurrent submissions always get distinct, increasing ids.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._orders: list[dict] = []
        self._last_id = 0

    def create_order(self, user_id: Any, items: Any) -> int:
        with self._lock:
            self._last_id += 1
            order_id = self._last_id
            self._orders.append(
                {
                    "order_id": order_id,
                    "user_id": user_id,
                    "items": copy.deepcopy(items),
                    "status": PENDING,
                }
            )

        logger.info(f"Order {order_id} created for user {user_id}")
        return order_id

    def get_order(self, order_id: int | None) -> dict:
        with self._lock:
            for order in self._orders:
                if order["order_id"] == order_id:
                    return copy.deepcopy(order)

        raise ResourceNotFound("Order not found")

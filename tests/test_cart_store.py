import threading

import pytest

from storefront.domain.errors import ResourceNotFound
from storefront.stores import CartStore


def test_get_cart_unknown_user_is_empty():
    assert CartStore().get_cart("nobody") == []


def test_add_item_returns_updated_cart():
    store = CartStore()

    cart = store.add_item("123", 1, 5)

    assert cart == [{"product_id": 1, "quantity": 5}]


def test_adds_kept_in_call_order_with_duplicates():
    store = CartStore()
    calls = [(1, 2), (2, 1), (1, 2), (3, 0)]

    for product_id, quantity in calls:
        store.add_item("u", product_id, quantity)

    assert store.get_cart("u") == [
        {"product_id": p, "quantity": q} for p, q in calls
    ]


def test_add_item_accepts_anything():
    store = CartStore()

    store.add_item("u", 999, -4)
    store.add_item("u", "abc", None)

    assert store.get_cart("u") == [
        {"product_id": 999, "quantity": -4},
        {"product_id": "abc", "quantity": None},
    ]


def test_carts_are_per_user():
    store = CartStore()
    store.add_item("a", 1, 1)
    store.add_item("b", 2, 2)

    assert store.get_cart("a") == [{"product_id": 1, "quantity": 1}]
    assert store.get_cart("b") == [{"product_id": 2, "quantity": 2}]


def test_remove_item_without_cart_raises_not_found():
    with pytest.raises(ResourceNotFound) as exc:
        CartStore().remove_item("ghost", 1)

    assert exc.value.message == "Cart not found"


def test_remove_item_drops_all_matching_lines_keeps_order():
    store = CartStore()
    for product_id in (1, 2, 1, 3, 1, 2):
        store.add_item("u", product_id, 1)

    cart = store.remove_item("u", 1)

    assert [line["product_id"] for line in cart] == [2, 3, 2]
    assert store.get_cart("u") == cart


def test_remove_last_line_leaves_empty_cart_not_missing():
    store = CartStore()
    store.add_item("u", 1, 1)

    assert store.remove_item("u", 1) == []
    # the cart still exists, so a second removal is not NotFound
    assert store.remove_item("u", 1) == []


def test_remove_item_with_no_match_keeps_cart():
    store = CartStore()
    store.add_item("u", 1, 1)

    assert store.remove_item("u", None) == [{"product_id": 1, "quantity": 1}]
    assert store.remove_item("u", 5) == [{"product_id": 1, "quantity": 1}]


def test_remove_matches_by_equality_only():
    store = CartStore()
    store.add_item("u", "1", 1)

    assert store.remove_item("u", 1) == [{"product_id": "1", "quantity": 1}]


def test_remove_does_not_match_booleans():
    store = CartStore()
    store.add_item("u", True, 1)
    store.add_item("u", 1, 2)

    assert store.remove_item("u", 1) == [{"product_id": True, "quantity": 1}]


def test_remove_matches_numerically_equal_float():
    store = CartStore()
    store.add_item("u", 1.0, 1)
    store.add_item("u", 2, 1)

    assert store.remove_item("u", 1) == [{"product_id": 2, "quantity": 1}]


def test_remove_unparseable_id_keeps_null_lines():
    store = CartStore()
    store.add_item("u", None, 1)

    assert store.remove_item("u", None) == [{"product_id": None, "quantity": 1}]


def test_returned_cart_is_a_copy():
    store = CartStore()
    cart = store.add_item("u", 1, 1)

    cart.append({"product_id": 2, "quantity": 2})
    cart[0]["quantity"] = 100

    assert store.get_cart("u") == [{"product_id": 1, "quantity": 1}]


def test_concurrent_adds_are_not_lost():
    store = CartStore()
    threads = [
        threading.Thread(target=lambda i=i: [store.add_item("u", i, 1) for _ in range(100)])
        for i in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.get_cart("u")) == 800

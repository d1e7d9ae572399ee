import pytest
from fastapi.testclient import TestClient

from storefront.main import _display_name, create_app


@pytest.mark.parametrize("name", ["products", "cart", "orders", "all", "gateway"])
def test_create_app_by_service_name(name):
    with TestClient(create_app(name)) as c:
        assert c.get("/health").json() == {"status": "ok", "service": name}


def test_create_app_unknown_service():
    with pytest.raises(ValueError):
        create_app("billing")


@pytest.mark.parametrize(
    "name, expected",
    [("products", "Product"), ("cart", "Cart"), ("orders", "Order"), ("gateway", "Gateway")],
)
def test_display_name(name, expected):
    assert _display_name(name) == expected


def test_module_level_app_for_uvicorn():
    from storefront import main

    with TestClient(main.app) as c:
        assert c.get("/health").status_code == 200

from urllib.parse import urlsplit

import pytest
import requests
from fastapi.testclient import TestClient

from storefront.api import create_app, create_service_app
from storefront.gateway import RouteTable, create_gateway_app
from storefront.gateway.proxy import UpstreamClient

UPSTREAMS = {
    "/products": "http://products.test",
    "/cart": "http://cart.test",
    "/orders": "http://orders.test",
}


class FakeSession:
    """
    Stands in for requests.Session: dispatches to in-process TestClients by host
    and records every call.
    """

    def __init__(self, clients: dict[str, TestClient]):
        self.clients = clients
        self.calls = []

    def request(self, method, url, data=None, headers=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "data": data, "headers": headers, "timeout": timeout}
        )
        parts = urlsplit(url)
        base = f"{parts.scheme}://{parts.netloc}"
        if base not in self.clients:
            raise requests.ConnectionError(f"cannot connect to {base}")

        target = parts.path + (f"?{parts.query}" if parts.query else "")
        return self.clients[base].request(method, target, content=data, headers=headers or {})


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def service_clients():
    clients = {
        UPSTREAMS["/products"]: TestClient(create_service_app("products")),
        UPSTREAMS["/cart"]: TestClient(create_service_app("cart")),
        UPSTREAMS["/orders"]: TestClient(create_service_app("orders")),
    }
    yield clients
    for c in clients.values():
        c.close()


@pytest.fixture
def fake_session(service_clients):
    return FakeSession(service_clients)


@pytest.fixture
def gateway(fake_session):
    app = create_gateway_app(
        route_table=RouteTable(UPSTREAMS),
        client=UpstreamClient(session=fake_session, timeout=1.5),
    )
    with TestClient(app) as c:
        yield c

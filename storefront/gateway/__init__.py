# storefront/gateway/__init__.py
from storefront.gateway.app import create_gateway_app
from storefront.gateway.routing import RouteTable

__all__ = ["create_gateway_app", "RouteTable"]

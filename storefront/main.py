# storefront/main.py
import uvicorn
from fastapi import FastAPI

from storefront.api import SERVICES, create_app as create_services_app, create_service_app
from storefront.gateway import create_gateway_app
from storefront.utils.settings import HOST, PORT, SERVICE_NAME
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(service_name: str = SERVICE_NAME) -> FastAPI:
    """
    products | cart | orders -> that service alone
    gateway                  -> HTTP forwarder to the configured services
    all                      -> every service in one process
    """
    if service_name == "gateway":
        return create_gateway_app()
    if service_name == "all":
        return create_services_app()
    if service_name in SERVICES:
        return create_service_app(service_name)
    raise ValueError(f"Unknown SERVICE_NAME: {service_name}")


def _display_name(service_name: str) -> str:
    if service_name in SERVICES:
        return SERVICES[service_name][0]
    return service_name.capitalize()


app = create_app()

if __name__ == "__main__":
    logger.info(f"{_display_name(SERVICE_NAME)} Service listening at http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)

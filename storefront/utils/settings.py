# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = os.getenv("SERVICE_NAME", "all")
HOST = os.getenv("HOST", "0.0.0.0")

# one port per service when they run as separate processes
DEFAULT_PORTS = {
    "products": 3000,
    "cart": 3001,
    "orders": 3002,
    "gateway": 8000,
    "all": 8000,
}
PORT = int(os.getenv("PORT", DEFAULT_PORTS.get(SERVICE_NAME, 8000)))

PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", "http://product-service:3000")
CART_SERVICE_URL = os.getenv("CART_SERVICE_URL", "http://cart-service:3001")
ORDER_SERVICE_URL = os.getenv("ORDER_SERVICE_URL", "http://order-service:3002")
GATEWAY_TIMEOUT_SECONDS = float(os.getenv("GATEWAY_TIMEOUT_SECONDS", 5))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

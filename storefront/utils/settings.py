# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


SERVICE_NAME = os.getenv("SERVICE_NAME", "product")
PORT = int(os.getenv("PORT", 8000))

# required, create_app fails without it
DATABASE_URL = os.getenv("DATABASE_URL")

JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

CART_SERVICE_URL = os.getenv("CART_SERVICE_URL", "http://cart-service:8000")
ORDER_SERVICE_URL = os.getenv("ORDER_SERVICE_URL", "http://order-service:8000")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", 2))
CART_DELETE_ATTEMPTS = int(os.getenv("CART_DELETE_ATTEMPTS", 3))

PAYMENT_SIMULATE_SUCCESS = _flag("PAYMENT_SIMULATE_SUCCESS", "true")
SEED_PRODUCTS = _flag("SEED_PRODUCTS", "false")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = _flag("DEBUG", "false")

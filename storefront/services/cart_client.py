# storefront/services/cart_client.py
from urllib.parse import quote

import requests

from storefront.domain.errors import UpstreamError
from storefront.domain.schemas import CartOut
from storefront.utils.logging import get_logger
from storefront.utils.retry import http_retry
from storefront.utils.settings import CART_SERVICE_URL, HTTP_TIMEOUT

logger = get_logger(__name__)


class CartClient:
    """HTTP access to the cart service, used by order checkout."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None, session=None):
        self.base_url = (base_url or CART_SERVICE_URL).rstrip("/")
        self.timeout = timeout or HTTP_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, user_id: str) -> str:
        return f"{self.base_url}/cart/{quote(user_id, safe='')}"

    def fetch_cart(self, user_id: str) -> CartOut | None:
        url = self._url(user_id)
        logger.info(f"CartClient GET {url}")

        resp = self.session.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        if resp.status_code >= 400:
            raise UpstreamError("cart", resp.status_code)
        return CartOut.model_validate(resp.json())

    @http_retry()
    def delete_cart(self, user_id: str) -> bool:
        url = self._url(user_id)
        logger.info(f"CartClient DELETE {url}")

        resp = self.session.delete(url, timeout=self.timeout)
        if resp.status_code >= 400:
            raise UpstreamError("cart", resp.status_code)
        return bool(resp.json().get("deleted"))

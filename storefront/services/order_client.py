# storefront/services/order_client.py
from urllib.parse import quote

import requests

from storefront.domain.enums import OrderStatus
from storefront.domain.errors import UpstreamError
from storefront.utils.logging import get_logger
from storefront.utils.settings import HTTP_TIMEOUT, ORDER_SERVICE_URL

logger = get_logger(__name__)


class OrderClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None, session=None):
        self.base_url = (base_url or ORDER_SERVICE_URL).rstrip("/")
        self.timeout = timeout or HTTP_TIMEOUT
        self.session = session or requests.Session()

    def update_status(self, order_id: str, status: OrderStatus) -> dict:
        url = f"{self.base_url}/orders/{quote(order_id, safe='')}/status"
        logger.info(f"OrderClient PUT {url} -> {status.value}")

        resp = self.session.put(url, json={"status": status.value}, timeout=self.timeout)
        if resp.status_code >= 400:
            raise UpstreamError("order", resp.status_code)
        return resp.json()

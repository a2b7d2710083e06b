# storefront/utils/retry.py
from requests import RequestException
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from storefront.domain.errors import UpstreamError
from storefront.utils.settings import CART_DELETE_ATTEMPTS


def http_retry(attempts: int = CART_DELETE_ATTEMPTS):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type((RequestException, UpstreamError)),
    )

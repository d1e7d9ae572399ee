# storefront/gateway/proxy.py
import requests

from storefront.utils.settings import GATEWAY_TIMEOUT_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UpstreamClient:
    """
    Forwards one request to an upstream service, unchanged.
    No retries: a failed call is reported to the caller as is.
    """

    def __init__(self, session: requests.Session | None = None, timeout: float | None = None):
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else GATEWAY_TIMEOUT_SECONDS

    def forward(
        self,
        method: str,
        base_url: str,
        path: str,
        query: str = "",
        body: bytes = b"",
        content_type: str | None = None,
    ) -> requests.Response:
        url = f"{base_url}{path}"
        if query:
            url = f"{url}?{query}"

        headers = {"Content-Type": content_type} if content_type else {}
        logger.info(f"Gateway {method} {url}")

        return self.session.request(
            method,
            url,
            data=body or None,
            headers=headers,
            timeout=self.timeout,
        )

# product_grid/api/product_request.py

"""Single paginated fetch against the product listing endpoint."""

import logging
from typing import Any

from curl_cffi import requests as curl_requests

from product_grid.config.settings import ApiConfig, Settings
from product_grid.errors import HTTPStatusError, ParseError, TransportError
from product_grid.models.product import Product

logger = logging.getLogger("product_grid.request")


def create_client() -> curl_requests.AsyncSession:
    """Build the async transport shared by every request of a store."""
    return curl_requests.AsyncSession(
        impersonate=Settings.IMPERSONATE_BROWSER
    )


class ProductRequest:
    """One-shot GET of a product page starting at *offset*.

    The request keeps no state between calls and never retries; a failed
    call raises a :class:`~product_grid.errors.RequestError` subclass and
    the caller decides what to do next.
    """

    def __init__(
        self,
        client: Any,
        offset: int,
        config: ApiConfig,
    ) -> None:
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        self.client = client
        self.offset = offset
        self.config = config

    def _headers(self) -> dict[str, str]:
        return {
            **Settings.DEFAULT_HEADERS,
            "Authorization": f"Bearer {self.config.token}",
        }

    def _params(self) -> dict[str, int]:
        return {
            "limit": self.config.page_size,
            "offset": self.offset,
        }

    async def fetch(self) -> list[Product]:
        """Issue the GET and parse the body into products."""
        url = self.config.products_url
        logger.debug(
            "GET %s offset=%d limit=%d",
            url,
            self.offset,
            self.config.page_size,
        )
        try:
            resp = await self.client.get(
                url,
                params=self._params(),
                headers=self._headers(),
                timeout=self.config.timeout,
            )
        except Exception as exc:
            raise TransportError(
                f"GET {url} failed: {exc}"
            ) from exc

        if not 200 <= resp.status_code < 300:
            logger.warning(
                "HTTP %d for offset %d", resp.status_code, self.offset
            )
            raise HTTPStatusError(resp.status_code, url)

        products = self._parse(resp)
        logger.info(
            "Fetched %d products at offset %d",
            len(products),
            self.offset,
        )
        return products

    @staticmethod
    def _parse(resp: Any) -> list[Product]:
        """Convert a response body into products, all or nothing."""
        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseError(f"response is not JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ParseError("response body must be a JSON object")
        records = data.get("products")
        if not isinstance(records, list):
            raise ParseError("response has no 'products' array")

        return [Product.from_record(record) for record in records]

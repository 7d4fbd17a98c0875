# product_grid/store/product_list_store.py

"""Observable store accumulating product pages for the grid view."""

import logging
from collections.abc import Callable
from typing import Any

from product_grid.api.product_request import ProductRequest, create_client
from product_grid.config.settings import ApiConfig
from product_grid.errors import RequestError
from product_grid.models.product import Product
from product_grid.store.observable import Observable

logger = logging.getLogger("product_grid.store")

RequestFactory = Callable[[int], ProductRequest]


class ProductListStore(Observable):
    """Append-only product list with a single in-flight fetch guard.

    ``fetch_next_products`` derives the pagination offset from the number
    of products already held.  A failed fetch leaves the list untouched
    and is reported through ``last_error`` so a view can tell an empty
    catalogue from a failed load.
    """

    def __init__(
        self,
        config: ApiConfig,
        client: Any = None,
        request_factory: RequestFactory | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        if client is None and request_factory is None:
            client = create_client()
        self.client = client
        self._request_factory = request_factory or self._default_request
        self._products: list[Product] = []
        self._is_fetching: bool = False
        self._last_error: RequestError | None = None

    def _default_request(self, offset: int) -> ProductRequest:
        return ProductRequest(
            client=self.client, offset=offset, config=self.config
        )

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def is_fetching(self) -> bool:
        return self._is_fetching

    @property
    def last_error(self) -> RequestError | None:
        """Error of the most recent fetch, cleared by the next success."""
        return self._last_error

    async def fetch_next_products(self) -> bool:
        """Fetch and append the next page.

        Returns True when a page was appended, False when the call was a
        no-op because another fetch is in flight or when the fetch failed.
        """
        if self._is_fetching:
            logger.debug("Fetch already in flight, ignoring call")
            return False
        # Set before the first await so concurrent callers see the guard
        self._is_fetching = True
        offset = len(self._products)

        try:
            request = self._request_factory(offset)
            page = await request.fetch()
        except RequestError as exc:
            self._is_fetching = False
            self._last_error = exc
            logger.warning(
                "Fetch at offset %d failed: %s",
                offset,
                exc,
                exc_info=True,
            )
            self.notify()
            return False
        except BaseException:
            self._is_fetching = False
            raise

        self._products.extend(page)
        self._last_error = None
        self._is_fetching = False
        logger.info(
            "Appended %d products (total %d)",
            len(page),
            len(self._products),
        )
        self.notify()
        return True

    async def aclose(self) -> None:
        """Close the transport client, if the store holds one."""
        if self.client is not None:
            await self.client.close()

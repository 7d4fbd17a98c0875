# tests/test_cli_runner.py

"""Tests for the headless page fetcher."""

import io
import json
import unittest
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

from product_grid.cli.runner import cli_fetch, load_pages
from product_grid.config.settings import ApiConfig
from product_grid.errors import HTTPStatusError
from product_grid.models.product import Product
from product_grid.store.product_list_store import ProductListStore

CONFIG = ApiConfig(token="t", page_size=2)


def _record(i: int) -> dict[str, Any]:
    return {
        "id": i,
        "title": f"Product {i}",
        "price": 500 * i,
        "sampleImageUrl": f"https://example.com/{i}.png",
    }


def _response(ids: list[int], status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = {"products": [_record(i) for i in ids]}
    return resp


def _client(*responses: MagicMock) -> MagicMock:
    client = MagicMock()
    client.get = AsyncMock(side_effect=list(responses))
    client.close = AsyncMock()
    return client


class TestLoadPages(unittest.IsolatedAsyncioTestCase):
    """Paging loop over the store."""

    async def test_stops_after_requested_pages(self) -> None:
        """Full pages keep going until the page budget is spent."""
        client = _client(_response([1, 2]), _response([3, 4]))
        store = ProductListStore(CONFIG, client=client)

        loaded = await load_pages(store, 2)

        self.assertEqual(loaded, 2)
        self.assertEqual([p.id for p in store.products], [1, 2, 3, 4])

    async def test_stops_on_short_page(self) -> None:
        """A page smaller than page_size is the last one."""
        client = _client(_response([1, 2]), _response([3]))
        store = ProductListStore(CONFIG, client=client)

        loaded = await load_pages(store, 5)

        self.assertEqual(loaded, 2)
        self.assertEqual(client.get.await_count, 2)

    async def test_stops_on_failure(self) -> None:
        """A failed page ends the loop with the earlier pages kept."""
        client = _client(_response([1, 2]), _response([], status_code=500))
        store = ProductListStore(CONFIG, client=client)

        loaded = await load_pages(store, 3)

        self.assertEqual(loaded, 1)
        self.assertEqual(len(store.products), 2)
        self.assertIsInstance(store.last_error, HTTPStatusError)


@patch("product_grid.cli.runner.create_client")
class TestCliFetch(unittest.IsolatedAsyncioTestCase):
    """End-to-end CLI output and exit codes."""

    async def test_json_output(self, mock_create: MagicMock) -> None:
        """Products are printed as JSON with API field names."""
        client = _client(_response([1, 2]), _response([3]))
        mock_create.return_value = client

        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = await cli_fetch(CONFIG, pages=3, output_format="json")

        self.assertEqual(code, 0)
        data = json.loads(out.getvalue())
        self.assertEqual([d["id"] for d in data], [1, 2, 3])
        self.assertEqual(data[0]["sampleImageUrl"], "https://example.com/1.png")
        client.close.assert_awaited_once()

    async def test_table_output(self, mock_create: MagicMock) -> None:
        """The table format renders through Rich."""
        mock_create.return_value = _client(_response([1]))

        with patch("product_grid.cli.runner._print_table") as mock_table:
            code = await cli_fetch(CONFIG, pages=1, output_format="table")

        self.assertEqual(code, 0)
        printed = mock_table.call_args.args[0]
        self.assertEqual(
            printed,
            (Product(1, "Product 1", 500, "https://example.com/1.png"),),
        )

    async def test_nothing_loaded_exits_one(
        self, mock_create: MagicMock,
    ) -> None:
        """A failed first page is exit code 1 and the client is closed."""
        client = _client(_response([], status_code=503))
        mock_create.return_value = client

        code = await cli_fetch(CONFIG, pages=1, output_format="json")

        self.assertEqual(code, 1)
        client.close.assert_awaited_once()


if __name__ == "__main__":
    unittest.main()

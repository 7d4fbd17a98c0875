# product_grid/cli/runner.py

"""Headless page fetcher, driving the same store the TUI uses."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from product_grid.api.product_request import create_client
from product_grid.config.settings import ApiConfig
from product_grid.models.product import Product
from product_grid.store.product_list_store import ProductListStore

logger = logging.getLogger("product_grid.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(
    products: tuple[Product, ...],
) -> list[dict[str, object]]:
    """Serialise products using the API's field names."""
    return [
        {
            "id": p.id,
            "title": p.title,
            "price": p.price,
            "sampleImageUrl": p.sample_image_url,
        }
        for p in products
    ]


def _print_table(products: tuple[Product, ...]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", justify="right")
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Image", overflow="fold", style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            str(p.id),
            p.title[:60],
            p.price_label,
            p.sample_image_url,
        )

    Console().print(table)


async def load_pages(store: ProductListStore, pages: int) -> int:
    """Fetch up to *pages* pages, stopping early on failure or a short page.

    Returns the number of pages that appended products.
    """
    loaded = 0
    for page in range(pages):
        before = len(store.products)
        if not await store.fetch_next_products():
            break
        added = len(store.products) - before
        _err.print(f"[dim]Page {page + 1}: {added} products[/dim]")
        loaded += 1
        if added < store.config.page_size:
            break
    return loaded


async def cli_fetch(
    config: ApiConfig,
    pages: int,
    output_format: str,
) -> int:
    """Fetch pages headlessly and return an exit code (0=ok, 1=fail)."""
    client = create_client()
    store = ProductListStore(config, client=client)
    try:
        await load_pages(store, pages)
    finally:
        await store.aclose()

    if store.last_error is not None:
        _err.print(f"[red]Error: {store.last_error}[/red]")

    if not store.products:
        _err.print("[yellow]No products loaded.[/yellow]")
        return 1

    _err.print(f"[green]✓ {len(store.products)} products[/green]")

    if output_format == "table":
        _print_table(store.products)
    else:
        json.dump(
            _products_to_dicts(store.products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0

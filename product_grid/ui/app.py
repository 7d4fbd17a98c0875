# product_grid/ui/app.py

"""Terminal UI rendering the product store as a two-column card grid."""

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, VerticalScroll
from textual.widgets import Footer, Header, Static

from product_grid.config.settings import Settings
from product_grid.models.product import Product
from product_grid.store.product_list_store import ProductListStore

logger = logging.getLogger("product_grid.ui")


class ProductCard(Static):
    """Grid cell showing one product's title and price."""

    can_focus = True

    BINDINGS = [
        Binding("enter", "select", "Select", show=False),
    ]

    def __init__(self, product: Product) -> None:
        super().__init__(
            Text.assemble(
                (product.title, "bold"), "\n\n", product.price_label
            ),
            classes="card",
        )
        self.product = product

    def on_click(self) -> None:
        self.action_select()

    def action_select(self) -> None:
        """Acknowledge a tap or Enter on the card."""
        logger.info(
            "Card tapped: id=%d title=%s",
            self.product.id,
            self.product.title,
        )
        self.app.notify(self.product.title)


class PlaceholderCard(Static):
    """Grey cell shown while no products have been loaded."""

    def __init__(self) -> None:
        super().__init__("", classes="placeholder")


class ProductGridApp(App[object]):
    """Subscribes to a ProductListStore and renders its products."""

    CSS_PATH = "styles.css"
    TITLE = "SUZURI"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "next_page", "More"),
    ]

    def __init__(self, store: ProductListStore) -> None:
        super().__init__()
        self.store = store
        self.status_text = "Loading..."
        self._unsubscribe = store.subscribe(self._on_store_changed)

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Static("Loading...", id="status")
        yield VerticalScroll(
            Grid(
                *self._cells(),
                id="product_grid",
            ),
            id="grid_scroll",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Kick off the first page fetch once the grid exists."""
        grid = self.query_one("#product_grid", Grid)
        grid.styles.grid_size_columns = Settings.GRID_COLUMNS
        self.action_next_page()

    async def on_unmount(self) -> None:
        self._unsubscribe()
        await self.store.aclose()

    def action_next_page(self) -> None:
        """Request the next page; ignored while a fetch is in flight."""
        if self.store.is_fetching:
            return
        self._set_status("Loading...")
        self.run_worker(
            self.store.fetch_next_products(), group="fetch"
        )

    def _cells(self) -> list[Static]:
        products = self.store.products
        if not products:
            return [
                PlaceholderCard()
                for _ in range(Settings.PLACEHOLDER_COUNT)
            ]
        return [ProductCard(p) for p in products]

    def _on_store_changed(self) -> None:
        if self.is_running:
            self.call_later(self._refresh_grid)

    async def _refresh_grid(self) -> None:
        """Re-render the grid and status line from store state."""
        grid = self.query_one("#product_grid", Grid)
        await grid.remove_children()
        await grid.mount_all(self._cells())
        if self.store.last_error is not None:
            self.notify(
                f"Load failed: {self.store.last_error}", severity="error"
            )
        self._set_status(self._status_text())

    def _set_status(self, text: str) -> None:
        self.status_text = text
        self.query_one("#status", Static).update(text)

    def _status_text(self) -> str:
        count = len(self.store.products)
        if self.store.last_error is not None:
            return f"Failed to load products ({count} shown)"
        if count == 0:
            return "No products"
        return f"{count} products"

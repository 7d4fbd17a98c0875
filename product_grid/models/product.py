# product_grid/models/product.py

"""Product data model parsed from the listing API."""

from dataclasses import dataclass
from typing import Any

from product_grid.errors import ParseError


def _require(record: dict[str, Any], key: str, kind: type) -> Any:
    """Return ``record[key]`` if present and of type *kind*."""
    if key not in record:
        raise ParseError(f"product record missing '{key}'")
    value = record[key]
    # bool is an int subclass but never a valid id or price
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ParseError(
            f"product field '{key}' must be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Product:
    """A single product card's worth of data."""

    id: int
    title: str
    price: int
    sample_image_url: str

    @property
    def price_label(self) -> str:
        """Price formatted the way the cards display it."""
        return f"{self.price}円"

    @classmethod
    def from_record(cls, record: Any) -> "Product":
        """Parse one API record, raising ParseError on a bad shape."""
        if not isinstance(record, dict):
            raise ParseError(
                f"product record must be an object, "
                f"got {type(record).__name__}"
            )
        price = _require(record, "price", int)
        if price < 0:
            raise ParseError(f"product price must be >= 0, got {price}")
        return cls(
            id=_require(record, "id", int),
            title=_require(record, "title", str),
            price=price,
            sample_image_url=_require(record, "sampleImageUrl", str),
        )

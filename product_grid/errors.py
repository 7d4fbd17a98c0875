# product_grid/errors.py

"""Exception hierarchy for the product fetch pipeline."""


class ConfigError(Exception):
    """Raised at startup when the API configuration cannot be resolved."""


class RequestError(Exception):
    """Base class for every failure of a single product page fetch."""


class TransportError(RequestError):
    """The transport client failed before a response was received."""


class HTTPStatusError(RequestError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class ParseError(RequestError):
    """The response body does not match the product-list shape."""

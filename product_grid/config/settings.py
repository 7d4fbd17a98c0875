# product_grid/config/settings.py

"""Central configuration for the product_grid client."""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from product_grid.errors import ConfigError


class Settings:
    """Static defaults shared by the request layer, TUI and CLI."""

    # --- API ---
    API_BASE_URL: str = "https://suzuri.jp/api/v1"
    PRODUCTS_ENDPOINT: str = "/products"
    PAGE_SIZE: int = 10                 # Products requested per page
    REQUEST_TIMEOUT: float = 15.0       # Seconds before a request times out
    IMPERSONATE_BROWSER: str = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
    }

    # --- Environment variable names ---
    ENV_TOKEN: str = "SUZURI_API_TOKEN"
    ENV_BASE_URL: str = "SUZURI_API_BASE_URL"
    ENV_PAGE_SIZE: str = "SUZURI_PAGE_SIZE"
    ENV_TIMEOUT: str = "SUZURI_REQUEST_TIMEOUT"

    # --- Grid ---
    PLACEHOLDER_COUNT: int = 6          # Grey cells shown before first load
    GRID_COLUMNS: int = 2

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    ENV_FILE: Path = BASE_DIR / ".env"
    LOGS_DIR: Path = BASE_DIR / "logs"
    LOG_RETENTION: int = 20             # Run logs kept in LOGS_DIR


@dataclass(frozen=True)
class ApiConfig:
    """Resolved client configuration consumed by requests and stores."""

    token: str
    base_url: str = Settings.API_BASE_URL
    page_size: int = Settings.PAGE_SIZE
    timeout: float = Settings.REQUEST_TIMEOUT

    @property
    def products_url(self) -> str:
        """Absolute URL of the product listing endpoint."""
        return self.base_url.rstrip("/") + Settings.PRODUCTS_ENDPOINT

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        env_file: Path | None = None,
    ) -> "ApiConfig":
        """Build a config from environment variables.

        When *env* is omitted the ``.env`` file is loaded into the process
        environment first (existing variables win) and ``os.environ`` is
        read.  Raises :class:`ConfigError` on a missing token or on
        malformed numeric values.
        """
        if env is None:
            load_dotenv(env_file or Settings.ENV_FILE)
            env = os.environ

        token = env.get(Settings.ENV_TOKEN, "").strip()
        if not token:
            raise ConfigError(
                f"{Settings.ENV_TOKEN} is not set"
            )

        base_url = (
            env.get(Settings.ENV_BASE_URL, "").strip()
            or Settings.API_BASE_URL
        )
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(
                f"{Settings.ENV_BASE_URL} must be an http(s) URL, "
                f"got {base_url!r}"
            )

        page_size = _positive(
            env, Settings.ENV_PAGE_SIZE, int, Settings.PAGE_SIZE
        )
        timeout = _positive(
            env, Settings.ENV_TIMEOUT, float, Settings.REQUEST_TIMEOUT
        )
        return cls(
            token=token,
            base_url=base_url,
            page_size=int(page_size),
            timeout=float(timeout),
        )


def _positive(
    env: Mapping[str, str],
    name: str,
    kind: type[int] | type[float],
    default: float,
) -> float:
    """Parse an optional positive, finite number from *env*."""
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ConfigError(
            f"{name} must be a number, got {raw!r}"
        ) from exc
    if not math.isfinite(value):
        raise ConfigError(f"{name} must be finite, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value

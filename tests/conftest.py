# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator

import pytest

from product_grid.config.settings import Settings

_ENV_VARS = (
    Settings.ENV_TOKEN,
    Settings.ENV_BASE_URL,
    Settings.ENV_PAGE_SIZE,
    Settings.ENV_TIMEOUT,
)


@pytest.fixture(autouse=True)
def clean_api_env(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Keep a developer's .env values out of the test run."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield

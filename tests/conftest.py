"""Shared test fixtures and configuration for typed_response tests."""

from collections.abc import Generator

import pytest

from typed_response.config.settings import Settings, get_settings
from typed_response.core.logging import setup_logging


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom settings."""
    # Ensure async tests work properly
    config.option.asyncio_mode = "auto"

    # Reuse the application logging pipeline so structlog processors behave
    # identically in tests.
    setup_logging(json_logs=False, log_level_name="DEBUG")


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset the cached process-wide settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)  # type: ignore[call-arg]

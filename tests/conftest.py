"""Shared test fixtures for the apitemplate test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

from apitemplate.client.transport import Fetcher, FetchResult


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "log_level = 'DEBUG'",
                "development.toml": "[http]\\ntimeout_seconds = 5",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from apitemplate.config import get_settings
    from apitemplate.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults after each test.

    setup_logging binds the current stderr, which pytest swaps per test.
    """
    yield
    structlog.reset_defaults()


class StubFetcher(Fetcher):
    """In-memory Fetcher that records requested URIs."""

    def __init__(self, status_code: int = 200, body: bytes = b"") -> None:
        self.status_code = status_code
        self.body = body
        self.requested: list[str] = []
        self.closed = False

    async def fetch(self, uri: str) -> FetchResult:
        self.requested.append(uri)
        success = 200 <= self.status_code < 300
        return FetchResult(
            success=success,
            status_code=self.status_code,
            body=self.body if success else b"",
        )

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def stub_fetcher() -> Callable[..., StubFetcher]:
    """Factory fixture for StubFetcher instances.

    Usage:
        def test_something(stub_fetcher):
            fetcher = stub_fetcher(status_code=404)
    """

    def _stub_fetcher(status_code: int = 200, body: bytes = b"") -> StubFetcher:
        return StubFetcher(status_code=status_code, body=body)

    return _stub_fetcher

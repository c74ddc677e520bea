"""Pytest configuration for BagelPay SDK tests."""

from unittest.mock import AsyncMock, patch

import pytest

from bagelpay import BagelPayClient, BagelPayConfig


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def config() -> BagelPayConfig:
    """Create a test configuration."""
    return BagelPayConfig(
        api_key="bagel_test_key_123456",
        base_url="https://api.bagelpay.test",
        timeout=5.0,
    )


@pytest.fixture
def client(config: BagelPayConfig) -> BagelPayClient:
    """Create a test client."""
    return BagelPayClient(config)


@pytest.fixture
def mock_http(client: BagelPayClient):
    """Replace the client's HTTP transport with an AsyncMock.

    Tests set ``mock_http.request.return_value`` to an ``httpx.Response``.
    """
    http_client = AsyncMock()
    with patch.object(client, "_get_client", return_value=http_client):
        yield http_client

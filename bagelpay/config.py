"""Configuration for BagelPay SDK."""

import os
from dataclasses import dataclass
from typing import Any

TEST_BASE_URL = "https://test.bagelpay.io"
LIVE_BASE_URL = "https://live.bagelpay.io"


@dataclass
class BagelPayConfig:
    """
    Configuration for BagelPay SDK client.

    Attributes:
        api_key: BagelPay API key, sent in the ``x-api-key`` header
        test_mode: Route requests to the test environment (default: True)
        base_url: Custom base URL; overrides the URL derived from test_mode
        timeout: Request timeout in seconds (default: 30.0); 10 ms is
            written ``timeout=0.01``
        verify_ssl: Whether to verify SSL certificates (default: True)

    Example:
        ```python
        config = BagelPayConfig(
            api_key="your-api-key",
            test_mode=False,
            timeout=10.0,
        )
        ```
    """

    api_key: str
    test_mode: bool = True
    base_url: str | None = None
    timeout: float = 30.0
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise ValueError("api_key is required")

        if self.base_url:
            self.base_url = self.base_url.rstrip("/")
        else:
            self.base_url = TEST_BASE_URL if self.test_mode else LIVE_BASE_URL

        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")

    @classmethod
    def from_env(cls, **overrides: Any) -> "BagelPayConfig":
        """
        Build a configuration from ``BAGELPAY_*`` environment variables.

        Reads ``BAGELPAY_API_KEY``, ``BAGELPAY_TEST_MODE`` (``"false"`` selects
        the live environment), ``BAGELPAY_BASE_URL`` and ``BAGELPAY_TIMEOUT``.
        Keyword arguments take precedence over the environment.
        """
        values: dict[str, Any] = {
            "api_key": os.environ.get("BAGELPAY_API_KEY", ""),
            "test_mode": os.environ.get("BAGELPAY_TEST_MODE", "true").lower() != "false",
            "base_url": os.environ.get("BAGELPAY_BASE_URL") or None,
        }
        timeout = os.environ.get("BAGELPAY_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        values.update(overrides)
        return cls(**values)

    @property
    def is_test_mode(self) -> bool:
        """Check if the client runs in test mode, whatever the base URL."""
        return self.test_mode

    @property
    def is_live_mode(self) -> bool:
        """Check if the client runs in live mode, whatever the base URL."""
        return not self.test_mode

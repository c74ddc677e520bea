"""Tests for BagelPayConfig."""

import pytest

from bagelpay import LIVE_BASE_URL, TEST_BASE_URL, BagelPayConfig


def test_config_defaults():
    """Test default configuration values."""
    config = BagelPayConfig(api_key="test-key")
    assert config.base_url == TEST_BASE_URL
    assert config.test_mode is True
    assert config.timeout == 30.0
    assert config.verify_ssl is True
    assert config.is_test_mode is True
    assert config.is_live_mode is False


def test_config_live_mode():
    """Test disabling test mode selects the live environment."""
    config = BagelPayConfig(api_key="live-key", test_mode=False)
    assert config.base_url == LIVE_BASE_URL
    assert config.is_live_mode is True


def test_config_base_url_overrides_mode():
    """Test a custom base URL wins over test_mode."""
    config = BagelPayConfig(api_key="key", test_mode=False, base_url="http://localhost:9000")
    assert config.base_url == "http://localhost:9000"
    assert config.is_test_mode is False
    assert config.is_live_mode is True


def test_config_trailing_slash_removed():
    """Test that trailing slash is removed from base_url."""
    config = BagelPayConfig(api_key="key", base_url="https://test.bagelpay.io/")
    assert config.base_url == "https://test.bagelpay.io"
    assert config.is_test_mode is True


def test_config_requires_api_key():
    """Test that an empty API key raises ValueError."""
    with pytest.raises(ValueError, match="api_key is required"):
        BagelPayConfig(api_key="")


def test_config_invalid_timeout():
    """Test that invalid timeout raises ValueError."""
    with pytest.raises(ValueError, match="timeout must be greater than 0"):
        BagelPayConfig(api_key="key", timeout=0)


def test_config_from_env(monkeypatch):
    """Test configuration is read from BAGELPAY_* variables."""
    monkeypatch.setenv("BAGELPAY_API_KEY", "env-key")
    monkeypatch.setenv("BAGELPAY_TEST_MODE", "false")
    monkeypatch.setenv("BAGELPAY_TIMEOUT", "12.5")
    monkeypatch.delenv("BAGELPAY_BASE_URL", raising=False)

    config = BagelPayConfig.from_env()

    assert config.api_key == "env-key"
    assert config.test_mode is False
    assert config.base_url == LIVE_BASE_URL
    assert config.timeout == 12.5


def test_config_from_env_defaults_to_test_mode(monkeypatch):
    """Test test mode stays on unless explicitly disabled."""
    monkeypatch.setenv("BAGELPAY_API_KEY", "env-key")
    monkeypatch.delenv("BAGELPAY_TEST_MODE", raising=False)
    monkeypatch.delenv("BAGELPAY_BASE_URL", raising=False)
    monkeypatch.delenv("BAGELPAY_TIMEOUT", raising=False)

    config = BagelPayConfig.from_env()

    assert config.base_url == TEST_BASE_URL
    assert config.timeout == 30.0


def test_config_from_env_overrides(monkeypatch):
    """Test keyword arguments take precedence over the environment."""
    monkeypatch.setenv("BAGELPAY_API_KEY", "env-key")
    monkeypatch.setenv("BAGELPAY_BASE_URL", "http://env-host:8000/")

    config = BagelPayConfig.from_env(api_key="explicit-key", timeout=3.0)

    assert config.api_key == "explicit-key"
    assert config.base_url == "http://env-host:8000"
    assert config.timeout == 3.0


def test_config_from_env_missing_key(monkeypatch):
    """Test a missing API key is reported."""
    monkeypatch.delenv("BAGELPAY_API_KEY", raising=False)

    with pytest.raises(ValueError, match="api_key is required"):
        BagelPayConfig.from_env()


def test_config_custom_base_url_keeps_test_mode():
    """Test a custom base URL still reports test mode when test_mode is set."""
    config = BagelPayConfig(api_key="key", base_url="http://localhost:9000")
    assert config.base_url == "http://localhost:9000"
    assert config.is_test_mode is True
    assert config.is_live_mode is False


def test_config_timeout_in_seconds():
    """Test sub-second timeouts are given as fractions of a second."""
    config = BagelPayConfig(api_key="key", timeout=0.01)
    assert config.timeout == 0.01

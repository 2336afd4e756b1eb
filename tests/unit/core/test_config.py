"""Unit tests for ProxyConfig."""

from dataclasses import FrozenInstanceError

import pytest

from ethos.proxy.core import (
    DEFAULT_MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_VERSION,
    ProxyConfig,
    Region,
)


class TestProxyConfig:
    """Test ProxyConfig defaults and validation."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ProxyConfig()
        assert config.base_url == Region.US.base_url
        assert config.default_version == DEFAULT_VERSION
        assert config.default_page_size == DEFAULT_PAGE_SIZE
        assert config.max_page_size == DEFAULT_MAX_PAGE_SIZE
        assert config.timeout == 30.0

    def test_frozen(self):
        """Test config cannot be mutated."""
        config = ProxyConfig()
        with pytest.raises(FrozenInstanceError):
            config.max_page_size = 10

    def test_for_region(self):
        """Test for_region picks the regional base URL and keeps overrides."""
        config = ProxyConfig.for_region(Region.CANADA, max_page_size=100)
        assert config.base_url == "https://integrate.elluciancloud.ca"
        assert config.max_page_size == 100

    def test_for_region_accepts_string(self):
        """Test for_region accepts the region value."""
        config = ProxyConfig.for_region("australia")
        assert config.base_url.endswith(".com.au")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"base_url": "  "},
            {"max_page_size": 0},
            {"default_page_size": -1},
            {"timeout": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test invalid settings are rejected."""
        with pytest.raises(ValueError):
            ProxyConfig(**kwargs)

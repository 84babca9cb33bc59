"""
Unit tests for SDK configuration.
"""

import dataclasses
import logging

import pytest

from xapi_sdk import ConfigurationError, XAPISdkConfiguration, sign


class TestConfiguration:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test configuration with default values."""
        conf = XAPISdkConfiguration("http://api.test", "public", "private")

        assert conf.xapi_uri == "http://api.test"
        assert conf.public_key == "public"
        assert conf.private_key == "private"
        assert conf.logger is None
        assert conf.timeout == 30
        assert conf.utc_timestamps is False
        assert conf.signer is sign

    def test_custom(self):
        """Test configuration with custom values."""
        logger = logging.getLogger("xapi-test")
        conf = XAPISdkConfiguration(
            "http://api.test", "public", "private",
            logger=logger, timeout=5, utc_timestamps=True
        )

        assert conf.logger is logger
        assert conf.timeout == 5
        assert conf.utc_timestamps is True

    def test_immutable(self):
        """Test configuration cannot be changed after construction."""
        conf = XAPISdkConfiguration("http://api.test", "public", "private")

        with pytest.raises(dataclasses.FrozenInstanceError):
            conf.xapi_uri = "http://other.test"

    def test_private_key_not_in_repr(self):
        """Test private key is kept out of repr."""
        conf = XAPISdkConfiguration("http://api.test", "public", "s3cr3t")

        assert "s3cr3t" not in repr(conf)

    @pytest.mark.parametrize("kwargs", [
        {"xapi_uri": ""},
        {"public_key": ""},
        {"private_key": ""},
        {"timeout": 0},
        {"timeout": -1},
        {"signer": "not-callable"},
    ])
    def test_invalid(self, kwargs):
        """Test invalid configuration is rejected."""
        values = {"xapi_uri": "http://api.test", "public_key": "public", "private_key": "private"}
        values.update(kwargs)

        with pytest.raises(ConfigurationError):
            XAPISdkConfiguration(**values)


class TestConfigurationFromEnv:
    """Test configuration loading from environment variables."""

    @pytest.fixture
    def env(self, monkeypatch):
        monkeypatch.setenv("XAPI_URI", "http://env.test")
        monkeypatch.setenv("XAPI_PUBLIC_KEY", "env-public")
        monkeypatch.setenv("XAPI_PRIVATE_KEY", "env-private")
        return monkeypatch

    def test_from_env(self, env):
        """Test values are read from the environment."""
        conf = XAPISdkConfiguration.from_env()

        assert conf.xapi_uri == "http://env.test"
        assert conf.public_key == "env-public"
        assert conf.private_key == "env-private"
        assert conf.timeout == 30

    def test_from_env_timeout(self, env):
        """Test optional timeout variable."""
        env.setenv("XAPI_TIMEOUT", "2.5")

        assert XAPISdkConfiguration.from_env().timeout == 2.5

    def test_from_env_invalid_timeout(self, env):
        """Test non-numeric timeout is rejected."""
        env.setenv("XAPI_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError):
            XAPISdkConfiguration.from_env()

    def test_from_env_overrides(self, env):
        """Test keyword arguments override the environment."""
        conf = XAPISdkConfiguration.from_env(public_key="override")

        assert conf.public_key == "override"

    def test_from_env_prefix(self, monkeypatch):
        """Test custom variable prefix."""
        monkeypatch.setenv("STAGING_URI", "http://staging.test")
        monkeypatch.setenv("STAGING_PUBLIC_KEY", "p")
        monkeypatch.setenv("STAGING_PRIVATE_KEY", "k")

        assert XAPISdkConfiguration.from_env(prefix="STAGING_").xapi_uri == "http://staging.test"

    def test_from_env_missing(self, monkeypatch):
        """Test missing variables are rejected."""
        for name in ("XAPI_URI", "XAPI_PUBLIC_KEY", "XAPI_PRIVATE_KEY"):
            monkeypatch.delenv(name, raising=False)

        with pytest.raises(ConfigurationError):
            XAPISdkConfiguration.from_env()

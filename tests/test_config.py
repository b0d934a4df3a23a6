"""
Tests for configuration.
"""

import pytest
from pydantic import ValidationError

from theo_sdk.models import ClientConfig


class TestClientConfig:
    """Test configuration."""

    def test_config_from_env(self, monkeypatch):
        """Test configuration from environment variables."""
        monkeypatch.setenv("THEO_URL", "https://graph.example.com:7473/db/data/")
        monkeypatch.setenv("THEO_USERNAME", "neo4j")
        monkeypatch.setenv("THEO_PASSWORD", "secret")
        monkeypatch.setenv("THEO_TIMEOUT_READ", "30")
        monkeypatch.setenv("THEO_DEBUG", "true")

        config = ClientConfig.from_env()
        assert config.url == "https://graph.example.com:7473/db/data/"
        assert config.username == "neo4j"
        assert config.password == "secret"
        assert config.timeout_read == 30.0
        assert config.timeout_connect == 1.0
        assert config.debug is True

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("THEO_URL", "http://localhost:7474/db/data/")
        config = ClientConfig.from_env(url="http://other:7474/db/data/")
        assert config.url == "http://other:7474/db/data/"

    def test_url_required(self, monkeypatch):
        monkeypatch.delenv("THEO_URL", raising=False)
        with pytest.raises(ValidationError):
            ClientConfig.from_env()

    @pytest.mark.parametrize(
        "url", ["", "/db/data", "localhost:7474", "ftp://host/x", "http://localhost:99999/db/data/"]
    )
    def test_url_must_be_absolute(self, url):
        with pytest.raises(ValidationError):
            ClientConfig(url=url)

    def test_timeouts_positive(self):
        with pytest.raises(ValidationError):
            ClientConfig(url="http://localhost:7474", timeout_connect=0)
        with pytest.raises(ValidationError):
            ClientConfig(url="http://localhost:7474", max_workers=0)

    def test_password_hidden_from_repr(self):
        config = ClientConfig(url="http://localhost:7474", username="neo4j", password="hunter2")
        assert "hunter2" not in repr(config)

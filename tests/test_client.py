"""
Tests for client construction and configuration
"""
import logging
from unittest.mock import patch

import pytest

from schedulesdirect import ClientConfig, ConfigurationError, SchedulesDirectClient, ServiceError

from .conftest import NEW_TOKEN, error_envelope, token_response

# ============================================================================
# Client Initialization Tests
# ============================================================================


class TestClientInit:
    """Tests for client initialization"""

    def test_authenticates_on_construction(self):
        """Test a token is fetched right away by default"""
        with patch("requests.Session.request", return_value=token_response()) as mock_request:
            client = SchedulesDirectClient("testuser", "testpassword")

        assert client.token == NEW_TOKEN
        assert mock_request.call_count == 1
        assert mock_request.call_args.args[1] == "https://json.schedulesdirect.org/20141201/token"
        client.close()

    def test_lazy_construction(self):
        """Test no request is made with auto_authenticate=False"""
        with patch("requests.Session.request") as mock_request:
            client = SchedulesDirectClient("testuser", "testpassword", auto_authenticate=False)

        mock_request.assert_not_called()
        assert client.token == ""
        client.close()

    def test_construction_fails_on_bad_credentials(self):
        """Test a rejected login surfaces from the constructor"""
        with patch("requests.Session.request", return_value=error_envelope(4003, "Invalid user")):
            with pytest.raises(ServiceError):
                SchedulesDirectClient("testuser", "wrong")

    def test_username_required(self):
        """Test an empty user name is a configuration error"""
        with pytest.raises(ConfigurationError):
            SchedulesDirectClient("", "testpassword", auto_authenticate=False)

    def test_endpoint_groups_share_transport(self):
        """Test every endpoint group talks through the same transport"""
        client = SchedulesDirectClient("testuser", "testpassword", auto_authenticate=False)
        groups = [client.account, client.lineups, client.schedules, client.programs, client.artwork, client.available]
        assert all(group.transport is client.transport for group in groups)
        client.close()

    def test_context_manager_closes(self):
        """Test leaving the with block closes the HTTP session"""
        with SchedulesDirectClient("testuser", "testpassword", auto_authenticate=False) as client:
            assert client.transport.http is not None

        assert client.transport.http is None


# ============================================================================
# Configuration Tests
# ============================================================================


class TestConfig:
    """Tests for ClientConfig"""

    def test_defaults(self):
        """Test default service location and caps"""
        config = ClientConfig()
        assert config.api_root == "https://json.schedulesdirect.org/20141201"
        assert config.program_batch_size == 5000
        assert config.artwork_batch_size == 500
        assert not config.line_delimited

    def test_url_for(self):
        """Test relative and absolute paths"""
        config = ClientConfig(base_url="https://sd.example.test")
        assert config.url_for("status") == "https://sd.example.test/20141201/status"
        assert config.url_for("https://s3.amazonaws.com/a.jpg") == "https://s3.amazonaws.com/a.jpg"

    def test_invalid_batch_size(self):
        """Test zero batch sizes are rejected"""
        with pytest.raises(ValueError):
            ClientConfig(xref_batch_size=0)

    def test_from_env(self, caplog):
        """Test environment overrides and bad numbers"""
        environ = {
            "SCHEDULESDIRECT_BASE_URL": "https://sd.example.test/",
            "SCHEDULESDIRECT_API_VERSION": "20140530",
            "SCHEDULESDIRECT_ARTWORK_BATCH_SIZE": "100",
            "SCHEDULESDIRECT_TIMEOUT": "soon",
        }
        with caplog.at_level(logging.WARNING, logger="schedulesdirect.config"):
            config = ClientConfig.from_env(environ)

        assert config.base_url == "https://sd.example.test/"
        assert config.line_delimited
        assert config.artwork_batch_size == 100
        assert config.timeout == 30
        assert "SCHEDULESDIRECT_TIMEOUT" in caplog.text

    def test_client_from_env(self):
        """Test credentials and settings from the environment"""
        environ = {
            "SCHEDULESDIRECT_USERNAME": "envuser",
            "SCHEDULESDIRECT_PASSWORD": "testpassword",
            "SCHEDULESDIRECT_BASE_URL": "https://sd.example.test/",
        }
        client = SchedulesDirectClient.from_env(environ, auto_authenticate=False)

        assert client.session.username == "envuser"
        assert client.session.password_hash == "8bb6118f8fd6935ad0876a3be34a717d32708ffd"
        assert client.config.api_root == "https://sd.example.test/20141201"
        client.close()

    def test_client_from_env_requires_username(self):
        """Test a missing user name is a configuration error"""
        with pytest.raises(ConfigurationError):
            SchedulesDirectClient.from_env({"SCHEDULESDIRECT_PASSWORD": "x"})

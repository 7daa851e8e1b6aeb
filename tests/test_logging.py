"""Tests for logging setup."""

import structlog

from am_api.utils.logging import REDACTED, get_logger, redact_credentials, setup_logging


class TestRedaction:
    """Tests for the credential redaction processor."""

    def test_redacts_tokens(self):
        """Test token values are masked."""
        event = {
            "event": "request_sent",
            "developer_token": "secret",
            "Authorization": "Bearer secret",
            "endpoint": "/v1/test",
        }

        result = redact_credentials(None, "info", event)

        assert result["developer_token"] == REDACTED
        assert result["Authorization"] == REDACTED
        assert result["endpoint"] == "/v1/test"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_output_redacted(self, capsys):
        """Test JSON logs never contain token values."""
        setup_logging("DEBUG", json_format=True)
        try:
            get_logger("tests").info("client_created", media_user_token="secret-user")
            output = capsys.readouterr().out
        finally:
            structlog.reset_defaults()

        assert "client_created" in output
        assert "secret-user" not in output
        assert '"logger_name": "tests"' in output

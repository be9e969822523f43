"""Tests for shared HTTP helpers."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from common import http_client
from constants import Constants


class TestSafeGet:
    """Test safe_get."""

    @patch("common.http_client.requests.get")
    def test_default_timeout(self, mock_get):
        mock_get.return_value = MagicMock(status_code=200)

        http_client.safe_get("https://repo.example.com/x", context="metadata")

        mock_get.assert_called_once_with(
            "https://repo.example.com/x", headers=None, timeout=Constants.REQUEST_TIMEOUT
        )

    @patch("common.http_client.requests.get")
    def test_timeout_reraised(self, mock_get, caplog):
        mock_get.side_effect = requests.Timeout("slow")

        with caplog.at_level("WARNING"):
            with pytest.raises(requests.Timeout):
                http_client.safe_get("https://repo.example.com/x", context="metadata")
        assert "timed out" in caplog.text

    @patch("common.http_client.requests.get")
    def test_connection_error_reraised(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(requests.RequestException):
            http_client.safe_get("https://repo.example.com/x", context="metadata")

    def test_session_used_when_given(self):
        session = MagicMock()

        http_client.safe_get("https://repo.example.com/x", context="metadata", session=session, timeout=3)

        session.get.assert_called_once_with("https://repo.example.com/x", headers=None, timeout=3)


class TestGetText:
    """Test get_text."""

    @patch("common.http_client.safe_get")
    def test_returns_body_and_closes(self, mock_safe_get):
        response = MagicMock()
        response.text = "body"
        mock_safe_get.return_value = response

        assert http_client.get_text("https://repo.example.com/x", context="t") == "body"
        response.close.assert_called_once()

    @patch("common.http_client.safe_get")
    def test_http_error_closes(self, mock_safe_get):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        mock_safe_get.return_value = response

        with pytest.raises(requests.HTTPError):
            http_client.get_text("https://repo.example.com/x", context="t")
        response.close.assert_called_once()

"""Tests for the OneDrive drive metadata lookup."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from remotekeeper.exceptions import ApiConnectionError, ApiError
from remotekeeper.services.onedrive import fetch_onedrive_drive_args, lookup_drive

TOKEN = json.dumps({"access_token": "abc", "token_type": "Bearer"})


def graph_response(status=200, body=None):
    response = MagicMock()
    response.ok = status < 400
    response.status_code = status
    response.json.return_value = body if body is not None else {}
    return response


class TestFetchOnedriveDriveArgs:
    @patch("remotekeeper.services.onedrive.requests.get")
    def test_returns_drive_args(self, mock_get):
        mock_get.return_value = graph_response(body={"id": "drive-123", "driveType": "personal"})

        assert fetch_onedrive_drive_args(TOKEN) == ["drive_id", "drive-123", "drive_type", "personal"]

        url = mock_get.call_args[0][0]
        assert url == "https://graph.microsoft.com/v1.0/me/drive"
        assert mock_get.call_args.kwargs["headers"] == {"Authorization": "abc"}

    @patch("remotekeeper.services.onedrive.requests.get")
    def test_uses_configured_timeout(self, mock_get, monkeypatch):
        monkeypatch.setenv("REMOTEKEEPER_GRAPH_TIMEOUT", "3")
        mock_get.return_value = graph_response(body={"id": "d", "driveType": "business"})

        fetch_onedrive_drive_args(TOKEN)

        assert mock_get.call_args.kwargs["timeout"] == 3.0

    @patch("remotekeeper.services.onedrive.requests.get")
    def test_accepts_token_dict(self, mock_get):
        mock_get.return_value = graph_response(body={"id": "d", "driveType": "business"})

        assert fetch_onedrive_drive_args({"access_token": "abc"}) == ["drive_id", "d", "drive_type", "business"]

    @patch("remotekeeper.services.onedrive.requests.get")
    def test_missing_drive_type_gives_nothing(self, mock_get):
        mock_get.return_value = graph_response(body={"id": "drive-123"})

        assert fetch_onedrive_drive_args(TOKEN) == []

    @patch("remotekeeper.services.onedrive.requests.get")
    def test_http_error_swallowed(self, mock_get):
        mock_get.return_value = graph_response(status=401, body={"error": {"code": "InvalidAuthenticationToken"}})

        assert fetch_onedrive_drive_args(TOKEN) == []

    @patch("remotekeeper.services.onedrive.requests.get", side_effect=requests.ConnectionError("down"))
    def test_network_error_swallowed(self, mock_get):
        assert fetch_onedrive_drive_args(TOKEN) == []

    @patch("remotekeeper.services.onedrive.requests.get")
    def test_non_json_body_swallowed(self, mock_get):
        response = graph_response()
        response.json.side_effect = ValueError("not json")
        mock_get.return_value = response

        assert fetch_onedrive_drive_args(TOKEN) == []

    @patch("remotekeeper.services.onedrive.requests.get")
    def test_malformed_token_skips_request(self, mock_get):
        assert fetch_onedrive_drive_args("not-json") == []
        assert fetch_onedrive_drive_args(json.dumps({"refresh_token": "r"})) == []
        mock_get.assert_not_called()


class TestLookupDrive:
    @patch("remotekeeper.services.onedrive.requests.get", side_effect=requests.Timeout("slow"))
    def test_connection_errors_are_retryable(self, mock_get):
        with pytest.raises(ApiConnectionError) as exc:
            lookup_drive(TOKEN)
        assert exc.value.retryable is True

    @patch("remotekeeper.services.onedrive.requests.get")
    def test_error_status_raises(self, mock_get):
        mock_get.return_value = graph_response(status=500)

        with pytest.raises(ApiError, match="500"):
            lookup_drive(TOKEN)

"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from gomate.adapters.api_request_logger import log_api_request, request_url, should_log_requests

LOCATIONS_URL = "https://transport.opendata.ch/v1/locations"
LOGIN_URL = "https://dummyjson.com/auth/login"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("true", True), ("True", True), ("false", False), ("1", False)],
)
def test_should_log_requests_reads_environment(
    monkeypatch: pytest.MonkeyPatch, value: str | None, expected: bool
) -> None:
    """Given GOMATE_LOG_REQUESTS, when checking, then only "true" in any case enables it."""
    if value is None:
        monkeypatch.delenv("GOMATE_LOG_REQUESTS", raising=False)
    else:
        monkeypatch.setenv("GOMATE_LOG_REQUESTS", value)

    assert should_log_requests() is expected


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("gomate.adapters.api_request_logger.should_log_requests", return_value=False)
    @patch("gomate.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_nothing_logged(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when logging a request, then the logger is not called."""
        log_api_request("GET", LOCATIONS_URL, params={"query": "Bern"})

        mock_logger.info.assert_not_called()

    @patch("gomate.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("gomate.adapters.api_request_logger.logger")
    def test_when_params_given_then_sorted_into_url(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given query params, when logging, then the URL carries them in sorted order."""
        log_api_request("GET", LOCATIONS_URL, params={"type": "station", "query": "Bern"})

        message = mock_logger.info.call_args[0][0]
        assert f"GET {LOCATIONS_URL}?query=Bern&type=station" in message

    @patch("gomate.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("gomate.adapters.api_request_logger.logger")
    def test_when_url_already_has_query_then_params_appended(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given a URL with a query string, when adding params, then they are appended with &."""
        log_api_request("GET", f"{LOCATIONS_URL}?query=Bern", params={"type": "station"})

        message = mock_logger.info.call_args[0][0]
        assert f"{LOCATIONS_URL}?query=Bern&type=station" in message

    @pytest.mark.parametrize("header", ["Authorization", "Cookie", "X-API-Key"])
    @patch("gomate.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("gomate.adapters.api_request_logger.logger")
    def test_when_sensitive_header_given_then_redacted(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock, header: str
    ) -> None:
        """Given a sensitive header, when logging, then its value is redacted."""
        log_api_request("GET", LOCATIONS_URL, headers={header: "secret-value", "Accept": "json"})

        message = mock_logger.info.call_args[0][0]
        assert header in message
        assert "***REDACTED***" in message
        assert "secret-value" not in message
        assert '"Accept": "json"' in message

    @patch("gomate.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("gomate.adapters.api_request_logger.logger")
    def test_when_login_payload_given_then_password_redacted(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given a login payload, when logging, then the username stays and the password not."""
        log_api_request("POST", LOGIN_URL, payload={"username": "emilys", "password": "emilyspass"})

        message = mock_logger.info.call_args[0][0]
        assert f"POST {LOGIN_URL}" in message
        assert "Payload:" in message
        assert "emilys" in message
        assert "emilyspass" not in message
        assert "***REDACTED***" in message

    @patch("gomate.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("gomate.adapters.api_request_logger.logger")
    def test_when_payload_is_not_a_dict_then_logged_as_string(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given a string payload, when logging, then it is logged verbatim."""
        log_api_request("POST", LOGIN_URL, payload="raw body")

        message = mock_logger.info.call_args[0][0]
        assert "Payload: raw body" in message


def test_request_url_encodes_station_names() -> None:
    """Given a station name with spaces and umlauts, when building the URL, then it is encoded."""
    url = request_url("https://transport.opendata.ch/v1/stationboard", {"station": "Zürich HB"})

    assert url.endswith("?station=Z%C3%BCrich+HB")

# tests/test_health_checker.py

"""Tests for the catalog health checker."""

import unittest
from unittest.mock import MagicMock, patch

from src.config.settings import Settings
from src.services.health_checker import probe_catalog


@patch("src.services.health_checker.curl_requests.get")
class TestProbeCatalog(unittest.TestCase):
    """Status classification of a single probe."""

    def test_ok_status(self, mock_get: MagicMock) -> None:
        """A fast 200 response should return 'ok' status."""
        mock_resp = MagicMock()
        mock_resp.status_code = 200
        mock_get.return_value = mock_resp

        result = probe_catalog()
        self.assertEqual(result.status, "ok")
        self.assertEqual(result.url, Settings.CATALOG_URL)
        self.assertGreaterEqual(result.latency_ms, 0)
        self.assertEqual(result.message, "")

    def test_down_on_http_error(self, mock_get: MagicMock) -> None:
        mock_resp = MagicMock()
        mock_resp.status_code = 503
        mock_get.return_value = mock_resp

        result = probe_catalog()
        self.assertEqual(result.status, "down")
        self.assertEqual(result.message, "HTTP 503")

    def test_down_on_exception(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = ConnectionError(
            "Name or service not known"
        )
        result = probe_catalog()
        self.assertEqual(result.status, "down")
        self.assertIn("Name or service not known", result.message)

    def test_slow_status(self, mock_get: MagicMock) -> None:
        mock_resp = MagicMock()
        mock_resp.status_code = 200
        mock_get.return_value = mock_resp

        with patch(
            "src.services.health_checker.time.monotonic",
            side_effect=[0.0, 6.0],
        ):
            result = probe_catalog()
        self.assertEqual(result.status, "slow")
        self.assertAlmostEqual(result.latency_ms, 6000.0)

    def test_any_2xx_is_reachable(self, mock_get: MagicMock) -> None:
        mock_resp = MagicMock()
        mock_resp.status_code = 203
        mock_get.return_value = mock_resp

        result = probe_catalog()
        self.assertEqual(result.status, "ok")
        mock_get.assert_called_once_with(Settings.CATALOG_URL)

# src/services/catalog_fetcher.py

"""Reads the product catalog from the remote REST endpoint."""

import json
import logging
from typing import Any, Protocol

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.fetch_result import (
    FetchErr,
    FetchFailure,
    FetchOk,
    FetchResult,
)
from src.models.product import ProductRecord


class CatalogSource(Protocol):
    """Anything that can produce a catalog fetch result."""

    def fetch_result(self) -> FetchResult:
        ...


class ProductFetcher:
    """Single-attempt client for the public catalog endpoint.

    One GET per call on a fresh connection, no headers, no retries
    and no timeout beyond what the transport applies by default.
    Every failure is logged and returned as a :class:`FetchErr`; nothing is raised.
    """

    def __init__(self) -> None:
        self.url = Settings.CATALOG_URL
        self.logger = logging.getLogger("product_showcase.fetcher")

    @staticmethod
    def _parse_payload(text: str) -> tuple[ProductRecord, ...]:
        """Decode the response body into records, in payload order."""
        data: Any = json.loads(text)
        if not isinstance(data, list):
            msg = f"expected a JSON array, got {type(data).__name__}"
            raise ValueError(msg)
        return tuple(ProductRecord.from_dict(item) for item in data)

    def _fail(
        self, failure: FetchFailure, exc: Exception | None = None,
    ) -> FetchErr:
        self.logger.error(
            "Catalog fetch failed (%s) from %s: %s",
            failure.kind,
            self.url,
            failure.reason,
            exc_info=exc,
        )
        return FetchErr(failure)

    def fetch_result(self) -> FetchResult:
        """Fetch the catalog and report success or the failure kind."""
        try:
            resp = curl_requests.get(self.url)
        except Exception as exc:
            return self._fail(
                FetchFailure("transport", str(exc) or type(exc).__name__),
                exc,
            )

        if not 200 <= resp.status_code < 300:
            return self._fail(
                FetchFailure("http_status", f"HTTP {resp.status_code}")
            )

        try:
            records = self._parse_payload(resp.text)
        except (ValueError, KeyError, TypeError) as exc:
            return self._fail(
                FetchFailure("parse", str(exc) or type(exc).__name__),
                exc,
            )

        self.logger.info(
            "Fetched %d catalog records from %s", len(records), self.url
        )
        return FetchOk(records)

    def fetch(self) -> list[ProductRecord]:
        """Return the catalog, or an empty list if it could not be read."""
        return list(self.fetch_result().records)

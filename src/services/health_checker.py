# src/services/health_checker.py

"""Catalog endpoint connectivity check."""

import logging
import time
from dataclasses import dataclass

from curl_cffi import requests as curl_requests

from src.config.settings import Settings

logger = logging.getLogger("product_showcase.health")


@dataclass
class HealthResult:
    """Result of one probe against the catalog endpoint."""

    url: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def probe_catalog() -> HealthResult:
    """GET the catalog once and classify the round trip."""
    target = Settings.CATALOG_URL

    start = time.monotonic()
    try:
        resp = curl_requests.get(target)
        elapsed_ms = (time.monotonic() - start) * 1000

        if not 200 <= resp.status_code < 300:
            result = HealthResult(
                url=target,
                status="down",
                latency_ms=elapsed_ms,
                message=f"HTTP {resp.status_code}",
            )
        elif elapsed_ms > Settings.SLOW_THRESHOLD_MS:
            result = HealthResult(
                url=target,
                status="slow",
                latency_ms=elapsed_ms,
                message="High latency",
            )
        else:
            result = HealthResult(
                url=target,
                status="ok",
                latency_ms=elapsed_ms,
                message="",
            )

    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.warning(
            "Health probe error for %s: %s", target, exc, exc_info=True,
        )
        result = HealthResult(
            url=target,
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )

    logger.info(
        "Health check %s: %s (%.0fms) %s",
        result.url,
        result.status,
        result.latency_ms,
        result.message,
    )
    return result

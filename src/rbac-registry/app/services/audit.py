"""Audit forwarding client.

Successful mutations are reported to an external audit service. The report
is sent after the change is committed; a failed report surfaces as
``AuditUnavailableError`` and the committed change stays in place.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from enum import Enum

import httpx

from shared.config import AuditSettings
from shared.observability import get_logger, log_external_call_end, log_external_call_start

from .exceptions import AuditUnavailableError

logger = get_logger(__name__)


class HttpMethod(str, Enum):
    """HTTP method recorded with an audit entry."""

    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    GET = "GET"


class AuditClient:
    """Client for the audit service."""

    def __init__(
        self,
        settings: AuditSettings,
        source: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings
        self.source = source
        self.client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.timeout_seconds, connect=5.0),
        )

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    async def send(self, method: HttpMethod, data: str) -> None:
        """Post one audit record. Does nothing when auditing is disabled.

        Raises:
            AuditUnavailableError: the audit service refused or could not be reached
        """
        if not self.enabled:
            return

        body = {
            "timeStamp": datetime.now(timezone.utc).isoformat(),
            "source": self.source,
            "method": method.value,
            "data": data,
        }
        headers = {
            "User-Agent": self.source,
            "x-api-key": self.settings.api_key,
        }

        log_external_call_start(logger, "audit", method.value)
        start = time.perf_counter()
        try:
            response = await self.client.post(self.settings.url, json=body, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            log_external_call_end(
                logger,
                "audit",
                method.value,
                success=False,
                duration_ms=(time.perf_counter() - start) * 1000,
                error=str(e),
            )
            raise AuditUnavailableError(
                "Auditing enabled but connection refused. "
                "Ensure the audit service is running and the API key is correct."
            ) from e

        log_external_call_end(
            logger,
            "audit",
            method.value,
            success=True,
            duration_ms=(time.perf_counter() - start) * 1000,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

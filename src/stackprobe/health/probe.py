# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe a running deployment against the health check from its Detection."""

from __future__ import annotations

import logging
import time

from ..config import HealthSettings, HttpSettings, load_health_settings, load_http_settings
from ..errors import ErrorCategory
from ..http import HttpResponse
from ..http.client import HttpClient, create_default_http_client
from ..models import Detection, HealthCheck, HealthCheckResult

logger = logging.getLogger(__name__)


def build_health_url(base_url: str, path: str) -> str:
    if not path or path == "/":
        return base_url.rstrip("/") + "/"
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class HealthProbe:
    """
    Poll a health endpoint until it answers with the expected status.

    Each attempt is one GET bounded by the health check's own timeout.
    Between attempts the wait starts at ``retry_delay`` and grows by
    ``backoff_factor`` up to ``max_delay``, giving a freshly started
    process time to come up.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        http_settings: HttpSettings | None = None,
        health_settings: HealthSettings | None = None,
    ):
        self.http_settings = http_settings or load_http_settings()
        self.health_settings = health_settings or load_health_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)

    def check(
        self,
        base_url: str,
        healthcheck: HealthCheck | None = None,
        *,
        attempts: int | None = None,
        retry_delay: float | None = None,
    ) -> HealthCheckResult:
        healthcheck = healthcheck or HealthCheck()
        attempts = max(1, attempts if attempts is not None else self.health_settings.attempts)
        retry_delay = retry_delay if retry_delay is not None else self.health_settings.retry_delay
        url = build_health_url(base_url, healthcheck.path)
        result = HealthCheckResult(ok=False, url=url, expected_status=healthcheck.expect)
        timeout = float(healthcheck.timeout_seconds)
        delay = retry_delay

        for attempt in range(1, attempts + 1):
            result.attempts = attempt
            response = self.http_client.get(url, timeout=timeout)
            self._record(result, response)
            if result.ok:
                logger.info("Health check passed for %s after %d attempt(s)", url, attempt)
                return result
            logger.debug("Health check attempt %d/%d for %s failed: %s", attempt, attempts, url, result.error_message)
            if attempt < attempts and delay > 0:
                time.sleep(min(delay, self.health_settings.max_delay))
                delay *= self.health_settings.backoff_factor

        logger.warning("Health check failed for %s: %s", url, result.reason)
        return result

    def check_detection(
        self,
        base_url: str,
        detection: Detection,
        *,
        attempts: int | None = None,
        retry_delay: float | None = None,
    ) -> HealthCheckResult:
        healthcheck = detection.healthcheck or HealthCheck()
        if detection.is_static:
            return HealthCheckResult(
                ok=True,
                url=build_health_url(base_url, healthcheck.path),
                expected_status=healthcheck.expect,
                skipped=True,
            )
        return self.check(base_url, healthcheck, attempts=attempts, retry_delay=retry_delay)

    @staticmethod
    def _record(result: HealthCheckResult, response: HttpResponse) -> None:
        result.status_code = response.status_code
        if not response.received:
            result.ok = False
            result.error_message = response.error_message or "No response"
            category = response.error_category
            result.error_category = category if category is not ErrorCategory.NONE else ErrorCategory.UNKNOWN_ERROR
        elif response.status_code == result.expected_status:
            result.ok = True
            result.error_message = None
            result.error_category = ErrorCategory.NONE
        else:
            result.ok = False
            result.error_message = f"expected HTTP {result.expected_status}, got {response.status_code}"
            result.error_category = ErrorCategory.UNEXPECTED_STATUS

    def close(self) -> None:
        self.http_client.close()

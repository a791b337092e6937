# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level StackProbe facade for detection and health probing."""

from __future__ import annotations

import os
from contextlib import suppress

from .config import DetectionSettings, HealthSettings, HttpSettings, load_detection_settings, load_http_settings
from .framework_detection.engine import FrameworkDetectionEngine
from .health import HealthProbe
from .http.client import HttpClient, create_default_http_client
from .models import Detection, HealthCheckResult


class StackProbe:
    """
    Convenience wrapper that wires settings, the detection engine and the health probe.

    The HTTP client is only used for health probing; detection itself never
    touches the network.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        detection_settings: DetectionSettings | None = None,
        http_settings: HttpSettings | None = None,
        health_settings: HealthSettings | None = None,
    ):
        self.detection_settings = detection_settings or load_detection_settings()
        self.http_settings = http_settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.detection_engine = FrameworkDetectionEngine(self.detection_settings)
        self.health_probe = HealthProbe(
            self.http_client,
            http_settings=self.http_settings,
            health_settings=health_settings,
        )

    def detect(self, root: str | os.PathLike[str]) -> Detection:
        return self.detection_engine.detect(root)

    def check_health(
        self,
        base_url: str,
        detection: Detection,
        *,
        attempts: int | None = None,
        retry_delay: float | None = None,
    ) -> HealthCheckResult:
        return self.health_probe.check_detection(base_url, detection, attempts=attempts, retry_delay=retry_delay)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> StackProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

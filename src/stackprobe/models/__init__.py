# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared dataclasses for detection results and health checks."""

from .detection import Candidate, Detection, HealthCheck
from .health import HealthCheckResult

__all__ = ["Candidate", "Detection", "HealthCheck", "HealthCheckResult"]

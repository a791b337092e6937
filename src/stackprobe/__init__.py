# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""StackProbe: framework detection and deployment planning for project trees."""

from .framework_detection.engine import FrameworkDetectionEngine
from .models import Detection, HealthCheck, HealthCheckResult
from .runtime import StackProbe
from .version import __version__

__all__ = [
    "Detection",
    "FrameworkDetectionEngine",
    "HealthCheck",
    "HealthCheckResult",
    "StackProbe",
    "__version__",
]

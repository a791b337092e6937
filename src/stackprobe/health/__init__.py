# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Health probing of deployed applications."""

from .probe import HealthProbe, build_health_url

__all__ = ["HealthProbe", "build_health_url"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Health probe result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import ErrorCategory, error_category_to_reason


@dataclass
class HealthCheckResult:
    ok: bool
    url: str
    expected_status: int
    status_code: int | None = None
    attempts: int = 0
    skipped: bool = False
    error_message: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def reason(self) -> str:
        if self.skipped:
            return "Static site, no server process to probe"
        return error_category_to_reason(self.error_category)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "url": self.url,
            "expected_status": self.expected_status,
            "status_code": self.status_code,
            "attempts": self.attempts,
            "skipped": self.skipped,
            "error_message": self.error_message,
            "error_category": self.error_category.value,
            "reason": self.reason,
        }

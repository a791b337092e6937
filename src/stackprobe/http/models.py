# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outcome of a single health-check GET."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ErrorCategory


@dataclass
class HttpResponse:
    """
    Status of one GET against a running deployment.

    Only the status line matters to a health check, so no body or headers are
    kept. Transport failures leave ``status_code`` as ``None`` and carry the
    classified ``error_category`` instead.
    """

    status_code: int | None = None
    url: str | None = None
    error_message: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def received(self) -> bool:
        return self.status_code is not None

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import ErrorCategory
from .client import HttpClient
from .models import HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    A URL may map to a single response or to a sequence that is replayed in
    order, repeating the last entry once exhausted. Unknown URLs behave like a
    port nobody is listening on.
    """

    def __init__(self, responses: dict[str, HttpResponse | Sequence[HttpResponse]] | None = None):
        self._responses: dict[str, list[HttpResponse]] = {}
        self.calls: list[tuple[str, float | None]] = []
        self.closed = False
        for url, response in (responses or {}).items():
            self.add(url, response)

    def add(self, url: str, response: HttpResponse | Sequence[HttpResponse]) -> None:
        self._responses[url] = [response] if isinstance(response, HttpResponse) else list(response)

    def get(self, url: str, *, timeout: float | None = None) -> HttpResponse:
        self.calls.append((url, timeout))
        queue = self._responses.get(url)
        if not queue:
            return HttpResponse(
                url=url,
                error_message="No stubbed response configured",
                error_category=ErrorCategory.CONNECTION_ERROR,
            )
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def close(self) -> None:
        self.closed = True

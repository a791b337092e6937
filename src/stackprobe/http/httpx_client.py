# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client that reads the status line and drops the body."""

    def __init__(self, settings: HttpSettings | None = None, transport: httpx.BaseTransport | None = None):
        self.settings = settings or load_http_settings()
        self._client = httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            headers={"User-Agent": self.settings.user_agent},
            transport=transport,
        )

    def get(self, url: str, *, timeout: float | None = None) -> HttpResponse:
        if timeout is None:
            timeout = self.settings.timeout
        try:
            # The body is never read; leaving the block closes it.
            with self._client.stream("GET", url, timeout=timeout) as resp:
                return HttpResponse(status_code=resp.status_code, url=str(resp.url))
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            category = categorize_exception(exc)
            logger.debug("GET %s failed with %s (%s)", url, type(exc).__name__, category.value)
            return HttpResponse(url=url, error_message=str(exc) or type(exc).__name__, error_category=category)

    def close(self) -> None:
        self._client.close()

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import HttpResponse

__all__ = [
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "StubHttpClient",
    "create_default_http_client",
]

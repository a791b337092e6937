# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx
import pytest

from stackprobe.config import HttpSettings
from stackprobe.errors import ErrorCategory
from stackprobe.http import HttpResponse, HttpxClient, StubHttpClient, create_default_http_client


def _client(handler, **settings) -> HttpxClient:
    return HttpxClient(HttpSettings(**settings), transport=httpx.MockTransport(handler))


def test_get_reports_status_and_final_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(503, text="warming up")

    response = _client(handler, user_agent="stackprobe-test/1").get("http://app:8000/healthz", timeout=2.5)

    assert response == HttpResponse(status_code=503, url="http://app:8000/healthz")
    assert response.received is True
    assert seen[0].method == "GET"
    assert seen[0].headers["User-Agent"] == "stackprobe-test/1"
    assert seen[0].extensions["timeout"]["read"] == 2.5


def test_get_falls_back_to_the_configured_timeout():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.extensions["timeout"])
        return httpx.Response(200)

    _client(handler, timeout=4.0).get("http://app/")
    assert seen[0]["connect"] == 4.0


@pytest.mark.parametrize("allow_redirects, status, url", [(True, 200, "http://app/up"), (False, 302, "http://app/")])
def test_redirects_follow_the_setting(allow_redirects, status, url):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/":
            return httpx.Response(302, headers={"Location": "/up"})
        return httpx.Response(200)

    response = _client(handler, allow_redirects=allow_redirects).get("http://app/")
    assert (response.status_code, response.url) == (status, url)


def _raise(exc: BaseException):
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        raise exc

    return handler


def _chained(outer: Exception, cause: BaseException) -> Exception:
    outer.__cause__ = cause
    return outer


@pytest.mark.parametrize(
    "exc, category",
    [
        (httpx.ConnectError("[Errno 111] Connection refused"), ErrorCategory.CONNECTION_ERROR),
        (httpx.ReadTimeout("timed out"), ErrorCategory.TIMEOUT),
        (httpx.ConnectTimeout("timed out"), ErrorCategory.TIMEOUT),
        (
            _chained(httpx.ConnectError("certificate verify failed"), ssl.SSLError("CERTIFICATE_VERIFY_FAILED")),
            ErrorCategory.SSL_ERROR,
        ),
        (
            _chained(httpx.ConnectError("Name or service not known"), socket.gaierror(-2, "Name or service not known")),
            ErrorCategory.DNS_ERROR,
        ),
        (httpx.RemoteProtocolError("Server disconnected without sending a response."), ErrorCategory.CONNECTION_ERROR),
        (httpx.TooManyRedirects("Exceeded maximum allowed redirects."), ErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_transport_failures_are_classified(exc, category):
    response = _client(_raise(exc)).get("http://app/")

    assert response.received is False
    assert response.status_code is None
    assert response.url == "http://app/"
    assert response.error_message == str(exc)
    assert response.error_category is category


def test_close_releases_the_connection_pool():
    client = _client(lambda request: httpx.Response(200))
    client.close()
    assert client._client.is_closed


def test_create_default_http_client_applies_settings(monkeypatch):
    created = {}

    class RecordingClient:
        def __init__(self, **kwargs):
            created.update(kwargs)

    monkeypatch.setattr(httpx, "Client", RecordingClient)
    settings = HttpSettings(timeout=3.0, verify_ssl=False, allow_redirects=False, user_agent="UA/2")

    client = create_default_http_client(settings)

    assert isinstance(client, HttpxClient)
    assert client.settings is settings
    assert created == {
        "follow_redirects": False,
        "timeout": 3.0,
        "verify": False,
        "headers": {"User-Agent": "UA/2"},
        "transport": None,
    }


def test_stub_replays_a_startup_sequence():
    starting = HttpResponse(status_code=503, url="http://app/health")
    ready = HttpResponse(status_code=200, url="http://app/health")
    client = StubHttpClient({"http://app/health": [starting, ready]})

    statuses = [client.get("http://app/health", timeout=1.0).status_code for _ in range(3)]

    assert statuses == [503, 200, 200]
    assert client.calls == [("http://app/health", 1.0)] * 3


def test_stub_treats_unknown_urls_as_refused_connections():
    client = StubHttpClient()
    client.add("http://app/health", HttpResponse(status_code=200))

    missing = client.get("http://app/other")

    assert missing.received is False
    assert missing.error_message == "No stubbed response configured"
    assert missing.error_category is ErrorCategory.CONNECTION_ERROR
    client.close()
    assert client.closed is True

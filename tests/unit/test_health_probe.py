# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import time

import pytest

from stackprobe.config import HealthSettings
from stackprobe.errors import ErrorCategory
from stackprobe.framework_detection.engine import FrameworkDetectionEngine
from stackprobe.framework_detection.fsreader import MemoryFS
from stackprobe.health import HealthProbe, build_health_url
from stackprobe.http import HttpResponse, StubHttpClient
from stackprobe.models import Detection, HealthCheck


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(time, "sleep", calls.append)
    return calls


def _checker(responses, attempts=3, retry_delay=0.25, **health):
    client = StubHttpClient(responses)
    checker = HealthProbe(
        client,
        health_settings=HealthSettings(attempts=attempts, retry_delay=retry_delay, **health),
    )
    return checker, client


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("http://localhost:3000", "/", "http://localhost:3000/"),
        ("http://localhost:3000/", "/healthz", "http://localhost:3000/healthz"),
        ("http://localhost:8080", "ping", "http://localhost:8080/ping"),
        ("https://app.example.com/", "", "https://app.example.com/"),
    ],
)
def test_build_health_url(base, path, expected):
    assert build_health_url(base, path) == expected


def test_check_passes_on_expected_status(sleeps):
    checker, client = _checker({"http://localhost:8000/healthz": HttpResponse(status_code=200)})
    result = checker.check("http://localhost:8000", HealthCheck(path="/healthz"))

    assert result.ok is True
    assert result.status_code == 200
    assert result.attempts == 1
    assert result.error_category == ErrorCategory.NONE
    assert client.calls == [("http://localhost:8000/healthz", 30.0)]
    assert sleeps == []


def test_each_attempt_uses_the_health_check_timeout(sleeps):
    checker, client = _checker({}, attempts=2)
    checker.check("http://localhost:8000", HealthCheck(timeout_seconds=5))
    assert client.calls == [("http://localhost:8000/", 5.0), ("http://localhost:8000/", 5.0)]


def test_check_retries_until_service_is_up(sleeps):
    responses = {
        "http://localhost:3000/": [
            HttpResponse(status_code=502),
            HttpResponse(status_code=503),
            HttpResponse(status_code=200),
        ]
    }
    checker, _ = _checker(responses, attempts=5, backoff_factor=2.0)
    result = checker.check("http://localhost:3000")

    assert result.ok is True
    assert result.attempts == 3
    assert sleeps == [0.25, 0.5]


def test_wait_between_attempts_grows_up_to_max_delay(sleeps):
    checker, client = _checker({}, attempts=5, retry_delay=1.0, backoff_factor=3.0, max_delay=5.0)
    result = checker.check("http://localhost:3000")

    assert result.attempts == 5
    assert len(client.calls) == 5
    assert sleeps == [1.0, 3.0, 5.0, 5.0]


def test_zero_retry_delay_never_sleeps(sleeps):
    checker, client = _checker({}, attempts=3, retry_delay=0)
    checker.check("http://localhost:3000")
    assert len(client.calls) == 3
    assert sleeps == []


def test_check_reports_unexpected_status(sleeps, caplog):
    checker, _ = _checker({"http://localhost:3000/health": HttpResponse(status_code=500)}, attempts=2)
    with caplog.at_level(logging.WARNING):
        result = checker.check("http://localhost:3000", HealthCheck(path="/health"))

    assert result.ok is False
    assert result.attempts == 2
    assert result.status_code == 500
    assert result.error_category == ErrorCategory.UNEXPECTED_STATUS
    assert result.error_message == "expected HTTP 200, got 500"
    assert "Health check failed" in caplog.text


def test_check_honors_custom_expected_status(sleeps):
    checker, _ = _checker({"http://localhost/": HttpResponse(status_code=204)})
    result = checker.check("http://localhost", HealthCheck(path="/", expect=204))
    assert result.ok is True


@pytest.mark.parametrize(
    "category, reason",
    [
        (ErrorCategory.CONNECTION_ERROR, "Application is not accepting connections"),
        (ErrorCategory.TIMEOUT, "Network timeout during health check"),
        (ErrorCategory.SSL_ERROR, "TLS/certificate issue"),
        (ErrorCategory.DNS_ERROR, "DNS resolution failure"),
    ],
)
def test_check_carries_the_transport_failure_category(sleeps, category, reason):
    failure = HttpResponse(error_message="connection failed", error_category=category)
    checker, client = _checker({"http://localhost:5000/": failure}, attempts=2)
    result = checker.check("http://localhost:5000", attempts=2, retry_delay=0)

    assert result.ok is False
    assert result.status_code is None
    assert result.error_message == "connection failed"
    assert result.error_category == category
    assert result.reason == reason
    assert len(client.calls) == 2


def test_uncategorized_transport_failure_is_unknown(sleeps):
    checker, _ = _checker({"http://localhost/": HttpResponse()}, attempts=1)
    result = checker.check("http://localhost")

    assert result.error_message == "No response"
    assert result.error_category == ErrorCategory.UNKNOWN_ERROR


def test_check_detection_skips_comment_only_run_plans(sleeps):
    checker, client = _checker({})
    detection = Detection(
        framework="Astro",
        run_plan=["# Static site - serve dist/ with nginx or CDN"],
        healthcheck=HealthCheck(),
    )
    result = checker.check_detection("http://localhost:4321", detection)

    assert result.ok is True
    assert result.skipped is True
    assert result.reason == "Static site, no server process to probe"
    assert client.calls == []


@pytest.mark.parametrize(
    "framework, run_plan",
    [
        ("Hugo", ["hugo server --bind 0.0.0.0 --port 1313"]),
        ("Eleventy", ["npm run serve"]),
        ("Jekyll", ["bundle exec jekyll serve --host 0.0.0.0"]),
    ],
)
def test_static_generators_with_a_dev_server_are_health_checked(sleeps, framework, run_plan):
    checker, client = _checker({}, attempts=2)
    detection = Detection(
        framework=framework,
        run_plan=run_plan,
        healthcheck=HealthCheck(),
        meta={"static": "true"},
    )
    result = checker.check_detection("http://localhost:1313", detection)

    assert result.skipped is False
    assert result.ok is False
    assert result.attempts == 2
    assert result.error_category == ErrorCategory.CONNECTION_ERROR
    assert len(client.calls) == 2


def test_detected_hugo_site_is_health_checked(sleeps):
    fs = MemoryFS({"hugo.toml": "baseURL = '/'"}, dirs=["content", "themes"])
    detection = FrameworkDetectionEngine().detect_fs(fs)
    checker, client = _checker({"http://localhost:1313/": HttpResponse(status_code=200)})

    result = checker.check_detection("http://localhost:1313", detection)

    assert detection.framework == "Hugo"
    assert result.skipped is False
    assert result.ok is True
    assert client.calls == [("http://localhost:1313/", 30.0)]


def test_check_detection_uses_detected_health_path(sleeps):
    checker, client = _checker({"http://localhost:3000/up": HttpResponse(status_code=200)})
    detection = Detection(framework="Rails", run_plan=["bundle exec rails server"], healthcheck=HealthCheck(path="/up"))
    result = checker.check_detection("http://localhost:3000", detection)

    assert result.ok is True
    assert client.calls[0][0] == "http://localhost:3000/up"


def test_result_to_dict(sleeps):
    checker, _ = _checker({"http://localhost/": HttpResponse(status_code=404)}, attempts=1)
    data = checker.check("http://localhost").to_dict()
    assert data["ok"] is False
    assert data["status_code"] == 404
    assert data["error_category"] == "UNEXPECTED_STATUS"
    assert data["reason"] == "Health endpoint returned an unexpected status"


def test_close_closes_client():
    checker, client = _checker({})
    checker.close()
    assert client.closed is True

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import json
import time

import pytest

from stackprobe.cli.main import EXIT_HEALTH_FAILED, EXIT_OK, EXIT_PROJECT_ERROR, _pretty_print, build_parser
from stackprobe.framework_detection.keys import NO_FRAMEWORK_MESSAGE
from stackprobe.http import HttpResponse, StubHttpClient
from stackprobe.models import Detection, HealthCheck, HealthCheckResult
from stackprobe.runtime import StackProbe

cli_module = importlib.import_module("stackprobe.cli.main")

NEXT_FILES = {"package.json": '{"dependencies": {"next": "^13.0.0"}}', "next.config.js": ""}


def _write(root, files):
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def stub_client(monkeypatch):
    client = StubHttpClient()
    monkeypatch.setattr(cli_module, "create_default_http_client", lambda settings: client)
    monkeypatch.setattr(time, "sleep", lambda _: None)
    return client


def test_build_parser_defaults_and_flags():
    parser = build_parser()
    args = parser.parse_args([])
    assert args.path == "."
    assert args.json is False
    assert args.check_health is None

    args = parser.parse_args(["app", "--json", "--check-health", "http://localhost:3000", "--attempts", "2"])
    assert args.path == "app"
    assert args.json is True
    assert args.check_health == "http://localhost:3000"
    assert args.attempts == 2


def test_pretty_print_detection(capsys):
    detection = Detection(
        framework="Next.js",
        language="JavaScript/TypeScript",
        score=5.0,
        confidence=0.8333,
        confidence_level="high",
        signals=["next.config", "package.json has next"],
        build_plan=["npm install", "npm run build"],
        run_plan=["npm run start"],
        healthcheck=HealthCheck(),
        env=["NEXT_PUBLIC_*, any server-only envs"],
        meta={"package_manager": "npm", "output_mode": "default"},
    )
    health = HealthCheckResult(ok=True, url="http://localhost:3000/", expected_status=200, status_code=200, attempts=1)
    _pretty_print(detection, health)
    output = capsys.readouterr().out

    assert "[StackProbe] Framework: Next.js (JavaScript/TypeScript)" in output
    assert "Confidence: 0.83 (high, score 5)" in output
    assert "Signals (2): next.config, package.json has next" in output
    assert "  npm run build" in output
    assert "Health check: GET / -> 200 (timeout 30s)" in output
    assert "Meta: output_mode=default, package_manager=npm" in output
    assert "Health: ok (http://localhost:3000/ -> 200, 1 attempt(s))" in output


def test_pretty_print_fallback(capsys):
    _pretty_print(Detection(language="Unknown", meta={"note": NO_FRAMEWORK_MESSAGE}))
    output = capsys.readouterr().out
    assert f"[StackProbe] {NO_FRAMEWORK_MESSAGE}." in output
    assert "Build:" not in output


def test_cli_main_pretty_output(tmp_path, capsys, stub_client):
    _write(tmp_path, NEXT_FILES)
    exit_code = cli_module.main([str(tmp_path)])
    output = capsys.readouterr().out

    assert exit_code == EXIT_OK
    assert "Framework: Next.js" in output
    assert stub_client.calls == []
    assert stub_client.closed is True


def test_cli_main_json_output(tmp_path, capsys, stub_client):
    _write(tmp_path, NEXT_FILES)
    exit_code = cli_module.main([str(tmp_path), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == EXIT_OK
    assert payload["framework"] == "Next.js"
    assert payload["meta"]["output_mode"] == "default"
    assert payload["run_plan"] == ["npm run start"]
    assert "health" not in payload


def test_cli_main_reports_missing_project(tmp_path, capsys, stub_client):
    exit_code = cli_module.main([str(tmp_path / "missing")])
    captured = capsys.readouterr()

    assert exit_code == EXIT_PROJECT_ERROR
    assert "error: cannot scan project at" in captured.err
    assert captured.out == ""


def test_cli_main_health_check_passes(tmp_path, capsys, stub_client):
    _write(tmp_path, NEXT_FILES)
    stub_client.add("http://localhost:3000/", HttpResponse(status_code=200))
    exit_code = cli_module.main([str(tmp_path), "--json", "--check-health", "http://localhost:3000"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == EXIT_OK
    assert payload["health"]["ok"] is True
    assert payload["health"]["url"] == "http://localhost:3000/"


def test_cli_main_health_check_failure_sets_exit_code(tmp_path, capsys, stub_client):
    _write(tmp_path, NEXT_FILES)
    stub_client.add("http://localhost:3000/", HttpResponse(status_code=500))
    exit_code = cli_module.main([str(tmp_path), "--check-health", "http://localhost:3000", "--attempts", "2"])
    output = capsys.readouterr().out

    assert exit_code == EXIT_HEALTH_FAILED
    assert "Health: FAILED (http://localhost:3000/) after 2 attempt(s): expected HTTP 200, got 500" in output
    assert len(stub_client.calls) == 2


def test_cli_ignore_ssl_errors_disables_verification(tmp_path, monkeypatch, stub_client):
    captured = {}

    def fake_factory(settings):
        captured["verify_ssl"] = settings.verify_ssl
        return stub_client

    monkeypatch.setattr(cli_module, "create_default_http_client", fake_factory)
    _write(tmp_path, NEXT_FILES)
    assert cli_module.main([str(tmp_path), "--ignore-ssl-errors", "--json"]) == EXIT_OK
    assert captured["verify_ssl"] is False


class DummyClient:
    def __init__(self):
        self.closed = False

    def close(self):  # pragma: no cover - exercised via StackProbe
        self.closed = True


class DummyDetectionEngine:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def detect(self, root):
        self.calls.append(root)
        return self.result


def test_stackprobe_facade_delegates_detection():
    client = DummyClient()
    detection = Detection(framework="Go", language="Go")
    probe = StackProbe(http_client=client)
    probe.detection_engine = DummyDetectionEngine(detection)

    assert probe.detect("/srv/app") is detection
    assert probe.detection_engine.calls == ["/srv/app"]
    probe.close()
    assert client.closed is True


def test_stackprobe_exit_closes_client():
    client = DummyClient()
    probe = StackProbe(http_client=client)
    probe.__exit__(None, None, None)
    assert client.closed is True


def test_stackprobe_close_tolerates_client_errors():
    class ExplodingClient:
        def close(self):
            raise RuntimeError("already closed")

    StackProbe(http_client=ExplodingClient()).close()

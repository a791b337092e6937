from __future__ import annotations

"""
StackProbe, framework detection and deployment planning for project trees.
Copyright (C) 2025  Theori Inc.

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""StackProbe CLI."""

import argparse
import json
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import ProjectAccessError
from ..framework_detection.keys import NO_FRAMEWORK_MESSAGE
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import Detection, HealthCheckResult
from ..runtime import StackProbe

EXIT_OK = 0
EXIT_HEALTH_FAILED = 1
EXIT_PROJECT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="StackProbe framework detector and deployment planner")
    parser.add_argument("path", nargs="?", default=".", help="Project directory to inspect (default: current directory)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--check-health",
        metavar="URL",
        help="Probe the running deployment at URL using the detected health check",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=None,
        help="Health check attempts before giving up (default: STACKPROBE_HEALTH_ATTEMPTS or 5)",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification when probing health (useful for self-signed deployments)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: STACKPROBE_LOG_LEVEL or WARNING)",
    )
    return parser


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _print_list(title: str, items: list[str]) -> None:
    if not items:
        return
    print(f"{title}:")
    for item in items:
        print(f"  {item}")


def _pretty_print(detection: Detection, health: HealthCheckResult | None = None) -> None:
    if not detection.detected:
        print(f"[StackProbe] {NO_FRAMEWORK_MESSAGE}.")
        print(f"Language: {detection.language or '-'}")
    else:
        print(f"[StackProbe] Framework: {detection.framework} ({detection.language})")
        print(f"Confidence: {detection.confidence:.2f} ({detection.confidence_level}, score {detection.score:g})")
        if detection.signals:
            print(f"Signals ({len(detection.signals)}): {', '.join(detection.signals)}")
        _print_list("Build", detection.build_plan)
        _print_list("Run", detection.run_plan)
        if detection.healthcheck:
            hc = detection.healthcheck
            print(f"Health check: GET {hc.path} -> {hc.expect} (timeout {hc.timeout_seconds}s)")
        if detection.env:
            print(f"Env: {', '.join(detection.env)}")
    if detection.meta:
        meta_str = ", ".join(f"{k}={v}" for k, v in sorted(detection.meta.items()))
        print(f"Meta: {meta_str}")

    if health is None:
        return
    if health.skipped:
        print(f"Health: skipped ({health.reason})")
    elif health.ok:
        print(f"Health: ok ({health.url} -> {health.status_code}, {health.attempts} attempt(s))")
    else:
        detail = health.error_message or health.reason
        print(f"Health: FAILED ({health.url}) after {health.attempts} attempt(s): {detail}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    http_client = create_default_http_client(settings)

    health: HealthCheckResult | None = None
    with StackProbe(http_client=http_client, http_settings=settings) as probe:
        try:
            detection = probe.detect(args.path)
        except ProjectAccessError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_PROJECT_ERROR
        if args.check_health:
            health = probe.check_health(args.check_health, detection, attempts=args.attempts)

    if args.json:
        payload = detection.to_dict()
        if health is not None:
            payload["health"] = health.to_dict()
        _print_json(payload)
    else:
        _pretty_print(detection, health)

    if health is not None and not health.ok:
        return EXIT_HEALTH_FAILED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

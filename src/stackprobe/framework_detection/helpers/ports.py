# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Best-effort listening port discovery from scripts, env files and framework config."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from ..fsreader import ProjectFS
from ..keys import Framework
from .javascript import parse_package_json

FALLBACK_PORT = "3000"

DEFAULT_PORTS: dict[Framework, str] = {
    Framework.NEXTJS: "3000",
    Framework.REMIX: "3000",
    Framework.NUXT: "3000",
    Framework.SVELTE: "5173",
    Framework.ASTRO: "4321",
    Framework.GATSBY: "9000",
    Framework.VUE: "8080",
    Framework.ANGULAR: "4200",
    Framework.EXPRESS: "3000",
    Framework.FASTIFY: "3000",
    Framework.NESTJS: "3000",
    Framework.TRPC: "3000",
    Framework.ELEVENTY: "8080",
    Framework.DOCUSAURUS: "3000",
    Framework.DJANGO: "8000",
    Framework.FASTAPI: "8000",
    Framework.FLASK: "5000",
    Framework.GIN: "8080",
    Framework.ECHO: "8080",
    Framework.FIBER: "3000",
    Framework.GO: "8080",
    Framework.HUGO: "1313",
    Framework.LARAVEL: "8000",
    Framework.SYMFONY: "8000",
    Framework.RAILS: "3000",
    Framework.JEKYLL: "4000",
    Framework.ACTIX: "8080",
    Framework.AXUM: "3000",
    Framework.SPRING_BOOT: "8080",
    Framework.ASPNET_CORE: "5000",
    Framework.PHOENIX: "4000",
}

SCRIPT_NAMES = ("start", "dev", "serve", "prod", "production")
ENV_FILES = (".env", ".env.local", ".env.example", ".env.development")

_COMMAND_PATTERNS = (
    re.compile(r"(?:-p|--port)\s+(\d+)"),
    re.compile(r"(?:-p|--port)=(\d+)"),
    re.compile(r"(?:--bind|--listen)\s+[^:\s]*:(\d+)"),
    re.compile(r"\bPORT=(\d+)"),
)
_JS_CONFIG_RE = re.compile(r"\bport\s*:\s*(\d+)")
_PY_SETTINGS_RE = re.compile(r"""^\s*PORT\s*=\s*['"]?(\d+)""", re.MULTILINE)
_GO_LISTEN_RE = re.compile(r":(\d{4,5})[^0-9]")
_GO_ASSIGN_RE = re.compile(r"""\bport\s*:?=\s*['"]?(\d+)['"]?""")
_PHOENIX_RE = re.compile(r"\bport:\s*(\d+)")
_RUBY_RE = re.compile(r"\bport\s+(\d+)")
_SPRING_RE = re.compile(r"server\.port\s*[=:]\s*(\d+)")
_ASPNET_RE = re.compile(r"http://[^:/\s]+:(\d+)")


def is_valid_port(value: str) -> bool:
    try:
        port = int(value)
    except (TypeError, ValueError):
        return False
    return 0 < port <= 65535


def extract_port_from_command(command: str) -> str:
    for pattern in _COMMAND_PATTERNS:
        match = pattern.search(command)
        if match and is_valid_port(match.group(1)):
            return match.group(1)
    return ""


def _scan_files(fs: ProjectFS, paths: Iterable[str], patterns: Iterable[re.Pattern[str]]) -> str:
    patterns = tuple(patterns)
    for path in paths:
        if not fs.has(path):
            continue
        content = fs.read(path)
        for pattern in patterns:
            match = pattern.search(content)
            if match and is_valid_port(match.group(1)):
                return match.group(1)
    return ""


def port_from_package_json(fs: ProjectFS) -> str:
    scripts = parse_package_json(fs).scripts
    for name in SCRIPT_NAMES:
        port = extract_port_from_command(scripts.get(name, ""))
        if port:
            return port
    return ""


def port_from_env_files(fs: ProjectFS) -> str:
    for path in ENV_FILES:
        for line in fs.read(path).splitlines():
            line = line.strip()
            if line.startswith("#") or not line.startswith("PORT="):
                continue
            value = line[len("PORT=") :].strip("\"'")
            if is_valid_port(value):
                return value
    return ""


def _next_config(fs: ProjectFS) -> str:
    return _scan_files(fs, ("next.config.js", "next.config.mjs"), (_JS_CONFIG_RE,))


def _vite_config(fs: ProjectFS) -> str:
    return _scan_files(fs, ("vite.config.js", "vite.config.ts", "vite.config.mjs"), (_JS_CONFIG_RE,))


def _python_settings(fs: ProjectFS) -> str:
    return _scan_files(fs, ("settings.py", "config/settings.py", "core/settings.py"), (_PY_SETTINGS_RE,))


def _go_code(fs: ProjectFS) -> str:
    return _scan_files(fs, ("main.go", "cmd/server/main.go", "cmd/api/main.go"), (_GO_LISTEN_RE, _GO_ASSIGN_RE))


def _phoenix_config(fs: ProjectFS) -> str:
    return _scan_files(fs, ("config/config.exs", "config/dev.exs", "config/prod.exs"), (_PHOENIX_RE,))


def _ruby_config(fs: ProjectFS) -> str:
    return _scan_files(fs, ("config/puma.rb", "config.ru"), (_RUBY_RE,))


def _spring_config(fs: ProjectFS) -> str:
    paths = (
        "src/main/resources/application.properties",
        "src/main/resources/application.yml",
        "application.properties",
        "application.yml",
    )
    return _scan_files(fs, paths, (_SPRING_RE,))


def _aspnet_launch_settings(fs: ProjectFS) -> str:
    return _scan_files(fs, ("Properties/launchSettings.json",), (_ASPNET_RE,))


_FRAMEWORK_PROBES: dict[Framework, Callable[[ProjectFS], str]] = {
    Framework.NEXTJS: _next_config,
    Framework.REMIX: _next_config,
    Framework.SVELTE: _next_config,
    Framework.VUE: _vite_config,
    Framework.DJANGO: _python_settings,
    Framework.FLASK: _python_settings,
    Framework.FASTAPI: _python_settings,
    Framework.GIN: _go_code,
    Framework.ECHO: _go_code,
    Framework.FIBER: _go_code,
    Framework.GO: _go_code,
    Framework.PHOENIX: _phoenix_config,
    Framework.RAILS: _ruby_config,
    Framework.SPRING_BOOT: _spring_config,
    Framework.ASPNET_CORE: _aspnet_launch_settings,
}


def detect_port(fs: ProjectFS, framework: Framework) -> str:
    """Port declared by the project itself, or "" when nothing states one."""
    port = port_from_package_json(fs) or port_from_env_files(fs)
    if port:
        return port
    probe = _FRAMEWORK_PROBES.get(framework)
    return probe(fs) if probe else ""


def get_default_port(framework: Framework | None) -> str:
    if framework is None:
        return FALLBACK_PORT
    return DEFAULT_PORTS.get(framework, FALLBACK_PORT)

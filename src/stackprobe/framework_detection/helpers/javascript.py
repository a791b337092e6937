# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""package.json, Next.js config, adapter and monorepo helpers."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any

from ..fsreader import ProjectFS

logger = logging.getLogger(__name__)

OUTPUT_DEFAULT = "default"
OUTPUT_STANDALONE = "standalone"
OUTPUT_EXPORT = "export"

RUN_MODE_SERVER = "server"
RUN_MODE_STATIC = "static"

ADAPTER_NODE = "node"
ADAPTER_STATIC = "static"
ADAPTER_VERCEL = "vercel"
ADAPTER_NETLIFY = "netlify"
ADAPTER_CLOUDFLARE = "cloudflare"
ADAPTER_DENO = "deno"
ADAPTER_UNKNOWN = "unknown"

MONOREPO_NONE = "none"

NEXT_CONFIG_FILES = ("next.config.js", "next.config.ts", "next.config.mjs")

PRODUCTION_START_SCRIPTS = ("start:prod", "start:production", "serve", "preview", "start")
PRODUCTION_BUILD_SCRIPTS = ("build:prod", "build:production", "build")

# (package substring, adapter type, run mode), checked in order.
_ADAPTER_TABLES: dict[str, tuple[tuple[str, str, str], ...]] = {
    "remix": (
        ("@remix-run/cloudflare", ADAPTER_CLOUDFLARE, RUN_MODE_SERVER),
        ("@remix-run/deno", ADAPTER_DENO, RUN_MODE_SERVER),
        ("@remix-run/node", ADAPTER_NODE, RUN_MODE_SERVER),
    ),
    "sveltekit": (
        ("@sveltejs/adapter-static", ADAPTER_STATIC, RUN_MODE_STATIC),
        ("@sveltejs/adapter-node", ADAPTER_NODE, RUN_MODE_SERVER),
        ("@sveltejs/adapter-vercel", ADAPTER_VERCEL, RUN_MODE_SERVER),
        ("@sveltejs/adapter-netlify", ADAPTER_NETLIFY, RUN_MODE_SERVER),
        ("@sveltejs/adapter-cloudflare", ADAPTER_CLOUDFLARE, RUN_MODE_SERVER),
    ),
    "astro": (
        ("@astrojs/node", ADAPTER_NODE, RUN_MODE_SERVER),
        ("@astrojs/vercel", ADAPTER_VERCEL, RUN_MODE_SERVER),
        ("@astrojs/netlify", ADAPTER_NETLIFY, RUN_MODE_SERVER),
        ("@astrojs/cloudflare", ADAPTER_CLOUDFLARE, RUN_MODE_SERVER),
    ),
}
_ADAPTER_ALIASES = {"svelte": "sveltekit"}

_MONOREPO_CONFIGS: tuple[tuple[str, str], ...] = (
    ("turbo.json", "turborepo"),
    ("nx.json", "nx"),
    ("lerna.json", "lerna"),
    ("pnpm-workspace.yaml", "pnpm-workspaces"),
)

_NEXT_OUTPUT_RE = re.compile(r"""output\s*:\s*['"](standalone|export)['"]""")
_LEADING_NON_DIGITS_RE = re.compile(r"^\D*(\d+)")


@dataclass
class PackageJSON:
    scripts: dict[str, str] = field(default_factory=dict)
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    has_workspaces: bool = False

    @property
    def all_dependencies(self) -> dict[str, str]:
        merged = dict(self.dependencies)
        merged.update(self.dev_dependencies)
        return merged

    def has_dependency(self, name: str) -> bool:
        return bool(self.all_dependencies.get(name))


@dataclass
class NextConfig:
    output_mode: str = OUTPUT_DEFAULT
    router: str = ""
    build_output: str = ".next/"


@dataclass
class FrameworkAdapter:
    type: str = ADAPTER_UNKNOWN
    package: str = ""
    run_mode: str = RUN_MODE_SERVER


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): "" if item is None else str(item) for key, item in value.items()}


def parse_package_json(fs: ProjectFS) -> PackageJSON:
    """Best-effort parse; a missing or malformed manifest yields empty maps."""
    content = fs.read("package.json")
    if not content:
        return PackageJSON()
    try:
        data = json.loads(content)
    except ValueError:
        logger.debug("package.json is not valid JSON; ignoring its contents")
        return PackageJSON()
    if not isinstance(data, dict):
        return PackageJSON()
    return PackageJSON(
        scripts=_string_map(data.get("scripts")),
        dependencies=_string_map(data.get("dependencies")),
        dev_dependencies=_string_map(data.get("devDependencies")),
        has_workspaces=data.get("workspaces") is not None,
    )


def parse_next_config(fs: ProjectFS) -> NextConfig:
    config = NextConfig()
    if fs.dir_exists("app"):
        config.router = "app"
    elif fs.dir_exists("pages"):
        config.router = "pages"

    for path in NEXT_CONFIG_FILES:
        content = fs.read(path)
        if not content:
            continue
        modes = set(_NEXT_OUTPUT_RE.findall(content))
        if OUTPUT_EXPORT in modes:
            config.output_mode = OUTPUT_EXPORT
            config.build_output = "out/"
        elif OUTPUT_STANDALONE in modes:
            config.output_mode = OUTPUT_STANDALONE
            config.build_output = ".next/standalone/"
        break
    return config


def detect_framework_adapter(pkg: PackageJSON, framework: str) -> FrameworkAdapter:
    """
    Classify the deployment adapter for frameworks with pluggable output targets.

    ``framework`` is one of ``remix``, ``sveltekit`` (or ``svelte``) and
    ``astro``; anything else yields an ``unknown`` server adapter.
    """
    key = _ADAPTER_ALIASES.get(framework.lower(), framework.lower())
    deps = sorted(pkg.all_dependencies)
    for package, adapter_type, run_mode in _ADAPTER_TABLES.get(key, ()):
        match = next((dep for dep in deps if package in dep), None)
        if match:
            return FrameworkAdapter(type=adapter_type, package=match, run_mode=run_mode)

    if key == "remix" and pkg.has_dependency("@remix-run/react"):
        return FrameworkAdapter(type=ADAPTER_NODE)
    if key == "sveltekit" and pkg.has_dependency("@sveltejs/kit"):
        return FrameworkAdapter(type=ADAPTER_NODE)
    if key == "astro":
        return FrameworkAdapter(type=ADAPTER_STATIC, run_mode=RUN_MODE_STATIC)
    return FrameworkAdapter()


def _first_script(pkg: PackageJSON, priorities: tuple[str, ...], fallback: str) -> str:
    for name in priorities:
        if pkg.scripts.get(name):
            return name
    return fallback


def get_production_start_script(pkg: PackageJSON) -> str:
    return _first_script(pkg, PRODUCTION_START_SCRIPTS, "start")


def get_production_build_script(pkg: PackageJSON) -> str:
    return _first_script(pkg, PRODUCTION_BUILD_SCRIPTS, "build")


def detect_monorepo_type(fs: ProjectFS) -> str:
    for path, tool in _MONOREPO_CONFIGS:
        if fs.has(path):
            return tool
    if parse_package_json(fs).has_workspaces:
        return "npm-workspaces"
    return MONOREPO_NONE


def major_version(spec: str) -> str:
    """Major version from a semver range such as ``^3.2.0``; empty if there is none."""
    match = _LEADING_NON_DIGITS_RE.match(spec or "")
    return match.group(1) if match else ""

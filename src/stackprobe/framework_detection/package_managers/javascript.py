# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JavaScript package manager detection and command templates."""

from __future__ import annotations

from ..fsreader import ProjectFS

BUN = "bun"
YARN_BERRY = "yarn-berry"
PNPM = "pnpm"
YARN = "yarn"
NPM = "npm"

# Lockfile sniffing order; the first hit wins.
_LOCKFILE_PRIORITY: tuple[tuple[tuple[str, ...], str], ...] = (
    (("bun.lockb", "bun.lock"), BUN),
    ((".yarnrc.yml",), YARN_BERRY),
    (("pnpm-lock.yaml",), PNPM),
    (("yarn.lock",), YARN),
)


def detect_package_manager(fs: ProjectFS) -> str:
    for paths, manager in _LOCKFILE_PRIORITY:
        if any(fs.has(path) for path in paths):
            return manager
    return NPM


def _binary(pm: str) -> str:
    return YARN if pm == YARN_BERRY else pm


def get_install_command(pm: str) -> str:
    if pm in (BUN, PNPM, YARN, YARN_BERRY):
        return f"{_binary(pm)} install"
    return "npm install"


def get_build_command(pm: str) -> str:
    if pm == BUN:
        return "bun run build"
    if pm == PNPM:
        return "pnpm run build"
    if pm in (YARN, YARN_BERRY):
        return "yarn build"
    return "npm run build"


def get_start_command(pm: str) -> str:
    if pm == BUN:
        return "bun run start"
    if pm == PNPM:
        return "pnpm start"
    if pm in (YARN, YARN_BERRY):
        return "yarn start"
    return "npm start"


def get_run_command(pm: str, script: str) -> str:
    """Invoke an arbitrary package.json script."""
    if pm in (BUN, PNPM, YARN, YARN_BERRY):
        return f"{_binary(pm)} run {script}"
    return f"npm run {script}"


def get_preview_command(pm: str) -> str:
    return get_run_command(pm, "preview")


def detect_deno_runtime(fs: ProjectFS) -> bool:
    return fs.has("deno.json") or fs.has("deno.jsonc")


__all__ = [
    "BUN",
    "NPM",
    "PNPM",
    "YARN",
    "YARN_BERRY",
    "detect_deno_runtime",
    "detect_package_manager",
    "get_build_command",
    "get_install_command",
    "get_preview_command",
    "get_run_command",
    "get_start_command",
]

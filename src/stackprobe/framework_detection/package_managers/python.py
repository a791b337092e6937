# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Python package manager detection and Django server protocol classification."""

from __future__ import annotations

import logging
import re

from ..fsreader import ProjectFS

logger = logging.getLogger(__name__)

UV = "uv"
PDM = "pdm"
POETRY = "poetry"
PIPENV = "pipenv"
PIP = "pip"

ASGI = "asgi"
WSGI = "wsgi"

_LOCKFILE_PRIORITY: tuple[tuple[str, str], ...] = (
    ("uv.lock", UV),
    ("pdm.lock", PDM),
    ("poetry.lock", POETRY),
    ("Pipfile.lock", PIPENV),
)

_INSTALL_COMMANDS: dict[str, str] = {
    UV: "uv sync",
    PDM: "pdm install --prod",
    POETRY: "poetry install",
    PIPENV: "pipenv install",
}

# Conventional names for the Django project package (the one holding settings/asgi/wsgi).
DJANGO_PROJECT_DIRS: tuple[str, ...] = ("config", "core", "mysite", "project", "myproject", "app", "src")
DJANGO_SETTINGS_FILES: tuple[str, ...] = ("settings.py", "settings/base.py", "config/settings.py", "core/settings.py")
ASGI_SERVER_PACKAGES: tuple[str, ...] = ("uvicorn", "daphne", "channels")
DEPENDENCY_MANIFESTS: tuple[str, ...] = ("requirements.txt", "pyproject.toml", "Pipfile")

_SETTINGS_MODULE_RE = re.compile(r"""DJANGO_SETTINGS_MODULE['"]\s*,\s*['"]([A-Za-z_][\w.]*)['"]""")


def detect_package_manager(fs: ProjectFS) -> str:
    for path, manager in _LOCKFILE_PRIORITY:
        if fs.has(path):
            return manager
    return PIP


def get_install_command(pm: str) -> str:
    return _INSTALL_COMMANDS.get(pm, "pip install -r requirements.txt")


def detect_django_project_name(fs: ProjectFS) -> str:
    """Top-level package of DJANGO_SETTINGS_MODULE as set in manage.py, or ""."""
    match = _SETTINGS_MODULE_RE.search(fs.read("manage.py"))
    if not match:
        return ""
    return match.group(1).split(".", 1)[0]


def _project_dirs(fs: ProjectFS) -> list[str]:
    dirs = list(DJANGO_PROJECT_DIRS)
    project = detect_django_project_name(fs)
    if project and project not in dirs:
        dirs.insert(0, project)
    return dirs


def detect_django_server_type(fs: ProjectFS) -> str:
    """
    Classify a Django project as ASGI or WSGI.

    Tiers, strongest evidence first:

    1. ``asgi.py`` at the project root
    2. ``<package>/asgi.py`` for the settings package or a conventional layout
    3. ``ASGI_APPLICATION`` in a settings module
    4. an ASGI server (uvicorn, daphne, channels) in a dependency manifest
    5. ``wsgi.py`` at the root or in a conventional layout

    Falls back to WSGI when nothing matches.
    """
    if fs.has("asgi.py"):
        return ASGI

    project_dirs = _project_dirs(fs)
    if any(fs.has(f"{name}/asgi.py") for name in project_dirs):
        return ASGI

    settings_files = list(DJANGO_SETTINGS_FILES)
    settings_files.extend(f"{name}/settings.py" for name in project_dirs if f"{name}/settings.py" not in settings_files)
    for path in settings_files:
        if "ASGI_APPLICATION" in fs.read(path):
            return ASGI

    for path in DEPENDENCY_MANIFESTS:
        content = fs.read(path).lower()
        if any(package in content for package in ASGI_SERVER_PACKAGES):
            return ASGI

    if fs.has("wsgi.py") or any(fs.has(f"{name}/wsgi.py") for name in project_dirs):
        return WSGI

    logger.debug("No ASGI or WSGI entry point found, assuming WSGI")
    return WSGI


def get_django_run_command(server_type: str, project_name: str = "") -> str:
    if server_type == ASGI:
        module = f"{project_name}.asgi" if project_name else "asgi"
        return f"uvicorn {module}:application --host 0.0.0.0 --port 8000"
    module = f"{project_name}.wsgi" if project_name else "<yourproject>.wsgi"
    return f"gunicorn {module}:application --bind 0.0.0.0:8000 --workers 2"


__all__ = [
    "ASGI",
    "PDM",
    "PIP",
    "PIPENV",
    "POETRY",
    "UV",
    "WSGI",
    "detect_django_project_name",
    "detect_django_server_type",
    "detect_package_manager",
    "get_django_run_command",
    "get_install_command",
]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builders for Python web frameworks."""

from __future__ import annotations

from ...models.detection import HealthCheck
from .. import keys
from ..fsreader import ProjectFS
from ..keys import Framework
from ..package_managers import python as pypm
from .base import Plan, PlanBuilder


class DjangoPlanBuilder(PlanBuilder):
    framework = Framework.DJANGO

    def build(self, fs: ProjectFS) -> Plan:
        pm = pypm.detect_package_manager(fs)
        server_type = pypm.detect_django_server_type(fs)
        project = pypm.detect_django_project_name(fs)
        return Plan(
            build=[pypm.get_install_command(pm), "python manage.py collectstatic --noinput"],
            run=[pypm.get_django_run_command(server_type, project)],
            health=HealthCheck(path="/healthz"),
            env=["DJANGO_SETTINGS_MODULE", "SECRET_KEY", "DATABASE_URL", "ALLOWED_HOSTS"],
            meta={keys.META_PACKAGE_MANAGER: pm, keys.META_SERVER_TYPE: server_type},
        )


class FlaskPlanBuilder(PlanBuilder):
    framework = Framework.FLASK

    def build(self, fs: ProjectFS) -> Plan:
        pm = pypm.detect_package_manager(fs)
        return Plan(
            build=[pypm.get_install_command(pm)],
            run=["gunicorn --bind 0.0.0.0:$PORT --workers 2 app:app"],
            health=HealthCheck(path="/health"),
            env=["FLASK_ENV", "FLASK_APP", "DATABASE_URL", "SECRET_KEY"],
            meta={keys.META_PACKAGE_MANAGER: pm},
        )


class FastAPIPlanBuilder(PlanBuilder):
    framework = Framework.FASTAPI

    @staticmethod
    def entry_module(fs: ProjectFS) -> str:
        """``main`` unless only app.py imports FastAPI."""
        if "fastapi" not in fs.read("main.py").lower() and "fastapi" in fs.read("app.py").lower():
            return "app"
        return "main"

    def build(self, fs: ProjectFS) -> Plan:
        pm = pypm.detect_package_manager(fs)
        return Plan(
            build=[pypm.get_install_command(pm)],
            run=[f"uvicorn {self.entry_module(fs)}:app --host 0.0.0.0 --port $PORT"],
            health=HealthCheck(path="/health"),
            env=["DATABASE_URL", "SECRET_KEY", "DEBUG"],
            meta={keys.META_PACKAGE_MANAGER: pm},
        )

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from stackprobe.framework_detection.fsreader import MemoryFS
from stackprobe.framework_detection.keys import Framework
from stackprobe.framework_detection.plans import PLAN_BUILDERS, Plan, get_plan_builder
from stackprobe.models import HealthCheck


def _plan(framework, files=None, dirs=()):
    return get_plan_builder(framework).build(MemoryFS(files or {}, dirs=dirs))


def test_every_framework_has_a_plan_builder():
    assert set(PLAN_BUILDERS) == set(Framework)
    for framework, builder in PLAN_BUILDERS.items():
        assert builder.framework is framework


@pytest.mark.parametrize("framework", list(Framework))
def test_every_plan_has_valid_structure(framework):
    plan = _plan(framework, {"package.json": "{}", "manage.py": "", "go.mod": "module test"})
    assert isinstance(plan, Plan)
    assert plan.run, f"{framework.value} has no run command"
    assert isinstance(plan.health, HealthCheck)
    assert plan.health.expect == 200
    assert plan.health.timeout_seconds == 30
    assert all(isinstance(value, str) for value in plan.meta.values())


def test_fixed_plans_are_not_shared_between_calls():
    first = _plan(Framework.GIN)
    first.meta["mutated"] = "yes"
    first.build.append("extra")
    second = _plan(Framework.GIN)
    assert "mutated" not in second.meta
    assert second.build == ["go build -o app ."]


@pytest.mark.parametrize(
    "framework, path",
    [
        (Framework.NEXTJS, "/"),
        (Framework.DJANGO, "/healthz"),
        (Framework.GO, "/healthz"),
        (Framework.GIN, "/ping"),
        (Framework.RAILS, "/up"),
        (Framework.SPRING_BOOT, "/actuator/health"),
        (Framework.NESTJS, "/health"),
        (Framework.FASTAPI, "/health"),
    ],
)
def test_conventional_health_endpoints(framework, path):
    assert _plan(framework).health.path == path


def test_next_plan_default_output():
    plan = _plan(Framework.NEXTJS, {"package.json": '{"dependencies": {"next": "14"}}', "next.config.js": ""})
    assert plan.build == ["npm install", "npm run build"]
    assert plan.run == ["npm run start"]
    assert plan.meta["output_mode"] == "default"
    assert plan.meta["build_output"] == ".next/"


def test_next_plan_standalone_and_export():
    standalone = _plan(Framework.NEXTJS, {"next.config.js": "module.exports = { output: 'standalone' }"})
    assert standalone.run == ["node .next/standalone/server.js"]
    assert standalone.meta["output_mode"] == "standalone"
    assert standalone.meta["build_output"] == ".next/"

    export = _plan(Framework.NEXTJS, {"next.config.js": "module.exports = { output: 'export' }"}, dirs=["app"])
    assert export.run == ["# Static export - serve with nginx or CDN"]
    assert export.meta["export"] == "static"
    assert export.meta["build_output"] == "out/"
    assert export.meta["router"] == "app"


def test_next_plan_uses_production_start_script_and_monorepo():
    files = {
        "package.json": '{"scripts": {"start:prod": "next start"}, "dependencies": {"next": "14"}}',
        "pnpm-lock.yaml": "",
        "turbo.json": "{}",
    }
    plan = _plan(Framework.NEXTJS, files)
    assert plan.build == ["pnpm install", "pnpm run build"]
    assert plan.run == ["pnpm run start:prod"]
    assert plan.meta["monorepo"] == "turborepo"


def test_astro_without_adapter_is_static():
    plan = _plan(Framework.ASTRO, {"package.json": '{"dependencies": {"astro": "^4.0.0"}}'})
    assert plan.run == ["# Static site - serve dist/ with nginx or CDN"]
    assert plan.meta["adapter"] == "static"
    assert plan.meta["run_mode"] == "static"


def test_astro_node_adapter_runs_server():
    plan = _plan(Framework.ASTRO, {"package.json": '{"dependencies": {"astro": "4", "@astrojs/node": "8"}}'})
    assert plan.run == ["node dist/server/entry.mjs"]
    assert plan.meta["run_mode"] == "server"


def test_astro_hosted_adapter_is_a_comment():
    plan = _plan(Framework.ASTRO, {"package.json": '{"dependencies": {"astro": "4", "@astrojs/netlify": "5"}}'})
    assert plan.run == ["# Deploy to netlify"]


def test_sveltekit_adapters():
    static = _plan(
        Framework.SVELTE,
        {"package.json": '{"devDependencies": {"@sveltejs/kit": "2", "@sveltejs/adapter-static": "3"}}'},
    )
    assert static.run == ["# Static site - serve build/ with nginx or CDN"]
    assert static.meta["adapter"] == "static"

    default = _plan(Framework.SVELTE, {"package.json": '{"devDependencies": {"@sveltejs/kit": "2"}}'})
    assert default.run == ["node build"]
    assert default.meta["adapter"] == "node"


def test_remix_adapters():
    node = _plan(Framework.REMIX, {"package.json": '{"dependencies": {"@remix-run/react": "2"}}', "yarn.lock": ""})
    assert node.run == ["yarn run start"]
    assert node.meta["adapter"] == "node"

    worker = _plan(
        Framework.REMIX,
        {"package.json": '{"dependencies": {"@remix-run/react": "2", "@remix-run/cloudflare": "2"}}'},
    )
    assert worker.run == ["# Deploy to Cloudflare Workers"]


@pytest.mark.parametrize("spec, expected", [("^2.6.14", "2"), ("^3.4.0", "3"), (None, None)])
def test_vue_major_version_meta(spec, expected):
    deps = {} if spec is None else {"vue": spec}
    plan = _plan(Framework.VUE, {"package.json": json.dumps({"dependencies": deps})})
    assert plan.meta.get("vue_version") == expected


def test_nest_plan_offers_fallback_run_command():
    plan = _plan(Framework.NESTJS, {"bun.lockb": ""})
    assert plan.run == ["node dist/main", "bun run start:prod"]


@pytest.mark.parametrize(
    "deps, adapter",
    [
        ({"@trpc/server": "10", "@trpc/next": "10"}, "nextjs"),
        ({"@trpc/server": "10", "express": "4"}, "express"),
        ({"@trpc/server": "10", "fastify": "4"}, "fastify"),
        ({"@trpc/server": "10"}, "standalone"),
    ],
)
def test_trpc_adapter_classification(deps, adapter):
    plan = _plan(Framework.TRPC, {"package.json": json.dumps({"dependencies": deps})})
    assert plan.meta["adapter"] == adapter


def test_trpc_standalone_run_commands():
    plan = _plan(Framework.TRPC, {"package.json": '{"dependencies": {"@trpc/server": "10"}}'})
    assert plan.run == ["node dist/server.js", "node dist/index.js"]


@pytest.mark.parametrize("framework", [Framework.EXPRESS, Framework.FASTIFY])
def test_node_servers_switch_to_deno(framework):
    deno = _plan(framework, {"deno.json": "{}", "package.json": "{}"})
    assert deno.build == ["deno cache main.ts"]
    assert deno.run == ["deno run --allow-net --allow-read --allow-env main.ts"]
    assert deno.meta == {"runtime": "deno"}

    node = _plan(framework, {"package.json": "{}", "yarn.lock": ""})
    assert node.build == ["yarn install"]
    assert node.run == ["yarn start"]
    assert "runtime" not in node.meta


def test_django_plan_uses_project_name_and_server_type():
    files = {
        "manage.py": 'os.environ.setdefault("DJANGO_SETTINGS_MODULE", "blog.settings")',
        "blog/asgi.py": "",
        "poetry.lock": "",
    }
    plan = _plan(Framework.DJANGO, files)
    assert plan.build == ["poetry install", "python manage.py collectstatic --noinput"]
    assert plan.run == ["uvicorn blog.asgi:application --host 0.0.0.0 --port 8000"]
    assert plan.meta == {"package_manager": "poetry", "server_type": "asgi"}


def test_fastapi_entry_module():
    assert _plan(Framework.FASTAPI, {"main.py": "from fastapi import FastAPI"}).run == [
        "uvicorn main:app --host 0.0.0.0 --port $PORT"
    ]
    assert _plan(Framework.FASTAPI, {"app.py": "from fastapi import FastAPI"}).run == [
        "uvicorn app:app --host 0.0.0.0 --port $PORT"
    ]


def test_spring_boot_build_tool():
    maven = _plan(Framework.SPRING_BOOT, {"pom.xml": "<project/>"})
    assert maven.build == ["./mvnw clean package -DskipTests"]
    assert maven.meta == {"build_tool": "maven", "build_output": "target/"}

    gradle = _plan(Framework.SPRING_BOOT, {"build.gradle": "plugins {}"})
    assert gradle.run == ["java -jar build/libs/*.jar"]
    assert gradle.meta["build_tool"] == "gradle"


def test_static_site_generators_flag_static_output():
    assert _plan(Framework.HUGO).meta == {"build_output": "public/", "static": "true"}
    assert _plan(Framework.JEKYLL).meta["static"] == "true"
    assert _plan(Framework.ELEVENTY).meta["build_output"] == "_site/"


def test_docker_compose_plan():
    plan = _plan(Framework.DOCKER_COMPOSE)
    assert plan.build == ["docker compose build"]
    assert plan.run == ["docker compose up -d"]

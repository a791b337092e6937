# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builders for JavaScript/TypeScript frameworks."""

from __future__ import annotations

from ...models.detection import HealthCheck
from .. import keys
from ..fsreader import ProjectFS
from ..helpers import javascript as js
from ..keys import Framework
from ..package_managers import javascript as pms
from .base import Plan, PlanBuilder

DENO_BUILD = "deno cache main.ts"
DENO_RUN = "deno run --allow-net --allow-read --allow-env main.ts"


def _install_and_build(pm: str) -> list[str]:
    return [pms.get_install_command(pm), pms.get_build_command(pm)]


def _with_monorepo(fs: ProjectFS, meta: dict[str, str]) -> dict[str, str]:
    monorepo = js.detect_monorepo_type(fs)
    if monorepo != js.MONOREPO_NONE:
        meta[keys.META_MONOREPO] = monorepo
    return meta


class NextPlanBuilder(PlanBuilder):
    framework = Framework.NEXTJS

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        config = js.parse_next_config(fs)
        pkg = js.parse_package_json(fs)

        if config.output_mode == js.OUTPUT_STANDALONE:
            run = ["node .next/standalone/server.js"]
        elif config.output_mode == js.OUTPUT_EXPORT:
            run = ["# Static export - serve with nginx or CDN"]
        else:
            run = [pms.get_run_command(pm, js.get_production_start_script(pkg))]

        meta = {
            keys.META_PACKAGE_MANAGER: pm,
            keys.META_OUTPUT_MODE: config.output_mode,
            # Standalone still ships the whole .next/ directory (static assets live outside standalone/).
            keys.META_BUILD_OUTPUT: ".next/" if config.output_mode == js.OUTPUT_STANDALONE else config.build_output,
        }
        if config.router:
            meta[keys.META_ROUTER] = config.router
        if config.output_mode == js.OUTPUT_EXPORT:
            meta[keys.META_EXPORT] = "static"

        return Plan(
            build=_install_and_build(pm),
            run=run,
            env=["NEXT_PUBLIC_*, any server-only envs"],
            meta=_with_monorepo(fs, meta),
        )


class RemixPlanBuilder(PlanBuilder):
    framework = Framework.REMIX

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        pkg = js.parse_package_json(fs)
        adapter = js.detect_framework_adapter(pkg, "remix")

        if adapter.type == js.ADAPTER_DENO:
            run = ["deno run --allow-net --allow-read --allow-env server.ts"]
        elif adapter.type == js.ADAPTER_CLOUDFLARE:
            run = ["# Deploy to Cloudflare Workers"]
        else:
            run = [pms.get_run_command(pm, js.get_production_start_script(pkg))]

        meta = {
            keys.META_PACKAGE_MANAGER: pm,
            keys.META_BUILD_OUTPUT: "build/",
            keys.META_ADAPTER: adapter.type,
        }
        return Plan(
            build=_install_and_build(pm),
            run=run,
            env=["NODE_ENV", "SESSION_SECRET"],
            meta=_with_monorepo(fs, meta),
        )


class NuxtPlanBuilder(PlanBuilder):
    framework = Framework.NUXT

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        return Plan(
            build=_install_and_build(pm),
            run=["node .output/server/index.mjs"],
            env=["NUXT_PUBLIC_*", "NITRO_*"],
            meta={keys.META_PACKAGE_MANAGER: pm, keys.META_BUILD_OUTPUT: ".output/"},
        )


class AstroPlanBuilder(PlanBuilder):
    framework = Framework.ASTRO

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        pkg = js.parse_package_json(fs)
        adapter = js.detect_framework_adapter(pkg, "astro")

        if adapter.type == js.ADAPTER_STATIC:
            run = ["# Static site - serve dist/ with nginx or CDN"]
        elif adapter.type == js.ADAPTER_NODE:
            run = ["node dist/server/entry.mjs"]
        elif adapter.type in (js.ADAPTER_VERCEL, js.ADAPTER_NETLIFY, js.ADAPTER_CLOUDFLARE):
            run = [f"# Deploy to {adapter.type}"]
        else:
            run = [pms.get_run_command(pm, js.get_production_start_script(pkg))]

        meta = {
            keys.META_PACKAGE_MANAGER: pm,
            keys.META_BUILD_OUTPUT: "dist/",
            keys.META_ADAPTER: adapter.type,
            keys.META_RUN_MODE: adapter.run_mode,
        }
        return Plan(
            build=_install_and_build(pm),
            run=run,
            env=["PUBLIC_*, any server-only envs for SSR"],
            meta=_with_monorepo(fs, meta),
        )


class GatsbyPlanBuilder(PlanBuilder):
    framework = Framework.GATSBY

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        return Plan(
            build=_install_and_build(pm),
            run=[pms.get_run_command(pm, "serve")],
            env=["GATSBY_*, any build-time envs"],
            meta={keys.META_PACKAGE_MANAGER: pm, keys.META_BUILD_OUTPUT: "public/"},
        )


class SveltePlanBuilder(PlanBuilder):
    framework = Framework.SVELTE

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        pkg = js.parse_package_json(fs)
        adapter = js.detect_framework_adapter(pkg, "sveltekit")

        if adapter.type == js.ADAPTER_STATIC:
            run = ["# Static site - serve build/ with nginx or CDN"]
        elif adapter.type == js.ADAPTER_NODE:
            run = ["node build"]
        elif adapter.type in (js.ADAPTER_VERCEL, js.ADAPTER_NETLIFY, js.ADAPTER_CLOUDFLARE):
            run = [f"# Deploy to {adapter.type}"]
        else:
            run = [pms.get_run_command(pm, js.get_production_start_script(pkg))]

        meta = {
            keys.META_PACKAGE_MANAGER: pm,
            keys.META_BUILD_OUTPUT: "build/",
            keys.META_ADAPTER: adapter.type,
            keys.META_RUN_MODE: adapter.run_mode,
        }
        return Plan(
            build=_install_and_build(pm),
            run=run,
            env=["PUBLIC_*, any server-only envs for SvelteKit SSR"],
            meta=_with_monorepo(fs, meta),
        )


class VuePlanBuilder(PlanBuilder):
    framework = Framework.VUE

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        pkg = js.parse_package_json(fs)

        meta = {keys.META_PACKAGE_MANAGER: pm, keys.META_BUILD_OUTPUT: "dist/"}
        vue_major = js.major_version(pkg.all_dependencies.get("vue", ""))
        if vue_major:
            meta[keys.META_VUE_VERSION] = vue_major

        return Plan(
            build=_install_and_build(pm),
            run=[pms.get_run_command(pm, js.get_production_start_script(pkg))],
            env=["VUE_APP_*, VITE_* for Vite-based setups"],
            meta=_with_monorepo(fs, meta),
        )


class AngularPlanBuilder(PlanBuilder):
    framework = Framework.ANGULAR

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        return Plan(
            build=_install_and_build(pm),
            run=[pms.get_start_command(pm)],
            env=["NG_APP_*, any environment-specific configs"],
            meta={keys.META_PACKAGE_MANAGER: pm, keys.META_BUILD_OUTPUT: "dist/"},
        )


class NestPlanBuilder(PlanBuilder):
    framework = Framework.NESTJS

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        return Plan(
            build=_install_and_build(pm),
            run=["node dist/main", pms.get_run_command(pm, "start:prod")],
            health=HealthCheck(path="/health"),
            env=["NODE_ENV", "PORT", "DATABASE_URL"],
            meta={keys.META_PACKAGE_MANAGER: pm},
        )


class TRPCPlanBuilder(PlanBuilder):
    framework = Framework.TRPC

    @staticmethod
    def detect_adapter(pkg: js.PackageJSON) -> str:
        if pkg.has_dependency("@trpc/next") or pkg.has_dependency("next"):
            return "nextjs"
        if pkg.has_dependency("@trpc/server"):
            if pkg.has_dependency("express"):
                return "express"
            if pkg.has_dependency("fastify"):
                return "fastify"
        return "standalone"

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        pkg = js.parse_package_json(fs)
        adapter = self.detect_adapter(pkg)
        start_script = js.get_production_start_script(pkg)

        if adapter == "standalone" and start_script == "start":
            run = ["node dist/server.js", "node dist/index.js"]
        else:
            run = [pms.get_run_command(pm, start_script)]

        meta = {
            keys.META_PACKAGE_MANAGER: pm,
            keys.META_ADAPTER: adapter,
            keys.META_BUILD_OUTPUT: "dist/",
        }
        return Plan(
            build=_install_and_build(pm),
            run=run,
            health=HealthCheck(path="/health"),
            env=["NODE_ENV", "PORT", "DATABASE_URL", "API_*"],
            meta=_with_monorepo(fs, meta),
        )


class EleventyPlanBuilder(PlanBuilder):
    framework = Framework.ELEVENTY

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        return Plan(
            build=[pms.get_install_command(pm), pms.get_run_command(pm, "build")],
            run=[pms.get_run_command(pm, "serve")],
            env=["ELEVENTY_ENV"],
            meta={keys.META_PACKAGE_MANAGER: pm, keys.META_BUILD_OUTPUT: "_site/", keys.META_STATIC: "true"},
        )


class DocusaurusPlanBuilder(PlanBuilder):
    framework = Framework.DOCUSAURUS

    def build(self, fs: ProjectFS) -> Plan:
        pm = pms.detect_package_manager(fs)
        return Plan(
            build=_install_and_build(pm),
            run=[pms.get_run_command(pm, "serve")],
            meta={keys.META_PACKAGE_MANAGER: pm, keys.META_BUILD_OUTPUT: "build/"},
        )


class NodeServerPlanBuilder(PlanBuilder):
    """Plain Node HTTP servers; switches to Deno commands when a deno.json is present."""

    def build(self, fs: ProjectFS) -> Plan:
        if pms.detect_deno_runtime(fs):
            return Plan(
                build=[DENO_BUILD],
                run=[DENO_RUN],
                health=HealthCheck(path="/health"),
                env=["PORT", "DATABASE_URL"],
                meta={keys.META_RUNTIME: "deno"},
            )
        pm = pms.detect_package_manager(fs)
        return Plan(
            build=[pms.get_install_command(pm)],
            run=[pms.get_start_command(pm)],
            health=HealthCheck(path="/health"),
            env=["NODE_ENV", "PORT", "DATABASE_URL"],
            meta={keys.META_PACKAGE_MANAGER: pm},
        )


class FastifyPlanBuilder(NodeServerPlanBuilder):
    framework = Framework.FASTIFY


class ExpressPlanBuilder(NodeServerPlanBuilder):
    framework = Framework.EXPRESS

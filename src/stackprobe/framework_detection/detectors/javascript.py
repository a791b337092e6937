# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JavaScript/TypeScript framework detectors."""

from __future__ import annotations

from ...models.detection import Candidate
from ..base import LanguageDetector, ProjectScan
from ..builder import DependencyRule, DetectionBuilder
from ..fsreader import ProjectFS
from ..keys import LANG_JS, LANG_TS, Framework
from ..scoring import (
    SCORE_BUILD_TOOL,
    SCORE_CONFIG_FILE,
    SCORE_DEPENDENCY,
    SCORE_FILE_PATTERN,
    SCORE_LOCKFILE,
    SCORE_MINOR_INDICATOR,
    SCORE_SCRIPT_PATTERN,
    SCORE_STRUCTURE,
)

MANIFEST = "package.json"


def detect_nextjs(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.NEXTJS, LANG_JS, fs)
        .check_any_file(["next.config.js", "next.config.ts"], SCORE_BUILD_TOOL, "next.config")
        .check_dependency(MANIFEST, '"next"', SCORE_DEPENDENCY, "package.json has next")
        .check_content(MANIFEST, '"next build"', SCORE_SCRIPT_PATTERN, "package.json scripts for next")
        .check_any_dir(["pages", "app"], SCORE_MINOR_INDICATOR, "pages/ or app/ folder")
        .build()
    )


def detect_remix(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.REMIX, LANG_JS, fs)
        .check_any_file(["remix.config.js", "remix.config.ts"], SCORE_CONFIG_FILE, "remix.config")
        .check_dependency(MANIFEST, '"@remix-run/react"', SCORE_DEPENDENCY, "package.json has @remix-run/react")
        .check_dir("app/routes", SCORE_STRUCTURE, "app/routes/ directory")
        .build()
    )


def detect_nuxt(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.NUXT, LANG_JS, fs)
        .check_any_file(["nuxt.config.js", "nuxt.config.ts"], SCORE_CONFIG_FILE, "nuxt.config")
        .check_dependency(MANIFEST, '"nuxt"', SCORE_DEPENDENCY, "package.json has nuxt")
        .check_condition(
            fs.dir_exists("pages") or fs.has("app.vue"), SCORE_STRUCTURE, "pages/ directory or app.vue"
        )
        .build()
    )


def detect_astro(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.ASTRO, LANG_JS, fs)
        .check_any_file(["astro.config.mjs", "astro.config.js", "astro.config.ts"], SCORE_CONFIG_FILE, "astro.config")
        .check_dependency(MANIFEST, '"astro"', SCORE_DEPENDENCY, "package.json has astro")
        .check_content(MANIFEST, '"astro build"', SCORE_SCRIPT_PATTERN, "package.json scripts for astro")
        .check_condition(
            fs.dir_exists("src") and fs.dir_exists("public"), SCORE_MINOR_INDICATOR, "src/ and public/ folders"
        )
        .build()
    )


def detect_gatsby(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.GATSBY, LANG_JS, fs)
        .check_any_file(["gatsby-config.js", "gatsby-config.ts"], SCORE_CONFIG_FILE, "gatsby-config")
        .check_dependency(MANIFEST, '"gatsby"', SCORE_DEPENDENCY, "package.json has gatsby")
        .check_content(MANIFEST, '"gatsby build"', SCORE_SCRIPT_PATTERN, "package.json scripts for gatsby")
        .check_dir("src/pages", SCORE_STRUCTURE, "src/pages/ folder")
        .build()
    )


def detect_svelte(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    # SvelteKit always pulls in svelte, so only the more specific dependency is credited.
    return (
        DetectionBuilder(Framework.SVELTE, LANG_JS, fs)
        .check_any_file(["svelte.config.js", "svelte.config.ts"], SCORE_CONFIG_FILE, "svelte.config")
        .check_dependency_priority(
            MANIFEST,
            [
                DependencyRule('"@sveltejs/kit"', SCORE_CONFIG_FILE, "package.json has @sveltejs/kit"),
                DependencyRule('"svelte"', SCORE_DEPENDENCY, "package.json has svelte"),
            ],
        )
        .check_dir("src/routes", SCORE_STRUCTURE, "src/routes/ folder (SvelteKit)")
        .build()
    )


def detect_vue(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.VUE, LANG_JS, fs)
        .check_any_file(["vue.config.js", "vite.config.js", "vite.config.ts"], SCORE_LOCKFILE, "vue/vite config")
        .check_dependency_priority(
            MANIFEST,
            [
                DependencyRule('"@vue/cli"', SCORE_CONFIG_FILE, "Vue CLI"),
                DependencyRule('"nuxt"', SCORE_CONFIG_FILE, "Nuxt"),
                DependencyRule('"vue"', SCORE_DEPENDENCY, "package.json has vue"),
            ],
        )
        .check_extension(scan.files, ".vue", SCORE_FILE_PATTERN, ".vue files")
        .build()
    )


def detect_angular(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    angular_layout = fs.has("tsconfig.json") and (fs.dir_exists("src/app") or fs.has("src/main.ts"))
    return (
        DetectionBuilder(Framework.ANGULAR, LANG_TS, fs)
        .check_file("angular.json", SCORE_CONFIG_FILE, "angular.json")
        .check_dependency(MANIFEST, '"@angular/core"', SCORE_CONFIG_FILE, "package.json has @angular/core")
        .check_condition(angular_layout, SCORE_STRUCTURE, "TypeScript config with Angular structure")
        .build()
    )


def detect_nestjs(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.NESTJS, LANG_TS, fs)
        .check_file("nest-cli.json", SCORE_CONFIG_FILE, "nest-cli.json")
        .check_dependency(MANIFEST, '"@nestjs/core"', SCORE_CONFIG_FILE, "package.json has @nestjs/core")
        .check_condition(
            fs.has("src/main.ts") and fs.has("src/app.module.ts"), SCORE_STRUCTURE, "NestJS app structure"
        )
        .build()
    )


def detect_trpc(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.TRPC, LANG_TS, fs)
        .check_dependency(MANIFEST, '"@trpc/server"', SCORE_CONFIG_FILE, "package.json has @trpc/server")
        .check_dependency(MANIFEST, '"@trpc/client"', SCORE_LOCKFILE, "package.json has @trpc/client")
        .check_dependency(MANIFEST, '"zod"', SCORE_STRUCTURE, "zod validation")
        .check_dependency(
            MANIFEST, '"@trpc/server/adapters/standalone"', SCORE_MINOR_INDICATOR, "standalone adapter"
        )
        .check_any_path(["server/routers", "src/server/routers"], SCORE_BUILD_TOOL, "tRPC router directory")
        .check_any_path(
            ["server/trpc.ts", "src/server/trpc.ts", "server/router.ts", "src/server/router.ts"],
            SCORE_BUILD_TOOL,
            "tRPC router files",
        )
        .check_file("tsconfig.json", SCORE_MINOR_INDICATOR, "TypeScript config")
        .build()
    )


def detect_eleventy(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.ELEVENTY, LANG_JS, fs)
        .check_any_file([".eleventy.js", "eleventy.config.js"], SCORE_CONFIG_FILE, "eleventy config")
        .check_dependency(MANIFEST, '"@11ty/eleventy"', SCORE_DEPENDENCY, "package.json has @11ty/eleventy")
        .build()
    )


def detect_docusaurus(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.DOCUSAURUS, LANG_JS, fs)
        .check_any_file(["docusaurus.config.js", "docusaurus.config.ts"], SCORE_CONFIG_FILE, "docusaurus config")
        .check_dependency(MANIFEST, '"@docusaurus/core"', SCORE_DEPENDENCY, "package.json has @docusaurus/core")
        .check_any_dir(["docs", "blog"], SCORE_STRUCTURE, "docs/ or blog/ directory")
        .build()
    )


def detect_fastify(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.FASTIFY, LANG_JS, fs)
        .check_dependency(MANIFEST, '"fastify"', SCORE_DEPENDENCY, "package.json has fastify")
        .check_any_file(["server.js", "app.js"], SCORE_STRUCTURE, "server.js or app.js")
        .build()
    )


def detect_express(fs: ProjectFS, scan: ProjectScan) -> Candidate:
    return (
        DetectionBuilder(Framework.EXPRESS, LANG_JS, fs)
        .check_dependency(MANIFEST, '"express"', SCORE_DEPENDENCY, "package.json has express")
        .check_content(MANIFEST, '"start"', SCORE_STRUCTURE, "node start script")
        .check_any_file(["server.js", "app.js", "index.js"], SCORE_LOCKFILE, "Express server file")
        .build()
    )


class JavaScriptDetector(LanguageDetector):
    name = "javascript"
    priority = 10

    # Order is the tie-break order between equally scored JS frameworks.
    checks = (
        detect_nextjs,
        detect_remix,
        detect_nuxt,
        detect_astro,
        detect_gatsby,
        detect_svelte,
        detect_vue,
        detect_angular,
        detect_nestjs,
        detect_trpc,
        detect_eleventy,
        detect_docusaurus,
        detect_fastify,
        detect_express,
    )

    def detect(self, fs: ProjectFS, scan: ProjectScan) -> list[Candidate]:
        candidates: list[Candidate] = []
        for check in self.checks:
            self.keep(candidates, check(fs, scan))
        return candidates

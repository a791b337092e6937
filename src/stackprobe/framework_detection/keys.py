# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Framework identifiers, language labels and plan metadata keys."""

from enum import Enum


class Framework(str, Enum):
    """Display names of every framework a detector can propose."""

    NEXTJS = "Next.js"
    REMIX = "Remix"
    NUXT = "Nuxt.js"
    ASTRO = "Astro"
    GATSBY = "Gatsby"
    SVELTE = "Svelte"
    VUE = "Vue.js"
    ANGULAR = "Angular"
    NESTJS = "NestJS"
    TRPC = "tRPC"
    ELEVENTY = "Eleventy"
    DOCUSAURUS = "Docusaurus"
    FASTIFY = "Fastify"
    EXPRESS = "Express.js"
    DJANGO = "Django"
    FLASK = "Flask"
    FASTAPI = "FastAPI"
    RAILS = "Rails"
    JEKYLL = "Jekyll"
    LARAVEL = "Laravel"
    SYMFONY = "Symfony"
    GIN = "Gin"
    ECHO = "Echo"
    FIBER = "Fiber"
    HUGO = "Hugo"
    GO = "Go"
    ACTIX = "Actix-web"
    AXUM = "Axum"
    SPRING_BOOT = "Spring Boot"
    ASPNET_CORE = "ASP.NET Core"
    PHOENIX = "Phoenix"
    DOCKER_COMPOSE = "Docker Compose"
    GENERIC_DOCKER = "Generic Docker"


# Language labels
LANG_JS = "JavaScript/TypeScript"
LANG_TS = "TypeScript"
LANG_PYTHON = "Python"
LANG_RUBY = "Ruby"
LANG_PHP = "PHP"
LANG_GO = "Go"
LANG_RUST = "Rust"
LANG_JAVA = "Java"
LANG_CSHARP = "C#"
LANG_ELIXIR = "Elixir"
LANG_CONTAINER = "Container"
LANG_OTHER = "Other"
LANG_UNKNOWN = "Unknown"

# Meta keys consumed by the deployment layer
META_PACKAGE_MANAGER = "package_manager"
META_OUTPUT_MODE = "output_mode"
META_ROUTER = "router"
META_BUILD_OUTPUT = "build_output"
META_EXPORT = "export"
META_MONOREPO = "monorepo"
META_ADAPTER = "adapter"
META_RUN_MODE = "run_mode"
META_SERVER_TYPE = "server_type"
META_STATIC = "static"
META_RUNTIME = "runtime"
META_RUNTIME_VERSION = "runtime_version"
META_FRAMEWORK = "framework"
META_BUILD_TOOL = "build_tool"
META_DEPLOYMENT_TYPE = "deployment_type"
META_VUE_VERSION = "vue_version"
META_PORT = "port"
META_NOTE = "note"

NO_FRAMEWORK_MESSAGE = "No framework detected, falling back to generic settings"

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builders for Rust web frameworks."""

from .. import keys
from ..keys import Framework
from .base import FixedPlanBuilder

CARGO_BUILD = ("cargo build --release",)
# Binary name is the first `name = "..."` in Cargo.toml.
CARGO_RUN = ("./target/release/$(grep '^name' Cargo.toml | head -1 | cut -d'\"' -f2 | tr -d ' ')",)


class ActixPlanBuilder(FixedPlanBuilder):
    framework = Framework.ACTIX
    build_commands = CARGO_BUILD
    run_commands = CARGO_RUN
    health_path = "/health"
    env = ("RUST_LOG", "PORT")
    meta = {keys.META_BUILD_OUTPUT: "target/release/"}


class AxumPlanBuilder(FixedPlanBuilder):
    framework = Framework.AXUM
    build_commands = CARGO_BUILD
    run_commands = CARGO_RUN
    health_path = "/health"
    env = ("RUST_LOG", "PORT", "DATABASE_URL")
    meta = {keys.META_BUILD_OUTPUT: "target/release/"}

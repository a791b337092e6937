# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Manifest/config parsers consumed by plan builders."""

from .javascript import (
    FrameworkAdapter,
    NextConfig,
    PackageJSON,
    detect_framework_adapter,
    detect_monorepo_type,
    get_production_build_script,
    get_production_start_script,
    parse_next_config,
    parse_package_json,
)
from .ports import detect_port, get_default_port
from .runtime import detect_runtime_version

__all__ = [
    "FrameworkAdapter",
    "NextConfig",
    "PackageJSON",
    "detect_framework_adapter",
    "detect_monorepo_type",
    "detect_port",
    "detect_runtime_version",
    "get_default_port",
    "get_production_build_script",
    "get_production_start_script",
    "parse_next_config",
    "parse_package_json",
]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Signal weights and confidence mapping for framework detection."""

# Framework-specific configuration file (next.config.js, manage.py, angular.json).
SCORE_CONFIG_FILE = 3.0
# Build tool or CLI entry point (bin/console, next.config as build driver).
SCORE_BUILD_TOOL = 2.5
# Framework named in a dependency manifest.
SCORE_DEPENDENCY = 2.5
# Lockfile or framework-adjacent manifest.
SCORE_LOCKFILE = 2.0
# Framework-specific file type (.vue files).
SCORE_FILE_PATTERN = 2.0
# Conventional directory layout; directories can be named anything.
SCORE_STRUCTURE = 1.0
# Framework command in package.json scripts.
SCORE_SCRIPT_PATTERN = 1.0
# Weak supporting evidence, mostly useful for breaking ties.
SCORE_MINOR_INDICATOR = 0.5
# Compose file; outranks any single framework signal.
SCORE_DOCKER_COMPOSE = 5.0

# Score at which confidence saturates to 1.0.
CONFIDENCE_SCALE = 6.0


def confidence_from_score(score: float) -> tuple[float, str]:
    """Map a raw candidate score to a clamped 0..1 confidence and its level label."""
    value = min(max(score / CONFIDENCE_SCALE, 0.0), 1.0)
    if value >= 0.75:
        level = "high"
    elif value >= 0.45:
        level = "medium"
    else:
        level = "low"
    return round(value, 4), level


__all__ = [
    "CONFIDENCE_SCALE",
    "SCORE_BUILD_TOOL",
    "SCORE_CONFIG_FILE",
    "SCORE_DEPENDENCY",
    "SCORE_DOCKER_COMPOSE",
    "SCORE_FILE_PATTERN",
    "SCORE_LOCKFILE",
    "SCORE_MINOR_INDICATOR",
    "SCORE_SCRIPT_PATTERN",
    "SCORE_STRUCTURE",
    "confidence_from_score",
]

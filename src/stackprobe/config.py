# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for StackProbe."""

import os
from dataclasses import dataclass, field

from .version import __version__

DEFAULT_USER_AGENT = f"StackProbe/{__version__} (health check)"

DEFAULT_HEALTH_CHECK_PATH = "/"
DEFAULT_HEALTH_CHECK_STATUS = 200
DEFAULT_HEALTH_CHECK_TIMEOUT = 30

DEFAULT_IGNORED_DIRS: frozenset[str] = frozenset({".git", "node_modules", ".venv", "venv", "dist", "build"})


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _csv_env(name: str) -> list[str]:
    value = os.getenv(name)
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class DetectionSettings:
    """Knobs for the project tree scan and candidate selection."""

    ignored_dirs: frozenset[str] = field(default_factory=lambda: DEFAULT_IGNORED_DIRS)
    compose_override: bool = True
    max_file_bytes: int = 2 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "DetectionSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_file_bytes = _int_env("STACKPROBE_MAX_FILE_BYTES", cls.max_file_bytes)
        if max_file_bytes <= 0:
            max_file_bytes = cls.max_file_bytes
        return cls(
            ignored_dirs=DEFAULT_IGNORED_DIRS | frozenset(_csv_env("STACKPROBE_IGNORE_DIRS")),
            compose_override=_bool_env("STACKPROBE_COMPOSE_OVERRIDE", cls.compose_override),
            max_file_bytes=max_file_bytes,
        )


@dataclass
class HttpSettings:
    """HTTP client defaults for the health probe."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("STACKPROBE_HTTP_TIMEOUT", cls.timeout)
        return cls(
            timeout=timeout if timeout > 0 else cls.timeout,
            user_agent=os.getenv("STACKPROBE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("STACKPROBE_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("STACKPROBE_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


@dataclass
class HealthSettings:
    """Attempt loop for health checking a deployed app."""

    attempts: int = 5
    retry_delay: float = 3.0
    backoff_factor: float = 1.5
    max_delay: float = 30.0

    @classmethod
    def from_env(cls) -> "HealthSettings":
        attempts = _int_env("STACKPROBE_HEALTH_ATTEMPTS", cls.attempts)
        retry_delay = _float_env("STACKPROBE_HEALTH_RETRY_DELAY", cls.retry_delay)
        backoff_factor = _float_env("STACKPROBE_HEALTH_BACKOFF", cls.backoff_factor)
        max_delay = _float_env("STACKPROBE_HEALTH_MAX_DELAY", cls.max_delay)
        return cls(
            attempts=attempts if attempts > 0 else cls.attempts,
            retry_delay=retry_delay if retry_delay >= 0 else cls.retry_delay,
            backoff_factor=backoff_factor if backoff_factor >= 1 else cls.backoff_factor,
            max_delay=max_delay if max_delay >= 0 else cls.max_delay,
        )


def load_detection_settings() -> DetectionSettings:
    """Load detection settings from environment with sensible defaults."""
    return DetectionSettings.from_env()


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_health_settings() -> HealthSettings:
    return HealthSettings.from_env()

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Framework detection engine exports."""

from .engine import FrameworkDetectionEngine, pick_best
from .fsreader import LocalFS, MemoryFS
from .registry import DETECTORS

__all__ = ["DETECTORS", "FrameworkDetectionEngine", "LocalFS", "MemoryFS", "pick_best"]

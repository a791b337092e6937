# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Language detector registry."""

from .detectors import (
    CSharpDetector,
    DockerDetector,
    ElixirDetector,
    GoDetector,
    JavaDetector,
    JavaScriptDetector,
    PHPDetector,
    PythonDetector,
    RubyDetector,
    RustDetector,
)

DETECTORS = sorted(
    [
        JavaScriptDetector(),
        PythonDetector(),
        RubyDetector(),
        PHPDetector(),
        GoDetector(),
        RustDetector(),
        JavaDetector(),
        CSharpDetector(),
        ElixirDetector(),
        DockerDetector(),
    ],
    key=lambda detector: detector.priority,
)

__all__ = ["DETECTORS"]

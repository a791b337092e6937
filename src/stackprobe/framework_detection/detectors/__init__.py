# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-language framework detectors."""

from .csharp import CSharpDetector
from .docker import DockerDetector
from .elixir import ElixirDetector
from .go import GoDetector
from .java import JavaDetector
from .javascript import JavaScriptDetector
from .php import PHPDetector
from .python import PythonDetector
from .ruby import RubyDetector
from .rust import RustDetector

__all__ = [
    "CSharpDetector",
    "DockerDetector",
    "ElixirDetector",
    "GoDetector",
    "JavaDetector",
    "JavaScriptDetector",
    "PHPDetector",
    "PythonDetector",
    "RubyDetector",
    "RustDetector",
]

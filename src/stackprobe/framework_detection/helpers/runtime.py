# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pinned language runtime versions from version files."""

from __future__ import annotations

import re

from ..fsreader import ProjectFS
from ..keys import LANG_GO, LANG_JS, LANG_PYTHON, LANG_RUBY, LANG_TS

_GO_DIRECTIVE_RE = re.compile(r"^go\s+(\d+(?:\.\d+)*)\s*$", re.MULTILINE)

_VERSION_FILES: dict[str, tuple[str, ...]] = {
    LANG_JS: (".nvmrc", ".node-version"),
    LANG_TS: (".nvmrc", ".node-version"),
    LANG_PYTHON: (".python-version", "runtime.txt"),
    LANG_RUBY: (".ruby-version",),
    LANG_GO: (".go-version",),
}


def detect_runtime_version(fs: ProjectFS, language: str) -> str:
    for path in _VERSION_FILES.get(language, ()):
        if not fs.has(path):
            continue
        value = fs.read(path).strip()
        if path == "runtime.txt":
            value = value.removeprefix("python-")
        if value:
            return value
    if language == LANG_GO:
        match = _GO_DIRECTIVE_RE.search(fs.read("go.mod"))
        if match:
            return match.group(1)
    return ""

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Command-line entry points."""

from .main import build_parser, main

__all__ = ["build_parser", "main"]

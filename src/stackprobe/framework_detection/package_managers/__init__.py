# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Package manager and server protocol sub-detectors."""

from . import javascript, python

__all__ = ["javascript", "python"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-framework deployment plan builders."""

from .base import FixedPlanBuilder, Plan, PlanBuilder
from .registry import PLAN_BUILDERS, get_plan_builder

__all__ = ["FixedPlanBuilder", "PLAN_BUILDERS", "Plan", "PlanBuilder", "get_plan_builder"]

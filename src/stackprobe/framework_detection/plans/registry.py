# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Framework to plan builder registry."""

from ..keys import Framework
from .base import PlanBuilder
from .csharp import AspNetPlanBuilder
from .docker import DockerComposePlanBuilder, DockerPlanBuilder
from .elixir import PhoenixPlanBuilder
from .go import EchoPlanBuilder, FiberPlanBuilder, GinPlanBuilder, GoPlanBuilder, HugoPlanBuilder
from .java import SpringBootPlanBuilder
from .javascript import (
    AngularPlanBuilder,
    AstroPlanBuilder,
    DocusaurusPlanBuilder,
    EleventyPlanBuilder,
    ExpressPlanBuilder,
    FastifyPlanBuilder,
    GatsbyPlanBuilder,
    NestPlanBuilder,
    NextPlanBuilder,
    NuxtPlanBuilder,
    RemixPlanBuilder,
    SveltePlanBuilder,
    TRPCPlanBuilder,
    VuePlanBuilder,
)
from .php import LaravelPlanBuilder, SymfonyPlanBuilder
from .python import DjangoPlanBuilder, FastAPIPlanBuilder, FlaskPlanBuilder
from .ruby import JekyllPlanBuilder, RailsPlanBuilder
from .rust import ActixPlanBuilder, AxumPlanBuilder

PLAN_BUILDERS: dict[Framework, PlanBuilder] = {
    builder.framework: builder
    for builder in (
        NextPlanBuilder(),
        RemixPlanBuilder(),
        NuxtPlanBuilder(),
        AstroPlanBuilder(),
        GatsbyPlanBuilder(),
        SveltePlanBuilder(),
        VuePlanBuilder(),
        AngularPlanBuilder(),
        NestPlanBuilder(),
        TRPCPlanBuilder(),
        EleventyPlanBuilder(),
        DocusaurusPlanBuilder(),
        FastifyPlanBuilder(),
        ExpressPlanBuilder(),
        DjangoPlanBuilder(),
        FlaskPlanBuilder(),
        FastAPIPlanBuilder(),
        RailsPlanBuilder(),
        JekyllPlanBuilder(),
        LaravelPlanBuilder(),
        SymfonyPlanBuilder(),
        GinPlanBuilder(),
        EchoPlanBuilder(),
        FiberPlanBuilder(),
        HugoPlanBuilder(),
        GoPlanBuilder(),
        ActixPlanBuilder(),
        AxumPlanBuilder(),
        SpringBootPlanBuilder(),
        AspNetPlanBuilder(),
        PhoenixPlanBuilder(),
        DockerComposePlanBuilder(),
        DockerPlanBuilder(),
    )
}


def get_plan_builder(framework: Framework) -> PlanBuilder:
    return PLAN_BUILDERS[framework]


__all__ = ["PLAN_BUILDERS", "get_plan_builder"]

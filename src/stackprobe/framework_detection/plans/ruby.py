# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builders for Ruby frameworks."""

from .. import keys
from ..keys import Framework
from .base import FixedPlanBuilder


class RailsPlanBuilder(FixedPlanBuilder):
    framework = Framework.RAILS
    build_commands = (
        "bundle install --deployment --without development test",
        "bundle exec rails db:migrate",
        "bundle exec rails assets:precompile",
    )
    run_commands = ("bundle exec puma -C config/puma.rb",)
    health_path = "/up"
    env = ("RAILS_ENV", "DATABASE_URL", "SECRET_KEY_BASE")


class JekyllPlanBuilder(FixedPlanBuilder):
    framework = Framework.JEKYLL
    build_commands = ("bundle install", "bundle exec jekyll build")
    run_commands = ("bundle exec jekyll serve --host 0.0.0.0",)
    env = ("JEKYLL_ENV",)
    meta = {keys.META_BUILD_OUTPUT: "_site/", keys.META_STATIC: "true"}

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plan builders for PHP frameworks."""

from ..keys import Framework
from .base import FixedPlanBuilder

COMPOSER_INSTALL = "composer install --no-dev --optimize-autoloader"
PHP_FPM = ("php-fpm (with nginx)",)


class LaravelPlanBuilder(FixedPlanBuilder):
    framework = Framework.LARAVEL
    build_commands = (
        COMPOSER_INSTALL,
        "php artisan migrate --force",
        "php artisan config:cache && php artisan route:cache",
    )
    run_commands = PHP_FPM
    health_path = "/health"
    env = ("APP_KEY", "APP_ENV", "DB_CONNECTION/DB_*")


class SymfonyPlanBuilder(FixedPlanBuilder):
    framework = Framework.SYMFONY
    build_commands = (
        COMPOSER_INSTALL,
        "php bin/console cache:clear --env=prod",
        "php bin/console assets:install",
    )
    run_commands = PHP_FPM
    health_path = "/health"
    env = ("APP_ENV", "APP_SECRET", "DATABASE_URL")

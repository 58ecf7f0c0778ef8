"""Deployment mode configuration."""

from __future__ import annotations

ENV_APP_ENV = "APP_ENV"

APP_ENV_PRODUCTION = "production"
APP_ENV_DEVELOPMENT = "development"

# Unknown values are treated as production so a typo never relaxes origin checks.
DEFAULT_APP_ENV = APP_ENV_PRODUCTION
DEVELOPMENT_ENV_VALUES = frozenset({"development", "dev", "local"})

__all__ = [
    "APP_ENV_DEVELOPMENT",
    "APP_ENV_PRODUCTION",
    "DEFAULT_APP_ENV",
    "DEVELOPMENT_ENV_VALUES",
    "ENV_APP_ENV",
]

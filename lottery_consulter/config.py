"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    USER_AGENT: str = os.getenv("USER_AGENT", "Lottery-Consulter/1.0")

    # True-random integer provider
    RANDOM_ORG_URL: str = os.getenv("RANDOM_ORG_URL", "https://www.random.org/integers/")
    RANDOM_ORG_ENABLED: bool = _env_bool("RANDOM_ORG_ENABLED", True)
    RANDOM_TIMEOUT_SECONDS: float = _env_float("RANDOM_TIMEOUT_SECONDS", 5.0)

    # Decorative fortune cookie provider
    FORTUNE_API_BASE: str = os.getenv("FORTUNE_API_BASE", "http://fortunecookieapi.herokuapp.com/v1")
    FORTUNE_TIMEOUT_SECONDS: float = _env_float("FORTUNE_TIMEOUT_SECONDS", 5.0)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig

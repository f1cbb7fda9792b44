"""
Application configuration module.

This module defines configuration classes for the reference company
service (development, testing, production) and for the conformance
checker that drives a company API over HTTP. Configuration values are
loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Default database location
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'companies.db'}"
    )


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # The conformance suite serves the app from a background thread, so the
    # SQLite connection must be shareable across threads.
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'test_companies.db'}?check_same_thread=False"
    )

    SQLALCHEMY_ENGINE_OPTIONS: dict = {
        "pool_pre_ping": True,
    }


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


class ConformanceConfig:
    """
    Settings for the company API conformance checker.

    Attributes:
        API_BASE_URL: Service root; the company collection lives at
            ``{API_BASE_URL}/company``.
        REQUEST_TIMEOUT: Per-request timeout in seconds.
        NONEXISTENT_COMPANY_ID: Id assumed never to exist on the service.
        INVALID_COMPANY_ID: Non-numeric id token the service must reject.
    """

    API_BASE_URL: str = os.environ.get(
        "COMPANY_API_URL", "https://api-desafio-qa.onrender.com"
    )
    REQUEST_TIMEOUT: float = float(os.environ.get("COMPANY_API_TIMEOUT", "30"))
    NONEXISTENT_COMPANY_ID: int = 99999
    INVALID_COMPANY_ID: str = "invalid-id"


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])

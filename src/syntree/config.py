"""
Runtime configuration and logging setup.

Settings are read from ``SYNTREE_``-prefixed environment variables (or a
``.env`` file) and validated by pydantic-settings.
"""

import logging
import sys
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class SynTreeSettings(BaseSettings):
    """Central configuration for parsing and the LLM tagging capability."""

    model_config = SettingsConfigDict(
        env_prefix="SYNTREE_", env_file=".env", extra="ignore"
    )

    default_language: str = "en"
    log_level: str = "WARNING"

    # Open-class tagging through a chat model
    tagger_model: str = "tagger"
    tagger_provider: str = "OpenAI"
    tagger_model_name: str = "gpt-4o-mini"
    tagger_temperature: float = 0.0
    tagger_requests_per_second: float = 1.0
    tagger_timeout_seconds: float = 10.0


@lru_cache
def get_settings() -> SynTreeSettings:
    return SynTreeSettings()


def configure_logging(level: str | int | None = None) -> None:
    """
    Attach a console handler to the ``syntree`` logger.

    Intended for applications and scripts; the library itself only logs
    through module loggers and never configures handlers on import.

    Params:
        level: Logging level; defaults to the configured ``log_level``
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    package_logger = logging.getLogger("syntree")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    handler.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

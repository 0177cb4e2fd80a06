"""Environment-level configuration for the rules engine.

CTHULHU_LOG_LEVEL    logging level name (default WARNING)
CTHULHU_RANDOM_SEED  integer seed for the shared random source (optional)
"""

import logging
import os
from dataclasses import dataclass

from .engine_core.randomness import seed_default_rng


@dataclass
class EngineSettings:
    """Environment / deployment settings."""

    log_level: str = "WARNING"
    random_seed: int | None = None

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from environment variables."""
        seed = os.getenv("CTHULHU_RANDOM_SEED")
        return cls(
            log_level=os.getenv("CTHULHU_LOG_LEVEL", "WARNING").upper(),
            random_seed=int(seed) if seed else None,
        )


def get_settings() -> EngineSettings:
    """Convenience accessor for environment settings."""
    return EngineSettings.from_env()


def configure_logging(settings: EngineSettings | None = None) -> None:
    """Set up logging for the cthulhu package."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def configure(settings: EngineSettings | None = None) -> EngineSettings:
    """Apply settings: logging and the random seed."""
    settings = settings or get_settings()
    configure_logging(settings)
    if settings.random_seed is not None:
        seed_default_rng(settings.random_seed)
    return settings

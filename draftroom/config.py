"""
Engine configuration.

Cache lifetimes, draft format defaults and recommendation tuning.
All settings can be overridden via DRAFTROOM_* environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    return _env_number(name, default, int)


def _env_float(name: str, default: float) -> float:
    return _env_number(name, default, float)


@dataclass
class EngineConfig:
    """Configuration for the evaluation and draft engine."""

    # Cache settings
    cache_ttl_seconds: int = field(
        default_factory=lambda: _env_int("DRAFTROOM_CACHE_TTL", 604800)  # 7 days
    )
    draft_board_ttl_seconds: int = field(
        default_factory=lambda: _env_int("DRAFTROOM_DRAFT_BOARD_TTL", 300)  # 5 minutes
    )

    # Draft format
    total_teams: int = field(default_factory=lambda: _env_int("DRAFTROOM_TOTAL_TEAMS", 32))
    total_rounds: int = field(default_factory=lambda: _env_int("DRAFTROOM_TOTAL_ROUNDS", 54))
    is_snake_draft: bool = field(
        default_factory=lambda: os.getenv("DRAFTROOM_SNAKE_DRAFT", "true").lower() == "true"
    )

    # Recommendation tuning
    recommendation_window: int = field(
        default_factory=lambda: _env_int("DRAFTROOM_RECOMMENDATION_WINDOW", 20)
    )
    recommendation_decay: float = field(
        default_factory=lambda: _env_float("DRAFTROOM_RECOMMENDATION_DECAY", 10.0)
    )
    recommendation_limit: int = field(
        default_factory=lambda: _env_int("DRAFTROOM_RECOMMENDATION_LIMIT", 10)
    )

    # Viable role cut: score must beat max(floor, best * ratio)
    viable_floor: float = field(default_factory=lambda: _env_float("DRAFTROOM_VIABLE_FLOOR", 50.0))
    viable_ratio: float = field(default_factory=lambda: _env_float("DRAFTROOM_VIABLE_RATIO", 0.75))

    log_level: str = field(default_factory=lambda: os.getenv("DRAFTROOM_LOG_LEVEL", "INFO"))

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.cache_ttl_seconds <= 0:
            errors.append("DRAFTROOM_CACHE_TTL must be positive")
        if self.draft_board_ttl_seconds <= 0:
            errors.append("DRAFTROOM_DRAFT_BOARD_TTL must be positive")
        if self.total_teams < 1:
            errors.append("DRAFTROOM_TOTAL_TEAMS must be at least 1")
        if self.total_rounds < 1:
            errors.append("DRAFTROOM_TOTAL_ROUNDS must be at least 1")
        if self.recommendation_window < 0:
            errors.append("DRAFTROOM_RECOMMENDATION_WINDOW cannot be negative")
        if self.recommendation_decay <= 0:
            errors.append("DRAFTROOM_RECOMMENDATION_DECAY must be positive")
        if self.recommendation_limit < 1:
            errors.append("DRAFTROOM_RECOMMENDATION_LIMIT must be at least 1")
        if not 0 < self.viable_ratio <= 1:
            errors.append("DRAFTROOM_VIABLE_RATIO must be in (0, 1]")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"DRAFTROOM_LOG_LEVEL is not a logging level: {self.log_level!r}")
        return errors


# Singleton config instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get the global engine configuration."""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def set_config(config: Optional[EngineConfig]) -> None:
    """
    Replace the global configuration.

    Passing None resets it so the next get_config() re-reads the environment.
    """
    global _config
    _config = config

"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field

# Every table seats exactly eight players
SEAT_COUNT = 8


def _parse_tick_interval() -> float:
    """Parse TABLE_TICK_MS environment variable into seconds."""
    return int(os.getenv("TABLE_TICK_MS", "500")) / 1000


def _parse_seed() -> int | None:
    """Parse TABLE_SEED environment variable."""
    seed = os.getenv("TABLE_SEED")
    if seed is None or not seed.strip():
        return None
    return int(seed)


@dataclass(frozen=True)
class TableConfig:
    """Table configuration for one eight-seat game."""

    num_decks: int = field(default_factory=lambda: int(os.getenv("TABLE_NUM_DECKS", "6")))
    seat_count: int = SEAT_COUNT
    min_bet: int = 5
    tick_interval: float = field(default_factory=_parse_tick_interval)
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        """Validate table settings."""
        if self.num_decks < 1:
            raise ValueError("num_decks must be at least 1")
        if self.seat_count != SEAT_COUNT:
            raise ValueError(f"seat_count must be {SEAT_COUNT}")
        if self.min_bet < 1:
            raise ValueError("min_bet must be at least 1")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")

    @classmethod
    def multi_seat(cls) -> "TableConfig":
        """Sustained multi-seat play from a six-deck shoe."""
        return cls(num_decks=6)

    @classmethod
    def single_round(cls) -> "TableConfig":
        """Minimal single-round play from one deck."""
        return cls(num_decks=1)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    table: TableConfig = field(default_factory=TableConfig)


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Configure root logging from the application config."""
    app_config = app_config or config
    level = logging.DEBUG if app_config.debug else app_config.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global configuration instance
config = AppConfig()

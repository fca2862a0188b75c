"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means a fresh random seed."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"BLACKJACK_SEED must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Table behaviour."""

    seed: int | None = field(default_factory=_parse_seed)
    reveal_hole_card: bool = field(
        default_factory=lambda: _env_flag("BLACKJACK_REVEAL_HOLE_CARD")
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )

    def apply(self) -> None:
        """Configure the root logger."""
        logging.basicConfig(level=self.level, format=self.format)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    window_title: str = "Blackjack"

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()

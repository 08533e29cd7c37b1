"""Application configuration for showdown."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from .evaluator import MAX_OPPONENTS


@dataclass
class EvaluationConfig:
    """Limits applied to evaluation requests."""

    max_opponents: int = MAX_OPPONENTS


@dataclass
class DisplayConfig:
    """Configuration for terminal output."""

    suit_symbols: bool = True


@dataclass
class Config:
    """Application configuration."""

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "showdown.toml",
            Path.cwd() / ".showdown.toml",
            Path.home() / ".config" / "showdown" / "config.toml",
            Path.home() / ".showdown.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls._from_file(path)

        return cls()

    @classmethod
    def _from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        eval_data = data.get("evaluation", {})
        evaluation = EvaluationConfig(
            max_opponents=eval_data.get("max_opponents", MAX_OPPONENTS),
        )
        limit = evaluation.max_opponents
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError(f"{path}: max_opponents must be an integer, got {limit!r}")
        if not 1 <= limit <= MAX_OPPONENTS:
            raise ValueError(f"{path}: max_opponents must be between 1 and {MAX_OPPONENTS}, got {limit}")

        display_data = data.get("display", {})
        display = DisplayConfig(
            suit_symbols=display_data.get("suit_symbols", True),
        )
        if not isinstance(display.suit_symbols, bool):
            raise ValueError(f"{path}: suit_symbols must be true or false")

        return cls(evaluation=evaluation, display=display)


# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config

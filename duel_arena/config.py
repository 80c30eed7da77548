"""Configuration management for Duel Arena.

This module provides typed configuration loading from environment variables
using pydantic-settings. Combat tuning, logging and observer behaviour are
validated at startup.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from duel_arena.tools.dice import parse_dice_notation


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables or a .env file.
    The .env file should be in the project root directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    # Stamina
    max_stamina: int = Field(default=100, gt=0, description="Stamina restored by rest()")
    stamina_cost_dice: str = Field(
        default="1d20+25",
        description="Dice rolled for the stamina spent on every attack",
    )

    # Randomness
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for a reproducible fight from the CLI",
    )

    # Observers
    isolate_observer_errors: bool = Field(
        default=False,
        description="Log observer failures and keep notifying the rest instead of raising",
    )

    # Experience
    xp_base_award: int = Field(default=30, ge=0, description="XP earned for any win")
    xp_level_difference_bonus: int = Field(
        default=10, ge=0, description="Extra XP per level the loser was above the winner"
    )
    xp_first_level_threshold: int = Field(
        default=100, gt=0, description="XP needed to go from level 1 to level 2"
    )
    xp_threshold_step: int = Field(
        default=50, ge=0, description="Extra XP needed for every following level"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("stamina_cost_dice")
    @classmethod
    def validate_stamina_cost_dice(cls, v: str) -> str:
        """Ensure the stamina cost is valid dice notation."""
        parse_dice_notation(v)
        return v.strip().lower()

    def xp_for_next_level(self, level: int) -> int:
        """XP a character at ``level`` needs to level up."""
        return self.xp_first_level_threshold + (level - 1) * self.xp_threshold_step


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()

"""Lightweight configuration for the Durland simulation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from durland.domain.enums import NationName, RaceName
from durland.domain.nations import get_nation


class Settings(BaseSettings):
    """Run settings, read from ``DURLAND_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="DURLAND_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    seed: str | None = Field(
        default=None, description="Seed for the random source; unseeded when absent"
    )
    max_ticks: int | None = Field(
        default=None,
        description="Stop the run after this many ticks even if the player is alive",
        gt=0,
    )
    race: RaceName = Field(default=RaceName.SHLENDRICS, description="Player race")
    nation: NationName = Field(default=NationName.MOZHORS, description="Player nation")
    starting_health: float = Field(default=10.0, gt=0.0)
    starting_money: float = Field(default=10.0, gt=0.0)
    starting_satisfaction: float = Field(default=10.0, gt=0.0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root logging level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_nation_race(self) -> Settings:
        if get_nation(self.nation).race != self.race:
            raise ValueError(f"nation {self.nation} does not belong to race {self.race}")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()

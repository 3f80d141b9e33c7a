"""Declarative modifier constants for nations and biomes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class NationRules:
    """Multipliers, offsets and chances used by nation modifiers."""

    mozhors_gulboning_money_multiplier: float = 1.23
    mozhors_zumbaling_health_suppression_chance: float = 0.33
    nisheborods_gulboning_money_multiplier: float = 1.0 - 0.87
    nisheborods_gulboning_health_multiplier: float = 1.76
    soevs_health_penalty_per_chuchunder: float = 0.12
    prosvelens_satisfaction_per_sisander: float = 0.31
    prosvelens_history_window: int = 3
    droncents_gulboning_multiplier: float = 0.5
    zheleznouhs_zumbaling_money_suppression_chance: float = 0.33


@dataclass(frozen=True, slots=True)
class BiomeRules:
    """Multipliers, offsets and chances used by biome modifiers."""

    balbesburg_slesander_attack_chance: float = 0.15
    balbesburg_health_penalty_per_slesander: float = 0.1
    dolbesburg_zumbaling_money_multiplier: float = 1.2
    dolbesburg_zumbaling_satisfaction_multiplier: float = 1.3
    shrinavans_schlaming_health_multiplier: float = 1.13
    hare_kirishi_droncents_health_drain: float = 0.1  # fraction of current health


@dataclass(frozen=True, slots=True)
class RulesConfig:
    nations: NationRules = field(default_factory=NationRules)
    biomes: BiomeRules = field(default_factory=BiomeRules)


DEFAULT_RULES = RulesConfig()

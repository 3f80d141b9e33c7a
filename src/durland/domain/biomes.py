"""Biome type catalog.

Biome modifiers run after the nation modifier, so multipliers here scale the
nation-adjusted deltas.
"""

from __future__ import annotations

from durland.domain.enums import AnimalName, BiomeName, NationName, PlayerAction
from durland.domain.models import ActionContext, BiomeType, ProposedAction
from durland.utils.rng import check_chance


def _balbesburg(context: ActionContext, action: ProposedAction) -> None:
    rules = context.rules.biomes
    if check_chance(context.rng, rules.balbesburg_slesander_attack_chance):
        slesanders = context.state.current_biome.count(AnimalName.SLESANDERS)
        action.health_change -= rules.balbesburg_health_penalty_per_slesander * slesanders


def _dolbesburg(context: ActionContext, action: ProposedAction) -> None:
    rules = context.rules.biomes
    if action.is_kind(PlayerAction.ZUMBALING):
        action.money_change *= rules.dolbesburg_zumbaling_money_multiplier
        action.satisfaction_change *= rules.dolbesburg_zumbaling_satisfaction_multiplier


def _no_rules(context: ActionContext, action: ProposedAction) -> None:
    """Biome without any action rules."""


def _shrinavans(context: ActionContext, action: ProposedAction) -> None:
    if action.is_kind(PlayerAction.SCHLAMING):
        action.health_change *= context.rules.biomes.shrinavans_schlaming_health_multiplier


def _hare_kirishi(context: ActionContext, action: ProposedAction) -> None:
    player = context.state.player
    drain = context.rules.biomes.hare_kirishi_droncents_health_drain
    if player.nation.name == NationName.DRONCENTS:
        action.health_change -= player.health * drain


BALBESBURG = BiomeType(BiomeName.BALBESBURG, _balbesburg)
DOLBESBURG = BiomeType(BiomeName.DOLBESBURG, _dolbesburg)
# TODO: Kuramarubs and Punta-Pelicana have no beach rules yet.
KURAMARUBS = BiomeType(BiomeName.KURAMARUBS, _no_rules)
PUNTA_PELICANA = BiomeType(BiomeName.PUNTA_PELICANA, _no_rules)
SHRINAVANS = BiomeType(BiomeName.SHRINAVANS, _shrinavans)
HARE_KIRISHI = BiomeType(BiomeName.HARE_KIRISHI, _hare_kirishi)

BIOME_TYPES: dict[BiomeName, BiomeType] = {
    biome.name: biome
    for biome in (BALBESBURG, DOLBESBURG, KURAMARUBS, PUNTA_PELICANA, SHRINAVANS, HARE_KIRISHI)
}


def get_biome_type(name: BiomeName | str) -> BiomeType:
    """Look up a biome type by name; unknown names raise ``ValueError``."""

    return BIOME_TYPES[BiomeName(name)]

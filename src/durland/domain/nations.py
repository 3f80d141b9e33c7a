"""Nation catalog and the modifiers each nation applies to proposed actions.

Nation modifiers run first in the action pipeline and therefore always see
the raw proposal produced by the strategy.
"""

from __future__ import annotations

from durland.domain.enums import AnimalName, NationName, PlayerAction, RaceName
from durland.domain.models import ActionContext, Nation, ProposedAction
from durland.utils.rng import check_chance


def _mozhors(context: ActionContext, action: ProposedAction) -> None:
    rules = context.rules.nations
    if action.is_kind(PlayerAction.GULBONING):
        action.money_change *= rules.mozhors_gulboning_money_multiplier
    if action.is_kind(PlayerAction.ZUMBALING):
        if check_chance(context.rng, rules.mozhors_zumbaling_health_suppression_chance):
            action.health_change = 0.0


def _nisheborods(context: ActionContext, action: ProposedAction) -> None:
    rules = context.rules.nations
    if action.is_kind(PlayerAction.GULBONING):
        action.money_change *= rules.nisheborods_gulboning_money_multiplier
        action.health_change *= rules.nisheborods_gulboning_health_multiplier


def _soevs(context: ActionContext, action: ProposedAction) -> None:
    chuchunders = context.state.current_biome.count(AnimalName.CHUCHUNDERS)
    action.health_change -= context.rules.nations.soevs_health_penalty_per_chuchunder * chuchunders


def _prosvelens(context: ActionContext, action: ProposedAction) -> None:
    rules = context.rules.nations
    if not action.is_kind(PlayerAction.SCHLAMING):
        return
    recent = context.state.recent_biomes(rules.prosvelens_history_window)
    sisanders = sum(biome.count(AnimalName.SISANDERS) for biome in recent)
    action.satisfaction_change += rules.prosvelens_satisfaction_per_sisander * sisanders


def _droncents(context: ActionContext, action: ProposedAction) -> None:
    multiplier = context.rules.nations.droncents_gulboning_multiplier
    if action.is_kind(PlayerAction.GULBONING):
        action.health_change *= multiplier
        action.money_change *= multiplier
        action.satisfaction_change *= multiplier


def _zheleznouhs(context: ActionContext, action: ProposedAction) -> None:
    rules = context.rules.nations
    if action.is_kind(PlayerAction.ZUMBALING):
        action.satisfaction_change = 0.0
        if check_chance(context.rng, rules.zheleznouhs_zumbaling_money_suppression_chance):
            action.money_change = 0.0


MOZHORS = Nation(NationName.MOZHORS, RaceName.SHLENDRICS, _mozhors)
NISHEBORODS = Nation(NationName.NISHEBORODS, RaceName.SHLENDRICS, _nisheborods)
SOEVS = Nation(NationName.SOEVS, RaceName.HIPSTICS, _soevs)
PROSVELENS = Nation(NationName.PROSVELENS, RaceName.HIPSTICS, _prosvelens)
DRONCENTS = Nation(NationName.DRONCENTS, RaceName.SKUFICS, _droncents)
ZHELEZNOUHS = Nation(NationName.ZHELEZNOUHS, RaceName.SKUFICS, _zheleznouhs)

NATIONS: dict[NationName, Nation] = {
    nation.name: nation
    for nation in (MOZHORS, NISHEBORODS, SOEVS, PROSVELENS, DRONCENTS, ZHELEZNOUHS)
}


def get_nation(name: NationName | str) -> Nation:
    """Look up a nation by name; unknown names raise ``ValueError``."""

    return NATIONS[NationName(name)]


def nations_of(race: RaceName | str) -> list[Nation]:
    """Return the nations belonging to a race, in catalog order."""

    race = RaceName(race)
    return [nation for nation in NATIONS.values() if nation.race == race]

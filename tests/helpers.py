"""Shared builders for Durland tests."""

from __future__ import annotations

from durland.domain import world
from durland.domain.enums import NationName, RaceName
from durland.domain.models import ActionContext, BiomeRef, WorldState
from durland.domain.nations import get_nation
from durland.domain.rules_config import DEFAULT_RULES
from durland.utils.rng import RandomSource, ScriptedRandom

BALBESBURG = BiomeRef(0, 0)
DOLBESBURG = BiomeRef(0, 1)
KURAMARUBS = BiomeRef(1, 0)
PUNTA_PELICANA = BiomeRef(1, 1)
SHRINAVANS = BiomeRef(2, 0)
HARE_KIRISHI = BiomeRef(2, 1)


def make_state(
    nation: NationName = NationName.MOZHORS,
    at: BiomeRef = BALBESBURG,
    *,
    health: float = 10.0,
    money: float = 10.0,
    satisfaction: float = 10.0,
) -> WorldState:
    race: RaceName = get_nation(nation).race
    state = world.build_world(
        race=race, nation=nation, health=health, money=money, satisfaction=satisfaction
    )
    state.current_biome_ref = at
    return state


def make_context(state: WorldState, rng: RandomSource | None = None) -> ActionContext:
    return ActionContext(
        state=state,
        rng=rng if rng is not None else ScriptedRandom([0.99], cycle=True),
        rules=DEFAULT_RULES,
    )

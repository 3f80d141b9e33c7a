"""World construction."""

from __future__ import annotations

from collections.abc import Sequence

from durland.domain import nations, races
from durland.domain.enums import NationName, RaceName
from durland.domain.models import BiomeRef, Location, Player, WorldState
from durland.domain.seed_data import build_locations

DEFAULT_RACE = RaceName.SHLENDRICS
DEFAULT_NATION = NationName.MOZHORS
DEFAULT_RESOURCES = 10.0


def build_world(
    *,
    race: RaceName | str = DEFAULT_RACE,
    nation: NationName | str = DEFAULT_NATION,
    health: float = DEFAULT_RESOURCES,
    money: float = DEFAULT_RESOURCES,
    satisfaction: float = DEFAULT_RESOURCES,
    locations: Sequence[Location] | None = None,
) -> WorldState:
    """Create a fresh world with the player in the first biome of the first location.

    Args:
        race: Player race
        nation: Player nation, must belong to ``race``
        health: Starting health, must be positive
        money: Starting money, must be positive
        satisfaction: Starting satisfaction, must be positive
        locations: Location tree to use instead of the static world seed

    Returns:
        WorldState with an empty biome history and zero tick counters

    Raises:
        ValueError: If the location tree is empty, the first location has no
            biomes, a resource is not positive or the nation does not belong
            to the race
    """
    tree = tuple(locations) if locations is not None else build_locations()
    if not tree:
        raise ValueError("world needs at least one location")
    if not tree[0].biomes:
        raise ValueError(f"first location {tree[0].name} has no biomes")

    for label, value in (("health", health), ("money", money), ("satisfaction", satisfaction)):
        if value <= 0:
            raise ValueError(f"starting {label} must be positive, got {value}")

    player_race = races.get_race(race)
    player_nation = nations.get_nation(nation)
    if player_nation.race != player_race.name:
        raise ValueError(
            f"nation {player_nation.name} belongs to {player_nation.race}, not {player_race.name}"
        )

    player = Player(
        race=player_race,
        nation=player_nation,
        health=float(health),
        money=float(money),
        satisfaction=float(satisfaction),
    )
    return WorldState(locations=tree, player=player, current_biome_ref=BiomeRef(0, 0))

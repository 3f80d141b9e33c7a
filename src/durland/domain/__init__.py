"""Domain model and rules for Durland.

This package hosts everything a tick needs:

* Dataclasses describing every entity (see :mod:`models`).
* The closed catalogs of races, nations and biome types, each nation and
  biome type carrying its own action modifier.
* Rule constants (see :mod:`rules_config`).
* The action pipeline and the tick transition.
"""

from . import (
    actions,
    biomes,
    enums,
    models,
    nations,
    races,
    rules_config,
    seed_data,
    tick,
    world,
)

__all__ = [
    "actions",
    "biomes",
    "enums",
    "models",
    "nations",
    "races",
    "rules_config",
    "seed_data",
    "tick",
    "world",
]

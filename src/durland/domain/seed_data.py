"""Static world seed: locations, their biomes and resident animals."""

from __future__ import annotations

from durland.domain import biomes
from durland.domain.enums import AnimalName, LocationName
from durland.domain.models import Animal, Biome, BiomeType, Location

_WORKLAND_FAUNA = (
    AnimalName.SLESANDERS,
    AnimalName.SLESANDERS,
    AnimalName.SLESANDERS,
    AnimalName.SISANDERS,
    AnimalName.CHUCHUNDERS,
)
_BEACHLAND_FAUNA = (
    AnimalName.SLESANDERS,
    AnimalName.SISANDERS,
    AnimalName.SISANDERS,
    AnimalName.SISANDERS,
    AnimalName.CHUCHUNDERS,
)
_PRANALAND_FAUNA = (
    AnimalName.SLESANDERS,
    AnimalName.SISANDERS,
    AnimalName.CHUCHUNDERS,
    AnimalName.CHUCHUNDERS,
    AnimalName.CHUCHUNDERS,
)

BiomeSeed = tuple[BiomeType, tuple[AnimalName, ...]]
LocationSeed = tuple[LocationName, tuple[BiomeSeed, ...]]

WORLD_SEED: tuple[LocationSeed, ...] = (
    (
        LocationName.WORKLAND,
        ((biomes.BALBESBURG, _WORKLAND_FAUNA), (biomes.DOLBESBURG, _WORKLAND_FAUNA)),
    ),
    (
        LocationName.BEACHLAND,
        ((biomes.KURAMARUBS, _BEACHLAND_FAUNA), (biomes.PUNTA_PELICANA, _BEACHLAND_FAUNA)),
    ),
    (
        LocationName.PRANALAND,
        ((biomes.SHRINAVANS, _PRANALAND_FAUNA), (biomes.HARE_KIRISHI, _PRANALAND_FAUNA)),
    ),
)


def build_locations() -> tuple[Location, ...]:
    """Instantiate a fresh location tree from :data:`WORLD_SEED`."""

    return tuple(
        Location(
            name=name,
            biomes=tuple(
                Biome(type=biome_type, animals=tuple(Animal(animal) for animal in fauna))
                for biome_type, fauna in biome_specs
            ),
        )
        for name, biome_specs in WORLD_SEED
    )

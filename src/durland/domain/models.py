"""Dataclasses describing every Durland entity.

The world is a fixed tree of locations, each holding an ordered tuple of
biomes populated by animals.  Biomes are addressed by :class:`BiomeRef`
(location index, biome index) so the world state can keep a visitation
history without copying biome data.

Nations and biome types carry their identity together with a modifier
function.  Modifiers receive an :class:`ActionContext` and mutate the
numeric deltas of a :class:`ProposedAction` in place.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import FrozenInstanceError, dataclass, field

from durland.domain.enums import (
    AnimalName,
    BiomeName,
    LocationName,
    NationName,
    PlayerAction,
    RaceName,
)
from durland.domain.rules_config import RulesConfig
from durland.utils.rng import RandomSource

Modifier = Callable[["ActionContext", "ProposedAction"], None]


@dataclass(frozen=True, slots=True)
class BiomeRef:
    """Position of a biome inside the location tree."""

    location_index: int
    biome_index: int

    def __post_init__(self) -> None:
        if self.location_index < 0 or self.biome_index < 0:
            raise ValueError(f"biome reference must be non-negative, got {self}")


@dataclass(frozen=True, slots=True)
class Animal:
    name: AnimalName


@dataclass(frozen=True, slots=True)
class Race:
    """Species affiliation of the player. Races have no modifier of their own."""

    name: RaceName


@dataclass(frozen=True, slots=True)
class Nation:
    """Sociopolitical affiliation of the player."""

    name: NationName
    race: RaceName
    modifier: Modifier = field(repr=False, compare=False)

    def on_action(self, context: ActionContext, action: ProposedAction) -> None:
        self.modifier(context, action)


@dataclass(frozen=True, slots=True)
class BiomeType:
    name: BiomeName
    modifier: Modifier = field(repr=False, compare=False)

    def on_action(self, context: ActionContext, action: ProposedAction) -> None:
        self.modifier(context, action)


@dataclass(frozen=True, slots=True)
class Biome:
    type: BiomeType
    animals: tuple[Animal, ...] = ()

    def count(self, animal: AnimalName) -> int:
        """Return how many animals of the given species live here."""

        return sum(1 for candidate in self.animals if candidate.name == animal)


@dataclass(frozen=True, slots=True)
class Location:
    name: LocationName
    biomes: tuple[Biome, ...] = ()


@dataclass(slots=True)
class Player:
    """The single actor of the simulation.

    Race and nation are fixed once set; only the resources change.
    """

    race: Race
    nation: Nation
    health: float
    money: float
    satisfaction: float

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("race", "nation") and hasattr(self, name):
            raise FrozenInstanceError(f"player {name} is fixed for the run")
        object.__setattr__(self, name, value)

    @property
    def is_alive(self) -> bool:
        return self.health > 0 and self.money > 0 and self.satisfaction > 0


@dataclass(slots=True)
class WorldState:
    """Full mutable state of a run."""

    locations: tuple[Location, ...]
    player: Player
    current_biome_ref: BiomeRef
    current_biome_ticks: int = 0
    biomes_history: list[BiomeRef] = field(default_factory=list)
    ticks: int = 0

    def biome_at(self, ref: BiomeRef) -> Biome:
        """Resolve a reference; an out-of-range reference raises ``IndexError``."""

        return self.locations[ref.location_index].biomes[ref.biome_index]

    @property
    def current_biome(self) -> Biome:
        return self.biome_at(self.current_biome_ref)

    def recent_biomes(self, window: int) -> list[Biome]:
        """Return up to ``window`` most recently visited biomes, oldest first."""

        if window <= 0:
            return []
        start = max(0, len(self.biomes_history) - window)
        return [self.biome_at(ref) for ref in self.biomes_history[start:]]

    def biome_refs(self) -> Iterator[BiomeRef]:
        """Iterate over every biome reference in the location tree."""

        for location_index, location in enumerate(self.locations):
            for biome_index in range(len(location.biomes)):
                yield BiomeRef(location_index, biome_index)


@dataclass(slots=True)
class ProposedAction:
    """Candidate effect of a tick. Only the deltas may change while resolving."""

    kind: PlayerAction | None = None
    health_change: float = 0.0
    money_change: float = 0.0
    satisfaction_change: float = 0.0

    def is_kind(self, kind: PlayerAction) -> bool:
        return self.kind == kind


@dataclass(frozen=True, slots=True)
class CommittedAction:
    """Deltas as they were applied to the player."""

    kind: PlayerAction | None
    health_change: float
    money_change: float
    satisfaction_change: float


@dataclass(frozen=True, slots=True)
class Move:
    biome: BiomeRef


@dataclass(slots=True)
class ActionContext:
    """Read-only inputs handed to every modifier."""

    state: WorldState
    rng: RandomSource
    rules: RulesConfig

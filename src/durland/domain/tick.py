"""Single-tick state transition for a Durland run."""

from __future__ import annotations

import logging

from durland.domain.actions import resolve_action
from durland.domain.enums import TickResult
from durland.domain.models import CommittedAction, Move, Player, WorldState
from durland.domain.rules_config import DEFAULT_RULES, RulesConfig
from durland.interfaces.strategy import IStrategy
from durland.utils.rng import RandomSource

logger = logging.getLogger(__name__)


def apply_move(state: WorldState, move: Move | None) -> None:
    """Enter the target biome, or stay and count another tick in place."""

    if move is None:
        state.current_biome_ticks += 1
        return

    # Resolve first so a dangling reference fails before any state changes.
    biome = state.biome_at(move.biome)
    state.current_biome_ref = move.biome
    state.biomes_history.append(move.biome)
    state.current_biome_ticks = 0
    logger.debug("moved to %s at %s", biome.type.name, move.biome)


def check_result(player: Player) -> TickResult:
    return TickResult.OK if player.is_alive else TickResult.DIED


def run_tick(
    state: WorldState,
    strategy: IStrategy,
    *,
    rng: RandomSource,
    rules: RulesConfig = DEFAULT_RULES,
) -> tuple[TickResult, CommittedAction]:
    """Advance the world by one tick.

    The global tick counter is incremented even when the tick kills the player.
    """

    apply_move(state, strategy.decide_move(state))
    action = strategy.decide_action(state)
    committed = resolve_action(state, action, rng=rng, rules=rules)
    result = check_result(state.player)
    state.ticks += 1
    return result, committed

"""Action pipeline: modifier dispatch and resource commit."""

from __future__ import annotations

import logging

from durland.domain.models import ActionContext, CommittedAction, ProposedAction, WorldState
from durland.domain.rules_config import DEFAULT_RULES, RulesConfig
from durland.utils.rng import RandomSource

logger = logging.getLogger(__name__)


def apply_modifiers(context: ActionContext, action: ProposedAction) -> None:
    """Run the nation modifier, then the current biome's modifier."""

    state = context.state
    state.player.nation.on_action(context, action)
    logger.debug("after nation %s: %s", state.player.nation.name, action)
    state.current_biome.type.on_action(context, action)
    logger.debug("after biome %s: %s", state.current_biome.type.name, action)


def commit_action(state: WorldState, action: ProposedAction) -> CommittedAction:
    """Add the action deltas to the player's resources without clamping."""

    committed = CommittedAction(
        kind=action.kind,
        health_change=action.health_change,
        money_change=action.money_change,
        satisfaction_change=action.satisfaction_change,
    )
    player = state.player
    player.health += committed.health_change
    player.money += committed.money_change
    player.satisfaction += committed.satisfaction_change
    return committed


def resolve_action(
    state: WorldState,
    action: ProposedAction,
    *,
    rng: RandomSource,
    rules: RulesConfig = DEFAULT_RULES,
) -> CommittedAction:
    """Modify a proposed action and apply it to the player.

    The kind tag of the committed action is always the one the strategy
    proposed; modifiers only influence the deltas.
    """

    kind = action.kind
    apply_modifiers(ActionContext(state=state, rng=rng, rules=rules), action)
    action.kind = kind
    return commit_action(state, action)

"""Built-in strategies."""

from __future__ import annotations

from durland.domain.models import Move, ProposedAction, WorldState

IDLE_UPKEEP = -0.5


class IdleStrategy:
    """Never moves and never acts; the player just pays upkeep every tick."""

    def __init__(self, upkeep: float = IDLE_UPKEEP) -> None:
        self.upkeep = upkeep

    def decide_move(self, state: WorldState) -> Move | None:
        return None

    def decide_action(self, state: WorldState) -> ProposedAction:
        return ProposedAction(
            kind=None,
            health_change=self.upkeep,
            money_change=self.upkeep,
            satisfaction_change=self.upkeep,
        )

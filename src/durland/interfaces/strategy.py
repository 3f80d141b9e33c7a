"""Strategy Protocol Interface.

This module defines the protocol for the policy that drives the player.
"""

from typing import Protocol

from durland.domain.models import Move, ProposedAction, WorldState


class IStrategy(Protocol):
    """Protocol for the per-tick decisions of the player.

    Both methods are called exactly once per tick, move first. Implementations
    may read the world state freely but must not mutate it.
    """

    def decide_move(self, state: WorldState) -> Move | None:
        """Choose a biome to travel to, or ``None`` to stay.

        Args:
            state: Current world state

        Returns:
            Move targeting a biome reference, or None
        """
        ...

    def decide_action(self, state: WorldState) -> ProposedAction:
        """Propose this tick's action.

        Args:
            state: World state after the move has been applied

        Returns:
            A fresh ProposedAction; the pipeline mutates it in place
        """
        ...

"""Run driver tying the world, a strategy and a report sink together."""

from __future__ import annotations

import logging

from durland.domain.enums import TickResult
from durland.domain.models import WorldState
from durland.domain.rules_config import DEFAULT_RULES, RulesConfig
from durland.domain.tick import run_tick
from durland.interfaces import IReportSink, IStrategy
from durland.schemas.report import RunSummary, TickReport
from durland.utils.rng import RandomSource, SeededRandom

logger = logging.getLogger(__name__)


class SimulationFinishedError(RuntimeError):
    """Raised when stepping a simulation whose player has already died."""


class Simulation:
    """Sequential tick loop over a single world state."""

    def __init__(
        self,
        state: WorldState,
        strategy: IStrategy,
        *,
        rng: RandomSource | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self.state = state
        self.strategy = strategy
        self.rng = rng if rng is not None else SeededRandom()
        self.rules = rules
        self.last_result: TickResult | None = None

    @property
    def finished(self) -> bool:
        return self.last_result == TickResult.DIED or not self.state.player.is_alive

    def step(self) -> TickReport:
        """Run one tick and describe its outcome."""

        if self.finished:
            raise SimulationFinishedError(f"player died at tick {self.state.ticks}")

        result, committed = run_tick(self.state, self.strategy, rng=self.rng, rules=self.rules)
        self.last_result = result
        player = self.state.player
        return TickReport(
            tick=self.state.ticks,
            result=result,
            biome=self.state.current_biome.type.name,
            action=committed.kind,
            health=player.health,
            money=player.money,
            satisfaction=player.satisfaction,
        )

    def run(self, sink: IReportSink, *, max_ticks: int | None = None) -> RunSummary:
        """Tick until the player dies or ``max_ticks`` ticks have run in this call."""

        stopped_by_guard = False
        ran = 0
        while not self.finished:
            if max_ticks is not None and ran >= max_ticks:
                stopped_by_guard = True
                logger.warning("stopping run after %d ticks with the player alive", ran)
                break
            sink.report_tick(self.step())
            ran += 1

        summary = self.summary(stopped_by_guard=stopped_by_guard)
        logger.info("run finished after %d ticks: %s", summary.ticks, summary.result)
        sink.report_summary(summary)
        return summary

    def summary(self, *, stopped_by_guard: bool = False) -> RunSummary:
        player = self.state.player
        return RunSummary(
            ticks=self.state.ticks,
            result=self.last_result,
            health=player.health,
            money=player.money,
            satisfaction=player.satisfaction,
            biomes_visited=len(self.state.biomes_history),
            stopped_by_guard=stopped_by_guard,
        )

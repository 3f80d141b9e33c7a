"""Command-line entrypoint: run one simulation to completion."""

from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from durland.config import Settings, get_settings
from durland.domain.world import build_world
from durland.reporting import ConsoleReporter
from durland.schemas.report import RunSummary
from durland.simulation import Simulation
from durland.strategies import IdleStrategy
from durland.utils.rng import SeededRandom


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Durland survival simulation")
    parser.add_argument("--seed", default=None, help="Seed for reproducible runs")
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=None,
        help="Stop after this many ticks even if the player is still alive",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG)")
    return parser


def run(settings: Settings) -> RunSummary:
    """Build the world described by ``settings`` and run it with the idle strategy."""

    state = build_world(
        race=settings.race,
        nation=settings.nation,
        health=settings.starting_health,
        money=settings.starting_money,
        satisfaction=settings.starting_satisfaction,
    )
    simulation = Simulation(state, IdleStrategy(), rng=SeededRandom(settings.seed))
    return simulation.run(ConsoleReporter(), max_ticks=settings.max_ticks)


def _describe_errors(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "settings"
        problems.append(f"{field}: {error['msg']}")
    return "; ".join(problems)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    overrides = {
        key: value
        for key, value in (
            ("seed", args.seed),
            ("max_ticks", args.max_ticks),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    try:
        settings = Settings.model_validate({**get_settings().model_dump(), **overrides})
    except ValidationError as exc:
        parser.error(_describe_errors(exc))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(settings)


if __name__ == "__main__":
    main()

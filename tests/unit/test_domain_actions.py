"""Tests for the action pipeline."""

from __future__ import annotations

import dataclasses

import pytest
from helpers import DOLBESBURG, KURAMARUBS, SHRINAVANS, make_context, make_state

from durland.domain import actions, races
from durland.domain.enums import BiomeName, LocationName, NationName, PlayerAction, RaceName
from durland.domain.models import (
    Biome,
    BiomeRef,
    BiomeType,
    Location,
    Nation,
    Player,
    ProposedAction,
    WorldState,
)
from durland.utils.rng import ScriptedRandom


def _no_rules(context, action):
    return None


def _custom_state(nation_modifier=_no_rules, biome_modifier=_no_rules) -> WorldState:
    nation = Nation(NationName.MOZHORS, RaceName.SHLENDRICS, nation_modifier)
    biome = Biome(type=BiomeType(BiomeName.KURAMARUBS, biome_modifier))
    player = Player(
        race=races.SHLENDRICS, nation=nation, health=10.0, money=10.0, satisfaction=10.0
    )
    return WorldState(
        locations=(Location(LocationName.BEACHLAND, (biome,)),),
        player=player,
        current_biome_ref=BiomeRef(0, 0),
    )


def test_nation_runs_before_biome():
    # Soevs subtract per chuchunder, Shrinavans then scale health; the
    # result differs from the reverse order.
    state = make_state(NationName.SOEVS, at=SHRINAVANS)
    action = ProposedAction(kind=PlayerAction.SCHLAMING, health_change=-1.0)

    committed = actions.resolve_action(state, action, rng=ScriptedRandom([]))

    assert committed.health_change == pytest.approx((-1.0 - 0.36) * 1.13)
    assert committed.health_change != pytest.approx(-1.0 * 1.13 - 0.36)
    assert state.player.health == pytest.approx(10.0 + committed.health_change)


def test_stage_order_recorded():
    calls: list[str] = []

    def nation_modifier(context, action):
        calls.append("nation")
        action.money_change *= 1.23

    def biome_modifier(context, action):
        calls.append("biome")
        action.money_change *= 1.2

    state = _custom_state(nation_modifier, biome_modifier)

    committed = actions.resolve_action(
        state, ProposedAction(money_change=2.0), rng=ScriptedRandom([])
    )

    assert calls == ["nation", "biome"]
    assert committed.money_change == pytest.approx(2.0 * 1.23 * 1.2)
    assert state.player.money == pytest.approx(10.0 + 2.0 * 1.23 * 1.2)


def test_commit_accumulates_without_clamping():
    state = make_state(at=KURAMARUBS, health=1.0)
    actions.resolve_action(
        state,
        ProposedAction(health_change=-5.0, money_change=2.5, satisfaction_change=-0.25),
        rng=ScriptedRandom([]),
    )
    assert state.player.health == -4.0
    assert state.player.money == 12.5
    assert state.player.satisfaction == 9.75


def test_kind_tag_survives_modifiers():
    def rogue(context, action):
        action.kind = PlayerAction.GULBONING

    state = _custom_state(rogue)
    committed = actions.resolve_action(
        state, ProposedAction(kind=PlayerAction.ZUMBALING), rng=ScriptedRandom([])
    )
    assert committed.kind == PlayerAction.ZUMBALING


def test_committed_action_is_frozen():
    state = make_state(at=KURAMARUBS)
    committed = actions.commit_action(state, ProposedAction(health_change=-1.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        committed.health_change = 5.0


def test_apply_modifiers_does_not_touch_player():
    state = make_state(NationName.MOZHORS, at=DOLBESBURG)
    action = ProposedAction(kind=PlayerAction.ZUMBALING, money_change=1.0)
    actions.apply_modifiers(make_context(state, ScriptedRandom([0.9])), action)
    assert action.money_change == pytest.approx(1.2)
    assert state.player.money == 10.0

"""Tests for the injectable random sources.

Tests cover:
- Determinism of seeded sources
- Scripted sequences and exhaustion
- Probability validation in check_chance
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from durland.utils.rng import ScriptedRandom, SeededRandom, check_chance


class TestSeededRandom:
    def test_same_seed_same_sequence(self):
        a = SeededRandom("run-1")
        b = SeededRandom("run-1")
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_different_seeds_differ(self):
        a = SeededRandom("run-1")
        b = SeededRandom("run-2")
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_unseeded_source_keeps_no_seed(self):
        rng = SeededRandom()
        assert rng.seed is None
        assert 0.0 <= rng.random() < 1.0

    @given(seed=st.text(min_size=1))
    def test_values_in_unit_interval(self, seed):
        rng = SeededRandom(seed)
        for _ in range(10):
            assert 0.0 <= rng.random() < 1.0


class TestScriptedRandom:
    def test_replays_values_in_order(self):
        rng = ScriptedRandom([0.1, 0.2, 0.3])
        assert [rng.random() for _ in range(3)] == [0.1, 0.2, 0.3]
        assert rng.calls == 3

    def test_exhaustion_raises(self):
        rng = ScriptedRandom([0.5])
        rng.random()
        with pytest.raises(IndexError, match="exhausted"):
            rng.random()

    def test_cycle_repeats(self):
        rng = ScriptedRandom([0.1, 0.9], cycle=True)
        assert [rng.random() for _ in range(4)] == [0.1, 0.9, 0.1, 0.9]

    def test_rejects_out_of_range_values(self):
        with pytest.raises(ValueError, match=r"\[0, 1\)"):
            ScriptedRandom([1.0])


class TestCheckChance:
    def test_below_probability_succeeds(self):
        assert check_chance(ScriptedRandom([0.32]), 0.33) is True

    def test_at_probability_fails(self):
        assert check_chance(ScriptedRandom([0.33]), 0.33) is False

    def test_always_draws_once(self):
        rng = ScriptedRandom([0.5, 0.5])
        check_chance(rng, 0.0)
        check_chance(rng, 1.0)
        assert rng.calls == 2

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_invalid_probability_raises(self, probability):
        with pytest.raises(ValueError, match="probability must be between"):
            check_chance(ScriptedRandom([0.5]), probability)

"""Tests for weighted rarity sampling."""

import random
from collections import Counter

import pytest

from petsim.evolution.rarity import sample_rarity
from petsim.models import Rarity
from petsim.util.rng import MissingRNGError


class FixedRandom(random.Random):
    """Random whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


class TestSampleRarity:
    @pytest.mark.parametrize(
        "draw, expected",
        [
            (0.0, Rarity.COMMON),
            (0.3, Rarity.COMMON),
            (0.7, Rarity.UNCOMMON),
            (0.9, Rarity.RARE),
            (0.97, Rarity.LEGENDARY),
        ],
    )
    def test_cumulative_thresholds(self, draw: float, expected: Rarity) -> None:
        assert sample_rarity(FixedRandom(draw)) is expected

    def test_residual_draw_falls_back_to_common(self) -> None:
        """A draw beyond the cumulative total (weights short of 1.0) is common."""
        short = {"common": 0.5, "uncommon": 0.2, "rare": 0.1, "legendary": 0.1}
        assert sample_rarity(FixedRandom(0.95), short) is Rarity.COMMON

    def test_custom_distribution(self) -> None:
        only_legendary = {"common": 0.0, "uncommon": 0.0, "rare": 0.0, "legendary": 1.0}
        rng = random.Random(7)
        assert {sample_rarity(rng, only_legendary) for _ in range(50)} == {Rarity.LEGENDARY}

    def test_requires_rng(self) -> None:
        with pytest.raises(MissingRNGError):
            sample_rarity(None)

    @pytest.mark.slow
    def test_distribution_converges(self, seeded_rng) -> None:
        trials = 20000
        counts = Counter(sample_rarity(seeded_rng) for _ in range(trials))
        expected = {
            Rarity.COMMON: 0.60,
            Rarity.UNCOMMON: 0.25,
            Rarity.RARE: 0.10,
            Rarity.LEGENDARY: 0.05,
        }
        for rarity, probability in expected.items():
            assert counts[rarity] / trials == pytest.approx(probability, abs=0.015)

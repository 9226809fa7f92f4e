import random
from collections import Counter

import pytest

from garden import Flower, GrowthAction

TRIALS = 3000


def test_random_step_returns_applied_action(seeded_rng):
    for _ in range(200):
        flower = Flower("Tulip", 5, rng=seeded_rng)
        action = flower.random_grow_or_wither()

        expected = {GrowthAction.REST: 5, GrowthAction.GROW: 6, GrowthAction.WITHER: 4}
        assert flower.length == expected[action]


def test_random_outcomes_roughly_uniform(seeded_rng):
    outcomes = Counter()
    for _ in range(TRIALS):
        flower = Flower("Tulip", 5, rng=seeded_rng)
        before = flower.length
        flower.random_grow_or_wither()
        delta = flower.length - before
        if delta == 0:
            outcomes["unchanged"] += 1
        elif delta > 0:
            outcomes["grown"] += 1
        else:
            outcomes["withered"] += 1

    assert set(outcomes) == {"unchanged", "grown", "withered"}
    for count in outcomes.values():
        assert 0.28 * TRIALS < count < 0.39 * TRIALS


def test_random_step_is_reproducible_with_seed():
    first = Flower("Tulip", 5, rng=random.Random(7))
    second = Flower("Tulip", 5, rng=random.Random(7))

    actions_a = [first.random_grow_or_wither() for _ in range(50)]
    actions_b = [second.random_grow_or_wither() for _ in range(50)]

    assert actions_a == actions_b
    assert first.length == second.length


def test_random_step_defaults_to_module_random(monkeypatch):
    monkeypatch.setattr(random, "choice", lambda seq: GrowthAction.GROW)
    flower = Flower("Tulip", 1)

    assert flower.random_grow_or_wither() is GrowthAction.GROW
    assert flower.length == 2


def test_random_step_never_underflows(seeded_rng):
    flower = Flower("Tulip", 1, rng=seeded_rng)
    for _ in range(500):
        flower.random_grow_or_wither()
        assert flower.length >= 1


class _BrokenRng:
    def choice(self, seq):
        return "bloom"


@pytest.mark.parametrize("enabled", [True, False])
def test_unexpected_action_is_fatal_even_without_contracts(enabled):
    from garden.contracts import contracts

    flower = Flower("Tulip", 3, rng=_BrokenRng())
    with contracts(enabled):
        with pytest.raises(AssertionError, match="Unexpected value for action"):
            flower.random_grow_or_wither()
    assert flower.length == 3

"""Demonstration run for a single flower.

Drives one flower through a fixed sequence of calls and emits its debug
string after each phase:
- grow twice
- one random grow-or-wither step
- wither twice
"""

import logging
import random
from collections.abc import Callable
from typing import Optional

from garden.config.demo_config import DemoConfig
from garden.config.flowers import DEMO_GROW_STEPS, DEMO_WITHER_STEPS
from garden.contracts import contracts, contracts_enabled
from garden.entities.flower import Flower

logger = logging.getLogger(__name__)


def run_demo(
    config: Optional[DemoConfig] = None,
    emit: Callable[[str], None] = print,
) -> Flower:
    """Run the demonstration and return the flower in its final state.

    Args:
        config: Demonstration settings (defaults to a Tulip of length 1)
        emit: Sink for the debug string printed after each phase

    Raises:
        InvalidArgumentError: If the configured species or length is invalid
    """
    if config is None:
        config = DemoConfig()

    enabled = contracts_enabled() if config.check_contracts is None else config.check_contracts
    with contracts(enabled):
        rng = random.Random(config.seed)
        flower = Flower(config.species, config.initial_length, rng=rng)
        logger.debug("Demo flower created: %s (contracts=%s)", flower, enabled)

        for _ in range(DEMO_GROW_STEPS):
            flower.grow()
        emit(str(flower))

        action = flower.random_grow_or_wither()
        logger.debug("Random step chose %s", action.value)
        emit(str(flower))

        for _ in range(DEMO_WITHER_STEPS):
            flower.wither()
        emit(str(flower))

    return flower

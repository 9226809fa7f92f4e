"""Lightweight demonstration configuration helpers."""

from dataclasses import dataclass
from typing import Optional

from garden.config.flowers import DEMO_INITIAL_LENGTH, DEMO_SPECIES


@dataclass
class DemoConfig:
    """Configuration for a single demonstration run.

    Attributes:
        species: Species label for the demonstration flower.
        initial_length: Starting length of the flower.
        seed: Optional random seed so the random phase is reproducible.
        check_contracts: Run debug-only contract checks. ``None`` keeps
            whatever the process default is.
    """

    species: str = DEMO_SPECIES
    initial_length: int = DEMO_INITIAL_LENGTH
    seed: Optional[int] = None
    check_contracts: Optional[bool] = None

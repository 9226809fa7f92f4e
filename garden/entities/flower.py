"""Flower entity with a bounded, monotonic length.

This module implements a single mutable flower whose length grows by one or
two units, withers by one unit down to a floor, and can be nudged either way
at random. Input is validated at construction; everything afterwards is
guarded by debug-only contract checks.
"""

import logging
import random
from enum import Enum
from typing import Optional

from garden.config.flowers import (
    FLOWER_FAST_GROWTH_LENGTH,
    FLOWER_FAST_GROWTH_STEP,
    FLOWER_GROWTH_STEP,
    FLOWER_MATURE_LENGTH,
    FLOWER_MIN_LENGTH,
    FLOWER_WITHER_STEP,
)
from garden.contracts import check, check_invariant, contracts_enabled
from garden.exceptions import InvalidLengthError, InvalidSpeciesError

logger = logging.getLogger(__name__)


class GrowthAction(Enum):
    """Outcomes of a random growth step."""

    REST = "rest"
    GROW = "grow"
    WITHER = "wither"


_RANDOM_ACTIONS = tuple(GrowthAction)


def is_valid_species(species: object) -> bool:
    """Species must have content."""
    return isinstance(species, str) and len(species.strip()) > 0


def is_valid_length(length: object) -> bool:
    """Length must be an integer greater than 0."""
    if isinstance(length, bool) or not isinstance(length, int):
        return False
    return length > 0


class Flower:
    """A flower of some species with a positive integer length.

    Invariant: ``species`` has content and ``length > 0``. It holds after
    construction and after every public method returns.

    Attributes:
        species: Species label, fixed at construction
        length: Current length (always at least FLOWER_MIN_LENGTH)
    """

    __slots__ = ("_length", "_rng", "_species")

    def __init__(
        self,
        species: str,
        initial_length: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a flower.

        Args:
            species: Species label; must have content
            initial_length: Starting length; must be greater than 0
            rng: Random source for random_grow_or_wither (defaults to the
                module-level ``random`` generator)

        Raises:
            InvalidSpeciesError: If species is blank or not a string
            InvalidLengthError: If initial_length is not a positive integer
        """
        if not is_valid_species(species):
            raise InvalidSpeciesError(species)
        if not is_valid_length(initial_length):
            raise InvalidLengthError(initial_length)

        self._species = species
        self._length = initial_length
        self._rng = rng or random

        check_invariant(self, "construction")

    @property
    def species(self) -> str:
        return self._species

    @property
    def length(self) -> int:
        return self._length

    def is_mature(self) -> bool:
        """Return True once the flower is longer than FLOWER_MATURE_LENGTH."""
        return self._length > FLOWER_MATURE_LENGTH

    def grow(self) -> None:
        """Increase the length by at least one unit."""
        old_length = self._length
        self._length += self._length_increase(old_length)
        logger.debug("%s grew %d -> %d", self._species, old_length, self._length)

        check(self._length > old_length, f"grow did not increase length: {self}")
        check_invariant(self, "grow")

    def wither(self) -> None:
        """Decrease the length by one unit, never going below FLOWER_MIN_LENGTH."""
        # Snapshot only taken while checks run
        original_length = self._length if contracts_enabled() else None

        if self._length > FLOWER_MIN_LENGTH:
            self._length -= FLOWER_WITHER_STEP
            logger.debug("%s withered to %d", self._species, self._length)

        if original_length is not None:
            check(self._length <= original_length, f"wither increased length: {self}")
        check_invariant(self, "wither")

    def random_grow_or_wither(self) -> GrowthAction:
        """Randomly rest, grow, or wither with equal probability.

        Returns:
            The action that was applied.
        """
        action = self._rng.choice(_RANDOM_ACTIONS)
        if action is GrowthAction.REST:
            pass
        elif action is GrowthAction.GROW:
            self.grow()
        elif action is GrowthAction.WITHER:
            self.wither()
        else:
            # Runs even with contracts disabled
            raise AssertionError(f"Unexpected value for action: {action!r}")

        check_invariant(self, "random_grow_or_wither")
        return action

    def has_valid_state(self) -> bool:
        """Return True if the class invariant holds."""
        return is_valid_species(self._species) and is_valid_length(self._length)

    def _length_increase(self, original_length: int) -> int:
        check(original_length > 0, self)
        if original_length > FLOWER_FAST_GROWTH_LENGTH:
            result = FLOWER_FAST_GROWTH_STEP
        else:
            result = FLOWER_GROWTH_STEP
        check(result > 0, result)
        return result

    def __repr__(self) -> str:
        """Use for debugging only."""
        return f"{type(self).__name__}: Species={self._species} Length={self._length}"

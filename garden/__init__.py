"""Growing flower model.

A single flower entity with validated construction, a monotonic growth rule,
a floored wither rule, and optional debug-only contract checks.
"""

from garden.entities import Flower, GrowthAction
from garden.exceptions import (
    ContractViolationError,
    FlowerError,
    GardenError,
    InvalidArgumentError,
    InvalidLengthError,
    InvalidSpeciesError,
)

__all__ = [
    "ContractViolationError",
    "Flower",
    "FlowerError",
    "GardenError",
    "GrowthAction",
    "InvalidArgumentError",
    "InvalidLengthError",
    "InvalidSpeciesError",
]

"""Entity package exposing garden organisms."""

from garden.entities.flower import Flower, GrowthAction, is_valid_length, is_valid_species

__all__ = [
    "Flower",
    "GrowthAction",
    "is_valid_length",
    "is_valid_species",
]

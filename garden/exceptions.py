"""Garden exception hierarchy.

Centralised base classes so callers can catch flower failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class GardenError(Exception):
    """Root of all garden domain exceptions."""


class FlowerError(GardenError):
    """Errors raised by a flower entity."""


class InvalidArgumentError(FlowerError, ValueError):
    """A flower was constructed with unusable arguments."""


class InvalidSpeciesError(InvalidArgumentError):
    """Species is missing, blank, or not text."""

    def __init__(self, species: object):
        self.species = species
        super().__init__(f"Species must have content, got {species!r}")


class InvalidLengthError(InvalidArgumentError):
    """Initial length is not a positive integer."""

    def __init__(self, length: object):
        self.length = length
        super().__init__(f"Initial length must be a positive integer, got {length!r}")


class ContractViolationError(GardenError, AssertionError):
    """A debug-only invariant or post-condition check failed."""

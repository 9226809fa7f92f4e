"""Contract checks for the garden.

This package holds the optional, debug-only assertion layer used to verify
class invariants and post-conditions.
"""

from garden.contracts.checks import (CONTRACTS_ENV_VAR, check, check_invariant,
                                     contracts, contracts_enabled,
                                     set_contracts_enabled)

__all__ = [
    "CONTRACTS_ENV_VAR",
    "check",
    "check_invariant",
    "contracts",
    "contracts_enabled",
    "set_contracts_enabled",
]

"""Debug-only contract checks for garden entities.

Invariants and post-conditions are verified here rather than in the normal
error-handling path. Callers never see these failures for valid input; they
exist to catch implementation bugs.

Enablement policy:
    - Defaults to ``__debug__``, so ``python -O`` turns every check off
    - ``GARDEN_CONTRACTS`` overrides the default (1/true/yes/on enables)
    - ``set_contracts_enabled`` and ``contracts`` toggle at runtime
"""

import os
from contextlib import contextmanager
from typing import Iterator

from garden.exceptions import ContractViolationError

CONTRACTS_ENV_VAR = "GARDEN_CONTRACTS"

_TRUTHY = ("1", "true", "yes", "on")


def _default_enabled() -> bool:
    value = os.getenv(CONTRACTS_ENV_VAR)
    if value is None:
        return __debug__
    return value.strip().lower() in _TRUTHY


_enabled = _default_enabled()


def contracts_enabled() -> bool:
    """Return True if contract checks currently run."""
    return _enabled


def set_contracts_enabled(enabled: bool) -> None:
    """Turn contract checks on or off for the whole process."""
    global _enabled
    _enabled = bool(enabled)


@contextmanager
def contracts(enabled: bool = True) -> Iterator[None]:
    """Temporarily enable or disable contract checks."""
    previous = _enabled
    set_contracts_enabled(enabled)
    try:
        yield
    finally:
        set_contracts_enabled(previous)


def check(condition: bool, message: object = "") -> None:
    """Raise if ``condition`` is false while contracts are enabled.

    Args:
        condition: Result of the post-condition or precondition test.
        message: Detail for the error; converted with ``str()`` only on failure.

    Raises:
        ContractViolationError: If checks are enabled and ``condition`` is false.
    """
    if _enabled and not condition:
        raise ContractViolationError(str(message))


def check_invariant(obj, context: str = "") -> None:
    """Verify ``obj.has_valid_state()`` while contracts are enabled.

    Args:
        obj: Any object exposing ``has_valid_state()``.
        context: Short description of where the check runs.

    Raises:
        ContractViolationError: If checks are enabled and the state is invalid.
    """
    if not _enabled:
        return
    if not obj.has_valid_state():
        msg = f"Invalid state: {obj}"
        if context:
            msg += f" ({context})"
        raise ContractViolationError(msg)

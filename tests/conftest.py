"""Pytest configuration and fixtures for flower tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def contracts_on():
    """Force debug-only contract checks on for the duration of a test."""
    from garden.contracts import contracts

    with contracts(True):
        yield


@pytest.fixture
def contracts_off():
    """Force debug-only contract checks off for the duration of a test."""
    from garden.contracts import contracts

    with contracts(False):
        yield

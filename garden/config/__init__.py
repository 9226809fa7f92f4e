"""Configuration package for the garden.

Rule constants live in ``flowers``; runtime toggles for the demonstration
live in ``demo_config``.
"""

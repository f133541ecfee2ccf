"""Headless scientific simulations with a shared taxonomy, parameter schemas and physics helpers."""

__version__ = "0.1.0"
"""Shared utilities for the simulation core."""

from ecosim.util.rng import MissingRNGError, random_identifier, require_rng, require_rng_param

__all__ = [
    "MissingRNGError",
    "random_identifier",
    "require_rng",
    "require_rng_param",
]

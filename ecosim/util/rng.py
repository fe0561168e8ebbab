"""Explicit random sources for reproducible worlds.

A world's ``SimulationContext`` owns one ``random.Random``; genome creation,
mutation, crossover and predation rolls all draw from it. Helpers here
refuse to invent a fallback generator, since an unseeded draw would make a
seeded run diverge.
"""

import random
from typing import Any, Optional


class MissingRNGError(RuntimeError):
    """A random draw was requested without the world's RNG."""


def require_rng(owner: Any, context: str = "unknown") -> random.Random:
    """Return ``owner.rng`` (typically a SimulationContext's generator).

    Raises:
        MissingRNGError: If *owner* is None or carries no ``rng``
    """
    rng = getattr(owner, "rng", None) if owner is not None else None
    if rng is None:
        holder = "None" if owner is None else type(owner).__name__
        raise MissingRNGError(f"{holder} has no rng to draw from ({context})")
    return rng


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Check an ``rng`` argument before the first draw.

    Example:
        rng = require_rng_param(rng, "mutate")
        if rng.random() < genome.mutation_rate:
            ...
    """
    if rng is None:
        raise MissingRNGError(f"{context} needs the world's rng; none was passed")
    return rng


def random_identifier(rng: random.Random) -> str:
    """Draw a 128-bit hex identifier from *rng* (reproducible under a seed)."""
    return f"{rng.getrandbits(128):032x}"

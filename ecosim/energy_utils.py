"""Applying energy changes to host-owned organisms.

The food web computes energy amounts; these helpers are the one place those
amounts are written back onto an organism, so energy never goes negative and
never exceeds an organism's ``max_energy`` when it declares one.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class EnergyModifier(Protocol):
    """Organisms that manage their own energy bookkeeping."""

    def modify_energy(self, amount: float, *, source: str = "unknown") -> float:
        """Change energy by *amount* and return the change actually made."""


def clamp_energy(value: float, max_energy: Optional[float] = None) -> float:
    """Bound an energy level to [0, max_energy] (no upper bound when None)."""
    value = max(0.0, value)
    return value if max_energy is None else min(value, max_energy)


def apply_energy_delta(organism: Any, delta: float, *, source: str = "unknown") -> float:
    """Add *delta* to an organism's energy.

    Organisms implementing ``EnergyModifier`` handle the change themselves;
    plain records get their ``energy`` attribute rewritten.

    Returns:
        The change actually applied (0.0 for zero or non-finite deltas)

    Raises:
        AttributeError: If the organism has neither hook nor ``energy``
    """
    if not math.isfinite(delta) or delta == 0:
        return 0.0

    if isinstance(organism, EnergyModifier):
        return organism.modify_energy(delta, source=source)

    if not hasattr(organism, "energy"):
        raise AttributeError(f"{type(organism).__name__} has no energy to modify ({source})")

    before = organism.energy or 0.0
    organism.energy = clamp_energy(before + delta, getattr(organism, "max_energy", None))
    return organism.energy - before

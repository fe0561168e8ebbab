"""Trait specifications and clamping helpers.

This module provides:
- TraitSpec: Declarative sub-range a trait is drawn from at creation time
- TraitClampPolicy: What to do with values that leave [0, 1]
- clamp_trait: The single place trait values are forced back into bounds
"""

import logging
import math
import random as pyrandom
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ecosim.config.genetics import TRAIT_MAX, TRAIT_MIN
from ecosim.exceptions import ConfigurationError, InvalidTraitValue

logger = logging.getLogger(__name__)


class TraitClampPolicy(Enum):
    """Handling for trait values outside [0, 1]."""

    CLAMP = "clamp"  # Clamp and continue (hot-path default)
    RAISE = "raise"  # Raise InvalidTraitValue


def clamp_trait(name: str, value: Any, policy: TraitClampPolicy = TraitClampPolicy.CLAMP) -> float:
    """Return *value* as a float inside [0, 1].

    Non-numeric values always raise InvalidTraitValue; there is nothing to
    clamp. Non-finite values clamp to the nearest bound (NaN to the minimum).
    """
    try:
        val = float(value)
    except (TypeError, ValueError):
        raise InvalidTraitValue(name, value) from None

    if math.isfinite(val) and TRAIT_MIN <= val <= TRAIT_MAX:
        return val
    if policy is TraitClampPolicy.RAISE:
        raise InvalidTraitValue(name, val)

    if math.isnan(val):
        logger.warning("Trait %s was NaN; clamping to %s", name, TRAIT_MIN)
        return TRAIT_MIN
    return max(TRAIT_MIN, min(TRAIT_MAX, val))


@dataclass(frozen=True)
class TraitSpec:
    """Declarative specification for drawing a trait at creation time.

    Attributes:
        name: Trait key in Genome.traits
        min_val: Lower bound of the archetype's creation range
        max_val: Upper bound of the archetype's creation range
        activation_chance: For special traits, probability the trait starts
            active; an inactive trait starts at exactly 0.0
    """

    name: str
    min_val: float = TRAIT_MIN
    max_val: float = TRAIT_MAX
    activation_chance: Optional[float] = None

    def __post_init__(self) -> None:
        if not TRAIT_MIN <= self.min_val <= self.max_val <= TRAIT_MAX:
            raise ConfigurationError(
                f"TraitSpec {self.name!r} range [{self.min_val}, {self.max_val}] is not inside [0, 1]"
            )

    def random_value(self, rng: pyrandom.Random) -> float:
        """Draw a value for this trait."""
        if self.activation_chance is not None and rng.random() >= self.activation_chance:
            return 0.0
        return rng.uniform(self.min_val, self.max_val)

"""Predation success probability and single predation rolls.

Success starts at an even chance and moves with the predator's advantage in
speed, size, health and (when both sides carry genomes) intelligence:

    chance = base + sum(factor * (min(predator / prey, cap) - 1))

clamped to [min_success, max_success]. Both bounds sit strictly inside
(0, 1), so every valid attempt can go either way. Non-relationships and
unregistered types give exactly 0.0.
"""

from __future__ import annotations

import logging
import math
import random as pyrandom
from dataclasses import dataclass
from typing import Any, Optional

from ecosim.config.foodweb import DEFAULT_INTELLIGENCE, DEFAULT_PREY_ENERGY
from ecosim.config.simulation_config import PredationFactors
from ecosim.exceptions import UnknownType
from ecosim.foodweb.energy import EnergyLedger
from ecosim.foodweb.trophic import TrophicRegistry
from ecosim.genetics.expression import expressed_trait
from ecosim.util.rng import require_rng_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredationResult:
    """Outcome of one predator/prey interaction.

    Attributes:
        success: Whether the prey was caught
        energy_gained: Energy the predator gains (0.0 on failure)
        probability: Success chance the roll was made against
        predator_id/predator_type: Predator reference
        prey_id/prey_type: Prey reference
        prey_energy: Prey energy the transfer was computed from
    """

    success: bool
    energy_gained: float
    probability: float
    predator_id: Any
    predator_type: str
    prey_id: Any
    prey_type: str
    prey_energy: float = 0.0


def _stat(organism: Any, name: str) -> Optional[float]:
    value = getattr(organism, name, None)
    if value is None:
        return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _ratio_term(predator_value: Optional[float], prey_value: Optional[float], cap: float) -> float:
    """Return ``min(predator / prey, cap) - 1``, or 0.0 when not comparable."""
    if predator_value is None or prey_value is None:
        return 0.0
    predator_value = max(0.0, predator_value)
    prey_value = max(0.0, prey_value)
    if prey_value == 0.0:
        return cap - 1.0 if predator_value > 0.0 else 0.0
    return min(predator_value / prey_value, cap) - 1.0


def _intelligence(organism: Any) -> float:
    genome = getattr(organism, "genome", None)
    # A missing or zero trait reads as average intelligence
    return expressed_trait(genome, "intelligence", DEFAULT_INTELLIGENCE) or DEFAULT_INTELLIGENCE


class PredationResolver:
    """Resolves predator/prey interactions against the trophic registry."""

    def __init__(
        self,
        registry: TrophicRegistry,
        ledger: EnergyLedger,
        rng: pyrandom.Random,
        factors: Optional[PredationFactors] = None,
    ) -> None:
        self.registry = registry
        self.ledger = ledger
        self.rng = require_rng_param(rng, "PredationResolver.__init__")
        self.factors = factors or PredationFactors()

    def _is_relationship(self, predator_type: str, prey_type: str) -> bool:
        try:
            return self.registry.is_predator_prey_relationship(predator_type, prey_type)
        except UnknownType as e:
            logger.debug("No predation between %s and %s: %s", predator_type, prey_type, e)
            return False

    def calculate_predation_success(self, predator: Any, prey: Any) -> float:
        """Return the chance *predator* catches *prey*.

        Returns:
            0.0 for non-relationships, otherwise a value strictly in (0, 1)
        """
        if not self._is_relationship(predator.type, prey.type):
            return 0.0

        f = self.factors
        cap = f.max_stat_ratio
        chance = f.base_chance
        chance += f.speed * _ratio_term(_stat(predator, "speed"), _stat(prey, "speed"), cap)
        chance += f.size * _ratio_term(_stat(predator, "size"), _stat(prey, "size"), cap)
        chance += f.health * _ratio_term(_stat(predator, "health"), _stat(prey, "health"), cap)

        if getattr(predator, "genome", None) is not None and getattr(prey, "genome", None) is not None:
            chance += f.intelligence * _ratio_term(_intelligence(predator), _intelligence(prey), cap)

        return max(f.min_success, min(f.max_success, chance))

    def process_predator_prey_interaction(self, predator: Any, prey: Any) -> PredationResult:
        """Roll one predation attempt.

        No side effects on either organism: the caller applies the outcome.
        """
        probability = self.calculate_predation_success(predator, prey)
        success = probability > 0.0 and self.rng.random() < probability

        prey_energy = _stat(prey, "energy")
        if prey_energy is None:
            prey_energy = DEFAULT_PREY_ENERGY
        energy_gained = 0.0
        if success:
            energy_gained = self.ledger.transfer_between_types(prey_energy, prey.type, predator.type)

        return PredationResult(
            success=success,
            energy_gained=energy_gained,
            probability=probability,
            predator_id=predator.id,
            predator_type=predator.type,
            prey_id=prey.id,
            prey_type=prey.type,
            prey_energy=prey_energy,
        )

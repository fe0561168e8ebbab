"""Energy transfer between trophic levels.

Energy only flows exactly one level up the food chain, at a fixed
efficiency (10% by default). Sideways, downward and level-skipping
requests are a defined zero result, not an error.
"""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ecosim.config.foodweb import ENERGY_TRANSFER_EFFICIENCY
from ecosim.foodweb.trophic import TrophicLevel, TrophicRegistry


def calculate_energy_transfer(
    source_energy: float,
    source_level: TrophicLevel,
    target_level: TrophicLevel,
    efficiency: float = ENERGY_TRANSFER_EFFICIENCY,
) -> float:
    """Return the energy *target_level* receives from *source_energy*.

    Examples:
        >>> calculate_energy_transfer(100, TrophicLevel.PRODUCER, TrophicLevel.PRIMARY)
        10.0
        >>> calculate_energy_transfer(100, TrophicLevel.PRODUCER, TrophicLevel.TERTIARY)
        0.0
    """
    if int(target_level) != int(source_level) + 1:
        return 0.0
    if not math.isfinite(source_energy) or source_energy <= 0:
        return 0.0
    return source_energy * efficiency


@dataclass(frozen=True)
class EnergyDelta:
    entity_id: Any
    delta: float
    reason: str
    metadata: dict = field(default_factory=dict)


class EnergyLedger:
    """Computes trophic transfers and keeps an audit of applied flows.

    The ledger does not mutate organisms itself; ``record_predation``
    returns the deltas the caller applied (or should apply) and adds them
    to the per-level flow totals.
    """

    def __init__(self, registry: TrophicRegistry, efficiency: float = ENERGY_TRANSFER_EFFICIENCY):
        self.registry = registry
        self.efficiency = efficiency
        self.flow_totals: Dict[Tuple[TrophicLevel, TrophicLevel], float] = defaultdict(float)
        self.transfer_count = 0

    def calculate_energy_transfer(
        self,
        source_energy: float,
        source_level: TrophicLevel,
        target_level: TrophicLevel,
    ) -> float:
        return calculate_energy_transfer(source_energy, source_level, target_level, self.efficiency)

    def transfer_between_types(self, source_energy: float, source_type: str, target_type: str) -> float:
        """Transfer using the registry's levels for two organism types.

        Raises:
            UnknownType: If either type is unregistered
        """
        return self.calculate_energy_transfer(
            source_energy,
            self.registry.get_trophic_level(source_type),
            self.registry.get_trophic_level(target_type),
        )

    def record_predation(
        self,
        predator_id: Any,
        predator_type: str,
        prey_id: Any,
        prey_type: str,
        prey_energy: float,
        energy_gained: float,
    ) -> List[EnergyDelta]:
        """Record a successful predation and return its energy deltas."""
        source = self.registry.get_trophic_level(prey_type)
        target = self.registry.get_trophic_level(predator_type)
        self.flow_totals[(source, target)] += energy_gained
        self.transfer_count += 1
        return [
            EnergyDelta(
                entity_id=predator_id,
                delta=energy_gained,
                reason="predation_gain",
                metadata={"prey_id": prey_id, "prey_type": prey_type},
            ),
            EnergyDelta(
                entity_id=prey_id,
                delta=-max(0.0, prey_energy),
                reason="consumed",
                metadata={"predator_id": predator_id, "predator_type": predator_type},
            ),
        ]

    def total_transferred(self) -> float:
        return sum(self.flow_totals.values())

    def reset(self) -> None:
        self.flow_totals.clear()
        self.transfer_count = 0

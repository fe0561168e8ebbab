"""Domain event definitions for the ecosystem core.

These events are consumed by observers outside the core (achievement
tracking, narration). They are data-only frozen dataclasses carrying all
the context a handler needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class MutationOccurredEvent:
    """A trait mutated.

    Attributes:
        genome_id: Genome the mutation was applied to
        trait: Mutated trait name
        old_value: Value before the mutation
        new_value: Value after the mutation
        mutation_type: "point", "jump", "activation" or "deactivation"
        generation: Generation of the mutated genome
    """

    genome_id: str
    trait: str
    old_value: float
    new_value: float
    mutation_type: str
    generation: int


@dataclass(frozen=True)
class GeneticReproductionEvent:
    """Two genomes were combined into a child."""

    child_id: str
    parent_ids: tuple[str, str]
    generation: int
    mutation_count: int
    compatibility: float


@dataclass(frozen=True)
class ElementTypeRegisteredEvent:
    """A type was added to (or overwritten in) the trophic registry."""

    element_type: str
    trophic_level: str
    prey_types: tuple[str, ...]


@dataclass(frozen=True)
class PredationAttemptEvent:
    """A predator attempted to catch prey."""

    predator_id: Any
    predator_type: str
    prey_id: Any
    prey_type: str
    probability: float
    success: bool


@dataclass(frozen=True)
class PreyConsumedEvent:
    """A predation succeeded: prey is removed, predator gains energy.

    The host simulation is responsible for removing the prey from its live
    organism list.
    """

    predator_id: Any
    predator_type: str
    prey_id: Any
    prey_type: str
    energy_gained: float


@dataclass(frozen=True)
class CascadeEffectEvent:
    """A population change in one type ripples to a related type.

    Attributes:
        source_type: Type whose population changed
        target_type: Type affected by the change
        effect: Signed strength (negative = pressure on target population)
        reason: "food_source_change" or "predation_pressure_change"
        cause: What triggered the chain ("predation" or "cascade_from_<type>")
        depth: Distance from the original change (0 = direct)
    """

    source_type: str
    target_type: str
    effect: float
    reason: str
    cause: str
    depth: int


@dataclass(frozen=True)
class PopulationChangedEvent:
    """Per-type population count changed."""

    element_type: str
    count: int
    delta: int
    cause: Optional[str] = None

"""Genome class for the ecosystem core.

A Genome is a flat mapping of normalized traits plus the metadata that
drives mutation and tracks lineage. Genomes are treated as values:
``mutated()`` and ``combine()`` hand back new genomes. ``mutate()`` is the
one documented in-place operation and returns the applied events.
"""

import math
import random as pyrandom
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ecosim.exceptions import GeneticsError
from ecosim.genetics.trait import clamp_trait

GENOME_SCHEMA_VERSION = 1


class MutationType(Enum):
    """Kinds of mutation a trait can undergo."""

    POINT = "point"
    JUMP = "jump"
    ACTIVATION = "activation"
    DEACTIVATION = "deactivation"


class GeneticCrossoverMode(Enum):
    """How a child's trait values are derived from its parents."""

    AVERAGING = "averaging"
    RECOMBINATION = "recombination"


@dataclass(frozen=True)
class MutationEvent:
    """One applied trait mutation.

    Attributes:
        trait: Name of the mutated trait
        old_value: Value before the mutation
        new_value: Value after the mutation (already clamped)
        generation: Generation of the genome the mutation occurred in
        mutation_type: Kind of mutation that was applied
    """

    trait: str
    old_value: float
    new_value: float
    generation: int
    mutation_type: MutationType = MutationType.POINT

    @property
    def amount(self) -> float:
        return self.new_value - self.old_value


@dataclass
class Genome:
    """Heritable trait container.

    Attributes:
        traits: Trait name -> value in [0, 1]
        mutation_rate: Per-trait probability of mutating in one pass
        mutation_intensity: Half-width of a point mutation
        generation: 0 for random genomes, max(parents) + 1 for children
        mutation_history: Append-only record of applied mutations
        parent_ids: genome_ids of both parents (combined genomes only)
        genome_id: Identifier children use to reference this genome
        archetype: Archetype the lineage was created for
    """

    traits: Dict[str, float]
    mutation_rate: float = 0.05
    mutation_intensity: float = 0.1
    generation: int = 0
    mutation_history: List[MutationEvent] = field(default_factory=list)
    parent_ids: Optional[Tuple[str, str]] = None
    genome_id: str = ""
    archetype: str = "generic"

    def __post_init__(self) -> None:
        self.traits = {name: clamp_trait(name, value) for name, value in self.traits.items()}
        if not (math.isfinite(self.mutation_rate) and 0.0 <= self.mutation_rate <= 1.0):
            raise GeneticsError(f"mutation_rate must be in [0, 1], got {self.mutation_rate!r}")
        if not (math.isfinite(self.mutation_intensity) and 0.0 < self.mutation_intensity <= 1.0):
            raise GeneticsError(
                f"mutation_intensity must be in (0, 1], got {self.mutation_intensity!r}"
            )
        if self.generation < 0:
            raise GeneticsError(f"generation must be non-negative, got {self.generation}")
        if self.parent_ids is not None:
            self.parent_ids = tuple(self.parent_ids)
            if len(self.parent_ids) != 2:
                raise GeneticsError("parent_ids must reference exactly two parents")

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def random(cls, archetype: str, rng: pyrandom.Random) -> "Genome":
        """Create a random generation-0 genome for *archetype*."""
        from ecosim.genetics.archetypes import create_random_genome

        return create_random_genome(archetype, rng)

    @classmethod
    def from_parents(
        cls,
        parent1: "Genome",
        parent2: "Genome",
        rng: pyrandom.Random,
        mode: GeneticCrossoverMode = GeneticCrossoverMode.AVERAGING,
    ) -> "Genome":
        """Create an offspring genome (see ``reproduction.combine``)."""
        from ecosim.genetics.reproduction import combine

        return combine(parent1, parent2, rng, mode=mode)

    # =========================================================================
    # Mutation
    # =========================================================================

    def mutated(self, rng: pyrandom.Random) -> Tuple["Genome", List[MutationEvent]]:
        """Return a mutated copy and the events that produced it."""
        from ecosim.genetics.mutation import mutated

        return mutated(self, rng)

    def mutate(self, rng: pyrandom.Random) -> List[MutationEvent]:
        """Mutate this genome in place and return the applied events."""
        from ecosim.genetics.mutation import mutate

        return mutate(self, rng)

    def apply_mutations(self, events: List[MutationEvent]) -> None:
        """Apply already-computed mutation events to this genome."""
        for event in events:
            self.traits[event.trait] = clamp_trait(event.trait, event.new_value)
        self.mutation_history.extend(events)

    # =========================================================================
    # Accessors
    # =========================================================================

    def trait(self, name: str, default: float = 0.0) -> float:
        return self.traits.get(name, default)

    def copy(self) -> "Genome":
        """Return an independent copy with the same identity."""
        return replace(
            self,
            traits=dict(self.traits),
            mutation_history=list(self.mutation_history),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize this genome into JSON-compatible primitives."""
        from ecosim.genetics.genome_codec import genome_to_dict

        return genome_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Genome":
        """Deserialize a genome produced by ``to_dict``."""
        from ecosim.genetics.genome_codec import genome_from_dict

        return genome_from_dict(data)

    def validate(self) -> Dict[str, Any]:
        """Validate trait ranges/types; returns a dict with any issues found."""
        from ecosim.genetics.validation import validate_genome

        issues = validate_genome(self)
        return {"ok": not issues, "issues": issues}

    def assert_valid(self) -> None:
        """Raise GeneticsError if validation finds problems (debug aid)."""
        result = self.validate()
        if result["ok"]:
            return
        issues = "\n".join(result["issues"])
        raise GeneticsError(f"Invalid genome:\n{issues}")

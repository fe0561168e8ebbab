"""Genome serialization/deserialization helpers.

This module is the persistence boundary for ``ecosim.genetics.genome.Genome``.
The host's save system owns the storage format; these records guarantee that
every genome field round-trips exactly through JSON-compatible primitives.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ecosim.exceptions import GeneticsError, PersistenceError
from ecosim.genetics.genome import GENOME_SCHEMA_VERSION, Genome, MutationEvent, MutationType

logger = logging.getLogger(__name__)


class MutationEventRecord(BaseModel):
    """Persisted form of a MutationEvent."""

    model_config = ConfigDict(extra="ignore")

    trait: str
    old_value: float
    new_value: float
    generation: int = Field(ge=0)
    mutation_type: MutationType = MutationType.POINT

    @classmethod
    def from_event(cls, event: MutationEvent) -> "MutationEventRecord":
        return cls(
            trait=event.trait,
            old_value=event.old_value,
            new_value=event.new_value,
            generation=event.generation,
            mutation_type=event.mutation_type,
        )

    def to_event(self) -> MutationEvent:
        return MutationEvent(
            trait=self.trait,
            old_value=self.old_value,
            new_value=self.new_value,
            generation=self.generation,
            mutation_type=self.mutation_type,
        )


class GenomeRecord(BaseModel):
    """Persisted form of a Genome."""

    model_config = ConfigDict(extra="ignore")

    schema_version: int = GENOME_SCHEMA_VERSION
    genome_id: str = ""
    archetype: str = "generic"
    traits: Dict[str, float]
    mutation_rate: float = Field(ge=0.0, le=1.0)
    mutation_intensity: float = Field(gt=0.0, le=1.0)
    generation: int = Field(ge=0)
    mutation_history: List[MutationEventRecord] = Field(default_factory=list)
    parent_ids: Optional[Tuple[str, str]] = None

    @classmethod
    def from_genome(cls, genome: Genome) -> "GenomeRecord":
        return cls(
            genome_id=genome.genome_id,
            archetype=genome.archetype,
            traits=dict(genome.traits),
            mutation_rate=genome.mutation_rate,
            mutation_intensity=genome.mutation_intensity,
            generation=genome.generation,
            mutation_history=[MutationEventRecord.from_event(e) for e in genome.mutation_history],
            parent_ids=genome.parent_ids,
        )

    def to_genome(self) -> Genome:
        return Genome(
            traits=dict(self.traits),
            mutation_rate=self.mutation_rate,
            mutation_intensity=self.mutation_intensity,
            generation=self.generation,
            mutation_history=[record.to_event() for record in self.mutation_history],
            parent_ids=self.parent_ids,
            genome_id=self.genome_id,
            archetype=self.archetype,
        )


def genome_to_dict(genome: Genome) -> Dict[str, Any]:
    """Serialize a genome into JSON-compatible primitives."""
    return GenomeRecord.from_genome(genome).model_dump(mode="json")


def genome_from_dict(data: Dict[str, Any]) -> Genome:
    """Deserialize a genome produced by ``genome_to_dict``.

    Raises:
        PersistenceError: If the data is malformed or from a newer schema
    """
    try:
        record = GenomeRecord.model_validate(data)
    except ValidationError as e:
        raise PersistenceError(f"Invalid genome record: {e}") from e

    if record.schema_version > GENOME_SCHEMA_VERSION:
        raise PersistenceError(
            f"Genome schema version {record.schema_version} is newer than "
            f"supported version {GENOME_SCHEMA_VERSION}"
        )

    try:
        return record.to_genome()
    except GeneticsError as e:
        raise PersistenceError(f"Invalid genome record: {e}") from e


def genome_debug_snapshot(genome: Genome) -> Dict[str, Any]:
    """Return a compact, stable dict for logging/debugging."""
    return {
        "id": genome.genome_id[:8],
        "archetype": genome.archetype,
        "generation": genome.generation,
        "mutations": len(genome.mutation_history),
        "traits": {name: round(value, 3) for name, value in sorted(genome.traits.items())},
    }

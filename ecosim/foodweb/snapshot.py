"""Persistence records for food web state.

The host's save system decides where state lives; these records define what
must round-trip: the registry table and the population counts.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ecosim.exceptions import PersistenceError
from ecosim.foodweb.population import PopulationTracker
from ecosim.foodweb.trophic import TrophicEntry, TrophicLevel, TrophicRegistry

FOODWEB_SCHEMA_VERSION = 1


class RegistryEntryRecord(BaseModel):
    """Persisted form of one trophic registry entry."""

    model_config = ConfigDict(extra="ignore")

    element_type: str = Field(min_length=1)
    trophic_level: TrophicLevel
    prey_types: List[str] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, element_type: str, entry: TrophicEntry) -> "RegistryEntryRecord":
        return cls(
            element_type=element_type,
            trophic_level=entry.trophic_level,
            prey_types=sorted(entry.prey_types),
        )

    def to_entry(self) -> TrophicEntry:
        return TrophicEntry(self.trophic_level, frozenset(self.prey_types))


class FoodWebSnapshot(BaseModel):
    """Registry plus population counts at one point in time."""

    model_config = ConfigDict(extra="ignore")

    schema_version: int = FOODWEB_SCHEMA_VERSION
    registry: List[RegistryEntryRecord] = Field(default_factory=list)
    population_counts: Dict[str, int] = Field(default_factory=dict)

    @classmethod
    def capture(cls, registry: TrophicRegistry, tracker: PopulationTracker) -> "FoodWebSnapshot":
        return cls(
            registry=[
                RegistryEntryRecord.from_entry(element_type, entry)
                for element_type, entry in registry.entries().items()
            ],
            population_counts=tracker.get_population_counts(),
        )

    def restore_registry(self) -> TrophicRegistry:
        return TrophicRegistry({record.element_type: record.to_entry() for record in self.registry})

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FoodWebSnapshot":
        """Validate a dict produced by ``to_dict``.

        Raises:
            PersistenceError: If the data is malformed or from a newer schema
        """
        try:
            snapshot = cls.model_validate(data)
        except ValidationError as e:
            raise PersistenceError(f"Invalid food web snapshot: {e}") from e
        if snapshot.schema_version > FOODWEB_SCHEMA_VERSION:
            raise PersistenceError(
                f"Food web schema version {snapshot.schema_version} is newer than "
                f"supported version {FOODWEB_SCHEMA_VERSION}"
            )
        if any(count < 0 for count in snapshot.population_counts.values()):
            raise PersistenceError("Population counts must be non-negative")
        return snapshot

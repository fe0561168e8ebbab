"""Trophic classification and predator/prey eligibility.

The registry is a keyed table from organism type to a small record of
{trophic level, prey set}. New archetypes join the food web at runtime via
``register_element_type`` without touching any classification code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, List, Optional

from ecosim.exceptions import UnknownType

logger = logging.getLogger(__name__)


class TrophicLevel(IntEnum):
    """Rank in the food chain, totally ordered (PRODUCER lowest)."""

    PRODUCER = 0  # Plants - produce their own energy
    PRIMARY = 1  # Herbivores - eat producers
    SECONDARY = 2  # Carnivores - eat primary consumers
    TERTIARY = 3  # Apex/social consumers
    DECOMPOSER = 4  # Break down dead organisms

    @property
    def rank(self) -> int:
        return int(self)


@dataclass(frozen=True)
class TrophicEntry:
    """Registry record for one organism type."""

    trophic_level: TrophicLevel
    prey_types: FrozenSet[str] = frozenset()


DEFAULT_TROPHIC_LEVELS: Dict[str, TrophicLevel] = {
    "plant": TrophicLevel.PRODUCER,
    "creature": TrophicLevel.PRIMARY,
    "predator": TrophicLevel.SECONDARY,
    "tribe": TrophicLevel.TERTIARY,
    "fungus": TrophicLevel.DECOMPOSER,
}

DEFAULT_PREY: Dict[str, tuple] = {
    "creature": ("plant",),
    "predator": ("creature",),
    "tribe": ("creature", "plant"),
}


class TrophicRegistry:
    """Maps organism types to trophic levels and valid prey.

    Shared mutable state: one registry per SimulationContext, written only
    through ``register_element_type``.
    """

    def __init__(self, entries: Optional[Dict[str, TrophicEntry]] = None) -> None:
        self._entries: Dict[str, TrophicEntry] = dict(entries or {})

    @classmethod
    def with_defaults(cls) -> "TrophicRegistry":
        """Create a registry holding the baseline ecosystem types."""
        registry = cls()
        for element_type, level in DEFAULT_TROPHIC_LEVELS.items():
            registry.register_element_type(element_type, level, DEFAULT_PREY.get(element_type, ()))
        return registry

    def register_element_type(
        self,
        element_type: str,
        trophic_level: TrophicLevel,
        prey_types: Iterable[str] = (),
    ) -> TrophicEntry:
        """Insert or overwrite the entry for *element_type*.

        Prey types need not be registered yet; they are checked when a
        relationship is queried.
        """
        if not element_type:
            raise ValueError("element_type must be a non-empty string")
        entry = TrophicEntry(TrophicLevel(trophic_level), frozenset(prey_types))
        replaced = element_type in self._entries
        self._entries[element_type] = entry
        logger.info(
            "%s element type in food web: %s (trophic level: %s, prey: %s)",
            "Re-registered" if replaced else "Registered",
            element_type,
            entry.trophic_level.name,
            sorted(entry.prey_types),
        )
        return entry

    def _entry(self, element_type: str) -> TrophicEntry:
        try:
            return self._entries[element_type]
        except KeyError:
            raise UnknownType(element_type) from None

    def get_trophic_level(self, element_type: str) -> TrophicLevel:
        """Return the trophic level of a registered type.

        Raises:
            UnknownType: If the type was never registered
        """
        return self._entry(element_type).trophic_level

    def get_trophic_level_or(
        self, element_type: str, default: Optional[TrophicLevel]
    ) -> Optional[TrophicLevel]:
        """Return the trophic level, or *default* for unregistered types."""
        entry = self._entries.get(element_type)
        return entry.trophic_level if entry is not None else default

    def is_predator_prey_relationship(self, predator_type: str, prey_type: str) -> bool:
        """True iff *prey_type* is in the registered prey set of *predator_type*.

        The relation is asymmetric: A eating B says nothing about B eating A.

        Raises:
            UnknownType: If either type was never registered
        """
        entry = self._entry(predator_type)
        if prey_type not in self._entries:
            raise UnknownType(prey_type)
        return prey_type in entry.prey_types

    def is_registered(self, element_type: str) -> bool:
        return element_type in self._entries

    def known_types(self) -> List[str]:
        return list(self._entries)

    def entries(self) -> Dict[str, TrophicEntry]:
        """Return a copy of the registry table."""
        return dict(self._entries)

    def prey_types_of(self, predator_type: str) -> FrozenSet[str]:
        """Registered prey of *predator_type* (empty for unknown types)."""
        entry = self._entries.get(predator_type)
        return entry.prey_types if entry is not None else frozenset()

    def predator_types_of(self, prey_type: str) -> List[str]:
        """Types whose prey set includes *prey_type*, in registration order."""
        return [t for t, entry in self._entries.items() if prey_type in entry.prey_types]

    def __contains__(self, element_type: object) -> bool:
        return element_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)

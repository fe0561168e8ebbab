"""Population tracking for the food web.

This module tracks per-type population counts and per-region diversity.
``init_food_web_system`` is a reset-and-rebuild from a snapshot of the live
organism list; ``record_birth``/``record_removal`` are incremental updates
between snapshots.
"""

from __future__ import annotations

import logging
import math
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Tuple

from ecosim.config.foodweb import DIVERSITY_CELL_SIZE
from ecosim.events.domain_events import PopulationChangedEvent

if TYPE_CHECKING:
    from ecosim.events import EventBus

logger = logging.getLogger(__name__)

Region = Tuple[int, int]


@dataclass(frozen=True)
class RegionSnapshot:
    """Diversity of one spatial bucket.

    Attributes:
        region: (column, row) of the bucket
        type_counts: Organism type -> count inside the bucket
        richness: Number of distinct types present
        shannon_index: Shannon entropy of the type distribution
    """

    region: Region
    type_counts: Dict[str, int]
    richness: int
    shannon_index: float


def shannon_entropy(counts: Iterable[int]) -> float:
    """Calculate Shannon entropy (natural log) from a count distribution."""
    counts = [c for c in counts if c > 0]
    total = sum(counts)
    if total <= 0:
        return 0.0
    entropy = 0.0
    for count in counts:
        p = count / total
        entropy -= p * math.log(p)
    return entropy


def region_of(position: Tuple[float, float], cell_size: float) -> Region:
    return (math.floor(position[0] / cell_size), math.floor(position[1] / cell_size))


class PopulationTracker:
    """Tracks population counts and regional diversity.

    Attributes:
        total_births: Births recorded incrementally since the last rebuild
        total_removals: Removals recorded incrementally since the last rebuild
        max_diversity: Highest number of coexisting types ever observed
    """

    def __init__(self, event_bus: Optional["EventBus"] = None) -> None:
        self._event_bus = event_bus
        self._counts: Dict[str, int] = {}
        self._regions: Dict[Region, RegionSnapshot] = {}
        self.total_births = 0
        self.total_removals = 0
        self.max_diversity = 0

    def init_food_web_system(
        self,
        organisms: Iterable[Any],
        cell_size: float = DIVERSITY_CELL_SIZE,
    ) -> None:
        """Rebuild all counts from *organisms*, discarding previous state.

        Safe to call repeatedly, including with an empty list.
        """
        organisms = list(organisms)
        self._counts = dict(Counter(organism.type for organism in organisms))
        self.total_births = 0
        self.total_removals = 0
        self.update_regional_diversity(organisms, cell_size)
        self._observe_diversity()
        logger.debug("Population rebuilt from %d organisms: %s", len(organisms), self._counts)

    def load_counts(self, counts: Dict[str, int]) -> None:
        """Replace the counts with persisted ones (regions are not persisted)."""
        self._counts = dict(counts)
        self._regions = {}
        self._observe_diversity()

    def get_population_counts(self) -> Dict[str, int]:
        """Return a copy of type -> count as of the last rebuild/update."""
        return dict(self._counts)

    def count_of(self, element_type: str) -> int:
        return self._counts.get(element_type, 0)

    def record_birth(self, element_type: str, cause: Optional[str] = None) -> int:
        """Count one new organism of *element_type*; returns the new count."""
        count = self._counts.get(element_type, 0) + 1
        self._counts[element_type] = count
        self.total_births += 1
        self._observe_diversity()
        self._emit(element_type, count, 1, cause)
        return count

    def record_removal(self, element_type: str, cause: Optional[str] = None) -> int:
        """Count one removed organism; counts never drop below zero.

        A type that reaches zero keeps its key so extinctions stay visible.
        Removing from an absent or empty type changes nothing.
        """
        previous = self._counts.get(element_type, 0)
        if previous <= 0:
            return 0
        count = previous - 1
        self._counts[element_type] = count
        self.total_removals += 1
        self._emit(element_type, count, -1, cause)
        return count

    def total_diversity(self) -> int:
        """Number of types with at least one living organism."""
        return sum(1 for count in self._counts.values() if count > 0)

    def update_regional_diversity(
        self,
        organisms: Iterable[Any],
        cell_size: float = DIVERSITY_CELL_SIZE,
    ) -> Dict[Region, RegionSnapshot]:
        """Rebuild per-region diversity snapshots from organism positions.

        Organisms without a position are skipped.
        """
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")

        buckets: Dict[Region, Counter] = defaultdict(Counter)
        for organism in organisms:
            position = getattr(organism, "position", None)
            if position is None:
                continue
            buckets[region_of(position, cell_size)][organism.type] += 1

        self._regions = {
            region: RegionSnapshot(
                region=region,
                type_counts=dict(counts),
                richness=len(counts),
                shannon_index=shannon_entropy(counts.values()),
            )
            for region, counts in buckets.items()
        }
        return dict(self._regions)

    def get_regional_diversity(self) -> Dict[Region, RegionSnapshot]:
        return dict(self._regions)

    def _observe_diversity(self) -> None:
        self.max_diversity = max(self.max_diversity, self.total_diversity())

    def _emit(self, element_type: str, count: int, delta: int, cause: Optional[str]) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(PopulationChangedEvent(element_type, count, delta, cause))

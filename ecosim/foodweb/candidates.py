"""Candidate discovery for predator/prey interactions.

Hosts normally supply proximity pairs from their own spatial partitioning;
these helpers cover the simple case of filtering a flat organism list by
registered relationships and straight-line distance. Organisms without a
position are treated as always in range.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional, Tuple

from ecosim.foodweb.trophic import TrophicRegistry


def _distance(a: Any, b: Any) -> Optional[float]:
    pos_a = getattr(a, "position", None)
    pos_b = getattr(b, "position", None)
    if pos_a is None or pos_b is None:
        return None
    return math.hypot(pos_a[0] - pos_b[0], pos_a[1] - pos_b[1])


def _in_range(a: Any, b: Any, max_distance: float) -> bool:
    distance = _distance(a, b)
    return distance is None or distance <= max_distance


def potential_prey(
    predator: Any,
    organisms: Iterable[Any],
    registry: TrophicRegistry,
    max_distance: float = math.inf,
) -> List[Any]:
    """Organisms *predator* may eat within *max_distance*."""
    prey_types = registry.prey_types_of(predator.type)
    if not prey_types:
        return []
    return [
        organism
        for organism in organisms
        if organism is not predator
        and organism.type in prey_types
        and _in_range(predator, organism, max_distance)
    ]


def potential_predators(
    prey: Any,
    organisms: Iterable[Any],
    registry: TrophicRegistry,
    max_distance: float = math.inf,
) -> List[Any]:
    """Organisms that may eat *prey* within *max_distance*."""
    predator_types = set(registry.predator_types_of(prey.type))
    if not predator_types:
        return []
    return [
        organism
        for organism in organisms
        if organism is not prey
        and organism.type in predator_types
        and _in_range(prey, organism, max_distance)
    ]


def candidate_pairs(
    organisms: Iterable[Any],
    registry: TrophicRegistry,
    max_distance: float = math.inf,
) -> List[Tuple[Any, Any]]:
    """All (predator, prey) pairs in range, predators in list order.

    This is O(N^2); large worlds should build pairs from a spatial index.
    """
    organisms = list(organisms)
    pairs: List[Tuple[Any, Any]] = []
    for predator in organisms:
        for prey in potential_prey(predator, organisms, registry, max_distance):
            pairs.append((predator, prey))
    return pairs

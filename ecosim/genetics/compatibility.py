"""Genetic similarity between genomes.

Compatibility drives reproduction-viability heuristics: closely related
genomes score high because combination propagates shared trait values.
"""

import math
from typing import List, Optional

from ecosim.config.genetics import NO_SHARED_TRAITS_COMPATIBILITY
from ecosim.genetics.genome import Genome


def _shared_traits(genome1: Genome, genome2: Genome) -> List[str]:
    return [name for name in genome1.traits if name in genome2.traits]


def calculate_compatibility(genome1: Optional[Genome], genome2: Optional[Genome]) -> float:
    """Return trait similarity in [0, 1] (1 - mean absolute trait distance).

    Returns 0.0 when either genome is missing and a neutral 0.5 when the
    genomes share no traits.
    """
    if genome1 is None or genome2 is None:
        return 0.0

    shared = _shared_traits(genome1, genome2)
    if not shared:
        return NO_SHARED_TRAITS_COMPATIBILITY

    total = sum(abs(genome1.traits[name] - genome2.traits[name]) for name in shared)
    return max(0.0, min(1.0, 1.0 - total / len(shared)))


def genetic_distance(genome1: Genome, genome2: Genome) -> float:
    """Root-mean-square distance over shared traits (0.0 = identical)."""
    shared = _shared_traits(genome1, genome2)
    if not shared:
        return 0.0
    distance_sq = sum((genome1.traits[name] - genome2.traits[name]) ** 2 for name in shared)
    return math.sqrt(distance_sq / len(shared))

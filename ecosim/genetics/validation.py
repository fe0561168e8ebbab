"""Validation helpers for genetic data structures.

These functions are intended for debugging and safety checks, not hot-path logic.
They help catch subtle bugs (out-of-range traits, wrong types) close to the source.
"""

from __future__ import annotations

import math
from typing import List

from ecosim.config.genetics import TRAIT_MAX, TRAIT_MIN
from ecosim.genetics.genome import Genome, MutationEvent


def validate_genome(genome: Genome, *, path: str = "genome") -> List[str]:
    """Validate a genome's traits and metadata.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []

    if not isinstance(genome.traits, dict):
        issues.append(f"{path}.traits: expected dict, got {type(genome.traits).__name__}")
        return issues

    for name, value in genome.traits.items():
        if not isinstance(value, (int, float)):
            issues.append(f"{path}.traits.{name}: expected float, got {type(value).__name__}")
            continue
        if not math.isfinite(float(value)):
            issues.append(f"{path}.traits.{name}: not finite ({value})")
            continue
        if not TRAIT_MIN <= value <= TRAIT_MAX:
            issues.append(f"{path}.traits.{name}: {value} not in [{TRAIT_MIN}, {TRAIT_MAX}]")

    if not 0.0 <= genome.mutation_rate <= 1.0:
        issues.append(f"{path}.mutation_rate: {genome.mutation_rate} not in [0, 1]")
    if genome.generation < 0:
        issues.append(f"{path}.generation: {genome.generation} < 0")

    for i, event in enumerate(genome.mutation_history):
        if not isinstance(event, MutationEvent):
            issues.append(
                f"{path}.mutation_history[{i}]: expected MutationEvent, got {type(event).__name__}"
            )
        elif event.generation > genome.generation:
            issues.append(
                f"{path}.mutation_history[{i}]: generation {event.generation} is after "
                f"genome generation {genome.generation}"
            )

    return issues

"""Trait mutation.

``mutated`` is the pure form: it returns a new genome plus the events that
produced it. ``mutate`` applies those same events to the genome it was given
and returns them, for callers that own the genome outright.
"""

import random as pyrandom
from dataclasses import replace
from typing import List, Optional, Tuple

from ecosim.config.genetics import (
    ACTIVATION_MIN,
    MUTATION_TYPE_WEIGHTS,
    SPECIAL_TRAITS,
    TRAIT_MAX,
)
from ecosim.config.simulation_config import GeneticsConfig
from ecosim.genetics.genome import Genome, MutationEvent, MutationType
from ecosim.genetics.trait import clamp_trait
from ecosim.util.rng import require_rng_param

_MUTATION_TYPE_TABLE: Tuple[Tuple[MutationType, float], ...] = tuple(
    (MutationType(name), weight) for name, weight in MUTATION_TYPE_WEIGHTS.items()
)


def choose_mutation_type(rng: pyrandom.Random) -> MutationType:
    """Pick a mutation kind by cumulative probability."""
    roll = rng.random()
    cumulative = 0.0
    for mutation_type, weight in _MUTATION_TYPE_TABLE:
        cumulative += weight
        if roll < cumulative:
            return mutation_type
    return MutationType.POINT


def mutate_value(
    name: str,
    value: float,
    mutation_type: MutationType,
    *,
    intensity: float,
    jump_multiplier: float,
    rng: pyrandom.Random,
) -> Tuple[float, MutationType]:
    """Apply one mutation to a trait value.

    Activation and deactivation only affect special traits in the matching
    state; anything else falls back to a point mutation.

    Returns:
        (new clamped value, mutation type actually applied)
    """
    special = name in SPECIAL_TRAITS
    if mutation_type is MutationType.ACTIVATION and special and value == 0.0:
        return rng.uniform(ACTIVATION_MIN, TRAIT_MAX), MutationType.ACTIVATION
    if mutation_type is MutationType.DEACTIVATION and special and value > 0.0:
        return 0.0, MutationType.DEACTIVATION

    if mutation_type is MutationType.JUMP:
        delta = rng.uniform(-1.0, 1.0) * intensity * jump_multiplier
        return clamp_trait(name, value + delta), MutationType.JUMP

    delta = rng.uniform(-1.0, 1.0) * intensity
    return clamp_trait(name, value + delta), MutationType.POINT


def mutated(
    genome: Genome,
    rng: pyrandom.Random,
    *,
    config: Optional[GeneticsConfig] = None,
) -> Tuple[Genome, List[MutationEvent]]:
    """Run one mutation pass without touching *genome*.

    For every trait a uniform sample below ``genome.mutation_rate`` triggers
    a mutation. The returned genome's history is the input history followed
    by exactly the returned events.
    """
    rng = require_rng_param(rng, "mutated")
    jump_multiplier = (config or GeneticsConfig()).jump_multiplier

    traits = dict(genome.traits)
    events: List[MutationEvent] = []
    for name, old_value in genome.traits.items():
        if rng.random() >= genome.mutation_rate:
            continue
        mutation_type = choose_mutation_type(rng)
        new_value, applied_type = mutate_value(
            name,
            old_value,
            mutation_type,
            intensity=genome.mutation_intensity,
            jump_multiplier=jump_multiplier,
            rng=rng,
        )
        traits[name] = new_value
        events.append(
            MutationEvent(
                trait=name,
                old_value=old_value,
                new_value=new_value,
                generation=genome.generation,
                mutation_type=applied_type,
            )
        )

    child = replace(
        genome,
        traits=traits,
        mutation_history=[*genome.mutation_history, *events],
    )
    return child, events


def mutate(
    genome: Genome,
    rng: pyrandom.Random,
    *,
    config: Optional[GeneticsConfig] = None,
) -> List[MutationEvent]:
    """Mutate *genome* in place and return the applied events.

    Anyone else holding a reference to *genome* observes the change; use
    ``mutated`` when that is not wanted.
    """
    _, events = mutated(genome, rng, config=config)
    genome.apply_mutations(events)
    return events

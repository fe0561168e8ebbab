"""Sexual combination of two genomes."""

import logging
import random as pyrandom
from typing import Dict, List, Optional, Tuple

from ecosim.config.simulation_config import GeneticsConfig
from ecosim.genetics.genome import GeneticCrossoverMode, Genome
from ecosim.genetics.mutation import mutate
from ecosim.genetics.trait import clamp_trait
from ecosim.util.rng import random_identifier, require_rng_param

logger = logging.getLogger(__name__)


def _trait_union(parent1: Genome, parent2: Genome) -> List[str]:
    names = list(parent1.traits)
    names.extend(name for name in parent2.traits if name not in parent1.traits)
    return names


def _inherit_trait(
    val1: float,
    val2: float,
    mode: GeneticCrossoverMode,
    config: GeneticsConfig,
    rng: pyrandom.Random,
) -> float:
    if mode is GeneticCrossoverMode.RECOMBINATION:
        if rng.random() < 0.5:
            chosen, other = val1, val2
        else:
            chosen, other = val2, val1
        # Partial crossover pulls the chosen allele toward the other parent
        if rng.random() < config.crossover_chance:
            blend = rng.uniform(0.0, config.crossover_max_blend)
            chosen = chosen * (1.0 - blend) + other * blend
        return chosen

    variance = config.averaging_variance
    return (val1 + val2) / 2.0 + rng.uniform(-variance, variance)


def combine(
    parent1: Genome,
    parent2: Genome,
    rng: pyrandom.Random,
    *,
    mode: GeneticCrossoverMode = GeneticCrossoverMode.AVERAGING,
    config: Optional[GeneticsConfig] = None,
    parent_ids: Optional[Tuple[str, str]] = None,
) -> Genome:
    """Create a child genome from two parents.

    Every trait is derived from both parents (a trait only one parent carries
    is copied from it), then the child goes through one mutation pass. The
    child's history holds only the events of that pass; ancestry is tracked
    through ``parent_ids``.

    Args:
        parent1: First parent genome
        parent2: Second parent genome
        rng: Simulation RNG
        mode: Averaging with variance, or per-trait parent selection
        config: Genetics tuning (defaults when omitted)
        parent_ids: Override for the recorded ancestor identifiers;
            defaults to both parents' genome_id

    Returns:
        The new child genome
    """
    rng = require_rng_param(rng, "combine")
    config = config or GeneticsConfig()

    traits: Dict[str, float] = {}
    for name in _trait_union(parent1, parent2):
        if name not in parent2.traits:
            traits[name] = parent1.traits[name]
        elif name not in parent1.traits:
            traits[name] = parent2.traits[name]
        else:
            value = _inherit_trait(parent1.traits[name], parent2.traits[name], mode, config, rng)
            traits[name] = clamp_trait(name, value)

    if parent1.archetype != parent2.archetype:
        logger.debug(
            "Combining genomes of different archetypes (%s, %s)",
            parent1.archetype,
            parent2.archetype,
        )

    child = Genome(
        traits=traits,
        mutation_rate=(parent1.mutation_rate + parent2.mutation_rate) / 2.0,
        mutation_intensity=(parent1.mutation_intensity + parent2.mutation_intensity) / 2.0,
        generation=max(parent1.generation, parent2.generation) + 1,
        mutation_history=[],
        parent_ids=parent_ids or (parent1.genome_id, parent2.genome_id),
        genome_id=random_identifier(rng),
        archetype=parent1.archetype,
    )
    mutate(child, rng, config=config)
    return child

"""Genetics model for ecosystem organisms.

This package provides:

- Genome: normalized trait mapping plus mutation/lineage metadata
- Archetype profiles and random genome creation
- Mutation (pure ``mutated`` and in-place ``mutate``)
- Sexual combination and genetic compatibility
- Genotype -> phenotype expression and display color
- Persistence records that round-trip every genome field
"""

# Re-export main classes for package convenience
from ecosim.genetics.archetypes import (
    ARCHETYPE_PROFILES,
    ArchetypeProfile,
    create_random_genome,
    get_archetype_profile,
)
from ecosim.genetics.coloring import calculate_genetic_color
from ecosim.genetics.compatibility import calculate_compatibility, genetic_distance
from ecosim.genetics.expression import express_traits, expressed_trait
from ecosim.genetics.genome import (
    GeneticCrossoverMode,
    Genome,
    MutationEvent,
    MutationType,
)
from ecosim.genetics.genome_codec import GenomeRecord, genome_from_dict, genome_to_dict
from ecosim.genetics.mutation import mutate, mutated
from ecosim.genetics.reproduction import combine
from ecosim.genetics.trait import TraitClampPolicy, TraitSpec, clamp_trait

__all__ = [
    # Core classes
    "Genome",
    "MutationEvent",
    "MutationType",
    "GeneticCrossoverMode",
    "TraitSpec",
    "TraitClampPolicy",
    "ArchetypeProfile",
    "ARCHETYPE_PROFILES",
    # Creation and expression
    "create_random_genome",
    "get_archetype_profile",
    "express_traits",
    "expressed_trait",
    "calculate_genetic_color",
    # Mutation and reproduction
    "mutate",
    "mutated",
    "combine",
    "calculate_compatibility",
    "genetic_distance",
    "clamp_trait",
    # Serialization
    "GenomeRecord",
    "genome_to_dict",
    "genome_from_dict",
]

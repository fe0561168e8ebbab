"""Archetype trait profiles and random genome creation.

Each archetype declares which traits its genomes carry, the sub-range each
trait is drawn from, and the range its mutation parameters come from.
Predators skew ``speed`` and ``size`` high; plants carry no locomotion traits.
Unknown archetypes fall back to a generic profile drawn from the full [0, 1]
range, so dynamically registered organism types can still own genomes.
"""

import random as pyrandom
from dataclasses import dataclass
from typing import Dict, Tuple

from ecosim.config.genetics import (
    DEFAULT_MUTATION_INTENSITY_RANGE,
    DEFAULT_MUTATION_RATE_RANGE,
)
from ecosim.genetics.genome import Genome
from ecosim.genetics.trait import TraitSpec
from ecosim.util.rng import random_identifier, require_rng_param

GENERIC_ARCHETYPE = "generic"


@dataclass(frozen=True)
class ArchetypeProfile:
    """Creation-time genetics for one organism archetype."""

    name: str
    trait_specs: Tuple[TraitSpec, ...]
    mutation_rate_range: Tuple[float, float] = DEFAULT_MUTATION_RATE_RANGE
    mutation_intensity_range: Tuple[float, float] = DEFAULT_MUTATION_INTENSITY_RANGE

    @property
    def trait_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.trait_specs)


PLANT_PROFILE = ArchetypeProfile(
    name="plant",
    trait_specs=(
        TraitSpec("size", 0.4, 0.6),
        TraitSpec("color", 0.5, 0.9),
        TraitSpec("body_shape", 0.3, 1.0),
        TraitSpec("skin_texture", 0.2, 1.0),
        TraitSpec("reproduction_chance", 0.4, 0.7),
        TraitSpec("lifespan", 0.5, 0.9),
        TraitSpec("immune_system", 0.6, 1.0),
        TraitSpec("water_dependency", 0.5, 0.9),
        TraitSpec("temperature_tolerance", 0.4, 0.9),
        TraitSpec("radiation_resistance", 0.4, 1.0),
        TraitSpec("toxin_resistance", 0.5, 1.0),
        TraitSpec("camouflage", 0.5, 1.0, activation_chance=0.10),
        TraitSpec("regeneration", 0.3, 1.0, activation_chance=0.05),
    ),
    mutation_rate_range=(0.05, 0.08),
    mutation_intensity_range=(0.06, 0.10),
)

CREATURE_PROFILE = ArchetypeProfile(
    name="creature",
    trait_specs=(
        TraitSpec("size", 0.35, 0.65),
        TraitSpec("color", 0.5, 0.9),
        TraitSpec("body_shape", 0.4, 1.0),
        TraitSpec("skin_texture", 0.3, 1.0),
        TraitSpec("speed", 0.4, 0.7),
        TraitSpec("aggressiveness", 0.3, 0.7),
        TraitSpec("intelligence", 0.4, 0.8),
        TraitSpec("social_behavior", 0.6, 1.0),
        TraitSpec("metabolism_rate", 0.5, 0.8),
        TraitSpec("reproduction_chance", 0.5, 0.8),
        TraitSpec("lifespan", 0.6, 1.0),
        TraitSpec("immune_system", 0.5, 1.0),
        TraitSpec("water_dependency", 0.6, 1.0),
        TraitSpec("temperature_tolerance", 0.5, 0.9),
        TraitSpec("radiation_resistance", 0.3, 0.7),
        TraitSpec("toxin_resistance", 0.4, 0.8),
        TraitSpec("camouflage", 0.4, 1.0, activation_chance=0.08),
        TraitSpec("night_vision", 0.5, 1.0, activation_chance=0.10),
        TraitSpec("regeneration", 0.3, 0.8, activation_chance=0.03),
    ),
    mutation_rate_range=(0.04, 0.08),
    mutation_intensity_range=(0.06, 0.10),
)

PREDATOR_PROFILE = ArchetypeProfile(
    name="predator",
    trait_specs=(
        TraitSpec("size", 0.6, 0.9),
        TraitSpec("color", 0.4, 0.8),
        TraitSpec("body_shape", 0.6, 1.0),
        TraitSpec("skin_texture", 0.5, 1.0),
        TraitSpec("speed", 0.6, 1.0),
        TraitSpec("aggressiveness", 0.7, 1.0),
        TraitSpec("intelligence", 0.6, 1.0),
        TraitSpec("social_behavior", 0.4, 1.0),
        TraitSpec("metabolism_rate", 0.6, 0.9),
        TraitSpec("reproduction_chance", 0.2, 0.4),
        TraitSpec("lifespan", 0.7, 1.0),
        TraitSpec("immune_system", 0.7, 1.0),
        TraitSpec("water_dependency", 0.5, 0.8),
        TraitSpec("temperature_tolerance", 0.6, 1.0),
        TraitSpec("radiation_resistance", 0.4, 0.7),
        TraitSpec("toxin_resistance", 0.6, 1.0),
        TraitSpec("camouflage", 0.6, 1.0, activation_chance=0.15),
        TraitSpec("night_vision", 0.7, 1.0, activation_chance=0.25),
        TraitSpec("regeneration", 0.4, 0.8, activation_chance=0.05),
    ),
    mutation_rate_range=(0.03, 0.06),
    mutation_intensity_range=(0.05, 0.08),
)

GENERIC_PROFILE = ArchetypeProfile(
    name=GENERIC_ARCHETYPE,
    trait_specs=(
        TraitSpec("size"),
        TraitSpec("color"),
        TraitSpec("speed"),
        TraitSpec("intelligence"),
        TraitSpec("metabolism_rate"),
        TraitSpec("lifespan"),
        TraitSpec("immune_system"),
    ),
)

ARCHETYPE_PROFILES: Dict[str, ArchetypeProfile] = {
    profile.name: profile for profile in (PLANT_PROFILE, CREATURE_PROFILE, PREDATOR_PROFILE)
}


def get_archetype_profile(archetype: str) -> ArchetypeProfile:
    """Return the profile for *archetype*, or the generic one."""
    return ARCHETYPE_PROFILES.get(archetype, GENERIC_PROFILE)


def create_random_genome(archetype: str, rng: pyrandom.Random) -> Genome:
    """Create a generation-0 genome for *archetype*.

    Traits are drawn in the profile's declared order, so a seeded RNG gives
    the same genome every time.
    """
    rng = require_rng_param(rng, "create_random_genome")
    profile = get_archetype_profile(archetype)
    traits = {spec.name: spec.random_value(rng) for spec in profile.trait_specs}
    return Genome(
        traits=traits,
        mutation_rate=rng.uniform(*profile.mutation_rate_range),
        mutation_intensity=rng.uniform(*profile.mutation_intensity_range),
        generation=0,
        genome_id=random_identifier(rng),
        archetype=archetype,
    )

"""Genetics configuration constants."""

# Trait value bounds (all traits are normalized)
TRAIT_MIN = 0.0
TRAIT_MAX = 1.0

# Mutation kinds and their selection probabilities (must sum to 1.0)
MUTATION_TYPE_WEIGHTS = {
    "point": 0.85,  # Small shift of +/- intensity
    "jump": 0.10,  # Larger shift of +/- JUMP_MULTIPLIER * intensity
    "activation": 0.03,  # Switch an inactive special trait on
    "deactivation": 0.02,  # Switch an active special trait off
}
JUMP_MULTIPLIER = 3.0

# Special traits are "inactive" at exactly 0.0
SPECIAL_TRAITS = ("camouflage", "night_vision", "regeneration")
ACTIVATION_MIN = 0.3  # Activated special traits land in [0.3, 1.0]

# Defaults for genomes of unknown archetypes
DEFAULT_MUTATION_RATE_RANGE = (0.04, 0.06)
DEFAULT_MUTATION_INTENSITY_RANGE = (0.08, 0.12)

# Combination
AVERAGING_VARIANCE = 0.05  # Child value = parent mean +/- this
CROSSOVER_CHANCE = 0.10  # Per-trait chance of partial allele crossover
CROSSOVER_MAX_BLEND = 0.30  # Crossover blends up to 30% toward the other parent

# Compatibility when two genomes share no traits
NO_SHARED_TRAITS_COMPATIBILITY = 0.5

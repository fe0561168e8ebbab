"""Food web configuration constants."""

# Fraction of energy passed exactly one trophic level up
ENERGY_TRANSFER_EFFICIENCY = 0.10

# Predation success weighting
PREDATION_BASE_CHANCE = 0.5
PREDATION_SPEED_FACTOR = 0.4
PREDATION_SIZE_FACTOR = 0.3
PREDATION_HEALTH_FACTOR = 0.2
PREDATION_INTELLIGENCE_FACTOR = 0.1
PREDATION_MAX_STAT_RATIO = 3.0  # Caps a single stat's influence
PREDATION_MIN_SUCCESS = 0.1
PREDATION_MAX_SUCCESS = 0.9
DEFAULT_INTELLIGENCE = 0.5  # Used when a genome lacks an intelligence trait
DEFAULT_PREY_ENERGY = 10.0  # Used when a prey record carries no energy

# Cascade effect propagation
CASCADE_ENABLED = True
CASCADE_MAX_DEPTH = 3
CASCADE_STRENGTH_DECAY = 0.7

# Regional diversity bucketing
DIVERSITY_CELL_SIZE = 100.0

"""Dataclass configuration objects for a simulation context."""

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any

from ecosim.config.foodweb import (
    CASCADE_ENABLED,
    CASCADE_MAX_DEPTH,
    CASCADE_STRENGTH_DECAY,
    DIVERSITY_CELL_SIZE,
    ENERGY_TRANSFER_EFFICIENCY,
    PREDATION_BASE_CHANCE,
    PREDATION_HEALTH_FACTOR,
    PREDATION_INTELLIGENCE_FACTOR,
    PREDATION_MAX_STAT_RATIO,
    PREDATION_MAX_SUCCESS,
    PREDATION_MIN_SUCCESS,
    PREDATION_SIZE_FACTOR,
    PREDATION_SPEED_FACTOR,
)
from ecosim.config.genetics import (
    AVERAGING_VARIANCE,
    CROSSOVER_CHANCE,
    CROSSOVER_MAX_BLEND,
    JUMP_MULTIPLIER,
)
from ecosim.exceptions import ConfigurationError


@dataclass(frozen=True)
class PredationFactors:
    """Weights for the predator/prey stat comparison."""

    base_chance: float = PREDATION_BASE_CHANCE
    speed: float = PREDATION_SPEED_FACTOR
    size: float = PREDATION_SIZE_FACTOR
    health: float = PREDATION_HEALTH_FACTOR
    intelligence: float = PREDATION_INTELLIGENCE_FACTOR
    max_stat_ratio: float = PREDATION_MAX_STAT_RATIO
    min_success: float = PREDATION_MIN_SUCCESS
    max_success: float = PREDATION_MAX_SUCCESS

    def __post_init__(self) -> None:
        if not 0.0 < self.min_success <= self.max_success < 1.0:
            raise ConfigurationError(
                f"Predation bounds must satisfy 0 < min <= max < 1, "
                f"got [{self.min_success}, {self.max_success}]"
            )
        for name in ("speed", "size", "health", "intelligence"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"Predation factor {name!r} must be non-negative")
        if self.max_stat_ratio < 1.0:
            raise ConfigurationError("max_stat_ratio must be >= 1.0")


@dataclass(frozen=True)
class CascadeSettings:
    """Depth and decay of cascade-effect propagation."""

    enabled: bool = CASCADE_ENABLED
    max_depth: int = CASCADE_MAX_DEPTH
    strength_decay: float = CASCADE_STRENGTH_DECAY

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ConfigurationError("Cascade max_depth must be >= 0")
        if not 0.0 <= self.strength_decay <= 1.0:
            raise ConfigurationError("Cascade strength_decay must be in [0, 1]")


@dataclass(frozen=True)
class FoodWebConfig:
    """Food web tuning.

    Attributes:
        energy_transfer_efficiency: Fraction of prey energy passed one level up
        predation: Stat weights and success bounds for predation rolls
        cascade: Cascade-effect propagation settings
        diversity_cell_size: Edge length of regional diversity buckets
    """

    energy_transfer_efficiency: float = ENERGY_TRANSFER_EFFICIENCY
    predation: PredationFactors = field(default_factory=PredationFactors)
    cascade: CascadeSettings = field(default_factory=CascadeSettings)
    diversity_cell_size: float = DIVERSITY_CELL_SIZE

    def __post_init__(self) -> None:
        if not 0.0 <= self.energy_transfer_efficiency <= 1.0:
            raise ConfigurationError("energy_transfer_efficiency must be in [0, 1]")
        if not (math.isfinite(self.diversity_cell_size) and self.diversity_cell_size > 0):
            raise ConfigurationError("diversity_cell_size must be a positive number")

    def updated(self, **changes: Any) -> "FoodWebConfig":
        """Return a copy with *changes* applied.

        Nested sections accept either a replacement object or a dict of
        field overrides, e.g. ``config.updated(cascade={"max_depth": 1})``.
        """
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ConfigurationError(f"Unknown food web config keys: {sorted(unknown)}")

        for section in ("predation", "cascade"):
            value = changes.get(section)
            if isinstance(value, dict):
                try:
                    changes[section] = replace(getattr(self, section), **value)
                except TypeError as e:
                    raise ConfigurationError(f"Invalid {section} override: {e}") from e
        return replace(self, **changes)


@dataclass(frozen=True)
class GeneticsConfig:
    """Genetics tuning shared by combination and mutation."""

    jump_multiplier: float = JUMP_MULTIPLIER
    averaging_variance: float = AVERAGING_VARIANCE
    crossover_chance: float = CROSSOVER_CHANCE
    crossover_max_blend: float = CROSSOVER_MAX_BLEND

    def __post_init__(self) -> None:
        if self.averaging_variance < 0:
            raise ConfigurationError("averaging_variance must be >= 0")
        if not 0.0 <= self.crossover_chance <= 1.0:
            raise ConfigurationError("crossover_chance must be in [0, 1]")
        if not 0.0 <= self.crossover_max_blend <= 0.5:
            raise ConfigurationError("crossover_max_blend must be in [0, 0.5]")


@dataclass(frozen=True)
class SimulationConfig:
    """Top-level configuration for a SimulationContext."""

    genetics: GeneticsConfig = field(default_factory=GeneticsConfig)
    foodweb: FoodWebConfig = field(default_factory=FoodWebConfig)

"""Configuration package for the ecosystem core.

Constants live in per-concern modules (``genetics``, ``foodweb``); the
dataclass config objects in ``simulation_config`` bundle them for a
SimulationContext.
"""

from ecosim.config.simulation_config import (
    CascadeSettings,
    FoodWebConfig,
    GeneticsConfig,
    PredationFactors,
    SimulationConfig,
)

__all__ = [
    "CascadeSettings",
    "FoodWebConfig",
    "GeneticsConfig",
    "PredationFactors",
    "SimulationConfig",
]

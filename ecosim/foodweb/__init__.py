"""Food web model: trophic registry, predation, energy flow and populations."""

from ecosim.foodweb.candidates import candidate_pairs, potential_predators, potential_prey
from ecosim.foodweb.cascade import (
    CascadeCoordinator,
    CascadeEffect,
    CascadeReport,
    PairFailure,
)
from ecosim.foodweb.energy import EnergyDelta, EnergyLedger, calculate_energy_transfer
from ecosim.foodweb.population import PopulationTracker, RegionSnapshot, shannon_entropy
from ecosim.foodweb.predation import PredationResolver, PredationResult
from ecosim.foodweb.snapshot import FoodWebSnapshot, RegistryEntryRecord
from ecosim.foodweb.trophic import TrophicEntry, TrophicLevel, TrophicRegistry

__all__ = [
    "CascadeCoordinator",
    "CascadeEffect",
    "CascadeReport",
    "EnergyDelta",
    "EnergyLedger",
    "FoodWebSnapshot",
    "PairFailure",
    "PopulationTracker",
    "PredationResolver",
    "PredationResult",
    "RegionSnapshot",
    "RegistryEntryRecord",
    "TrophicEntry",
    "TrophicLevel",
    "TrophicRegistry",
    "calculate_energy_transfer",
    "candidate_pairs",
    "potential_predators",
    "potential_prey",
    "shannon_entropy",
]

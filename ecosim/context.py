"""SimulationContext: explicit ecosystem state owned by the host loop.

The context bundles everything the genetics and food web rules share for
one simulated world (RNG, configuration, trophic registry, population
counts, energy ledger and event bus) so nothing lives in module-level
globals. The host creates one context per world and passes organisms in
each tick.
"""

from __future__ import annotations

import logging
import random as pyrandom
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ecosim.color import Color
from ecosim.config.simulation_config import FoodWebConfig, SimulationConfig
from ecosim.events import (
    ElementTypeRegisteredEvent,
    EventBus,
    GeneticReproductionEvent,
    MutationOccurredEvent,
)
from ecosim.foodweb.candidates import candidate_pairs
from ecosim.foodweb.cascade import CascadeCoordinator, CascadeEffect, CascadeReport
from ecosim.foodweb.energy import EnergyLedger
from ecosim.foodweb.population import PopulationTracker, RegionSnapshot
from ecosim.foodweb.predation import PredationResolver, PredationResult
from ecosim.foodweb.snapshot import FoodWebSnapshot
from ecosim.foodweb.trophic import TrophicEntry, TrophicLevel, TrophicRegistry
from ecosim.genetics import (
    GeneticCrossoverMode,
    Genome,
    MutationEvent,
    calculate_compatibility,
    calculate_genetic_color,
    combine,
    create_random_genome,
    mutate,
    mutated,
)

logger = logging.getLogger(__name__)


class SimulationContext:
    """Facade over the genetics and food web subsystems of one world.

    Attributes:
        rng: The world's random source; every draw goes through it
        config: Current configuration
        event_bus: Bus observers subscribe to for domain events
        registry: Trophic registry (type -> level and prey)
        population: Per-type counts and regional diversity
        ledger: Energy transfer calculator and flow audit
        resolver: Predation probability and rolls
        coordinator: Per-tick interaction pass
    """

    def __init__(
        self,
        rng: Optional[pyrandom.Random] = None,
        *,
        seed: Optional[int] = None,
        config: Optional[SimulationConfig] = None,
        registry: Optional[TrophicRegistry] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """Initialize the context.

        Args:
            rng: Random source to use; takes precedence over ``seed``
            seed: Seed for a new ``random.Random`` when no rng is given
            config: Simulation configuration (defaults when omitted)
            registry: Trophic registry; the baseline food web when omitted
            event_bus: Bus to emit domain events on; a new one when omitted
        """
        self.rng = rng if rng is not None else pyrandom.Random(seed)
        self.config = config or SimulationConfig()
        self.event_bus = event_bus or EventBus()
        self.registry = registry if registry is not None else TrophicRegistry.with_defaults()
        self.population = PopulationTracker(self.event_bus)
        self._build_foodweb_components()
        logger.info(
            "Simulation context ready with %d registered element types", len(self.registry)
        )

    def _build_foodweb_components(self) -> None:
        foodweb = self.config.foodweb
        self.ledger = EnergyLedger(self.registry, foodweb.energy_transfer_efficiency)
        self.resolver = PredationResolver(self.registry, self.ledger, self.rng, foodweb.predation)
        self.coordinator = CascadeCoordinator(
            self.registry,
            self.resolver,
            self.ledger,
            self.population,
            self.event_bus,
            foodweb.cascade,
        )

    # =========================================================================
    # Genetics
    # =========================================================================

    def create_random_genome(self, archetype: str) -> Genome:
        return create_random_genome(archetype, self.rng)

    def combine(
        self,
        parent1: Genome,
        parent2: Genome,
        mode: GeneticCrossoverMode = GeneticCrossoverMode.AVERAGING,
    ) -> Genome:
        """Create a child genome and announce the reproduction."""
        compatibility = calculate_compatibility(parent1, parent2)
        child = combine(parent1, parent2, self.rng, mode=mode, config=self.config.genetics)
        self._emit_mutations(child, child.mutation_history)
        self.event_bus.emit(
            GeneticReproductionEvent(
                child_id=child.genome_id,
                parent_ids=child.parent_ids,
                generation=child.generation,
                mutation_count=len(child.mutation_history),
                compatibility=compatibility,
            )
        )
        return child

    def mutate(self, genome: Genome) -> List[MutationEvent]:
        """Mutate *genome* in place; returns the applied events."""
        events = mutate(genome, self.rng, config=self.config.genetics)
        self._emit_mutations(genome, events)
        return events

    def mutated(self, genome: Genome) -> Tuple[Genome, List[MutationEvent]]:
        """Return a mutated copy of *genome* and the applied events."""
        child, events = mutated(genome, self.rng, config=self.config.genetics)
        self._emit_mutations(child, events)
        return child, events

    def calculate_genetic_color(
        self, genome: Optional[Genome], archetype: Optional[str] = None
    ) -> Optional[Color]:
        return calculate_genetic_color(genome, archetype)

    def calculate_compatibility(self, genome1: Optional[Genome], genome2: Optional[Genome]) -> float:
        return calculate_compatibility(genome1, genome2)

    def _emit_mutations(self, genome: Genome, events: Iterable[MutationEvent]) -> None:
        if not self.event_bus.has_subscribers(MutationOccurredEvent):
            return
        for event in events:
            self.event_bus.emit(
                MutationOccurredEvent(
                    genome_id=genome.genome_id,
                    trait=event.trait,
                    old_value=event.old_value,
                    new_value=event.new_value,
                    mutation_type=event.mutation_type.value,
                    generation=event.generation,
                )
            )

    # =========================================================================
    # Trophic registry
    # =========================================================================

    def get_trophic_level(self, element_type: str) -> TrophicLevel:
        return self.registry.get_trophic_level(element_type)

    def is_predator_prey_relationship(self, predator_type: str, prey_type: str) -> bool:
        return self.registry.is_predator_prey_relationship(predator_type, prey_type)

    def register_element_type(
        self,
        element_type: str,
        trophic_level: TrophicLevel,
        prey_types: Iterable[str] = (),
    ) -> TrophicEntry:
        """Add a new organism type to the food web at runtime."""
        entry = self.registry.register_element_type(element_type, trophic_level, prey_types)
        self.event_bus.emit(
            ElementTypeRegisteredEvent(
                element_type=element_type,
                trophic_level=entry.trophic_level.name,
                prey_types=tuple(sorted(entry.prey_types)),
            )
        )
        return entry

    # =========================================================================
    # Predation and energy
    # =========================================================================

    def calculate_predation_success(self, predator: Any, prey: Any) -> float:
        return self.resolver.calculate_predation_success(predator, prey)

    def process_predator_prey_interaction(self, predator: Any, prey: Any) -> PredationResult:
        return self.resolver.process_predator_prey_interaction(predator, prey)

    def calculate_energy_transfer(
        self,
        source_energy: float,
        source_level: TrophicLevel,
        target_level: TrophicLevel,
    ) -> float:
        return self.ledger.calculate_energy_transfer(source_energy, source_level, target_level)

    # =========================================================================
    # Population and cascade pass
    # =========================================================================

    def init_food_web_system(self, organisms: Iterable[Any]) -> None:
        """Rebuild population counts and regional diversity from *organisms*."""
        self.population.init_food_web_system(organisms, self.config.foodweb.diversity_cell_size)

    def get_population_counts(self) -> Dict[str, int]:
        return self.population.get_population_counts()

    def get_regional_diversity(self) -> Dict[Tuple[int, int], RegionSnapshot]:
        return self.population.get_regional_diversity()

    def on_element_created(self, organism: Any) -> int:
        """Host hook for a newly spawned organism."""
        return self.population.record_birth(organism.type, cause="spawn")

    def on_element_removed(self, organism: Any, cause: str = "death") -> List[CascadeEffect]:
        """Host hook for an organism removed outside a cascade pass.

        A removal that lowers the type's count ripples through the food web
        like a predation does (``CascadeEffectEvent`` per effect).

        Returns:
            The cascade effects emitted (empty when nothing was removed)
        """
        before = self.population.count_of(organism.type)
        if self.population.record_removal(organism.type, cause=cause) == before:
            return []
        return self.coordinator.propagate_cascade_effects(organism.type, cause)

    def run_cascade_pass(self, pairs: Iterable[Tuple[Any, Any]]) -> CascadeReport:
        """Resolve the given candidate (predator, prey) pairs for this tick."""
        return self.coordinator.run_cascade_pass(pairs)

    def run_cascade_pass_for(self, organisms: Iterable[Any], max_distance: float) -> CascadeReport:
        """Discover candidate pairs by distance, then run a cascade pass."""
        return self.run_cascade_pass(candidate_pairs(organisms, self.registry, max_distance))

    # =========================================================================
    # Configuration and persistence
    # =========================================================================

    def update_food_web_config(self, **changes: Any) -> FoodWebConfig:
        """Apply food web config overrides; see ``FoodWebConfig.updated``.

        Raises:
            ConfigurationError: If a key or value is invalid
        """
        foodweb = self.config.foodweb.updated(**changes)
        self.config = SimulationConfig(genetics=self.config.genetics, foodweb=foodweb)
        # The ledger is kept so flow totals survive a retune
        self.ledger.efficiency = foodweb.energy_transfer_efficiency
        self.resolver.factors = foodweb.predation
        self.coordinator.settings = foodweb.cascade
        logger.info("Food web config updated: %s", sorted(changes))
        return foodweb

    def snapshot(self) -> FoodWebSnapshot:
        return FoodWebSnapshot.capture(self.registry, self.population)

    def restore(self, snapshot: FoodWebSnapshot) -> None:
        """Replace the registry and population counts with persisted state."""
        self.registry = snapshot.restore_registry()
        self.population.load_counts(snapshot.population_counts)
        self._build_foodweb_components()
        logger.info("Restored food web state with %d element types", len(self.registry))

"""Per-tick interaction pass and cascade-effect propagation.

The coordinator resolves every candidate predator/prey pair, applies the
energy transfer to the predator, records the prey's removal and emits the
events the achievement and narrative layers consume. It never deletes
organisms: consumed prey ids are reported for the host to remove.

A failure while processing one pair is logged and recorded; the pass
carries on with the remaining pairs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Set, Tuple

from ecosim.config.simulation_config import CascadeSettings
from ecosim.energy_utils import apply_energy_delta
from ecosim.events.domain_events import (
    CascadeEffectEvent,
    PredationAttemptEvent,
    PreyConsumedEvent,
)
from ecosim.foodweb.energy import EnergyLedger
from ecosim.foodweb.population import PopulationTracker
from ecosim.foodweb.predation import PredationResolver, PredationResult
from ecosim.foodweb.trophic import TrophicRegistry

if TYPE_CHECKING:
    from ecosim.events import EventBus

logger = logging.getLogger(__name__)

FOOD_SOURCE_CHANGE = "food_source_change"
PREDATION_PRESSURE_CHANGE = "predation_pressure_change"


@dataclass(frozen=True)
class CascadeEffect:
    """One ripple of a population change through the food web."""

    source_type: str
    target_type: str
    effect: float
    reason: str
    cause: str
    depth: int


@dataclass(frozen=True)
class PairFailure:
    predator_id: Any
    prey_id: Any
    error: str


@dataclass
class CascadeReport:
    """Everything that happened during one interaction pass."""

    results: List[PredationResult] = field(default_factory=list)
    consumed_ids: List[Any] = field(default_factory=list)
    effects: List[CascadeEffect] = field(default_factory=list)
    failures: List[PairFailure] = field(default_factory=list)
    energy_transferred: float = 0.0

    @property
    def successes(self) -> List[PredationResult]:
        return [result for result in self.results if result.success]


class CascadeCoordinator:
    """Orchestrates a full predator/prey interaction pass per tick."""

    def __init__(
        self,
        registry: TrophicRegistry,
        resolver: PredationResolver,
        ledger: EnergyLedger,
        tracker: PopulationTracker,
        event_bus: Optional["EventBus"] = None,
        settings: Optional[CascadeSettings] = None,
    ) -> None:
        self.registry = registry
        self.resolver = resolver
        self.ledger = ledger
        self.tracker = tracker
        self.event_bus = event_bus
        self.settings = settings or CascadeSettings()

    def run_cascade_pass(self, pairs: Iterable[Tuple[Any, Any]]) -> CascadeReport:
        """Resolve every (predator, prey) pair once.

        Pairs involving an organism consumed earlier in the same pass are
        skipped, so each prey is eaten at most once per tick.
        """
        report = CascadeReport()
        consumed: Set[Any] = set()
        for predator, prey in pairs:
            try:
                self._process_pair(predator, prey, consumed, report)
            except Exception as e:
                predator_id = getattr(predator, "id", None)
                prey_id = getattr(prey, "id", None)
                logger.exception(
                    "Predation pair (%s -> %s) failed; continuing pass", predator_id, prey_id
                )
                report.failures.append(PairFailure(predator_id, prey_id, f"{type(e).__name__}: {e}"))

        if report.results:
            logger.debug(
                "Cascade pass: %d attempts, %d consumed, %d failures",
                len(report.results),
                len(report.consumed_ids),
                len(report.failures),
            )
        return report

    def _process_pair(self, predator: Any, prey: Any, consumed: Set[Any], report: CascadeReport) -> None:
        """Resolve one pair, then announce it.

        The outcome is applied and recorded before the pair's events go out,
        so a failing observer leaves the report matching the world state.
        The population update comes last since it emits its own event.
        """
        if predator is prey or predator.id in consumed or prey.id in consumed:
            return

        result = self.resolver.process_predator_prey_interaction(predator, prey)
        if result.probability <= 0.0:
            return

        events: List[object] = [
            PredationAttemptEvent(
                predator_id=result.predator_id,
                predator_type=result.predator_type,
                prey_id=result.prey_id,
                prey_type=result.prey_type,
                probability=result.probability,
                success=result.success,
            )
        ]
        effects: List[CascadeEffect] = []
        if result.success:
            gained = apply_energy_delta(predator, result.energy_gained, source="predation")
            self.ledger.record_predation(
                result.predator_id,
                result.predator_type,
                result.prey_id,
                result.prey_type,
                result.prey_energy,
                gained,
            )
            consumed.add(prey.id)
            report.consumed_ids.append(prey.id)
            report.energy_transferred += gained
            effects = self._collect_cascade_effects(prey.type, "predation")
            report.effects.extend(effects)
            events.append(
                PreyConsumedEvent(
                    predator_id=result.predator_id,
                    predator_type=result.predator_type,
                    prey_id=result.prey_id,
                    prey_type=result.prey_type,
                    energy_gained=gained,
                )
            )
        report.results.append(result)

        if result.success:
            self.tracker.record_removal(prey.type, cause="predation")
        events.extend(CascadeEffectEvent(**vars(effect)) for effect in effects)
        for event in events:
            self._emit(event)

    def propagate_cascade_effects(
        self,
        element_type: str,
        cause: str,
        depth: int = 0,
        direction: int = -1,
    ) -> List[CascadeEffect]:
        """Ripple a population change of *element_type* through the web.

        A drop (``direction=-1``) pressures the types that eat it (less food)
        and relieves the types it eats (less predation); a rise does the
        opposite. Strength decays by ``strength_decay`` per level and the
        chain stops at ``max_depth``. Each effect is emitted as a
        ``CascadeEffectEvent`` in depth-first order.
        """
        effects = self._collect_cascade_effects(element_type, cause, depth, direction)
        for effect in effects:
            self._emit(CascadeEffectEvent(**vars(effect)))
        return effects

    def _collect_cascade_effects(
        self,
        element_type: str,
        cause: str,
        depth: int = 0,
        direction: int = -1,
    ) -> List[CascadeEffect]:
        settings = self.settings
        if not settings.enabled or depth >= settings.max_depth:
            return []

        strength = settings.strength_decay**depth
        affected = [
            (predator_type, direction * strength, FOOD_SOURCE_CHANGE)
            for predator_type in self.registry.predator_types_of(element_type)
        ]
        affected.extend(
            (prey_type, -direction * strength, PREDATION_PRESSURE_CHANGE)
            for prey_type in sorted(self.registry.prey_types_of(element_type))
        )

        effects: List[CascadeEffect] = []
        for target_type, effect, reason in affected:
            effects.append(CascadeEffect(element_type, target_type, effect, reason, cause, depth))
            effects.extend(
                self._collect_cascade_effects(
                    target_type,
                    f"cascade_from_{element_type}",
                    depth + 1,
                    1 if effect > 0 else -1,
                )
            )
        return effects

    def _emit(self, event: object) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(event)

"""Events module for domain event dispatch.

This module provides the EventBus for decoupling ecosystem rules from the
layers that observe them, plus typed domain event definitions.
"""

from ecosim.events.domain_events import (
    CascadeEffectEvent,
    ElementTypeRegisteredEvent,
    GeneticReproductionEvent,
    MutationOccurredEvent,
    PopulationChangedEvent,
    PredationAttemptEvent,
    PreyConsumedEvent,
)
from ecosim.events.event_bus import EventBus

__all__ = [
    "CascadeEffectEvent",
    "ElementTypeRegisteredEvent",
    "EventBus",
    "GeneticReproductionEvent",
    "MutationOccurredEvent",
    "PopulationChangedEvent",
    "PredationAttemptEvent",
    "PreyConsumedEvent",
]

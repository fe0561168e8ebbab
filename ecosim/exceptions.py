"""Ecosim exception hierarchy.

Centralised base classes so callers can catch narrowly and failures
become easier to diagnose.
"""


class EcosimError(Exception):
    """Root of all ecosim domain exceptions."""


class SimulationError(EcosimError):
    """Errors raised while evaluating simulation rules."""


class GeneticsError(SimulationError):
    """Genome creation, combination, or mutation failure."""


class InvalidTraitValue(GeneticsError, ValueError):
    """A trait value fell outside [0, 1] under the strict clamp policy."""

    def __init__(self, trait: str, value: float) -> None:
        super().__init__(f"Trait {trait!r} value {value!r} is outside [0, 1]")
        self.trait = trait
        self.value = value


class FoodWebError(SimulationError):
    """Errors in trophic classification or predator/prey rules."""


class UnknownType(FoodWebError, LookupError):
    """An organism type was never registered with the trophic registry."""

    def __init__(self, element_type: str) -> None:
        super().__init__(f"Unknown organism type: {element_type!r}")
        self.element_type = element_type


class ConfigurationError(EcosimError):
    """Invalid or missing configuration."""


class PersistenceError(EcosimError):
    """A persisted record could not be decoded."""

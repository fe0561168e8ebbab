"""Organism records read by the ecosystem core.

Organisms are owned by the host simulation; the core references them and
only ever writes a predator's ``energy`` during a cascade pass. Hosts may
pass their own objects as long as they satisfy ``OrganismLike``.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from ecosim.genetics import Genome


@runtime_checkable
class OrganismLike(Protocol):
    """Structural contract for organism records.

    Attributes:
        id: Unique per-simulation identifier
        type: Archetype key ("plant", "creature", ... or a registered type)
        genome: Genome, or None for abstract resources
        health: 0-100
        energy: >= 0
    """

    id: Any
    type: str
    genome: Optional["Genome"]
    age: float
    health: float
    energy: float
    size: float
    speed: float
    position: Optional[Tuple[float, float]]


@dataclass
class Organism:
    """Plain organism record satisfying ``OrganismLike``."""

    id: Any
    type: str
    genome: Optional["Genome"] = None
    age: float = 0.0
    health: float = 100.0
    energy: float = 10.0
    size: float = 1.0
    speed: float = 1.0
    position: Optional[Tuple[float, float]] = field(default=None)

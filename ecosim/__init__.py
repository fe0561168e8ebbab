"""Ecosystem simulation core: genetics and food web rules.

Hosts create one ``SimulationContext`` per world and drive it each tick:

    ctx = SimulationContext(seed=42)
    ctx.init_food_web_system(organisms)
    report = ctx.run_cascade_pass(pairs)
"""

from ecosim.context import SimulationContext
from ecosim.exceptions import EcosimError, UnknownType
from ecosim.foodweb.trophic import TrophicLevel
from ecosim.genetics.genome import Genome
from ecosim.organism import Organism, OrganismLike

__version__ = "0.1.0"

__all__ = [
    "EcosimError",
    "Genome",
    "Organism",
    "OrganismLike",
    "SimulationContext",
    "TrophicLevel",
    "UnknownType",
]

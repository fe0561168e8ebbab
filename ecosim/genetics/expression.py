"""Gene expression: translating genotype to phenotype.

Expression is kept apart from storage so non-linear expression curves can
be introduced without touching Genome. The base model is the identity.
"""

from typing import Dict, Optional

from ecosim.genetics.genome import Genome


def express_traits(genome: Optional[Genome]) -> Dict[str, float]:
    """Return the phenotype as a fresh trait-name -> value mapping."""
    if genome is None:
        return {}
    return dict(genome.traits)


def expressed_trait(genome: Optional[Genome], name: str, default: float) -> float:
    """Return one expressed trait, or *default* when it is not expressed."""
    return express_traits(genome).get(name, default)

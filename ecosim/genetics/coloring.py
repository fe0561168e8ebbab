"""Genotype -> display color mapping.

``calculate_genetic_color`` is a pure function of the genome's expressed
traits and the archetype: equal inputs always give equal colors. Each
archetype has a base-color rule; special traits then tint the result.
"""

from typing import Callable, Dict, Mapping, Optional

from ecosim.color import GENERIC_COLOR_SATURATION, Color, hue_to_rgb
from ecosim.genetics.expression import express_traits
from ecosim.genetics.genome import Genome

# Environment tones camouflage blends toward
_PLANT_CAMOUFLAGE_TONE = (30, 100, 10)
_ANIMAL_CAMOUFLAGE_TONE = (80, 70, 30)

_NIGHT_VISION_BLUE_SHIFT = 40
_NIGHT_VISION_RED_SHIFT = 20
_REGENERATION_VIVIDNESS = 0.3


def _plant_base(p: Mapping[str, float]) -> Color:
    base_green = 100 + p.get("color", 0.0) * 155
    red_tint = p.get("toxin_resistance", 0.0) * 50  # toxic plants redden
    blue_tint = p.get("water_dependency", 0.0) * 30
    saturation = 0.7 + p.get("body_shape", 0.0) * 0.3
    alpha = 0.8 + p.get("skin_texture", 0.0) * 0.2
    return Color(int(red_tint), int(base_green * saturation), int(blue_tint), alpha)


def _creature_base(p: Mapping[str, float]) -> Color:
    red_base = 150 + p.get("color", 0.0) * 105
    green_base = 100 + p.get("metabolism_rate", 0.0) * 100
    blue_base = p.get("water_dependency", 0.0) * 100
    saturation = 0.8 + p.get("intelligence", 0.0) * 0.2
    alpha = 0.7 + p.get("social_behavior", 0.0) * 0.3
    return Color(int(red_base * saturation), int(green_base), int(blue_base), alpha)


def _predator_base(p: Mapping[str, float]) -> Color:
    red = 100 + p.get("aggressiveness", 0.0) * 155
    green = 30 + p.get("intelligence", 0.0) * 70
    blue = 10 + p.get("speed", 0.0) * 140
    saturation = 0.7 + p.get("body_shape", 0.0) * 0.3
    return Color(int(red), int(green * saturation), int(blue), 0.9)


def _generic_base(p: Mapping[str, float]) -> Color:
    r, g, b = hue_to_rgb(p.get("color", 0.5), saturation=GENERIC_COLOR_SATURATION)
    return Color(r, g, b, 1.0)


BASE_COLOR_RULES: Dict[str, Callable[[Mapping[str, float]], Color]] = {
    "plant": _plant_base,
    "creature": _creature_base,
    "predator": _predator_base,
}


def _apply_special_traits(color: Color, p: Mapping[str, float], archetype: str) -> Color:
    camouflage = p.get("camouflage", 0.0)
    if camouflage > 0:
        tone = _PLANT_CAMOUFLAGE_TONE if archetype == "plant" else _ANIMAL_CAMOUFLAGE_TONE
        color = color.blend(tone, camouflage)

    night_vision = p.get("night_vision", 0.0)
    if night_vision > 0:
        color = Color(
            color.r - int(night_vision * _NIGHT_VISION_RED_SHIFT),
            color.g,
            color.b + int(night_vision * _NIGHT_VISION_BLUE_SHIFT),
            color.a,
        )

    regeneration = p.get("regeneration", 0.0)
    if regeneration > 0:
        boost = 1 + regeneration * _REGENERATION_VIVIDNESS
        color = Color(int(color.r * boost), int(color.g * boost), int(color.b * boost), color.a)

    return color


def calculate_genetic_color(genome: Optional[Genome], archetype: Optional[str] = None) -> Optional[Color]:
    """Map a genome to its display color.

    Args:
        genome: Genome to color; None gives None
        archetype: Color rule to use; defaults to the genome's own archetype

    Returns:
        RGBA Color, or None when there is no genome
    """
    if genome is None:
        return None
    archetype = archetype or genome.archetype
    phenotype = express_traits(genome)
    base_rule = BASE_COLOR_RULES.get(archetype, _generic_base)
    return _apply_special_traits(base_rule(phenotype), phenotype, archetype)

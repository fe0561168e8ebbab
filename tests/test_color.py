"""Tests for Color and genotype -> color mapping."""

import pytest

from ecosim.color import Color, hue_to_rgb
from ecosim.genetics import Genome, calculate_genetic_color, create_random_genome


class TestColor:
    def test_channels_clamped(self):
        color = Color(300, -5, 128, 1.5)
        assert color.rgb == (255, 0, 128)
        assert color.a == 1.0

    def test_to_css(self):
        assert Color(10, 20, 30, 0.5).to_css() == "rgba(10, 20, 30, 0.5)"

    def test_blend_endpoints(self):
        color = Color(100, 100, 100)
        assert color.blend((200, 0, 50), 0.0).rgb == (100, 100, 100)
        assert color.blend((200, 0, 50), 1.0).rgb == (200, 0, 50)

    def test_hue_to_rgb_primary(self):
        assert hue_to_rgb(0.0, saturation=1.0) == (255, 0, 0)
        assert hue_to_rgb(1.0, saturation=1.0) == (255, 0, 0)


class TestCalculateGeneticColor:
    """Color derivation is a pure function of genome and archetype."""

    @pytest.mark.parametrize("archetype", ["plant", "creature", "predator", "fungus"])
    def test_pure_function(self, archetype, seeded_rng):
        genome = create_random_genome(archetype, seeded_rng)
        twin = genome.copy()
        color = calculate_genetic_color(genome, archetype)
        assert color == calculate_genetic_color(twin, archetype)
        assert color == calculate_genetic_color(genome, archetype)

    def test_no_genome_gives_none(self):
        assert calculate_genetic_color(None, "plant") is None

    def test_defaults_to_genome_archetype(self, seeded_rng):
        genome = create_random_genome("predator", seeded_rng)
        assert calculate_genetic_color(genome) == calculate_genetic_color(genome, "predator")

    def test_plants_are_green_dominant(self, seeded_rng):
        for _ in range(20):
            genome = create_random_genome("plant", seeded_rng)
            genome.traits["camouflage"] = 0.0
            color = calculate_genetic_color(genome, "plant")
            assert color.g > color.r
            assert color.g > color.b

    def test_predators_are_red_dominant(self):
        genome = Genome(traits={"aggressiveness": 1.0, "intelligence": 0.5, "speed": 0.5})
        color = calculate_genetic_color(genome, "predator")
        assert color.r > color.g
        assert color.r > color.b

    def test_color_trait_changes_color(self):
        dull = Genome(traits={"color": 0.0})
        vivid = Genome(traits={"color": 1.0})
        assert calculate_genetic_color(dull, "creature") != calculate_genetic_color(vivid, "creature")

    def test_night_vision_shifts_blue(self):
        base = Genome(traits={"color": 0.5})
        tinted = Genome(traits={"color": 0.5, "night_vision": 1.0})
        base_color = calculate_genetic_color(base, "creature")
        tinted_color = calculate_genetic_color(tinted, "creature")
        assert tinted_color.b > base_color.b
        assert tinted_color.r < base_color.r

    def test_camouflage_blends_toward_environment(self):
        base = Genome(traits={"color": 1.0})
        hidden = Genome(traits={"color": 1.0, "camouflage": 1.0})
        assert calculate_genetic_color(hidden, "plant").rgb == (30, 100, 10)
        assert calculate_genetic_color(base, "plant").rgb != (30, 100, 10)

    def test_channels_always_in_range(self, seeded_rng):
        for archetype in ("plant", "creature", "predator", "tribe"):
            for _ in range(20):
                color = calculate_genetic_color(create_random_genome(archetype, seeded_rng), archetype)
                for channel in color.rgb:
                    assert 0 <= channel <= 255
                assert 0.0 <= color.a <= 1.0

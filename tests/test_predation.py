"""Tests for predation success probability and single predation rolls."""

import random
from types import SimpleNamespace

import pytest

from ecosim.config.simulation_config import PredationFactors
from ecosim.foodweb.energy import EnergyLedger
from ecosim.foodweb.predation import PredationResolver
from ecosim.genetics import Genome
from ecosim.organism import Organism
from ecosim.util.rng import MissingRNGError


@pytest.fixture
def resolver(registry, seeded_rng):
    return PredationResolver(registry, EnergyLedger(registry), seeded_rng)


def _pair(predator_type="predator", prey_type="creature", **predator_stats):
    predator = Organism(id="pred", type=predator_type, **predator_stats)
    prey = Organism(id="prey", type=prey_type, energy=50.0)
    return predator, prey


class TestCalculatePredationSuccess:
    """Bounded, monotonic success probability."""

    def test_equal_stats_even_chance(self, resolver):
        predator, prey = _pair()
        assert resolver.calculate_predation_success(predator, prey) == pytest.approx(0.5)

    def test_dominant_predator_above_half_and_below_one(self, resolver):
        predator, prey = _pair(speed=2.0, size=2.0)
        prey.health = 50.0
        chance = resolver.calculate_predation_success(predator, prey)
        assert 0.5 < chance < 1.0

    def test_dominant_in_every_stat_including_intelligence(self, resolver):
        predator = Organism(
            id="p", type="predator", speed=1.5, size=1.2, health=100.0,
            genome=Genome(traits={"intelligence": 0.9}),
        )
        prey = Organism(
            id="c", type="creature", speed=1.0, size=1.0, health=80.0,
            genome=Genome(traits={"intelligence": 0.3}),
        )
        chance = resolver.calculate_predation_success(predator, prey)
        assert 0.5 < chance < 1.0

    def test_overwhelming_advantage_is_capped(self, resolver):
        predator, prey = _pair(speed=100.0, size=100.0)
        prey.health = 1.0
        assert resolver.calculate_predation_success(predator, prey) == pytest.approx(0.9)

    def test_overwhelming_disadvantage_is_floored(self, resolver):
        predator, prey = _pair(speed=0.01, size=0.01, health=1.0)
        chance = resolver.calculate_predation_success(predator, prey)
        assert chance == pytest.approx(0.1)
        assert chance > 0.0

    def test_weakened_predator_less_likely(self, resolver):
        healthy, prey = _pair()
        weak, _ = _pair(health=40.0)
        assert resolver.calculate_predation_success(weak, prey) < resolver.calculate_predation_success(
            healthy, prey
        )

    def test_weakened_prey_more_likely(self, resolver):
        predator, prey = _pair()
        baseline = resolver.calculate_predation_success(predator, prey)
        prey.health = 30.0
        assert resolver.calculate_predation_success(predator, prey) > baseline

    def test_faster_prey_harder_to_catch(self, resolver):
        predator, prey = _pair()
        baseline = resolver.calculate_predation_success(predator, prey)
        prey.speed = 1.5
        assert resolver.calculate_predation_success(predator, prey) < baseline

    def test_intelligence_ignored_without_both_genomes(self, resolver):
        predator, prey = _pair(genome=Genome(traits={"intelligence": 1.0}))
        assert resolver.calculate_predation_success(predator, prey) == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "predator_type,prey_type",
        [("creature", "predator"), ("predator", "plant"), ("plant", "creature"), ("fungus", "plant")],
    )
    def test_non_relationship_is_exactly_zero(self, resolver, predator_type, prey_type):
        predator, prey = _pair(predator_type, prey_type, speed=5.0)
        assert resolver.calculate_predation_success(predator, prey) == 0.0

    def test_unknown_type_is_zero_not_error(self, resolver):
        predator, prey = _pair("predator", "water")
        assert resolver.calculate_predation_success(predator, prey) == 0.0

    def test_every_registered_relationship_strictly_inside_unit_interval(self, registry, resolver):
        rng = random.Random(9)
        for predator_type in registry.known_types():
            for prey_type in registry.prey_types_of(predator_type):
                for _ in range(20):
                    predator = Organism(
                        id=1, type=predator_type, speed=rng.uniform(0, 3),
                        size=rng.uniform(0, 3), health=rng.uniform(0, 100),
                    )
                    prey = Organism(
                        id=2, type=prey_type, speed=rng.uniform(0, 3),
                        size=rng.uniform(0, 3), health=rng.uniform(0, 100),
                    )
                    assert 0.0 < resolver.calculate_predation_success(predator, prey) < 1.0

    def test_custom_factors(self, registry, seeded_rng):
        factors = PredationFactors(speed=0.0, size=0.0, health=0.0, intelligence=0.0)
        resolver = PredationResolver(registry, EnergyLedger(registry), seeded_rng, factors)
        predator, prey = _pair(speed=3.0, size=3.0)
        assert resolver.calculate_predation_success(predator, prey) == pytest.approx(0.5)

    def test_rng_required(self, registry):
        with pytest.raises(MissingRNGError):
            PredationResolver(registry, EnergyLedger(registry), None)


class TestProcessPredatorPreyInteraction:
    """One roll per call, with energy only on success."""

    def test_both_outcomes_occur(self, resolver):
        predator, prey = _pair()
        outcomes = {
            resolver.process_predator_prey_interaction(predator, prey).success for _ in range(100)
        }
        assert outcomes == {True, False}

    def test_success_gains_ten_percent_of_prey_energy(self, resolver):
        predator, prey = _pair()
        results = [resolver.process_predator_prey_interaction(predator, prey) for _ in range(50)]
        for result in results:
            if result.success:
                assert result.energy_gained == pytest.approx(5.0)
            else:
                assert result.energy_gained == 0.0

    def test_result_references_participants(self, resolver):
        predator, prey = _pair()
        result = resolver.process_predator_prey_interaction(predator, prey)
        assert result.predator_id == "pred"
        assert result.prey_id == "prey"
        assert result.predator_type == "predator"
        assert result.prey_type == "creature"
        assert result.probability == pytest.approx(0.5)

    def test_no_side_effects_on_organisms(self, resolver):
        predator, prey = _pair()
        before = (predator.energy, predator.health, prey.energy, prey.health)
        for _ in range(20):
            resolver.process_predator_prey_interaction(predator, prey)
        assert (predator.energy, predator.health, prey.energy, prey.health) == before

    def test_level_skipping_predation_gains_no_energy(self, registry):
        rng = random.Random(1)
        resolver = PredationResolver(registry, EnergyLedger(registry), rng)
        tribe = Organism(id="t", type="tribe", speed=100.0, size=100.0)
        plant = Organism(id="p", type="plant", energy=100.0, health=1.0)
        results = [resolver.process_predator_prey_interaction(tribe, plant) for _ in range(20)]
        assert any(r.success for r in results)
        assert all(r.energy_gained == 0.0 for r in results)

    def test_prey_without_energy_counts_as_default(self, resolver):
        """Prey records lacking an energy field are worth 10 energy."""
        creature = Organism(id="c", type="creature")
        plant = SimpleNamespace(id="p", type="plant")
        results = [resolver.process_predator_prey_interaction(creature, plant) for _ in range(30)]
        assert any(r.success for r in results)
        for result in results:
            assert result.prey_energy == 10.0
            if result.success:
                assert result.energy_gained == pytest.approx(1.0)

    def test_non_relationship_consumes_no_randomness(self, registry):
        rng = random.Random(5)
        resolver = PredationResolver(registry, EnergyLedger(registry), rng)
        state = rng.getstate()
        predator, prey = _pair("creature", "predator")
        result = resolver.process_predator_prey_interaction(predator, prey)
        assert result.success is False
        assert rng.getstate() == state

    def test_reproducible_under_seed(self, registry):
        predator, prey = _pair()
        runs = []
        for _ in range(2):
            resolver = PredationResolver(registry, EnergyLedger(registry), random.Random(77))
            runs.append(
                [resolver.process_predator_prey_interaction(predator, prey).success for _ in range(30)]
            )
        assert runs[0] == runs[1]

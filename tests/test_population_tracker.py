"""Tests for population counts and regional diversity."""

import math

import pytest

from ecosim.events import EventBus, PopulationChangedEvent
from ecosim.foodweb.population import PopulationTracker, region_of, shannon_entropy
from ecosim.organism import Organism


def _organisms(*types, position=None):
    return [Organism(id=i, type=t, position=position) for i, t in enumerate(types)]


class TestInitFoodWebSystem:
    """Reset-and-rebuild semantics."""

    def test_counts_from_snapshot(self):
        tracker = PopulationTracker()
        tracker.init_food_web_system(_organisms("plant", "plant", "creature", "predator"))
        assert tracker.get_population_counts() == {"plant": 2, "creature": 1, "predator": 1}

    def test_empty_rebuild_resets_counts(self):
        tracker = PopulationTracker()
        tracker.init_food_web_system(_organisms("plant", "plant", "creature", "predator"))
        tracker.init_food_web_system([])
        assert tracker.get_population_counts() == {}

    def test_rebuild_replaces_rather_than_merges(self):
        tracker = PopulationTracker()
        tracker.init_food_web_system(_organisms("plant", "creature"))
        tracker.init_food_web_system(_organisms("fungus"))
        assert tracker.get_population_counts() == {"fungus": 1}

    def test_repeated_init_is_safe(self):
        tracker = PopulationTracker()
        for _ in range(3):
            tracker.init_food_web_system([])
        assert tracker.get_population_counts() == {}

    def test_counts_are_a_copy(self):
        tracker = PopulationTracker()
        tracker.init_food_web_system(_organisms("plant"))
        tracker.get_population_counts()["plant"] = 99
        assert tracker.count_of("plant") == 1

    def test_accepts_generators(self):
        tracker = PopulationTracker()
        tracker.init_food_web_system(o for o in _organisms("plant", "plant"))
        assert tracker.count_of("plant") == 2

    def test_rebuild_resets_incremental_totals(self):
        tracker = PopulationTracker()
        tracker.record_birth("plant")
        tracker.init_food_web_system([])
        assert tracker.total_births == 0


class TestIncrementalUpdates:
    def test_birth_and_removal(self):
        tracker = PopulationTracker()
        assert tracker.record_birth("plant") == 1
        assert tracker.record_birth("plant") == 2
        assert tracker.record_removal("plant") == 1
        assert tracker.total_births == 2
        assert tracker.total_removals == 1

    def test_removal_never_negative(self):
        tracker = PopulationTracker()
        assert tracker.record_removal("plant") == 0
        assert tracker.count_of("plant") == 0

    def test_removal_from_empty_type_is_not_counted(self):
        tracker = PopulationTracker()
        tracker.record_removal("plant")
        assert tracker.total_removals == 0
        assert tracker.get_population_counts() == {}

        tracker.record_birth("creature")
        tracker.record_removal("creature")
        tracker.record_removal("creature")
        assert tracker.total_removals == 1
        assert tracker.get_population_counts() == {"creature": 0}

    def test_extinct_type_keeps_zero_entry(self):
        tracker = PopulationTracker()
        tracker.record_birth("creature")
        tracker.record_removal("creature")
        assert tracker.get_population_counts() == {"creature": 0}
        assert tracker.total_diversity() == 0

    def test_events_emitted(self):
        bus = EventBus()
        seen = []
        bus.subscribe(PopulationChangedEvent, seen.append)
        tracker = PopulationTracker(bus)
        tracker.record_birth("plant", cause="spawn")
        tracker.record_removal("plant", cause="predation")
        tracker.record_removal("plant", cause="predation")
        assert seen == [
            PopulationChangedEvent("plant", 1, 1, "spawn"),
            PopulationChangedEvent("plant", 0, -1, "predation"),
        ]

    def test_max_diversity_tracks_peak(self):
        tracker = PopulationTracker()
        tracker.init_food_web_system(_organisms("plant", "creature", "predator"))
        tracker.init_food_web_system(_organisms("plant"))
        assert tracker.total_diversity() == 1
        assert tracker.max_diversity == 3

    def test_load_counts(self):
        tracker = PopulationTracker()
        tracker.load_counts({"plant": 4, "tribe": 0})
        assert tracker.get_population_counts() == {"plant": 4, "tribe": 0}
        assert tracker.total_diversity() == 1


class TestRegionalDiversity:
    def test_region_bucketing(self):
        assert region_of((150.0, 20.0), 100.0) == (1, 0)
        assert region_of((-1.0, 0.0), 100.0) == (-1, 0)

    def test_snapshots_per_region(self):
        organisms = [
            Organism(id=1, type="plant", position=(10.0, 10.0)),
            Organism(id=2, type="creature", position=(20.0, 30.0)),
            Organism(id=3, type="plant", position=(250.0, 10.0)),
            Organism(id=4, type="predator"),
        ]
        tracker = PopulationTracker()
        regions = tracker.update_regional_diversity(organisms, cell_size=100.0)
        assert set(regions) == {(0, 0), (2, 0)}
        assert regions[(0, 0)].type_counts == {"plant": 1, "creature": 1}
        assert regions[(0, 0)].richness == 2
        assert regions[(0, 0)].shannon_index == pytest.approx(math.log(2))
        assert regions[(2, 0)].shannon_index == 0.0

    def test_init_rebuilds_regions(self):
        tracker = PopulationTracker()
        tracker.init_food_web_system(_organisms("plant", position=(0.0, 0.0)))
        assert (0, 0) in tracker.get_regional_diversity()
        tracker.init_food_web_system([])
        assert tracker.get_regional_diversity() == {}

    def test_invalid_cell_size(self):
        with pytest.raises(ValueError):
            PopulationTracker().update_regional_diversity([], cell_size=0)


class TestShannonEntropy:
    def test_empty_is_zero(self):
        assert shannon_entropy([]) == 0.0

    def test_uniform_distribution(self):
        assert shannon_entropy([5, 5, 5, 5]) == pytest.approx(math.log(4))

    def test_zero_counts_ignored(self):
        assert shannon_entropy([3, 0]) == 0.0

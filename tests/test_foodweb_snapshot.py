"""Tests for food web persistence records."""

import json

import pytest

from ecosim.exceptions import PersistenceError
from ecosim.foodweb.population import PopulationTracker
from ecosim.foodweb.snapshot import FOODWEB_SCHEMA_VERSION, FoodWebSnapshot
from ecosim.foodweb.trophic import TrophicLevel
from ecosim.organism import Organism


@pytest.fixture
def tracker():
    tracker = PopulationTracker()
    tracker.init_food_web_system(
        [Organism(id=i, type=t) for i, t in enumerate(["plant", "plant", "creature"])]
    )
    return tracker


class TestFoodWebSnapshot:
    def test_round_trip(self, registry, tracker):
        registry.register_element_type("apexPredator", TrophicLevel.SECONDARY, ["creature", "plant"])
        data = FoodWebSnapshot.capture(registry, tracker).to_dict()
        restored = FoodWebSnapshot.from_dict(json.loads(json.dumps(data)))

        assert restored.restore_registry().entries() == registry.entries()
        assert restored.population_counts == {"plant": 2, "creature": 1}

    def test_levels_serialized_as_integers(self, registry, tracker):
        data = FoodWebSnapshot.capture(registry, tracker).to_dict()
        levels = {entry["element_type"]: entry["trophic_level"] for entry in data["registry"]}
        assert levels["plant"] == 0
        assert levels["fungus"] == 4

    def test_newer_schema_rejected(self, registry, tracker):
        data = FoodWebSnapshot.capture(registry, tracker).to_dict()
        data["schema_version"] = FOODWEB_SCHEMA_VERSION + 1
        with pytest.raises(PersistenceError):
            FoodWebSnapshot.from_dict(data)

    def test_negative_count_rejected(self):
        with pytest.raises(PersistenceError):
            FoodWebSnapshot.from_dict({"population_counts": {"plant": -1}})

    def test_unknown_level_rejected(self):
        data = {"registry": [{"element_type": "x", "trophic_level": 9}]}
        with pytest.raises(PersistenceError):
            FoodWebSnapshot.from_dict(data)

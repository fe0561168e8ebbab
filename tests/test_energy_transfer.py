"""Tests for trophic energy transfer and the energy ledger."""

import math

import pytest

from ecosim.energy_utils import apply_energy_delta, clamp_energy
from ecosim.exceptions import UnknownType
from ecosim.foodweb.energy import EnergyLedger, calculate_energy_transfer
from ecosim.foodweb.trophic import TrophicLevel
from ecosim.organism import Organism

P = TrophicLevel


class TestCalculateEnergyTransfer:
    """Ten percent flows exactly one level up; everything else is zero."""

    def test_producer_to_primary(self):
        assert calculate_energy_transfer(100, P.PRODUCER, P.PRIMARY) == pytest.approx(10)

    def test_primary_to_secondary(self):
        assert calculate_energy_transfer(50, P.PRIMARY, P.SECONDARY) == pytest.approx(5)

    def test_no_downward_flow(self):
        assert calculate_energy_transfer(100, P.SECONDARY, P.PRIMARY) == 0

    def test_no_level_skipping(self):
        assert calculate_energy_transfer(100, P.PRODUCER, P.TERTIARY) == 0

    def test_no_sideways_flow(self):
        assert calculate_energy_transfer(100, P.PRIMARY, P.PRIMARY) == 0

    @pytest.mark.parametrize("energy", [0.0, -10.0, math.nan, math.inf])
    def test_non_positive_or_non_finite_energy(self, energy):
        assert calculate_energy_transfer(energy, P.PRODUCER, P.PRIMARY) == 0.0

    def test_custom_efficiency(self):
        assert calculate_energy_transfer(100, P.PRODUCER, P.PRIMARY, 0.2) == pytest.approx(20)


class TestEnergyLedger:
    def test_transfer_between_types(self, registry):
        ledger = EnergyLedger(registry)
        assert ledger.transfer_between_types(100, "plant", "creature") == pytest.approx(10)
        assert ledger.transfer_between_types(100, "creature", "tribe") == 0.0

    def test_transfer_between_unknown_types_raises(self, registry):
        ledger = EnergyLedger(registry)
        with pytest.raises(UnknownType):
            ledger.transfer_between_types(100, "water", "creature")

    def test_record_predation_returns_deltas_and_totals(self, registry):
        ledger = EnergyLedger(registry)
        gain, consumed = ledger.record_predation("c1", "creature", "p1", "plant", 40.0, 4.0)
        assert gain.entity_id == "c1" and gain.delta == 4.0
        assert consumed.entity_id == "p1" and consumed.delta == -40.0
        assert ledger.flow_totals[(P.PRODUCER, P.PRIMARY)] == pytest.approx(4.0)
        assert ledger.transfer_count == 1
        assert ledger.total_transferred() == pytest.approx(4.0)

    def test_reset(self, registry):
        ledger = EnergyLedger(registry)
        ledger.record_predation("c1", "creature", "p1", "plant", 40.0, 4.0)
        ledger.reset()
        assert ledger.total_transferred() == 0.0
        assert ledger.transfer_count == 0


class TestApplyEnergyDelta:
    def test_gain(self):
        organism = Organism(id=1, type="creature", energy=5.0)
        assert apply_energy_delta(organism, 2.5) == pytest.approx(2.5)
        assert organism.energy == pytest.approx(7.5)

    def test_never_negative(self):
        organism = Organism(id=1, type="creature", energy=5.0)
        assert apply_energy_delta(organism, -20.0) == pytest.approx(-5.0)
        assert organism.energy == 0.0

    def test_respects_max_energy(self):
        class Capped:
            energy = 9.0
            max_energy = 10.0

        entity = Capped()
        assert apply_energy_delta(entity, 5.0) == pytest.approx(1.0)
        assert entity.energy == 10.0

    def test_delegates_to_modify_energy(self):
        class Tracked:
            energy = 0.0

            def __init__(self):
                self.calls = []

            def modify_energy(self, amount, *, source="unknown"):
                self.calls.append((amount, source))
                return amount

        entity = Tracked()
        apply_energy_delta(entity, 3.0, source="predation")
        assert entity.calls == [(3.0, "predation")]

    def test_non_finite_delta_ignored(self):
        organism = Organism(id=1, type="creature", energy=5.0)
        assert apply_energy_delta(organism, math.nan) == 0.0
        assert organism.energy == 5.0

    def test_missing_energy_attribute_raises(self):
        with pytest.raises(AttributeError):
            apply_energy_delta(object(), 1.0)


class TestClampEnergy:
    def test_bounds(self):
        assert clamp_energy(-1.0) == 0.0
        assert clamp_energy(12.0, 10.0) == 10.0
        assert clamp_energy(1e9) == 1e9

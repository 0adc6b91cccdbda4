"""Tests for ZFW / TOW / LDW aggregation and the envelope."""

from __future__ import annotations

import pytest

from wbcalc.contracts.aircraft import MacConfig, Station
from wbcalc.services.envelope import (
    calculate_envelope_data,
    calculate_mac_percentage,
    calculate_summaries,
)
from wbcalc.services.units import convert_stations


class TestSummaries:
    def test_cessna(self, cessna_stations):
        summaries = calculate_summaries(cessna_stations)
        assert summaries.zfw.weight == 1500
        assert summaries.zfw.moment == 58500
        assert summaries.tow.weight == 1800
        assert summaries.tow.moment == 72900
        # no landing fuel station: LDW equals ZFW
        assert summaries.ldw.weight == 1500
        assert summaries.totals.weight == 1800
        assert summaries.totals.arm == 39.0 + 48.0

    def test_cargo_counts_as_zero_fuel(self):
        stations = [
            Station(id=1, description="Basic", arm=40, weight=1000),
            Station(id=2, description="Bags", arm=100, type="cargo", weight=50),
        ]
        summaries = calculate_summaries(stations)
        assert summaries.zfw.weight == 1050
        assert summaries.zfw.moment == 45000

    def test_landing_fuel_last_wins(self):
        stations = [
            Station(id=1, description="Basic", arm=40, weight=1000),
            Station(id=2, description="Landing A", arm=50, type="landing_fuel", weight=100),
            Station(id=3, description="Landing B", arm=60, type="landing_fuel", weight=50),
        ]
        summaries = calculate_summaries(stations)
        assert summaries.ldw.weight == 1050
        assert summaries.ldw.moment == 43000
        assert summaries.tow.weight == 1000
        assert summaries.totals.weight == 1000
        assert summaries.totals.arm == 150

    def test_empty(self):
        summaries = calculate_summaries([])
        assert summaries.zfw.weight == 0
        assert summaries.totals.moment == 0


class TestMacPercentage:
    def test_imperial(self, cessna_mac):
        assert calculate_mac_percentage(40.5, cessna_mac) == pytest.approx(36.9128, abs=1e-4)

    def test_metric_converted_to_inches(self, cessna_mac):
        assert calculate_mac_percentage(40.5 * 0.0254, cessna_mac, is_metric=True) == pytest.approx(
            36.9128, abs=1e-4
        )

    def test_bad_formula_gives_zero(self, caplog):
        mac = MacConfig(formula="CG +", mac_min=0, mac_max=100)
        assert calculate_mac_percentage(40.0, mac) == 0.0
        assert "Error calculating MAC percentage" in caplog.text


class TestEnvelope:
    def test_cessna(self, cessna_stations, cessna_mac):
        envelope = calculate_envelope_data(cessna_stations, cessna_mac)
        assert envelope.zfw.cg == pytest.approx(39.0)
        assert envelope.zfw.mac == pytest.approx(26.8456, abs=1e-4)
        assert envelope.tow.weight == 1800
        assert envelope.tow.cg == pytest.approx(40.5)
        assert envelope.tow.mac == pytest.approx(36.9128, abs=1e-4)
        assert envelope.ldw.cg == pytest.approx(39.0)

    def test_metric_matches_imperial(self, cessna_stations, cessna_mac):
        metric = convert_stations(cessna_stations, "imperial", "metric")
        envelope = calculate_envelope_data(metric, cessna_mac, is_metric=True)
        assert envelope.tow.weight == pytest.approx(1800 * 0.45359237)
        assert envelope.tow.cg == pytest.approx(40.5 * 0.0254)
        assert envelope.tow.mac == pytest.approx(36.9128, abs=1e-4)

    def test_zero_weight(self, cessna_mac):
        stations = [Station(id=1, description="Empty", arm=39.0)]
        envelope = calculate_envelope_data(stations, cessna_mac)
        assert envelope.zfw.cg == 0
        assert envelope.zfw.mac == 0
        assert envelope.tow.weight == 0

    def test_inputs_not_modified(self, cessna_stations, cessna_mac):
        before = [s.model_dump() for s in cessna_stations]
        calculate_envelope_data(cessna_stations, cessna_mac)
        assert [s.model_dump() for s in cessna_stations] == before

"""Tests for the built-in aircraft templates."""

from __future__ import annotations

import pytest

from wbcalc.contracts.enums import StationType
from wbcalc.services.formula import validate_formula
from wbcalc.services.limits import validate_stations
from wbcalc.services.templates import AIRCRAFT_TEMPLATES, get_template


class TestTemplates:
    def test_keys(self):
        assert set(AIRCRAFT_TEMPLATES) == {"cessna172", "piper28", "airbus319"}

    @pytest.mark.parametrize("key", sorted(AIRCRAFT_TEMPLATES))
    def test_valid(self, key):
        template = AIRCRAFT_TEMPLATES[key]
        assert validate_formula(template.mac_config.formula).is_valid
        assert validate_stations(template.stations).is_valid

    def test_a319_has_landing_fuel(self):
        types = [s.type for s in AIRCRAFT_TEMPLATES["airbus319"].stations]
        assert types.count(StationType.FUEL) == 2
        assert types.count(StationType.LANDING_FUEL) == 1

    def test_get_template_returns_copy(self):
        template = get_template("cessna172")
        template.stations[0].weight = 0
        assert AIRCRAFT_TEMPLATES["cessna172"].stations[0].weight == 1500

    def test_unknown(self):
        assert get_template("concorde") is None

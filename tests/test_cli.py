"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

from wbcalc.cli import main


class TestEnvelopeCommand:
    def test_template_in_limits(self, capsys):
        assert main(["envelope", "--template", "cessna172", "--weight", "7=300"]) == 0
        out = capsys.readouterr().out
        assert "Cessna 172N" in out
        assert "1800.0 lb" in out
        assert "OUT OF LIMITS" not in out

    def test_out_of_limits_exit_code(self, capsys):
        assert main(["envelope", "--template", "cessna172", "--weight", "6=120"]) == 1
        assert "OUT OF LIMITS" in capsys.readouterr().out

    def test_json_document(self, capsys):
        assert main(["envelope", "--template", "cessna172", "--weight", "7=300", "--json"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["profileName"] == "Cessna 172N"
        assert document["summaries"]["tow"]["weight"] == 1800

    def test_profile_file(self, tmp_path, capsys):
        path = tmp_path / "profile.json"
        path.write_text(json.dumps({
            "name": "Test Aircraft",
            "macConfig": {"formula": "((CG - 35.0) / 14.9) * 100", "macMin": 15, "macMax": 38},
            "stations": [{"id": 1, "description": "Empty", "arm": 39.0, "weight": 1000}],
        }))
        assert main(["envelope", "--profile", str(path)]) == 0
        assert "Test Aircraft" in capsys.readouterr().out

    def test_unknown_station(self):
        with pytest.raises(SystemExit):
            main(["envelope", "--template", "cessna172", "--weight", "99=10"])

    def test_bad_weight_argument(self):
        with pytest.raises(SystemExit) as exc:
            main(["envelope", "--template", "cessna172", "--weight", "pilot"])
        assert exc.value.code == 2

    def test_negative_weight_rejected(self):
        with pytest.raises(SystemExit) as exc:
            main(["envelope", "--template", "cessna172", "--weight", "7=-300"])
        assert exc.value.code == 2

    def test_source_required(self):
        with pytest.raises(SystemExit):
            main(["envelope"])


class TestFuelCommand:
    def test_sequence(self, capsys):
        code = main([
            "fuel", "--template", "cessna172", "--weight", "7=100",
            "--flight-time", "1", "--burn-rate", "100",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "t= 0.00 h" in out
        assert "t= 1.00 h" in out

    def test_shortfall(self, capsys):
        code = main([
            "fuel", "--template", "cessna172", "--weight", "7=50",
            "--flight-time", "1", "--burn-rate", "100",
        ])
        assert code == 1
        assert "WARNING" in capsys.readouterr().out

    @pytest.mark.parametrize("option", ["--flight-time", "--burn-rate"])
    def test_negative_inputs_rejected(self, option):
        args = {"--flight-time": "1", "--burn-rate": "100"}
        args[option] = "-1"
        argv = ["fuel", "--template", "cessna172", "--weight", "7=100"]
        for name, value in args.items():
            argv += [name, value]
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2

    def test_no_fuel_stations(self, tmp_path):
        path = tmp_path / "glider.json"
        path.write_text(json.dumps({
            "name": "Glider",
            "macConfig": {"formula": "CG", "macMin": 0, "macMax": 100},
            "stations": [{"id": 1, "description": "Empty", "arm": 20.0, "weight": 300}],
        }))
        code = main(["fuel", "--profile", str(path), "--flight-time", "1", "--burn-rate", "10"])
        assert code == 2

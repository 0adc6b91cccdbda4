"""Command-line weight & balance check.

Usage:
    python -m wbcalc.cli envelope --profile /path/to/profile.json
    python -m wbcalc.cli envelope --template cessna172 --weight 2=170 --weight 7=240
    python -m wbcalc.cli fuel --template airbus319 --flight-time 2.5 --burn-rate 2400
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from wbcalc.contracts.aircraft import AircraftProfile, Station
from wbcalc.services.envelope import calculate_envelope_data
from wbcalc.services.export import build_export_document
from wbcalc.services.fuel_sequence import fuel_tanks_from_stations, simulate_fuel_sequence
from wbcalc.services.limits import validate_limits
from wbcalc.services.templates import AIRCRAFT_TEMPLATES, get_template
from wbcalc.services.units import format_length, format_weight

logger = logging.getLogger(__name__)


def _parse_weight(text: str) -> tuple[int, float]:
    station_id, _, weight = text.partition("=")
    try:
        parsed = int(station_id), float(weight)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected STATION_ID=WEIGHT, got '{text}'") from None
    if parsed[1] < 0:
        raise argparse.ArgumentTypeError(f"Weight cannot be negative: '{text}'")
    return parsed


def _non_negative(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a number, got '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"Must not be negative: '{text}'")
    return value


def load_profile(args: argparse.Namespace) -> AircraftProfile:
    """Profile from ``--profile`` or ``--template``, with ``--weight`` overrides."""
    if args.profile:
        logger.info("Loading profile: %s", args.profile)
        profile = AircraftProfile.model_validate(json.loads(args.profile.read_text()))
    else:
        profile = get_template(args.template)

    overrides = dict(args.weight or [])
    unknown = set(overrides) - {s.id for s in profile.stations}
    if unknown:
        raise SystemExit(f"Unknown station id(s): {sorted(unknown)}")
    profile.stations = [
        Station.model_validate({**s.model_dump(), "weight": overrides[s.id]})
        if s.id in overrides
        else s
        for s in profile.stations
    ]
    return profile


def run_envelope(profile: AircraftProfile, as_json: bool) -> int:
    if as_json:
        document = build_export_document(
            profile.name, profile.stations, profile.mac_config, profile.unit
        )
        print(json.dumps(document.to_record(), indent=2))
        return 0 if document.validation.all_in_limits else 1

    envelope = calculate_envelope_data(profile.stations, profile.mac_config, profile.is_metric)
    validation = validate_limits(envelope, profile.mac_config)
    print(f"{profile.name}  (%MAC limits {profile.mac_config.mac_min}-{profile.mac_config.mac_max})")
    for label in ("zfw", "tow", "ldw"):
        point = getattr(envelope, label)
        status = "OK" if getattr(validation, label) else "OUT OF LIMITS"
        print(
            f"  {label.upper()}  {format_weight(point.weight, profile.unit):>12}"
            f"  CG {format_length(point.cg, profile.unit):>12}"
            f"  {point.mac:6.2f} %MAC  {status}"
        )
    return 0 if validation.all_in_limits else 1


def run_fuel(profile: AircraftProfile, flight_time: float, burn_rate: float) -> int:
    tanks = fuel_tanks_from_stations(profile.stations)
    if not tanks:
        logger.error("Profile %s has no fuel stations", profile.name)
        return 2

    sequence = simulate_fuel_sequence(
        profile.stations, tanks, flight_time, burn_rate, profile.mac_config, profile.is_metric
    )
    for step in sequence.steps:
        print(
            f"  t={step.time:5.2f} h  {format_weight(step.total_weight, profile.unit):>12}"
            f"  CG {format_length(step.cg, profile.unit):>12}  {step.mac:6.2f} %MAC"
        )
    if sequence.fuel_shortfall:
        print(f"  WARNING: {format_weight(sequence.unburned_fuel, profile.unit)} of fuel missing")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Weight & Balance calculator")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_source(p: argparse.ArgumentParser) -> None:
        source = p.add_mutually_exclusive_group(required=True)
        source.add_argument("--profile", type=Path, help="Path to a profile JSON file")
        source.add_argument("--template", choices=sorted(AIRCRAFT_TEMPLATES), help="Built-in template")
        p.add_argument(
            "--weight", type=_parse_weight, action="append",
            metavar="ID=WEIGHT", help="Override a station weight (repeatable)",
        )

    envelope = sub.add_parser("envelope", help="Compute CG / %%MAC and check limits")
    add_source(envelope)
    envelope.add_argument("--json", action="store_true", help="Print the JSON export document")

    fuel = sub.add_parser("fuel", help="Simulate the fuel burn sequence")
    add_source(fuel)
    fuel.add_argument("--flight-time", type=_non_negative, required=True, help="Flight time in hours")
    fuel.add_argument("--burn-rate", type=_non_negative, required=True, help="Fuel burn per hour")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    profile = load_profile(args)
    if args.command == "envelope":
        return run_envelope(profile, args.json)
    return run_fuel(profile, args.flight_time, args.burn_rate)


if __name__ == "__main__":
    sys.exit(main())

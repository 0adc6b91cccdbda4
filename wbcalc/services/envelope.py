"""Envelope computation: ZFW / TOW / LDW aggregation, CG and %MAC.

Pure functions of their inputs. Stations are never modified; callers
build new station lists (e.g. the fuel sequence snapshots) instead.
"""

from __future__ import annotations

import logging

from wbcalc.contracts.aircraft import MacConfig, Station
from wbcalc.contracts.enums import StationType, UnitSystem
from wbcalc.contracts.envelope import EnvelopeData, EnvelopePoint, MassSummary, Summaries, Totals
from wbcalc.services.formula import FormulaError, evaluate
from wbcalc.services.units import inches_from

logger = logging.getLogger(__name__)


def calculate_summaries(stations: list[Station]) -> Summaries:
    """Aggregate station weights and moments per configuration.

    - ``basic`` / ``cargo``: zero-fuel weight.
    - ``fuel``: added on top of ZFW for takeoff weight.
    - ``landing_fuel``: estimated fuel at landing; the last such station
      *replaces* any previous one, LDW = ZFW + landing fuel.

    Totals exclude landing fuel (it is not loaded weight). ``totals.arm``
    sums the arms of all stations carrying weight, landing fuel included.
    """
    zfw_weight = zfw_moment = 0.0
    fuel_weight = fuel_moment = 0.0
    landing_weight = landing_moment = 0.0
    total_weight = total_moment = 0.0
    total_arm = 0.0

    for station in stations:
        moment = station.moment

        if station.type != StationType.LANDING_FUEL:
            total_weight += station.weight
            total_moment += moment

        if station.weight > 0:
            total_arm += station.arm

        if station.type == StationType.FUEL:
            fuel_weight += station.weight
            fuel_moment += moment
        elif station.type == StationType.LANDING_FUEL:
            landing_weight = station.weight
            landing_moment = moment
        else:
            zfw_weight += station.weight
            zfw_moment += moment

    return Summaries(
        zfw=MassSummary(weight=zfw_weight, moment=zfw_moment),
        tow=MassSummary(weight=zfw_weight + fuel_weight, moment=zfw_moment + fuel_moment),
        ldw=MassSummary(weight=zfw_weight + landing_weight, moment=zfw_moment + landing_moment),
        totals=Totals(weight=total_weight, moment=total_moment, arm=total_arm),
    )


def calculate_mac_percentage(cg: float, mac_config: MacConfig, is_metric: bool = False) -> float:
    """%MAC for a CG position; 0 when the formula cannot be evaluated.

    MAC formulas are written in inches, so metric CGs are converted first.
    """
    unit = UnitSystem.METRIC if is_metric else UnitSystem.IMPERIAL
    try:
        return evaluate(mac_config.formula, inches_from(cg, unit))
    except FormulaError as exc:
        logger.warning("Error calculating MAC percentage for CG %s: %s", cg, exc)
        return 0.0


def _envelope_point(summary: MassSummary, mac_config: MacConfig, is_metric: bool) -> EnvelopePoint:
    if summary.weight <= 0:
        return EnvelopePoint(cg=0.0, weight=summary.weight, mac=0.0)
    cg = summary.moment / summary.weight
    return EnvelopePoint(
        cg=cg,
        weight=summary.weight,
        mac=calculate_mac_percentage(cg, mac_config, is_metric),
    )


def calculate_envelope_data(
    stations: list[Station],
    mac_config: MacConfig,
    is_metric: bool = False,
) -> EnvelopeData:
    """CG and %MAC for ZFW, TOW and LDW.

    A configuration with zero weight yields ``cg = 0, mac = 0``.
    """
    summaries = calculate_summaries(stations)
    return EnvelopeData(
        zfw=_envelope_point(summaries.zfw, mac_config, is_metric),
        tow=_envelope_point(summaries.tow, mac_config, is_metric),
        ldw=_envelope_point(summaries.ldw, mac_config, is_metric),
    )

"""Envelope computation results.

All models here are **calculated**: recomputed on every input change and
never persisted on their own (a saved ``Calculation`` keeps a formatted
summary instead).
"""

from pydantic import Field

from wbcalc.contracts.common import RecordModel


class MassSummary(RecordModel):
    """Aggregate weight and moment of one configuration."""

    weight: float = 0.0
    moment: float = 0.0


class Totals(RecordModel):
    """Loaded totals, landing fuel excluded.

    ``arm`` is the plain sum of the arms of every station carrying weight.
    It is a legacy diagnostic shown as-is, not a CG.
    """

    weight: float = 0.0
    moment: float = 0.0
    arm: float = 0.0


class Summaries(RecordModel):
    zfw: MassSummary
    tow: MassSummary
    ldw: MassSummary
    totals: Totals


class EnvelopePoint(RecordModel):
    """CG position, weight and %MAC of one configuration."""

    cg: float = 0.0
    weight: float = 0.0
    mac: float = 0.0


class EnvelopeData(RecordModel):
    zfw: EnvelopePoint
    tow: EnvelopePoint
    ldw: EnvelopePoint


class LimitValidation(RecordModel):
    """Whether each configuration's %MAC lies within ``[mac_min, mac_max]``."""

    zfw: bool
    tow: bool
    ldw: bool
    all_in_limits: bool


class FormulaCheck(RecordModel):
    is_valid: bool
    error: str | None = None


class InputCheck(RecordModel):
    """Outcome of weight / station input validation."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)

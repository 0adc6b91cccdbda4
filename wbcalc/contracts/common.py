"""Base classes and shared types for weight & balance contracts.

Unit conventions (all contracts and API responses):
- **Weights**: pounds (imperial) or kilograms (metric), per the profile ``unit``
- **Lever arms / CG**: inches (imperial) or meters (metric), per the profile ``unit``
- **Moments**: weight x arm in the profile's units (displayed divided by 100)
- **%MAC**: percent of the Mean Aerodynamic Chord; MAC formulas are always
  written in inches, whatever the display unit
- **Datetimes**: always UTC, ISO 8601 in serialized form

Field names are snake_case in Python and camelCase on the wire
(``mac_config`` <-> ``macConfig``). Both spellings are accepted on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base model with JSON-record serialization.

    - Enums serialize as string values.
    - ``to_record()`` produces a JSON-safe dict with camelCase keys
      (datetimes as ISO 8601), the shape stored in JSON text columns
      and returned by the API.
    - ``from_record()`` hydrates from such a dict.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_record(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> "RecordModel":
        """Create model instance from a stored or posted dict."""
        return cls.model_validate(data)

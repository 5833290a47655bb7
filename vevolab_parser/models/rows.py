from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


def parse_optional_float(text: Optional[str]) -> Optional[float]:
    """
    Permissive numeric parse used for every numeric export column.

    Returns None for a missing, empty or whitespace-only field, and None (not an
    error) when the text is not a number. Never returns 0.0 for an empty field.
    """
    if text is None:
        return None
    s = text.strip()
    if not s:
        return None
    # float() would accept digit separators ("1_000")
    if "_" in s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def _text_at(fields: Sequence[str], idx: int) -> Optional[str]:
    if idx >= len(fields):
        return None
    return fields[idx]


def _float_at(fields: Sequence[str], idx: int) -> Optional[float]:
    if idx >= len(fields):
        return None
    return parse_optional_float(fields[idx])


MEASUREMENT_FIELDS: Tuple[str, ...] = (
    "id",
    "protocol",
    "measurement",
    "mode",
    "parameter",
    "units",
    "avg",
    "std",
    "instance_1",
    "instance_2",
)

CALCULATION_FIELDS: Tuple[str, ...] = (
    "id",
    "protocol",
    "calculation",
    "units",
    "value",
)


@dataclass(frozen=True)
class MeasurementRow:
    """
    One row of a protocol's measurement table.

    A line like::

        "A'","PW Tissue Doppler Mode","Velocity","mm/s","-14.438560","0.000000","-14.438560",

    maps positionally to measurement, mode, parameter, units, avg, std,
    instance_1, instance_2. ``id`` and ``protocol`` come from the enclosing
    "Series Name" and "Protocol Name" lines.
    """
    id: str
    protocol: str
    measurement: Optional[str] = None
    mode: Optional[str] = None
    parameter: Optional[str] = None
    units: Optional[str] = None
    avg: Optional[float] = None
    std: Optional[float] = None
    instance_1: Optional[float] = None
    instance_2: Optional[float] = None

    NUMERIC_FIELDS = ("avg", "std", "instance_1", "instance_2")

    @classmethod
    def fields(cls) -> Tuple[str, ...]:
        return MEASUREMENT_FIELDS

    @classmethod
    def from_fields(cls, id: str, protocol: str, fields: Sequence[str]) -> "MeasurementRow":
        return cls(
            id=id,
            protocol=protocol,
            measurement=_text_at(fields, 0),
            mode=_text_at(fields, 1),
            parameter=_text_at(fields, 2),
            units=_text_at(fields, 3),
            avg=_float_at(fields, 4),
            std=_float_at(fields, 5),
            instance_1=_float_at(fields, 6),
            instance_2=_float_at(fields, 7),
        )

    def as_tuple(self) -> tuple:
        return tuple(getattr(self, name) for name in MEASUREMENT_FIELDS)


@dataclass(frozen=True)
class CalculationRow:
    """
    One row of a protocol's calculation table.

    The calculation table has 4 columns but the second is always empty, so the
    builder reads indices 0 (calculation), 2 (units) and 3 (value).
    """
    id: str
    protocol: str
    calculation: Optional[str] = None
    units: Optional[str] = None
    value: Optional[float] = None

    NUMERIC_FIELDS = ("value",)

    @classmethod
    def fields(cls) -> Tuple[str, ...]:
        return CALCULATION_FIELDS

    @classmethod
    def from_fields(cls, id: str, protocol: str, fields: Sequence[str]) -> "CalculationRow":
        return cls(
            id=id,
            protocol=protocol,
            calculation=_text_at(fields, 0),
            units=_text_at(fields, 2),
            value=_float_at(fields, 3),
        )

    def as_tuple(self) -> tuple:
        return tuple(getattr(self, name) for name in CALCULATION_FIELDS)

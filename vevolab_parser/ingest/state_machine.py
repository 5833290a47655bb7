"""Finite state machine that routes tokenized export lines to typed rows.

States carry exactly the context they need:

    Idle
      -> InSeries(id)                    on "Series Name,<id>"
      -> InProtocol(id, protocol)        on "Protocol Name,<name>"
      -> InMeasurement(id, protocol)     on the 8-column measurement header
      -> InCalculation(id, protocol)     on the "Calculation,,Units," header
    InCalculation
      -> InProtocol(id, new protocol)    on "Protocol Name,<name>"
      -> InSeries(new id)                on "Series Name,<id>"

Rows are emitted only in InMeasurement and InCalculation, so every row has a
confirmed series id and protocol. There is no terminal state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from vevolab_parser.ingest.detect import (
    detect_protocol_name,
    detect_series_name,
    is_calculation_start,
    is_measurement_header,
)
from vevolab_parser.models.rows import CalculationRow, MeasurementRow


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class InSeries:
    id: str


@dataclass(frozen=True)
class InProtocol:
    id: str
    protocol: str


@dataclass(frozen=True)
class InMeasurement:
    id: str
    protocol: str


@dataclass(frozen=True)
class InCalculation:
    id: str
    protocol: str


ParserState = Union[Idle, InSeries, InProtocol, InMeasurement, InCalculation]
Row = Union[MeasurementRow, CalculationRow]


def advance(state: ParserState, fields: Sequence[str]) -> Tuple[ParserState, Optional[Row]]:
    """
    Consume one non-blank tokenized line.

    Returns the next state and the row the line represents, if any. Boundary
    and header lines never produce a row; unrecognised lines outside a table
    are ignored (same state, no row).
    """
    if isinstance(state, Idle):
        series_id = detect_series_name(fields)
        if series_id is not None:
            return InSeries(id=series_id), None
        return state, None

    if isinstance(state, InSeries):
        protocol = detect_protocol_name(fields)
        if protocol is not None:
            return InProtocol(id=state.id, protocol=protocol), None
        return state, None

    if isinstance(state, InProtocol):
        if is_measurement_header(fields):
            return InMeasurement(id=state.id, protocol=state.protocol), None
        return state, None

    if isinstance(state, InMeasurement):
        if is_calculation_start(fields):
            return InCalculation(id=state.id, protocol=state.protocol), None
        return state, MeasurementRow.from_fields(state.id, state.protocol, fields)

    if isinstance(state, InCalculation):
        # protocol before series: both are 2-field lines
        protocol = detect_protocol_name(fields)
        if protocol is not None:
            return InProtocol(id=state.id, protocol=protocol), None
        series_id = detect_series_name(fields)
        if series_id is not None:
            return InSeries(id=series_id), None
        return state, CalculationRow.from_fields(state.id, state.protocol, fields)

    raise TypeError(f"Unknown parser state: {state!r}")

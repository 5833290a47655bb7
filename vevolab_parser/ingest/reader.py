from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from vevolab_parser.ingest.state_machine import (
    Idle,
    InCalculation,
    InMeasurement,
    InProtocol,
    InSeries,
    ParserState,
    advance,
)
from vevolab_parser.ingest.tokenize import tokenize_line
from vevolab_parser.models.rows import CalculationRow, MeasurementRow
from vevolab_parser.models.tables import CalculationTable, MeasurementTable


@dataclass(frozen=True)
class VevoLabReaderConfig:
    """
    Reader configuration for Vevo LAB CSV exports.

    encoding / encoding_errors:
      - passed to ``open``; with "strict" an undecodable export is a fatal error.

    record_boundaries:
      - True: add one note per detected series / protocol boundary to
              ``VevoLabExport.warnings`` (useful to audit how a file was split).
      - False: only end-of-parse diagnostics are recorded.
    """
    encoding: str = "utf-8"
    encoding_errors: str = "strict"
    record_boundaries: bool = True


@dataclass(frozen=True)
class VevoLabExport:
    """
    In-memory result of parsing one Vevo LAB export.

    Notes
    - Rows keep file order; nothing is sorted, merged or deduplicated.
    - warnings holds non-fatal diagnostics only; malformed lines never raise.
    """
    source_path: Optional[Path]
    measurements: MeasurementTable
    calculations: CalculationTable
    final_state: ParserState
    n_lines: int = 0
    n_ignored_lines: int = 0
    warnings: Tuple[str, ...] = ()


def _boundary_note(prev: ParserState, new: ParserState, lineno: int) -> Optional[str]:
    if isinstance(new, InSeries) and new != prev:
        return f"line {lineno}: series '{new.id}'"
    if isinstance(new, InProtocol) and not isinstance(prev, InProtocol):
        return f"line {lineno}: protocol '{new.protocol}' (series '{new.id}')"
    return None


def parse_lines(
    lines: Iterable[str],
    *,
    source_path: Optional[Path] = None,
    config: Optional[VevoLabReaderConfig] = None,
) -> VevoLabExport:
    """
    Run the section state machine over an iterable of raw lines.

    Blank lines are dropped before the state machine. Every other line either
    moves the state, produces a row, or is ignored (counted in n_ignored_lines).
    """
    cfg = config or VevoLabReaderConfig()
    measurements = MeasurementTable()
    calculations = CalculationTable()
    warnings: List[str] = []

    state: ParserState = Idle()
    n_lines = 0
    n_ignored = 0
    series_without_rows: List[str] = []
    rows_in_series = 0

    for lineno, raw_line in enumerate(lines, start=1):
        n_lines = lineno
        fields = tokenize_line(raw_line)
        if fields is None:
            continue

        new_state, row = advance(state, fields)

        if isinstance(row, MeasurementRow):
            measurements.add_row(row)
            rows_in_series += 1
        elif isinstance(row, CalculationRow):
            calculations.add_row(row)
            rows_in_series += 1
        elif new_state == state:
            n_ignored += 1

        if isinstance(new_state, InSeries) and new_state != state:
            if isinstance(state, (InSeries, InProtocol, InMeasurement, InCalculation)) and rows_in_series == 0:
                series_without_rows.append(state.id)
            rows_in_series = 0

        if cfg.record_boundaries:
            note = _boundary_note(state, new_state, lineno)
            if note is not None:
                warnings.append(note)

        state = new_state

    if isinstance(state, (InSeries, InProtocol, InMeasurement, InCalculation)) and rows_in_series == 0:
        series_without_rows.append(state.id)

    if isinstance(state, Idle):
        warnings.append("WARNING: no 'Series Name' line found; export produced no rows.")
    for sid in series_without_rows:
        warnings.append(f"WARNING: series '{sid}' produced no measurement or calculation rows.")
    warnings.append(
        f"parsed {len(measurements)} measurement rows and {len(calculations)} calculation rows "
        f"from {n_lines} lines ({n_ignored} ignored); final state {state!r}"
    )

    return VevoLabExport(
        source_path=source_path,
        measurements=measurements,
        calculations=calculations,
        final_state=state,
        n_lines=n_lines,
        n_ignored_lines=n_ignored,
        warnings=tuple(warnings),
    )


class VevoLabCsvReader:
    """
    Reads a Vevo LAB CSV export into measurement and calculation tables.

    Contract:
      - The path MUST be an existing regular file (FileNotFoundError otherwise).
      - I/O and decoding errors propagate; there is no partial recovery.
      - Unrecognised or malformed content never raises.
    """

    def __init__(self, config: Optional[VevoLabReaderConfig] = None):
        self.config = config or VevoLabReaderConfig()

    def read(self, path: str | Path) -> VevoLabExport:
        p = Path(path).expanduser()
        if not p.is_file():
            raise FileNotFoundError(f"'{p}' does not exist or is not a regular file.")
        # lines end at "\n" only; a stray "\r" stays inside the line
        with open(
            p, "r", encoding=self.config.encoding, errors=self.config.encoding_errors, newline="\n"
        ) as f:
            return parse_lines(f, source_path=p, config=self.config)

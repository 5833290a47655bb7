"""Ingest package - tokenizer, section detection and export reader.

This package handles:
- Splitting export lines into fields (tokenize)
- Recognising series / protocol / table-header lines (detect)
- Routing lines to typed rows through a finite state machine (state_machine)
- Reading a whole export file into tables (reader)

Key classes:
- VevoLabCsvReader: reads one export file into a VevoLabExport

Design principle:
- Tolerant parsing: malformed lines are skipped or yield absent values
- Diagnostics are collected in VevoLabExport.warnings, never printed
"""
from .detect import (
    detect_protocol_name,
    detect_series_name,
    is_calculation_start,
    is_measurement_header,
)
from .reader import VevoLabCsvReader, VevoLabExport, VevoLabReaderConfig, parse_lines
from .state_machine import (
    Idle,
    InCalculation,
    InMeasurement,
    InProtocol,
    InSeries,
    ParserState,
    advance,
)
from .tokenize import is_blank_line, split_fields, tokenize_line

__all__ = [
    "detect_protocol_name",
    "detect_series_name",
    "is_calculation_start",
    "is_measurement_header",
    "VevoLabCsvReader",
    "VevoLabExport",
    "VevoLabReaderConfig",
    "parse_lines",
    "Idle",
    "InCalculation",
    "InMeasurement",
    "InProtocol",
    "InSeries",
    "ParserState",
    "advance",
    "is_blank_line",
    "split_fields",
    "tokenize_line",
]

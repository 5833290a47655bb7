"""VevoLAB parser -- Python tooling for VisualSonics Vevo LAB CSV exports.

A Vevo LAB export is a single flat CSV file that embeds several tables
(per-series, per-protocol measurement and calculation blocks) with shifting
headers. This package provides tools for:
- Tokenizing export lines into trimmed, quote-stripped fields
- Detecting series, protocol, measurement and calculation boundaries
- Building typed measurement/calculation rows with the series/protocol context
- Writing the two tables as tidy CSV files

Key principles:
- Tolerant: unknown lines are skipped, unparseable numbers become absent values
- Order preserving: rows are kept in file order, never sorted or deduplicated

Main subpackages:
- ingest: tokenizer, section detectors, state machine and file reader
- models: row and table data models
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

"""Command-line entry point: split a Vevo LAB export into two tidy CSV files.

Example
-------
    vevolabparser data/input.csv
    python -m vevolab_parser data/input.csv --out-dir results/

writes ``input_measurements.csv`` and ``input_calculations.csv``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

from vevolab_parser import __version__
from vevolab_parser.ingest.reader import VevoLabCsvReader, VevoLabExport, VevoLabReaderConfig


def output_paths(input_path: Path, out_dir: Path) -> Tuple[Path, Path]:
    """``(<out_dir>/<stem>_measurements.csv, <out_dir>/<stem>_calculations.csv)``."""
    stem = input_path.stem or "input"
    return out_dir / f"{stem}_measurements.csv", out_dir / f"{stem}_calculations.csv"


def write_export(export: VevoLabExport, input_path: Path, out_dir: Path) -> Tuple[Path, Path]:
    meas_path, calc_path = output_paths(input_path, out_dir)
    export.measurements.write_csv(meas_path)
    export.calculations.write_csv(calc_path)
    return meas_path, calc_path


def _err(msg: str) -> None:
    print(msg, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="vevolabparser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Extract measurement and calculation data from a VisualSonics Vevo LAB CSV export.

            The export is scanned for 'Series Name' / 'Protocol Name' sections and their
            measurement and calculation tables. Two files are written:
              <stem>_measurements.csv and <stem>_calculations.csv
            """
        ),
    )
    p.add_argument("input", metavar="CSV_FILE", help="Path to the input CSV file")
    p.add_argument("--out-dir", default=None, help="Output directory (default: current working directory)")
    p.add_argument("--encoding", default="utf-8", help="Text encoding of the export (default: utf-8)")
    p.add_argument("--verbose", "-v", action="store_true", help="Print detected series/protocol boundaries")
    p.add_argument("--quiet", "-q", action="store_true", help="Only print errors")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    ns = p.parse_args(list(argv) if argv is not None else None)

    input_path = Path(ns.input)
    if not input_path.is_file():
        _err(f"Error: '{input_path}' does not exist or is not a regular file.")
        return 1

    out_dir = Path(ns.out_dir) if ns.out_dir else Path.cwd()
    if not out_dir.is_dir():
        _err(f"Error: output directory '{out_dir}' does not exist.")
        return 1

    if not ns.quiet:
        _err(f"[info] Parsing file: {input_path}")

    cfg = VevoLabReaderConfig(encoding=ns.encoding, record_boundaries=bool(ns.verbose))
    export = VevoLabCsvReader(cfg).read(input_path)

    if ns.verbose:
        for w in export.warnings:
            _err(f"[info] {w}")
    elif not ns.quiet:
        for w in export.warnings:
            if w.startswith("WARNING:"):
                _err("[warn] " + w[len("WARNING:"):].strip())

    meas_path, calc_path = write_export(export, input_path, out_dir)

    if not ns.quiet:
        _err(f"[info] Parsing complete. Output written to {meas_path} and {calc_path}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

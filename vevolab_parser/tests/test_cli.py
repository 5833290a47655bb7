"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from vevolab_parser.cli import main, output_paths

EXPORT = "\n".join(
    [
        "Series Name,10-a",
        "Protocol Name,MV Flow",
        "Measurement,Mode,Parameter,Units,Avg,Std,Instance 1,Instance 2",
        '"A\'","PW Tissue Doppler Mode","Velocity","mm/s","-14.438560","0.000000","42.0",""',
        "Calculation,,Units,",
        '"A\'/E\'",,"none","1.538462"',
        "",
    ]
)


def _write_export(folder: Path, name: str = "study.csv") -> Path:
    p = folder / name
    p.write_text(EXPORT, encoding="utf-8")
    return p


def test_output_paths_use_stem(tmp_path) -> None:
    m, c = output_paths(Path("data/run.1.csv"), tmp_path)
    assert m == tmp_path / "run.1_measurements.csv"
    assert c == tmp_path / "run.1_calculations.csv"


def test_main_writes_two_files(tmp_path, capsys) -> None:
    src = _write_export(tmp_path)
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    assert main([str(src), "--out-dir", str(out_dir)]) == 0

    meas = pd.read_csv(out_dir / "study_measurements.csv", keep_default_na=False)
    calc = pd.read_csv(out_dir / "study_calculations.csv", keep_default_na=False)
    assert list(meas.columns) == [
        "id", "protocol", "measurement", "mode", "parameter", "units", "avg", "std", "instance_1", "instance_2",
    ]
    assert len(meas) == 1 and len(calc) == 1
    assert meas["measurement"].iloc[0] == "A'"
    assert meas["instance_2"].iloc[0] == ""
    assert calc["calculation"].iloc[0] == "A'/E'"
    assert calc["id"].astype(str).iloc[0] == "10-a"

    err = capsys.readouterr().err
    assert "[info] Parsing file:" in err
    assert "Parsing complete." in err


def test_main_defaults_to_cwd(tmp_path, monkeypatch) -> None:
    src = _write_export(tmp_path)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    assert main([str(src), "--quiet"]) == 0
    assert (work / "study_measurements.csv").is_file()
    assert (work / "study_calculations.csv").is_file()


def test_main_missing_input(tmp_path, capsys, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "nope.csv")]) == 1
    err = capsys.readouterr().err
    assert "does not exist or is not a regular file" in err
    assert list(tmp_path.iterdir()) == []


def test_main_directory_input(tmp_path) -> None:
    assert main([str(tmp_path)]) == 1


def test_main_verbose_prints_boundaries(tmp_path, capsys) -> None:
    src = _write_export(tmp_path)
    assert main([str(src), "--out-dir", str(tmp_path), "--verbose"]) == 0
    err = capsys.readouterr().err
    assert "[info] line 1: series '10-a'" in err
    assert "protocol 'MV Flow'" in err


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "vevolabparser" in capsys.readouterr().out


def test_main_encoding_option(tmp_path) -> None:
    src = tmp_path / "latin.csv"
    src.write_bytes(
        "\n".join(
            [
                "Series Name,souris-é",
                "Protocol Name,MV Flow",
                "Measurement,Mode,Parameter,Units,Avg,Std,Instance 1,Instance 2",
                "HR,B-Mode,Rate,BPM,420,,420,",
                "",
            ]
        ).encode("latin-1")
    )

    assert main([str(src), "--out-dir", str(tmp_path), "--encoding", "latin-1", "--quiet"]) == 0
    meas = pd.read_csv(tmp_path / "latin_measurements.csv", encoding="utf-8")
    assert meas["id"].iloc[0] == "souris-é"

    with pytest.raises(UnicodeDecodeError):
        main([str(src), "--out-dir", str(tmp_path), "--quiet"])

"""Tests for section-boundary detectors."""

from __future__ import annotations

import pytest

from vevolab_parser.ingest.detect import (
    detect_protocol_name,
    detect_series_name,
    is_calculation_start,
    is_measurement_header,
)

MEASUREMENT_HEADER = [
    "Measurement",
    "Mode",
    "Parameter",
    "Units",
    "Avg",
    "Std",
    "Instance 1",
    "Instance 2",
]


# -----------------------------------------------------------------------
# Series / protocol
# -----------------------------------------------------------------------


def test_detect_series_name() -> None:
    assert detect_series_name(["Series Name", "10-a"]) == "10-a"


def test_detect_series_name_needs_two_fields() -> None:
    assert detect_series_name(["Series Name"]) is None
    assert detect_series_name(["Series Name", "10-a", ""]) is None


def test_detect_series_name_prefix_match() -> None:
    assert detect_series_name(["Series Name (ID)", "7"]) == "7"
    assert detect_series_name(["Name", "7"]) is None


def test_detect_series_name_keeps_empty_id() -> None:
    assert detect_series_name(["Series Name", ""]) == ""


def test_detect_protocol_name() -> None:
    assert detect_protocol_name(["Protocol Name", "MV Flow"]) == "MV Flow"


def test_detect_protocol_name_requires_value() -> None:
    assert detect_protocol_name(["Protocol Name", ""]) is None
    assert detect_protocol_name(["Protocol Name"]) is None


# -----------------------------------------------------------------------
# Table headers
# -----------------------------------------------------------------------


def test_measurement_header_recognised() -> None:
    assert is_measurement_header(MEASUREMENT_HEADER)
    assert is_measurement_header(MEASUREMENT_HEADER[:7] + ["Instance 2 (ms)"])


def test_measurement_header_seven_fields_rejected() -> None:
    fields = MEASUREMENT_HEADER[:6] + ["Instance 2"]
    assert len(fields) == 7
    assert not is_measurement_header(fields)


def test_measurement_header_last_column_must_match() -> None:
    assert not is_measurement_header(MEASUREMENT_HEADER[:7] + ["Instance 3"])


def test_calculation_start_recognised() -> None:
    assert is_calculation_start(["Calculation", "", "Units", ""])


@pytest.mark.parametrize(
    "fields",
    [
        ["Calculation", "", "Other", ""],
        ["Calculation", "", "Units"],
        ["Calculation", "", "Units", "", ""],
        ["Measurement", "", "Units", ""],
    ],
)
def test_calculation_start_rejected(fields) -> None:
    assert not is_calculation_start(fields)

"""Section-boundary detection for Vevo LAB exports.

Each detector looks at one tokenized line and decides, from its field count and
the prefixes of specific fields, whether it opens a new section. Detectors never
raise: a line that does not match simply returns None/False.
"""

from __future__ import annotations

from typing import Optional, Sequence


SERIES_PREFIX = "Series Name"
PROTOCOL_PREFIX = "Protocol Name"
MEASUREMENT_PREFIX = "Measurement"
MEASUREMENT_LAST_PREFIX = "Instance 2"
CALCULATION_PREFIX = "Calculation"
CALCULATION_UNITS_PREFIX = "Units"

MEASUREMENT_HEADER_WIDTH = 8
CALCULATION_HEADER_WIDTH = 4


# ---------------------------------------------------------------------------
# Context lines
# ---------------------------------------------------------------------------


def detect_series_name(fields: Sequence[str]) -> Optional[str]:
    """Series id from a ``Series Name,<id>`` line, else None."""
    if len(fields) == 2 and fields[0].startswith(SERIES_PREFIX):
        return fields[1]
    return None


def detect_protocol_name(fields: Sequence[str]) -> Optional[str]:
    """
    Protocol name from a ``Protocol Name,<name>`` line, else None.

    "Protocol Name" also appears with an empty value in other contexts of the
    export; those lines are not protocol boundaries.
    """
    if len(fields) == 2 and fields[0].startswith(PROTOCOL_PREFIX) and fields[1] != "":
        return fields[1]
    return None


# ---------------------------------------------------------------------------
# Table headers
# ---------------------------------------------------------------------------


def is_measurement_header(fields: Sequence[str]) -> bool:
    """8 fields, starting with "Measurement" and ending with "Instance 2"."""
    return (
        len(fields) == MEASUREMENT_HEADER_WIDTH
        and fields[0].startswith(MEASUREMENT_PREFIX)
        and fields[7].startswith(MEASUREMENT_LAST_PREFIX)
    )


def is_calculation_start(fields: Sequence[str]) -> bool:
    """4 fields, starting with "Calculation", third column "Units"."""
    return (
        len(fields) == CALCULATION_HEADER_WIDTH
        and fields[0].startswith(CALCULATION_PREFIX)
        and fields[2].startswith(CALCULATION_UNITS_PREFIX)
    )

from .rows import (
    CALCULATION_FIELDS,
    MEASUREMENT_FIELDS,
    CalculationRow,
    MeasurementRow,
    parse_optional_float,
)
from .tables import CalculationTable, MeasurementTable, RowTable

__all__ = [
    "CALCULATION_FIELDS",
    "MEASUREMENT_FIELDS",
    "CalculationRow",
    "MeasurementRow",
    "parse_optional_float",
    "CalculationTable",
    "MeasurementTable",
    "RowTable",
]

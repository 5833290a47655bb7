from __future__ import annotations

import math
from pathlib import Path
from typing import Generic, Iterator, List, Optional, Tuple, Type, TypeVar, Union

import numpy as np
import pandas as pd

from vevolab_parser.models.rows import CalculationRow, MeasurementRow

RowT = TypeVar("RowT", MeasurementRow, CalculationRow)


class RowTable(Generic[RowT]):
    """
    Append-only, insertion-ordered collection of one row type.

    Rows are never reordered or deduplicated; two reads of the same export yield
    tables with identical rows in identical order.
    """

    row_type: Type[RowT]

    def __init__(self) -> None:
        self._rows: List[RowT] = []

    def add_row(self, row: RowT) -> None:
        if not isinstance(row, self.row_type):
            raise TypeError(f"{type(self).__name__} accepts {self.row_type.__name__}, got {type(row).__name__}")
        self._rows.append(row)

    @property
    def rows(self) -> Tuple[RowT, ...]:
        return tuple(self._rows)

    @property
    def columns(self) -> Tuple[str, ...]:
        return self.row_type.fields()

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[RowT]:
        return iter(self._rows)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabular view with one column per row field, in output order.

        Numeric columns are float64 with NaN for absent values; text columns keep
        None for absent values.
        """
        cols = list(self.columns)
        df = pd.DataFrame([r.as_tuple() for r in self._rows], columns=cols)
        for c in self.row_type.NUMERIC_FIELDS:
            df[c] = df[c].astype(np.float64)
        return df

    def _csv_frame(self) -> pd.DataFrame:
        # absent -> "", parsed NaN -> "NaN"; to_dataframe() cannot tell them apart
        df = self.to_dataframe()
        for c in self.row_type.NUMERIC_FIELDS:
            df[c] = pd.Series([_csv_number(getattr(r, c)) for r in self._rows], index=df.index, dtype=object)
        return df

    def write_csv(self, path: Union[str, Path]) -> Path:
        """
        Write the table as CSV.

        The header is always present. Absent values are written as empty fields;
        a value parsed from "NaN" is written as ``NaN``.
        """
        out = Path(path)
        self._csv_frame().to_csv(out, index=False, na_rep="")
        return out


def _csv_number(value: Optional[float]) -> Union[float, str]:
    if value is None:
        return ""
    if math.isnan(value):
        return "NaN"
    return value


class MeasurementTable(RowTable[MeasurementRow]):
    row_type = MeasurementRow


class CalculationTable(RowTable[CalculationRow]):
    row_type = CalculationRow

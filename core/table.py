"""
Table layout for the customer collection.

Columns come from the first record only. Records with a different shape
show blanks for keys the first record lacks, and their extra keys are not
shown.
"""

from typing import Iterable, List, Sequence

import pandas as pd

from core.models import EXCLUDED_FIELDS, Record, Scalar


def derive_columns(records: Sequence[Record], excluded: Iterable[str] = EXCLUDED_FIELDS) -> List[str]:
    """Return the keys of the first record, minus the internal fields."""
    if not records:
        return []
    skip = set(excluded)
    return [key for key in records[0] if key not in skip]


def header_label(column: str) -> str:
    return column.upper()


def format_cell(value: Scalar) -> str:
    if value is None:
        return ""
    return str(value)


def table_rows(records: Sequence[Record], columns: Sequence[str]) -> List[List[str]]:
    return [[format_cell(record.get(col)) for col in columns] for record in records]


def to_dataframe(records: Sequence[Record]) -> pd.DataFrame:
    """Build the display table: one row per record, upper-cased headers.

    The index is the record's position in the collection.
    """
    columns = derive_columns(records)
    return pd.DataFrame(
        table_rows(records, columns),
        columns=[header_label(col) for col in columns],
    )

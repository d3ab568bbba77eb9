"""
Load trip logs and fuel receipts exported from the record store.

Expected columns:
    trips:    date, miles, start_location, end_location
    receipts: receipt_date, location, gallons, total_amount

Extra columns are ignored and missing ones are treated as blank. Numeric
cells that do not parse are counted as zero, matching how the engine treats
bad values.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from fuel_tax_engine.records import FuelPurchaseRecord, TripRecord

logger = logging.getLogger(__name__)

TRIP_COLUMNS = ["date", "miles", "start_location", "end_location"]
RECEIPT_COLUMNS = ["receipt_date", "location", "gallons", "total_amount"]


def _read_table(
    path: Union[str, Path], columns: list[str], numeric: list[str]
) -> pd.DataFrame:
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip().lower() for c in df.columns]
    df = df.reindex(columns=columns, fill_value="").astype(str)

    for col in numeric:
        values = pd.to_numeric(df[col].str.strip(), errors="coerce")
        bad = int((values.isna() & (df[col].str.strip() != "")).sum())
        if bad:
            logger.warning(
                "%s: %d non-numeric %r value(s) counted as zero",
                csv_path.name,
                bad,
                col,
            )
        # keep the cell text so Decimal parsing sees the exact figure
        df[col] = df[col].where(values.notna(), "0")

    return df


def load_trips_csv(path: Union[str, Path]) -> list[TripRecord]:
    df = _read_table(path, TRIP_COLUMNS, numeric=["miles"])
    return [TripRecord.from_dict(row) for row in df.to_dict(orient="records")]


def load_receipts_csv(path: Union[str, Path]) -> list[FuelPurchaseRecord]:
    df = _read_table(path, RECEIPT_COLUMNS, numeric=["gallons", "total_amount"])
    return [
        FuelPurchaseRecord.from_dict(row) for row in df.to_dict(orient="records")
    ]

"""
Trip and fuel-purchase records consumed by the tax engine.

Records are owned by the trip-logging and receipt subsystems; the engine
only reads them. Numeric fields arrive from user entry and OCR, so they are
coerced rather than validated: anything missing, non-numeric, non-finite or
negative reads as zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from fuel_tax_engine.periods import parse_record_date

_ZERO = Decimal("0")


def coerce_quantity(value: Any) -> Decimal:
    """Read a mile, gallon or dollar figure, defaulting to zero."""
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return _ZERO
    if not result.is_finite() or result < 0:
        return _ZERO
    return result


@dataclass(frozen=True)
class TripRecord:
    """A logged trip. The full mileage is attributed to one jurisdiction."""

    date: Optional[date]
    miles: Decimal
    start_location: str = ""
    end_location: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "TripRecord":
        return cls(
            date=parse_record_date(data.get("date")),
            miles=coerce_quantity(data.get("miles")),
            start_location=str(data.get("start_location") or ""),
            end_location=str(data.get("end_location") or ""),
        )


@dataclass(frozen=True)
class FuelPurchaseRecord:
    """A fuel receipt."""

    receipt_date: Optional[date]
    gallons: Decimal
    location: str = ""
    total_amount: Decimal = _ZERO

    @classmethod
    def from_dict(cls, data: dict) -> "FuelPurchaseRecord":
        return cls(
            receipt_date=parse_record_date(data.get("receipt_date")),
            gallons=coerce_quantity(data.get("gallons")),
            location=str(data.get("location") or ""),
            total_amount=coerce_quantity(data.get("total_amount")),
        )


TripLike = Union[TripRecord, dict]
ReceiptLike = Union[FuelPurchaseRecord, dict]


def as_trip(record: TripLike) -> TripRecord:
    if isinstance(record, TripRecord):
        return record
    return TripRecord.from_dict(record)


def as_receipt(record: ReceiptLike) -> FuelPurchaseRecord:
    if isinstance(record, FuelPurchaseRecord):
        return record
    return FuelPurchaseRecord.from_dict(record)

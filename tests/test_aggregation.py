"""Tests for per-jurisdiction mileage and fuel grouping."""

from datetime import date
from decimal import Decimal

from fuel_tax_engine.aggregation import (
    aggregate_fuel,
    aggregate_miles,
    receipt_jurisdiction,
    trip_jurisdiction,
)
from fuel_tax_engine.records import FuelPurchaseRecord, TripRecord
from fuel_tax_engine.resolver import UNKNOWN


def _trip(miles: str, start: str = "", end: str = "") -> TripRecord:
    return TripRecord(
        date=date(2024, 1, 15),
        miles=Decimal(miles),
        start_location=start,
        end_location=end,
    )


def _receipt(gallons: str, location: str, amount: str = "0") -> FuelPurchaseRecord:
    return FuelPurchaseRecord(
        receipt_date=date(2024, 1, 15),
        gallons=Decimal(gallons),
        location=location,
        total_amount=Decimal(amount),
    )


# ── Trip jurisdiction ────────────────────────────────────────────────


def test_start_location_wins():
    assert trip_jurisdiction(_trip("100", "Denver, CO", "Topeka, KS")) == "CO"


def test_end_location_fallback():
    assert trip_jurisdiction(_trip("100", "Yard 3", "Topeka, KS")) == "KS"


def test_both_unresolved():
    assert trip_jurisdiction(_trip("100", "Yard 3", "Customer site")) == UNKNOWN


def test_receipt_jurisdiction_uses_location_only():
    assert receipt_jurisdiction(_receipt("50", "Pilot, Kansas")) == "KS"
    assert receipt_jurisdiction({"location": ""}) == UNKNOWN


# ── Mileage aggregation ──────────────────────────────────────────────


def test_miles_summed_per_jurisdiction():
    buckets = aggregate_miles(
        [
            _trip("500", "Denver, CO"),
            _trip("120.5", "Pueblo, CO"),
            _trip("300", "Topeka, KS"),
        ]
    )
    assert buckets["CO"].miles == Decimal("620.5")
    assert buckets["CO"].trip_count == 2
    assert buckets["KS"].miles == Decimal("300")
    assert buckets["KS"].trip_count == 1


def test_cross_border_trip_credited_to_start():
    buckets = aggregate_miles([_trip("450", "Denver, CO", "Topeka, KS")])
    assert list(buckets) == ["CO"]
    assert buckets["CO"].miles == Decimal("450")


def test_unresolved_trips_dropped():
    buckets = aggregate_miles(
        [_trip("500", "Denver, CO"), _trip("999", "Home", "Somewhere")]
    )
    assert list(buckets) == ["CO"]
    assert buckets["CO"].miles == Decimal("500")


def test_buckets_in_first_seen_order():
    buckets = aggregate_miles(
        [_trip("1", "Topeka, KS"), _trip("1", "Denver, CO"), _trip("1", "Wichita, KS")]
    )
    assert list(buckets) == ["KS", "CO"]


def test_raw_dict_trips_with_bad_miles():
    buckets = aggregate_miles(
        [
            {"date": "2024-01-15", "miles": "abc", "start_location": "Denver, CO"},
            {"date": "2024-01-16", "miles": -40, "start_location": "Denver, CO"},
            {"date": "2024-01-17", "miles": "75", "start_location": "Denver, CO"},
        ]
    )
    assert buckets["CO"].miles == Decimal("75")
    assert buckets["CO"].trip_count == 3


def test_empty_trips():
    assert aggregate_miles([]) == {}


# ── Fuel aggregation ─────────────────────────────────────────────────


def test_fuel_summed_per_jurisdiction():
    buckets = aggregate_fuel(
        [
            _receipt("100", "CO", "389.90"),
            _receipt("50.25", "Limon, Colorado", "190.00"),
            _receipt("80", "Salina, KS", "300.00"),
        ]
    )
    assert buckets["CO"].gallons == Decimal("150.25")
    assert buckets["CO"].total_amount == Decimal("579.90")
    assert buckets["CO"].receipt_count == 2
    assert buckets["KS"].receipt_count == 1


def test_unresolved_receipts_dropped():
    buckets = aggregate_fuel([_receipt("100", "gas station"), _receipt("20", "CO")])
    assert list(buckets) == ["CO"]
    assert buckets["CO"].gallons == Decimal("20")


def test_raw_dict_receipts_with_bad_amounts():
    buckets = aggregate_fuel(
        [{"receipt_date": "2024-01-15", "location": "CO", "gallons": "n/a", "total_amount": None}]
    )
    assert buckets["CO"].gallons == Decimal("0")
    assert buckets["CO"].total_amount == Decimal("0")
    assert buckets["CO"].receipt_count == 1

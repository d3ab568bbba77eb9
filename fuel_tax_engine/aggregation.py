"""
Per-jurisdiction grouping of trips and fuel receipts.

Both aggregators are pure reductions. Records whose location cannot be
resolved are left out rather than reported as errors. Buckets are returned
in first-seen order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from fuel_tax_engine.records import (
    ReceiptLike,
    TripLike,
    as_receipt,
    as_trip,
    coerce_quantity,
)
from fuel_tax_engine.resolver import UNKNOWN, JurisdictionResolver

logger = logging.getLogger(__name__)


@dataclass
class MileageBucket:
    miles: Decimal = Decimal("0")
    trip_count: int = 0


@dataclass
class FuelBucket:
    gallons: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    receipt_count: int = 0


def trip_jurisdiction(
    trip: TripLike, resolver: Optional[JurisdictionResolver] = None
) -> str:
    """
    Resolve the jurisdiction a trip's miles are credited to.

    The start location wins; the end location is only consulted when the
    start cannot be resolved. A trip that crosses into another jurisdiction
    is credited entirely to where it started.
    """
    resolver = resolver or JurisdictionResolver()
    trip = as_trip(trip)
    code = resolver.resolve(trip.start_location)
    if code == UNKNOWN:
        code = resolver.resolve(trip.end_location)
    return code


def receipt_jurisdiction(
    receipt: ReceiptLike, resolver: Optional[JurisdictionResolver] = None
) -> str:
    resolver = resolver or JurisdictionResolver()
    return resolver.resolve(as_receipt(receipt).location)


def aggregate_miles(
    trips: Iterable[TripLike],
    resolver: Optional[JurisdictionResolver] = None,
) -> dict[str, MileageBucket]:
    """Sum miles and count trips per resolved jurisdiction."""
    resolver = resolver or JurisdictionResolver()
    buckets: dict[str, MileageBucket] = {}
    dropped = 0

    for raw in trips:
        trip = as_trip(raw)
        code = trip_jurisdiction(trip, resolver)
        if code == UNKNOWN:
            dropped += 1
            continue
        bucket = buckets.setdefault(code, MileageBucket())
        bucket.miles += coerce_quantity(trip.miles)
        bucket.trip_count += 1

    if dropped:
        logger.debug("Dropped %d trip(s) with unresolved locations", dropped)
    return buckets


def aggregate_fuel(
    receipts: Iterable[ReceiptLike],
    resolver: Optional[JurisdictionResolver] = None,
) -> dict[str, FuelBucket]:
    """Sum gallons and dollars and count receipts per resolved jurisdiction."""
    resolver = resolver or JurisdictionResolver()
    buckets: dict[str, FuelBucket] = {}
    dropped = 0

    for raw in receipts:
        receipt = as_receipt(raw)
        code = resolver.resolve(receipt.location)
        if code == UNKNOWN:
            dropped += 1
            continue
        bucket = buckets.setdefault(code, FuelBucket())
        bucket.gallons += coerce_quantity(receipt.gallons)
        bucket.total_amount += coerce_quantity(receipt.total_amount)
        bucket.receipt_count += 1

    if dropped:
        logger.debug("Dropped %d receipt(s) with unresolved locations", dropped)
    return buckets

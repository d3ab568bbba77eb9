"""
Quarterly IFTA report builder.

Filters trips and receipts to one quarter, groups them by jurisdiction,
derives a single fleet MPG for the quarter and produces the per-jurisdiction
breakdown with grand totals and the net amount owed or refunded.

The builder never raises on bad record data: unresolved locations,
unreadable dates and non-numeric quantities reduce what is counted but
always leave a well-formed report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from fuel_tax_engine.aggregation import (
    aggregate_fuel,
    aggregate_miles,
    receipt_jurisdiction,
)
from fuel_tax_engine.calculator import (
    FuelTaxCalculator,
    JurisdictionTaxLine,
    LineAmounts,
    compute_surcharge,
    estimate_efficiency,
    round_miles,
    round_money,
)
from fuel_tax_engine.jurisdictions import JurisdictionTable
from fuel_tax_engine.periods import (
    ReportingPeriod,
    classify_period,
    parse_record_date,
)
from fuel_tax_engine.records import (
    FuelPurchaseRecord,
    ReceiptLike,
    TripLike,
    TripRecord,
    as_receipt,
    as_trip,
    coerce_quantity,
)
from fuel_tax_engine.resolver import JurisdictionResolver

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


@dataclass(frozen=True)
class QuarterlyTaxReport:
    """A quarter's IFTA liability, ready for rendering or export."""

    quarter: int
    year: int
    total_miles: int
    total_gallons_purchased: Decimal
    total_tax_owed: Decimal
    total_fuel_consumed: Decimal
    average_efficiency: Decimal
    breakdown: tuple[JurisdictionTaxLine, ...]
    net_amount_due: Decimal  # positive = owed, negative = refund
    total_surcharge: Optional[Decimal] = None
    has_surcharge_jurisdiction_miles: bool = False

    @property
    def period(self) -> ReportingPeriod:
        return ReportingPeriod(year=self.year, quarter=self.quarter)

    @property
    def status(self) -> str:
        if self.net_amount_due > 0:
            return "Amount Owed"
        if self.net_amount_due < 0:
            return "Refund Due"
        return "No Tax Due"

    def line_for(self, jurisdiction: str) -> Optional[JurisdictionTaxLine]:
        for line in self.breakdown:
            if line.jurisdiction == jurisdiction:
                return line
        return None


def _in_period(record_date, period: ReportingPeriod) -> bool:
    record_date = parse_record_date(record_date)
    return record_date is not None and classify_period(record_date) == period


class QuarterlyReportBuilder:
    """
    Builds QuarterlyTaxReport values from raw trip and receipt sets.

    The default efficiency is fleet specific and always supplied by the
    caller; it is used when the quarter has no fuel purchases.
    """

    def __init__(
        self,
        default_efficiency: Decimal,
        resolver: Optional[JurisdictionResolver] = None,
        table: Optional[JurisdictionTable] = None,
    ) -> None:
        self.default_efficiency = Decimal(str(default_efficiency))
        self.resolver = resolver or JurisdictionResolver(table)
        self.calculator = FuelTaxCalculator(
            table if table is not None else self.resolver.table
        )

    def filter_trips(
        self, trips: Iterable[TripLike], period: ReportingPeriod
    ) -> list[TripRecord]:
        return [t for t in map(as_trip, trips) if _in_period(t.date, period)]

    def filter_receipts(
        self, receipts: Iterable[ReceiptLike], period: ReportingPeriod
    ) -> list[FuelPurchaseRecord]:
        return [
            r for r in map(as_receipt, receipts) if _in_period(r.receipt_date, period)
        ]

    def build(
        self,
        trips: Iterable[TripLike],
        receipts: Iterable[ReceiptLike],
        quarter: int,
        year: int,
    ) -> QuarterlyTaxReport:
        period = ReportingPeriod(year=year, quarter=quarter)

        quarter_trips = self.filter_trips(trips, period)
        quarter_receipts = self.filter_receipts(receipts, period)

        miles_by_code = aggregate_miles(quarter_trips, self.resolver)
        fuel_by_code = aggregate_fuel(quarter_receipts, self.resolver)

        total_miles = sum((coerce_quantity(t.miles) for t in quarter_trips), _ZERO)
        total_gallons = sum(
            (coerce_quantity(r.gallons) for r in quarter_receipts), _ZERO
        )
        efficiency = estimate_efficiency(
            total_miles, total_gallons, self.default_efficiency
        )

        codes = list(miles_by_code)
        codes.extend(c for c in fuel_by_code if c not in miles_by_code)

        lines: list[LineAmounts] = []
        for code in codes:
            mileage = miles_by_code.get(code)
            fuel = fuel_by_code.get(code)
            amounts = self.calculator.line_amounts(
                code,
                mileage.miles if mileage else _ZERO,
                fuel.gallons if fuel else _ZERO,
                efficiency,
            )
            if amounts is None:
                logger.debug("Skipping %s: not in the jurisdiction table", code)
                continue
            if not amounts.has_activity:
                continue
            lines.append(
                amounts.with_surcharge(compute_surcharge(code, amounts.miles))
            )

        # sorted() is stable, so equal-mileage lines keep aggregation order
        breakdown = tuple(
            sorted(
                (amounts.to_line() for amounts in lines),
                key=lambda line: line.miles,
                reverse=True,
            )
        )

        total_tax_owed = sum((a.tax_owed for a in lines), _ZERO)
        total_fuel_consumed = sum((a.fuel_consumed for a in lines), _ZERO)
        total_surcharge = sum(
            (a.surcharge for a in lines if a.surcharge is not None), _ZERO
        )

        total_tax_paid = sum(
            (
                self.calculator.tax_paid(
                    receipt_jurisdiction(r, self.resolver), r.gallons
                )
                for r in quarter_receipts
            ),
            _ZERO,
        )

        logger.debug(
            "Built %s report: %d trips, %d receipts, %d jurisdictions",
            period.label,
            len(quarter_trips),
            len(quarter_receipts),
            len(breakdown),
        )

        return QuarterlyTaxReport(
            quarter=quarter,
            year=year,
            total_miles=round_miles(total_miles),
            total_gallons_purchased=round_money(total_gallons),
            total_tax_owed=round_money(total_tax_owed),
            total_fuel_consumed=round_money(total_fuel_consumed),
            average_efficiency=round_money(efficiency),
            breakdown=breakdown,
            net_amount_due=round_money(total_tax_owed - total_tax_paid),
            total_surcharge=(
                round_money(total_surcharge) if total_surcharge > 0 else None
            ),
            has_surcharge_jurisdiction_miles=total_surcharge > 0,
        )


def build_quarterly_report(
    trips: Iterable[TripLike],
    receipts: Iterable[ReceiptLike],
    quarter: int,
    year: int,
    default_efficiency: Decimal,
    resolver: Optional[JurisdictionResolver] = None,
) -> QuarterlyTaxReport:
    """Build the IFTA report for one quarter."""
    return QuarterlyReportBuilder(default_efficiency, resolver).build(
        trips, receipts, quarter, year
    )

#!/usr/bin/env python3
"""
Quick Start Example
===================

Builds a Q1 2024 IFTA report for two trips (Colorado and Kansas) and one
fuel purchase in Colorado, then prints the breakdown.

Usage:
    python examples/quick_start.py
"""

from datetime import date
from decimal import Decimal

from fuel_tax_engine import FuelPurchaseRecord, TripRecord, build_quarterly_report
from fuel_tax_engine.report_generator import ReportGenerator


def main() -> None:
    trips = [
        TripRecord(date(2024, 1, 15), Decimal("500"), "Denver, CO", "Limon, CO"),
        TripRecord(date(2024, 2, 3), Decimal("300"), "Topeka, KS", "Salina, KS"),
        # Outside Q1, ignored
        TripRecord(date(2024, 4, 2), Decimal("250"), "Louisville, KY", "Lexington, KY"),
    ]
    receipts = [
        FuelPurchaseRecord(date(2024, 1, 15), Decimal("100"), "Pilot #123, CO", Decimal("389.90")),
    ]

    report = build_quarterly_report(
        trips, receipts, quarter=1, year=2024, default_efficiency=Decimal("6.5")
    )

    print(f"Average MPG:    {report.average_efficiency}")
    for line in report.breakdown:
        print(
            f"{line.jurisdiction}: {line.miles} mi, "
            f"{line.fuel_consumed} gal used, "
            f"tax ${line.tax_owed}, net ${line.net_tax}"
        )
    print(f"{report.status}: ${abs(report.net_amount_due)}")

    print()
    print(ReportGenerator().format_text(report))


if __name__ == "__main__":
    main()

"""
IFTA Fuel Tax Engine
====================

Quarterly jurisdictional fuel tax calculation for interstate motor
carriers: turns trip mileage logs and fuel receipts into a per-jurisdiction
IFTA liability report.

Modules:
    jurisdictions    - Member jurisdiction table and per-gallon rates
    resolver         - Jurisdiction inference from location text
    periods          - Reporting quarters and filing deadlines
    records          - Trip and fuel receipt records
    aggregation      - Per-jurisdiction mileage and fuel grouping
    calculator       - MPG, per-jurisdiction tax and KYU surcharge
    report           - Quarterly report builder
    report_generator - JSON/CSV/text export
    loaders          - CSV import of trips and receipts
    config           - Environment-driven settings
    cli              - Command-line interface
"""

__version__ = "1.0.0"

from fuel_tax_engine.jurisdictions import (
    JURISDICTIONS,
    JurisdictionInfo,
    JurisdictionTable,
)
from fuel_tax_engine.resolver import (
    UNKNOWN,
    JurisdictionResolver,
    resolve_jurisdiction,
)
from fuel_tax_engine.periods import ReportingPeriod, classify_period
from fuel_tax_engine.records import FuelPurchaseRecord, TripRecord
from fuel_tax_engine.aggregation import aggregate_fuel, aggregate_miles
from fuel_tax_engine.calculator import (
    FuelTaxCalculator,
    JurisdictionTaxLine,
    compute_line,
    compute_surcharge,
    estimate_efficiency,
)
from fuel_tax_engine.report import (
    QuarterlyReportBuilder,
    QuarterlyTaxReport,
    build_quarterly_report,
)
from fuel_tax_engine.report_generator import ReportGenerator

__all__ = [
    "JURISDICTIONS",
    "JurisdictionInfo",
    "JurisdictionTable",
    "UNKNOWN",
    "JurisdictionResolver",
    "resolve_jurisdiction",
    "ReportingPeriod",
    "classify_period",
    "TripRecord",
    "FuelPurchaseRecord",
    "aggregate_miles",
    "aggregate_fuel",
    "FuelTaxCalculator",
    "JurisdictionTaxLine",
    "compute_line",
    "compute_surcharge",
    "estimate_efficiency",
    "QuarterlyReportBuilder",
    "QuarterlyTaxReport",
    "build_quarterly_report",
    "ReportGenerator",
]

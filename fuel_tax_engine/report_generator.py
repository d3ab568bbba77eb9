"""
IFTA report rendering and export.

Produces:
- Structured dicts for API/serialization layers
- JSON export (Decimals as floats)
- CSV export of the jurisdiction breakdown
- Console-friendly text
"""

from __future__ import annotations

import csv
import io
import json
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from fuel_tax_engine.jurisdictions import DEFAULT_TABLE, SURCHARGE_JURISDICTION
from fuel_tax_engine.report import QuarterlyTaxReport

BREAKDOWN_FIELDS = [
    "jurisdiction",
    "name",
    "miles",
    "gallons_purchased",
    "fuel_consumed",
    "tax_rate",
    "tax_owed",
    "net_tax",
    "surcharge",
]


def _decimal_to_float(obj: Any) -> Any:
    """Recursively convert Decimal values to float for serialization."""
    if isinstance(obj, dict):
        return {k: _decimal_to_float(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_decimal_to_float(i) for i in obj]
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    return obj


def format_currency(amount: Decimal) -> str:
    """Format as US dollars, e.g. -1234.5 -> "-$1,234.50"."""
    value = Decimal(str(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_miles(miles: int) -> str:
    return f"{miles:,}"


class ReportGenerator:
    """
    Renders QuarterlyTaxReport values and writes them to disk.

    Files are written under ``output_dir``, which is created on first
    export.
    """

    def __init__(self, output_dir: Optional[str] = None) -> None:
        self.output_dir = Path(output_dir) if output_dir else Path("reports")

    def _write(self, filename: str, content: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    # ------------------------------------------------------------------
    # Structured report
    # ------------------------------------------------------------------

    def to_dict(
        self, report: QuarterlyTaxReport, as_of: Optional[date] = None
    ) -> dict[str, Any]:
        period = report.period
        breakdown = []
        for line in report.breakdown:
            info = DEFAULT_TABLE.get(line.jurisdiction)
            breakdown.append(
                {
                    "jurisdiction": line.jurisdiction,
                    "name": info.name if info else "",
                    "miles": line.miles,
                    "gallons_purchased": line.gallons_purchased,
                    "fuel_consumed": line.fuel_consumed,
                    "tax_rate": info.fuel_tax_rate if info else None,
                    "tax_owed": line.tax_owed,
                    "net_tax": line.net_tax,
                    "surcharge": line.surcharge,
                }
            )

        return {
            "report_type": "ifta_quarterly_return",
            "period": period.label,
            "generated_date": (as_of or date.today()).isoformat(),
            "filing_due_date": period.due_date.isoformat(),
            "summary": {
                "total_miles": report.total_miles,
                "total_gallons_purchased": report.total_gallons_purchased,
                "average_mpg": report.average_efficiency,
                "total_fuel_consumed": report.total_fuel_consumed,
                "total_tax_owed": report.total_tax_owed,
                "net_amount_due": report.net_amount_due,
                "status": report.status,
            },
            "breakdown": breakdown,
            "surcharge": {
                "jurisdiction": SURCHARGE_JURISDICTION,
                "description": "Kentucky weight-distance tax (KYU), filed separately from IFTA",
                "total": report.total_surcharge,
                "applies": report.has_surcharge_jurisdiction_miles,
            },
        }

    # ------------------------------------------------------------------
    # Export methods
    # ------------------------------------------------------------------

    def to_json(
        self,
        report: QuarterlyTaxReport,
        filename: Optional[str] = None,
        as_of: Optional[date] = None,
    ) -> str:
        """Export a report to JSON. Returns the JSON string."""
        json_str = json.dumps(
            _decimal_to_float(self.to_dict(report, as_of=as_of)), indent=2
        )
        if filename:
            self._write(filename, json_str)
        return json_str

    def to_csv(
        self, report: QuarterlyTaxReport, filename: Optional[str] = None
    ) -> str:
        """Export the jurisdiction breakdown to CSV. Returns the CSV string."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=BREAKDOWN_FIELDS)
        writer.writeheader()
        for row in self.to_dict(report)["breakdown"]:
            writer.writerow(
                {
                    k: ("" if v is None else float(v) if isinstance(v, Decimal) else v)
                    for k, v in row.items()
                }
            )

        csv_str = output.getvalue()
        if filename:
            self._write(filename, csv_str)
        return csv_str

    # ------------------------------------------------------------------
    # Console-formatted text output
    # ------------------------------------------------------------------

    def format_text(
        self, report: QuarterlyTaxReport, as_of: Optional[date] = None
    ) -> str:
        """Format a report as human-readable text for console output."""
        data = self.to_dict(report, as_of=as_of)
        lines: list[str] = []
        lines.append(f"{'=' * 60}")
        lines.append(f"  IFTA Quarterly Return - {data['period']}")
        lines.append(f"  Generated: {data['generated_date']}")
        lines.append(f"  Filing due: {data['filing_due_date']}")
        lines.append(f"{'=' * 60}")
        lines.append("")

        lines.append("SUMMARY")
        lines.append("-" * 40)
        lines.append(f"  Total Miles: {format_miles(report.total_miles)}")
        lines.append(
            f"  Fuel Purchased: {report.total_gallons_purchased:,.2f} gal"
        )
        lines.append(f"  Average MPG: {report.average_efficiency:.2f}")
        lines.append(f"  Fuel Consumed: {report.total_fuel_consumed:,.2f} gal")
        lines.append(f"  Total Tax Owed: {format_currency(report.total_tax_owed)}")
        lines.append(
            f"  {report.status}: {format_currency(abs(report.net_amount_due))}"
        )
        lines.append("")

        if report.breakdown:
            lines.append("JURISDICTION BREAKDOWN")
            lines.append("-" * 40)
            for line in report.breakdown:
                lines.append(
                    f"  {line.jurisdiction}: {format_miles(line.miles):>9} mi | "
                    f"{line.gallons_purchased:>9,.2f} gal | "
                    f"net {format_currency(line.net_tax):>11}"
                )
            lines.append("")

        if report.has_surcharge_jurisdiction_miles:
            lines.append("KENTUCKY KYU")
            lines.append("-" * 40)
            lines.append(
                f"  Weight-distance tax: {format_currency(report.total_surcharge)}"
            )
            lines.append("  Filed separately from IFTA; not included above.")
            lines.append("")

        return "\n".join(lines)

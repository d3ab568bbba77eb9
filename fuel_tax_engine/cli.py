"""
Command-line interface for the IFTA Fuel Tax Engine.

Provides subcommands for quarterly report generation, rate lookup,
location resolution and the filing calendar.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from fuel_tax_engine.config import get_settings
from fuel_tax_engine.jurisdictions import DEFAULT_TABLE
from fuel_tax_engine.loaders import load_receipts_csv, load_trips_csv
from fuel_tax_engine.periods import ReportingPeriod, classify_period, current_period
from fuel_tax_engine.report import build_quarterly_report
from fuel_tax_engine.report_generator import (
    ReportGenerator,
    format_currency,
    format_miles,
)
from fuel_tax_engine.resolver import UNKNOWN, resolve_jurisdiction

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_period(args: argparse.Namespace) -> ReportingPeriod:
    if args.period:
        return ReportingPeriod.parse(args.period)
    today = current_period()
    return ReportingPeriod(
        year=args.year or today.year,
        quarter=args.quarter or today.quarter,
    )


# -----------------------------------------------------------------------
# Subcommand: report
# -----------------------------------------------------------------------


def cmd_report(args: argparse.Namespace) -> None:
    """Build the quarterly IFTA return from trip and receipt exports."""
    settings = get_settings()

    try:
        period = _resolve_period(args)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    try:
        default_mpg = Decimal(args.default_mpg or settings.default_mpg)
    except InvalidOperation:
        default_mpg = None
    if default_mpg is None or not default_mpg.is_finite() or default_mpg <= 0:
        console.print(f"[red]Invalid --default-mpg: {args.default_mpg}[/red]")
        sys.exit(1)

    try:
        trips = load_trips_csv(args.trips)
        receipts = load_receipts_csv(args.receipts) if args.receipts else []
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    logger.info(
        "Loaded %d trips and %d receipts for %s",
        len(trips),
        len(receipts),
        period.label,
    )
    report = build_quarterly_report(
        trips, receipts, period.quarter, period.year, default_mpg
    )

    table = Table(
        title=f"IFTA Breakdown - {period.label}",
        box=box.ROUNDED,
        show_lines=True,
    )
    table.add_column("Jurisdiction", style="bold")
    table.add_column("Miles", justify="right")
    table.add_column("Gallons Bought", justify="right")
    table.add_column("Fuel Used", justify="right")
    table.add_column("Tax Owed", justify="right")
    table.add_column("Net Tax", justify="right", style="bold")

    for line in report.breakdown:
        net_style = "red" if line.net_tax > 0 else "green" if line.net_tax < 0 else ""
        table.add_row(
            line.jurisdiction,
            format_miles(line.miles),
            f"{line.gallons_purchased:,.2f}",
            f"{line.fuel_consumed:,.2f}",
            format_currency(line.tax_owed),
            f"[{net_style}]{format_currency(line.net_tax)}[/{net_style}]"
            if net_style
            else format_currency(line.net_tax),
        )

    if report.breakdown:
        console.print(table)
    else:
        console.print(f"[yellow]No trips or fuel purchases in {period.label}.[/yellow]")

    color = "red" if report.net_amount_due > 0 else "green"
    console.print(
        Panel(
            f"[bold]Total Miles:[/bold] {format_miles(report.total_miles)}\n"
            f"[bold]Fuel Purchased:[/bold] {report.total_gallons_purchased:,.2f} gal\n"
            f"[bold]Average MPG:[/bold] {report.average_efficiency:.2f}\n"
            f"[bold]Fuel Consumed:[/bold] {report.total_fuel_consumed:,.2f} gal\n"
            f"[bold]Total Tax Owed:[/bold] {format_currency(report.total_tax_owed)}\n"
            f"[bold]{report.status}:[/bold] {format_currency(abs(report.net_amount_due))}\n"
            f"[bold]Filing Due:[/bold] {period.due_date.isoformat()}",
            title="Quarterly Summary",
            border_style=color,
        )
    )

    if report.has_surcharge_jurisdiction_miles:
        console.print(
            Panel(
                f"Estimated KYU tax: [bold]{format_currency(report.total_surcharge)}[/bold]\n"
                "Kentucky KYU is a weight-distance tax separate from IFTA. "
                "Ensure your KYU permit is active.",
                title="[yellow]Kentucky KYU[/yellow]",
                border_style="yellow",
            )
        )

    rg = ReportGenerator(args.output_dir or settings.output_dir)
    if args.export_json:
        rg.to_json(report, args.export_json)
        console.print(f"[green]JSON exported to {args.export_json}[/green]")
    if args.export_csv:
        rg.to_csv(report, args.export_csv)
        console.print(f"[green]CSV exported to {args.export_csv}[/green]")


# -----------------------------------------------------------------------
# Subcommand: rates
# -----------------------------------------------------------------------


def cmd_rates(args: argparse.Namespace) -> None:
    """Display fuel tax rates for one or all jurisdictions."""
    if args.jurisdiction:
        info = DEFAULT_TABLE.get(args.jurisdiction)
        if info is None:
            console.print(f"[red]Unknown jurisdiction: {args.jurisdiction}[/red]")
            sys.exit(1)
        console.print(
            Panel(
                f"[bold]Jurisdiction:[/bold] {info.name} ({info.code})\n"
                f"[bold]Fuel Tax Rate:[/bold] ${info.fuel_tax_rate:.4f}/gal",
                title=f"{info.name} Fuel Tax",
                border_style="cyan",
            )
        )
        return

    if args.top:
        title = f"Top {args.top} IFTA Fuel Tax Rates"
        rows = DEFAULT_TABLE.highest_rate_jurisdictions(args.top)
    else:
        title = "IFTA Fuel Tax Rates"
        rows = sorted(DEFAULT_TABLE, key=lambda j: j.code)

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("Rate ($/gal)", justify="right")
    for info in rows:
        table.add_row(info.code, info.name, f"{info.fuel_tax_rate:.4f}")
    console.print(table)


# -----------------------------------------------------------------------
# Subcommand: resolve
# -----------------------------------------------------------------------


def cmd_resolve(args: argparse.Namespace) -> None:
    """Show which jurisdiction each location string resolves to."""
    table = Table(box=box.SIMPLE)
    table.add_column("Location")
    table.add_column("Jurisdiction", style="bold")
    for text in args.locations:
        code = resolve_jurisdiction(text)
        table.add_row(text, "[dim]UNKNOWN[/dim]" if code == UNKNOWN else code)
    console.print(table)


# -----------------------------------------------------------------------
# Subcommand: period
# -----------------------------------------------------------------------


def cmd_period(args: argparse.Namespace) -> None:
    """Show the reporting quarter and filing deadline for a date."""
    try:
        on = date.fromisoformat(args.date) if args.date else date.today()
    except ValueError:
        console.print(f"[red]Invalid date: {args.date}[/red]")
        sys.exit(1)

    period = classify_period(on)
    days = period.days_until_due(on)
    console.print(
        Panel(
            f"[bold]Period:[/bold] {period.label}\n"
            f"[bold]Covers:[/bold] {period.start_date.isoformat()} to {period.end_date.isoformat()}\n"
            f"[bold]Return Due:[/bold] {period.due_date.isoformat()} ({days} days)",
            title="IFTA Filing Calendar",
            border_style="blue",
        )
    )


# -----------------------------------------------------------------------
# Argument parser
# -----------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuel-tax",
        description="IFTA Fuel Tax Engine - Quarterly jurisdictional fuel tax reporting for interstate carriers",
    )
    parser.add_argument("--log-level", help="Logging level (default from FUEL_TAX_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # report
    report_p = subparsers.add_parser("report", help="Build a quarterly IFTA report")
    report_p.add_argument("--trips", "-t", required=True, help="CSV file with trip logs")
    report_p.add_argument("--receipts", "-r", help="CSV file with fuel receipts")
    report_p.add_argument("--quarter", "-q", type=int, choices=[1, 2, 3, 4], help="Quarter (1-4)")
    report_p.add_argument("--year", "-y", type=int, help="Reporting year")
    report_p.add_argument("--period", "-p", help='Period label, e.g. "Q1 2024"')
    report_p.add_argument("--default-mpg", help="Fleet MPG when no fuel was purchased")
    report_p.add_argument("--export-json", help="Export report to JSON file")
    report_p.add_argument("--export-csv", help="Export breakdown to CSV file")
    report_p.add_argument("--output-dir", help="Output directory for exports")
    report_p.set_defaults(func=cmd_report)

    # rates
    rates_p = subparsers.add_parser("rates", help="View fuel tax rate table")
    rates_p.add_argument("--jurisdiction", "-j", help="Jurisdiction code to look up")
    rates_p.add_argument(
        "--top", type=int, metavar="N", help="Show only the N highest-rate jurisdictions"
    )
    rates_p.set_defaults(func=cmd_rates)

    # resolve
    resolve_p = subparsers.add_parser("resolve", help="Resolve location text to a jurisdiction")
    resolve_p.add_argument("locations", nargs="+", help="Location strings")
    resolve_p.set_defaults(func=cmd_resolve)

    # period
    period_p = subparsers.add_parser("period", help="Show quarter and filing deadline")
    period_p.add_argument("--date", "-d", help="Date (YYYY-MM-DD), default today")
    period_p.set_defaults(func=cmd_period)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level or get_settings().log_level)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    args.func(args)

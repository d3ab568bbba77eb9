"""
Per-jurisdiction IFTA fuel tax calculation.

Handles:
- Fleet fuel efficiency (MPG) for a reporting period
- Fuel consumed and tax owed per jurisdiction at the period MPG
- Credit for tax already paid at the pump
- The Kentucky weight-distance (KYU) surcharge, kept apart from IFTA

Figures are carried at full precision and only rounded when a
JurisdictionTaxLine or report is built, so totals do not pick up
per-line rounding error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from fuel_tax_engine.jurisdictions import (
    DEFAULT_TABLE,
    SURCHARGE_JURISDICTION,
    SURCHARGE_RATE_PER_MILE,
    JurisdictionTable,
)
from fuel_tax_engine.records import coerce_quantity

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def _round_half_up(amount: Decimal, exponent: Decimal) -> Decimal:
    # quantize needs every integer digit plus the kept places within precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() - exponent.as_tuple().exponent + 2)
        return amount.quantize(exponent, rounding=ROUND_HALF_UP)


def round_money(amount: Decimal) -> Decimal:
    """Round a dollar or gallon figure to the nearest cent, half up."""
    return _round_half_up(amount, Decimal("0.01"))


def round_miles(miles: Decimal) -> int:
    return int(_round_half_up(miles, Decimal("1")))


@dataclass(frozen=True)
class JurisdictionTaxLine:
    """One jurisdiction's row on a quarterly IFTA return."""

    jurisdiction: str
    miles: int
    gallons_purchased: Decimal
    tax_owed: Decimal
    fuel_consumed: Decimal
    net_tax: Decimal
    surcharge: Optional[Decimal] = None


@dataclass(frozen=True)
class LineAmounts:
    """Unrounded figures behind a JurisdictionTaxLine."""

    jurisdiction: str
    rate: Decimal
    miles: Decimal
    gallons_purchased: Decimal
    fuel_consumed: Decimal
    tax_owed: Decimal
    tax_paid: Decimal
    surcharge: Optional[Decimal] = None

    @property
    def net_tax(self) -> Decimal:
        return self.tax_owed - self.tax_paid

    @property
    def has_activity(self) -> bool:
        return self.miles > 0 or self.gallons_purchased > 0

    def with_surcharge(self, surcharge: Optional[Decimal]) -> "LineAmounts":
        return LineAmounts(
            jurisdiction=self.jurisdiction,
            rate=self.rate,
            miles=self.miles,
            gallons_purchased=self.gallons_purchased,
            fuel_consumed=self.fuel_consumed,
            tax_owed=self.tax_owed,
            tax_paid=self.tax_paid,
            surcharge=surcharge,
        )

    def to_line(self) -> JurisdictionTaxLine:
        return JurisdictionTaxLine(
            jurisdiction=self.jurisdiction,
            miles=round_miles(self.miles),
            gallons_purchased=round_money(self.gallons_purchased),
            tax_owed=round_money(self.tax_owed),
            fuel_consumed=round_money(self.fuel_consumed),
            net_tax=round_money(self.net_tax),
            surcharge=(
                round_money(self.surcharge) if self.surcharge is not None else None
            ),
        )


def estimate_efficiency(
    total_miles: Decimal,
    total_gallons: Decimal,
    configured_default: Decimal,
) -> Decimal:
    """
    Period-wide miles per gallon.

    Uses actual miles over purchased gallons when any fuel was bought;
    otherwise, or when that works out to zero, the fleet default.
    """
    default = Decimal(str(configured_default))
    total_miles = coerce_quantity(total_miles)
    total_gallons = coerce_quantity(total_gallons)

    efficiency = total_miles / total_gallons if total_gallons > 0 else default
    if efficiency <= 0:
        logger.debug("No usable MPG from period data, using default %s", default)
        return default
    return efficiency


def compute_surcharge(jurisdiction: str, miles: Decimal) -> Optional[Decimal]:
    """Kentucky KYU weight-distance tax; None for every other jurisdiction."""
    miles = coerce_quantity(miles)
    if jurisdiction != SURCHARGE_JURISDICTION or miles <= 0:
        return None
    return miles * SURCHARGE_RATE_PER_MILE


class FuelTaxCalculator:
    """
    IFTA fuel tax calculation for individual jurisdictions.

    Resolves per-gallon rates from the reference table; jurisdictions the
    table does not know produce no line at all.
    """

    def __init__(self, table: Optional[JurisdictionTable] = None) -> None:
        self.table = table if table is not None else DEFAULT_TABLE

    def line_amounts(
        self,
        jurisdiction: str,
        miles: Decimal,
        gallons_purchased: Decimal,
        efficiency: Decimal,
    ) -> Optional[LineAmounts]:
        info = self.table.get(jurisdiction)
        if info is None:
            return None

        miles = coerce_quantity(miles)
        gallons_purchased = coerce_quantity(gallons_purchased)
        efficiency = Decimal(str(efficiency))

        fuel_consumed = miles / efficiency if efficiency > 0 else _ZERO
        return LineAmounts(
            jurisdiction=info.code,
            rate=info.fuel_tax_rate,
            miles=miles,
            gallons_purchased=gallons_purchased,
            fuel_consumed=fuel_consumed,
            tax_owed=fuel_consumed * info.fuel_tax_rate,
            tax_paid=gallons_purchased * info.fuel_tax_rate,
        )

    def compute_line(
        self,
        jurisdiction: str,
        miles: Decimal,
        gallons_purchased: Decimal,
        efficiency: Decimal,
    ) -> Optional[JurisdictionTaxLine]:
        """Build the rounded tax line for a jurisdiction, without surcharge."""
        amounts = self.line_amounts(jurisdiction, miles, gallons_purchased, efficiency)
        return amounts.to_line() if amounts is not None else None

    def tax_paid(self, jurisdiction: str, gallons: Decimal) -> Decimal:
        """Fuel tax paid at the pump; zero where the rate is unknown."""
        return coerce_quantity(gallons) * self.table.rate_or_zero(jurisdiction)


_DEFAULT_CALCULATOR = FuelTaxCalculator()


def compute_line(
    jurisdiction: str,
    miles: Decimal,
    gallons_purchased: Decimal,
    efficiency: Decimal,
) -> Optional[JurisdictionTaxLine]:
    return _DEFAULT_CALCULATOR.compute_line(
        jurisdiction, miles, gallons_purchased, efficiency
    )

"""
IFTA jurisdiction reference table.

Covers the US member jurisdictions (every state but Hawaii) with their
per-gallon diesel fuel tax rates, plus the Kentucky weight-distance (KYU) surcharge
which is billed per mile outside of IFTA.

Rates are the 2024 quarterly rates and should be refreshed annually.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class JurisdictionInfo:
    """A single IFTA member jurisdiction."""

    code: str
    name: str
    fuel_tax_rate: Decimal  # dollars per gallon


# ---------------------------------------------------------------------------
# Per-gallon fuel tax rates
# ---------------------------------------------------------------------------

_JURISDICTION_DATA: tuple[tuple[str, str, str], ...] = (
    ("AL", "Alabama", "0.2400"),
    ("AK", "Alaska", "0.0820"),
    ("AZ", "Arizona", "0.1800"),
    ("AR", "Arkansas", "0.2450"),
    ("CA", "California", "0.4427"),
    ("CO", "Colorado", "0.2200"),
    ("CT", "Connecticut", "0.4000"),
    ("DE", "Delaware", "0.2200"),
    ("FL", "Florida", "0.2460"),
    ("GA", "Georgia", "0.2900"),
    ("ID", "Idaho", "0.3200"),
    ("IL", "Illinois", "0.4550"),
    ("IN", "Indiana", "0.3000"),
    ("IA", "Iowa", "0.3040"),
    ("KS", "Kansas", "0.2600"),
    ("KY", "Kentucky", "0.2490"),
    ("LA", "Louisiana", "0.2000"),
    ("ME", "Maine", "0.3140"),
    ("MD", "Maryland", "0.3550"),
    ("MA", "Massachusetts", "0.2400"),
    ("MI", "Michigan", "0.2830"),
    ("MN", "Minnesota", "0.2865"),
    ("MS", "Mississippi", "0.1840"),
    ("MO", "Missouri", "0.1700"),
    ("MT", "Montana", "0.2775"),
    ("NE", "Nebraska", "0.2690"),
    ("NV", "Nevada", "0.2700"),
    ("NH", "New Hampshire", "0.2320"),
    ("NJ", "New Jersey", "0.4180"),
    ("NM", "New Mexico", "0.1888"),
    ("NY", "New York", "0.4345"),
    ("NC", "North Carolina", "0.3650"),
    ("ND", "North Dakota", "0.2300"),
    ("OH", "Ohio", "0.3470"),
    ("OK", "Oklahoma", "0.2000"),
    ("OR", "Oregon", "0.3650"),
    ("PA", "Pennsylvania", "0.5870"),
    ("RI", "Rhode Island", "0.3500"),
    ("SC", "South Carolina", "0.2200"),
    ("SD", "South Dakota", "0.3000"),
    ("TN", "Tennessee", "0.2700"),
    ("TX", "Texas", "0.2000"),
    ("UT", "Utah", "0.3140"),
    ("VT", "Vermont", "0.3020"),
    ("VA", "Virginia", "0.2720"),
    ("WA", "Washington", "0.4944"),
    ("WV", "West Virginia", "0.3570"),
    ("WI", "Wisconsin", "0.3290"),
    ("WY", "Wyoming", "0.2400"),
)

JURISDICTIONS: Mapping[str, JurisdictionInfo] = MappingProxyType(
    {
        code: JurisdictionInfo(code=code, name=name, fuel_tax_rate=Decimal(rate))
        for code, name, rate in _JURISDICTION_DATA
    }
)

# Kentucky Weight Distance Tax, vehicles over 59,999 lbs
SURCHARGE_JURISDICTION = "KY"
SURCHARGE_RATE_PER_MILE = Decimal("0.0285")


class JurisdictionTable:
    """
    Read-only lookups over the jurisdiction reference table.

    Iteration follows table order, which is also the order the resolver
    uses when matching display names.
    """

    def __init__(
        self, jurisdictions: Optional[Mapping[str, JurisdictionInfo]] = None
    ) -> None:
        self._jurisdictions = (
            jurisdictions if jurisdictions is not None else JURISDICTIONS
        )

    def __contains__(self, code: object) -> bool:
        return code in self._jurisdictions

    def __len__(self) -> int:
        return len(self._jurisdictions)

    def __iter__(self):
        return iter(self._jurisdictions.values())

    def get(self, code: str) -> Optional[JurisdictionInfo]:
        """Retrieve a jurisdiction by code, or None if it is not a member."""
        if not isinstance(code, str):
            return None
        return self._jurisdictions.get(code.upper())

    def get_rate(self, code: str) -> Decimal:
        """Return the per-gallon fuel tax rate for a jurisdiction."""
        info = self.get(code)
        if info is None:
            raise ValueError(f"Unknown jurisdiction code: {code}")
        return info.fuel_tax_rate

    def rate_or_zero(self, code: str) -> Decimal:
        info = self.get(code)
        return info.fuel_tax_rate if info is not None else Decimal("0")

    def codes(self) -> list[str]:
        return list(self._jurisdictions)

    def highest_rate_jurisdictions(self, n: int = 10) -> list[JurisdictionInfo]:
        """Return the N jurisdictions with the highest per-gallon rate."""
        return sorted(
            self._jurisdictions.values(),
            key=lambda j: j.fuel_tax_rate,
            reverse=True,
        )[:n]


DEFAULT_TABLE = JurisdictionTable()

"""Tests for the jurisdiction reference table."""

from decimal import Decimal
from types import MappingProxyType

import pytest

from fuel_tax_engine.jurisdictions import (
    JURISDICTIONS,
    SURCHARGE_JURISDICTION,
    SURCHARGE_RATE_PER_MILE,
    JurisdictionInfo,
    JurisdictionTable,
)


@pytest.fixture
def table() -> JurisdictionTable:
    return JurisdictionTable()


# ── Known rates ──────────────────────────────────────────────────────


def test_colorado_rate(table: JurisdictionTable):
    assert table.get_rate("CO") == Decimal("0.22")


def test_pennsylvania_rate(table: JurisdictionTable):
    assert table.get_rate("PA") == Decimal("0.587")


def test_washington_rate(table: JurisdictionTable):
    assert table.get_rate("WA") == Decimal("0.4944")


def test_rates_are_decimal(table: JurisdictionTable):
    for info in table:
        assert isinstance(info.fuel_tax_rate, Decimal)
        assert info.fuel_tax_rate > 0


def test_member_states_loaded(table: JurisdictionTable):
    assert len(table) == 49
    assert "HI" not in table
    assert "DC" not in table


def test_case_insensitive_lookup(table: JurisdictionTable):
    assert table.get_rate("co") == table.get_rate("CO")


# ── Unknown codes ────────────────────────────────────────────────────


def test_unknown_code_raises(table: JurisdictionTable):
    with pytest.raises(ValueError, match="Unknown jurisdiction code"):
        table.get_rate("ZZ")


def test_unknown_code_get_returns_none(table: JurisdictionTable):
    assert table.get("ZZ") is None
    assert table.get(None) is None


def test_rate_or_zero_for_unknown(table: JurisdictionTable):
    assert table.rate_or_zero("UNKNOWN") == Decimal("0")
    assert table.rate_or_zero("TX") == Decimal("0.20")


# ── Immutability ─────────────────────────────────────────────────────


def test_table_is_read_only():
    assert isinstance(JURISDICTIONS, MappingProxyType)
    with pytest.raises(TypeError):
        JURISDICTIONS["ZZ"] = JurisdictionInfo("ZZ", "Nowhere", Decimal("1"))


def test_jurisdiction_info_is_frozen():
    info = JURISDICTIONS["CO"]
    with pytest.raises(AttributeError):
        info.fuel_tax_rate = Decimal("0")


def test_custom_table():
    table = JurisdictionTable({"CO": JURISDICTIONS["CO"]})
    assert table.codes() == ["CO"]
    assert table.get("KS") is None


# ── Queries ──────────────────────────────────────────────────────────


def test_highest_rate_jurisdictions(table: JurisdictionTable):
    top = table.highest_rate_jurisdictions(3)
    assert [j.code for j in top] == ["PA", "WA", "IL"]


def test_surcharge_constants():
    assert SURCHARGE_JURISDICTION == "KY"
    assert SURCHARGE_JURISDICTION in JURISDICTIONS
    assert SURCHARGE_RATE_PER_MILE == Decimal("0.0285")

"""Tests for jurisdiction inference from location text."""

from decimal import Decimal

import pytest

from fuel_tax_engine.jurisdictions import JURISDICTIONS, JurisdictionTable
from fuel_tax_engine.resolver import (
    UNKNOWN,
    JurisdictionResolver,
    resolve_jurisdiction,
)


# ── Code tokens ──────────────────────────────────────────────────────


def test_city_state_code():
    assert resolve_jurisdiction("Denver, CO") == "CO"


def test_code_inside_longer_text():
    assert resolve_jurisdiction("Love's Travel Stop #412, Salina KS 67401") == "KS"


def test_code_must_be_standalone():
    assert resolve_jurisdiction("CODY, WY") == "WY"


def test_lowercase_code_is_not_a_token():
    assert resolve_jurisdiction("denver, co") == UNKNOWN


def test_only_first_code_token_is_considered():
    # "US" is not a member code, so the name search takes over
    assert resolve_jurisdiction("US 40 near Limon, Colorado") == "CO"
    assert resolve_jurisdiction("US 40 near Limon, CO") == UNKNOWN


# ── Display names ────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Topeka, Kansas", "KS"),
        ("Little Rock, Arkansas", "AR"),
        ("somewhere in NEW MEXICO", "NM"),
        ("downtown colorado springs", "CO"),
        ("Truck stop, Ohio", "OH"),
    ],
)
def test_display_name_match(text: str, expected: str):
    assert resolve_jurisdiction(text) == expected


def test_unknown_code_token_falls_back_to_name():
    assert resolve_jurisdiction("ZZ Fuel Depot, Ohio") == "OH"


# ── Unresolvable input ───────────────────────────────────────────────


@pytest.mark.parametrize("text", ["somewhere unknown", "", "Toronto, ON", None, 42])
def test_unresolvable_returns_unknown(text):
    assert resolve_jurisdiction(text) == UNKNOWN


# ── Custom tables ────────────────────────────────────────────────────


def test_resolver_only_knows_its_table():
    resolver = JurisdictionResolver(JurisdictionTable({"CO": JURISDICTIONS["CO"]}))
    assert resolver.resolve("Denver, CO") == "CO"
    assert resolver.resolve("Topeka, KS") == UNKNOWN
    assert resolver.resolve("Topeka, Kansas") == UNKNOWN


def test_resolver_subclass_can_replace_heuristic():
    class FixedResolver(JurisdictionResolver):
        def resolve(self, location_text):
            return "TX"

    assert FixedResolver().resolve("Denver, CO") == "TX"

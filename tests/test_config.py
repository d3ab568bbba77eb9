"""Tests for environment-driven settings."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from fuel_tax_engine.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FUEL_TAX_DEFAULT_MPG", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_mpg == Decimal("6.5")
    assert settings.output_dir == "reports"
    assert settings.log_level == "WARNING"


def test_env_override(monkeypatch):
    monkeypatch.setenv("FUEL_TAX_DEFAULT_MPG", "7.2")
    monkeypatch.setenv("FUEL_TAX_OUTPUT_DIR", "/tmp/ifta")
    settings = Settings(_env_file=None)
    assert settings.default_mpg == Decimal("7.2")
    assert settings.output_dir == "/tmp/ifta"


def test_non_positive_mpg_rejected(monkeypatch):
    monkeypatch.setenv("FUEL_TAX_DEFAULT_MPG", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

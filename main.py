#!/usr/bin/env python3
"""
IFTA Fuel Tax Engine - Entry Point

Quarterly fuel tax reporting for interstate trucking. Groups trip miles
and fuel purchases by jurisdiction and computes tax owed, tax paid at the
pump, and the net amount due or refundable.

Usage:
    python main.py report --trips trips.csv --receipts receipts.csv --period "Q1 2024"
    python main.py report --trips trips.csv --quarter 2 --year 2024 --export-json q2.json
    python main.py rates --jurisdiction CO
    python main.py resolve "Denver, CO" "Topeka Kansas"
    python main.py period --date 2024-05-14
"""

from fuel_tax_engine.cli import main

if __name__ == "__main__":
    main()

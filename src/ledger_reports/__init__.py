# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Ledger Reports
--------------

A small Python engine that ingests a directory of ledger-style CSV files
(``date,account,description,debit,credit``), caches them in memory and
derives three independent financial reports from that shared cache.

Main capabilities:
- concurrent loading of every ledger file of a source directory,
- an in-memory columnar cache (one pandas DataFrame per source file),
- account balances report (``accounts.csv``),
- year-by-year cash flow report (``yearly.csv``),
- basic financial statement: income statement + balance sheet (``fs.csv``),
- a per-job progress tracker (idle / starting / finished in N seconds),
- a thin command-line interface driven by a TOML configuration.

The three reports run concurrently on a single asyncio event loop once the
whole source directory has been loaded.

Version: 0.1.0

Usage:
    python -m ledger_reports.cli --help
"""

__all__ = ["cache", "engine", "io", "jobs", "loader", "progress", "reports", "runner"]

__version__ = "0.1.0"

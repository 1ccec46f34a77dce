# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Command-Line Interface (CLI) for Ledger Reports.

The CLI is intentionally thin: it does not implement any accounting logic.
It loads the configuration, applies command-line overrides, runs the
report pipeline once and prints what was produced.


High-level pipeline
-------------------

1) Load the TOML configuration (``ledger_reports_config.toml`` by default,
   built-in defaults when it does not exist) using ``load_app_config()``.

2) Apply the optional overrides ``--source-dir``, ``--output-dir`` and
   ``--log-level``. They only affect the current run.

3) Configure logging.

4) Run the ``ReportRunner``: load every ledger file of the source
   directory, then generate accounts.csv, yearly.csv and fs.csv
   concurrently.

5) Print the written files and the final status of each job, e.g.:

       accounts: finished in 0.01

Errors
------
Configuration errors and I/O failures (missing source directory,
unreadable ledger file, unwritable output directory) end the program with
a one-line message and a non-zero exit status. No report is retried.
"""

import argparse
from typing import Optional

from . import __version__
from .config import load_app_config
from .logging_setup import configure_logging, parse_level
from .runner import ReportRunner


def _build_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for the CLI."""
    ap = argparse.ArgumentParser(
        prog="python -m ledger_reports.cli",
        description=(
            "Ledger Reports - reads every ledger CSV file of a directory and "
            "writes an account balances report, a yearly cash flow report and "
            "a basic financial statement."
        ),
    )
    ap.add_argument(
        "--config",
        dest="config_path",
        help="Path to the TOML configuration file "
        "(default: ./ledger_reports_config.toml if present).",
    )
    ap.add_argument(
        "--source-dir",
        help="Directory holding the ledger files (overrides [paths].source_dir).",
    )
    ap.add_argument(
        "--output-dir",
        help="Directory receiving the reports (overrides [paths].output_dir).",
    )
    ap.add_argument(
        "--log-level",
        help="Logging level, e.g. DEBUG or INFO (overrides [logging].level).",
    )
    ap.add_argument(
        "--version",
        action="store_true",
        help="Print the version and exit.",
    )
    return ap


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the Ledger Reports CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # --version: short-circuit and exit early.
    if args.version:
        print(f"ledger_reports version {__version__}")
        return

    # 1) Configuration + overrides
    try:
        config = load_app_config(args.config_path)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"Configuration error: {exc}") from exc

    config = config.with_overrides(
        source_dir=args.source_dir,
        output_dir=args.output_dir,
        log_level=args.log_level,
    )

    # 2) Logging
    try:
        level = parse_level(config.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(level)

    # 3) Run
    runner = ReportRunner(config)
    print(f"Reading ledger files from {config.source_dir}")
    try:
        written = runner.run_sync()
    except (OSError, ValueError) as exc:
        for name, status in runner.statuses().items():
            print(f"{name}: {status}")
        raise SystemExit(f"Report generation failed: {exc}") from exc

    # 4) Summary
    print(f"Ledger files loaded: {len(runner.cache)}")
    for path in written.values():
        print(f"Wrote {path}")
    for name, status in runner.statuses().items():
        print(f"{name}: {status}")


if __name__ == "__main__":
    main()

# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
I/O module for Ledger Reports.

This module handles reading raw ledger files and turning them into a simple,
consistent structure suitable for caching and aggregation, as well as
writing the report artifacts back to disk.

Expected input format
---------------------

Ledger files are plain comma-delimited text, without a header row:

    date, account, description, debit, credit

- ``date``:        date of the transaction (any format understood by pandas)
- ``account``:     account name (e.g. "Cash", "Sales Revenue")
- ``description``: free text label, ignored by every report
- ``debit``:       debit amount
- ``credit``:      credit amount

Parsing is deliberately lenient:

- lines are split on commas without trimming internal whitespace,
- short rows are kept as-is (missing trailing fields become missing values),
- fields beyond the fifth are ignored,
- numeric fields are *not* converted here; the engine coerces them later
  with a "missing or unparseable means 0" policy.

Output schema
-------------
``records_to_frame`` returns a pandas DataFrame with exactly the columns
``date, account, description, debit, credit`` (all text, missing values as
``None``).
"""

import os
import tempfile
from pathlib import Path
from typing import Union

import pandas as pd

LEDGER_COLUMNS = ["date", "account", "description", "debit", "credit"]

PathLike = Union[str, "os.PathLike[str]"]


def parse_records(text: str) -> list[tuple[str, ...]]:
    """
    Split raw ledger text into rows of string fields.

    The text is stripped first so that a trailing newline (or a fully empty
    file) does not produce a spurious all-empty record. Each remaining line
    is split on ``,`` and kept in file order. Records end at ``\\n`` only
    (a trailing ``\\r`` is dropped); form feeds and other separators that
    ``str.splitlines`` would honour stay inside their field.

    Parameters
    ----------
    text:
        Raw content of one ledger file.

    Returns
    -------
    list[tuple[str, ...]]
        One tuple of raw fields per line.
    """
    content = text.strip()
    if not content:
        return []

    # Only "\n" ends a record; other Unicode line separators are data.
    return [tuple(line.rstrip("\r").split(",")) for line in content.split("\n")]


def records_to_frame(records: list[tuple[str, ...]]) -> pd.DataFrame:
    """
    Convert parsed records into the columnar ledger representation.

    Rows shorter than five fields are padded with ``None``; extra fields are
    dropped.
    """
    width = len(LEDGER_COLUMNS)
    padded = [
        tuple(rec[:width]) + (None,) * (width - len(rec[:width])) for rec in records
    ]
    return pd.DataFrame(padded, columns=LEDGER_COLUMNS, dtype=object)


def read_ledger_file(path: PathLike, encoding: str = "utf-8") -> pd.DataFrame:
    """
    Read one ledger file and return its rows as a DataFrame.

    Raises
    ------
    OSError
        If the file cannot be read.
    UnicodeDecodeError
        If the file is not valid text in the given encoding.
    """
    text = Path(path).read_text(encoding=encoding)
    return records_to_frame(parse_records(text))


def write_report(path: PathLike, lines: list[str], encoding: str = "utf-8") -> Path:
    """
    Write report lines to ``path``, joined with ``\\n`` (no trailing newline).

    The content is first written to a temporary file next to the target and
    then moved into place with ``os.replace``, so readers never observe a
    half-written report and a failed write leaves any previous file intact.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as fh:
            fh.write("\n".join(lines))
        os.replace(tmp_name, target)
    except BaseException:
        # Clean up the temporary file, then let the caller see the error.
        Path(tmp_name).unlink(missing_ok=True)
        raise

    return target

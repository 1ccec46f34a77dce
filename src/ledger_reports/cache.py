# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
In-memory ledger cache.

The cache maps a source file name (e.g. ``"2023.csv"``) to the DataFrame of
its parsed rows. It is owned by a single ``ReportRunner`` and rebuilt by the
file loader on every run; report jobs only read from it.

Exactly one cache generation exists at a time: ``replace()`` swaps the whole
content in one step and bumps ``generation``, so a reader never sees a mix
of two loads.
"""

from collections.abc import Iterator, Mapping
from typing import Optional

import pandas as pd

from .io import LEDGER_COLUMNS


class LedgerCache:
    """Mapping of source file name -> parsed ledger rows."""

    def __init__(self) -> None:
        self._files: dict[str, pd.DataFrame] = {}
        self.generation = 0

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, name: object) -> bool:
        return name in self._files

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._files))

    def clear(self) -> None:
        """Drop every cached file and start a new generation."""
        self._files = {}
        self.generation += 1

    def set(self, name: str, rows: pd.DataFrame) -> None:
        """Store (or overwrite) the rows of one file."""
        self._files[name] = rows

    def replace(self, files: Mapping[str, pd.DataFrame]) -> None:
        """Replace the whole cache content with ``files``."""
        self._files = dict(files)
        self.generation += 1

    def get(self, name: str) -> Optional[pd.DataFrame]:
        return self._files.get(name)

    def items(self) -> list[tuple[str, pd.DataFrame]]:
        """Snapshot of ``(name, rows)`` pairs in load order."""
        return list(self._files.items())

    def frame(self, exclude: Optional[str] = None) -> pd.DataFrame:
        """
        Concatenate every cached file into a single DataFrame.

        Parameters
        ----------
        exclude:
            Optional file name to leave out (a report skips its own output
            name in case it was dropped back into the source directory).

        Returns
        -------
        pandas.DataFrame
            Rows of all files in cache order, with an extra ``source``
            column holding the file name. Empty (but correctly typed) when
            nothing is cached.
        """
        parts = [
            rows.assign(source=name)
            for name, rows in self.items()
            if name != exclude and not rows.empty
        ]
        if not parts:
            return pd.DataFrame(columns=[*LEDGER_COLUMNS, "source"], dtype=object)
        return pd.concat(parts, ignore_index=True)

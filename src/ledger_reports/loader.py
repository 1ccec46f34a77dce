# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
File loader for Ledger Reports.

Discovers the ledger files of a source directory and populates a
``LedgerCache`` with their parsed rows.

Loading rules
-------------
- Only regular files whose name ends with the configured extension
  (``.csv`` by default) are loaded; other entries are ignored.
- Every eligible file is read concurrently: each read runs in a worker
  thread and is awaited on the event loop. There is no cap on the number
  of reads in flight, which is fine for the usual handful of ledger files
  but does not scale to thousands of them.
- The cache is only touched once *all* files have been read: its previous
  content is then replaced in one step. Report jobs therefore never see a
  partially loaded directory.

Failure policy
--------------
- An unreadable or missing source directory raises immediately.
- A single unreadable file aborts the whole load (the error propagates and
  the cache keeps its previous generation). There is no per-file
  best-effort mode.
"""

import asyncio
import os
from pathlib import Path

import pandas as pd

from .cache import LedgerCache
from .io import read_ledger_file
from .logging_setup import get_logger

logger = get_logger(__name__)


def discover_ledger_files(source_dir: Path, extension: str = ".csv") -> list[Path]:
    """
    List the eligible ledger files of ``source_dir``, sorted by name.

    Raises
    ------
    FileNotFoundError, NotADirectoryError, PermissionError
        If the directory cannot be listed.
    """
    names = sorted(os.listdir(source_dir))
    return [
        source_dir / name
        for name in names
        if name.endswith(extension) and (source_dir / name).is_file()
    ]


async def _load_one(path: Path, encoding: str) -> tuple[str, pd.DataFrame]:
    rows = await asyncio.to_thread(read_ledger_file, path, encoding)
    logger.debug("Loaded %s (%d rows)", path.name, len(rows))
    return path.name, rows


async def load_directory(
    source_dir: Path,
    cache: LedgerCache,
    extension: str = ".csv",
    encoding: str = "utf-8",
) -> int:
    """
    Load every ledger file of ``source_dir`` into ``cache``.

    Parameters
    ----------
    source_dir:
        Directory holding the ledger files.
    cache:
        Cache to rebuild. Its previous content is discarded on success.
    extension:
        File name suffix of the files to load.
    encoding:
        Text encoding of the ledger files.

    Returns
    -------
    int
        Number of files loaded.
    """
    source_dir = Path(source_dir)
    paths = await asyncio.to_thread(discover_ledger_files, source_dir, extension)
    logger.debug("Found %d ledger file(s) in %s", len(paths), source_dir)

    # gather() keeps the input order, so the cache order follows file names.
    loaded = await asyncio.gather(*(_load_one(p, encoding) for p in paths))

    cache.replace(dict(loaded))
    logger.info(
        "Loaded %d ledger file(s) from %s (%d rows)",
        len(loaded),
        source_dir,
        sum(len(rows) for _, rows in loaded),
    )
    return len(loaded)

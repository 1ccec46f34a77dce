# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Report jobs.

A report job reads the (already loaded) ledger cache, aggregates it with
``engine``, renders the lines with ``reports`` and writes one output file.
Three jobs exist:

- ``accounts``: account balances    -> accounts.csv
- ``yearly``:   yearly cash flow    -> yearly.csv
- ``fs``:       financial statement -> fs.csv

The yearly and fs jobs skip a cached file whose name equals their own
output file name, in case a previous output was copied back into the
source directory. The accounts job reads everything.

Jobs run as coroutines on one event loop. Aggregation is synchronous and
never yields mid-loop; the only suspension point is the file write.
"""

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from .cache import LedgerCache
from .engine import account_balances, build_financial_statement, cash_by_year
from .io import write_report
from .logging_setup import get_logger
from .progress import ProgressTracker
from .reports import (
    render_account_balances,
    render_financial_statement,
    render_yearly_cash,
)

logger = get_logger(__name__)


def build_accounts_report(frame: pd.DataFrame) -> list[str]:
    return render_account_balances(account_balances(frame))


def build_yearly_report(frame: pd.DataFrame) -> list[str]:
    return render_yearly_cash(cash_by_year(frame))


def build_fs_report(frame: pd.DataFrame) -> list[str]:
    return render_financial_statement(build_financial_statement(frame))


@dataclass(frozen=True)
class ReportJob:
    """
    Definition of one report job.

    Attributes
    ----------
    name :
        Job name, also the progress tracker key.
    output_name :
        File name written in the output directory.
    build :
        Function turning the ledger DataFrame into report lines.
    skip_own_output :
        When True, a cached file named ``output_name`` is not read.
    """

    name: str
    output_name: str
    build: Callable[[pd.DataFrame], list[str]]
    skip_own_output: bool = True

    def input_frame(self, cache: LedgerCache) -> pd.DataFrame:
        exclude: Optional[str] = self.output_name if self.skip_own_output else None
        return cache.frame(exclude=exclude)


ACCOUNTS_JOB = ReportJob(
    name="accounts",
    output_name="accounts.csv",
    build=build_accounts_report,
    skip_own_output=False,
)
YEARLY_JOB = ReportJob(name="yearly", output_name="yearly.csv", build=build_yearly_report)
FS_JOB = ReportJob(name="fs", output_name="fs.csv", build=build_fs_report)

REPORT_JOBS: tuple[ReportJob, ...] = (ACCOUNTS_JOB, YEARLY_JOB, FS_JOB)

JOB_NAMES: tuple[str, ...] = tuple(job.name for job in REPORT_JOBS)


async def run_job(
    job: ReportJob,
    cache: LedgerCache,
    tracker: ProgressTracker,
    output_dir: Path,
    encoding: str = "utf-8",
) -> Path:
    """
    Run ``job`` against ``cache`` and write its report into ``output_dir``.

    The job's tracker entry goes to ``starting`` on entry and to
    ``finished`` with the elapsed time once the file is written. If anything
    raises, the error propagates and the entry stays at ``starting``.

    Returns
    -------
    pathlib.Path
        Path of the written report.
    """
    tracker.start(job.name)
    start = time.perf_counter()
    logger.info("Job %s starting", job.name)

    try:
        lines = job.build(job.input_frame(cache))
        path = await asyncio.to_thread(
            write_report, Path(output_dir) / job.output_name, lines, encoding
        )
    except Exception:
        logger.exception("Job %s failed", job.name)
        raise

    duration = time.perf_counter() - start
    tracker.finish(job.name, duration)
    logger.info("Job %s finished in %.2fs -> %s", job.name, duration, path)
    return path

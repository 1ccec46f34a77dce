# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Run orchestrator for Ledger Reports.

A ``ReportRunner`` owns one ledger cache and one progress tracker and
drives a full run:

1) load phase: the file loader rebuilds the cache from the source
   directory. Nothing else runs until it is complete.
2) fan-out phase: the three report jobs run concurrently against the
   shared, read-only cache, each writing its own output file and its own
   tracker entry.

Failure handling
----------------
- A load failure aborts the run before any job starts.
- In the fan-out phase, a failing job does not cancel its siblings: all
  three run to completion, then the first error (in job order) is raised.
- Nothing is retried.

Two runs on the same runner are not serialized: a second run's cache
rebuild may race the jobs of a first run still in flight.
"""

import asyncio
from pathlib import Path
from typing import Optional

from .cache import LedgerCache
from .config import AppConfig, LoaderConfig
from .jobs import REPORT_JOBS, ReportJob, run_job
from .loader import load_directory
from .logging_setup import get_logger
from .progress import JobStatus, ProgressTracker

logger = get_logger(__name__)


class ReportRunner:
    """Load a ledger directory and generate every report from it."""

    def __init__(
        self,
        config: AppConfig,
        jobs: tuple[ReportJob, ...] = REPORT_JOBS,
    ) -> None:
        self.config = config
        self.jobs = jobs
        self.cache = LedgerCache()
        self.tracker = ProgressTracker(job.name for job in jobs)

    async def load(self) -> int:
        """Rebuild the cache from the source directory."""
        return await load_directory(
            self.config.source_dir,
            self.cache,
            extension=self.config.loader.extension,
            encoding=self.config.loader.encoding,
        )

    async def run(self) -> dict[str, Path]:
        """
        Run the whole pipeline: load, then all report jobs concurrently.

        Returns
        -------
        dict[str, pathlib.Path]
            Job name -> written report path.

        Raises
        ------
        OSError
            If the source directory, a ledger file or an output file cannot
            be accessed.
        """
        await self.load()

        output_dir = self.config.output_dir
        encoding = self.config.loader.encoding
        results = await asyncio.gather(
            *(
                run_job(job, self.cache, self.tracker, output_dir, encoding)
                for job in self.jobs
            ),
            return_exceptions=True,
        )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        logger.info("Generated %d report(s) in %s", len(results), output_dir)
        return {job.name: path for job, path in zip(self.jobs, results)}

    def run_sync(self) -> dict[str, Path]:
        """Blocking version of ``run()`` for callers without an event loop."""
        return asyncio.run(self.run())

    def status(self, name: str) -> str:
        """Status string of one job (``UnknownJobError`` for unknown names)."""
        return self.tracker.status(name)

    def job_status(self, name: str) -> JobStatus:
        return self.tracker.get(name)

    def statuses(self) -> dict[str, str]:
        return self.tracker.snapshot()


def generate_reports(
    source_dir: Path,
    output_dir: Path,
    loader: Optional[LoaderConfig] = None,
) -> dict[str, Path]:
    """Run every report once for ``source_dir`` into ``output_dir``."""
    config = AppConfig(
        source_dir=Path(source_dir),
        output_dir=Path(output_dir),
        loader=loader or LoaderConfig(),
        log_level="INFO",
    )
    return ReportRunner(config).run_sync()

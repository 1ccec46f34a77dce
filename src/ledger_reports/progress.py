# Ledger Reports - Ledger ingestion & financial reporting engine
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Progress tracking for report jobs.

Each job name maps to a ``JobStatus``:

    idle  ->  starting  ->  finished in <seconds>

Entries are created idle, set to ``starting`` when a job begins and to
``finished`` (with its wall-clock duration) when it ends. There is no
failure state: a job that raises stays at ``starting``.

Every job only writes its own entry, so no lock is needed. Nothing is
persisted; a new tracker starts all idle.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UnknownJobError(KeyError):
    """Raised when a status is requested for a job name that does not exist."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        self.known = tuple(known)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown job {self.name!r}. Expected one of: {', '.join(self.known)}."


class JobState(str, Enum):
    IDLE = "idle"
    STARTING = "starting"
    FINISHED = "finished"


@dataclass(frozen=True)
class JobStatus:
    """State of one job; ``duration`` (seconds) is only set when finished."""

    state: JobState = JobState.IDLE
    duration: Optional[float] = None

    def __str__(self) -> str:
        if self.state is JobState.FINISHED:
            return f"finished in {self.duration or 0.0:.2f}"
        return self.state.value


class ProgressTracker:
    """Mapping from job name to its current ``JobStatus``."""

    def __init__(self, names: Iterable[str]) -> None:
        self._statuses: dict[str, JobStatus] = {name: JobStatus() for name in names}

    def _check(self, name: str) -> None:
        if name not in self._statuses:
            raise UnknownJobError(name, self._statuses)

    def start(self, name: str) -> None:
        self._check(name)
        self._statuses[name] = JobStatus(JobState.STARTING)

    def finish(self, name: str, duration: float) -> None:
        self._check(name)
        self._statuses[name] = JobStatus(JobState.FINISHED, duration)

    def get(self, name: str) -> JobStatus:
        """Return the typed status of ``name`` (``UnknownJobError`` if unknown)."""
        self._check(name)
        return self._statuses[name]

    def status(self, name: str) -> str:
        """Return the status string of ``name``, e.g. ``"finished in 0.12"``."""
        return str(self.get(name))

    def snapshot(self) -> dict[str, str]:
        return {name: str(status) for name, status in self._statuses.items()}

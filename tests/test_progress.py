import pytest

from ledger_reports.progress import JobState, JobStatus, ProgressTracker, UnknownJobError


def test_initial_state_is_idle() -> None:
    tracker = ProgressTracker(["accounts", "yearly", "fs"])

    assert tracker.snapshot() == {"accounts": "idle", "yearly": "idle", "fs": "idle"}


def test_lifecycle_starting_then_finished() -> None:
    tracker = ProgressTracker(["accounts"])

    tracker.start("accounts")
    assert tracker.status("accounts") == "starting"

    tracker.finish("accounts", 1.234)
    assert tracker.status("accounts") == "finished in 1.23"
    assert tracker.get("accounts") == JobStatus(JobState.FINISHED, 1.234)


def test_entries_are_independent() -> None:
    tracker = ProgressTracker(["accounts", "fs"])

    tracker.start("fs")

    assert tracker.status("accounts") == "idle"
    assert tracker.status("fs") == "starting"


def test_unknown_job_is_a_usage_error() -> None:
    tracker = ProgressTracker(["accounts"])

    with pytest.raises(UnknownJobError) as excinfo:
        tracker.status("balance-sheet")

    assert "balance-sheet" in str(excinfo.value)
    assert tracker.snapshot() == {"accounts": "idle"}


def test_unknown_job_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        ProgressTracker([]).start("accounts")

"""Sharing data between threads and tracking jobs done by a worker thread."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor


def offset_sums(
    numbers: Sequence[int],
    offsets: Iterable[int] = range(8),
    step: int = 5,
) -> list[int]:
    """Sum every ``step``-th number from each offset, one thread per offset.

    The sequence is shared between the threads, not copied. The sums come
    back in the order of the offsets.
    """
    offsets = list(offsets)
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if any(offset < 0 for offset in offsets):
        raise ValueError("offsets must not be negative")
    if not offsets:
        return []

    def sum_from(offset: int) -> int:
        return sum(numbers[offset::step])

    with ThreadPoolExecutor(max_workers=len(offsets)) as pool:
        return list(pool.map(sum_from, offsets))


class JobStatus:
    """A count of completed jobs that several threads may update."""

    def __init__(self, jobs_completed: int = 0) -> None:
        self._lock = threading.Lock()
        self._jobs_completed = jobs_completed

    def complete_one(self) -> int:
        """Record one more completed job and return the new count."""
        with self._lock:
            self._jobs_completed += 1
            return self._jobs_completed

    def completed(self) -> int:
        """Return the number of completed jobs."""
        with self._lock:
            return self._jobs_completed

    def __repr__(self) -> str:
        return f"JobStatus(jobs_completed={self.completed()})"


def watch_jobs(
    status: JobStatus,
    total: int = 10,
    job_interval: float = 0.25,
    poll_interval: float = 0.5,
) -> int:
    """Run ``total`` jobs on a worker thread and wait until they are done.

    While jobs remain, "waiting... " is printed every ``poll_interval``
    seconds. Returns how many times it was printed.
    """
    if total < 0:
        raise ValueError(f"total must not be negative, got {total}")

    def work() -> None:
        for _ in range(total):
            time.sleep(job_interval)
            status.complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while status.completed() < total:
        print("waiting... ")
        waits += 1
        time.sleep(poll_interval)
    worker.join()
    return waits
"""Solutions to the concurrency lessons: joining threads, shared state and channels."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Protocol


def run_workers(count: int = 10, delay: float = 0.25) -> int:
    """Start count threads that each sleep, wait for all; return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    threads = [threading.Thread(target=work, args=(index,)) for index in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    completed = sum(1 for thread in threads if not thread.is_alive())
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


class _JobStatus:
    """A job counter that threads update under a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._completed = 0

    def complete(self) -> None:
        with self._lock:
            self._completed += 1

    @property
    def jobs_completed(self) -> int:
        with self._lock:
            return self._completed


def count_jobs(count: int = 10, delay: float = 0.25) -> int:
    """Let count threads each record a finished job; return the final tally."""
    status = _JobStatus()

    def job() -> None:
        time.sleep(delay)
        status.complete()

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        print(f"jobs completed {status.jobs_completed}")
        thread.join()
    return status.jobs_completed


@dataclass
class Queue:
    """Values to send, split into two halves, with a pause between sends."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    interval: float = 1.0


class _Sink(Protocol):
    def put(self, item: Any, /) -> Any: ...


def send_tx(queue: Queue, sink: _Sink) -> list[threading.Thread]:
    """Send both halves of the queue into sink from two threads; return the senders."""

    def send(values: Iterable[int]) -> None:
        for value in values:
            print(f"sending {value}")
            sink.put(value)
            time.sleep(queue.interval)

    senders = [
        threading.Thread(target=send, args=(half,))
        for half in (queue.first_half, queue.second_half)
    ]
    for sender in senders:
        sender.start()
    return senders


def offset_sums(numbers: Iterable[int] = range(100), workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers congruent to that offset."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    shared = tuple(numbers)

    def offset_sum(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(offset_sum, range(workers)))
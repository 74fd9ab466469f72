"""Counters that track allocations and memory in use."""

from __future__ import annotations

import threading


class AllocationTracker:
    """Thread-safe tally of live allocations, bytes in use and per-phase allocations."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._allocations = 0
        self._total = 0
        self._phase = 0

    def alloc(self, size: int) -> None:
        with self._lock:
            self._allocations += 1
            self._total += size
            self._phase += 1

    def alloc_zeroed(self, size: int) -> None:
        self.alloc(size)

    def dealloc(self, size: int) -> None:
        with self._lock:
            self._allocations -= 1
            self._total -= size

    def realloc(self, old_size: int, new_size: int) -> None:
        with self._lock:
            self._total += new_size - old_size
            self._phase += 1

    def num_allocations(self) -> int:
        return self._allocations

    def total_memory_allocated(self) -> int:
        return self._total

    def phase_allocations(self) -> int:
        return self._phase

    def reset_phase_allocations(self) -> None:
        with self._lock:
            self._phase = 0
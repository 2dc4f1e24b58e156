"""Fixed-window rolling average (circular buffer, O(1) push and query)."""

from __future__ import annotations

import numpy as np


class InvalidCapacity(ValueError):
    """Raised when a window capacity is not a positive integer."""


class RollingAverage:
    """
    Mean of the last ``capacity`` pushed values.

    Until the window is full the mean only covers the values pushed so far;
    the zero-filled slots never contribute. Not thread-safe: a single owner
    (e.g. the render loop) must push and query.

    Example:
        ```python
        frame_ms = RollingAverage(60)
        frame_ms.push(16.4)
        frame_ms.average()
        ```
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)) or capacity <= 0:
            raise InvalidCapacity(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = int(capacity)
        self._samples = np.zeros(self._capacity, dtype=np.float64)
        self._write = 0
        self._count = 0
        self._sum = 0.0

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: float) -> None:
        if self._count == self._capacity:
            # evict the oldest sample, which sits at the write position
            self._sum -= self._samples[self._write]
        else:
            self._count += 1

        self._samples[self._write] = value
        self._sum += float(value)
        self._write = (self._write + 1) % self._capacity

    def average(self) -> float:
        if self._count == 0:
            return 0.0
        return float(self._sum / self._count)

    def count(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"RollingAverage(capacity={self._capacity}, count={self._count}, average={self.average():.4g})"

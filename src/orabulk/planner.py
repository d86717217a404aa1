from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class BatchPlan:
    """Row ranges for one upload.

    `batch_size == 0` means a single batch covering every row. An empty table always plans one
    zero-row segment, whatever the batch size.
    """
    batch_size: int
    total_rows: int

    def __post_init__(self):
        if self.batch_size < 0:
            raise ValueError('batch_size must be a non-negative integer')
        if self.total_rows < 0:
            raise ValueError('total_rows must be a non-negative integer')

    @property
    def single_batch(self) -> bool:
        return self.batch_size == 0

    @property
    def batch_count(self) -> int:
        if self.single_batch or self.total_rows == 0:
            return 1
        return math.ceil(self.total_rows / self.batch_size)

    def segments(self) -> list[tuple[int, int]]:
        """Return `(offset, count)` pairs covering `[0, total_rows)` in row order."""
        if self.single_batch:
            return [(0, self.total_rows)]
        out: list[tuple[int, int]] = []
        for i in range(self.batch_count):
            offset = i * self.batch_size
            out.append((offset, min(self.batch_size, self.total_rows - offset)))
        return out


def plan_batches(total_rows: int, batch_size: int = 0) -> list[tuple[int, int]]:
    return BatchPlan(batch_size=batch_size, total_rows=total_rows).segments()

"""ReconcileAccumulator — opt-in profiling for reconciliation.

This module provides accumulated metrics while reconciling generations:
- Number of reconcile calls
- Delete and insert patch counts
- Positions deleted and inserted

Zero overhead when disabled (get_reconcile_accumulator() returns None).

Example:
    from gentree.profiling import profiled_reconcile

    with profiled_reconcile() as metrics:
        patches = reconcile(factory, previous, current)

    print(metrics.summary())
    # {"total_ms": 0.2, "reconcile_calls": 1, "deletions": 1, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ReconcileAccumulator:
    """Accumulated metrics across reconcile calls.

    Attributes:
        start_time: Profiling start timestamp.
        reconcile_calls: Number of reconcile() calls recorded.
        deletions: Delete patches emitted.
        insertions: Insert patches emitted.
        dead_units: Positions covered by Delete patches.
        new_units: Positions carried by Insert patches and replacements.

    """

    start_time: float = field(default_factory=perf_counter)
    reconcile_calls: int = 0
    deletions: int = 0
    insertions: int = 0
    dead_units: int = 0
    new_units: int = 0

    def record_reconcile(
        self, deletions: int, insertions: int, dead_units: int, new_units: int
    ) -> None:
        """Record one reconcile call."""
        self.reconcile_calls += 1
        self.deletions += deletions
        self.insertions += insertions
        self.dead_units += dead_units
        self.new_units += new_units

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of reconcile metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "reconcile_calls": self.reconcile_calls,
            "deletions": self.deletions,
            "insertions": self.insertions,
            "dead_units": self.dead_units,
            "new_units": self.new_units,
        }


_accumulator: ContextVar[ReconcileAccumulator | None] = ContextVar(
    "reconcile_accumulator",
    default=None,
)


def get_reconcile_accumulator() -> ReconcileAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_reconcile() -> Iterator[ReconcileAccumulator]:
    """Context manager for profiled reconciliation.

    Creates a ReconcileAccumulator and makes it available via
    get_reconcile_accumulator() for the duration of the with block.

    Yields:
        ReconcileAccumulator that will be populated during reconcile calls.

    """
    acc = ReconcileAccumulator()
    token: Token[ReconcileAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)

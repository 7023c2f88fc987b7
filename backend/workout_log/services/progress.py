"""Completion metrics derived from set lists. Always recomputed, never stored."""
from __future__ import annotations
import math
from typing import Iterable, Sequence

from workout_log.schemas import SetRead


def completion_ratio(sets: Sequence[SetRead] | None) -> float:
    """Fraction of sets marked done, in [0, 1]; 0.0 for a missing or empty list."""
    if not sets:
        return 0.0
    done = sum(1 for s in sets if s.done)
    return done / len(sets)


def completion_percent(set_lists: Iterable[Sequence[SetRead]]) -> int:
    """Whole-number percentage of done sets across several lists.

    Halves round up (12.5 -> 13). Returns 0 when there are no sets at all.
    """
    done = 0
    total = 0
    for sets in set_lists:
        total += len(sets)
        done += sum(1 for s in sets if s.done)
    if total == 0:
        return 0
    return math.floor((done / total) * 100 + 0.5)

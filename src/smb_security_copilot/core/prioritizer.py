from __future__ import annotations

from collections.abc import Iterable

from ..models import MAX_PLAN_STEPS, Step


def step_sort_key(step: Step) -> tuple[int, int]:
    # Higher impact first, then cheaper effort.
    return (-int(step.impact), step.effort.rank)


def prioritize_steps(steps: Iterable[Step], *, limit: int = MAX_PLAN_STEPS) -> tuple[Step, ...]:
    """
    Order steps by impact, then effort, keeping input order for full ties.

    Relies on `sorted` being stable. Anything past `limit` is discarded.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    ordered = sorted(steps, key=step_sort_key)
    return tuple(ordered[:limit])

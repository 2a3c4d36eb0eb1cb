from __future__ import annotations

import pytest

from smb_security_copilot.core import compute_score, prioritize_steps
from smb_security_copilot.models import Effort, Step


def _step(step_id: str, impact: int, effort: Effort) -> Step:
    return Step(id=step_id, title=step_id, rationale="", actions=("act",), impact=impact, effort=effort)


@pytest.mark.parametrize(
    ("risk", "score"),
    [(0, 100), (1, 92), (3, 76), (12, 4), (13, 0), (40, 0)],
)
def test_compute_score_is_linear_with_floor(risk, score) -> None:
    assert compute_score(risk) == score


def test_compute_score_rejects_negative_risk() -> None:
    with pytest.raises(ValueError):
        compute_score(-1)


def test_prioritize_orders_by_impact_then_effort() -> None:
    steps = [
        _step("a", 3, Effort.LOW),
        _step("b", 5, Effort.HIGH),
        _step("c", 5, Effort.LOW),
        _step("d", 4, Effort.MEDIUM),
    ]
    assert [s.id for s in prioritize_steps(steps)] == ["c", "b", "d", "a"]


def test_prioritize_keeps_input_order_for_full_ties() -> None:
    steps = [_step(name, 3, Effort.LOW) for name in ("first", "second", "third")]
    assert [s.id for s in prioritize_steps(steps)] == ["first", "second", "third"]
    assert [s.id for s in prioritize_steps(reversed(steps))] == ["third", "second", "first"]


def test_prioritize_truncates_to_five() -> None:
    steps = [_step(f"s{i}", 1 + i % 5, Effort.LOW) for i in range(8)]
    ordered = prioritize_steps(steps)
    assert len(ordered) == 5
    assert [s.impact for s in ordered] == [5, 4, 3, 3, 2]


def test_prioritize_custom_limit() -> None:
    steps = [_step("a", 1, Effort.LOW), _step("b", 2, Effort.LOW)]
    assert [s.id for s in prioritize_steps(steps, limit=1)] == ["b"]
    assert prioritize_steps(steps, limit=0) == ()
    with pytest.raises(ValueError):
        prioritize_steps(steps, limit=-1)

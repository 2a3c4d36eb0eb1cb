from __future__ import annotations

MAX_SCORE = 100
RISK_MULTIPLIER = 8


def compute_score(total_risk: int) -> int:
    """Linear penalty per risk point, floored at zero. Large risk totals all land on 0."""
    if total_risk < 0:
        raise ValueError(f"Total risk cannot be negative, got {total_risk}.")
    return max(0, MAX_SCORE - RISK_MULTIPLIER * int(total_risk))

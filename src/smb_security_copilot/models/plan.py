from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict

MAX_PLAN_STEPS = 5
MIN_IMPACT = 1
MAX_IMPACT = 5


class Effort(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        return _EFFORT_RANK[self]


_EFFORT_RANK: dict[Effort, int] = {
    Effort.LOW: 0,
    Effort.MEDIUM: 1,
    Effort.HIGH: 2,
}


class StepPayload(TypedDict):
    id: str
    title: str
    rationale: str
    actions: list[str]
    category: str | None
    impact: int
    effort: str


class PlanPayload(TypedDict):
    score: int
    steps: list[StepPayload]


class VendorPayload(TypedDict):
    name: str
    url: str
    blurb: str
    affiliate: bool


@dataclass(slots=True, frozen=True)
class Step:
    id: str
    title: str
    rationale: str
    actions: tuple[str, ...]
    impact: int
    effort: Effort
    category: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Step id must not be empty.")
        if not self.actions or any(not str(action).strip() for action in self.actions):
            raise ValueError(f"Step {self.id!r} needs at least one non-empty action.")
        if not MIN_IMPACT <= int(self.impact) <= MAX_IMPACT:
            raise ValueError(f"Step {self.id!r} impact must be between {MIN_IMPACT} and {MAX_IMPACT}.")
        # Accept plain strings ("Low") from callers building steps by hand.
        object.__setattr__(self, "effort", Effort(self.effort))
        object.__setattr__(self, "actions", tuple(self.actions))

    def to_payload(self) -> StepPayload:
        return {
            "id": self.id,
            "title": self.title,
            "rationale": self.rationale,
            "actions": list(self.actions),
            "category": self.category,
            "impact": self.impact,
            "effort": self.effort.value,
        }


@dataclass(slots=True, frozen=True)
class Plan:
    score: int
    steps: tuple[Step, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not 0 <= int(self.score) <= 100:
            raise ValueError(f"Plan score must be within 0..100, got {self.score}.")
        object.__setattr__(self, "steps", tuple(self.steps))
        if len(self.steps) > MAX_PLAN_STEPS:
            raise ValueError(f"Plan holds at most {MAX_PLAN_STEPS} steps, got {len(self.steps)}.")

    @property
    def step_ids(self) -> list[str]:
        return [step.id for step in self.steps]

    def to_payload(self) -> PlanPayload:
        return {
            "score": self.score,
            "steps": [step.to_payload() for step in self.steps],
        }


@dataclass(slots=True, frozen=True)
class VendorDescriptor:
    name: str
    url: str
    blurb: str = ""
    affiliate: bool = False

    def to_payload(self) -> VendorPayload:
        return {
            "name": self.name,
            "url": self.url,
            "blurb": self.blurb,
            "affiliate": self.affiliate,
        }

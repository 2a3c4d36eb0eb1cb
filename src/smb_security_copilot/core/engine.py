from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from ..catalog import DEFAULT_AFFILIATES, DEFAULT_QUESTIONS, AffiliateCatalog, QuestionCatalog
from ..models import MAX_PLAN_STEPS, AnswerSet, Plan, Question, VendorDescriptor
from .prioritizer import prioritize_steps
from .rules import DEFAULT_RULES, Rule, ensure_unique_rule_ids, evaluate_rules
from .scoring import compute_score

logger = logging.getLogger(__name__)


class PlanEvaluator:
    """
    Turns a questionnaire answer set into a scored, prioritized plan.

    The question catalog, rule set and affiliate catalog are passed in so the
    evaluator holds no ambient state; every call builds a fresh `Plan`.
    """

    def __init__(
        self,
        questions: QuestionCatalog,
        rules: Iterable[Rule],
        affiliates: AffiliateCatalog,
    ) -> None:
        self.questions = questions
        self.rules: tuple[Rule, ...] = ensure_unique_rule_ids(rules)
        self.affiliates = affiliates

    def parse_answers(self, raw: Mapping[str, Any]) -> AnswerSet:
        return AnswerSet.parse(raw, self.questions)

    def evaluate(self, answers: AnswerSet | Mapping[str, Any]) -> Plan:
        # AnswerSets built directly or against another catalog get re-checked too.
        if isinstance(answers, AnswerSet):
            answers = self.parse_answers(answers.as_dict())
        else:
            answers = self.parse_answers(answers)

        outcome = evaluate_rules(answers, self.rules)
        score = compute_score(outcome.total_risk)
        steps = prioritize_steps(outcome.steps, limit=MAX_PLAN_STEPS)

        kept = {step.id for step in steps}
        dropped = [step_id for step_id in outcome.triggered if step_id not in kept]
        logger.debug(
            "Plan evaluated: triggered=%s total_risk=%s score=%s dropped=%s",
            ",".join(outcome.triggered) or "-",
            outcome.total_risk,
            score,
            ",".join(dropped) or "-",
        )
        return Plan(score=score, steps=steps)

    def list_questions(self) -> tuple[Question, ...]:
        return self.questions.list_questions()

    def resolve_vendors(self, category: str | None) -> tuple[VendorDescriptor, ...]:
        return self.affiliates.resolve(category)

    def plan_payload(self, plan: Plan, *, include_vendors: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = dict(plan.to_payload())
        if include_vendors:
            payload["steps"] = [
                {**step.to_payload(), "vendors": [v.to_payload() for v in self.resolve_vendors(step.category)]}
                for step in plan.steps
            ]
        return payload


@lru_cache
def default_evaluator() -> PlanEvaluator:
    return PlanEvaluator(DEFAULT_QUESTIONS, DEFAULT_RULES, DEFAULT_AFFILIATES)


def evaluate(answers: AnswerSet | Mapping[str, Any]) -> Plan:
    return default_evaluator().evaluate(answers)


def list_questions() -> tuple[Question, ...]:
    return default_evaluator().list_questions()


def resolve_vendors(category: str | None) -> tuple[VendorDescriptor, ...]:
    return default_evaluator().resolve_vendors(category)

from .engine import PlanEvaluator, default_evaluator, evaluate, list_questions, resolve_vendors
from .prioritizer import prioritize_steps
from .rules import DEFAULT_RULES, Rule, RuleOutcome, evaluate_rules
from .scoring import MAX_SCORE, RISK_MULTIPLIER, compute_score

__all__ = [
    "DEFAULT_RULES",
    "MAX_SCORE",
    "RISK_MULTIPLIER",
    "PlanEvaluator",
    "Rule",
    "RuleOutcome",
    "compute_score",
    "default_evaluator",
    "evaluate",
    "evaluate_rules",
    "list_questions",
    "prioritize_steps",
    "resolve_vendors",
]

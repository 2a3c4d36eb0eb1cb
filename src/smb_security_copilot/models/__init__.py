from .answers import (
    ISSUE_INVALID_OPTION,
    ISSUE_MISSING,
    ISSUE_NOT_A_STRING,
    ISSUE_NOT_AN_OBJECT,
    ISSUE_UNKNOWN_KEY,
    AnswerIssue,
    AnswerSet,
    AnswerValidationError,
    Question,
)
from .plan import MAX_PLAN_STEPS, Effort, Plan, Step, VendorDescriptor

__all__ = [
    "ISSUE_INVALID_OPTION",
    "ISSUE_MISSING",
    "ISSUE_NOT_A_STRING",
    "ISSUE_NOT_AN_OBJECT",
    "ISSUE_UNKNOWN_KEY",
    "MAX_PLAN_STEPS",
    "AnswerIssue",
    "AnswerSet",
    "AnswerValidationError",
    "Effort",
    "Plan",
    "Question",
    "Step",
    "VendorDescriptor",
]

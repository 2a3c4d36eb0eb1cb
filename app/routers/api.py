from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from app.dependencies import get_evaluator
from smb_security_copilot.core import PlanEvaluator
from smb_security_copilot.models import AnswerValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/questions")
def api_questions(evaluator: PlanEvaluator = Depends(get_evaluator)):
    return {"items": [question.to_payload() for question in evaluator.list_questions()]}


@router.post("/plan")
def api_plan(
    answers: Any = Body(...),
    include_vendors: bool = Query(default=False),
    evaluator: PlanEvaluator = Depends(get_evaluator),
):
    try:
        plan = evaluator.evaluate(answers)
    except AnswerValidationError as exc:
        logger.info("Rejected answer set: %s", ", ".join(exc.keys) or "<body>")
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_answers", "issues": [issue.to_payload() for issue in exc.issues]},
        )
    return evaluator.plan_payload(plan, include_vendors=bool(include_vendors))


@router.get("/vendors/{category}")
def api_vendors(category: str, evaluator: PlanEvaluator = Depends(get_evaluator)):
    return {
        "category": category,
        "items": [vendor.to_payload() for vendor in evaluator.resolve_vendors(category)],
    }

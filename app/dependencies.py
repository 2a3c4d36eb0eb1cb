import logging
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from app.config import Settings, get_settings
from smb_security_copilot.catalog import DEFAULT_AFFILIATES, DEFAULT_QUESTIONS
from smb_security_copilot.core import DEFAULT_RULES, PlanEvaluator
from smb_security_copilot.io import load_affiliate_file

logger = logging.getLogger(__name__)


@lru_cache
def build_evaluator(affiliate_catalog_path: str) -> PlanEvaluator:
    affiliates = DEFAULT_AFFILIATES
    if affiliate_catalog_path:
        affiliates = load_affiliate_file(Path(affiliate_catalog_path))
        logger.info(
            "Loaded affiliate catalog override from %s (%d categories)",
            affiliate_catalog_path,
            len(affiliates.categories),
        )
    return PlanEvaluator(DEFAULT_QUESTIONS, DEFAULT_RULES, affiliates)


def get_evaluator(settings: Settings = Depends(get_settings)) -> PlanEvaluator:
    path = settings.affiliate_catalog_path
    return build_evaluator(str(path) if path else "")

from .affiliates import DEFAULT_AFFILIATES, AffiliateCatalog
from .questions import DEFAULT_QUESTIONS, QuestionCatalog

__all__ = ["DEFAULT_AFFILIATES", "DEFAULT_QUESTIONS", "AffiliateCatalog", "QuestionCatalog"]

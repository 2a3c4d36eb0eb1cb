from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ..models import Question


class QuestionCatalog:
    """Ordered, read-only list of questionnaire questions keyed by `Question.key`."""

    def __init__(self, questions: Iterable[Question]) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        self._by_key: dict[str, Question] = {}
        for question in self._questions:
            if question.key in self._by_key:
                raise ValueError(f"Duplicate question key: {question.key!r}")
            self._by_key[question.key] = question

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    @property
    def keys(self) -> list[str]:
        return [question.key for question in self._questions]

    def list_questions(self) -> tuple[Question, ...]:
        return self._questions

    def get(self, key: str) -> Question | None:
        return self._by_key.get(key)

    def missing_keys(self, raw: Mapping[str, Any]) -> list[str]:
        return [question.key for question in self._questions if not raw.get(question.key)]

    def next_question(self, raw: Mapping[str, Any]) -> Question | None:
        # Presentation order only; evaluation never depends on it.
        for question in self._questions:
            if not raw.get(question.key):
                return question
        return None


DEFAULT_QUESTIONS = QuestionCatalog(
    [
        Question(
            key="employees",
            prompt="How many employees do you have?",
            options=("1", "2-5", "6-15", "16-50", "51-200", "200+"),
        ),
        Question(
            key="suite",
            prompt="Primary work suite?",
            options=("Microsoft 365", "Google Workspace", "Both/Other"),
        ),
        Question(
            key="mfa",
            prompt="Is MFA enforced for all accounts?",
            options=("All users", "Some users", "Not enforced"),
        ),
        Question(key="pwdmgr", prompt="Team password manager in use?", options=("Yes", "No")),
        Question(
            key="endpoint",
            prompt="Endpoint protection (EDR/AV) on all devices?",
            options=("All devices", "Some devices", "No"),
        ),
        Question(key="backup", prompt="Automated, offsite backups for important data?", options=("Yes", "No")),
        Question(key="emailsec", prompt="Extra email security beyond built‑in?", options=("Yes", "No")),
        Question(key="remote", prompt="How many remote workers?", options=("None", "Some", "Many/Most")),
        Question(
            key="mdm",
            prompt="Do you use MDM/device management (Intune/Jamf/etc.)?",
            options=("Yes", "Partial", "No"),
        ),
        Question(key="pii", prompt="Do you process payments or store customer PII?", options=("Yes", "No")),
    ]
)

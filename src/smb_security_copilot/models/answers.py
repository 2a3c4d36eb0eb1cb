from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypedDict

ISSUE_MISSING = "missing"
ISSUE_UNKNOWN_KEY = "unknown_key"
ISSUE_INVALID_OPTION = "invalid_option"
ISSUE_NOT_A_STRING = "not_a_string"
ISSUE_NOT_AN_OBJECT = "not_an_object"


class QuestionPayload(TypedDict):
    key: str
    prompt: str
    options: list[str]


class IssuePayload(TypedDict):
    key: str
    problem: str
    value: Any


@dataclass(slots=True, frozen=True)
class Question:
    key: str
    prompt: str
    options: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Question key must not be empty.")
        options = tuple(self.options)
        if not options:
            raise ValueError(f"Question {self.key!r} needs at least one option.")
        if len(set(options)) != len(options):
            raise ValueError(f"Question {self.key!r} has duplicate options.")
        object.__setattr__(self, "options", options)

    def accepts(self, value: object) -> bool:
        return isinstance(value, str) and value in self.options

    def to_payload(self) -> QuestionPayload:
        return {"key": self.key, "prompt": self.prompt, "options": list(self.options)}


@dataclass(slots=True, frozen=True)
class AnswerIssue:
    key: str
    problem: str
    value: Any = None

    def to_payload(self) -> IssuePayload:
        return {"key": self.key, "problem": self.problem, "value": self.value}


class AnswerValidationError(ValueError):
    """Raised when a raw answer mapping cannot become an AnswerSet."""

    def __init__(self, issues: Iterable[AnswerIssue]) -> None:
        self.issues: tuple[AnswerIssue, ...] = tuple(issues)
        summary = ", ".join(f"{issue.key} ({issue.problem})" for issue in self.issues)
        super().__init__(f"Invalid answers: {summary}")

    @property
    def keys(self) -> list[str]:
        return [issue.key for issue in self.issues]


@dataclass(slots=True, frozen=True)
class AnswerSet:
    """
    A complete, validated set of questionnaire answers.

    Items are kept sorted by key so equality and hashing ignore the order in
    which answers were supplied. Build one with `AnswerSet.parse`.
    """

    items: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        items = tuple(sorted((str(key), value) for key, value in self.items))
        keys = [key for key, _ in items]
        if len(set(keys)) != len(keys):
            raise ValueError("AnswerSet holds one answer per question key.")
        object.__setattr__(self, "items", items)

    @classmethod
    def parse(cls, raw: Mapping[str, Any], questions: Iterable[Question]) -> AnswerSet:
        if not isinstance(raw, Mapping):
            raise AnswerValidationError([AnswerIssue(key="", problem=ISSUE_NOT_AN_OBJECT, value=type(raw).__name__)])

        by_key = {question.key: question for question in questions}
        issues: list[AnswerIssue] = []
        accepted: dict[str, str] = {}

        for key, question in by_key.items():
            if key not in raw:
                issues.append(AnswerIssue(key=key, problem=ISSUE_MISSING))
                continue
            value = raw[key]
            if not isinstance(value, str):
                issues.append(AnswerIssue(key=key, problem=ISSUE_NOT_A_STRING, value=value))
            elif not question.accepts(value):
                issues.append(AnswerIssue(key=key, problem=ISSUE_INVALID_OPTION, value=value))
            else:
                accepted[key] = value

        for key in raw:
            if key not in by_key:
                issues.append(AnswerIssue(key=str(key), problem=ISSUE_UNKNOWN_KEY, value=raw[key]))

        if issues:
            raise AnswerValidationError(issues)
        return cls(items=tuple(sorted(accepted.items())))

    def get(self, key: str) -> str | None:
        for item_key, value in self.items:
            if item_key == key:
                return value
        return None

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return any(item_key == key for item_key, _ in self.items)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def as_dict(self) -> dict[str, str]:
        return dict(self.items)

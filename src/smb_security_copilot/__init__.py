from __future__ import annotations

from pathlib import Path
import tomllib

from .core import PlanEvaluator, evaluate, list_questions, resolve_vendors
from .models import AnswerSet, AnswerValidationError, Plan, Step

__version__ = "0.1.0"


def get_runtime_version() -> str:
    candidates = [
        Path.cwd() / "pyproject.toml",
        Path(__file__).resolve().parents[2] / "pyproject.toml",
    ]

    seen: set[Path] = set()
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        if not path.exists():
            continue
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError):
            continue
        project = data.get("project", {}) or {}
        if project.get("name") != "smb-security-copilot":
            continue
        version = str(project.get("version", "")).strip()
        if version:
            return version
    return __version__


__all__ = [
    "__version__",
    "AnswerSet",
    "AnswerValidationError",
    "Plan",
    "PlanEvaluator",
    "Step",
    "evaluate",
    "get_runtime_version",
    "list_questions",
    "resolve_vendors",
]

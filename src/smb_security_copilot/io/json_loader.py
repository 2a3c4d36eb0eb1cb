from __future__ import annotations

import json
from pathlib import Path

from ..catalog import AffiliateCatalog


def load_answers_file(path: Path) -> dict[str, object]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Input JSON must be an object of question key -> selected option.")
    return raw


def load_affiliate_file(path: Path) -> AffiliateCatalog:
    raw = json.loads(path.read_text(encoding="utf-8"))
    return AffiliateCatalog.from_payload(raw)


def dump_result_file(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

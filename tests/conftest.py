from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"

for path in (ROOT_DIR, SRC_DIR):
    value = str(path)
    if path.exists() and value not in sys.path:
        sys.path.insert(0, value)


BEST_CASE = {
    "employees": "1",
    "suite": "Microsoft 365",
    "mfa": "All users",
    "pwdmgr": "Yes",
    "endpoint": "All devices",
    "backup": "Yes",
    "emailsec": "Yes",
    "remote": "None",
    "mdm": "Yes",
    "pii": "No",
}

MID_RISK = {
    "employees": "51-200",
    "suite": "Microsoft 365",
    "mfa": "Some users",
    "pwdmgr": "No",
    "endpoint": "Some devices",
    "backup": "No",
    "emailsec": "No",
    "remote": "Many/Most",
    "mdm": "No",
    "pii": "Yes",
}


@pytest.fixture
def best_case() -> dict[str, str]:
    return dict(BEST_CASE)


@pytest.fixture
def mid_risk() -> dict[str, str]:
    return dict(MID_RISK)

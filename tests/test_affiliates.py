from __future__ import annotations

import pytest

from smb_security_copilot.catalog import DEFAULT_AFFILIATES, AffiliateCatalog
from smb_security_copilot.core import DEFAULT_RULES, evaluate_rules
from smb_security_copilot.models import AnswerSet, VendorDescriptor


def test_every_rule_category_has_vendors() -> None:
    full = AnswerSet(
        items=tuple(
            sorted(
                {
                    "employees": "200+",
                    "suite": "Both/Other",
                    "mfa": "Not enforced",
                    "pwdmgr": "No",
                    "endpoint": "No",
                    "backup": "No",
                    "emailsec": "No",
                    "remote": "Some",
                    "mdm": "No",
                    "pii": "Yes",
                }.items()
            )
        )
    )
    for step in evaluate_rules(full, DEFAULT_RULES).steps:
        assert DEFAULT_AFFILIATES.resolve(step.category), step.id


def test_resolve_preserves_catalog_order() -> None:
    names = [vendor.name for vendor in DEFAULT_AFFILIATES.resolve("mfa")]
    assert names == ["Microsoft Entra ID (MFA)", "Google Workspace 2‑Step", "Duo MFA"]


@pytest.mark.parametrize("category", ["", None, "firewall", "MFA"])
def test_unknown_categories_resolve_empty(category) -> None:
    assert DEFAULT_AFFILIATES.resolve(category) == ()


def test_affiliate_flags() -> None:
    assert all(v.affiliate for v in DEFAULT_AFFILIATES.resolve("backup"))
    assert not any(v.affiliate for v in DEFAULT_AFFILIATES.resolve("emailSecurity"))


def test_from_payload_builds_descriptors() -> None:
    catalog = AffiliateCatalog.from_payload(
        {
            "vpn": [
                {"name": "Tunnel Co", "url": "https://tunnel.test", "blurb": "Fast.", "affiliate": True},
                {"name": "Other", "url": "https://other.test"},
            ],
            "empty": [],
        }
    )
    assert catalog.categories == ["vpn", "empty"]
    assert catalog.resolve("vpn") == (
        VendorDescriptor(name="Tunnel Co", url="https://tunnel.test", blurb="Fast.", affiliate=True),
        VendorDescriptor(name="Other", url="https://other.test"),
    )
    assert catalog.resolve("empty") == ()


@pytest.mark.parametrize(
    "payload",
    [
        ["vpn"],
        {"vpn": {"name": "x"}},
        {"vpn": ["x"]},
        {"vpn": [{"name": "No URL"}]},
    ],
)
def test_from_payload_rejects_malformed_entries(payload) -> None:
    with pytest.raises(ValueError):
        AffiliateCatalog.from_payload(payload)

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..models import VendorDescriptor


class AffiliateCatalog:
    """
    Maps a step category to the vendors shown next to it.

    Lookups never fail: an unknown or empty category resolves to an empty
    tuple so callers can render nothing instead of handling an error.
    """

    def __init__(self, entries: Mapping[str, Iterable[VendorDescriptor]]) -> None:
        self._entries: dict[str, tuple[VendorDescriptor, ...]] = {
            str(category): tuple(vendors) for category, vendors in entries.items()
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> AffiliateCatalog:
        if not isinstance(payload, Mapping):
            raise ValueError("Affiliate catalog must be an object of category -> vendor list.")
        entries: dict[str, list[VendorDescriptor]] = {}
        for category, raw_vendors in payload.items():
            if not isinstance(raw_vendors, list):
                raise ValueError(f"Affiliate category {category!r} must map to a list.")
            vendors: list[VendorDescriptor] = []
            for raw in raw_vendors:
                if not isinstance(raw, Mapping):
                    raise ValueError(f"Vendor entries under {category!r} must be objects.")
                name = str(raw.get("name", "")).strip()
                url = str(raw.get("url", "")).strip()
                if not name or not url:
                    raise ValueError(f"Vendor entries under {category!r} need a name and url.")
                vendors.append(
                    VendorDescriptor(
                        name=name,
                        url=url,
                        blurb=str(raw.get("blurb", "")),
                        affiliate=bool(raw.get("affiliate", False)),
                    )
                )
            entries[str(category)] = vendors
        return cls(entries)

    @property
    def categories(self) -> list[str]:
        return list(self._entries)

    def resolve(self, category: str | None) -> tuple[VendorDescriptor, ...]:
        if not category:
            return ()
        return self._entries.get(category, ())


DEFAULT_AFFILIATES = AffiliateCatalog(
    {
        "passwordManager": [
            VendorDescriptor(
                name="1Password Business",
                url="https://example.affinex.link/1password",
                blurb="Best overall for SMBs; shared vaults, policies.",
                affiliate=True,
            ),
            VendorDescriptor(
                name="Dashlane Business",
                url="https://example.affinex.link/dashlane",
                blurb="Great admin console & SSO.",
                affiliate=True,
            ),
        ],
        "endpoint": [
            VendorDescriptor(
                name="Bitdefender GravityZone",
                url="https://example.affinex.link/bitdefender",
                blurb="Strong protection, light agent.",
                affiliate=True,
            ),
            VendorDescriptor(
                name="Malwarebytes for Teams",
                url="https://example.affinex.link/malwarebytes",
                blurb="Simple & effective for small teams.",
                affiliate=True,
            ),
        ],
        "backup": [
            VendorDescriptor(
                name="Backblaze Business Backup",
                url="https://example.affinex.link/backblaze",
                blurb="Automated offsite backups.",
                affiliate=True,
            ),
            VendorDescriptor(
                name="Acronis Cyber Protect",
                url="https://example.affinex.link/acronis",
                blurb="Image backup + cyber protection.",
                affiliate=True,
            ),
        ],
        "vpn": [
            VendorDescriptor(
                name="NordLayer (NordVPN Teams)",
                url="https://example.affinex.link/nordvpn",
                blurb="Business VPN + secure access.",
                affiliate=True,
            ),
            VendorDescriptor(
                name="Surfshark One Business",
                url="https://example.affinex.link/surfshark",
                blurb="Budget-friendly remote security.",
                affiliate=True,
            ),
        ],
        "emailSecurity": [
            VendorDescriptor(
                name="TitanHQ (SpamTitan)",
                url="https://www.titanhq.com/spamtitan/",
                blurb="Layered email security for M365/Workspace.",
            ),
            VendorDescriptor(
                name="Barracuda Email Protection",
                url="https://www.barracuda.com/products/email-protection",
                blurb="Inbound filtering + ATO protection.",
            ),
        ],
        "mfa": [
            VendorDescriptor(
                name="Microsoft Entra ID (MFA)",
                url="https://learn.microsoft.com/en-us/entra/identity/authentication/howto-mfa-getstarted",
                blurb="Built-in MFA for M365.",
            ),
            VendorDescriptor(
                name="Google Workspace 2‑Step",
                url="https://support.google.com/a/answer/175197",
                blurb="Force org-wide 2‑Step Verification.",
            ),
            VendorDescriptor(
                name="Duo MFA",
                url="https://duo.com/product/multi-factor-authentication-mfa",
                blurb="Flexible across many apps.",
            ),
        ],
        "mdm": [
            VendorDescriptor(
                name="Microsoft Intune (MDM)",
                url="https://www.microsoft.com/en-us/security/business/microsoft-intune",
                blurb="Device compliance & policies.",
            ),
            VendorDescriptor(
                name="Kandji (Apple)",
                url="https://www.kandji.io/",
                blurb="Great for Mac fleets.",
            ),
        ],
    }
)

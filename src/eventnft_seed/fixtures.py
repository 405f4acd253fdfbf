"""Canonical test accounts: stable IDs and credentials across every seeding run.

The web app's manual test plans refer to these exact emails and passwords, so
they MUST NOT be randomised. Differences between roles are data only; the one
behavioural branch (merchant mirroring) keys off ``Role.MERCHANT``.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


class Role(str, enum.Enum):
    """Account roles understood by the EventNFT front end."""

    ADMIN = "admin"
    MERCHANT = "merchant"
    USER = "user"


# ---------------------------------------------------------------------------
# Firestore collections
# ---------------------------------------------------------------------------

USERS_COLLECTION: str = "users"
MERCHANTS_COLLECTION: str = "merchants"


@dataclass(frozen=True)
class SeedUser:
    """One test account to provision.

    ``profile`` holds the role-specific document body; ``createdAt`` and the
    password hash are added when the document is built.
    """

    uid: str
    email: str
    password: str
    role: Role
    display_name: str
    profile: Mapping[str, Any] = field(default_factory=dict)

    def login_path(self) -> str:
        return f"/auth/{self.role.value}"


# ---------------------------------------------------------------------------
# Stable document keys
# ---------------------------------------------------------------------------

ADMIN_UID: str = "admin-user-001"
MERCHANT_UID: str = "merchant-user-001"
REGULAR_UID: str = "regular-user-001"

ADMIN_EMAIL: str = "admin@eventnft.app"
MERCHANT_EMAIL: str = "merchant@eventnft.app"
REGULAR_EMAIL: str = "user@eventnft.app"

# ---------------------------------------------------------------------------
# Structured seed data
# ---------------------------------------------------------------------------

SEED_USERS: tuple[SeedUser, ...] = (
    SeedUser(
        uid=ADMIN_UID,
        email=ADMIN_EMAIL,
        password="Admin123!",
        role=Role.ADMIN,
        display_name="Admin User",
        profile=MappingProxyType({
            "id": ADMIN_UID,
            "email": ADMIN_EMAIL,
            "displayName": "Admin User",
            "role": Role.ADMIN.value,
            "walletAddress": "ADMIN_WALLET_ADDRESS",
            "isVerified": True,
        }),
    ),
    SeedUser(
        uid=MERCHANT_UID,
        email=MERCHANT_EMAIL,
        password="Merchant123!",
        role=Role.MERCHANT,
        display_name="Event Organizer",
        profile=MappingProxyType({
            "id": MERCHANT_UID,
            "businessName": "Music Festival Co.",
            "email": MERCHANT_EMAIL,
            "category": "Entertainment",
            "description": "Leading music festival organizer",
            "walletAddress": "MERCHANT_WALLET_ADDRESS",
            "isApproved": True,
            "uid": MERCHANT_UID,
            "role": Role.MERCHANT.value,
        }),
    ),
    SeedUser(
        uid=REGULAR_UID,
        email=REGULAR_EMAIL,
        password="User123!",
        role=Role.USER,
        display_name="Regular User",
        profile=MappingProxyType({
            "id": REGULAR_UID,
            "email": REGULAR_EMAIL,
            "displayName": "Regular User",
            "role": Role.USER.value,
            "walletAddress": "USER_WALLET_ADDRESS",
            "isVerified": True,
        }),
    ),
)

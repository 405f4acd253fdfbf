"""Console report of the seeded test credentials.

Plaintext passwords are printed on purpose: these are fixture accounts for
manual testing and never exist outside development projects.
"""
from __future__ import annotations

from typing import Iterable

from src.eventnft_seed.config import Settings
from src.eventnft_seed.fixtures import SEED_USERS, Role, SeedUser

_ROLE_HEADINGS: dict[Role, str] = {
    Role.ADMIN: "🔴 ADMIN ACCESS:",
    Role.MERCHANT: "🔵 MERCHANT ACCESS:",
    Role.USER: "🟢 USER ACCESS:",
}

_NOTES: tuple[str, ...] = (
    "- All passwords are now securely hashed using bcrypt",
    "- JWT tokens are used for session management",
    "- HTTP-only cookies provide secure authentication",
    "- Use these credentials to test the new authentication system",
)


def format_credentials(settings: Settings, users: Iterable[SeedUser] = SEED_USERS) -> str:
    """Render the credentials block, one section per account in ``users`` order."""
    lines = ["", "🔐 TEST CREDENTIALS", "==================", ""]
    for user in users:
        lines.append(_ROLE_HEADINGS[user.role])
        lines.append(f"   Email: {user.email}")
        lines.append(f"   Password: {user.password}")
        if user.role is Role.ADMIN:
            lines.append(f"   Admin Key: {settings.admin_master_key}")
        lines.append(f"   URL: {settings.app_base_url}{user.login_path()}")
        lines.append("")

    lines.append("📝 NOTES:")
    lines.extend(_NOTES)
    return "\n".join(lines)


def format_next_steps() -> str:
    return "\n".join([
        "",
        "📋 Next steps:",
        "1. Start your Next.js development server: npm run dev",
        "2. Navigate to the authentication pages using the URLs above",
        "3. Test login with the provided credentials",
        "4. Verify that users can access their respective dashboards",
    ])

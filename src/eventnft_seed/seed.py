"""Async creation of the EventNFT test accounts in Firestore.

Idempotent: an account whose email already exists in ``users`` is skipped,
never overwritten, so running the seeder twice leaves one document per account.

Usage:
    # Standalone:
    python -m src.eventnft_seed.seed --env-file .env

    # Programmatic:
    from src.eventnft_seed.seed import seed_users
    await seed_users(store)
"""
from __future__ import annotations

import argparse
import asyncio
import enum
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Iterable

import bcrypt

from src.eventnft_seed.config import DEFAULT_ENV_FILE, Settings, apply_env, load_env_file
from src.eventnft_seed.firestore import BootstrapError, DocumentStore, FirestoreStore, connect
from src.eventnft_seed.fixtures import (
    MERCHANTS_COLLECTION,
    SEED_USERS,
    USERS_COLLECTION,
    Role,
    SeedUser,
)
from src.eventnft_seed.report import format_credentials, format_next_steps

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS: int = 12
MIN_BCRYPT_ROUNDS: int = 4
MAX_BCRYPT_ROUNDS: int = 31


class SeedOutcome(str, enum.Enum):
    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Document construction
# ---------------------------------------------------------------------------


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """bcrypt-hash ``password`` with a fresh salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def build_document(
    user: SeedUser,
    password_hash: str,
    created_at: datetime | None = None,
) -> dict[str, Any]:
    """Persisted form of ``user``: profile fields, creation time and password hash."""
    document = dict(user.profile)
    document["createdAt"] = created_at or datetime.now(timezone.utc)
    document["password"] = password_hash
    return document


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------


async def seed_user(
    store: DocumentStore,
    user: SeedUser,
    *,
    rounds: int = BCRYPT_ROUNDS,
) -> SeedOutcome:
    """Create ``user`` unless an account with the same email already exists.

    Merchants are written to both ``users`` and ``merchants`` under the same key.
    Store errors propagate to the caller.
    """
    existing = await store.find_by_field(USERS_COLLECTION, "email", user.email)
    if existing:
        logger.info("⚠️  User already exists: %s", user.email)
        return SeedOutcome.EXISTS

    password_hash = await asyncio.to_thread(hash_password, user.password, rounds)
    document = build_document(user, password_hash)

    await store.set_document(USERS_COLLECTION, user.uid, document)
    if user.role is Role.MERCHANT:
        await store.set_document(MERCHANTS_COLLECTION, user.uid, document)

    logger.info("✅ Created %s user: %s (%s)", user.role.value, user.email, user.display_name)
    return SeedOutcome.CREATED


async def seed_users(
    store: DocumentStore,
    users: Iterable[SeedUser] = SEED_USERS,
    *,
    rounds: int = BCRYPT_ROUNDS,
) -> dict[str, SeedOutcome]:
    """Seed every account in order; one failing account does not stop the rest.

    Returns:
        Outcome per email, in input order.
    """
    logger.info("👥 Creating test users...")
    results: dict[str, SeedOutcome] = {}

    for user in users:
        try:
            results[user.email] = await seed_user(store, user, rounds=rounds)
        except Exception as exc:
            logger.error("❌ Failed to create user %s: %s", user.email, exc)
            results[user.email] = SeedOutcome.FAILED

    counts = {outcome.value: 0 for outcome in SeedOutcome}
    for outcome in results.values():
        counts[outcome.value] += 1
    logger.info("Seed complete: %s", counts)
    return results


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _bcrypt_rounds(value: str) -> int:
    try:
        rounds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid bcrypt work factor: {value!r}") from None
    if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
        raise argparse.ArgumentTypeError(
            f"bcrypt work factor must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}, got {rounds}"
        )
    return rounds


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for standalone seed execution."""
    parser = argparse.ArgumentParser(
        description="Seed EventNFT test users into Firestore (idempotent)"
    )
    parser.add_argument(
        "--env-file",
        default=os.getenv("EVENTNFT_ENV_FILE", str(DEFAULT_ENV_FILE)),
        help="Path to the KEY=VALUE settings file. Missing is allowed.",
    )
    parser.add_argument(
        "--rounds",
        type=_bcrypt_rounds,
        default=os.getenv("EVENTNFT_BCRYPT_ROUNDS", str(BCRYPT_ROUNDS)),
        help=f"bcrypt work factor for password hashes ({MIN_BCRYPT_ROUNDS}-{MAX_BCRYPT_ROUNDS})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


async def _main(argv: list[str] | None = None) -> int:
    """Async main for CLI entry point. Returns the process exit status."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    print("👥 NFT Marketplace - Test Users Setup")
    print("=====================================\n")

    apply_env(load_env_file(args.env_file))
    settings = Settings.from_env()

    try:
        client = connect(settings)
    except BootstrapError as exc:
        logger.error("❌ Failed to initialize Firebase Admin: %s", exc)
        return 1
    logger.info("✅ Firebase Admin initialized successfully")

    try:
        await seed_users(FirestoreStore(client), rounds=args.rounds)
        print(format_credentials(settings))
        print("\n✅ Test users setup completed successfully!")
        print(format_next_steps())
    except Exception:
        logger.exception("❌ Error during setup")
        return 1

    return 0


def main(argv: list[str] | None = None) -> None:
    sys.exit(asyncio.run(_main(argv)))


if __name__ == "__main__":
    main()

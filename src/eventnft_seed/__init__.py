"""Test account seeding for the EventNFT marketplace.

Provides idempotent creation of the three manual-testing accounts:
- admin@eventnft.app (admin dashboard)
- merchant@eventnft.app (event organiser, mirrored into ``merchants``)
- user@eventnft.app (regular buyer)

Passwords are bcrypt-hashed before they reach Firestore; existing accounts
(matched by email) are never touched.

Usage:
    # From Python:
    from src.eventnft_seed.seed import seed_users
    await seed_users(store)

    # From shell:
    python -m src.eventnft_seed.seed --env-file .env
"""

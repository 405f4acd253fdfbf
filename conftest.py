"""Root conftest: marker registration and emulator gating.

Unit tests run against an in-memory document store. Tests marked
``integration`` talk to a real Firestore emulator and are skipped unless
``FIRESTORE_EMULATOR_HOST`` points at one (``gcloud emulators firestore start``).
"""
from __future__ import annotations

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

EMULATOR_PROJECT = os.getenv("EVENTNFT_EMULATOR_PROJECT", "eventnft-test")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers to suppress PytestUnknownMarkWarning."""
    config.addinivalue_line("markers", "unit: Pure tests against the in-memory store")
    config.addinivalue_line("markers", "integration: Requires a running Firestore emulator")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip emulator tests unless FIRESTORE_EMULATOR_HOST is set."""
    skip_no_emulator = pytest.mark.skip(
        reason="Firestore emulator not available, set FIRESTORE_EMULATOR_HOST"
    )
    if os.getenv("FIRESTORE_EMULATOR_HOST"):
        return

    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_no_emulator)


# ---------------------------------------------------------------------------
# Emulator client fixture
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def emulator_client() -> AsyncGenerator[object, None]:
    """Async Firestore client bound to the emulator, with seed collections emptied.

    The emulator accepts anonymous credentials, so no service account is needed.
    """
    from google.cloud.firestore import AsyncClient

    from src.eventnft_seed.fixtures import MERCHANTS_COLLECTION, USERS_COLLECTION

    client = AsyncClient(project=EMULATOR_PROJECT)

    async def _purge() -> None:
        for name in (USERS_COLLECTION, MERCHANTS_COLLECTION):
            async for snapshot in client.collection(name).stream():
                await snapshot.reference.delete()

    await _purge()
    yield client
    await _purge()

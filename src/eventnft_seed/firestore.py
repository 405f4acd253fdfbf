"""Firestore access for the seeder.

``connect()`` bootstraps (or reuses) the Firebase Admin app from service
account settings. ``FirestoreStore`` narrows the async client down to the two
operations seeding needs, so tests can swap in an in-memory store.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

import firebase_admin
from firebase_admin import credentials, firestore_async
from firebase_admin.exceptions import FirebaseError
from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from src.eventnft_seed.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_APP: str = "[DEFAULT]"
TOKEN_URI: str = "https://oauth2.googleapis.com/token"


class BootstrapError(RuntimeError):
    """Firestore could not be reached with the configured service account."""


class DocumentStore(Protocol):
    """Minimal document-store surface used by the seeder."""

    async def find_by_field(
        self, collection: str, field: str, value: Any
    ) -> list[dict[str, Any]]:
        ...

    async def set_document(
        self, collection: str, key: str, document: Mapping[str, Any]
    ) -> None:
        ...


# ---------------------------------------------------------------------------
# Bootstrap
# ---------------------------------------------------------------------------


def _service_account_info(settings: Settings) -> dict[str, str]:
    missing = settings.missing_credentials()
    if missing:
        raise BootstrapError(f"Missing Firebase configuration: {', '.join(missing)}")
    return {
        "type": "service_account",
        "project_id": settings.project_id or "",
        "client_email": settings.client_email or "",
        "private_key": settings.private_key or "",
        "token_uri": TOKEN_URI,
    }


def connect(settings: Settings, app_name: str = DEFAULT_APP) -> AsyncClient:
    """Return an async Firestore client, initialising Firebase Admin once per process.

    Raises:
        BootstrapError: credentials are missing or malformed, or the app
            could not be initialised.
    """
    try:
        app = firebase_admin.get_app(app_name)
        logger.debug("Reusing Firebase app %r", app_name)
    except ValueError:
        app = None

    try:
        if app is None:
            cred = credentials.Certificate(_service_account_info(settings))
            app = firebase_admin.initialize_app(
                cred, {"projectId": settings.project_id}, name=app_name
            )
        return firestore_async.client(app=app)
    except (ValueError, FirebaseError) as exc:
        raise BootstrapError(str(exc)) from exc


# ---------------------------------------------------------------------------
# Store adapter
# ---------------------------------------------------------------------------


class FirestoreStore:
    """``DocumentStore`` backed by a Firestore ``AsyncClient``."""

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    async def find_by_field(
        self, collection: str, field: str, value: Any
    ) -> list[dict[str, Any]]:
        query = self._client.collection(collection).where(
            filter=FieldFilter(field, "==", value)
        )
        snapshots = await query.get()
        return [snapshot.to_dict() or {} for snapshot in snapshots]

    async def set_document(
        self, collection: str, key: str, document: Mapping[str, Any]
    ) -> None:
        await self._client.collection(collection).document(key).set(dict(document))

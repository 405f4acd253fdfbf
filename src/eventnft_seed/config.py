"""Environment configuration for the seeder.

Values come from a local ``.env`` file merged over the ambient process
environment. A missing file is not an error: CI and shells that export the
Firebase variables directly need no file at all.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, MutableMapping

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE: Path = Path(__file__).resolve().parents[2] / ".env"

DEFAULT_ADMIN_MASTER_KEY: str = "admin123"
DEFAULT_APP_URL: str = "http://localhost:3000"


def load_env_file(path: str | os.PathLike[str] = DEFAULT_ENV_FILE) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines from ``path``.

    Comment lines and lines without ``=`` are skipped; only the first ``=``
    separates key from value. Keys with an empty value are dropped.
    ``${VAR}`` references are kept literally. An unquoted value ends at a
    `` #`` comment; quote the value to keep a literal ``#``.

    Returns:
        Mapping of variable name to value, empty if the file does not exist.
    """
    env_path = Path(path)
    if not env_path.is_file():
        logger.warning("❌ .env file not found: %s", env_path)
        return {}

    values: dict[str, str] = {}
    for key, value in dotenv_values(env_path, interpolate=False).items():
        if value is None:
            continue
        value = value.strip()
        if value:
            values[key.strip()] = value

    logger.debug("Loaded %d variables from %s", len(values), env_path)
    return values


def apply_env(
    values: Mapping[str, str],
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Merge ``values`` into ``environ`` (``os.environ`` by default); last write wins."""
    target = os.environ if environ is None else environ
    target.update(values)


def unescape_private_key(raw: str) -> str:
    """Turn literal ``\\n`` sequences from single-line env values into newlines."""
    return raw.replace("\\n", "\n")


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one seeding run."""

    project_id: str | None
    client_email: str | None
    private_key: str | None
    admin_master_key: str = DEFAULT_ADMIN_MASTER_KEY
    app_base_url: str = DEFAULT_APP_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        private_key = env.get("FIREBASE_PRIVATE_KEY")
        return cls(
            project_id=env.get("FIREBASE_PROJECT_ID") or None,
            client_email=env.get("FIREBASE_CLIENT_EMAIL") or None,
            private_key=unescape_private_key(private_key) if private_key else None,
            admin_master_key=env.get("ADMIN_MASTER_KEY") or DEFAULT_ADMIN_MASTER_KEY,
            app_base_url=(env.get("EVENTNFT_APP_URL") or DEFAULT_APP_URL).rstrip("/"),
        )

    def missing_credentials(self) -> list[str]:
        """Names of the Firebase variables that are unset."""
        missing = []
        if not self.project_id:
            missing.append("FIREBASE_PROJECT_ID")
        if not self.client_email:
            missing.append("FIREBASE_CLIENT_EMAIL")
        if not self.private_key:
            missing.append("FIREBASE_PRIVATE_KEY")
        return missing

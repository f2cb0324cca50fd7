"""Environment-driven settings.

- DATABASE_URL: optional; when set, SQLAlchemy adapters replace the in-memory ones
- API_TOKENS: comma-separated ``token:role`` pairs for the bearer gate
- LOG_LEVEL: root log level (default INFO)
- SEED_CATALOG: load the demo catalog into the in-memory store (default true)
"""

from __future__ import annotations

import os


def database_url() -> str | None:
    return os.getenv("DATABASE_URL") or None


def require_database_url() -> str:
    url = database_url()

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def api_tokens() -> dict[str, str]:
    """
    Parse API_TOKENS into a token -> role mapping.

    Malformed entries (no colon, empty token or role) are skipped.
    """
    tokens: dict[str, str] = {}

    for entry in os.getenv("API_TOKENS", "").split(","):
        token, sep, role = entry.strip().partition(":")
        if sep and token.strip() and role.strip():
            tokens[token.strip()] = role.strip().lower()

    return tokens


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def seed_catalog() -> bool:
    return os.getenv("SEED_CATALOG", "true").strip().lower() not in {"0", "false", "no", "off"}

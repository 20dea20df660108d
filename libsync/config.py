"""Centralised settings for the libsync client.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Kitsu API
    # ------------------------------------------------------------------
    kitsu_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "KITSU_BASE_URL", "https://kitsu.io/api/edge"
        )
    )
    kitsu_access_token: str = field(
        default_factory=lambda: os.environ.get("KITSU_ACCESS_TOKEN", "")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------
    page_limit: int = field(
        default_factory=lambda: int(os.environ.get("PAGE_LIMIT", "20"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LIBSYNC_LOG_LEVEL", "WARNING")
    )


# Module-level singleton, import this everywhere:
#   from libsync.config import settings
settings = Settings()

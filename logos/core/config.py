"""
Runtime configuration.

Settings default to the public upstream services and can be overridden from the
hosting environment.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel

from logos.core.constants import MORPHOLOGY_ENDPOINT, USER_AGENT, WIKTIONARY_BASE_URL


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("true", "1", "yes")


class Settings(BaseModel):
    """Configuration for upstream services and the web server."""

    morphology_endpoint: str = MORPHOLOGY_ENDPOINT
    wiktionary_base_url: str = WIKTIONARY_BASE_URL
    user_agent: str = USER_AGENT
    # None leaves the HTTP library's default (no timeout) in place
    request_timeout: Optional[float] = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from ``LOGOS_*`` environment variables."""
        timeout = os.environ.get("LOGOS_REQUEST_TIMEOUT")
        return cls(
            morphology_endpoint=os.environ.get("LOGOS_MORPHOLOGY_ENDPOINT", MORPHOLOGY_ENDPOINT),
            wiktionary_base_url=os.environ.get("LOGOS_WIKTIONARY_BASE_URL", WIKTIONARY_BASE_URL),
            user_agent=os.environ.get("LOGOS_USER_AGENT", USER_AGENT),
            request_timeout=float(timeout) if timeout else None,
            debug=_env_flag("LOGOS_DEBUG"),
        )

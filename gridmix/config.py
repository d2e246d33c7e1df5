"""
Runtime configuration for talking to the ENTSO-E transparency platform.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://web-api.tp.entsoe.eu"
GENERATION_ENDPOINT = "/api"
REQUEST_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class ApiConfig:
    """Settings resolved from the environment (and a local .env file, if any)."""

    base_url: str = DEFAULT_BASE_URL
    token: Optional[str] = None
    use_mock_data: bool = False
    timeout: float = REQUEST_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> ApiConfig:
        load_dotenv()
        return cls(
            base_url=os.getenv("ENTSOE_API_BASE_URL") or DEFAULT_BASE_URL,
            token=os.getenv("ENTSOE_API_TOKEN"),
            use_mock_data=os.getenv("USE_MOCK_DATA", "").strip().lower() == "true",
        )

    @property
    def generation_url(self) -> str:
        return self.base_url.rstrip("/") + GENERATION_ENDPOINT

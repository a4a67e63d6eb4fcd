# This file defines runtime configuration for the character dashboard.
# API location, request timeout and randomizer bounds are read from environment variables with local defaults.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://rickandmortyapi.com/api"


@dataclass(frozen=True)
class DashboardConfig:
    api_base_url: str
    request_timeout_seconds: int
    max_character_id: int
    page_title: str

    def __post_init__(self) -> None:
        if self.request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be greater than 0.")
        if self.max_character_id < 1:
            raise ValueError("max_character_id must be >= 1.")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    api_base_url = os.getenv("RNM_API_BASE_URL") or DEFAULT_API_BASE_URL

    return DashboardConfig(
        api_base_url=api_base_url.rstrip("/"),
        request_timeout_seconds=_env_int("RNM_REQUEST_TIMEOUT_SECONDS", 8),
        max_character_id=_env_int("RNM_MAX_CHARACTER_ID", 826),
        page_title=os.getenv("PROJECT_NAME") or "Rick and Morty Explorer",
    )

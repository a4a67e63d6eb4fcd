# This file implements the HTTP client the dashboard uses to reach the Rick and Morty API.
# Responses are handed to the contract parsers, so callers only ever see typed records.
# Transport and server failures become ApiUnavailableError; rejected requests become ApiRequestError.
# API error bodies such as {"error": "Character not found"} are returned as error-bearing records.

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import requests

from src.contracts.parsing import (
    parse_character,
    parse_character_list,
    parse_characters_page,
    parse_episode,
    parse_location,
    parse_rnm_response,
)
from src.contracts.query import ApiQuery
from src.contracts.schemas import (
    Character,
    CharactersAPIResponse,
    Episode,
    Location,
    ResponseKind,
    RnmApiResponse,
)

LOGGER = logging.getLogger("dashboard")


class ApiUnavailableError(RuntimeError):
    """Raised when the API cannot be reached or responds with server errors."""


class ApiRequestError(ValueError):
    """Raised when the API rejects a request without an error body we can represent."""

    def __init__(self, message: str, *, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message)


class RnmApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get_character(self, character_id: int) -> Character:
        return parse_character(self._request_json(f"/character/{character_id}"))

    def get_characters(self, query: ApiQuery | None = None) -> CharactersAPIResponse:
        params = query.as_params() if query is not None else None
        return parse_characters_page(self._request_json("/character", params=params))

    def get_characters_by_ids(self, character_ids: Sequence[int]) -> tuple[Character, ...]:
        if not character_ids:
            return ()
        joined = ",".join(str(character_id) for character_id in character_ids)
        return parse_character_list(self._request_json(f"/character/{joined}"))

    def get_episode(self, episode_id: int) -> Episode:
        return parse_episode(self._request_json(f"/episode/{episode_id}"))

    def get_location(self, location_id: int) -> Location:
        return parse_location(self._request_json(f"/location/{location_id}"))

    def resolve(self, url: str, kind: ResponseKind | str) -> RnmApiResponse:
        """Fetch the record a reference URL points at."""

        return parse_rnm_response(self._request_json(url), kind=kind)

    def _build_url(self, path_or_url: str) -> str:
        if path_or_url.startswith(("http://", "https://")):
            return path_or_url
        return f"{self.base_url}{path_or_url}"

    def _request_json(self, path_or_url: str, params: dict[str, str] | None = None) -> Any:
        url = self._build_url(path_or_url)
        LOGGER.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise ApiUnavailableError(f"API request failed for {url}: {exc}") from exc

        if response.status_code >= 500:
            raise ApiUnavailableError(
                f"API request failed with status {response.status_code} for {url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            if response.status_code >= 400:
                raise ApiRequestError(
                    f"API request was rejected with status {response.status_code} for {url}",
                    status_code=response.status_code,
                ) from exc
            raise ApiUnavailableError(f"API did not return valid JSON for {url}") from exc

        if response.status_code >= 400:
            if isinstance(payload, dict) and payload.get("error"):
                LOGGER.info(
                    "API returned error record status=%s url=%s error=%s",
                    response.status_code,
                    url,
                    payload["error"],
                )
                return payload
            raise ApiRequestError(
                f"API request was rejected with status {response.status_code} for {url}",
                status_code=response.status_code,
            )
        return payload

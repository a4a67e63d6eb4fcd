# This file holds the action handlers that run a request and record its outcome in UI state.
# Outcomes map onto state as data: record errors and rejected requests land in FeatureState.error,
# contract failures also set serverStatus to warning, and unreachable servers set it to offline.
# Handlers never raise for these failure classes, so pages can render whatever state results.

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Any, TypeVar

from src.contracts.errors import ContractValidationError
from src.contracts.query import ApiQuery
from src.contracts.references import ids_from_urls
from src.contracts.schemas import Character, CharactersAPIResponse, Episode
from src.dashboard.api_client import ApiRequestError, ApiUnavailableError, RnmApiClient
from src.state.app_state import ApplicationState, ServerStatus
from src.state.feature_state import FeatureState

LOGGER = logging.getLogger("dashboard")

ResultT = TypeVar("ResultT")


def _character_ids(episode: Episode) -> list[int]:
    try:
        return ids_from_urls(episode.characters)
    except ValueError as exc:
        raise ContractValidationError(
            f"Invalid episode payload: {exc}", kind=episode.kind.value
        ) from exc


def _record_error(result: Any) -> str:
    if isinstance(result, tuple):
        for item in result:
            message = _record_error(item)
            if message:
                return message
        return ""
    return str(getattr(result, "error", None) or "")


def run_request(
    *,
    app_state: ApplicationState,
    feature_state: FeatureState[ResultT],
    fetch: Callable[[], ResultT],
    label: str,
) -> ResultT | None:
    """Run `fetch` and store its outcome on the given state slices."""

    app_state.set_loading_global(True)
    feature_state.request_started()
    try:
        result = fetch()
    except ApiUnavailableError as exc:
        LOGGER.warning("API unavailable while loading %s: %s", label, exc)
        app_state.set_server_status(ServerStatus.OFFLINE)
        feature_state.request_failed(str(exc))
        return None
    except ContractValidationError as exc:
        LOGGER.warning("Invalid payload while loading %s: %s", label, exc)
        app_state.set_server_status(ServerStatus.WARNING)
        feature_state.request_failed(str(exc))
        return None
    except ApiRequestError as exc:
        LOGGER.info("Request for %s rejected: %s", label, exc)
        app_state.set_server_status(ServerStatus.OK)
        feature_state.request_failed(str(exc))
        return None
    finally:
        app_state.set_loading_global(False)

    app_state.set_server_status(ServerStatus.OK)
    error = _record_error(result)
    if error:
        feature_state.request_failed(error)
        return None
    feature_state.request_succeeded(result)
    return result


def load_character(
    *,
    client: RnmApiClient,
    app_state: ApplicationState,
    feature_state: FeatureState[Character],
    character_id: int,
) -> Character | None:
    return run_request(
        app_state=app_state,
        feature_state=feature_state,
        fetch=lambda: client.get_character(character_id),
        label=f"character {character_id}",
    )


def load_random_character(
    *,
    client: RnmApiClient,
    app_state: ApplicationState,
    feature_state: FeatureState[Character],
    max_character_id: int,
    rng: random.Random | None = None,
) -> Character | None:
    character_id = (rng or random.Random()).randint(1, max_character_id)
    app_state.bump_randomizer_key()
    return load_character(
        client=client,
        app_state=app_state,
        feature_state=feature_state,
        character_id=character_id,
    )


def search_characters(
    *,
    client: RnmApiClient,
    app_state: ApplicationState,
    feature_state: FeatureState[CharactersAPIResponse],
    query: ApiQuery,
) -> CharactersAPIResponse | None:
    return run_request(
        app_state=app_state,
        feature_state=feature_state,
        fetch=lambda: client.get_characters(query),
        label=f"characters {query.to_query_string() or '(all)'}",
    )


def load_episode_characters(
    *,
    client: RnmApiClient,
    app_state: ApplicationState,
    feature_state: FeatureState[tuple[Character, ...]],
    episode: Episode,
) -> tuple[Character, ...] | None:
    """Resolve the character references of an episode in one request."""

    if not episode.is_valid:
        feature_state.request_failed(episode.error or "")
        return None
    return run_request(
        app_state=app_state,
        feature_state=feature_state,
        fetch=lambda: client.get_characters_by_ids(_character_ids(episode)),
        label=f"characters of episode {episode.episode or episode.id}",
    )

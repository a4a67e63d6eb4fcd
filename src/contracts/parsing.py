# This file is the validation boundary between raw API JSON and the typed contract models.
# Callers pass decoded payloads or raw JSON text and get back one tagged variant of the response union.
# Every failure is reported as ContractValidationError so the UI layer has a single type to catch.

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.contracts.errors import ContractValidationError
from src.contracts.schemas import (
    Character,
    CharactersAPIResponse,
    Episode,
    Location,
    ResponseKind,
    RnmApiResponse,
)

LOGGER = logging.getLogger("contracts")

_MODELS: dict[ResponseKind, type[RnmApiResponse]] = {
    ResponseKind.CHARACTERS: CharactersAPIResponse,
    ResponseKind.CHARACTER: Character,
    ResponseKind.EPISODE: Episode,
    ResponseKind.LOCATION: Location,
}

_EPISODE_KEYS = frozenset({"air_date", "characters"})
_LOCATION_KEYS = frozenset({"dimension", "residents"})
_CHARACTER_KEYS = frozenset({"status", "species", "gender", "origin", "image"})

_CHARACTER_LIST = TypeAdapter(list[Character])


def _decode(raw: Any) -> Any:
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ContractValidationError(f"Payload is not valid JSON: {exc.msg}") from exc
    return raw


def _resolve_kind(kind: ResponseKind | str | None) -> ResponseKind | None:
    if kind is None:
        return None
    try:
        return ResponseKind(kind)
    except ValueError as exc:
        supported = ", ".join(item.value for item in ResponseKind)
        raise ContractValidationError(
            f"Unknown response kind {kind!r}. Supported kinds: {supported}"
        ) from exc


def detect_response_kind(payload: Mapping[str, Any]) -> ResponseKind | None:
    """Classify a decoded payload by the keys it carries."""

    keys = set(payload)
    if {"info", "results"} <= keys:
        return ResponseKind.CHARACTERS
    # `episode` appears on both characters and episodes, so it never decides the shape.
    if keys & _EPISODE_KEYS:
        return ResponseKind.EPISODE
    if keys & _LOCATION_KEYS:
        return ResponseKind.LOCATION
    if keys & _CHARACTER_KEYS:
        return ResponseKind.CHARACTER
    return None


def parse_rnm_response(raw: Any, *, kind: ResponseKind | str | None = None) -> RnmApiResponse:
    """Parse a payload into a characters page, character, episode or location.

    `kind` skips shape detection. It is required for error-only bodies such
    as `{"error": "Character not found"}`, which carry no distinguishing keys.
    """

    explicit = _resolve_kind(kind)
    payload = _decode(raw)
    if not isinstance(payload, Mapping):
        raise ContractValidationError(
            f"Expected a JSON object, got {type(payload).__name__}",
            kind=explicit.value if explicit else None,
        )

    resolved = explicit or detect_response_kind(payload)
    if resolved is None:
        raise ContractValidationError("Payload does not match any known response shape")

    model = _MODELS[resolved]
    try:
        parsed = model.model_validate(payload)
    except ValidationError as exc:
        raise ContractValidationError.from_validation_error(exc, kind=resolved.value) from exc

    LOGGER.debug("parsed %s payload valid=%s", resolved.value, parsed.is_valid)
    return parsed


def parse_character(raw: Any) -> Character:
    return parse_rnm_response(raw, kind=ResponseKind.CHARACTER)  # type: ignore[return-value]


def parse_episode(raw: Any) -> Episode:
    return parse_rnm_response(raw, kind=ResponseKind.EPISODE)  # type: ignore[return-value]


def parse_location(raw: Any) -> Location:
    return parse_rnm_response(raw, kind=ResponseKind.LOCATION)  # type: ignore[return-value]


def parse_characters_page(raw: Any) -> CharactersAPIResponse:
    return parse_rnm_response(raw, kind=ResponseKind.CHARACTERS)  # type: ignore[return-value]


def parse_character_list(raw: Any) -> tuple[Character, ...]:
    """Parse the multi-id endpoint, which answers with an array, or an object for a single id."""

    payload = _decode(raw)
    if isinstance(payload, Mapping):
        return (parse_character(payload),)
    try:
        return tuple(_CHARACTER_LIST.validate_python(payload))
    except ValidationError as exc:
        raise ContractValidationError.from_validation_error(
            exc, kind=ResponseKind.CHARACTER.value
        ) from exc

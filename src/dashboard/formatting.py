# Small formatting helpers for character and episode cards.
# Records carrying an `error` render as unknown; their other fields are not trusted.

from __future__ import annotations

from src.contracts.references import resource_id_from_url
from src.contracts.schemas import Character, Episode

UNKNOWN = "unknown"


def format_status(character: Character) -> str:
    if not character.is_valid:
        return UNKNOWN
    status = character.status or UNKNOWN
    if character.species:
        return f"{status} - {character.species}"
    return status


def format_episode_code(episode: Episode) -> str:
    if not episode.is_valid:
        return "-"
    if episode.season is None or episode.episode_number is None:
        return episode.episode or "-"
    return f"Season {episode.season}, Episode {episode.episode_number}"


def format_origin(character: Character) -> str:
    if not character.is_valid or character.origin is None or not character.origin.name:
        return UNKNOWN
    return character.origin.name


def format_first_appearance(character: Character) -> str | None:
    if not character.is_valid or not character.episode:
        return None
    try:
        episode_id = resource_id_from_url(character.episode[0])
    except ValueError:
        return None
    return f"First seen in episode #{episode_id}"

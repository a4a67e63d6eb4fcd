# Wire contracts for the public Rick and Morty REST API.
# The schemas mirror the JSON field names verbatim and the parsing module is the only validation boundary.

from src.contracts.errors import ContractValidationError
from src.contracts.parsing import (
    detect_response_kind,
    parse_character,
    parse_character_list,
    parse_characters_page,
    parse_episode,
    parse_location,
    parse_rnm_response,
)
from src.contracts.query import ApiQuery, CharacterFilters
from src.contracts.schemas import (
    ApiEntryBase,
    ApiInfo,
    Character,
    CharactersAPIResponse,
    Episode,
    Location,
    Origin,
    ResponseKind,
    RnmApiResponse,
)

__all__ = [
    "ApiEntryBase",
    "ApiInfo",
    "ApiQuery",
    "Character",
    "CharacterFilters",
    "CharactersAPIResponse",
    "ContractValidationError",
    "Episode",
    "Location",
    "Origin",
    "ResponseKind",
    "RnmApiResponse",
    "detect_response_kind",
    "parse_character",
    "parse_character_list",
    "parse_characters_page",
    "parse_episode",
    "parse_location",
    "parse_rnm_response",
]

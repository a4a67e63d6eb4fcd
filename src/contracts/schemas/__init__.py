from src.contracts.schemas.common import ApiEntryBase, ApiInfo, ContractModel, Origin, ResponseKind
from src.contracts.schemas.entities import Character, Episode, Location
from src.contracts.schemas.envelopes import CharactersAPIResponse, RnmApiResponse

__all__ = [
    "ApiEntryBase",
    "ApiInfo",
    "Character",
    "CharactersAPIResponse",
    "ContractModel",
    "Episode",
    "Location",
    "Origin",
    "ResponseKind",
    "RnmApiResponse",
]

# This file defines the paginated characters envelope and the response union.

from __future__ import annotations

from typing import ClassVar, Self, Union

from pydantic import StrictStr, model_validator

from src.contracts.schemas.common import ApiInfo, ContractModel, ResponseKind
from src.contracts.schemas.entities import Character, Episode, Location


class CharactersAPIResponse(ContractModel):
    """One page of the `/character` listing.

    `info` carries the totals and the next/prev page links, `results` the
    characters on this page. Invalid requests come back with only `error`.
    """

    kind: ClassVar[ResponseKind] = ResponseKind.CHARACTERS

    info: ApiInfo | None = None
    results: tuple[Character, ...] = ()
    error: StrictStr | None = None

    @model_validator(mode="after")
    def check_envelope(self) -> Self:
        if self.error:
            return self
        if self.info is None or "results" not in self.model_fields_set:
            raise ValueError("envelope requires both info and results")
        if len(self.results) > self.info.count:
            raise ValueError(
                f"results holds {len(self.results)} entries but info.count is {self.info.count}"
            )
        return self

    @property
    def is_valid(self) -> bool:
        return not self.error

    @property
    def valid_results(self) -> tuple[Character, ...]:
        """Results without a record-level `error`; the others carry no usable fields."""

        return tuple(character for character in self.results if character.is_valid)

    @property
    def has_next(self) -> bool:
        return bool(self.info and self.info.next)

    @property
    def has_prev(self) -> bool:
        return bool(self.info and self.info.prev)


RnmApiResponse = Union[CharactersAPIResponse, Character, Episode, Location]

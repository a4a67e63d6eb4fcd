# This file defines the three record types served by the API: characters, episodes and locations.
# Cross-entity links are URL strings, never embedded objects, and keep their upstream order.

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import Field, StrictStr

from src.contracts.schemas.common import ApiEntryBase, Origin, ResponseKind

EPISODE_CODE_PATTERN = r"^S(\d{2})E(\d{2})$"
_EPISODE_CODE_RE = re.compile(EPISODE_CODE_PATTERN)


class Character(ApiEntryBase):
    kind: ClassVar[ResponseKind] = ResponseKind.CHARACTER
    required_fields: ClassVar[tuple[str, ...]] = ApiEntryBase.required_fields + (
        "origin",
        "episode",
    )

    status: StrictStr = ""
    species: StrictStr = ""
    type: StrictStr = ""
    gender: StrictStr = ""
    origin: Origin | None = None
    image: StrictStr = ""
    # Episode URLs, in broadcast order.
    episode: tuple[StrictStr, ...] = ()


class Episode(ApiEntryBase):
    kind: ClassVar[ResponseKind] = ResponseKind.EPISODE
    required_fields: ClassVar[tuple[str, ...]] = ApiEntryBase.required_fields + (
        "air_date",
        "episode",
        "characters",
    )

    air_date: StrictStr = ""
    episode: StrictStr = Field(default="", pattern=EPISODE_CODE_PATTERN)
    characters: tuple[StrictStr, ...] = ()

    @property
    def season(self) -> int | None:
        match = _EPISODE_CODE_RE.match(self.episode)
        return int(match.group(1)) if match else None

    @property
    def episode_number(self) -> int | None:
        match = _EPISODE_CODE_RE.match(self.episode)
        return int(match.group(2)) if match else None


class Location(ApiEntryBase):
    kind: ClassVar[ResponseKind] = ResponseKind.LOCATION
    required_fields: ClassVar[tuple[str, ...]] = ApiEntryBase.required_fields + (
        "dimension",
        "residents",
    )

    type: StrictStr = ""
    dimension: StrictStr = ""
    residents: tuple[StrictStr, ...] = ()

# This file models query-string parameters sent to the listing endpoints.
# ApiQuery is an unordered string-to-string mapping; CharacterFilters captures the sidebar inputs that feed it.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, get_args
from urllib.parse import urlencode

from pydantic import RootModel, field_validator

CharacterStatus = Literal["alive", "dead", "unknown"]
CharacterGender = Literal["female", "male", "genderless", "unknown"]


class ApiQuery(RootModel[dict[str, str]]):
    """Query parameters keyed by name. Keys are unique and order carries no meaning."""

    root: dict[str, str]

    @field_validator("root")
    @classmethod
    def validate_keys(cls, value: dict[str, str]) -> dict[str, str]:
        for key in value:
            if not key.strip():
                raise ValueError("query parameter names must be non-empty")
        return value

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, object] | None = None, **kwargs: object) -> ApiQuery:
        """Build a query from UI inputs, dropping blank and unset values."""

        merged: dict[str, object] = {**(inputs or {}), **kwargs}
        params: dict[str, str] = {}
        for key, value in merged.items():
            if value is None:
                continue
            text = str(value).lower() if isinstance(value, bool) else str(value).strip()
            if text:
                params[key] = text
        return cls(params)

    def as_params(self) -> dict[str, str]:
        return dict(self.root)

    def to_query_string(self) -> str:
        return urlencode(sorted(self.root.items()))

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __getitem__(self, key: str) -> str:
        return self.root[key]


@dataclass(frozen=True)
class CharacterFilters:
    name: str | None = None
    status: str | None = None
    species: str | None = None
    type: str | None = None
    gender: str | None = None
    page: int | None = None

    def __post_init__(self) -> None:
        if self.status and self.status.lower() not in get_args(CharacterStatus):
            raise ValueError(f"Unsupported status filter: {self.status!r}")
        if self.gender and self.gender.lower() not in get_args(CharacterGender):
            raise ValueError(f"Unsupported gender filter: {self.gender!r}")
        if self.page is not None and self.page < 1:
            raise ValueError("page must be >= 1")

    def to_query(self) -> ApiQuery:
        return ApiQuery.from_inputs(
            name=self.name,
            status=self.status.lower() if self.status else None,
            species=self.species,
            type=self.type,
            gender=self.gender.lower() if self.gender else None,
            page=self.page,
        )

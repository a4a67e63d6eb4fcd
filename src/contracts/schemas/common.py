# This file defines the shared pieces of every Rick and Morty API record.
# Field names follow the upstream JSON exactly so payloads round-trip without renaming.
# Entries carry an optional `error` string; when it is set the remaining fields are unreliable.

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator


class ResponseKind(str, Enum):
    """Tag for each variant of the API response union."""

    CHARACTERS = "characters"
    CHARACTER = "character"
    EPISODE = "episode"
    LOCATION = "location"


class ContractModel(BaseModel):
    """Immutable base for wire shapes."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to JSON-ready data, keeping only the fields present on input."""

        return self.model_dump(mode="json", exclude_unset=True)


class Origin(ContractModel):
    """Weak reference to a Location, resolved by fetching `url`."""

    name: StrictStr
    url: StrictStr


class ApiInfo(ContractModel):
    count: StrictInt = Field(ge=0)
    pages: StrictInt = Field(ge=0)
    next: StrictStr | None = None
    prev: StrictStr | None = None


class ApiEntryBase(ContractModel):
    """Fields common to every database entry returned by the API.

    `id` is unique within one entity type only. `url` is the canonical
    self-link and doubles as the reference other entities hold.
    """

    kind: ClassVar[ResponseKind]
    required_fields: ClassVar[tuple[str, ...]] = ("id", "name", "url", "created")

    # Scalars are strict: "1" or true for `id` is a mistyped payload, not an id.
    id: StrictInt = 0
    name: StrictStr = ""
    url: StrictStr = ""
    created: StrictStr = ""
    error: StrictStr | None = None

    @model_validator(mode="after")
    def check_required_fields(self) -> Self:
        if self.error:
            return self
        missing = [
            name
            for name in self.required_fields
            if name not in self.model_fields_set or getattr(self, name) is None
        ]
        if missing:
            raise ValueError(f"missing required fields: {', '.join(missing)}")
        return self

    @property
    def is_valid(self) -> bool:
        return not self.error

# This file defines the process-wide state shared by every dashboard view.
# Attribute names are snake_case; the camelCase aliases match the shape the views serialize.
# Assignments are validated, so serverStatus can never hold a value outside the ServerStatus enum.

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

LOGGER = logging.getLogger("state")


class ServerStatus(str, Enum):
    """Connectivity with the upstream API as last observed."""

    OK = "OK"
    WARNING = "warning"
    OFFLINE = "offline"


class ApplicationState(BaseModel):
    """Global UI state, created once at startup with defaults."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    # Changed to force re-evaluation of a view whose inputs are otherwise identical.
    randomizer_key: int = Field(default=0, alias="randomizerKey")
    is_loading_global: bool = Field(default=False, alias="isLoadingGlobal")
    server_status: ServerStatus = Field(default=ServerStatus.OK, alias="serverStatus")

    def bump_randomizer_key(self) -> int:
        self.randomizer_key += 1
        return self.randomizer_key

    def set_loading_global(self, is_loading: bool) -> None:
        self.is_loading_global = is_loading

    def set_server_status(self, status: ServerStatus | str) -> ServerStatus:
        previous = self.server_status
        self.server_status = status  # type: ignore[assignment]
        if self.server_status is not previous:
            LOGGER.info(
                "server status changed from=%s to=%s",
                previous.value,
                self.server_status.value,
            )
        return self.server_status

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

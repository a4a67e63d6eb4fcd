# This file defines the per-feature slice of UI state (for example the character view).
# Each slice tracks one request at a time: a loading flag, an error message and the last result.

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

LOGGER = logging.getLogger("state")

ResultT = TypeVar("ResultT")

DEFAULT_ERROR_MESSAGE = "The request failed."


class FeatureState(BaseModel, Generic[ResultT]):
    """Loading/error/result triple for one feature. An empty `error` means no error."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    is_loading: bool = Field(default=False, alias="isLoading")
    error: str = ""
    result: ResultT | None = None

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    def request_started(self) -> None:
        self.is_loading = True
        self.error = ""

    def request_succeeded(self, result: ResultT) -> None:
        self.result = result
        self.error = ""
        self.is_loading = False

    def request_failed(self, message: str) -> None:
        self.error = message.strip() or DEFAULT_ERROR_MESSAGE
        self.result = None
        self.is_loading = False
        LOGGER.debug("feature request failed: %s", self.error)

    def to_payload(self) -> dict[str, Any]:
        result = self.result
        if isinstance(result, BaseModel):
            serialized: Any = result.model_dump(mode="json", exclude_unset=True)
        elif isinstance(result, tuple):
            serialized = [
                item.model_dump(mode="json", exclude_unset=True)
                if isinstance(item, BaseModel)
                else item
                for item in result
            ]
        else:
            serialized = result
        return {"isLoading": self.is_loading, "error": self.error, "result": serialized}

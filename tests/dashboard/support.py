# Fake requests session used by the dashboard tests.

from __future__ import annotations

from typing import Any


class FakeResponse:
    def __init__(self, *, status_code: int, payload: Any = None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    def __init__(
        self, responses: list[FakeResponse] | None = None, raise_error: Exception | None = None
    ) -> None:
        self.responses = responses or []
        self.raise_error = raise_error
        self.calls: list[tuple[str, dict[str, Any] | None, int]] = []

    def get(self, url: str, params: dict[str, Any] | None, timeout: int) -> FakeResponse:
        self.calls.append((url, params, timeout))
        if self.raise_error is not None:
            raise self.raise_error
        return self.responses.pop(0)

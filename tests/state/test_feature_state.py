# This test file covers the loading/error/result lifecycle of a feature slice.

from __future__ import annotations

from typing import Any

from src.contracts.schemas import Character
from src.state.feature_state import DEFAULT_ERROR_MESSAGE, FeatureState


def test_request_lifecycle_success(rick_payload: dict[str, Any]) -> None:
    state: FeatureState[Character] = FeatureState[Character]()
    character = Character.model_validate(rick_payload)

    state.request_started()
    assert state.is_loading
    assert not state.has_error

    state.request_succeeded(character)
    assert not state.is_loading
    assert state.result == character
    assert state.to_payload()["result"]["name"] == "Rick Sanchez"


def test_request_failure_clears_result(rick_payload: dict[str, Any]) -> None:
    state: FeatureState[Character] = FeatureState[Character]()
    state.request_succeeded(Character.model_validate(rick_payload))

    state.request_started()
    state.request_failed("Character not found")

    assert state.error == "Character not found"
    assert state.result is None
    assert not state.is_loading


def test_blank_failure_message_still_marks_error() -> None:
    state: FeatureState[Any] = FeatureState()

    state.request_failed("   ")

    assert state.has_error
    assert state.error == DEFAULT_ERROR_MESSAGE


def test_new_request_clears_previous_error() -> None:
    state: FeatureState[Any] = FeatureState()
    state.request_failed("boom")

    state.request_started()

    assert state.error == ""
    assert state.to_payload() == {"isLoading": True, "error": "", "result": None}

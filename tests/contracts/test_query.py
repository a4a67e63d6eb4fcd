# This test file covers query construction from UI inputs and query-string encoding.

from __future__ import annotations

from urllib.parse import parse_qsl

import pytest
from pydantic import ValidationError

from src.contracts.query import ApiQuery, CharacterFilters


def test_query_string_contains_each_parameter_once() -> None:
    query = ApiQuery({"q": "rick", "page": "2"})

    pairs = parse_qsl(query.to_query_string())

    assert sorted(pairs) == [("page", "2"), ("q", "rick")]


def test_query_equality_ignores_order() -> None:
    assert ApiQuery({"a": "1", "b": "2"}) == ApiQuery({"b": "2", "a": "1"})


def test_empty_key_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ApiQuery({" ": "x"})


def test_from_inputs_drops_blank_values() -> None:
    query = ApiQuery.from_inputs({"name": "rick", "species": "  "}, status=None, page=3)

    assert query.as_params() == {"name": "rick", "page": "3"}
    assert "species" not in query
    assert len(query) == 2


def test_character_filters_build_query() -> None:
    filters = CharacterFilters(name="morty", status="Alive", gender="Male", page=2)

    query = filters.to_query()

    assert query.as_params() == {"name": "morty", "status": "alive", "gender": "male", "page": "2"}


def test_character_filters_reject_unknown_status() -> None:
    with pytest.raises(ValueError, match="status"):
        CharacterFilters(status="sleeping")

    with pytest.raises(ValueError, match="page"):
        CharacterFilters(page=0)

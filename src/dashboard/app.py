# This file is the Streamlit entrypoint for the character browser.
# It wires session state, the API client and the action handlers into a single page.
# Network outcomes are read back from state, so the page renders the same way after a rerun.

from __future__ import annotations

import streamlit as st

from src.common.logging import configure_logging
from src.contracts.query import CharacterFilters
from src.contracts.schemas import Character, CharactersAPIResponse
from src.dashboard import actions
from src.dashboard.api_client import RnmApiClient
from src.dashboard.dashboard_config import load_dashboard_config
from src.dashboard.formatting import format_first_appearance, format_origin, format_status
from src.dashboard.session import get_app_state, get_feature_state
from src.dashboard.ui_text import (
    APP_SUBTITLE,
    EMPTY_CHARACTER,
    EMPTY_SEARCH,
    SERVER_OFFLINE,
    SERVER_WARNING,
)
from src.state.app_state import ServerStatus


@st.cache_resource
def get_client() -> RnmApiClient:
    config = load_dashboard_config()
    return RnmApiClient(
        base_url=config.api_base_url,
        timeout_seconds=config.request_timeout_seconds,
    )


def render_character(character: Character) -> None:
    left, right = st.columns([1, 2])
    with left:
        if character.image:
            st.image(character.image, width=220)
    with right:
        st.subheader(character.name)
        st.write(format_status(character))
        st.caption(f"Origin: {format_origin(character)}")
        if character.type:
            st.caption(f"Type: {character.type}")
        st.caption(f"Appears in {len(character.episode)} episodes")


def render_search(client: RnmApiClient) -> None:
    app_state = get_app_state()
    search_state = get_feature_state("character_search")

    with st.sidebar.form("character_filters"):
        st.header("Filters")
        name = st.text_input("Name")
        status = st.selectbox("Status", ["", "alive", "dead", "unknown"])
        species = st.text_input("Species")
        gender = st.selectbox("Gender", ["", "female", "male", "genderless", "unknown"])
        page = st.number_input("Page", min_value=1, value=1, step=1)
        submitted = st.form_submit_button("Search")

    if submitted:
        filters = CharacterFilters(
            name=name or None,
            status=status or None,
            species=species or None,
            gender=gender or None,
            page=int(page),
        )
        actions.search_characters(
            client=client,
            app_state=app_state,
            feature_state=search_state,
            query=filters.to_query(),
        )

    if search_state.has_error:
        st.info(search_state.error or EMPTY_SEARCH)
        return
    page_result = search_state.result
    if not isinstance(page_result, CharactersAPIResponse) or not page_result.results:
        return

    info = page_result.info
    if info is not None:
        st.caption(f"{info.count} characters across {info.pages} pages")
    for character in page_result.valid_results:
        st.write(f"#{character.id} {character.name} ({format_status(character)})")
    skipped = len(page_result.results) - len(page_result.valid_results)
    if skipped:
        st.caption(f"{skipped} record(s) on this page were flagged invalid by the API.")


def main() -> None:
    configure_logging()
    config = load_dashboard_config()
    st.set_page_config(page_title=config.page_title, layout="wide")

    client = get_client()
    app_state = get_app_state()
    character_state = get_feature_state("character")

    st.title(config.page_title)
    st.caption(APP_SUBTITLE)

    lookup_col, random_col = st.columns([3, 1])
    with lookup_col:
        character_id = st.number_input(
            "Character id",
            min_value=1,
            max_value=config.max_character_id,
            value=1,
            step=1,
            key=f"character-id-{app_state.randomizer_key}",
        )
        if st.button("Load character"):
            actions.load_character(
                client=client,
                app_state=app_state,
                feature_state=character_state,
                character_id=int(character_id),
            )
    with random_col:
        if st.button("Random character"):
            actions.load_random_character(
                client=client,
                app_state=app_state,
                feature_state=character_state,
                max_character_id=config.max_character_id,
            )

    if app_state.server_status is ServerStatus.OFFLINE:
        st.error(SERVER_OFFLINE)
    elif app_state.server_status is ServerStatus.WARNING:
        st.warning(SERVER_WARNING)

    character = character_state.result
    if character_state.has_error:
        st.error(character_state.error)
    elif isinstance(character, Character):
        with st.container(border=True):
            render_character(character)
        first_appearance = format_first_appearance(character)
        if first_appearance:
            st.caption(first_appearance)
    else:
        st.info(EMPTY_CHARACTER)

    render_search(client)


if __name__ == "__main__":
    main()

# Session-scoped state for the Streamlit app.
# Each browser session gets one ApplicationState and one FeatureState per feature, created on first access.

from __future__ import annotations

from typing import Any

import streamlit as st

from src.state.app_state import ApplicationState
from src.state.feature_state import FeatureState

APP_STATE_KEY = "rnm_app_state"
FEATURE_STATE_PREFIX = "rnm_feature_"


def get_app_state() -> ApplicationState:
    if APP_STATE_KEY not in st.session_state:
        st.session_state[APP_STATE_KEY] = ApplicationState()
    return st.session_state[APP_STATE_KEY]


def get_feature_state(name: str) -> FeatureState[Any]:
    if not name:
        raise ValueError("feature name must be non-empty")
    key = f"{FEATURE_STATE_PREFIX}{name}"
    if key not in st.session_state:
        st.session_state[key] = FeatureState()
    return st.session_state[key]

# UI-facing state held for the lifetime of a dashboard session.

from src.state.app_state import ApplicationState, ServerStatus
from src.state.feature_state import FeatureState

__all__ = ["ApplicationState", "FeatureState", "ServerStatus"]

"""Application store and state."""

from gomate.application.store.app_store import AppStore
from gomate.application.store.state import (
    AppState,
    AuthState,
    DestinationsState,
    FavoritesState,
    JourneyState,
    ThemeState,
)

__all__ = [
    "AppState",
    "AppStore",
    "AuthState",
    "DestinationsState",
    "FavoritesState",
    "JourneyState",
    "ThemeState",
]
